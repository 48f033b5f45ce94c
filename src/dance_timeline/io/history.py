# dance_timeline/io/history.py

"""Load VirtualDJ play history (one .m3u playlist per day)."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from dance_timeline.domain.errors import InvalidHistoryDateError, InvalidTimeError
from dance_timeline.domain.models import FileSeries, PlayEvent

logger = logging.getLogger(__name__)

METADATA_MARKER = "#EXTVDJ:"

_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})")
_METADATA_RE = re.compile(r"<(?P<tag>.+?)>(?P<value>.+)</(?P=tag)>")


def parse_time(value: str | None, source: object = None) -> int:
    """Convert ``HH:MM`` into seconds since midnight."""
    if value is None:
        raise InvalidTimeError(value, source)

    m = _TIME_RE.fullmatch(value.strip())
    if not m:
        raise InvalidTimeError(value, source)

    hours, minutes = (int(g) for g in m.groups())
    if hours >= 24 or minutes >= 60:
        raise InvalidTimeError(value, source)
    return hours * 60 * 60 + minutes * 60


def parse_metadata(line: str) -> dict[str, str]:
    """Parse ``<tag>value</tag>`` pairs from an ``#EXTVDJ:`` line."""
    return {m.group("tag"): m.group("value") for m in _METADATA_RE.finditer(line)}


def parse_history_day(name: str) -> date:
    """Parse a history source name such as ``2022-06-01`` into a date."""
    try:
        return date.fromisoformat(name)
    except ValueError:
        raise InvalidHistoryDateError(name) from None


def iter_history_sources(history_dir: Path) -> list[Path]:
    """Return every .m3u file below history_dir in sorted order."""
    return sorted(history_dir.glob("**/*.m3u"))


def parse_history_lines(
    day: date,
    lines: Iterable[str],
    series: dict[str, FileSeries],
    *,
    source: object = None,
) -> int:
    """Append one PlayEvent per plain entry in lines to series.

    Each plain entry inherits the most recent metadata block. Returns the
    number of events added.
    """
    metadata: dict[str, str] | None = None
    added = 0

    for line in lines:
        line = line.rstrip("\r\n")
        if line.startswith(METADATA_MARKER):
            metadata = parse_metadata(line)
            continue
        if not line.strip() or line.startswith("#"):
            continue

        time_value = metadata.get("time") if metadata is not None else None
        event = PlayEvent(day=day, time_of_day=parse_time(time_value, source))

        if line not in series:
            series[line] = FileSeries(path=line)
        series[line].events.append(event)
        added += 1

    return added


def load_history(sources: Iterable[Path]) -> dict[str, FileSeries]:
    """Load play events for every file in the given history sources.

    Sources are processed in the order given; callers should pass them
    sorted (see iter_history_sources) so results are reproducible.
    """
    series: dict[str, FileSeries] = {}

    for path in sources:
        logger.info("%s", path)
        day = parse_history_day(path.stem)
        with path.open("r", encoding="utf-8-sig") as f:
            added = parse_history_lines(day, f, series, source=path)
        logger.debug("Read %d plays from %s", added, path)

    logger.info("Loaded play history for %d files", len(series))
    return series
