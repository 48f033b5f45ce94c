# dance_timeline/io/catalog.py

"""Read the VirtualDJ catalog (database.xml) into a read-only tag store."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from dance_timeline.domain.errors import MissingTagsError
from dance_timeline.text.escapes import deescape

logger = logging.getLogger(__name__)

_SONG_RE = re.compile(r'<Song FilePath="(.+?)"')
_TAGS_RE = re.compile(r"<Tags")
_ATTR_RE = re.compile(r'(\w+)="([^"]*)"')


class TagStore(Mapping[str, Mapping[str, str]]):
    """Immutable mapping of file path to its catalog attributes.

    Unlike a plain dict, looking up a path the catalog never declared is a
    data error, not an empty result.
    """

    def __init__(self, tags: Mapping[str, Mapping[str, str]]) -> None:
        self._tags: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {path: MappingProxyType(dict(attrs)) for path, attrs in tags.items()},
        )

    def __getitem__(self, path: str) -> Mapping[str, str]:
        try:
            return self._tags[path]
        except KeyError:
            raise MissingTagsError(path) from None

    def __contains__(self, path: object) -> bool:
        return path in self._tags

    def get(
        self,
        path: str,
        default: Mapping[str, str] | None = None,
    ) -> Mapping[str, str] | None:
        return self._tags.get(path, default)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TagStore({len(self)} files)"


def parse_catalog_lines(lines: Iterable[str]) -> TagStore:
    """Build a TagStore from catalog lines.

    A ``<Song FilePath="...">`` line makes its (decoded) path current. A
    ``<Tags ...>`` line merges its ``name="value"`` pairs into the current
    path; later values overwrite earlier ones. Everything else is ignored.
    """
    tags: dict[str, dict[str, str]] = {}
    current: str | None = None

    for line_number, line in enumerate(lines, start=1):
        if m := _SONG_RE.search(line):
            current = deescape(m.group(1))
            tags.setdefault(current, {})
        elif _TAGS_RE.search(line):
            if current is None:
                logger.warning(
                    "Ignoring tag block on line %d before any file declaration.",
                    line_number,
                )
                continue
            for key, value in _ATTR_RE.findall(line):
                tags[current][key] = value

    return TagStore(tags)


def load_catalog(path: Path) -> TagStore:
    """Load database.xml from disk into a TagStore."""
    with path.open("r", encoding="utf-8") as f:
        store = parse_catalog_lines(f)

    logger.info("Loaded tags for %d files from %s", len(store), path)
    return store
