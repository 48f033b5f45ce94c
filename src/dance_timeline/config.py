# dance_timeline/config.py

"""Shared configuration and environment setup."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

try:
    from dotenv import load_dotenv

    load_dotenv(override=True)
except ImportError:
    pass

CATALOG_FILENAME = "database.xml"
HISTORY_DIRNAME = "History"

# For each category, circles are colored in order of most played recording.
SERIES_COLORS: tuple[str, ...] = (
    "black",
    "blue",
    "green",
    "red",
    "orange",
    "darkblue",
    "darkgreen",
    "darkred",
    "darkorange",
)


@dataclass(frozen=True, slots=True)
class ChartConfig:
    """Geometry, palette and time window shared by every chart."""

    width: int = 1000
    height: int = 60
    # Where the category label ends and the plot area starts.
    label_offset: int = 200
    radius: int = 2
    palette: tuple[str, ...] = SERIES_COLORS
    legend_color: str = "lightgray"

    range_start: datetime = datetime(2021, 1, 1)
    range_end: datetime = datetime(2026, 1, 1)

    # Evening window in whole hours since midnight.
    evening_start_hour: int = 19
    evening_end_hour: int = 22

    # Categories played at most this many times share one pooled chart.
    rare_threshold: int = 2
    rare_label: str = "less than three"
    rare_filename: str = "less_than_three.svg"
    index_filename: str = "index.html"

    def __post_init__(self) -> None:
        if self.range_end <= self.range_start:
            msg = "range_end must be after range_start."
            raise ValueError(msg)
        if self.evening_end_hour <= self.evening_start_hour:
            msg = "evening_end_hour must be after evening_start_hour."
            raise ValueError(msg)
        if not self.palette:
            msg = "palette must contain at least one color."
            raise ValueError(msg)

    @property
    def evening_start(self) -> int:
        return self.evening_start_hour * 60 * 60

    @property
    def evening_end(self) -> int:
        return self.evening_end_hour * 60 * 60

    @classmethod
    def for_years(cls, start_year: int, end_year: int) -> ChartConfig:
        """Chart config covering Jan 1 of start_year up to Jan 1 of end_year."""
        return cls(
            range_start=datetime(start_year, 1, 1),
            range_end=datetime(end_year, 1, 1),
        )


def get_virtualdj_dir() -> Path:
    """Return the VirtualDJ data directory.

    Prefers DANCE_TIMELINE_VIRTUALDJ_DIR env var. Falls back to
    ~/Documents/VirtualDJ.
    """
    from os import getenv

    if root := getenv("DANCE_TIMELINE_VIRTUALDJ_DIR"):
        return Path(root).expanduser().resolve()
    return Path.home() / "Documents" / "VirtualDJ"


def get_output_dir() -> Path:
    """Return the directory charts are written to (default: cwd)."""
    from os import getenv

    if out := getenv("DANCE_TIMELINE_OUTPUT_DIR"):
        return Path(out).expanduser().resolve()
    return Path.cwd()
