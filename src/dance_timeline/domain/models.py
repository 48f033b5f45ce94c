# dance_timeline/domain/models.py

"""Core domain models for play history and category rankings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True, slots=True)
class PlayEvent:
    """A single play of a file."""

    day: date
    time_of_day: int  # seconds since local midnight


@dataclass(slots=True)
class FileSeries:
    """All plays of one specific file, in load order."""

    path: str
    events: list[PlayEvent] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.events)


@dataclass(frozen=True, slots=True)
class CategoryGroup:
    """Every recording of one category, most played first."""

    name: str
    series: tuple[FileSeries, ...]

    @property
    def total(self) -> int:
        return sum(len(s) for s in self.series)


@dataclass(frozen=True, slots=True)
class LibraryRanking:
    """Categories ordered by popularity, split into charted and pooled."""

    ranked: tuple[CategoryGroup, ...]
    rare_threshold: int

    @property
    def charted(self) -> tuple[CategoryGroup, ...]:
        return tuple(g for g in self.ranked if g.total > self.rare_threshold)

    @property
    def rare(self) -> tuple[CategoryGroup, ...]:
        return tuple(g for g in self.ranked if g.total <= self.rare_threshold)

    @property
    def rare_total(self) -> int:
        return sum(g.total for g in self.rare)

    @property
    def grand_total(self) -> int:
        return sum(g.total for g in self.ranked)

    def category_names(self) -> list[str]:
        """All category names in alphabetical order."""
        return sorted(g.name for g in self.ranked)
