# dance_timeline/render/projection.py

"""Map play events onto chart coordinates.

The calendar axis does not use real timestamps. For a given day and time we
take the seconds from the start of the day's year, then add the seconds since
midnight. Every vertical slice of the chart therefore spans the same local
evening hours, even across daylight saving changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from dance_timeline.config import ChartConfig
from dance_timeline.domain.models import PlayEvent

SECONDS_PER_DAY = 24 * 60 * 60


def interpolate(begin: float, end: float, t: float) -> float:
    return begin * (1 - t) + end * t


def project(value: float, b1: float, e1: float, b2: float, e2: float) -> float:
    """Project value in [b1, e1] linearly onto [b2, e2]."""
    return interpolate(b2, e2, (value - b1) / (e1 - b1))


def seconds_since(start: datetime, day: date, time_of_day: int) -> float:
    """Seconds from start to day at time_of_day, counted from day's year."""
    year_start = datetime(day.year, 1, 1)
    day_of_year = (day - year_start.date()).days
    return (
        (year_start - start).total_seconds()
        + day_of_year * SECONDS_PER_DAY
        + time_of_day
    )


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


class Projection:
    """Linear calendar (x) and evening clock (y) projections for a chart."""

    def __init__(self, config: ChartConfig) -> None:
        self._config = config
        self._span = (config.range_end - config.range_start).total_seconds()

    def x(self, day: date, time_of_day: int = 0) -> float:
        c = self._config
        seconds = seconds_since(c.range_start, day, time_of_day)
        return project(seconds, 0, self._span, c.label_offset, c.width)

    def y(self, time_of_day: float) -> float:
        c = self._config
        return project(time_of_day, c.evening_start, c.evening_end, 0, c.height)

    def event(self, event: PlayEvent) -> Point | None:
        """Chart position of event, or None if it is above the visible area."""
        y = self.y(event.time_of_day)
        if y < 0:
            return None
        return Point(self.x(event.day, event.time_of_day), y)

    def hour_lines(self) -> list[float]:
        """y of each whole hour in the evening window."""
        c = self._config
        return [
            project(h, c.evening_start_hour, c.evening_end_hour, 0, c.height)
            for h in range(c.evening_start_hour, c.evening_end_hour + 1)
        ]

    def year_lines(self) -> list[float]:
        """x of each year boundary in the calendar range."""
        c = self._config
        return [
            self.x(date(year, 1, 1))
            for year in range(c.range_start.year, c.range_end.year + 1)
            if c.range_start <= datetime(year, 1, 1) <= c.range_end
        ]
