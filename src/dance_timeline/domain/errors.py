# dance_timeline/domain/errors.py

"""Fatal data errors raised while building the timeline.

Every error carries the offending input in ``value`` so the caller can report
exactly what needs fixing. None of them is recoverable.
"""

from __future__ import annotations


class TimelineDataError(ValueError):
    """Base class for input that cannot be turned into a chart set."""

    def __init__(self, message: str, value: object) -> None:
        super().__init__(message)
        self.value = value


class UnhandledEscapeError(TimelineDataError):
    """Text still contains an ``&name;`` escape after decoding."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unhandled escape: {value}", value)


class MissingTagsError(TimelineDataError):
    """A played file was never declared in the catalog."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Error finding tags of {path}", path)


class InvalidTimeError(TimelineDataError):
    """A history entry has no usable ``HH:MM`` time."""

    def __init__(self, value: str | None, source: object = None) -> None:
        where = f" in {source}" if source is not None else ""
        super().__init__(f"Bad time {value!r}{where}", value)
        self.source = source


class InvalidHistoryDateError(TimelineDataError):
    """A history source name does not parse as a calendar date."""

    def __init__(self, value: str) -> None:
        super().__init__(f"History source name is not a date: {value!r}", value)


class PaletteOverflowError(TimelineDataError):
    """A category has more recordings than there are palette colors."""

    def __init__(self, category: str, recordings: int, palette_size: int) -> None:
        super().__init__(
            f"Category {category!r} has {recordings} recordings "
            f"but the palette only has {palette_size} colors",
            category,
        )
        self.recordings = recordings
        self.palette_size = palette_size
