"""Smoke tests for core data models."""

from __future__ import annotations

from datetime import date

import pytest

from dance_timeline.domain.models import (
    CategoryGroup,
    FileSeries,
    LibraryRanking,
    PlayEvent,
)


def _series(path: str, n: int) -> FileSeries:
    return FileSeries(
        path=path,
        events=[PlayEvent(day=date(2022, 6, i + 1), time_of_day=72000) for i in range(n)],
    )


def test_play_event_creation() -> None:
    event = PlayEvent(day=date(2022, 6, 1), time_of_day=72000)
    assert event.day == date(2022, 6, 1)
    assert event.time_of_day == 72000


def test_play_event_is_immutable() -> None:
    event = PlayEvent(day=date(2022, 6, 1), time_of_day=72000)
    with pytest.raises(AttributeError):
        event.time_of_day = 0  # type: ignore[misc]


def test_file_series_defaults() -> None:
    series = FileSeries(path="/music/a.mp3")
    assert series.events == []
    assert len(series) == 0


def test_category_group_total_is_sum_of_series() -> None:
    group = CategoryGroup(name="Tango", series=(_series("a", 3), _series("b", 2)))
    assert group.total == 5


def test_library_ranking_split() -> None:
    tango = CategoryGroup(name="Tango", series=(_series("a", 3),))
    polka = CategoryGroup(name="Polka", series=(_series("b", 2),))
    hambo = CategoryGroup(name="Hambo", series=(_series("c", 1),))
    ranking = LibraryRanking(ranked=(tango, polka, hambo), rare_threshold=2)

    assert ranking.charted == (tango,)
    assert ranking.rare == (polka, hambo)
    assert ranking.rare_total == 3
    assert ranking.grand_total == 6
    assert ranking.category_names() == ["Hambo", "Polka", "Tango"]
