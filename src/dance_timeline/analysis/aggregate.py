# dance_timeline/analysis/aggregate.py

"""Merge per-file play series into ranked dance categories."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from dance_timeline.analysis.categories import file_name, resolve_category
from dance_timeline.domain.models import CategoryGroup, FileSeries, LibraryRanking

logger = logging.getLogger(__name__)

DEFAULT_RARE_THRESHOLD = 2


def group_by_category(
    series: Mapping[str, FileSeries],
    tag_store: Mapping[str, Mapping[str, str]],
) -> dict[str, list[FileSeries]]:
    """Collect every file series under its resolved category.

    Categories appear in the order their first file was seen.
    """
    grouped: dict[str, list[FileSeries]] = {}

    for path, file_series in series.items():
        category = resolve_category(path, tag_store)
        logger.info("%s => %s", file_name(path), category)
        grouped.setdefault(category, []).append(file_series)

    return grouped


def build_category_group(name: str, series: list[FileSeries]) -> CategoryGroup:
    """Order a category's recordings by play count, most played first."""
    ordered = sorted(series, key=len, reverse=True)
    return CategoryGroup(name=name, series=tuple(ordered))


def rank_categories(
    groups: list[CategoryGroup],
    rare_threshold: int = DEFAULT_RARE_THRESHOLD,
) -> LibraryRanking:
    """Order categories by total plays, most played first.

    Ties keep their input order.
    """
    ranked = sorted(groups, key=lambda g: g.total, reverse=True)
    return LibraryRanking(ranked=tuple(ranked), rare_threshold=rare_threshold)


def build_ranking(
    series: Mapping[str, FileSeries],
    tag_store: Mapping[str, Mapping[str, str]],
    rare_threshold: int = DEFAULT_RARE_THRESHOLD,
) -> LibraryRanking:
    """Resolve, group and rank all play history in one pass."""
    grouped = group_by_category(series, tag_store)
    groups = [build_category_group(name, s) for name, s in grouped.items()]
    ranking = rank_categories(groups, rare_threshold=rare_threshold)

    logger.info(
        "Ranked %d categories (%d charted, %d pooled).",
        len(ranking.ranked),
        len(ranking.charted),
        len(ranking.rare),
    )
    return ranking
