# dance_timeline/render/charts.py

"""Render ranked categories as SVG timeline charts plus an HTML index."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from dance_timeline.config import ChartConfig
from dance_timeline.domain.errors import PaletteOverflowError
from dance_timeline.domain.models import CategoryGroup, FileSeries, LibraryRanking
from dance_timeline.render.projection import Projection
from dance_timeline.render.svg import (
    svg_circle,
    svg_close,
    svg_line,
    svg_open,
    svg_text,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ChartSet:
    """All documents for one run, keyed by output filename."""

    charts: dict[str, str] = field(default_factory=dict)
    index_filename: str = "index.html"
    index: str = ""

    def documents(self) -> dict[str, str]:
        return {**self.charts, self.index_filename: self.index}


def plot_graph(
    title: str,
    count: int,
    config: ChartConfig,
    projection: Projection,
) -> list[str]:
    """Label and grey reference lines shared by every chart."""
    elements = [svg_text(f"{count} {title}", 0, config.height / 2)]

    for y in projection.hour_lines():
        elements.append(
            svg_line(config.label_offset, y, config.width, y, config.legend_color),
        )

    for x in projection.year_lines():
        elements.append(svg_line(x, 0, x, config.height, config.legend_color))

    return elements


def plot_series(
    series: FileSeries,
    color: str,
    config: ChartConfig,
    projection: Projection,
) -> list[str]:
    """One circle per visible play; plays before the evening window are skipped."""
    elements: list[str] = []
    for event in series.events:
        point = projection.event(event)
        if point is None:
            continue
        elements.append(svg_circle(point.x, point.y, config.radius, color))
    return elements


def _document(elements: Iterable[str], config: ChartConfig) -> str:
    lines = [svg_open(config.width, config.height), *elements, svg_close()]
    return "\n".join(lines) + "\n"


def render_category_chart(
    group: CategoryGroup,
    config: ChartConfig,
    projection: Projection | None = None,
) -> str:
    """Chart for one category, each recording in its own palette color.

    Raises:
        PaletteOverflowError: if the category has more recordings than colors.
    """
    if len(group.series) > len(config.palette):
        raise PaletteOverflowError(group.name, len(group.series), len(config.palette))

    projection = projection or Projection(config)
    elements = plot_graph(group.name, group.total, config, projection)
    for rank, series in enumerate(group.series):
        elements.extend(plot_series(series, config.palette[rank], config, projection))
    return _document(elements, config)


def render_rare_chart(
    groups: Iterable[CategoryGroup],
    config: ChartConfig,
    projection: Projection | None = None,
) -> str:
    """Single chart pooling every rarely played category in the first color."""
    projection = projection or Projection(config)
    groups = list(groups)
    total = sum(g.total for g in groups)

    elements = plot_graph(config.rare_label, total, config, projection)
    for group in groups:
        logger.info("%s %s", config.rare_label, group.name)
        for series in group.series:
            elements.extend(plot_series(series, config.palette[0], config, projection))
    return _document(elements, config)


def render_index(chart_filenames: Iterable[str]) -> str:
    """Index page with one image per chart, in the given order."""
    return "".join(f'<p><img src="{name}"/></p>\n' for name in chart_filenames)


def render_chart_set(ranking: LibraryRanking, config: ChartConfig) -> ChartSet:
    """Render every chart and the index in memory.

    Nothing is returned unless every chart renders, so a data error never
    leaves a partial chart set behind.
    """
    projection = Projection(config)
    chart_set = ChartSet(index_filename=config.index_filename)

    for rank, group in enumerate(ranking.ranked, start=1):
        if group.total <= ranking.rare_threshold:
            logger.info("%d %d %s (pooled)", rank, group.total, group.name)
            continue
        logger.info("%d %d %s", rank, group.total, group.name)
        chart_set.charts[f"{rank}.svg"] = render_category_chart(
            group, config, projection,
        )

    chart_set.charts[config.rare_filename] = render_rare_chart(
        ranking.rare, config, projection,
    )
    chart_set.index = render_index(chart_set.charts)
    return chart_set
