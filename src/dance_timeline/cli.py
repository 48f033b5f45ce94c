# dance_timeline/cli.py

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dance_timeline.analysis.aggregate import build_ranking
from dance_timeline.config import (
    CATALOG_FILENAME,
    HISTORY_DIRNAME,
    ChartConfig,
    get_output_dir,
    get_virtualdj_dir,
)
from dance_timeline.domain.errors import TimelineDataError
from dance_timeline.domain.models import LibraryRanking
from dance_timeline.io.catalog import load_catalog
from dance_timeline.io.history import iter_history_sources, load_history
from dance_timeline.io.output import write_documents
from dance_timeline.render.charts import render_chart_set

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the dance-timeline chart generator."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    _configure_logging(verbose=args.verbose)

    defaults = ChartConfig()
    try:
        config = ChartConfig.for_years(
            args.start_year or defaults.range_start.year,
            args.end_year or defaults.range_end.year,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        ranking = run(
            virtualdj_dir=args.virtualdj_dir or get_virtualdj_dir(),
            output_dir=args.output_dir or get_output_dir(),
            config=config,
        )
    except TimelineDataError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user. Exiting.")
        sys.exit(1)

    print_report(ranking)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dance-timeline",
        description=(
            "Plot when each dance was practiced from VirtualDJ play history."
        ),
    )
    parser.add_argument(
        "--virtualdj-dir",
        type=Path,
        default=None,
        help=(
            "VirtualDJ data directory containing database.xml and History/ "
            "(default: $DANCE_TIMELINE_VIRTUALDJ_DIR or ~/Documents/VirtualDJ)."
        ),
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help=(
            "Directory for the generated charts and index.html "
            "(default: $DANCE_TIMELINE_OUTPUT_DIR or the current directory)."
        ),
    )
    parser.add_argument(
        "--start-year",
        type=int,
        default=None,
        help="First year shown on the timeline (default: 2021).",
    )
    parser.add_argument(
        "--end-year",
        type=int,
        default=None,
        help="Timeline ends on Jan 1 of this year (default: 2026).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging.",
    )
    return parser


def _configure_logging(*, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run(
    *,
    virtualdj_dir: Path,
    output_dir: Path,
    config: ChartConfig,
) -> LibraryRanking:
    """Load catalog and history, rank categories and write every chart."""
    tag_store = load_catalog(virtualdj_dir / CATALOG_FILENAME)
    sources = iter_history_sources(virtualdj_dir / HISTORY_DIRNAME)
    series = load_history(sources)

    ranking = build_ranking(series, tag_store, rare_threshold=config.rare_threshold)
    chart_set = render_chart_set(ranking, config)
    write_documents(output_dir, chart_set.documents())
    return ranking


def print_report(ranking: LibraryRanking) -> None:
    """Print every category name, then the total number of plays."""
    for name in ranking.category_names():
        print(name)
    print(ranking.grand_total)


if __name__ == "__main__":
    # python -m dance_timeline.cli -v --output-dir charts
    main()
