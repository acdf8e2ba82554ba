"""Run a fighter draft from the stored fighter collection.

Usage:
    python -m src.run_draft [--live] [--delay SECONDS] [--start ISO_TIME]
                            [--follow-volatility] [--export] [--sort-by COLUMN]
                            [--store-dir DIR] [--export-dir DIR] [--log-dir DIR]

Examples:
    python -m src.run_draft
    python -m src.run_draft --live --delay 10 --start 2026-10-19T20:00
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.draft_manager.draft_controller import DraftController, estimate_draft
from src.draft_manager.draft_export import DraftExporter
from src.draft_manager.draft_initializer import DraftInitializer
from src.draft_manager.draft_state import DraftConfig, DraftResult
from src.draft_manager.events import DraftEventBus
from src.draft_manager.live_draft import LiveDraftOrchestrator
from src.fighter_pool.store import JsonStore
from src.logging_config import setup_logging
from src.presentation.console import ConsolePresenter, format_table, ranking_rows
from src.presentation.table_sort import sort_rows

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate a fighter draft.")
    parser.add_argument("--live", action="store_true", help="Run picks on a clock")
    parser.add_argument("--delay", default=None, help="Seconds per pick (1-3600)")
    parser.add_argument("--start", default=None, help="Local start time (ISO format)")
    parser.add_argument(
        "--follow-volatility",
        action="store_true",
        help="Let the shuffled live board decide which fighter is taken",
    )
    parser.add_argument("--export", action="store_true", help="Write JSON/CSV results")
    parser.add_argument("--sort-by", default=None, help="Ranking table column to sort by")
    parser.add_argument("--store-dir", type=Path, default=None)
    parser.add_argument("--export-dir", type=Path, default=None)
    parser.add_argument("--log-dir", type=Path, default=None)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def run_batch(initializer: DraftInitializer, args: argparse.Namespace) -> DraftResult:
    prepared = initializer.prepare()
    rows = ranking_rows(prepared.ranked, prepared.power)
    if args.sort_by:
        rows = sort_rows(rows, args.sort_by)
    print("Draft pool ranking")
    print(format_table(rows))
    print()

    result = DraftController(initializer).run_prepared(prepared)
    print(ConsolePresenter.render_results(result))
    return result


async def run_live(
    initializer: DraftInitializer, config: DraftConfig, args: argparse.Namespace
) -> DraftResult:
    prepared = initializer.prepare()
    estimate = estimate_draft(len(prepared.ranked), config)
    print(
        f"Est. duration for {estimate.picks} picks: {estimate.duration} • "
        f"Est. finish {'' if config.start_time else '(if start now) '}"
        f"{estimate.finish_at:%Y-%m-%d %H:%M:%S}"
    )

    bus = DraftEventBus()
    ConsolePresenter(
        pick_delay_seconds=config.pick_delay_seconds,
        sort_by=args.sort_by,
        power=prepared.power,
    ).attach(bus)

    orchestrator = LiveDraftOrchestrator(
        config=config,
        initializer=initializer,
        event_bus=bus,
        follow_volatility=args.follow_volatility,
    )
    try:
        return await orchestrator.run_prepared(prepared)
    finally:
        orchestrator.cancel()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_dir)

    initializer = DraftInitializer(store=JsonStore(args.store_dir))
    config = DraftConfig.from_user_input(args.delay, args.start)

    if args.live:
        result = asyncio.run(run_live(initializer, config, args))
    else:
        result = run_batch(initializer, args)

    if args.export:
        paths = DraftExporter(args.export_dir).save(result, config)
        print(f"Exported: {paths['json']}")
    return 0


def cli(argv: Optional[List[str]] = None) -> int:
    """Console entry point: exit status 130 on Ctrl-C, 1 on any failure."""
    try:
        return main(argv)
    except KeyboardInterrupt:
        logger.info("Draft interrupted")
        return 130
    except Exception:
        logger.exception("Draft failed")
        return 1


if __name__ == "__main__":
    sys.exit(cli())
