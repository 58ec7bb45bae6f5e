#!/usr/bin/env python3
"""
Command-line driver for the Collatz interval search.

Run without arguments it searches from 5 upward in the 128-bit domain until a
non-trivial cycle is found, logging the validated intervals every 10,000
steps. Exit status is 0 when the search stops normally (cycle found or step
budget spent) and 1 when it hits an arithmetic error.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import SearchConfig, build_searcher
from .errors import CollatzSearchError
from .intervals import Coalesce
from .observers import LoggingObserver
from .searcher import StepResult

log = logging.getLogger("collatz_search")

BANNER = "Collatz interval search starting"


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="collatz-search", description=__doc__.strip().splitlines()[0])
    ap.add_argument("--start", type=_positive_int, default=SearchConfig.start, help="Seed value of the first trajectory")
    ap.add_argument("--bits", type=_positive_int, default=SearchConfig.bits, help="Width of the unsigned integer domain")
    ap.add_argument(
        "--report-interval",
        type=_positive_int,
        default=SearchConfig.report_interval,
        help="Log the validated intervals every N steps",
    )
    ap.add_argument(
        "--coalesce",
        choices=[c.value for c in Coalesce],
        default=SearchConfig.coalesce.value,
        help="How far point insertion merges neighbouring intervals",
    )
    ap.add_argument("--max-steps", type=_positive_int, default=None, help="Stop after N steps (default: run until a cycle)")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> SearchConfig:
    return SearchConfig(
        start=args.start,
        bits=args.bits,
        report_interval=args.report_interval,
        coalesce=Coalesce(args.coalesce),
        max_steps=args.max_steps,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the search."""
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s - %(message)s")
    config = config_from_args(args)

    log.info(BANNER)
    log.info(
        "start=%d bits=%d report_interval=%d coalesce=%s",
        config.start,
        config.bits,
        config.report_interval,
        config.coalesce.value,
    )

    try:
        searcher = build_searcher(config, LoggingObserver())
    except CollatzSearchError as e:
        log.error("Invalid start value: %s", e)
        return 1

    try:
        result = searcher.run(config.max_steps)
    except CollatzSearchError as e:
        log.error("Search aborted at base %d after %d steps: %s", searcher.base_under_test, searcher.steps, e)
        return 1

    if result is StepResult.CYCLE_DETECTED:
        log.info("Stopped: cycle found at %d", searcher.cycle_value)
    else:
        log.info("Stopped after %d steps; next base under test is %d", searcher.steps, searcher.base_under_test)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
