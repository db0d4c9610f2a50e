"""Measure a deliberately slow loop and print its rate on every cycle."""

from __future__ import annotations

import argparse
import logging
import time

from tickrate.config import STRATEGIES, CounterConfig, build_counter

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--strategy", choices=sorted(STRATEGIES), default="rolling")
    parser.add_argument("--window-size", type=int, default=10)
    parser.add_argument("--period", type=float, default=1.0, help="Seconds of work per cycle")
    parser.add_argument(
        "--iterations",
        type=int,
        default=0,
        help="Number of cycles to run; 0 runs until interrupted",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="[%(levelname)s] %(message)s")
    counter = build_counter(CounterConfig(strategy=args.strategy, window_size=args.window_size))

    iteration = 0
    try:
        while args.iterations <= 0 or iteration < args.iterations:
            counter.update()
            time.sleep(args.period)
            logger.info("Updating at %s", counter)
            iteration += 1
    except KeyboardInterrupt:
        logger.info("Interrupted after %d cycles", iteration)


if __name__ == "__main__":
    main()
