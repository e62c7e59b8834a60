import argparse
import logging
from pathlib import Path

from gilded_rose import settings
from gilded_rose.logger import setup_logger
from gilded_rose.pipelines.simulation import SimulationPipeline


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Age the shop's stock day by day.")
    parser.add_argument(
        "--days",
        type=int,
        default=settings.DEFAULT_DAYS,
        help=f"Number of days to simulate (default: {settings.DEFAULT_DAYS}).",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Seed CSV with Name, Sell In, Quality columns (default: INPUT_DIR/ITEMS_FILENAME).",
    )
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Don't post the report to the webhook.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    if args.days < 0:
        parser.error("--days must be zero or more")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)

    # Configure the package logger so every module's logger inherits it.
    setup_logger("gilded_rose", log_level=getattr(logging, args.log_level))

    pipeline = SimulationPipeline(
        days=args.days, input_path=args.input, test_mode=args.test_mode
    )
    result = pipeline.run()
    return 0 if result is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
