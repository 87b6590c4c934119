"""
Weather station export summarising module.
Summarises monthly CSV exports into temperature and humidity statistics.
"""

import argparse
import logging
from pathlib import Path

from weather_summary import Summariser
from weather_summary.config import load_settings
from weather_summary.logger import config_logger
from weather_summary.schema import DayFormat


def get_args(argv: list = None):
    """
    Parse command line arguments for the weather station summariser.
    Defaults come from the environment (see weather_summary.config).
        :return: Parsed arguments.
        :rtype: argparse.Namespace
    """
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Weather Station Data Summariser")
    parser.add_argument(
        "--source",
        type=Path,
        default=settings.source_dir,
        help="Directory holding the monthly CSV exports",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.output_dir,
        help="Directory for the yearly highs/lows files",
    )
    parser.add_argument(
        "--day-format",
        type=DayFormat.from_name,
        default=settings.day_format,
        help="Day boundary: D24HOUR (calendar day) or D9MET (10:00 to 10:00)",
    )
    parser.add_argument(
        "--write",
        action="store_true",
        default=settings.write_output,
        help="Write the yearly highs/lows files",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.source is None:
        raise ValueError("Must specify --source or WEATHER_SOURCE_DIR")

    if not args.source.is_dir():
        raise ValueError(f"Source directory {args.source} does not exist")

    if args.write and args.output is None:
        raise ValueError("Must specify --output or WEATHER_OUTPUT_DIR to --write")

    args.log_level = settings.log_level

    return args


def main(argv: list = None):
    """Main function to run the weather station summariser."""

    args = get_args(argv)
    config_logger(debug=args.debug, level=args.log_level)

    summariser = Summariser(
        source_dir=args.source,
        output_dir=args.output,
        day_format=args.day_format,
        write_output=args.write,
    )

    month_stats = summariser.run()
    logging.info("Summarised %d months.", len(month_stats))

    return month_stats


if __name__ == "__main__":
    main()
