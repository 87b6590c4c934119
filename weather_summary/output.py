"""
Writing of per-year daily high and low temperature files.
"""

import logging
from pathlib import Path
from typing import Iterable

from weather_summary.exceptions import FileAccessError
from weather_summary.report import format_temperature_line
from weather_summary.schema import MonthStatistics


def group_by_year(month_stats: Iterable[MonthStatistics]) -> dict[int, list[MonthStatistics]]:
    """
    Group months by year, both years and months in ascending order.
    """
    grouped: dict[int, list[MonthStatistics]] = {}
    for stats in sorted(month_stats):
        grouped.setdefault(stats.year, []).append(stats)
    return grouped


def yearly_files(target_dir: Path, year: int) -> tuple:
    """
    Paths of a year's output files.

    Returns:
        tuple: (highs_file, lows_file) named "<year>_highs.csv" and "<year>_lows.csv".
    """
    target_dir = Path(target_dir)
    return target_dir / f"{year}_highs.csv", target_dir / f"{year}_lows.csv"


def _write_lines(path: Path, lines: list[str]) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as e:
        raise FileAccessError(f"Unable to write file {path}: {e}") from e


def write_year(year: int, months: list[MonthStatistics], target_dir: Path) -> tuple:
    """
    Write one year's highs and lows files, one line per month.

    Echoes the high temperature lines to the console as they are written.

    Raises:
        FileAccessError: If either file cannot be written.

    Returns:
        tuple: (highs_file, lows_file)
    """
    highs_file, lows_file = yearly_files(target_dir, year)

    high_lines = []
    low_lines = []
    print(f"High temperatures for year {year}:")
    for stats in sorted(months):
        high_line = format_temperature_line(stats.high_temps)
        high_lines.append(high_line)
        low_lines.append(format_temperature_line(stats.low_temps))
        print(high_line)
    print()

    _write_lines(highs_file, high_lines)
    _write_lines(lows_file, low_lines)
    logging.info("Wrote %s and %s", highs_file, lows_file)

    return highs_file, lows_file


def write_daily_stats(month_stats: Iterable[MonthStatistics], target_dir: Path) -> list[Path]:
    """
    Write "<year>_highs.csv" and "<year>_lows.csv" for every year present.

    A year whose files cannot be written is logged and skipped.

    Raises:
        FileAccessError: If the target directory cannot be created.

    Returns:
        list[Path]: Every file written.
    """
    target_dir = Path(target_dir)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileAccessError(f"Unable to create output directory {target_dir}: {e}") from e

    written = []
    for year, months in group_by_year(month_stats).items():
        try:
            written.extend(write_year(year, months, target_dir))
        except FileAccessError as e:
            logging.error("Error writing statistics for %d: %s", year, e)

    return written
