"""
Test cases for writing the yearly highs and lows files.
"""

import io
import logging
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from weather_summary.exceptions import FileAccessError
from weather_summary.output import group_by_year, write_daily_stats, yearly_files
from weather_summary.schema import MonthStatistics

logging.disable(logging.CRITICAL)


def make_stats(year: int, month: int, high_temps: dict, low_temps: dict) -> MonthStatistics:
    """Helper to build a MonthStatistics from its daily maps."""
    return MonthStatistics(
        minimum_temp=min(low_temps.values()),
        maximum_temp=max(high_temps.values()),
        average_temp=10.0,
        high_temps=high_temps,
        low_temps=low_temps,
        minimum_humidity=40,
        maximum_humidity=90,
        average_humidity=65.0,
        month=month,
        year=year,
    )


class TestWriteDailyStats(unittest.TestCase):
    """Test cases for write_daily_stats."""

    def setUp(self):
        """Set up three months over two years, out of order."""
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.dir = Path(self.tmp.name)

        self.february = make_stats(2023, 2, {1: 5.0, 2: 6.5}, {1: -1.0, 2: 0.5})
        self.december = make_stats(2022, 12, {1: 4.0}, {1: -2.0})
        self.january = make_stats(2023, 1, {2: 3.5, 1: 2.0}, {2: -3.0, 1: -4.5})
        self.month_stats = [self.february, self.december, self.january]

    def test_group_by_year(self):
        """Test months are grouped by year in chronological order."""
        grouped = group_by_year(self.month_stats)
        self.assertEqual(list(grouped), [2022, 2023])
        self.assertEqual(grouped[2023], [self.january, self.february])

    def test_yearly_files(self):
        """Test the output file names."""
        highs, lows = yearly_files(self.dir, 2023)
        self.assertEqual(highs, self.dir / "2023_highs.csv")
        self.assertEqual(lows, self.dir / "2023_lows.csv")

    def test_writes_files_per_year(self):
        """Test one line per month, months ascending, days in order."""
        with redirect_stdout(io.StringIO()):
            written = write_daily_stats(self.month_stats, self.dir)

        self.assertEqual(
            sorted(p.name for p in written),
            ["2022_highs.csv", "2022_lows.csv", "2023_highs.csv", "2023_lows.csv"],
        )
        self.assertEqual(
            (self.dir / "2023_highs.csv").read_text(encoding="utf-8"),
            "2.0, 3.5\n5.0, 6.5\n",
        )
        self.assertEqual(
            (self.dir / "2023_lows.csv").read_text(encoding="utf-8"),
            "-4.5, -3.0\n-1.0, 0.5\n",
        )
        self.assertEqual(
            (self.dir / "2022_highs.csv").read_text(encoding="utf-8"), "4.0\n"
        )

    def test_echoes_high_lines(self):
        """Test the high lines are echoed to the console."""
        out = io.StringIO()
        with redirect_stdout(out):
            write_daily_stats(self.month_stats, self.dir)

        console = out.getvalue()
        self.assertIn("High temperatures for year 2022:\n4.0\n", console)
        self.assertIn("High temperatures for year 2023:\n2.0, 3.5\n5.0, 6.5\n", console)
        self.assertLess(console.index("2022"), console.index("2023"))

    def test_creates_target_directory(self):
        """Test a missing target directory is created."""
        target = self.dir / "out" / "nested"
        with redirect_stdout(io.StringIO()):
            write_daily_stats([self.december], target)
        self.assertTrue((target / "2022_lows.csv").is_file())

    def test_write_failure_skips_year(self):
        """Test a year that cannot be written is skipped."""
        with patch(
            "weather_summary.output._write_lines",
            side_effect=FileAccessError("disk full"),
        ), redirect_stdout(io.StringIO()):
            written = write_daily_stats(self.month_stats, self.dir)

        self.assertEqual(written, [])


if __name__ == "__main__":
    unittest.main()
