"""
Test cases for the MonthBuilder class.
"""

import logging
import unittest

from weather_summary.builders import MonthBuilder, build_month_statistics
from weather_summary.exceptions import EmptyInputError
from weather_summary.schema import DayFormat, MonthStatistics, Reading

logging.disable(logging.CRITICAL)


class TestMonthBuilder(unittest.TestCase):
    """Test suite for the MonthBuilder class."""

    def setUp(self):
        """Set up the two readings of the documented June export."""
        self.readings = [
            Reading.parse("2023/06/01 12:00:00", "20.5", "55"),
            Reading.parse("2023/06/02 13:00:00", "22.0", "60"),
        ]
        self.builder = MonthBuilder(self.readings, DayFormat.D24HOUR, source="june.csv")

    def test_readings_by_day(self):
        """Test the readings are grouped by calendar day."""
        self.assertEqual(
            self.builder.readings_by_day,
            {1: [self.readings[0]], 2: [self.readings[1]]},
        )

    def test_calculate_temperature(self):
        """Test the overall temperature statistics."""
        self.assertEqual(self.builder.calculate_temperature(), (20.5, 22.0, 21.25))

    def test_calculate_humidity(self):
        """Test the overall humidity statistics."""
        self.assertEqual(self.builder.calculate_humidity(), (55, 60, 57.5))

    def test_calculate_daily_extremes(self):
        """Test the daily highs and lows."""
        highs, lows = self.builder.calculate_daily_extremes()
        self.assertEqual(highs, {1: 20.5, 2: 22.0})
        self.assertEqual(lows, {1: 20.5, 2: 22.0})

    def test_run(self):
        """Test run builds the month's statistics."""
        stats = self.builder.run()
        self.assertIsInstance(stats, MonthStatistics)
        self.assertEqual(stats.month, 6)
        self.assertEqual(stats.year, 2023)
        self.assertEqual(stats.maximum_temp, 22.0)
        self.assertEqual(stats.minimum_temp, 20.5)
        self.assertEqual(stats.average_temp, 21.25)
        self.assertEqual(stats.average_high, 21.25)
        self.assertEqual(stats.lowest_high, 20.5)
        self.assertEqual(stats.highest_low, 22.0)

    def test_run_empty(self):
        """Test run over no readings raises EmptyInputError."""
        with self.assertRaises(EmptyInputError):
            MonthBuilder([], DayFormat.D24HOUR).run()

    def test_meteorological_days(self):
        """Test the daily extremes follow the meteorological day."""
        readings = [
            Reading.parse("2023/03/01 09:00:00", "1.0", "90"),
            Reading.parse("2023/03/01 12:00:00", "8.0", "60"),
            Reading.parse("2023/03/02 08:00:00", "0.5", "95"),
            Reading.parse("2023/03/02 14:00:00", "9.0", "55"),
        ]

        stats = build_month_statistics(readings, DayFormat.D9MET)

        self.assertEqual(dict(stats.high_temps), {1: 8.0, 2: 9.0, 28: 1.0})
        self.assertEqual(dict(stats.low_temps), {1: 0.5, 2: 9.0, 28: 1.0})
        self.assertEqual(stats.month, 3)
        self.assertEqual(stats.year, 2023)
        self.assertEqual(stats.minimum_temp, 0.5)
        self.assertEqual(stats.maximum_temp, 9.0)

    def test_calendar_days_same_readings(self):
        """Test the same readings grouped by calendar day."""
        readings = [
            Reading.parse("2023/03/01 09:00:00", "1.0", "90"),
            Reading.parse("2023/03/01 12:00:00", "8.0", "60"),
            Reading.parse("2023/03/02 08:00:00", "0.5", "95"),
        ]

        stats = build_month_statistics(readings, DayFormat.D24HOUR)

        self.assertEqual(dict(stats.high_temps), {1: 8.0, 2: 0.5})
        self.assertEqual(dict(stats.low_temps), {1: 1.0, 2: 0.5})


if __name__ == "__main__":
    unittest.main()
