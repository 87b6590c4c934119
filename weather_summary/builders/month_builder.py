"""
Monthly statistics builder for summarising one export file's readings.
"""

import logging

from weather_summary import statistics
from weather_summary.exceptions import EmptyInputError
from weather_summary.grouping import group_readings_by_day, sample_reading
from weather_summary.schema import DayFormat, MonthStatistics, Reading


class MonthBuilder:
    """
    Turns a month's worth of readings into a MonthStatistics.
    """

    def __init__(
        self,
        readings: list[Reading],
        day_format: DayFormat = DayFormat.D24HOUR,
        source: str = None,
    ):
        """
        Initialize the MonthBuilder.

        Args:
            readings (list[Reading]): Readings assumed to belong to one month.
            day_format (DayFormat): Day-boundary policy for the daily extremes.
            source (str, optional): Where the readings came from, for logging.
        """
        self.readings = readings
        self.day_format = day_format
        self.source = source or "<readings>"
        self.readings_by_day = group_readings_by_day(readings, day_format)

    def _generate_record(self) -> MonthStatistics:
        """
        Generate the MonthStatistics summary from the readings.

        Returns:
            MonthStatistics: Aggregated monthly weather data.
        """
        # The month is not checked against every reading, only a sample.
        sample = sample_reading(self.readings_by_day)

        min_temperature, max_temperature, avg_temperature = self.calculate_temperature()
        high_temps, low_temps = self.calculate_daily_extremes()
        min_humidity, max_humidity, avg_humidity = self.calculate_humidity()

        return MonthStatistics(
            minimum_temp=min_temperature,
            maximum_temp=max_temperature,
            average_temp=avg_temperature,
            high_temps=high_temps,
            low_temps=low_temps,
            minimum_humidity=min_humidity,
            maximum_humidity=max_humidity,
            average_humidity=avg_humidity,
            month=sample.timestamp.month,
            year=sample.timestamp.year,
        )

    def run(self) -> MonthStatistics:
        """
        Build the MonthStatistics for the readings.

        Raises:
            EmptyInputError: If there are no readings to summarise.

        Returns:
            MonthStatistics: The month's statistics.
        """
        if len(self.readings) == 0:
            raise EmptyInputError(f"No readings found in {self.source}")

        record = self._generate_record()
        logging.debug(
            "Built %s %d from %d readings over %d days (%s)",
            record.month_name,
            record.year,
            len(self.readings),
            len(self.readings_by_day),
            self.day_format.label,
        )
        return record

    def calculate_temperature(self) -> tuple:
        """
        Calculate temperature statistics over every reading.

        Returns:
            tuple: (min_temperature, max_temperature, avg_temperature)
        """
        return (
            statistics.lowest_temperature(self.readings),
            statistics.highest_temperature(self.readings),
            statistics.average_temperature(self.readings),
        )

    def calculate_daily_extremes(self) -> tuple:
        """
        Calculate the high and low temperature of each day.

        Returns:
            tuple: (high_temps, low_temps), both ordered by day of month.
        """
        return (
            statistics.daily_highs(self.readings_by_day),
            statistics.daily_lows(self.readings_by_day),
        )

    def calculate_humidity(self) -> tuple:
        """
        Calculate humidity statistics over every reading.

        Returns:
            tuple: (min_humidity, max_humidity, avg_humidity)
        """
        return (
            statistics.lowest_humidity(self.readings),
            statistics.highest_humidity(self.readings),
            statistics.average_humidity(self.readings),
        )


def build_month_statistics(
    readings: list[Reading], day_format: DayFormat = DayFormat.D24HOUR
) -> MonthStatistics:
    """Shortcut for MonthBuilder(readings, day_format).run()."""
    return MonthBuilder(readings, day_format).run()
