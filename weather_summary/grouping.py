"""
Grouping of readings into day-buckets.
"""

import logging
from typing import Iterable, Mapping

from weather_summary.exceptions import EmptyInputError
from weather_summary.schema import DayFormat, Reading


def group_readings_by_day(
    readings: Iterable[Reading], day_format: DayFormat = DayFormat.D24HOUR
) -> dict[int, list[Reading]]:
    """
    Partition readings by the day of month they belong to.

    Every reading lands in exactly one bucket. Readings are assigned one at a
    time from their own timestamp, keeping input order inside each bucket.

    Args:
        readings (Iterable[Reading]): Readings, usually one month's worth.
        day_format (DayFormat): Day-boundary policy.

    Returns:
        dict[int, list[Reading]]: Day of month -> readings of that day.
    """
    readings_by_day: dict[int, list[Reading]] = {}
    rolled_back = 0

    for reading in readings:
        day = day_format.day_of(reading)
        if day_format is DayFormat.D9MET and day != reading.day and reading.day == 1:
            rolled_back += 1
        readings_by_day.setdefault(day, []).append(reading)

    if rolled_back:
        # No cross-month reconciliation: these share a bucket with the
        # same day number of the current month.
        logging.debug(
            "%d reading(s) belong to the last meteorological day of the previous month",
            rolled_back,
        )

    return readings_by_day


def sample_reading(readings_by_day: Mapping[int, list[Reading]]) -> Reading:
    """
    Pick a representative reading, the first one of the lowest-numbered day.

    Raises:
        EmptyInputError: If there are no buckets or the buckets are empty.
    """
    for day in sorted(readings_by_day):
        if readings_by_day[day]:
            return readings_by_day[day][0]

    raise EmptyInputError("No readings to take a sample from")
