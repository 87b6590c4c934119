"""
Statistics reducers over readings and per-day values.

Every reducer is total: an empty input yields 0 rather than an error, so a
caller cannot tell "no data" from a measured zero. Callers that need to know
check for emptiness first (see MonthBuilder).
"""

from typing import Iterable, Mapping, Sequence

import pandas as pd


def _series(values: Iterable) -> pd.Series:
    return pd.Series(list(values))


def maximum(values: Iterable):
    """Largest value, or 0 for an empty input."""
    series = _series(values)
    if series.empty:
        return 0
    return series.max().item()


def minimum(values: Iterable):
    """Smallest value, or 0 for an empty input."""
    series = _series(values)
    if series.empty:
        return 0
    return series.min().item()


def mean(values: Iterable) -> float:
    """Arithmetic mean, or 0.0 for an empty input."""
    series = _series(values)
    if series.empty:
        return 0.0
    return float(series.mean())


# region temperature
def highest_temperature(readings: Sequence) -> float:
    return float(maximum(reading.temperature for reading in readings))


def lowest_temperature(readings: Sequence) -> float:
    return float(minimum(reading.temperature for reading in readings))


def average_temperature(readings: Sequence) -> float:
    """
    Mean over every individual reading.

    Over a month this reflects the real distribution of temperatures rather
    than the midpoint of the daily highs and lows.
    """
    return mean(reading.temperature for reading in readings)


# endregion


# region humidity
def highest_humidity(readings: Sequence) -> int:
    return int(maximum(reading.humidity for reading in readings))


def lowest_humidity(readings: Sequence) -> int:
    return int(minimum(reading.humidity for reading in readings))


def average_humidity(readings: Sequence) -> float:
    return mean(reading.humidity for reading in readings)


# endregion


# region per-day
def daily_highs(readings_by_day: Mapping[int, Sequence]) -> dict:
    """
    Highest temperature of each day.

    Args:
        readings_by_day (Mapping[int, Sequence[Reading]]): Day-buckets.

    Returns:
        dict: Day of month -> high temperature, ordered by day ascending.
    """
    return {
        day: highest_temperature(readings_by_day[day])
        for day in sorted(readings_by_day)
    }


def daily_lows(readings_by_day: Mapping[int, Sequence]) -> dict:
    """
    Lowest temperature of each day.

    Args:
        readings_by_day (Mapping[int, Sequence[Reading]]): Day-buckets.

    Returns:
        dict: Day of month -> low temperature, ordered by day ascending.
    """
    return {
        day: lowest_temperature(readings_by_day[day])
        for day in sorted(readings_by_day)
    }


# endregion
