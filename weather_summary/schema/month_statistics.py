"""MonthStatistics Schema"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from weather_summary import statistics
from weather_summary.exceptions import EmptyInputError
from weather_summary.formatting import month_name


@dataclass(frozen=True)
class MonthStatistics:
    """
    Overall weather statistics for one month.

    Holds only pre-computed values, never the raw readings. The per-day high
    and low maps are used at construction to derive the lower-level
    statistics (average high, coldest day, ...).

    Attributes:
        minimum_temp (float): Lowest temperature of any reading.
        maximum_temp (float): Highest temperature of any reading.
        average_temp (float): Mean temperature over all readings.
        high_temps (Mapping[int, float]): Day of month -> day's high.
        low_temps (Mapping[int, float]): Day of month -> day's low.
        minimum_humidity (int): Lowest humidity of any reading.
        maximum_humidity (int): Highest humidity of any reading.
        average_humidity (float): Mean humidity over all readings.
        month (int): Calendar month, 1-12.
        year (int): Calendar year.
        average_high (float): Mean of the daily highs.
        average_low (float): Mean of the daily lows.
        lowest_high (float): Lowest daily high ("coldest day").
        highest_low (float): Highest daily low ("warmest night").
    """

    minimum_temp: float
    maximum_temp: float
    average_temp: float
    high_temps: Mapping[int, float]
    low_temps: Mapping[int, float]
    minimum_humidity: int
    maximum_humidity: int
    average_humidity: float
    month: int
    year: int
    average_high: float = field(init=False)
    average_low: float = field(init=False)
    lowest_high: float = field(init=False)
    highest_low: float = field(init=False)

    def __post_init__(self):
        if not self.high_temps or not self.low_temps:
            raise EmptyInputError(
                f"No daily temperatures for {self.month:02d}/{self.year}"
            )
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be in 1..12, got {self.month}")

        high_temps = dict(sorted(self.high_temps.items()))
        low_temps = dict(sorted(self.low_temps.items()))

        # frozen dataclass, so derived fields go through object.__setattr__
        object.__setattr__(self, "high_temps", MappingProxyType(high_temps))
        object.__setattr__(self, "low_temps", MappingProxyType(low_temps))
        object.__setattr__(self, "average_high", statistics.mean(high_temps.values()))
        object.__setattr__(self, "average_low", statistics.mean(low_temps.values()))
        object.__setattr__(
            self, "lowest_high", float(statistics.minimum(high_temps.values()))
        )
        object.__setattr__(
            self, "highest_low", float(statistics.maximum(low_temps.values()))
        )

    @property
    def sort_key(self) -> tuple:
        """(year, month), the chronological ordering of months."""
        return (self.year, self.month)

    @property
    def month_name(self) -> str:
        return month_name(self.month)

    def __lt__(self, other):
        if not isinstance(other, MonthStatistics):
            return NotImplemented
        return self.sort_key < other.sort_key
