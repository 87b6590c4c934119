"""
Module containing the schema definitions for the weather summary component.
"""

from .reading import Reading
from .day_format import DayFormat
from .month_statistics import MonthStatistics

__all__ = [
    "Reading",
    "DayFormat",
    "MonthStatistics",
]
