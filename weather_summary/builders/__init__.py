"""
Builders module.
"""

from .month_builder import MonthBuilder, build_month_statistics

__all__ = [
    "MonthBuilder",
    "build_month_statistics",
]
