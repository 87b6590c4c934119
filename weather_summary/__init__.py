"""This module stores the model for the weather_summary package."""

from .summariser import Summariser

__all__ = [
    "builders",
    "config",
    "grouping",
    "loader",
    "logger",
    "output",
    "report",
    "schema",
    "statistics",
    "Summariser",
]
