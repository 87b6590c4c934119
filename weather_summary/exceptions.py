"""
Exceptions raised while summarising weather station exports.
"""


class WeatherSummaryError(Exception):
    """Base class for all errors raised by the weather_summary package."""


class ParseError(WeatherSummaryError, ValueError):
    """
    A CSV row could not be turned into a Reading.

    Attributes:
        row_number (int): 1-based line number in the source file, if known.
    """

    def __init__(self, message: str, row_number: int = None):
        super().__init__(message)
        self.row_number = row_number

    def __str__(self):
        message = super().__str__()
        if self.row_number is None:
            return message
        return f"line {self.row_number}: {message}"


class FileAccessError(WeatherSummaryError, OSError):
    """An input file could not be read or an output file could not be written."""


class EmptyInputError(WeatherSummaryError, ValueError):
    """A month was requested from an empty set of readings."""
