"""
Pure formatting helpers for readings and monthly reports.

Patterns and month names are always passed in, so callers decide the
rendering instead of sharing a module-level formatter.
"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_EVEN

ENGLISH_MONTH_NAMES = (
    "JANUARY",
    "FEBRUARY",
    "MARCH",
    "APRIL",
    "MAY",
    "JUNE",
    "JULY",
    "AUGUST",
    "SEPTEMBER",
    "OCTOBER",
    "NOVEMBER",
    "DECEMBER",
)

ENGLISH_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

AVERAGE_PATTERN = "##.#"


def _fraction_digits(pattern: str) -> tuple:
    """
    Count the minimum and maximum fraction digits of a DecimalFormat pattern.

    Args:
        pattern (str): Pattern such as "##.#" or "0.00".

    Returns:
        tuple: (minimum_digits, maximum_digits)
    """
    if "." not in pattern:
        return 0, 0

    fraction = pattern.split(".", 1)[1]
    if any(char not in "#0" for char in fraction):
        raise ValueError(f"Unsupported number pattern: {pattern!r}")

    return fraction.count("0"), len(fraction)


def format_decimal(value: float, pattern: str = AVERAGE_PATTERN) -> str:
    """
    Format a number following a DecimalFormat-style pattern.

    Rounds the exact binary value of the float half-even to the maximum
    number of fraction digits (the double nearest 0.15 lies below it, so
    "0.1") and drops trailing zeros beyond the minimum, so 15.0 renders as
    "15" and 21.25 as "21.2" with the default "##.#" pattern.

    Args:
        value (float): Number to format.
        pattern (str, optional): Pattern giving the fraction digits.

    Returns:
        str: The formatted number.
    """
    min_digits, max_digits = _fraction_digits(pattern)

    quantum = Decimal(1).scaleb(-max_digits)
    rounded = Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_EVEN)
    if rounded == 0:
        rounded = abs(rounded)  # no "-0"

    text = format(rounded, "f")
    if max_digits > min_digits and "." in text:
        integer, fraction = text.split(".")
        fraction = fraction.rstrip("0")
        if len(fraction) < min_digits:
            fraction = fraction.ljust(min_digits, "0")
        text = f"{integer}.{fraction}" if fraction else integer

    return text


def month_name(month: int, month_names: tuple = ENGLISH_MONTH_NAMES) -> str:
    """Return the name of a 1-based calendar month."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1..12, got {month}")
    return month_names[month - 1]


def format_timestamp(
    timestamp: datetime, month_abbreviations: tuple = ENGLISH_MONTH_ABBREVIATIONS
) -> str:
    """Render a timestamp as "dd MMM yyyy HH:mm", e.g. "01 Mar 2023 09:59"."""
    return (
        f"{timestamp.day:02d} "
        f"{month_name(timestamp.month, month_abbreviations)} "
        f"{timestamp.year:04d} {timestamp.hour:02d}:{timestamp.minute:02d}"
    )
