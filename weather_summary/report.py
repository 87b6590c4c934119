"""
Text rendering of monthly statistics and per-day temperature lines.
"""

from typing import Mapping

from weather_summary.formatting import AVERAGE_PATTERN, format_decimal
from weather_summary.schema import MonthStatistics


def render_statistics(stats: MonthStatistics, average_pattern: str = AVERAGE_PATTERN) -> str:
    """
    Render a month's statistics as a printable block.

    Averages are formatted with average_pattern, extremes are shown exactly.

    Args:
        stats (MonthStatistics): The month to render.
        average_pattern (str, optional): Number pattern for averages.

    Returns:
        str: The statistics block, ending with a blank line.
    """

    def average(value: float) -> str:
        return format_decimal(value, average_pattern)

    lines = [
        f"WEATHER STATION STATISTICS FOR: {stats.month_name} {stats.year}",
        "",
        "---TEMPERATURE---",
        f"Average high: {average(stats.average_high)}",
        f"Average low: {average(stats.average_low)}",
        f"Average temperature: {average(stats.average_temp)}",
        f"Maximum temperature: {stats.maximum_temp}",
        f"Minimum temperature: {stats.minimum_temp}",
        f"Coldest day: {stats.lowest_high}",
        f"Warmest night: {stats.highest_low}",
        "",
        "---HUMIDITY---",
        f"Average humidity: {average(stats.average_humidity)}",
        f"Maximum humidity: {stats.maximum_humidity}",
        f"Minimum humidity: {stats.minimum_humidity}",
        "",
    ]
    return "\n".join(lines) + "\n"


def format_temperature_line(temps: Mapping[int, float]) -> str:
    """Join per-day temperatures, in day order, with ", "."""
    return ", ".join(str(temps[day]) for day in sorted(temps))
