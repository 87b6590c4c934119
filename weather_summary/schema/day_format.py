"""DayFormat Schema"""

from enum import Enum


def calendar_day(reading) -> int:
    """Day of month on the calendar."""
    return reading.day


def meteorological_day(reading) -> int:
    """Day of month of the 10:00 to 10:00 meteorological day."""
    return reading.meteorological_day


class DayFormat(Enum):
    """
    Day-boundary policy used when grouping readings into days.

    D24HOUR groups by calendar day. D9MET groups by meteorological day, so the
    early-morning readings that carry the overnight low stay with the
    previous day.
    """

    D24HOUR = "24-hour"
    D9MET = "Met"

    @property
    def label(self) -> str:
        """Human readable name of the policy."""
        return self.value

    def day_of(self, reading) -> int:
        """Return the day of month the reading belongs to under this policy."""
        return _DAY_EXTRACTORS[self](reading)

    @classmethod
    def from_name(cls, name: str) -> "DayFormat":
        """
        Look up a policy by member name or label, ignoring case.

        Raises:
            ValueError: If the name matches no policy.
        """
        candidate = (name or "").strip().lower()
        for day_format in cls:
            if candidate in (day_format.name.lower(), day_format.value.lower()):
                return day_format

        choices = ", ".join(f"{f.name}/{f.value}" for f in cls)
        raise ValueError(f"Unknown day format {name!r} (expected one of {choices})")


_DAY_EXTRACTORS = {
    DayFormat.D24HOUR: calendar_day,
    DayFormat.D9MET: meteorological_day,
}
