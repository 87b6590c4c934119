"""Reading Schema"""

import datetime
from dataclasses import dataclass

from weather_summary.exceptions import ParseError
from weather_summary.formatting import format_timestamp

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"

# Readings taken before this hour belong to the previous meteorological day.
METEOROLOGICAL_DAY_START_HOUR = 10


@dataclass(frozen=True)
class Reading:
    """
    Represents a single outdoor module reading from an exact point in time.

    Attributes:
        timestamp (datetime.datetime): Local time the reading was taken.
        temperature (float): Temperature at the time of the reading.
        humidity (int): Relative humidity at the time of the reading.
    """

    timestamp: datetime.datetime
    temperature: float
    humidity: int

    @classmethod
    def parse(cls, timestamp: str, temperature: str, humidity: str) -> "Reading":
        """
        Build a Reading from the raw text columns of an export row.

        Args:
            timestamp (str): Timestamp as "yyyy/MM/dd HH:mm:ss".
            temperature (str): Decimal temperature.
            humidity (str): Integer humidity.

        Raises:
            ParseError: If any of the columns cannot be parsed.
        """
        try:
            parsed_timestamp = datetime.datetime.strptime(
                str(timestamp).strip(), TIMESTAMP_FORMAT
            )
        except ValueError as e:
            raise ParseError(f"Invalid timestamp {timestamp!r}") from e

        try:
            parsed_temperature = float(str(temperature).strip())
        except ValueError as e:
            raise ParseError(f"Invalid temperature {temperature!r}") from e

        try:
            parsed_humidity = int(str(humidity).strip())
        except ValueError as e:
            raise ParseError(f"Invalid humidity {humidity!r}") from e

        return cls(
            timestamp=parsed_timestamp,
            temperature=parsed_temperature,
            humidity=parsed_humidity,
        )

    @property
    def day(self) -> int:
        """Calendar day of month of the reading."""
        return self.timestamp.day

    @property
    def meteorological_day(self) -> int:
        """Day of month of the meteorological day the reading belongs to."""
        if self.timestamp.hour < METEOROLOGICAL_DAY_START_HOUR:
            return (self.timestamp - datetime.timedelta(days=1)).day
        return self.timestamp.day

    def __str__(self):
        return (
            f"{format_timestamp(self.timestamp)} reading - "
            f"temperature: {self.temperature}, humidity: {self.humidity}"
        )
