"""
Loading of weather station CSV exports into Readings.
"""

import logging
from pathlib import Path

import pandas as pd

from weather_summary.exceptions import FileAccessError, ParseError
from weather_summary.schema import Reading

HEADER_LINES = 3

TIMESTAMP_COLUMN = 1
TEMPERATURE_COLUMN = 2
HUMIDITY_COLUMN = 3

DATA_COLUMNS = [TIMESTAMP_COLUMN, TEMPERATURE_COLUMN, HUMIDITY_COLUMN]


def find_month_files(source_dir: Path) -> list[Path]:
    """
    List the CSV exports directly inside a directory (no recursion).

    Raises:
        FileAccessError: If the directory does not exist or cannot be listed.
    """
    source_dir = Path(source_dir)
    if not source_dir.is_dir():
        raise FileAccessError(f"Source directory {source_dir} does not exist")

    try:
        return sorted(
            path
            for path in source_dir.iterdir()
            if path.is_file() and path.name.endswith(".csv")
        )
    except OSError as e:
        raise FileAccessError(f"Unable to list {source_dir}: {e}") from e


def read_export(source_file: Path) -> pd.DataFrame:
    """
    Read the data rows of an export as text, skipping the header lines.

    Only the timestamp, temperature and humidity columns are kept, so rows
    may carry any number of further columns.

    Returns:
        pd.DataFrame: One row per non-blank data line, all values as str.
            Empty when the file has no data rows.
    """
    try:
        return pd.read_csv(
            source_file,
            skiprows=HEADER_LINES,
            header=None,
            usecols=DATA_COLUMNS,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(f"Unable to read file {source_file}: {e}") from e
    except (pd.errors.ParserError, ValueError) as e:
        # also raised when the first data row is too short for the columns
        raise ParseError(f"Malformed CSV in {source_file}: {e}") from e


def read_month_readings(source_file: Path) -> list[Reading]:
    """
    Parse every data row of an export into a Reading.

    Columns 1, 2 and 3 hold the timestamp, temperature and humidity. Any
    further columns are ignored.

    Raises:
        FileAccessError: If the file cannot be read.
        ParseError: If a row is missing a column or holds an invalid value.
    """
    df = read_export(source_file)
    if df.empty:
        logging.warning("No data rows in %s", source_file)
        return []

    missing = [column for column in DATA_COLUMNS if column not in df.columns]
    if missing:
        raise ParseError(
            f"Expected at least {HUMIDITY_COLUMN + 1} columns, missing column(s) {missing}",
            row_number=HEADER_LINES + 1,
        )

    readings = []
    columns = df[DATA_COLUMNS]
    for offset, (timestamp, temperature, humidity) in enumerate(
        columns.itertuples(index=False, name=None)
    ):
        try:
            readings.append(Reading.parse(timestamp, temperature, humidity))
        except ParseError as e:
            e.row_number = HEADER_LINES + offset + 1
            raise

    logging.debug("Read %d readings from %s", len(readings), source_file)
    return readings
