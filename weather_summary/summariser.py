"""
Summariser class for weather station export processing.
"""

import logging
import queue
from pathlib import Path

from weather_summary.builders import MonthBuilder
from weather_summary.exceptions import EmptyInputError, FileAccessError, ParseError
from weather_summary.loader import find_month_files, read_month_readings
from weather_summary.output import write_daily_stats
from weather_summary.report import render_statistics
from weather_summary.schema import DayFormat, MonthStatistics


class Summariser:
    """Main class for summarising a directory of monthly exports."""

    def __init__(
        self,
        source_dir: Path,
        output_dir: Path = None,
        day_format: DayFormat = DayFormat.D24HOUR,
        write_output: bool = False,
    ):
        if write_output and output_dir is None:
            raise ValueError("Cannot write output without an output directory.")

        self.source_dir = Path(source_dir)
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.day_format = day_format
        self.write_output = write_output

        self.processing_queue = queue.Queue()

    def fill_up_queue(self, files: list[Path]) -> None:
        """
        Read each file and queue a MonthBuilder for its readings.
        Files that cannot be read or parsed are logged and skipped.
        """
        for source_file in files:
            try:
                readings = read_month_readings(source_file)
            except FileAccessError as e:
                logging.error("Unable to read file %s: %s", source_file, e)
                continue
            except ParseError as e:
                logging.error("Unable to parse file %s: %s", source_file, e)
                continue

            self.processing_queue.put(
                MonthBuilder(
                    readings=readings,
                    day_format=self.day_format,
                    source=str(source_file),
                )
            )

    def process_queue(self) -> list[MonthStatistics]:
        """Build the statistics for every queued file."""
        month_stats = []
        while not self.processing_queue.empty():
            builder = self.processing_queue.get()

            logging.info(
                "Processing %s (%d readings)", builder.source, len(builder.readings)
            )

            try:
                month_stats.append(builder.run())
            except EmptyInputError as e:
                logging.error("Did not process %s: %s", builder.source, e)

        return month_stats

    def calculate_month_statistics(self, files: list[Path]) -> list[MonthStatistics]:
        """Summarise each file into a MonthStatistics, in file order."""
        self.fill_up_queue(files)
        return self.process_queue()

    @staticmethod
    def print_statistics(month_stats: list[MonthStatistics]) -> None:
        """Print the statistics of each month in chronological order."""
        for stats in sorted(month_stats):
            print(render_statistics(stats))

    def run(self) -> list[MonthStatistics]:
        """
        Main entry point: summarise, print and optionally write the yearly files.

        Returns:
            list[MonthStatistics]: The months summarised, in chronological order.
        """
        logging.info(
            "Summarising %s with %s days", self.source_dir, self.day_format.label
        )

        files = find_month_files(self.source_dir)
        if len(files) == 0:
            logging.warning("No CSV files found in %s", self.source_dir)
            return []

        month_stats = sorted(self.calculate_month_statistics(files))
        self.print_statistics(month_stats)

        if self.write_output:
            written = write_daily_stats(month_stats, self.output_dir)
            logging.info("Wrote %d files to %s", len(written), self.output_dir)
        else:
            logging.info("Output writing disabled.")

        logging.info("Summariser done.")
        return month_stats
