"""Input selection shared by the CLI commands."""

import logging
from typing import List, Optional

import click

from src.cli.error_handlers import DataValidationError
from src.fixtures.sample_lines import sample_timesheet_lines
from src.models.timesheet import TimesheetLine
from src.readers.timesheet_csv_reader import TimesheetCsvReader

logger = logging.getLogger(__name__)

FILE_OPTION_HELP = "CSV file with timesheet lines (uses the sample lines if omitted)"


def load_lines(file_path: Optional[str]) -> List[TimesheetLine]:
    """Read lines from ``file_path``, or return the sample lines.

    Raises:
        FileNotFoundError: If ``file_path`` does not exist
        DataValidationError: If the CSV lacks required columns
    """
    if not file_path:
        logger.debug("No input file given, using sample lines")
        return sample_timesheet_lines()

    reader = TimesheetCsvReader()
    try:
        lines = reader.read(file_path)
    except ValueError as e:
        raise DataValidationError(
            str(e),
            recovery_hint="Expected columns: Day, Rate Code, Rate Description, "
            "Rate, Volume",
        ) from e
    if reader.skipped_rows:
        click.echo(
            f"Skipped invalid row(s): {', '.join(map(str, reader.skipped_rows))}",
            err=True,
        )
    return lines
