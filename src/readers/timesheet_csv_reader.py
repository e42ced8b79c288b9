"""Timesheet reader for CSV exports.

This module reads timesheet lines from a CSV file into validated
TimesheetLine objects. All columns are read as text so decimal amounts
keep their exact digits.
"""

import datetime as dt
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd
from pydantic import ValidationError

from src.models.timesheet import TimesheetLine

logger = logging.getLogger(__name__)

# CSV header -> TimesheetLine field
COLUMN_MAPPING = {
    "Day": "day",
    "Rate Code": "rate_code",
    "Rate Description": "rate_description",
    "Rate": "rate",
    "Volume": "volume",
}


class TimesheetCsvReader:
    """Reader for timesheet lines stored as CSV.

    Expected columns: Day, Rate Code, Rate Description, Rate, Volume.
    Extra columns are ignored. Days use ISO format (YYYY-MM-DD) or
    DD.MM.YYYY.

    Example:
        >>> reader = TimesheetCsvReader()
        >>> lines = reader.read("timesheet.csv")
        >>> lines[0].rate_code
        'ST'
    """

    DATE_FORMATS = ["%Y-%m-%d", "%d.%m.%Y"]

    def __init__(self, delimiter: str = ","):
        self.delimiter = delimiter
        self.skipped_rows: List[int] = []

    def read(self, path: Union[str, Path]) -> List[TimesheetLine]:
        """Read and validate every data row of a CSV file.

        Rows that fail validation are logged and skipped; their 1-based
        row numbers (header is row 1) are kept in ``skipped_rows``.

        Args:
            path: CSV file to read

        Returns:
            Validated lines in file order

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If a required column is missing
        """
        csv_path = Path(path)
        if not csv_path.is_file():
            raise FileNotFoundError(f"Timesheet file not found: {csv_path}")

        df = pd.read_csv(
            csv_path,
            sep=self.delimiter,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
        df.columns = [str(c).strip() for c in df.columns]

        missing = [c for c in COLUMN_MAPPING if c not in df.columns]
        if missing:
            raise ValueError(
                f"Missing column(s) in {csv_path.name}: {', '.join(missing)}"
            )

        self.skipped_rows = []
        lines = []
        for position, (_, row) in enumerate(df.iterrows()):
            line = self._parse_row(row.to_dict(), row_number=position + 2)
            if line is not None:
                lines.append(line)

        logger.info(
            f"Read {len(lines)} timesheet lines from {csv_path} "
            f"({len(self.skipped_rows)} skipped)"
        )
        return lines

    def _parse_row(
        self, row: Dict[str, Any], row_number: int
    ) -> Optional[TimesheetLine]:
        values = {
            field: str(row.get(column, "")).strip()
            for column, field in COLUMN_MAPPING.items()
        }
        if not any(values.values()):
            return None

        try:
            values["day"] = self._parse_date(values["day"])
            return TimesheetLine(**values)
        except (ValueError, ValidationError) as e:
            logger.warning(f"Skipping row {row_number}: {e}")
            self.skipped_rows.append(row_number)
            return None

    def _parse_date(self, value: str) -> dt.date:
        for fmt in self.DATE_FORMATS:
            try:
                return dt.datetime.strptime(value, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unrecognised date: {value!r}")
