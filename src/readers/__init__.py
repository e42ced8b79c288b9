"""Readers that load timesheet lines from external sources."""

from src.readers.timesheet_csv_reader import TimesheetCsvReader

__all__ = ["TimesheetCsvReader"]
