"""Reference data sets."""

from src.fixtures.sample_lines import sample_timesheet_lines

__all__ = ["sample_timesheet_lines"]
