"""Data models for the timesheet grouping library."""

from src.models.base import BaseDataModel
from src.models.grouping import DayGroup, GroupResult
from src.models.timesheet import TimesheetLine

__all__ = [
    "BaseDataModel",
    "DayGroup",
    "GroupResult",
    "TimesheetLine",
]
