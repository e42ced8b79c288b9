"""Grouping and aggregation of timesheet lines."""

from src.aggregators.rate_code_aggregator import (
    group_by_day_then_rate_code,
    group_by_rate_code,
)

__all__ = [
    "group_by_day_then_rate_code",
    "group_by_rate_code",
]
