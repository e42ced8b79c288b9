"""Group timesheet lines by rate code, optionally per day.

Groups are emitted in the order their key first appears in the input.
Volumes are summed as Decimals, so no rounding happens until rendering.
"""

import datetime as dt
import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from src.models.grouping import DayGroup, GroupResult
from src.models.timesheet import TimesheetLine
from src.utils.logging_utils import log_function_call
from src.validators.consistency_validator import (
    RepresentativeConflictError,
    find_representative_conflicts,
)

logger = logging.getLogger(__name__)


@log_function_call(expected=(RepresentativeConflictError,))
def group_by_rate_code(
    lines: Iterable[TimesheetLine], strict: bool = False
) -> List[GroupResult]:
    """Sum the volume of each rate code.

    The description and rate of each group are taken from the first line
    seen for its rate code. Later lines that disagree are logged as
    warnings, or rejected when ``strict`` is set.

    Args:
        lines: Timesheet lines in any order
        strict: Raise instead of warning on conflicting lines

    Returns:
        One GroupResult per distinct rate code, in first-seen order

    Raises:
        RepresentativeConflictError: If ``strict`` and a rate code has lines
            with differing description or rate

    Example:
        >>> groups = group_by_rate_code(sample_timesheet_lines())
        >>> [(g.rate_code, g.total_volume) for g in groups]
        [('ST', Decimal('50.5')), ('OV', Decimal('30.99'))]
    """
    lines = list(lines)
    _check_representatives(lines, strict)
    return _group_by_rate_code(lines)


@log_function_call(expected=(RepresentativeConflictError,))
def group_by_day_then_rate_code(
    lines: Iterable[TimesheetLine], strict: bool = False
) -> List[DayGroup]:
    """Group lines by day, then by rate code within each day.

    Representative conflicts are checked across the whole input, not per
    day, so a rate that changes between days is still reported.

    Args:
        lines: Timesheet lines in any order
        strict: Raise instead of warning on conflicting lines

    Returns:
        One DayGroup per distinct day in first-seen order, each holding its
        rate code groups in first-seen order within that day

    Raises:
        RepresentativeConflictError: If ``strict`` and a rate code has lines
            with differing description or rate
    """
    lines = list(lines)
    _check_representatives(lines, strict)

    days: Dict[dt.date, List[TimesheetLine]] = {}
    for line in lines:
        days.setdefault(line.day, []).append(line)

    result = [
        DayGroup(day=day, lines=tuple(_group_by_rate_code(day_lines)))
        for day, day_lines in days.items()
    ]
    logger.info(f"Grouped {len(lines)} lines into {len(result)} day groups")
    return result


def _group_by_rate_code(lines: Sequence[TimesheetLine]) -> List[GroupResult]:
    buckets: Dict[str, List[TimesheetLine]] = {}
    for line in lines:
        buckets.setdefault(line.rate_code, []).append(line)

    return [_summarise(code, bucket) for code, bucket in buckets.items()]


def _summarise(rate_code: str, bucket: List[TimesheetLine]) -> GroupResult:
    first = bucket[0]
    return GroupResult(
        rate_code=rate_code,
        total_volume=sum((line.volume for line in bucket), Decimal("0")),
        rate_description=first.rate_description,
        rate=first.rate,
        line_count=len(bucket),
    )


def _check_representatives(lines: Sequence[TimesheetLine], strict: bool) -> None:
    report = find_representative_conflicts(lines)
    if not report.issues:
        return

    if strict:
        raise RepresentativeConflictError(report)

    for issue in report.issues:
        logger.warning(f"First line wins for rate code: {issue}")
