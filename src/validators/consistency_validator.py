"""Checks that lines sharing a rate code agree on description and rate.

Grouping takes the description and rate of the first line seen for a rate
code. When later lines disagree, the grouped output silently hides the
difference. This module surfaces those disagreements.
"""

import logging
from typing import Dict, Iterable

from src.models.timesheet import TimesheetLine
from src.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)


class RepresentativeConflictError(ValueError):
    """Raised by strict grouping when a rate code has conflicting lines.

    Attributes:
        report: The report listing every conflicting line
    """

    def __init__(self, report: ValidationReport):
        self.report = report
        rate_codes = sorted(
            {str(issue.context["rate_code"]) for issue in report.issues}
        )
        super().__init__(
            f"Lines disagree with the first line of rate code(s) "
            f"{', '.join(rate_codes)}: {report.summary()}"
        )


def find_representative_conflicts(lines: Iterable[TimesheetLine]) -> ValidationReport:
    """Report lines whose description or rate differs from their group's first line.

    Args:
        lines: Timesheet lines in input order

    Returns:
        ValidationReport with one WARNING per differing field per line. The
        context of each issue holds the rate code, the day and the position
        of the line in the input.

    Example:
        >>> report = find_representative_conflicts(sample_timesheet_lines())
        >>> report.is_valid(), len(report)
        (True, 0)
    """
    report = ValidationReport()
    first_by_code: Dict[str, TimesheetLine] = {}

    for index, line in enumerate(lines):
        first = first_by_code.setdefault(line.rate_code, line)
        if first is line:
            continue

        context = {"rate_code": line.rate_code, "day": line.day, "index": index}
        if line.rate_description != first.rate_description:
            report.add_warning(
                "rate_description",
                f"Description differs from first line "
                f"({first.rate_description!r})",
                line.rate_description,
                context,
            )
        if line.rate != first.rate:
            report.add_warning(
                "rate",
                f"Rate differs from first line ({first.rate})",
                line.rate,
                context,
            )

    if report.issues:
        logger.debug(f"Representative check found {report.summary()}")
    return report
