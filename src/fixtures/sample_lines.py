"""The four reference timesheet lines used by demos and tests."""

import datetime as dt
from decimal import Decimal
from typing import List

from src.models.timesheet import TimesheetLine

_STANDARD = {"rate_code": "ST", "rate_description": "Standard Rate"}
_OVERTIME = {"rate_code": "OV", "rate_description": "Overtime Rate"}


def sample_timesheet_lines() -> List[TimesheetLine]:
    """Return a fresh list of the reference lines.

    Two standard-rate lines on 2019-01-01, then one standard-rate and one
    overtime line on 2019-01-02.
    """
    return [
        TimesheetLine(
            day=dt.date(2019, 1, 1),
            rate=Decimal("21.00"),
            volume=Decimal("20.2"),
            **_STANDARD,
        ),
        TimesheetLine(
            day=dt.date(2019, 1, 1),
            rate=Decimal("21.00"),
            volume=Decimal("10.1"),
            **_STANDARD,
        ),
        TimesheetLine(
            day=dt.date(2019, 1, 2),
            rate=Decimal("21.00"),
            volume=Decimal("20.2"),
            **_STANDARD,
        ),
        TimesheetLine(
            day=dt.date(2019, 1, 2),
            rate=Decimal("31.00"),
            volume=Decimal("30.99"),
            **_OVERTIME,
        ),
    ]
