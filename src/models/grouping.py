"""Result models produced by the rate code aggregator."""

import datetime as dt
from decimal import Decimal
from typing import Tuple

from pydantic import Field

from src.models.base import BaseDataModel


class GroupResult(BaseDataModel):
    """Aggregated volume of all lines sharing one rate code.

    ``rate_description`` and ``rate`` come from the first line seen for
    the rate code, they are not computed from the whole group.

    Attributes:
        rate_code: The grouping key
        total_volume: Exact sum of the volumes in the group
        rate_description: Description of the first line in the group
        rate: Rate of the first line in the group
        line_count: Number of input lines folded into the group
    """

    rate_code: str
    total_volume: Decimal
    rate_description: str
    rate: Decimal
    line_count: int = Field(..., ge=1)


class DayGroup(BaseDataModel):
    """All rate code groups booked on one day.

    Attributes:
        day: The grouping key
        lines: Rate code groups in first-seen order within the day
    """

    day: dt.date
    lines: Tuple[GroupResult, ...]

    @property
    def row_span(self) -> int:
        """Number of table rows the day covers when rendered."""
        return len(self.lines)

    @property
    def total_volume(self) -> Decimal:
        return sum((line.total_volume for line in self.lines), Decimal("0"))
