"""Timesheet line model.

This module defines the TimesheetLine model which represents a single
booking of a volume against a rate code on a specific day.
"""

import datetime as dt
from decimal import Decimal
from typing import Any

from pydantic import Field, field_validator

from src.models.base import BaseDataModel


class TimesheetLine(BaseDataModel):
    """Represents a single timesheet line.

    Lines sharing a rate code are expected to share the same description
    and rate. Grouping relies on that assumption but does not enforce it.

    Attributes:
        day: Calendar day of the booking
        rate_code: Short rate identifier (e.g. "ST", "OV")
        rate_description: Human-readable label of the rate code
        rate: Monetary amount per unit of volume
        volume: Quantity booked

    Example:
        >>> line = TimesheetLine(
        ...     day=dt.date(2019, 1, 1),
        ...     rate_code="ST",
        ...     rate_description="Standard Rate",
        ...     rate=Decimal("21.00"),
        ...     volume=Decimal("20.2"),
        ... )
        >>> line.volume
        Decimal('20.2')
    """

    day: dt.date = Field(..., description="Day of the booking")
    rate_code: str = Field(..., description="Rate code identifier")
    rate_description: str = Field(..., description="Rate code label")
    rate: Decimal = Field(..., description="Unit rate")
    volume: Decimal = Field(..., description="Booked volume")

    @field_validator("day", mode="before")
    @classmethod
    def strip_time_component(cls, v: Any) -> Any:
        """Reduce datetimes to their calendar date."""
        if isinstance(v, dt.datetime):
            return v.date()
        return v

    @field_validator("rate", "volume", mode="before")
    @classmethod
    def float_to_exact_decimal(cls, v: Any) -> Any:
        """Convert floats through their shortest repr.

        ``Decimal(20.2)`` would carry the binary representation error into
        every sum, ``Decimal(str(20.2))`` does not.

        Args:
            v: Raw field value

        Returns:
            A Decimal for float input, otherwise the value unchanged
        """
        if isinstance(v, float):
            return Decimal(str(v))
        return v
