# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import math
from typing import List

import pandas as pd
from pydantic import model_validator

from .model import Model
from .types import MonthOfYear, QuarterOfYear
from .validation import ValidationMixin


def quarter_to_month(quarter: int) -> int:
    """Representative month of a calendar quarter (its middle month)."""
    return quarter * 3 - 1


class ConstructionTimeline(Model):
    """
    Booking-to-handover construction period.

    Month arithmetic is calendar-month based: booking in March 2025 and
    handover in September 2027 gives a 30-month construction period.

    Attributes:
        booking_month: Calendar month of booking (1-12)
        booking_year: Calendar year of booking
        handover_month: Calendar month of handover (1-12)
        handover_year: Calendar year of handover

    Example:
        >>> timeline = ConstructionTimeline(
        ...     booking_month=3, booking_year=2025, handover_month=9, handover_year=2027
        ... )
        >>> timeline.total_months
        30
    """

    booking_month: MonthOfYear
    booking_year: int
    handover_month: MonthOfYear
    handover_year: int

    @model_validator(mode="after")
    def validate_ordering(self) -> "ConstructionTimeline":
        ValidationMixin.validate_month_ordering(
            self.booking_year,
            self.booking_month,
            self.handover_year,
            self.handover_month,
            "Handover must fall after booking",
        )
        return self

    @classmethod
    def from_quarter(
        cls, booking_month: int, booking_year: int, handover_quarter: QuarterOfYear, handover_year: int
    ) -> "ConstructionTimeline":
        """Build a timeline whose handover is given as a calendar quarter."""
        return cls(
            booking_month=booking_month,
            booking_year=booking_year,
            handover_month=quarter_to_month(handover_quarter),
            handover_year=handover_year,
        )

    @property
    def total_months(self) -> int:
        """Whole months from booking to handover (always >= 1)."""
        return (self.handover_year - self.booking_year) * 12 + (
            self.handover_month - self.booking_month
        )

    @property
    def handover_year_index(self) -> int:
        """1-based investment year in which handover falls."""
        return math.ceil(self.total_months / 12)

    def calendar_year(self, investment_year: int) -> int:
        """Calendar year of a 1-based investment year."""
        return self.booking_year + investment_year - 1

    @property
    def booking_period(self) -> pd.Period:
        """Monthly period of the booking."""
        return pd.Period(year=self.booking_year, month=self.booking_month, freq="M")

    def month_labels(self, months: List[int]) -> List[str]:
        """Calendar labels (YYYY-MM) for month offsets from booking."""
        return [str(self.booking_period + int(m)) for m in months]
