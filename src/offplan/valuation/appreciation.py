# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Phased Property Appreciation

Three-phase compounding value model: a construction phase running through
the year of handover, a growth phase of `growth_period_years` after it, and
a mature phase beyond. Values compound annually at the rate of the phase
each year falls into; months between year boundaries are interpolated
linearly so that exit-month sliders move smoothly.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Optional

import pandas as pd
from pydantic import Field

from ..core.primitives import (
    AnnualRatePercent,
    AppreciationPhaseEnum,
    EngineSettings,
    Model,
    PositiveInt,
    StrictlyPositiveFloat,
)
from .differentiators import calculate_appreciation_bonus

if TYPE_CHECKING:
    from ..inputs import InvestmentInputs


class AppreciationModel(Model):
    """
    Property value at any elapsed month from booking.

    Year `y` (1-based, covering months `12(y-1) < m <= 12y`) uses:
    - the construction rate while `y <= ceil(T / 12)`,
    - the growth rate for the next `growth_period_years` years,
    - the mature rate afterwards.

    A non-positive construction period is treated as one month.

    Attributes:
        base_price: Value at booking
        total_months: Construction period T in months
        construction_appreciation: Annual rate during construction (%)
        growth_appreciation: Annual rate during the growth phase (%)
        mature_appreciation: Annual rate once mature (%)
        growth_period_years: Length of the growth phase in years

    Example:
        >>> model = AppreciationModel(base_price=1_000_000, total_months=24)
        >>> round(model.value_at_year(1))
        1120000
        >>> round(model.value_at(18))
        1187200
    """

    base_price: StrictlyPositiveFloat
    total_months: int
    construction_appreciation: AnnualRatePercent = 12.0
    growth_appreciation: AnnualRatePercent = 8.0
    mature_appreciation: AnnualRatePercent = 4.0
    growth_period_years: PositiveInt = Field(default=5)

    @classmethod
    def from_inputs(
        cls, inputs: "InvestmentInputs", settings: Optional[EngineSettings] = None
    ) -> "AppreciationModel":
        """
        Build the model from an input record.

        Selected value differentiators add their (capped) bonus to every phase rate.
        """
        settings = settings or EngineSettings()
        bonus = calculate_appreciation_bonus(
            inputs.value_differentiators, cap=settings.appreciation.bonus_cap_percent
        )
        return cls(
            base_price=inputs.base_price,
            total_months=inputs.total_months,
            construction_appreciation=inputs.construction_appreciation + bonus,
            growth_appreciation=inputs.growth_appreciation + bonus,
            mature_appreciation=inputs.mature_appreciation + bonus,
            growth_period_years=inputs.growth_period_years,
        )

    # === PHASES ===

    @property
    def construction_years(self) -> int:
        return math.ceil(max(self.total_months, 1) / 12)

    def phase_for_year(self, year: int) -> AppreciationPhaseEnum:
        if year <= self.construction_years:
            return AppreciationPhaseEnum.CONSTRUCTION
        if year <= self.construction_years + self.growth_period_years:
            return AppreciationPhaseEnum.GROWTH
        return AppreciationPhaseEnum.MATURE

    def rate_for_year(self, year: int) -> float:
        """Annual appreciation rate (%) applied when compounding into `year`."""
        phase = self.phase_for_year(year)
        if phase == AppreciationPhaseEnum.CONSTRUCTION:
            return self.construction_appreciation
        if phase == AppreciationPhaseEnum.GROWTH:
            return self.growth_appreciation
        return self.mature_appreciation

    # === VALUES ===

    def yearly_table(self, years: int) -> List[float]:
        """Values at the end of years 0..years (index 0 is the base price)."""
        values = [self.base_price]
        for year in range(1, max(years, 0) + 1):
            values.append(values[-1] * (1 + self.rate_for_year(year) / 100))
        return values

    def value_at_year(self, year: int) -> float:
        """Discrete value at the end of investment year `year`."""
        if year <= 0:
            return self.base_price
        return self.yearly_table(year)[year]

    def value_at(self, month: float) -> float:
        """Value at `month` months after booking, interpolated between year ends."""
        if month <= 0:
            return self.base_price
        years = month / 12
        lower = math.floor(years)
        fraction = years - lower
        table = self.yearly_table(lower + 1)
        if fraction == 0:
            return table[lower]
        return table[lower] + fraction * (table[lower + 1] - table[lower])

    def appreciation_percent_at(self, month: float) -> float:
        return (self.value_at(month) - self.base_price) / self.base_price * 100

    def yearly_values(self, horizon_years: int) -> pd.Series:
        """Year-end values for years 0..horizon_years as a Series indexed by year."""
        return pd.Series(
            self.yearly_table(horizon_years),
            index=pd.RangeIndex(0, horizon_years + 1, name="year"),
            name="property_value",
        )
