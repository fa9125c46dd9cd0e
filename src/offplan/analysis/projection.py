# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Year-by-year projection of property value and rental income.

Years are 1-based investment years counted from booking. Years before the
handover year are construction years with no rent; rent starts in the
handover year, anchored to the value at handover, and grows annually at
the rent growth rate. Short-term income, when configured, grows at the
average-daily-rate growth rate instead.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

from ..core.primitives import EngineSettings, Model
from ..inputs import InvestmentInputs
from .hold import HoldAnalyzer


class YearlyProjection(Model):
    """One row of the yearly projection."""

    year: int
    calendar_year: int
    property_value: float
    annual_rent: Optional[float] = None
    net_rent: float = 0.0
    cumulative_net_income: float = 0.0
    is_construction: bool = False
    is_handover: bool = False
    is_break_even: bool = False

    str_net_income: Optional[float] = None
    str_cumulative_net_income: Optional[float] = None


def build_yearly_projections(
    inputs: InvestmentInputs,
    settings: Optional[EngineSettings] = None,
    horizon_years: Optional[int] = None,
) -> List[YearlyProjection]:
    """
    Build yearly projection rows for years 1..horizon.

    `is_break_even` marks only the first year in which cumulative net rent
    reaches the total capital invested.

    Args:
        inputs: Investment input record
        settings: Engine settings (projection horizon, appreciation cap)
        horizon_years: Overrides `HoldSettings.projection_horizon_years`

    Returns:
        List of YearlyProjection, one per year
    """
    settings = settings or EngineSettings()
    horizon = horizon_years if horizon_years is not None else settings.hold.projection_horizon_years

    analyzer = HoldAnalyzer.from_inputs(inputs, settings=settings)
    appreciation = analyzer.appreciation
    timeline = inputs.timeline
    handover_year = timeline.handover_year_index

    values = appreciation.yearly_table(horizon)
    base_rent = analyzer.property_value_at_handover * inputs.rental_yield_percent / 100
    capital = analyzer.total_capital_invested
    service_charges = inputs.annual_service_charges
    rent_growth = 1 + inputs.rent_growth_rate / 100

    str_config = inputs.short_term_rental
    str_cumulative = 0.0 if str_config is not None else None

    rows: List[YearlyProjection] = []
    cumulative = 0.0
    break_even_reached = False
    for year in range(1, horizon + 1):
        is_construction = year < handover_year
        annual_rent = None
        net_rent = 0.0
        str_net = None
        is_break_even = False

        if not is_construction:
            years_renting = year - handover_year
            annual_rent = base_rent * rent_growth**years_renting
            net_rent = annual_rent - service_charges
            cumulative += net_rent
            if not break_even_reached and cumulative >= capital:
                is_break_even = break_even_reached = True

            if str_config is not None:
                str_gross = (
                    str_config.gross_annual_income
                    * (1 + str_config.adr_growth_rate / 100) ** years_renting
                )
                str_net = analyzer.short_term_net_income(str_gross)
                str_cumulative += str_net

        rows.append(
            YearlyProjection(
                year=year,
                calendar_year=timeline.calendar_year(year),
                property_value=values[year],
                annual_rent=annual_rent,
                net_rent=net_rent,
                cumulative_net_income=cumulative,
                is_construction=is_construction,
                is_handover=year == handover_year,
                is_break_even=is_break_even,
                str_net_income=str_net,
                str_cumulative_net_income=str_cumulative,
            )
        )
    return rows


def projections_to_dataframe(rows: Sequence[YearlyProjection]) -> pd.DataFrame:
    """Projection rows as a DataFrame indexed by investment year."""
    df = pd.DataFrame([row.model_dump() for row in rows])
    if not df.empty:
        df = df.set_index("year")
    return df
