# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rental Hold Analytics

Steady-state rental economics for an investor who keeps the unit after
handover: first-year rent net of service charges, yield on the capital
invested, and the break-even and pay-off horizons. An optional short-term
rental comparison recomputes the same figures from nightly-rate income.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field

from ..core.primitives import EngineSettings, HoldSettings, Model, Percentage, PositiveFloat
from ..inputs import InvestmentInputs, ShortTermRentalConfig
from ..valuation import AppreciationModel

logger = logging.getLogger(__name__)


class HoldAnalysis(Model):
    """
    Rental economics of holding the unit after handover.

    Horizons are reported in years; when net rent is zero or negative they
    carry the `HoldSettings.not_applicable_years` sentinel instead.
    Short-term fields are None unless a short-term rental config was given.
    """

    total_capital_invested: float
    property_value_at_handover: float
    gross_annual_rent: float
    annual_service_charges: float
    net_annual_rent: float
    rental_yield_on_capital: float
    years_to_break_even: float
    years_to_pay_off: float

    # === SHORT-TERM RENTAL ===
    str_gross_annual_rent: Optional[float] = None
    str_net_annual_rent: Optional[float] = None
    str_yield_on_capital: Optional[float] = None
    str_years_to_break_even: Optional[float] = None
    str_years_to_pay_off: Optional[float] = None

    @property
    def has_short_term_rental(self) -> bool:
        return self.str_net_annual_rent is not None


class HoldAnalyzer(Model):
    """
    Computes `HoldAnalysis` for one investment.

    Gross rent is anchored to the property value at handover (rent only
    flows once the unit is delivered). Total capital invested is the full
    price plus entry costs.

    Example:
        >>> analysis = HoldAnalyzer.from_inputs(inputs).analyze()
        >>> analysis.years_to_break_even
    """

    appreciation: AppreciationModel
    entry_costs: PositiveFloat = 0.0
    rental_yield_percent: Percentage = 7.0
    annual_service_charges: PositiveFloat = 0.0
    short_term_rental: Optional[ShortTermRentalConfig] = None
    settings: HoldSettings = Field(default_factory=HoldSettings)

    @classmethod
    def from_inputs(
        cls, inputs: InvestmentInputs, settings: Optional[EngineSettings] = None
    ) -> "HoldAnalyzer":
        settings = settings or EngineSettings()
        return cls(
            appreciation=AppreciationModel.from_inputs(inputs, settings=settings),
            entry_costs=inputs.entry_costs,
            rental_yield_percent=inputs.rental_yield_percent,
            annual_service_charges=inputs.annual_service_charges,
            short_term_rental=inputs.short_term_rental,
            settings=settings.hold,
        )

    @property
    def base_price(self) -> float:
        return self.appreciation.base_price

    @property
    def total_capital_invested(self) -> float:
        return self.base_price + self.entry_costs

    @property
    def property_value_at_handover(self) -> float:
        return self.appreciation.value_at(self.appreciation.total_months)

    def years_to_recover(self, amount: float, net_annual_income: float) -> float:
        """Years of net income needed to recover `amount`; sentinel when income <= 0."""
        if net_annual_income <= 0:
            return self.settings.not_applicable_years
        return amount / net_annual_income

    def _yield_on_capital(self, net_annual_income: float) -> float:
        capital = self.total_capital_invested
        return net_annual_income / capital * 100 if capital > 0 else 0.0

    def short_term_net_income(self, gross_annual_income: float) -> float:
        """Short-term income after operating expenses, management fee and service charges."""
        config = self.short_term_rental
        expenses = gross_annual_income * config.expense_percent / 100
        return gross_annual_income - expenses - self.annual_service_charges

    def analyze(self) -> HoldAnalysis:
        value_at_handover = self.property_value_at_handover
        gross = value_at_handover * self.rental_yield_percent / 100
        net = gross - self.annual_service_charges
        capital = self.total_capital_invested

        if net <= 0:
            logger.debug(
                f"Net annual rent {net:,.0f} is not positive; horizons reported as "
                f"{self.settings.not_applicable_years:g} years"
            )

        fields = dict(
            total_capital_invested=capital,
            property_value_at_handover=value_at_handover,
            gross_annual_rent=gross,
            annual_service_charges=self.annual_service_charges,
            net_annual_rent=net,
            rental_yield_on_capital=self._yield_on_capital(net),
            years_to_break_even=self.years_to_recover(capital, net),
            years_to_pay_off=self.years_to_recover(self.base_price, net),
        )

        if self.short_term_rental is not None:
            str_gross = self.short_term_rental.gross_annual_income
            str_net = self.short_term_net_income(str_gross)
            fields.update(
                str_gross_annual_rent=str_gross,
                str_net_annual_rent=str_net,
                str_yield_on_capital=self._yield_on_capital(str_net),
                str_years_to_break_even=self.years_to_recover(capital, str_net),
                str_years_to_pay_off=self.years_to_recover(self.base_price, str_net),
            )

        return HoldAnalysis(**fields)
