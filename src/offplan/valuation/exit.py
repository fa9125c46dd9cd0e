# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Exit Scenario Valuation - Resale Returns Before and At Handover

Combines the phased appreciation model (exit price) with the equity
accumulator (capital deployed) to produce investor-facing profit and return
on equity for one or many candidate exit months.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple

import pandas as pd
from pydantic import Field

from ..core.primitives import CurveMapper, EngineSettings, ExitSettings, Model, PositiveFloat
from ..payments import AdvancedPayment, EquityAccumulator
from .appreciation import AppreciationModel

if TYPE_CHECKING:
    from ..inputs import InvestmentInputs

logger = logging.getLogger(__name__)


class ExitScenario(Model):
    """
    Returns from selling at a given month after booking.

    All amounts are in the currency of the base price; `*_roe` and
    `*_percent` fields are plain percentages.
    """

    # === TIMING & PRICE ===
    exit_month: int
    exit_price: float
    base_price: float
    appreciation_percent: float
    is_handover: bool

    # === CAPITAL ===
    equity_deployed: float
    equity_percent: float
    plan_equity_percent: float
    entry_costs: float
    total_capital_deployed: float

    # === PROFIT ===
    profit: float
    true_profit: float
    agent_commission: float
    noc_fee: float
    exit_costs: float
    net_profit: float

    # === RETURNS ===
    roe: float
    true_roe: float
    annualized_roe: float
    net_roe: float
    net_annualized_roe: float

    # === THRESHOLD ===
    is_threshold_met: bool
    advance_required: float
    advanced_payments: Tuple[AdvancedPayment, ...] = ()


def _annualize(percent: float, exit_month: int) -> float:
    if exit_month <= 0:
        return 0.0
    return percent / (exit_month / 12)


class ExitScenarioCalculator(Model):
    """
    Evaluates exit scenarios for one investment.

    Equity deployed is the threshold-enforced final equity: an investor
    cannot exit having paid less than the minimum resale threshold. Entry
    costs are always counted as paid, whatever the exit month.

    Attributes:
        appreciation: Property value model
        accumulator: Equity accumulator over the payment schedule
        entry_costs: Fee on price plus fixed fees, paid at booking
        exit_agent_commission_enabled: Charge agent commission on the exit price
        exit_noc_fee: Fixed developer fee charged on resale
        settings: Exit settings (commission rate, scenario cadence)

    Example:
        ```python
        calculator = ExitScenarioCalculator.from_inputs(inputs)
        scenarios = calculator.scenarios(calculator.default_exit_months())
        df = ExitScenarioCalculator.to_dataframe(scenarios)
        ```
    """

    appreciation: AppreciationModel
    accumulator: EquityAccumulator
    entry_costs: PositiveFloat = 0.0
    exit_agent_commission_enabled: bool = False
    exit_noc_fee: PositiveFloat = 0.0
    settings: ExitSettings = Field(default_factory=ExitSettings)

    @classmethod
    def from_inputs(
        cls, inputs: "InvestmentInputs", settings: Optional[EngineSettings] = None
    ) -> "ExitScenarioCalculator":
        settings = settings or EngineSettings()
        return cls(
            appreciation=AppreciationModel.from_inputs(inputs, settings=settings),
            accumulator=EquityAccumulator.from_inputs(inputs, settings=settings),
            entry_costs=inputs.entry_costs,
            exit_agent_commission_enabled=inputs.exit_agent_commission_enabled,
            exit_noc_fee=inputs.exit_noc_fee,
            settings=settings.exit,
        )

    @property
    def base_price(self) -> float:
        return self.appreciation.base_price

    @property
    def total_months(self) -> int:
        return self.accumulator.schedule.total_months

    def default_exit_months(self) -> List[int]:
        """Exit months at the configured cadence before handover, plus handover itself."""
        step = self.settings.scenario_step_months
        months = list(range(step, self.total_months, step))
        months.append(self.total_months)
        return months

    def scenario(self, exit_month: int) -> ExitScenario:
        """
        Evaluate a single exit.

        Args:
            exit_month: Months from booking to the sale (>= 0)

        Returns:
            ExitScenario with price, capital, profit and return metrics

        Raises:
            ValueError: If exit_month is negative
        """
        if exit_month < 0:
            raise ValueError(f"exit_month must be non-negative, got {exit_month}")

        base_price = self.base_price
        exit_price = self.appreciation.value_at(exit_month)
        equity = self.accumulator.equity_at_exit(exit_month)

        equity_deployed = equity.final_equity
        entry_costs = self.entry_costs
        total_capital = equity_deployed + entry_costs

        profit = exit_price - base_price
        true_profit = profit - entry_costs

        agent_commission = (
            exit_price * self.settings.agent_commission_percent / 100
            if self.exit_agent_commission_enabled
            else 0.0
        )
        noc_fee = self.exit_noc_fee
        exit_costs = agent_commission + noc_fee
        net_profit = true_profit - exit_costs

        roe = profit / equity_deployed * 100 if equity_deployed > 0 else 0.0
        true_roe = true_profit / total_capital * 100 if total_capital > 0 else 0.0
        net_roe = net_profit / total_capital * 100 if total_capital > 0 else 0.0

        logger.debug(
            f"Exit month {exit_month}: price {exit_price:,.0f}, equity {equity_deployed:,.0f}, "
            f"true ROE {true_roe:.2f}%"
        )

        return ExitScenario(
            exit_month=exit_month,
            exit_price=exit_price,
            base_price=base_price,
            appreciation_percent=profit / base_price * 100,
            is_handover=CurveMapper.is_handover_exit(
                exit_month, self.total_months, self.settings.handover_tolerance_months
            ),
            equity_deployed=equity_deployed,
            equity_percent=equity_deployed / base_price * 100,
            plan_equity_percent=equity.plan_equity_percent,
            entry_costs=entry_costs,
            total_capital_deployed=total_capital,
            profit=profit,
            true_profit=true_profit,
            agent_commission=agent_commission,
            noc_fee=noc_fee,
            exit_costs=exit_costs,
            net_profit=net_profit,
            roe=roe,
            true_roe=true_roe,
            annualized_roe=_annualize(true_roe, exit_month),
            net_roe=net_roe,
            net_annualized_roe=_annualize(net_roe, exit_month),
            is_threshold_met=equity.is_threshold_met,
            advance_required=equity.advance_required,
            advanced_payments=equity.advanced_payments,
        )

    def scenarios(self, exit_months: Optional[Iterable[int]] = None) -> List[ExitScenario]:
        """Evaluate several exits; defaults to `default_exit_months()`."""
        months = self.default_exit_months() if exit_months is None else exit_months
        return [self.scenario(m) for m in months]

    @staticmethod
    def to_dataframe(scenarios: Sequence[ExitScenario]) -> pd.DataFrame:
        """Scenario table indexed by exit month (advanced payment detail excluded)."""
        rows = [s.model_dump(exclude={"advanced_payments"}) for s in scenarios]
        df = pd.DataFrame(rows)
        if not df.empty:
            df = df.set_index("exit_month")
        return df
