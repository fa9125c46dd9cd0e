# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Investment analysis result container.

Bundles every derived record of one simulation run so presentation layers
can read them from a single object.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import List

import pandas as pd

from ..core.primitives import EngineSettings
from ..inputs import InvestmentInputs
from ..payments import EquityAccumulator, EquityAtExitResult, PaymentSchedule
from ..valuation import AppreciationModel, ExitScenario, ExitScenarioCalculator
from .hold import HoldAnalysis
from .projection import YearlyProjection, projections_to_dataframe


@dataclass
class InvestmentAnalysisResult:
    """
    Results of a full off-plan investment analysis.

    Attributes:
        inputs: Input record the analysis was run on
        settings: Engine settings used
        total_months: Construction period, booking to handover
        schedule: Payment schedule derived from the inputs
        exit_calculator: Calculator holding the appreciation model and equity accumulator
        exit_scenarios: Evaluated exit scenarios, in requested order
        hold_analysis: Rental hold economics
        yearly_projections: Year-by-year value and income rows
        threshold_met_month: First month the literal plan clears the exit threshold
    """

    # Core inputs
    inputs: InvestmentInputs
    settings: EngineSettings
    total_months: int

    # Structural derivations
    schedule: PaymentSchedule
    exit_calculator: ExitScenarioCalculator

    # Investor-facing metrics
    exit_scenarios: List[ExitScenario]
    hold_analysis: HoldAnalysis
    yearly_projections: List[YearlyProjection]
    threshold_met_month: int

    @property
    def appreciation(self) -> AppreciationModel:
        return self.exit_calculator.appreciation

    @property
    def accumulator(self) -> EquityAccumulator:
        return self.exit_calculator.accumulator

    def equity_at_exit(self, exit_month: int) -> EquityAtExitResult:
        """Threshold-enforced equity position at any exit month."""
        return self.accumulator.equity_at_exit(exit_month)

    @cached_property
    def handover_scenario(self) -> ExitScenario:
        """Exit scenario at handover (evaluated on demand if not requested)."""
        for scenario in self.exit_scenarios:
            if scenario.exit_month == self.total_months:
                return scenario
        return self.exit_calculator.scenario(self.total_months)

    @cached_property
    def scenarios_df(self) -> pd.DataFrame:
        return ExitScenarioCalculator.to_dataframe(self.exit_scenarios)

    @cached_property
    def projections_df(self) -> pd.DataFrame:
        return projections_to_dataframe(self.yearly_projections)

    @cached_property
    def payments_df(self) -> pd.DataFrame:
        return self.schedule.to_dataframe()
