# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Investment Analysis API

Single public entry point that runs every component of the engine over one
input record and returns the bundled results.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.primitives import EngineSettings
from ..inputs import InvestmentInputs
from ..payments import EquityAccumulator, PaymentSchedule
from ..valuation import AppreciationModel, ExitScenarioCalculator
from .hold import HoldAnalyzer
from .projection import build_yearly_projections
from .results import InvestmentAnalysisResult

logger = logging.getLogger(__name__)


def analyze(
    inputs: InvestmentInputs,
    settings: Optional[EngineSettings] = None,
    exit_months: Optional[Iterable[int]] = None,
) -> InvestmentAnalysisResult:
    """
    Run the full simulation for one investment.

    Workflow:
      1) Derive the payment schedule and appreciation model
      2) Evaluate exit scenarios (default cadence plus handover when omitted)
      3) Compute rental hold economics and the yearly projection

    Args:
        inputs: Validated investment input record
        settings: Engine settings; defaults are used when omitted
        exit_months: Exit months to evaluate; defaults to every
            `ExitSettings.scenario_step_months` before handover plus handover

    Returns:
        InvestmentAnalysisResult with all derived records
    """
    settings = settings or EngineSettings()

    # Step 1: Structural derivation
    schedule = PaymentSchedule.from_inputs(inputs, settings=settings)
    accumulator = EquityAccumulator(
        schedule=schedule, minimum_exit_threshold=inputs.minimum_exit_threshold
    )
    appreciation = AppreciationModel.from_inputs(inputs, settings=settings)

    # Step 2: Exit scenarios
    calculator = ExitScenarioCalculator(
        appreciation=appreciation,
        accumulator=accumulator,
        entry_costs=inputs.entry_costs,
        exit_agent_commission_enabled=inputs.exit_agent_commission_enabled,
        exit_noc_fee=inputs.exit_noc_fee,
        settings=settings.exit,
    )
    exit_scenarios = calculator.scenarios(exit_months)

    # Step 3: Hold analytics
    hold_analysis = HoldAnalyzer(
        appreciation=appreciation,
        entry_costs=inputs.entry_costs,
        rental_yield_percent=inputs.rental_yield_percent,
        annual_service_charges=inputs.annual_service_charges,
        short_term_rental=inputs.short_term_rental,
        settings=settings.hold,
    ).analyze()
    yearly_projections = build_yearly_projections(inputs, settings=settings)

    logger.debug(
        f"Analyzed {inputs.base_price:,.0f} over {schedule.total_months} months: "
        f"{len(exit_scenarios)} exit scenario(s)"
    )

    return InvestmentAnalysisResult(
        inputs=inputs,
        settings=settings,
        total_months=schedule.total_months,
        schedule=schedule,
        exit_calculator=calculator,
        exit_scenarios=exit_scenarios,
        hold_analysis=hold_analysis,
        yearly_projections=yearly_projections,
        threshold_met_month=accumulator.month_when_threshold_met(),
    )
