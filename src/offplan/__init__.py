# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offplan - Off-Plan Property Investment Simulation Engine

Deterministic simulation of an off-plan purchase: capital committed under a
staged payment plan, property value at any exit point, resale profit and
return on equity, and rental hold economics after handover.

Key Entry Points:
- offplan.analysis.analyze() - Full analysis of one input record
- offplan.inputs.InvestmentInputs - Validated input record
- offplan.payments.* - Payment schedule and equity accumulation
- offplan.valuation.* - Appreciation, zone profiles and exit scenarios

Example Usage:
    ```python
    from offplan.analysis import analyze
    from offplan.inputs import InvestmentInputs
    from offplan.payments import PaymentMilestone

    inputs = InvestmentInputs(
        base_price=1_000_000,
        booking_month=1,
        booking_year=2025,
        handover_month=1,
        handover_year=2027,
        milestones=(
            PaymentMilestone(kind="construction", trigger_value=50, payment_percent=10),
        ),
    )
    result = analyze(inputs)
    print(result.scenarios_df[["exit_price", "equity_deployed", "true_roe"]])
    ```
"""

import importlib
import logging

# Library code never configures handlers; applications attach their own.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "analysis",
    "core",
    "inputs",
    "payments",
    "valuation",
]


_LAZY_MODULES = {
    "analysis": "offplan.analysis",
    "core": "offplan.core",
    "inputs": "offplan.inputs",
    "payments": "offplan.payments",
    "valuation": "offplan.valuation",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'offplan' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
