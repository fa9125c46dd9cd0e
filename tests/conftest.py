# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Offplan testing.

Provides a reference investment (1,000,000 price, 24-month construction,
20% downpayment, one 10% milestone at 50% construction) and a factory for
building variations of it.
"""

from __future__ import annotations

from typing import Callable

import pytest

from offplan.inputs import InvestmentInputs
from offplan.payments import PaymentMilestone


def _reference_data() -> dict:
    return dict(
        base_price=1_000_000,
        booking_month=1,
        booking_year=2025,
        handover_month=1,
        handover_year=2027,
        downpayment_percent=20,
        milestones=(
            PaymentMilestone(id="m-50", kind="construction", trigger_value=50, payment_percent=10),
        ),
    )


@pytest.fixture
def make_inputs() -> Callable[..., InvestmentInputs]:
    """
    Factory for the reference investment with field overrides.

    Example:
        >>> inputs = make_inputs(minimum_exit_threshold=20)
        >>> inputs.total_months
        24
    """

    def _make(**overrides) -> InvestmentInputs:
        data = _reference_data()
        data.update(overrides)
        return InvestmentInputs(**data)

    return _make


@pytest.fixture
def reference_inputs(make_inputs) -> InvestmentInputs:
    """Reference investment with the default 30% exit threshold."""
    return make_inputs()
