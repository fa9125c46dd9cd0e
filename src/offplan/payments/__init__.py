# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment plans: milestones, the payment schedule and equity accumulation.
"""

from .equity import AdvancedPayment, EquityAccumulator, EquityAtExitResult
from .milestone import PaymentMilestone
from .schedule import (
    DOWNPAYMENT_MILESTONE_ID,
    HANDOVER_MILESTONE_ID,
    PaymentEvent,
    PaymentSchedule,
)

__all__ = [
    "AdvancedPayment",
    "DOWNPAYMENT_MILESTONE_ID",
    "EquityAccumulator",
    "EquityAtExitResult",
    "HANDOVER_MILESTONE_ID",
    "PaymentEvent",
    "PaymentMilestone",
    "PaymentSchedule",
]
