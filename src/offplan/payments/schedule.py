# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment plan structure and derived totals.

The schedule holds the downpayment, the ordered milestones and the handover
share, and resolves construction-triggered milestones to calendar months via
the construction S-curve. It is the structural input to the equity
accumulator.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, List, Optional, Tuple

import pandas as pd
from pydantic import Field, model_validator

from ..core.primitives import (
    CurveMapper,
    EngineSettings,
    Model,
    PaymentSettings,
    PositiveFloat,
    StrictlyPositiveFloat,
    TriggerKindEnum,
)
from .milestone import PaymentMilestone

if TYPE_CHECKING:
    from ..inputs import InvestmentInputs

logger = logging.getLogger(__name__)

HANDOVER_MILESTONE_ID = "handover"
DOWNPAYMENT_MILESTONE_ID = "downpayment"


class PaymentEvent(Model):
    """A single dated payment of the plan, resolved to a month offset from booking."""

    month: int
    percent: float
    amount: float
    label: str
    milestone_id: str


class PaymentSchedule(Model):
    """
    Downpayment, milestones and handover share of one payment plan.

    Handover policy: when downpayment plus active milestones already add up to
    (approximately) 100% the plan is fully itemized and handover contributes
    nothing; otherwise handover absorbs the remainder. With a post-handover
    plan the handover share is `on_handover_percent` instead, and the
    post-handover milestones fall due `trigger_value` months after handover.

    Milestones with a non-positive percent or no trigger kind are ignored.

    Attributes:
        base_price: Purchase price
        total_months: Construction period, booking to handover
        downpayment_percent: Share paid at booking
        milestones: Pre-handover milestones
        has_post_handover_plan: Whether part of the price is paid after handover
        on_handover_percent: Share paid at handover under a post-handover plan
        post_handover_milestones: Milestones timed in months after handover
        transaction_fee_percent: Fee on price paid at booking
        fixed_fees_total: Fixed fee amounts paid at booking
        curve: S-curve used to resolve construction-triggered milestones
        settings: Payment settings (itemization tolerance)
    """

    base_price: StrictlyPositiveFloat
    total_months: int = Field(..., gt=0)
    downpayment_percent: float
    milestones: Tuple[PaymentMilestone, ...] = ()
    has_post_handover_plan: bool = False
    on_handover_percent: float = 0.0
    post_handover_milestones: Tuple[PaymentMilestone, ...] = ()
    transaction_fee_percent: PositiveFloat = 0.0
    fixed_fees_total: PositiveFloat = 0.0
    curve: CurveMapper = Field(default_factory=CurveMapper)
    settings: PaymentSettings = Field(default_factory=PaymentSettings)

    @model_validator(mode="after")
    def warn_on_over_allocation(self) -> "PaymentSchedule":
        over = self.allocated_percent - 100
        if over >= self.settings.itemized_tolerance_percent:
            logger.warning(
                f"Payment plan allocates {self.allocated_percent:.2f}% of price before handover; "
                "handover share floored at 0%"
            )
        return self

    @classmethod
    def from_inputs(
        cls,
        inputs: "InvestmentInputs",
        settings: Optional[EngineSettings] = None,
        curve: Optional[CurveMapper] = None,
    ) -> "PaymentSchedule":
        """Build the schedule described by an input record."""
        settings = settings or EngineSettings()
        return cls(
            base_price=inputs.base_price,
            total_months=inputs.total_months,
            downpayment_percent=inputs.downpayment_percent,
            milestones=inputs.milestones,
            has_post_handover_plan=inputs.has_post_handover_plan,
            on_handover_percent=inputs.on_handover_percent,
            post_handover_milestones=inputs.post_handover_milestones,
            transaction_fee_percent=inputs.transaction_fee_percent,
            fixed_fees_total=inputs.fixed_fees_total,
            curve=curve or CurveMapper(),
            settings=settings.payments,
        )

    # === MILESTONE VIEWS ===

    @property
    def active_milestones(self) -> Tuple[PaymentMilestone, ...]:
        return tuple(m for m in self.milestones if m.is_active)

    @property
    def active_post_handover_milestones(self) -> Tuple[PaymentMilestone, ...]:
        if not self.has_post_handover_plan:
            return ()
        return tuple(m for m in self.post_handover_milestones if m.is_active)

    @property
    def sorted_milestones(self) -> List[PaymentMilestone]:
        """Active milestones by trigger value; time-based first when values tie."""
        return sorted(
            self.active_milestones,
            key=lambda m: (m.trigger_value, 0 if m.kind == TriggerKindEnum.TIME else 1),
        )

    def resolved_month(self, milestone: PaymentMilestone) -> int:
        """Calendar month (from booking) at which a pre-handover milestone falls due."""
        if milestone.kind == TriggerKindEnum.CONSTRUCTION:
            return self.curve.construction_to_month(milestone.trigger_value, self.total_months)
        # first whole month at which trigger_value <= month holds
        return math.ceil(milestone.trigger_value)

    def post_handover_month(self, milestone: PaymentMilestone) -> int:
        """Calendar month (from booking) of a post-handover milestone."""
        return self.total_months + math.ceil(milestone.trigger_value)

    # === PERCENTAGES ===

    @property
    def milestone_percent_total(self) -> float:
        return sum(m.payment_percent for m in self.active_milestones)

    @property
    def allocated_percent(self) -> float:
        """Downpayment plus active pre-handover milestones."""
        return self.downpayment_percent + self.milestone_percent_total

    @property
    def is_fully_itemized(self) -> bool:
        return abs(self.allocated_percent - 100) < self.settings.itemized_tolerance_percent

    @property
    def handover_percent(self) -> float:
        if self.is_fully_itemized:
            return 0.0
        if self.has_post_handover_plan:
            return self.on_handover_percent
        return max(0.0, 100 - self.allocated_percent)

    @property
    def post_handover_percent(self) -> float:
        return sum(m.payment_percent for m in self.active_post_handover_milestones)

    # === AMOUNTS ===

    def milestone_amount(self, milestone: PaymentMilestone) -> float:
        return milestone.amount(self.base_price)

    @property
    def downpayment_amount(self) -> float:
        return self.base_price * self.downpayment_percent / 100

    @property
    def journey_subtotal(self) -> float:
        """Sum of the pre-handover milestone amounts (excluding downpayment)."""
        return sum(self.milestone_amount(m) for m in self.active_milestones)

    @property
    def pre_handover_amount(self) -> float:
        return self.downpayment_amount + self.journey_subtotal

    @property
    def handover_amount(self) -> float:
        return self.base_price * self.handover_percent / 100

    @property
    def post_handover_amount(self) -> float:
        return sum(self.milestone_amount(m) for m in self.active_post_handover_milestones)

    @property
    def entry_costs(self) -> float:
        return self.base_price * self.transaction_fee_percent / 100 + self.fixed_fees_total

    @property
    def entry_total(self) -> float:
        """Cash due at booking: downpayment plus entry costs."""
        return self.downpayment_amount + self.entry_costs

    @property
    def grand_total(self) -> float:
        return self.base_price + self.entry_costs

    def handover_milestone(self) -> PaymentMilestone:
        """The handover payment expressed as a time-triggered milestone."""
        return PaymentMilestone(
            id=HANDOVER_MILESTONE_ID,
            kind=TriggerKindEnum.TIME,
            trigger_value=self.total_months,
            payment_percent=self.handover_percent,
            label="Handover",
        )

    # === EVENTS ===

    def payment_events(self) -> List[PaymentEvent]:
        """Every payment of the plan in calendar order."""
        events = [
            PaymentEvent(
                month=0,
                percent=self.downpayment_percent,
                amount=self.downpayment_amount,
                label="Downpayment",
                milestone_id=DOWNPAYMENT_MILESTONE_ID,
            )
        ]
        for m in self.sorted_milestones:
            events.append(
                PaymentEvent(
                    month=self.resolved_month(m),
                    percent=m.payment_percent,
                    amount=self.milestone_amount(m),
                    label=m.label or m.id,
                    milestone_id=m.id,
                )
            )
        if self.handover_amount > 0:
            events.append(
                PaymentEvent(
                    month=self.total_months,
                    percent=self.handover_percent,
                    amount=self.handover_amount,
                    label="Handover",
                    milestone_id=HANDOVER_MILESTONE_ID,
                )
            )
        for m in self.active_post_handover_milestones:
            events.append(
                PaymentEvent(
                    month=self.post_handover_month(m),
                    percent=m.payment_percent,
                    amount=self.milestone_amount(m),
                    label=m.label or m.id,
                    milestone_id=m.id,
                )
            )
        # stable sort keeps plan order within a month
        return sorted(events, key=lambda e: e.month)

    def to_dataframe(self) -> pd.DataFrame:
        """Payment events with a running cumulative total."""
        df = pd.DataFrame([e.model_dump() for e in self.payment_events()])
        df["cumulative_amount"] = df["amount"].cumsum()
        df["cumulative_percent"] = df["percent"].cumsum()
        return df
