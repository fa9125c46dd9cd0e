# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Equity deployed at exit, with minimum-exit-threshold enforcement.

Answers "how much has the investor paid by month X", and, when the literal
plan falls short of the resale threshold, which future milestones must be
settled early (and by how much) to clear it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Tuple

from pydantic import Field

from ..core.primitives import EngineSettings, Model, TriggerKindEnum
from .milestone import PaymentMilestone
from .schedule import PaymentSchedule

if TYPE_CHECKING:
    from ..inputs import InvestmentInputs

logger = logging.getLogger(__name__)


class AdvancedPayment(Model):
    """A milestone pulled forward to satisfy the exit threshold."""

    milestone: PaymentMilestone
    month_triggered: int = Field(..., description="Month the milestone would normally fall due")
    amount_advanced: float = Field(..., description="Portion of the milestone paid early")


class EquityAtExitResult(Model):
    """
    Equity position at a given exit month.

    Attributes:
        plan_equity: Paid under the literal schedule by the exit month
        threshold_equity: Required by the minimum exit threshold
        final_equity: max(plan_equity, threshold_equity)
        advance_required: Shortfall that must be paid early (0 when met)
        advanced_payments: Milestones pulled forward, in the order advanced
        is_threshold_met: Whether the literal plan already clears the threshold
        plan_equity_percent: plan_equity as a percent of base price
    """

    plan_equity: float
    threshold_equity: float
    final_equity: float
    advance_required: float
    advanced_payments: Tuple[AdvancedPayment, ...] = ()
    is_threshold_met: bool
    plan_equity_percent: float


class EquityAccumulator(Model):
    """
    Computes equity paid at any exit month under a payment schedule.

    A threshold of zero or below disables enforcement; an unset threshold
    falls back to `PaymentSettings.default_exit_threshold_percent`.

    Example:
        >>> acc = EquityAccumulator(schedule=schedule, minimum_exit_threshold=30)
        >>> result = acc.equity_at_exit(6)
        >>> result.final_equity >= result.threshold_equity
        True
    """

    schedule: PaymentSchedule
    minimum_exit_threshold: Optional[float] = None

    @classmethod
    def from_inputs(
        cls, inputs: "InvestmentInputs", settings: Optional[EngineSettings] = None
    ) -> "EquityAccumulator":
        """Build an accumulator over the schedule described by an input record."""
        schedule = PaymentSchedule.from_inputs(inputs, settings=settings)
        return cls(schedule=schedule, minimum_exit_threshold=inputs.minimum_exit_threshold)

    @property
    def threshold_percent(self) -> float:
        if self.minimum_exit_threshold is None:
            return self.schedule.settings.default_exit_threshold_percent
        return max(0.0, self.minimum_exit_threshold)

    @property
    def threshold_equity(self) -> float:
        return self.schedule.base_price * self.threshold_percent / 100

    def _is_triggered(
        self, milestone: PaymentMilestone, exit_month: float, construction_percent: float
    ) -> bool:
        if milestone.kind == TriggerKindEnum.TIME:
            return milestone.trigger_value <= exit_month
        return construction_percent >= milestone.trigger_value

    def _exit_construction_percent(self, exit_month: float) -> float:
        if exit_month > self.schedule.total_months:
            return 100.0
        return self.schedule.curve.month_to_construction(exit_month, self.schedule.total_months)

    def plan_equity_at(self, exit_month: float) -> float:
        """Equity paid by `exit_month` under the literal schedule."""
        schedule = self.schedule
        total_months = schedule.total_months
        construction_percent = self._exit_construction_percent(exit_month)

        equity = schedule.downpayment_amount
        for milestone in schedule.active_milestones:
            if self._is_triggered(milestone, exit_month, construction_percent):
                equity += schedule.milestone_amount(milestone)

        if exit_month >= total_months:
            equity += schedule.handover_amount

        if exit_month > total_months:
            months_after_handover = exit_month - total_months
            for milestone in schedule.active_post_handover_milestones:
                if milestone.trigger_value <= months_after_handover:
                    equity += schedule.milestone_amount(milestone)
        return equity

    def _pending_milestones(self, exit_month: float) -> List[Tuple[int, PaymentMilestone]]:
        """Untriggered active milestones with their due month, earliest first."""
        construction_percent = self._exit_construction_percent(exit_month)
        pending = [
            (self.schedule.resolved_month(m), m)
            for m in self.schedule.active_milestones
            if not self._is_triggered(m, exit_month, construction_percent)
        ]
        # sorted() is stable, so milestones due in the same month keep plan order
        return sorted(pending, key=lambda item: item[0])

    def equity_at_exit(self, exit_month: float) -> EquityAtExitResult:
        """
        Equity deployed at `exit_month`, enforcing the minimum exit threshold.

        When the literal plan is short of the threshold, untriggered milestones
        are advanced in order of their due month, each contributing at most its
        own amount, until the threshold is covered. If milestones run out before
        handover under a standard plan, the handover payment is advanced by the
        remaining amount needed.

        Args:
            exit_month: Months from booking at which the investor exits

        Returns:
            EquityAtExitResult with plan, threshold and final equity
        """
        schedule = self.schedule
        base_price = schedule.base_price
        total_months = schedule.total_months

        plan_equity = self.plan_equity_at(exit_month)
        threshold_equity = self.threshold_equity
        plan_equity_percent = plan_equity / base_price * 100

        is_threshold_met = plan_equity >= threshold_equity
        advance_required = 0.0 if is_threshold_met else threshold_equity - plan_equity
        advanced: List[AdvancedPayment] = []

        if not is_threshold_met:
            accumulated = plan_equity
            for month_triggered, milestone in self._pending_milestones(exit_month):
                if accumulated >= threshold_equity:
                    break
                amount = schedule.milestone_amount(milestone)
                advanced.append(
                    AdvancedPayment(
                        milestone=milestone,
                        month_triggered=month_triggered,
                        amount_advanced=min(amount, threshold_equity - accumulated),
                    )
                )
                accumulated += amount

            handover_amount = schedule.handover_amount
            if (
                accumulated < threshold_equity
                and exit_month < total_months
                and not schedule.has_post_handover_plan
                and handover_amount > 0
            ):
                advanced.append(
                    AdvancedPayment(
                        milestone=schedule.handover_milestone(),
                        month_triggered=total_months,
                        amount_advanced=min(handover_amount, threshold_equity - accumulated),
                    )
                )

            logger.debug(
                f"Exit at month {exit_month}: plan equity {plan_equity:,.0f} below threshold "
                f"{threshold_equity:,.0f}; advancing {len(advanced)} payment(s)"
            )

        return EquityAtExitResult(
            plan_equity=plan_equity,
            threshold_equity=threshold_equity,
            final_equity=max(plan_equity, threshold_equity),
            advance_required=advance_required,
            advanced_payments=tuple(advanced),
            is_threshold_met=is_threshold_met,
            plan_equity_percent=plan_equity_percent,
        )

    def month_when_threshold_met(self) -> int:
        """
        First month at which the literal plan reaches the threshold.

        Uses the same trigger rules as `plan_equity_at`, so `equity_at_exit`
        reports the threshold as met at the returned month. Returns 0 when the
        downpayment alone clears it, and the handover month when the plan
        never does.
        """
        threshold_equity = self.threshold_equity
        last_month = max(e.month for e in self.schedule.payment_events())
        # rounded construction months can precede the actual trigger by one month
        for month in range(0, last_month + 2):
            if self.plan_equity_at(month) >= threshold_equity:
                return month
        return self.schedule.total_months
