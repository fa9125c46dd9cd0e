# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Investment input record.

`InvestmentInputs` is the single validated record every calculation reads.
It is built by an external normalization layer (or directly by callers) and
never mutated by the engine. Validation fails fast on fundamentally invalid
records; tolerable editing artefacts such as disabled milestones pass through
and are ignored downstream.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import Field, model_validator

from .core.primitives import (
    AnnualRatePercent,
    ConstructionTimeline,
    Model,
    MonthOfYear,
    Percentage,
    PositiveFloat,
    PositiveInt,
    QuarterOfYear,
    StrictlyPositiveFloat,
    ValidationMixin,
    quarter_to_month,
)
from .payments.milestone import PaymentMilestone


class ShortTermRentalConfig(Model):
    """Assumptions for a short-term (holiday let) rental comparison."""

    average_daily_rate: PositiveFloat = Field(default=800.0, description="Average nightly rate")
    occupancy_percent: Percentage = Field(default=70.0, description="Share of nights booked")
    operating_expense_percent: Percentage = Field(
        default=25.0, description="Operating expenses as a share of gross income"
    )
    management_fee_percent: Percentage = Field(
        default=15.0, description="Management fee as a share of gross income"
    )
    adr_growth_rate: AnnualRatePercent = Field(
        default=3.0, description="Annual growth of the average daily rate (%)"
    )

    @property
    def gross_annual_income(self) -> float:
        return self.average_daily_rate * 365 * self.occupancy_percent / 100

    @property
    def expense_percent(self) -> float:
        return self.operating_expense_percent + self.management_fee_percent


class InvestmentInputs(Model, ValidationMixin):
    """
    Complete input record for one off-plan investment simulation.

    Percentages are plain numbers in [0, 100]; amounts are in the currency of
    `base_price`. Handover may be given as a month or as a quarter, never both.

    Example:
        ```python
        inputs = InvestmentInputs(
            base_price=1_000_000,
            booking_month=1,
            booking_year=2025,
            handover_month=1,
            handover_year=2027,
            downpayment_percent=20,
            milestones=(
                PaymentMilestone(kind="construction", trigger_value=50, payment_percent=10),
            ),
        )
        inputs.total_months  # 24
        ```
    """

    # === PRICE & TIMELINE ===
    base_price: StrictlyPositiveFloat = Field(..., description="Purchase price")
    booking_month: MonthOfYear
    booking_year: int
    handover_month: Optional[MonthOfYear] = None
    handover_quarter: Optional[QuarterOfYear] = None
    handover_year: int

    # === PAYMENT PLAN ===
    downpayment_percent: Percentage = 20.0
    milestones: Tuple[PaymentMilestone, ...] = ()
    has_post_handover_plan: bool = False
    on_handover_percent: Percentage = Field(
        default=0.0, description="Share paid at handover when a post-handover plan is used"
    )
    post_handover_milestones: Tuple[PaymentMilestone, ...] = Field(
        default=(), description="Milestones whose trigger value counts months after handover"
    )
    minimum_exit_threshold: Optional[float] = Field(
        default=None,
        le=100,
        description="Share of price that must be paid before resale; <= 0 disables the check",
    )

    # === TRANSACTION COSTS ===
    transaction_fee_percent: Percentage = Field(default=4.0, description="Registration fee on price")
    fixed_fees: Dict[str, PositiveFloat] = Field(
        default_factory=dict, description="Fixed admin / registration fee amounts by label"
    )
    exit_agent_commission_enabled: bool = False
    exit_noc_fee: PositiveFloat = Field(default=0.0, description="Developer NOC fee paid on resale")

    # === RENTAL ===
    rental_yield_percent: Percentage = 7.0
    service_charge_rate: PositiveFloat = Field(default=0.0, description="Service charge per area unit per year")
    unit_area: PositiveFloat = 0.0
    rent_growth_rate: AnnualRatePercent = 4.0
    short_term_rental: Optional[ShortTermRentalConfig] = None

    # === APPRECIATION ===
    construction_appreciation: AnnualRatePercent = 12.0
    growth_appreciation: AnnualRatePercent = 8.0
    mature_appreciation: AnnualRatePercent = 4.0
    growth_period_years: PositiveInt = 5
    value_differentiators: Tuple[str, ...] = ()

    # === VALIDATION ===

    @model_validator(mode="before")
    @classmethod
    def check_handover_definition(cls, data: Any) -> Any:
        if isinstance(data, dict):
            cls.validate_either_or_required(
                data,
                "handover_month",
                "handover_quarter",
                "Handover must be given as either 'handover_month' or 'handover_quarter', but not both.",
            )
        return data

    @model_validator(mode="after")
    def check_timeline(self) -> "InvestmentInputs":
        self.validate_month_ordering(
            self.booking_year,
            self.booking_month,
            self.handover_year,
            self.resolved_handover_month,
            "Handover must fall after booking",
        )
        return self

    # === DERIVED ===

    @property
    def resolved_handover_month(self) -> int:
        if self.handover_month is not None:
            return self.handover_month
        return quarter_to_month(self.handover_quarter)

    @property
    def timeline(self) -> ConstructionTimeline:
        return ConstructionTimeline(
            booking_month=self.booking_month,
            booking_year=self.booking_year,
            handover_month=self.resolved_handover_month,
            handover_year=self.handover_year,
        )

    @property
    def total_months(self) -> int:
        """Construction period from booking to handover, in months."""
        return self.timeline.total_months

    @property
    def fixed_fees_total(self) -> float:
        return float(sum(self.fixed_fees.values()))

    @property
    def entry_costs(self) -> float:
        """Transaction fee on price plus fixed fees, paid up front."""
        return self.base_price * self.transaction_fee_percent / 100 + self.fixed_fees_total

    @property
    def annual_service_charges(self) -> float:
        return self.unit_area * self.service_charge_rate
