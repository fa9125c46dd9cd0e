# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .model import Model
from .types import Percentage, PositiveFloat, PositiveInt


class PaymentSettings(Model):
    """Settings governing how payment plans are interpreted."""

    default_exit_threshold_percent: Percentage = Field(
        default=30.0,
        description="Minimum share of price that must be paid before resale when the input leaves it unset.",
    )
    itemized_tolerance_percent: PositiveFloat = Field(
        default=0.5,
        description=(
            "When downpayment plus milestones are within this many points of 100%, "
            "the plan is treated as fully itemized and the handover share is zero."
        ),
    )


class ExitSettings(Model):
    """Settings for exit scenario evaluation."""

    agent_commission_percent: Percentage = Field(
        default=2.0, description="Agent commission charged on the exit price when enabled."
    )
    scenario_step_months: PositiveInt = Field(
        default=6, gt=0, description="Cadence of the default exit scenarios before handover."
    )
    handover_tolerance_months: PositiveInt = Field(
        default=1, description="An exit within this many months of handover counts as a handover exit."
    )


class HoldSettings(Model):
    """Settings for rental hold analytics."""

    not_applicable_years: PositiveFloat = Field(
        default=999.0,
        description="Sentinel horizon reported when net rent is zero or negative.",
    )
    projection_horizon_years: PositiveInt = Field(
        default=10, gt=0, description="Number of years covered by the yearly projection."
    )


class AppreciationSettings(Model):
    """Settings for appreciation adjustments."""

    bonus_cap_percent: PositiveFloat = Field(
        default=2.0,
        description="Maximum appreciation bonus (percentage points) granted by value differentiators.",
    )


class EngineSettings(Model):
    """Engine-wide settings

    Groups the constants the simulation engine relies on by functional area.
    Settings are passed explicitly to every entry point; the engine never
    reads environment variables or files.

    Example:
        >>> settings = EngineSettings(payments=PaymentSettings(default_exit_threshold_percent=40))
        >>> settings.payments.default_exit_threshold_percent
        40.0
    """

    payments: PaymentSettings = Field(default_factory=PaymentSettings)
    exit: ExitSettings = Field(default_factory=ExitSettings)
    hold: HoldSettings = Field(default_factory=HoldSettings)
    appreciation: AppreciationSettings = Field(default_factory=AppreciationSettings)
