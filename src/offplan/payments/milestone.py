# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional
from uuid import uuid4

from pydantic import Field

from ..core.primitives import Model, TriggerKindEnum


class PaymentMilestone(Model):
    """
    A scheduled partial payment of the purchase price.

    Milestones are tolerant of in-progress user edits: a milestone with a
    non-positive payment percent, or without a trigger kind, is treated as
    disabled by every calculation instead of being rejected.

    Attributes:
        id: Identifier, unique within a plan
        kind: TIME (month offset from booking) or CONSTRUCTION (completion %)
        trigger_value: Month offset or construction percent that makes it due
        payment_percent: Share of the base price paid at this milestone
        label: Optional display label

    Example:
        >>> m = PaymentMilestone(kind=TriggerKindEnum.CONSTRUCTION, trigger_value=50, payment_percent=10)
        >>> m.amount(1_000_000)
        100000.0
    """

    id: str = Field(default_factory=lambda: f"payment-{uuid4().hex[:8]}")
    kind: Optional[TriggerKindEnum] = None
    trigger_value: float = 0.0
    payment_percent: float = 0.0
    label: Optional[str] = None

    @property
    def is_active(self) -> bool:
        """Whether the milestone takes part in calculations."""
        return self.kind is not None and self.payment_percent > 0

    @property
    def is_time_based(self) -> bool:
        return self.kind == TriggerKindEnum.TIME

    @property
    def is_construction_based(self) -> bool:
        return self.kind == TriggerKindEnum.CONSTRUCTION

    def amount(self, base_price: float) -> float:
        """Currency amount of this milestone for a given base price."""
        return base_price * self.payment_percent / 100
