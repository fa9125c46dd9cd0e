# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Value differentiators.

Unit and location features that justify a premium on appreciation. Features
that impact appreciation add a fixed number of percentage points to every
phase rate; the combined bonus is capped.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from ..core.primitives import AppreciationSettings, DifferentiatorCategoryEnum, Model


class ValueDifferentiator(Model):
    """A selectable feature, optionally carrying an appreciation bonus (points)."""

    id: str
    name: str
    category: DifferentiatorCategoryEnum
    appreciation_bonus: float = 0.0

    @property
    def impacts_appreciation(self) -> bool:
        return self.appreciation_bonus > 0


_LOC = DifferentiatorCategoryEnum.LOCATION
_UNIT = DifferentiatorCategoryEnum.UNIT
_DEV = DifferentiatorCategoryEnum.DEVELOPER

VALUE_DIFFERENTIATORS: Tuple[ValueDifferentiator, ...] = (
    ValueDifferentiator(id="waterfront", name="Waterfront", category=_LOC, appreciation_bonus=0.5),
    ValueDifferentiator(id="ocean-view", name="Ocean View", category=_LOC, appreciation_bonus=0.3),
    ValueDifferentiator(id="master-community", name="Master Community", category=_LOC, appreciation_bonus=0.3),
    ValueDifferentiator(id="emerging-zone", name="Emerging Zone", category=_LOC, appreciation_bonus=0.3),
    ValueDifferentiator(id="beach-access", name="Beach Access", category=_LOC),
    ValueDifferentiator(id="golf-view", name="Golf View", category=_LOC),
    ValueDifferentiator(id="corner-unit", name="Corner Unit", category=_UNIT, appreciation_bonus=0.2),
    ValueDifferentiator(id="top-floor", name="Top Floor", category=_UNIT, appreciation_bonus=0.3),
    ValueDifferentiator(id="skyline-view", name="Skyline View", category=_UNIT, appreciation_bonus=0.2),
    ValueDifferentiator(id="furnished", name="Furnished", category=_UNIT),
    ValueDifferentiator(id="private-pool", name="Private Pool", category=_UNIT),
    ValueDifferentiator(id="premium-developer", name="Premium Developer", category=_DEV, appreciation_bonus=0.4),
    ValueDifferentiator(id="branded-residence", name="Branded Residence", category=_DEV),
    ValueDifferentiator(id="hotel-managed", name="Hotel Managed", category=_DEV),
    ValueDifferentiator(
        id="metro-adjacent",
        name="Metro Adjacent",
        category=DifferentiatorCategoryEnum.TRANSPORT,
        appreciation_bonus=0.3,
    ),
    ValueDifferentiator(id="low-entry", name="Low Entry Point", category=DifferentiatorCategoryEnum.FINANCIAL),
    ValueDifferentiator(
        id="accessible-payment", name="Accessible Payment Plan", category=DifferentiatorCategoryEnum.FINANCIAL
    ),
    ValueDifferentiator(
        id="premium-amenities", name="Premium Amenities", category=DifferentiatorCategoryEnum.AMENITIES
    ),
    ValueDifferentiator(id="smart-home", name="Smart Home", category=DifferentiatorCategoryEnum.AMENITIES),
)

_BY_ID: Dict[str, ValueDifferentiator] = {d.id: d for d in VALUE_DIFFERENTIATORS}


def calculate_appreciation_bonus(
    selected_ids: Iterable[str], cap: Optional[float] = None
) -> float:
    """
    Total appreciation bonus (percentage points) for the selected features.

    Unknown ids are ignored. The sum is capped at `cap`, which defaults to
    `AppreciationSettings.bonus_cap_percent`.
    """
    if cap is None:
        cap = AppreciationSettings().bonus_cap_percent
    total = sum(_BY_ID[i].appreciation_bonus for i in set(selected_ids) if i in _BY_ID)
    return min(total, cap)


def get_differentiators_by_category(
    category: DifferentiatorCategoryEnum,
) -> List[ValueDifferentiator]:
    return [d for d in VALUE_DIFFERENTIATORS if d.category == category]


def split_selected(selected_ids: Iterable[str]) -> Tuple[List[ValueDifferentiator], List[ValueDifferentiator]]:
    """Selected differentiators as (value drivers, display-only features)."""
    selected = [_BY_ID[i] for i in dict.fromkeys(selected_ids) if i in _BY_ID]
    return (
        [d for d in selected if d.impacts_appreciation],
        [d for d in selected if not d.impacts_appreciation],
    )
