# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Valuation: property appreciation, zone profiles, value differentiators and
exit scenario returns.
"""

from .appreciation import AppreciationModel
from .differentiators import (
    VALUE_DIFFERENTIATORS,
    ValueDifferentiator,
    calculate_appreciation_bonus,
    get_differentiators_by_category,
    split_selected,
)
from .exit import ExitScenario, ExitScenarioCalculator
from .zone import (
    ZONE_PROFILE_BANDS,
    ZoneAppreciationProfile,
    apply_zone_profile,
    get_zone_appreciation_profile,
)

__all__ = [
    # Appreciation
    "AppreciationModel",
    # Differentiators
    "VALUE_DIFFERENTIATORS",
    "ValueDifferentiator",
    "calculate_appreciation_bonus",
    "get_differentiators_by_category",
    "split_selected",
    # Exit
    "ExitScenario",
    "ExitScenarioCalculator",
    # Zones
    "ZONE_PROFILE_BANDS",
    "ZoneAppreciationProfile",
    "apply_zone_profile",
    "get_zone_appreciation_profile",
]
