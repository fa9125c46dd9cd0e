# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Zone appreciation profiles.

Maps a 0-100 zone maturity score to phased appreciation assumptions. Young
zones appreciate faster but carry more risk; established zones grow slowly
and predictably. Callers may use a profile to pre-fill the appreciation
fields of an input record or supply their own rates and bypass it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from ..core.primitives import Model, RiskLevelEnum, ZoneMaturityEnum

if TYPE_CHECKING:
    from ..inputs import InvestmentInputs


class ZoneAppreciationProfile(Model):
    """Phased appreciation assumptions for a zone maturity band."""

    maturity_label: ZoneMaturityEnum
    construction_appreciation: float
    growth_appreciation: float
    mature_appreciation: float
    growth_period_years: int
    risk_level: RiskLevelEnum


# (upper bound of maturity score, profile), ascending
ZONE_PROFILE_BANDS: Tuple[Tuple[float, ZoneAppreciationProfile], ...] = (
    (
        25,
        ZoneAppreciationProfile(
            maturity_label=ZoneMaturityEnum.EMERGING,
            construction_appreciation=15.0,
            growth_appreciation=12.0,
            mature_appreciation=5.0,
            growth_period_years=6,
            risk_level=RiskLevelEnum.HIGH,
        ),
    ),
    (
        50,
        ZoneAppreciationProfile(
            maturity_label=ZoneMaturityEnum.DEVELOPING,
            construction_appreciation=13.0,
            growth_appreciation=10.0,
            mature_appreciation=4.5,
            growth_period_years=5,
            risk_level=RiskLevelEnum.MEDIUM_HIGH,
        ),
    ),
    (
        75,
        ZoneAppreciationProfile(
            maturity_label=ZoneMaturityEnum.GROWING,
            construction_appreciation=12.0,
            growth_appreciation=8.0,
            mature_appreciation=4.0,
            growth_period_years=5,
            risk_level=RiskLevelEnum.MEDIUM,
        ),
    ),
    (
        90,
        ZoneAppreciationProfile(
            maturity_label=ZoneMaturityEnum.MATURE,
            construction_appreciation=8.0,
            growth_appreciation=6.0,
            mature_appreciation=3.5,
            growth_period_years=4,
            risk_level=RiskLevelEnum.LOW_MEDIUM,
        ),
    ),
    (
        100,
        ZoneAppreciationProfile(
            maturity_label=ZoneMaturityEnum.ESTABLISHED,
            construction_appreciation=5.0,
            growth_appreciation=4.0,
            mature_appreciation=3.0,
            growth_period_years=3,
            risk_level=RiskLevelEnum.LOW,
        ),
    ),
)


def get_zone_appreciation_profile(maturity_score: float) -> ZoneAppreciationProfile:
    """
    Appreciation profile for a zone maturity score.

    Scores outside 0-100 are clamped. Band upper bounds are inclusive, so a
    score of 25 is still Emerging and 26 is Developing.

    Example:
        >>> get_zone_appreciation_profile(60).growth_appreciation
        8.0
    """
    score = min(max(float(maturity_score), 0.0), 100.0)
    for upper, profile in ZONE_PROFILE_BANDS:
        if score <= upper:
            return profile
    return ZONE_PROFILE_BANDS[-1][1]


def apply_zone_profile(inputs: "InvestmentInputs", maturity_score: float) -> "InvestmentInputs":
    """Copy of `inputs` with its appreciation fields pre-filled from a zone profile."""
    profile = get_zone_appreciation_profile(maturity_score)
    return inputs.model_copy(
        update={
            "construction_appreciation": profile.construction_appreciation,
            "growth_appreciation": profile.growth_appreciation,
            "mature_appreciation": profile.mature_appreciation,
            "growth_period_years": profile.growth_period_years,
        }
    )
