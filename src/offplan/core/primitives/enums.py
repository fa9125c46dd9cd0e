# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class TriggerKindEnum(str, Enum):
    """
    How a payment milestone becomes due.

    TIME milestones trigger at an absolute month offset from booking.
    CONSTRUCTION milestones trigger once the building reaches a given
    completion percentage, resolved to calendar months via the S-curve.
    """

    TIME = "time"
    CONSTRUCTION = "construction"


class AppreciationPhaseEnum(str, Enum):
    """Phase of the three-phase appreciation model a given year falls into."""

    CONSTRUCTION = "construction"
    GROWTH = "growth"
    MATURE = "mature"


class RiskLevelEnum(str, Enum):
    """Qualitative risk label attached to a zone appreciation profile."""

    HIGH = "high"
    MEDIUM_HIGH = "medium-high"
    MEDIUM = "medium"
    LOW_MEDIUM = "low-medium"
    LOW = "low"


class ZoneMaturityEnum(str, Enum):
    """Maturity band of a zone, derived from its 0-100 maturity score."""

    EMERGING = "Emerging"
    DEVELOPING = "Developing"
    GROWING = "Growing"
    MATURE = "Mature"
    ESTABLISHED = "Established"


class DifferentiatorCategoryEnum(str, Enum):
    """Grouping of value differentiators for display."""

    LOCATION = "location"
    UNIT = "unit"
    DEVELOPER = "developer"
    TRANSPORT = "transport"
    FINANCIAL = "financial"
    AMENITIES = "amenities"
