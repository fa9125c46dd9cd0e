# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offplan Core Primitives

Essential building blocks for the simulation engine: the immutable model
base, constrained types, enums, settings, the construction timeline and the
construction progress S-curve.
"""

from .curve import (
    CONSTRUCTION_TO_TIMELINE_ANCHORS,
    TIMELINE_TO_CONSTRUCTION_ANCHORS,
    AnchorTable,
    CurveMapper,
)
from .enums import (
    AppreciationPhaseEnum,
    DifferentiatorCategoryEnum,
    RiskLevelEnum,
    TriggerKindEnum,
    ZoneMaturityEnum,
)
from .model import Model
from .settings import (
    AppreciationSettings,
    EngineSettings,
    ExitSettings,
    HoldSettings,
    PaymentSettings,
)
from .timeline import ConstructionTimeline, quarter_to_month
from .types import (
    AnnualRatePercent,
    MonthOfYear,
    Percentage,
    PositiveFloat,
    PositiveInt,
    QuarterOfYear,
    StrictlyPositiveFloat,
)
from .validation import ValidationMixin

__all__ = [
    # Curve
    "AnchorTable",
    "CONSTRUCTION_TO_TIMELINE_ANCHORS",
    "CurveMapper",
    "TIMELINE_TO_CONSTRUCTION_ANCHORS",
    # Enums
    "AppreciationPhaseEnum",
    "DifferentiatorCategoryEnum",
    "RiskLevelEnum",
    "TriggerKindEnum",
    "ZoneMaturityEnum",
    # Model & settings
    "Model",
    "AppreciationSettings",
    "EngineSettings",
    "ExitSettings",
    "HoldSettings",
    "PaymentSettings",
    # Timeline
    "ConstructionTimeline",
    "quarter_to_month",
    # Types
    "AnnualRatePercent",
    "MonthOfYear",
    "Percentage",
    "PositiveFloat",
    "PositiveInt",
    "QuarterOfYear",
    "StrictlyPositiveFloat",
    # Validation
    "ValidationMixin",
]
