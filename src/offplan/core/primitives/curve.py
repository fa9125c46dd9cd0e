# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Construction progress S-curve.

Construction progress is not linear in elapsed time: early structural work
moves the completion percentage quickly relative to the calendar, and the
finishing phases taper off toward handover. This module maps between the
elapsed share of the construction timeline and the share of construction
completed, using explicit anchor tables so the calibration can be edited
without touching the interpolation code.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from pydantic import Field, field_validator

from .model import Model

AnchorTable = Tuple[Tuple[float, float], ...]

# timeline% -> construction%
TIMELINE_TO_CONSTRUCTION_ANCHORS: AnchorTable = (
    (0.0, 0.0),
    (15.0, 20.0),
    (35.0, 40.0),
    (50.0, 55.0),
    (65.0, 70.0),
    (80.0, 85.0),
    (90.0, 93.0),
    (100.0, 100.0),
)

# construction% -> timeline%
# Calibrated separately from the forward table; the two are not required to
# be exact inverses of each other.
CONSTRUCTION_TO_TIMELINE_ANCHORS: AnchorTable = (
    (0.0, 0.0),
    (20.0, 15.0),
    (40.0, 35.0),
    (55.0, 50.0),
    (70.0, 65.0),
    (85.0, 80.0),
    (93.0, 90.0),
    (100.0, 100.0),
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class CurveMapper(Model):
    """
    Bidirectional piecewise-linear mapping between timeline and construction progress.

    Both directions interpolate over their own anchor table and clamp to
    [0, 100] outside the domain. The mapper is stateless and never raises
    for out-of-range inputs.

    Attributes:
        forward_anchors: (timeline%, construction%) pairs, ascending in timeline%
        inverse_anchors: (construction%, timeline%) pairs, ascending in construction%

    Example:
        >>> curve = CurveMapper()
        >>> curve.timeline_to_construction(50)
        55.0
        >>> curve.construction_to_month(55, total_months=36)
        18
    """

    forward_anchors: AnchorTable = Field(default=TIMELINE_TO_CONSTRUCTION_ANCHORS)
    inverse_anchors: AnchorTable = Field(default=CONSTRUCTION_TO_TIMELINE_ANCHORS)

    @field_validator("forward_anchors", "inverse_anchors")
    @classmethod
    def validate_anchors(cls, v: AnchorTable) -> AnchorTable:
        """Anchors must span at least two points with strictly ascending x."""
        if len(v) < 2:
            raise ValueError("An anchor table needs at least two points")
        xs = [x for x, _ in v]
        if any(b <= a for a, b in zip(xs, xs[1:])):
            raise ValueError(f"Anchor x-values must be strictly ascending, got {xs}")
        return v

    @staticmethod
    def _interpolate(value: float, anchors: AnchorTable) -> float:
        xs, ys = zip(*anchors)
        clamped = min(max(float(value), 0.0), 100.0)
        # np.interp holds the end values outside the anchor domain
        return float(np.interp(clamped, xs, ys))

    def timeline_to_construction(self, timeline_percent: float) -> float:
        """Construction completed (%) once `timeline_percent` of the schedule has elapsed."""
        return self._interpolate(timeline_percent, self.forward_anchors)

    def construction_to_timeline(self, construction_percent: float) -> float:
        """Share of the schedule (%) elapsed when construction reaches `construction_percent`."""
        return self._interpolate(construction_percent, self.inverse_anchors)

    def construction_to_month(self, construction_percent: float, total_months: int) -> int:
        """Calendar month (from booking) at which construction reaches the given percent."""
        total_months = max(total_months, 1)
        timeline_percent = self.construction_to_timeline(construction_percent)
        return _round_half_up(timeline_percent / 100 * total_months)

    def month_to_construction(self, month: float, total_months: int) -> float:
        """Construction percent reached `month` months after booking."""
        total_months = max(total_months, 1)
        return self.timeline_to_construction(month / total_months * 100)

    @staticmethod
    def is_handover_exit(exit_month: float, total_months: int, tolerance_months: int = 1) -> bool:
        """True when the exit falls within `tolerance_months` of handover."""
        return abs(exit_month - total_months) <= tolerance_months
