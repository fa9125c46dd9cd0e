# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Construction S-Curve Unit Tests

Test Coverage:
1. Anchor values and interpolation between anchors
2. Monotonicity and fixpoints of the forward mapping
3. Clamping of out-of-range inputs
4. Month resolution with half-up rounding
5. Anchor table validation
"""

import pytest
from pydantic import ValidationError

from offplan.core.primitives import (
    CONSTRUCTION_TO_TIMELINE_ANCHORS,
    TIMELINE_TO_CONSTRUCTION_ANCHORS,
    CurveMapper,
)


@pytest.fixture
def curve() -> CurveMapper:
    return CurveMapper()


class TestTimelineToConstruction:
    """Forward mapping: elapsed timeline share to construction completed."""

    @pytest.mark.parametrize("timeline, construction", TIMELINE_TO_CONSTRUCTION_ANCHORS)
    def test_anchor_values(self, curve: CurveMapper, timeline: float, construction: float):
        assert curve.timeline_to_construction(timeline) == pytest.approx(construction)

    def test_interpolates_between_anchors(self, curve: CurveMapper):
        # Halfway between (15, 20) and (35, 40)
        assert curve.timeline_to_construction(25) == pytest.approx(30.0)

    def test_monotonic(self, curve: CurveMapper):
        values = [curve.timeline_to_construction(t) for t in range(0, 101)]
        assert all(b >= a for a, b in zip(values, values[1:]))

    def test_fixpoints(self, curve: CurveMapper):
        assert curve.timeline_to_construction(0) == 0.0
        assert curve.timeline_to_construction(100) == 100.0

    def test_clamps_out_of_range(self, curve: CurveMapper):
        assert curve.timeline_to_construction(-25) == 0.0
        assert curve.timeline_to_construction(150) == 100.0


class TestConstructionToTimeline:
    """Inverse mapping and month resolution."""

    @pytest.mark.parametrize("construction, timeline", CONSTRUCTION_TO_TIMELINE_ANCHORS)
    def test_anchor_values(self, curve: CurveMapper, construction: float, timeline: float):
        assert curve.construction_to_timeline(construction) == pytest.approx(timeline)

    def test_interpolates_between_anchors(self, curve: CurveMapper):
        # 50% lies two thirds of the way from (40, 35) to (55, 50)
        assert curve.construction_to_timeline(50) == pytest.approx(45.0)

    def test_clamps_out_of_range(self, curve: CurveMapper):
        assert curve.construction_to_timeline(-1) == 0.0
        assert curve.construction_to_timeline(101) == 100.0

    def test_construction_to_month(self, curve: CurveMapper):
        assert curve.construction_to_month(55, total_months=36) == 18
        # 45% of 24 months = 10.8
        assert curve.construction_to_month(50, total_months=24) == 11

    def test_month_rounds_half_up(self, curve: CurveMapper):
        # 50% of 25 months = 12.5
        assert curve.construction_to_month(55, total_months=25) == 13

    def test_non_positive_total_months_treated_as_one(self, curve: CurveMapper):
        assert curve.construction_to_month(100, total_months=0) == 1
        assert curve.month_to_construction(1, total_months=-5) == 100.0

    def test_month_to_construction(self, curve: CurveMapper):
        assert curve.month_to_construction(12, total_months=24) == pytest.approx(55.0)


class TestHandoverExit:
    def test_within_tolerance(self):
        assert CurveMapper.is_handover_exit(24, 24)
        assert CurveMapper.is_handover_exit(23, 24)
        assert CurveMapper.is_handover_exit(25, 24)

    def test_outside_tolerance(self):
        assert not CurveMapper.is_handover_exit(22, 24)
        assert CurveMapper.is_handover_exit(22, 24, tolerance_months=2)


class TestAnchorValidation:
    def test_custom_anchors(self):
        linear = CurveMapper(forward_anchors=((0, 0), (100, 100)), inverse_anchors=((0, 0), (100, 100)))
        assert linear.timeline_to_construction(37) == pytest.approx(37.0)

    def test_rejects_single_point(self):
        with pytest.raises(ValidationError):
            CurveMapper(forward_anchors=((0, 0),))

    def test_rejects_unsorted_anchors(self):
        with pytest.raises(ValidationError):
            CurveMapper(forward_anchors=((0, 0), (50, 60), (40, 70), (100, 100)))
