# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Phased Appreciation Unit Tests

Test Coverage:
1. Phase boundaries (construction, growth, mature)
2. Annual compounding and month interpolation
3. Continuity across year boundaries
4. Degenerate construction periods
5. Value differentiator bonus applied from inputs
"""

import pandas as pd
import pytest

from offplan.core.primitives import AppreciationPhaseEnum
from offplan.valuation import AppreciationModel


@pytest.fixture
def model() -> AppreciationModel:
    return AppreciationModel(base_price=1_000_000, total_months=24)


class TestPhases:
    def test_phase_boundaries(self, model: AppreciationModel):
        assert model.construction_years == 2
        assert model.phase_for_year(1) == AppreciationPhaseEnum.CONSTRUCTION
        assert model.phase_for_year(2) == AppreciationPhaseEnum.CONSTRUCTION
        assert model.phase_for_year(3) == AppreciationPhaseEnum.GROWTH
        assert model.phase_for_year(7) == AppreciationPhaseEnum.GROWTH
        assert model.phase_for_year(8) == AppreciationPhaseEnum.MATURE

    def test_partial_construction_year_counts_as_construction(self):
        model = AppreciationModel(base_price=1_000_000, total_months=30)
        assert model.construction_years == 3
        assert model.rate_for_year(3) == 12.0
        assert model.rate_for_year(4) == 8.0

    def test_non_positive_construction_period(self):
        model = AppreciationModel(base_price=1_000_000, total_months=0)
        assert model.construction_years == 1
        assert model.value_at_year(1) == pytest.approx(1_120_000)
        assert model.rate_for_year(2) == 8.0


class TestValues:
    def test_compounds_annually(self, model: AppreciationModel):
        assert model.value_at_year(0) == 1_000_000
        assert model.value_at_year(1) == pytest.approx(1_120_000)
        assert model.value_at_year(2) == pytest.approx(1_254_400)
        assert model.value_at_year(3) == pytest.approx(1_354_752)

    def test_interpolates_within_year(self, model: AppreciationModel):
        assert model.value_at(18) == pytest.approx(1_187_200)
        assert model.value_at(6) == pytest.approx(1_060_000)

    def test_month_zero_and_negative(self, model: AppreciationModel):
        assert model.value_at(0) == 1_000_000
        assert model.value_at(-6) == 1_000_000

    def test_continuity_at_year_boundaries(self, model: AppreciationModel):
        for year in range(1, 11):
            month = year * 12
            assert model.value_at(month - 1e-6) == pytest.approx(model.value_at(month), rel=1e-6)
            assert model.value_at(month + 1e-6) == pytest.approx(model.value_at(month), rel=1e-6)

    def test_appreciation_percent(self, model: AppreciationModel):
        assert model.appreciation_percent_at(12) == pytest.approx(12.0)

    def test_yearly_values(self, model: AppreciationModel):
        values = model.yearly_values(10)
        assert isinstance(values, pd.Series)
        assert len(values) == 11
        assert values.index.name == "year"
        assert values.loc[2] == pytest.approx(1_254_400)
        assert values.is_monotonic_increasing


class TestFromInputs:
    def test_uses_input_rates(self, make_inputs):
        model = AppreciationModel.from_inputs(
            make_inputs(construction_appreciation=10, growth_appreciation=6, growth_period_years=3)
        )
        assert model.total_months == 24
        assert model.construction_appreciation == 10
        assert model.growth_appreciation == 6
        assert model.phase_for_year(6) == AppreciationPhaseEnum.MATURE

    def test_differentiator_bonus_added_to_every_phase(self, make_inputs):
        model = AppreciationModel.from_inputs(
            make_inputs(value_differentiators=("waterfront", "premium-developer"))
        )
        assert model.construction_appreciation == pytest.approx(12.9)
        assert model.growth_appreciation == pytest.approx(8.9)
        assert model.mature_appreciation == pytest.approx(4.9)
