# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Yearly Projection Unit Tests
"""

import pytest

from offplan.analysis import build_yearly_projections, projections_to_dataframe
from offplan.inputs import ShortTermRentalConfig


@pytest.fixture
def rental_inputs(make_inputs):
    return make_inputs(rental_yield_percent=7, unit_area=1_000, service_charge_rate=15)


class TestYearlyProjection:
    def test_default_horizon(self, rental_inputs):
        rows = build_yearly_projections(rental_inputs)
        assert [r.year for r in rows] == list(range(1, 11))
        assert rows[0].calendar_year == 2025
        assert rows[-1].calendar_year == 2034

    def test_construction_years_have_no_rent(self, rental_inputs):
        first = build_yearly_projections(rental_inputs)[0]
        assert first.is_construction
        assert first.annual_rent is None
        assert first.net_rent == 0.0
        assert first.cumulative_net_income == 0.0
        assert first.property_value == pytest.approx(1_120_000)

    def test_rent_starts_at_handover_and_grows(self, rental_inputs):
        rows = build_yearly_projections(rental_inputs)
        handover, following = rows[1], rows[2]
        assert handover.is_handover
        assert not handover.is_construction
        assert handover.annual_rent == pytest.approx(87_808)
        assert handover.net_rent == pytest.approx(72_808)
        assert following.annual_rent == pytest.approx(87_808 * 1.04)
        assert following.cumulative_net_income == pytest.approx(72_808 + 87_808 * 1.04 - 15_000)

    def test_break_even_flagged_once(self, rental_inputs):
        rows = build_yearly_projections(rental_inputs, horizon_years=25)
        flagged = [r for r in rows if r.is_break_even]
        assert len(flagged) == 1
        year = flagged[0].year
        assert rows[year - 1].cumulative_net_income >= 1_040_000
        assert rows[year - 2].cumulative_net_income < 1_040_000

    def test_short_term_income(self, rental_inputs):
        inputs = rental_inputs.model_copy(
            update={"short_term_rental": ShortTermRentalConfig(adr_growth_rate=5)}
        )
        rows = build_yearly_projections(inputs, horizon_years=3)
        assert rows[0].str_net_income is None
        assert rows[0].str_cumulative_net_income == 0.0
        assert rows[1].str_net_income == pytest.approx(107_640)
        assert rows[2].str_net_income == pytest.approx(204_400 * 1.05 * 0.6 - 15_000)
        assert rows[2].str_cumulative_net_income == pytest.approx(
            107_640 + 204_400 * 1.05 * 0.6 - 15_000
        )

    def test_no_short_term_columns_without_config(self, rental_inputs):
        rows = build_yearly_projections(rental_inputs, horizon_years=3)
        assert all(r.str_net_income is None and r.str_cumulative_net_income is None for r in rows)

    def test_dataframe(self, rental_inputs):
        df = projections_to_dataframe(build_yearly_projections(rental_inputs))
        assert df.index.name == "year"
        assert len(df) == 10
        assert df["cumulative_net_income"].is_monotonic_increasing
        assert df["property_value"].is_monotonic_increasing
