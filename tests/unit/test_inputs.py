# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Investment Input Record Unit Tests

Test Coverage:
1. Derived timeline and cost figures
2. Handover given as a quarter
3. Boundary validation failures (fail fast with ValueError)
4. Tolerated editing artefacts (disabled milestones)
"""

import pytest
from pydantic import ValidationError

from offplan.inputs import ShortTermRentalConfig
from offplan.payments import PaymentMilestone


class TestDerivedFigures:
    def test_total_months(self, reference_inputs):
        assert reference_inputs.total_months == 24
        assert reference_inputs.resolved_handover_month == 1

    def test_entry_costs(self, make_inputs):
        inputs = make_inputs(fixed_fees={"admin": 4_000, "registration": 1_000})
        assert inputs.fixed_fees_total == 5_000
        assert inputs.entry_costs == pytest.approx(45_000)

    def test_annual_service_charges(self, make_inputs):
        inputs = make_inputs(unit_area=1_000, service_charge_rate=15)
        assert inputs.annual_service_charges == 15_000

    def test_handover_quarter(self, make_inputs):
        inputs = make_inputs(handover_month=None, handover_quarter=2, handover_year=2026)
        assert inputs.resolved_handover_month == 5
        assert inputs.total_months == 16

    def test_short_term_rental_income(self):
        config = ShortTermRentalConfig(average_daily_rate=800, occupancy_percent=70)
        assert config.gross_annual_income == pytest.approx(204_400)
        assert config.expense_percent == 40


class TestBoundaryValidation:
    def test_rejects_non_positive_price(self, make_inputs):
        with pytest.raises(ValidationError):
            make_inputs(base_price=-1)
        with pytest.raises(ValueError):
            make_inputs(base_price=0)

    def test_rejects_handover_before_booking(self, make_inputs):
        with pytest.raises(ValidationError, match="Handover must fall after booking"):
            make_inputs(handover_month=12, handover_year=2024)

    def test_rejects_both_handover_forms(self, make_inputs):
        with pytest.raises(ValidationError, match="either 'handover_month' or 'handover_quarter'"):
            make_inputs(handover_quarter=1)

    def test_rejects_missing_handover(self, make_inputs):
        with pytest.raises(ValidationError):
            make_inputs(handover_month=None)

    def test_rejects_threshold_above_100(self, make_inputs):
        with pytest.raises(ValidationError):
            make_inputs(minimum_exit_threshold=120)

    def test_rejects_out_of_range_percent(self, make_inputs):
        with pytest.raises(ValidationError):
            make_inputs(downpayment_percent=110)

    def test_rejects_unknown_field(self, make_inputs):
        with pytest.raises(ValidationError):
            make_inputs(downpayment=20)

    def test_tolerates_disabled_milestones(self, make_inputs):
        inputs = make_inputs(
            milestones=(
                PaymentMilestone(kind="time", trigger_value=6, payment_percent=0),
                PaymentMilestone(trigger_value=12, payment_percent=10),
            )
        )
        assert len(inputs.milestones) == 2
        assert not any(m.is_active for m in inputs.milestones)
