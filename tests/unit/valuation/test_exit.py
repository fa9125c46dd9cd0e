# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Exit Scenario Unit Tests

Test Coverage:
1. Price, capital and profit at handover and before it
2. ROE, true ROE and annualization
3. Exit costs (agent commission, NOC fee)
4. Zero-capital guards
5. Default exit cadence and DataFrame output
"""

import pytest

from offplan.valuation import ExitScenarioCalculator


@pytest.fixture
def calculator(reference_inputs) -> ExitScenarioCalculator:
    return ExitScenarioCalculator.from_inputs(reference_inputs)


class TestScenarioValues:
    def test_handover_exit(self, calculator: ExitScenarioCalculator):
        scenario = calculator.scenario(24)
        assert scenario.is_handover
        assert scenario.exit_price == pytest.approx(1_254_400)
        assert scenario.equity_deployed == pytest.approx(1_000_000)
        assert scenario.entry_costs == pytest.approx(40_000)
        assert scenario.total_capital_deployed == pytest.approx(1_040_000)
        assert scenario.profit == pytest.approx(254_400)
        assert scenario.true_profit == pytest.approx(214_400)
        assert scenario.roe == pytest.approx(25.44)
        assert scenario.true_roe == pytest.approx(214_400 / 1_040_000 * 100)
        assert scenario.appreciation_percent == pytest.approx(25.44)

    def test_early_exit_uses_threshold_equity(self, calculator: ExitScenarioCalculator):
        scenario = calculator.scenario(6)
        assert not scenario.is_handover
        assert not scenario.is_threshold_met
        assert scenario.equity_deployed == pytest.approx(300_000)
        assert scenario.plan_equity_percent == pytest.approx(20)
        assert scenario.equity_percent == pytest.approx(30)
        assert scenario.advance_required == pytest.approx(100_000)
        assert len(scenario.advanced_payments) == 1

    def test_negative_exit_month_rejected(self, calculator: ExitScenarioCalculator):
        with pytest.raises(ValueError):
            calculator.scenario(-1)


class TestAnnualizedROE:
    def test_one_year_exit_is_not_adjusted(self, calculator: ExitScenarioCalculator):
        scenario = calculator.scenario(12)
        assert scenario.equity_deployed == pytest.approx(300_000)
        assert scenario.true_roe == pytest.approx(80_000 / 340_000 * 100)
        assert scenario.annualized_roe == pytest.approx(scenario.true_roe)

    def test_two_year_exit_is_halved(self, calculator: ExitScenarioCalculator):
        scenario = calculator.scenario(24)
        assert scenario.annualized_roe == pytest.approx(scenario.true_roe / 2)

    def test_month_zero_is_not_annualized(self, calculator: ExitScenarioCalculator):
        scenario = calculator.scenario(0)
        assert scenario.exit_price == pytest.approx(1_000_000)
        assert scenario.annualized_roe == 0.0


class TestExitCosts:
    def test_agent_commission_and_noc_fee(self, make_inputs):
        calculator = ExitScenarioCalculator.from_inputs(
            make_inputs(exit_agent_commission_enabled=True, exit_noc_fee=5_000)
        )
        scenario = calculator.scenario(24)
        assert scenario.agent_commission == pytest.approx(25_088)
        assert scenario.noc_fee == 5_000
        assert scenario.exit_costs == pytest.approx(30_088)
        assert scenario.net_profit == pytest.approx(184_312)
        assert scenario.net_roe == pytest.approx(184_312 / 1_040_000 * 100)
        assert scenario.net_annualized_roe == pytest.approx(scenario.net_roe / 2)

    def test_no_exit_costs_by_default(self, calculator: ExitScenarioCalculator):
        scenario = calculator.scenario(24)
        assert scenario.exit_costs == 0.0
        assert scenario.net_profit == pytest.approx(scenario.true_profit)


class TestGuards:
    def test_zero_equity_and_capital(self, make_inputs):
        inputs = make_inputs(
            downpayment_percent=0,
            milestones=(),
            minimum_exit_threshold=0,
            transaction_fee_percent=0,
        )
        scenario = ExitScenarioCalculator.from_inputs(inputs).scenario(6)
        assert scenario.equity_deployed == 0.0
        assert scenario.total_capital_deployed == 0.0
        assert scenario.profit > 0
        assert scenario.roe == 0.0
        assert scenario.true_roe == 0.0
        assert scenario.annualized_roe == 0.0


class TestScenarioSets:
    def test_default_exit_months(self, calculator: ExitScenarioCalculator):
        assert calculator.default_exit_months() == [6, 12, 18, 24]

    def test_default_exit_months_uneven_period(self, make_inputs):
        calculator = ExitScenarioCalculator.from_inputs(make_inputs(handover_month=8, handover_year=2026))
        assert calculator.default_exit_months() == [6, 12, 18, 19]

    def test_scenarios_and_dataframe(self, calculator: ExitScenarioCalculator):
        scenarios = calculator.scenarios()
        assert [s.exit_month for s in scenarios] == [6, 12, 18, 24]

        df = ExitScenarioCalculator.to_dataframe(scenarios)
        assert df.index.name == "exit_month"
        assert list(df.index) == [6, 12, 18, 24]
        assert "advanced_payments" not in df.columns
        assert df["exit_price"].is_monotonic_increasing

    def test_explicit_months(self, calculator: ExitScenarioCalculator):
        scenarios = calculator.scenarios([3, 30])
        assert [s.exit_month for s in scenarios] == [3, 30]
        assert scenarios[1].equity_deployed == pytest.approx(1_000_000)
