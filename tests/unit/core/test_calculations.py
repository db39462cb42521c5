# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the pure financial calculation functions."""

from __future__ import annotations

import pandas as pd
import pytest

from habitable.core import (
    ConfigurationError,
    FinancialCalculations,
    HabitableError,
    RecordNotFoundError,
    round_half_up,
)


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, expected",
        [(12.8, 13), (11.2, 11), (2.5, 3), (3.5, 4), (-2.5, -2), (0.0, 0)],
    )
    def test_halves_round_toward_positive_infinity(self, value, expected):
        assert round_half_up(value) == expected


class TestMonthlyPayment:
    def test_zero_rate_is_principal_over_term(self):
        """A zero-interest loan repays principal / term exactly."""
        assert FinancialCalculations.monthly_payment(120_000, 0.0, 12) == 10_000.0
        assert FinancialCalculations.monthly_payment(100_000, 0.0, 7) == 100_000 / 7

    def test_standard_amortizing_payment(self):
        """$100k at 12% over 12 months pays about $8,884.88 per month."""
        payment = FinancialCalculations.monthly_payment(100_000, 12.0, 12)
        assert payment == pytest.approx(8_884.88, abs=0.01)

    def test_no_principal_or_term(self):
        assert FinancialCalculations.monthly_payment(0, 8.0, 120) == 0.0
        assert FinancialCalculations.monthly_payment(50_000, 8.0, 0) == 0.0


class TestNpvAndIrr:
    def test_npv_first_flow_undiscounted(self):
        flows = pd.Series([-100.0, 110.0])
        assert FinancialCalculations.calculate_npv(flows, 0.10) == pytest.approx(0.0)

    def test_irr_simple(self):
        """Invest 100, receive 110 one period later: 10% per period."""
        irr = FinancialCalculations.calculate_irr(pd.Series([-100.0, 110.0]))
        assert irr == pytest.approx(0.10, abs=1e-8)

    def test_irr_multi_period(self):
        flows = pd.Series([-1_000.0, 300.0, 400.0, 500.0])
        irr = FinancialCalculations.calculate_irr(flows)
        assert FinancialCalculations.calculate_npv(flows, irr) == pytest.approx(0.0, abs=1e-6)

    @pytest.mark.parametrize(
        "flows",
        [[], [-100.0, -50.0], [100.0, 50.0], [0.0, 0.0]],
        ids=["empty", "all-negative", "all-positive", "all-zero"],
    )
    def test_irr_undefined(self, flows):
        assert FinancialCalculations.calculate_irr(pd.Series(flows, dtype=float)) is None

    def test_irr_outside_bracket(self):
        """A 500% periodic return lies outside the default bracket."""
        assert FinancialCalculations.calculate_irr(pd.Series([-100.0, 600.0])) is None

    def test_annualize_rate(self):
        assert FinancialCalculations.annualize_rate(0.01) == pytest.approx(1.01**12 - 1)
        assert FinancialCalculations.annualize_rate(0.0) == 0.0


class TestPaybackAndBreakEven:
    def test_payback_after_recovery(self):
        flows = pd.Series([-100.0, -50.0, 80.0, 80.0], index=[1, 2, 3, 4])
        assert FinancialCalculations.payback_period(flows) == 4

    def test_payback_in_first_period_when_never_negative(self):
        flows = pd.Series([30.0, -10.0, 5.0], index=[1, 2, 3])
        assert FinancialCalculations.payback_period(flows) == 1

    def test_payback_never_reached(self):
        flows = pd.Series([-100.0, 20.0, 20.0], index=[1, 2, 3])
        assert FinancialCalculations.payback_period(flows) is None

    def test_break_even(self):
        inflows = pd.Series([0.0, 0.0, 60.0, 60.0], index=[1, 2, 3, 4])
        outflows = pd.Series([50.0, 50.0, 0.0, 0.0], index=[1, 2, 3, 4])
        assert FinancialCalculations.break_even_period(inflows, outflows) == 4

    def test_break_even_never_reached(self):
        inflows = pd.Series([10.0, 10.0], index=[1, 2])
        outflows = pd.Series([50.0, 0.0], index=[1, 2])
        assert FinancialCalculations.break_even_period(inflows, outflows) is None


class TestErrors:
    def test_configuration_error_is_value_error(self):
        error = ConfigurationError("missing", missing_fields=["unit_mix"])
        assert isinstance(error, ValueError)
        assert isinstance(error, HabitableError)
        assert error.missing_fields == ["unit_mix"]

    def test_record_not_found_message(self):
        error = RecordNotFoundError("No record with id 'x'")
        assert isinstance(error, KeyError)
        assert str(error) == "No record with id 'x'"
