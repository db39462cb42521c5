# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for formatting and scenario comparison reports."""

from __future__ import annotations

import pytest

from habitable.reporting import (
    compare_scenarios,
    cost_breakdown,
    format_currency,
    format_number,
)
from habitable.scenario import InfrastructureCosts, compute_scenario_results
from tests.conftest import make_apartment


class TestFormatting:
    @pytest.mark.parametrize(
        "amount, currency, expected",
        [
            (1_234_567.5, "USD", "$1,234,568"),
            (0, "USD", "$0"),
            (999.4, "EUR", "€999"),
            (-2_500, "KES", "-KES 2,500"),
            (1_560_000, "inr", "₹1,560,000"),
        ],
    )
    def test_format_currency(self, amount, currency, expected):
        assert format_currency(amount, currency) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1_560_000, "1.6M"),
            (1_000_000, "1.0M"),
            (2_500, "2.5K"),
            (999, "999"),
            (107.4, "107"),
        ],
    )
    def test_format_number(self, value, expected):
        assert format_number(value) == expected


class TestCompareScenarios:
    def test_side_by_side(self, apartment, apartment_results, single_family, budget, kenya):
        sf_results = compute_scenario_results(single_family, budget, 10_000, kenya)
        frame = compare_scenarios(
            [(apartment, apartment_results), (single_family, sf_results)]
        )

        assert list(frame.columns) == ["Mid-rise", "Terraced homes"]
        assert frame.loc["Total Units", "Mid-rise"] == 32
        assert frame.loc["Total Units", "Terraced homes"] == 20
        assert frame.loc["Density Class", "Mid-rise"] == "medium"
        assert frame.loc["Budget Status", "Mid-rise"] == "within"

    def test_shared_names_keep_every_scenario(self, budget, kenya):
        first = make_apartment(id="a", name="Option")
        second = make_apartment(id="b", name="Option", number_of_floors=6)
        frame = compare_scenarios(
            [
                (first, compute_scenario_results(first, budget, 5_000, kenya)),
                (second, compute_scenario_results(second, budget, 5_000, kenya)),
            ]
        )

        assert list(frame.columns) == ["Option (a)", "Option (b)"]
        assert frame.loc["Total Units", "Option (a)"] == 32
        assert frame.loc["Total Units", "Option (b)"] == 48

    def test_empty(self):
        frame = compare_scenarios([])
        assert frame.empty
        assert "Total Project Cost" in frame.index


class TestCostBreakdown:
    def test_construction_and_line_items(self, apartment, apartment_results):
        scenario = apartment.model_copy(
            update={
                "infrastructure_costs": InfrastructureCosts(
                    water=10_000, sewer=20_000, roads=30_000
                )
            }
        )
        breakdown = cost_breakdown(scenario, apartment_results)

        assert breakdown["Construction"] == pytest.approx(768_000)
        assert breakdown["Water"] == 10_000
        assert breakdown["Roads"] == 30_000
        assert breakdown["Electricity"] == 0
        assert list(breakdown.index) == ["Construction", "Water", "Sewer", "Roads", "Electricity"]
