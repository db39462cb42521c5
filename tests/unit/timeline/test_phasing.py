# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for construction timeline and phasing."""

from __future__ import annotations

from datetime import date

import pytest

from habitable.core.primitives import SCurveDrawSchedule
from habitable.timeline import generate_timeline


class TestPhases:
    def test_reference_durations(self, apartment_results):
        timeline = generate_timeline(24, apartment_results)
        assert [p.duration_months for p in timeline.phases] == [2, 4, 8, 6, 4]
        assert [p.id for p in timeline.phases] == [
            "phase-1",
            "phase-2",
            "phase-3",
            "phase-4",
            "phase-5",
        ]

    @pytest.mark.parametrize("months", [1, 2, 3, 5, 7, 12, 18, 24, 37, 60, 121])
    def test_durations_sum_and_phases_contiguous(self, months):
        timeline = generate_timeline(months, total_cost=1_000_000)
        phases = timeline.phases

        assert sum(p.duration_months for p in phases) == months
        assert phases[0].start_month == 0
        assert phases[-1].end_month == months
        for current, following in zip(phases, phases[1:]):
            assert current.end_month == following.start_month

    def test_costs_follow_fixed_shares(self, apartment_results):
        timeline = generate_timeline(24, apartment_results)
        shares = [p.cost_percentage for p in timeline.phases]
        assert shares == [5, 10, 40, 30, 15]
        assert timeline.total_cost == pytest.approx(apartment_results.total_project_cost)
        assert timeline.get_phase("phase-3").estimated_cost == pytest.approx(1_560_000 * 0.4)

    def test_dependencies_chain(self):
        timeline = generate_timeline(24, total_cost=100)
        assert timeline.phases[0].dependencies == []
        assert timeline.get_phase("phase-4").dependencies == ["phase-3"]
        assert timeline.critical_path == [p.id for p in timeline.phases]

    def test_milestones(self):
        timeline = generate_timeline(24, total_cost=100)
        assert timeline.phases[-1].milestone_name == "Project Handover"

    def test_labor_units(self):
        # phase-3: 40% of 1.2M over 8 months, 35% labour at 1,200/worker-month
        timeline = generate_timeline(24, total_cost=1_200_000)
        assert timeline.get_phase("phase-3").labor_units == 18

    def test_unknown_phase(self):
        with pytest.raises(KeyError):
            generate_timeline(12, total_cost=0).get_phase("phase-9")


class TestMonthlyBreakdown:
    def test_breakdown_sums_to_cost(self, apartment_results):
        frame = generate_timeline(24, apartment_results).to_dataframe()
        assert list(frame.index) == list(range(24))
        assert frame["cost_outflow"].sum() == pytest.approx(1_560_000)
        assert (frame["net_cash_flow"] == -frame["cost_outflow"]).all()

    def test_uniform_within_phase(self):
        timeline = generate_timeline(24, total_cost=1_000_000)
        breakdown = timeline.monthly_breakdown
        # phase-1 spans months 0-1 with 5% of the cost
        assert breakdown[0].cost_outflow == pytest.approx(25_000)
        assert breakdown[1].cost_outflow == pytest.approx(25_000)

    def test_short_timeline_books_zero_length_phases(self):
        timeline = generate_timeline(1, total_cost=1_000)
        assert timeline.to_dataframe()["cost_outflow"].sum() == pytest.approx(1_000)

    def test_s_curve_schedule(self):
        timeline = generate_timeline(
            24, total_cost=1_000_000, draw_schedule=SCurveDrawSchedule(sigma=1.5)
        )
        frame = timeline.to_dataframe()
        assert frame["cost_outflow"].sum() == pytest.approx(1_000_000)
        # phase-3 spans months 6-13 and peaks mid-phase
        assert frame.loc[9, "cost_outflow"] > frame.loc[6, "cost_outflow"]

    def test_blank_scenario(self):
        timeline = generate_timeline(12)
        assert timeline.total_cost == 0
        assert all(entry.cost_outflow == 0 for entry in timeline.monthly_breakdown)


class TestDates:
    def test_dates_from_start(self):
        timeline = generate_timeline(
            24, total_cost=1_000_000, start_date=date(2025, 1, 15)
        )
        assert timeline.start_date == date(2025, 1, 15)
        assert timeline.estimated_completion == date(2027, 1, 15)
        assert timeline.first_100_percent_completion == date(2027, 1, 15)
        assert timeline.first_50_percent_completion is not None
        assert timeline.first_50_percent_completion < timeline.estimated_completion

    def test_no_dates_without_start(self):
        timeline = generate_timeline(24, total_cost=1_000)
        assert timeline.start_date is None
        assert timeline.estimated_completion is None


class TestValidation:
    def test_duration_must_be_positive(self):
        with pytest.raises(ValueError, match="at least 1 month"):
            generate_timeline(0, total_cost=100)

    def test_cost_must_be_non_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            generate_timeline(12, total_cost=-1)

    def test_explicit_cost_overrides_results(self, apartment_results):
        timeline = generate_timeline(12, apartment_results, total_cost=10)
        assert timeline.total_cost == pytest.approx(10)
