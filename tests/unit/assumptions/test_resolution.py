# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for three-tier assumption override resolution."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from habitable.assumptions import (
    AssumptionOverrides,
    BudgetRange,
    DensityThresholdsOverride,
    PersonsPerUnitOverride,
    get_cost_assumptions,
    resolve_assumptions,
    to_square_meters,
)
from habitable.core.primitives import LandSizeUnitEnum


class TestResolveAssumptions:
    def test_no_overrides_returns_base(self, kenya):
        assert resolve_assumptions(kenya) is kenya

    def test_field_level_merge_within_group(self, kenya):
        """Only the overridden field changes; the rest of the group is kept."""
        overrides = AssumptionOverrides(
            persons_per_unit=PersonsPerUnitOverride(two_bedroom=4.0)
        )
        resolved = resolve_assumptions(kenya, project_overrides=overrides)

        assert resolved.persons_per_unit.two_bedroom == 4.0
        assert resolved.persons_per_unit.one_bedroom == kenya.persons_per_unit.one_bedroom
        assert resolved.persons_per_unit.three_bedroom == kenya.persons_per_unit.three_bedroom

    def test_scenario_overrides_win(self, kenya):
        project = AssumptionOverrides(
            persons_per_unit=PersonsPerUnitOverride(one_bedroom=1.5, two_bedroom=3.0),
            single_family_persons_per_unit=5.0,
        )
        scenario = AssumptionOverrides(
            persons_per_unit=PersonsPerUnitOverride(one_bedroom=1.8)
        )
        resolved = resolve_assumptions(kenya, project, scenario)

        assert resolved.persons_per_unit.one_bedroom == 1.8
        assert resolved.persons_per_unit.two_bedroom == 3.0
        assert resolved.single_family_persons_per_unit == 5.0

    def test_base_is_not_modified(self, kenya):
        snapshot = kenya.model_dump()
        resolve_assumptions(
            kenya,
            AssumptionOverrides(density_thresholds=DensityThresholdsOverride(medium=100)),
        )
        assert kenya.model_dump() == snapshot

    def test_merged_group_is_revalidated(self, kenya):
        """An override that breaks threshold ordering is rejected."""
        overrides = AssumptionOverrides(
            density_thresholds=DensityThresholdsOverride(medium=900)
        )
        with pytest.raises(ValidationError):
            resolve_assumptions(kenya, overrides)


class TestLandSize:
    def test_square_meters_pass_through(self):
        assert to_square_meters(5_000) == 5_000

    def test_acres_converted(self):
        assert to_square_meters(2, LandSizeUnitEnum.ACRES) == pytest.approx(8_093.72)
        assert to_square_meters(1, "acres") == pytest.approx(4_046.86)


class TestBudgetRange:
    def test_min_must_not_exceed_max(self):
        with pytest.raises(ValidationError):
            BudgetRange(min=10, max=5)

    def test_defaults(self):
        budget = BudgetRange()
        assert (budget.min, budget.max, budget.currency) == (0, 0, "USD")


def test_get_cost_assumptions_fixture_matches_provider(kenya):
    assert kenya == get_cost_assumptions("KE")
