# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the scenario analysis entry point."""

from __future__ import annotations

import pytest

from habitable.api import analyze_scenario, resolve_scenario_assumptions
from habitable.assumptions import AssumptionOverrides, PersonsPerUnitOverride
from habitable.core import ConfigurationError
from habitable.core.primitives import LandSizeUnitEnum
from tests.conftest import make_apartment


class TestAnalyzeScenario:
    def test_matches_calculator(self, project, apartment, apartment_results):
        assert analyze_scenario(project, apartment) == apartment_results

    def test_acres_converted(self, project, apartment):
        in_acres = project.model_copy(
            update={"land_size": 2, "land_size_unit": LandSizeUnitEnum.ACRES}
        )
        results = analyze_scenario(in_acres, apartment)
        assert results.land_coverage_percentage == pytest.approx(
            1_920 / (2 * 4_046.86 * 10_000) * 100
        )

    def test_overrides_applied(self, project, apartment):
        project = project.model_copy(
            update={
                "custom_assumptions": AssumptionOverrides(
                    persons_per_unit=PersonsPerUnitOverride(three_bedroom=6)
                )
            }
        )
        scenario = apartment.model_copy(
            update={
                "custom_assumptions": AssumptionOverrides(
                    persons_per_unit=PersonsPerUnitOverride(one_bedroom=2)
                )
            }
        )
        results = analyze_scenario(project, scenario)
        assert results.estimated_population == pytest.approx(13 * 2 + 11 * 3.5 + 8 * 6)

    def test_explicit_base_assumptions(self, project, apartment, kenya):
        base = kenya.model_copy(update={"single_family_persons_per_unit": 5})
        resolved = resolve_scenario_assumptions(project, apartment, base)
        assert resolved.single_family_persons_per_unit == 5

    def test_unknown_country_falls_back(self, project, apartment):
        elsewhere = project.model_copy(
            update={"location": project.location.model_copy(update={"country_code": "ZZ"})}
        )
        results = analyze_scenario(elsewhere, apartment)
        # India occupancy 3.5 / 4.5 / 5.5
        assert results.estimated_population == pytest.approx(13 * 3.5 + 11 * 4.5 + 8 * 5.5)

    def test_configuration_error_surfaces(self, project):
        with pytest.raises(ConfigurationError):
            analyze_scenario(project, make_apartment(unit_mix=None))
