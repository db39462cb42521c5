# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for project and scenario records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from habitable.core.primitives import ProjectTypeEnum
from habitable.scenario import (
    ApartmentScenario,
    InfrastructureCosts,
    Location,
    MixedScenario,
    Project,
    SingleFamilyScenario,
    UnitMix,
    parse_scenario,
    validate_unit_mix,
)


class TestUnitMix:
    def test_complete_mix(self):
        mix = UnitMix(one_bedroom=40, two_bedroom=35, three_bedroom=25)
        assert mix.is_complete
        assert validate_unit_mix(mix) is mix

    def test_incomplete_mix_rejected(self):
        mix = UnitMix(one_bedroom=40, two_bedroom=35, three_bedroom=20)
        assert not mix.is_complete
        with pytest.raises(ValueError, match="sum to 100"):
            validate_unit_mix(mix)

    def test_percentages_bounded(self):
        with pytest.raises(ValidationError):
            UnitMix(one_bedroom=120)


class TestParseScenario:
    @pytest.mark.parametrize(
        "project_type, cls",
        [
            ("apartment", ApartmentScenario),
            ("single-family", SingleFamilyScenario),
            ("mixed", MixedScenario),
        ],
    )
    def test_variant_selected_by_project_type(self, project_type, cls):
        scenario = parse_scenario({"project_type": project_type, "name": "x"})
        assert isinstance(scenario, cls)

    def test_round_trip_through_json(self, apartment):
        data = apartment.model_dump(mode="json")
        assert data["project_type"] == "apartment"
        assert parse_scenario(data) == apartment

    def test_fields_of_other_topology_rejected(self):
        with pytest.raises(ValidationError):
            parse_scenario({"project_type": "mixed", "units_per_floor": 4})


class TestProject:
    def test_country_code_falls_back_to_country(self, budget):
        project = Project(
            name="p",
            project_type=ProjectTypeEnum.MIXED,
            location=Location(country="KE"),
            land_size=1,
            budget_range=budget,
        )
        assert project.country_code == "KE"

    def test_country_code_preferred(self, project):
        assert project.country_code == "KE"

    def test_negative_land_size_rejected(self):
        with pytest.raises(ValidationError):
            Project(name="p", project_type="apartment", land_size=-1)


def test_infrastructure_line_items_total():
    costs = InfrastructureCosts(water=100, sewer=200, roads=300, electricity=400)
    assert costs.total == 1_000
