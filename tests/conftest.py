# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for Habitable tests.

The reference scenario is an 8 units x 4 floors apartment block in Kenya
with a 40/35/25 unit mix, 50 m² units, 20% shared space and a construction
cost of 400 per m². Worked values:

    units           13 / 11 / 8 (32 total)
    population      13 x 2.5 + 11 x 3.5 + 8 x 4.5 = 107
    built-up area   32 x 50 x 1.2 = 1,920 m²
    total cost      (768,000 + 480,000) x 1.25 = 1,560,000
"""

from __future__ import annotations

import pytest

from habitable.assumptions import BudgetRange, CountryCostAssumptions, get_cost_assumptions
from habitable.core.primitives import GlobalSettings, ProjectTypeEnum
from habitable.scenario import (
    ApartmentScenario,
    Location,
    MixedScenario,
    Project,
    ScenarioResults,
    SingleFamilyScenario,
    UnitMix,
    compute_scenario_results,
)


def make_apartment(**overrides) -> ApartmentScenario:
    """Reference apartment scenario with any field overridden."""
    fields = dict(
        id="scn-apt",
        project_id="prj-1",
        name="Mid-rise",
        units_per_floor=8,
        number_of_floors=4,
        unit_mix=UnitMix(one_bedroom=40, two_bedroom=35, three_bedroom=25),
        unit_size=50,
        shared_space_percentage=20,
        construction_cost_per_sqm=400,
    )
    fields.update(overrides)
    return ApartmentScenario(**fields)


@pytest.fixture
def settings() -> GlobalSettings:
    return GlobalSettings()


@pytest.fixture
def kenya() -> CountryCostAssumptions:
    return get_cost_assumptions("KE")


@pytest.fixture
def budget() -> BudgetRange:
    return BudgetRange(min=1_000_000, max=3_000_000)


@pytest.fixture
def apartment() -> ApartmentScenario:
    return make_apartment()


@pytest.fixture
def single_family() -> SingleFamilyScenario:
    return SingleFamilyScenario(
        id="scn-sf",
        project_id="prj-1",
        name="Terraced homes",
        number_of_units=20,
        lot_size=200,
        house_size=90,
        construction_cost_per_sqm=350,
    )


@pytest.fixture
def mixed() -> MixedScenario:
    return MixedScenario(
        id="scn-mix",
        project_id="prj-1",
        name="Mixed estate",
        number_of_units=40,
        apartment_units=30,
        single_family_units=10,
        construction_cost_per_sqm=380,
    )


@pytest.fixture
def project(budget: BudgetRange) -> Project:
    return Project(
        id="prj-1",
        name="Kasarani Housing",
        project_type=ProjectTypeEnum.APARTMENT,
        location=Location(city="Nairobi", country="Kenya", country_code="KE"),
        land_size=5_000,
        budget_range=budget,
    )


@pytest.fixture
def apartment_results(
    apartment: ApartmentScenario,
    budget: BudgetRange,
    kenya: CountryCostAssumptions,
) -> ScenarioResults:
    return compute_scenario_results(apartment, budget, 5_000, kenya)
