# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scenario results calculator.

Turns one scenario, the project's budget band and land size, and fully
resolved country assumptions into unit, population, cost, density and
infrastructure metrics.

The computation runs in two steps. `apply_scenario_defaults` validates the
structurally required fields and fills every other gap once; the formulas
that follow only read populated values.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from ..assumptions import (
    BudgetRange,
    CountryCostAssumptions,
    DensityThresholds,
    InfrastructureWarningLevels,
)
from ..core.calculations import round_half_up
from ..core.errors import ConfigurationError
from ..core.primitives import (
    BudgetStatusEnum,
    DensityClassEnum,
    GlobalSettings,
    InfrastructureStatusEnum,
)
from ..core.primitives.settings import CostSettings
from .models import ApartmentScenario, MixedScenario, SingleFamilyScenario
from .results import CostBreakdown, ScenarioResults, UnitBreakdown

logger = logging.getLogger(__name__)

AnyScenario = Union[ApartmentScenario, SingleFamilyScenario, MixedScenario]

SQM_PER_HECTARE = 10_000.0


def apply_scenario_defaults(
    scenario: AnyScenario, settings: Optional[CostSettings] = None
) -> AnyScenario:
    """
    Return a copy of the scenario with every defaultable gap filled.

    Raises:
        ConfigurationError: For an apartment scenario without units per
            floor, number of floors or a unit mix. Zero counts are treated
            as missing.
    """
    settings = settings or CostSettings()

    if isinstance(scenario, ApartmentScenario):
        missing = [
            name
            for name in ("units_per_floor", "number_of_floors", "unit_mix")
            if not getattr(scenario, name)
        ]
        if missing:
            raise ConfigurationError(
                f"Apartment scenario '{scenario.name or scenario.id}' requires "
                f"{', '.join(missing)}",
                missing_fields=missing,
            )
        updates = {}
        if not scenario.unit_size:
            updates["unit_size"] = settings.default_apartment_unit_size
        if scenario.shared_space_percentage is None:
            updates["shared_space_percentage"] = (
                settings.default_shared_space_percentage
            )
        return scenario.model_copy(update=updates)

    if isinstance(scenario, SingleFamilyScenario):
        return scenario.model_copy(
            update={
                "number_of_units": scenario.number_of_units or 0,
                "house_size": scenario.house_size
                or scenario.unit_size
                or settings.default_single_family_unit_size,
            }
        )

    if isinstance(scenario, MixedScenario):
        return scenario.model_copy(
            update={"number_of_units": scenario.number_of_units or 0}
        )

    raise TypeError(f"Unsupported scenario type: {type(scenario).__name__}")


def split_units(total_units: int, unit_mix) -> Tuple[int, int, int]:
    """
    Split apartment units by mix percentage.

    One and two bedroom counts are rounded; three bedroom absorbs the
    remainder so the counts sum exactly to `total_units`.
    """
    one_bedroom = round_half_up(total_units * unit_mix.one_bedroom / 100)
    two_bedroom = round_half_up(total_units * unit_mix.two_bedroom / 100)
    return one_bedroom, two_bedroom, total_units - one_bedroom - two_bedroom


def _layout(
    scenario: AnyScenario,
    assumptions: CountryCostAssumptions,
    settings: CostSettings,
) -> Tuple[UnitBreakdown, float, float]:
    """Unit breakdown, estimated population and built-up area."""
    occupancy = assumptions.persons_per_unit

    if isinstance(scenario, ApartmentScenario):
        total_units = scenario.units_per_floor * scenario.number_of_floors
        one_bed, two_bed, three_bed = split_units(total_units, scenario.unit_mix)
        population = (
            one_bed * occupancy.one_bedroom
            + two_bed * occupancy.two_bedroom
            + three_bed * occupancy.three_bedroom
        )
        unit_area = total_units * scenario.unit_size
        built_up_area = unit_area * (1 + scenario.shared_space_percentage / 100)
        breakdown = UnitBreakdown(
            one_bedroom=one_bed, two_bedroom=two_bed, three_bedroom=three_bed
        )
        return breakdown, population, built_up_area

    if isinstance(scenario, SingleFamilyScenario):
        total_units = scenario.number_of_units
        population = total_units * assumptions.single_family_persons_per_unit
        built_up_area = total_units * scenario.house_size
        return UnitBreakdown(single_family=total_units), population, built_up_area

    total_units = scenario.number_of_units
    population = total_units * (occupancy.one_bedroom + occupancy.two_bedroom) / 2
    built_up_area = total_units * settings.mixed_unit_area
    return UnitBreakdown(mixed=total_units), population, built_up_area


def classify_density(
    density_per_hectare: float, thresholds: DensityThresholds
) -> DensityClassEnum:
    """Highest band whose threshold is strictly exceeded; `low` otherwise."""
    if density_per_hectare > thresholds.very_high:
        return DensityClassEnum.VERY_HIGH
    if density_per_hectare > thresholds.high:
        return DensityClassEnum.HIGH
    if density_per_hectare > thresholds.medium:
        return DensityClassEnum.MEDIUM
    return DensityClassEnum.LOW


def classify_infrastructure(
    daily_water_demand: float,
    population: float,
    levels: InfrastructureWarningLevels,
) -> InfrastructureStatusEnum:
    """Water is checked before population at each tier; either triggers it."""
    if (
        daily_water_demand > levels.water_demand_exceeds
        or population > levels.population_exceeds
    ):
        return InfrastructureStatusEnum.EXCEEDS
    if (
        daily_water_demand > levels.water_demand_warning
        or population > levels.population_warning
    ):
        return InfrastructureStatusEnum.WARNING
    return InfrastructureStatusEnum.OK


def classify_budget(total_cost: float, budget: BudgetRange) -> BudgetStatusEnum:
    if total_cost < budget.min:
        return BudgetStatusEnum.UNDER
    if total_cost > budget.max:
        return BudgetStatusEnum.OVER
    return BudgetStatusEnum.WITHIN


def compute_scenario_results(
    scenario: AnyScenario,
    budget_range: BudgetRange,
    land_size_sqm: float,
    assumptions: CountryCostAssumptions,
    settings: Optional[GlobalSettings] = None,
) -> ScenarioResults:
    """
    Compute the metrics of one scenario.

    Args:
        scenario: Apartment, single-family or mixed scenario
        budget_range: The project's budget band
        land_size_sqm: Site area; convert acres with `to_square_meters` first
        assumptions: Country assumptions with overrides already resolved
        settings: Cost allowances and defaults (GlobalSettings() if omitted)

    Returns:
        A new ScenarioResults record

    Raises:
        ConfigurationError: If an apartment scenario lacks units per floor,
            number of floors or a unit mix

    Example:
        >>> scenario = ApartmentScenario(
        ...     units_per_floor=8,
        ...     number_of_floors=4,
        ...     unit_mix=UnitMix(one_bedroom=40, two_bedroom=35, three_bedroom=25),
        ...     construction_cost_per_sqm=400,
        ... )
        >>> results = compute_scenario_results(
        ...     scenario, BudgetRange(min=1e6, max=3e6), 5_000, get_cost_assumptions("KE")
        ... )
        >>> results.total_units
        32
    """
    cost_settings = (settings or GlobalSettings()).cost
    resolved = apply_scenario_defaults(scenario, cost_settings)

    breakdown, population, built_up_area = _layout(
        resolved, assumptions, cost_settings
    )
    total_units = breakdown.total

    construction = built_up_area * resolved.construction_cost_per_sqm
    infrastructure = total_units * cost_settings.infrastructure_cost_per_unit
    subtotal = construction + infrastructure
    costs = CostBreakdown(
        construction=construction,
        infrastructure=infrastructure,
        soft_costs=subtotal * cost_settings.soft_cost_rate,
        contingency=subtotal * cost_settings.contingency_rate,
    )
    total_project_cost = costs.total

    cost_per_unit = total_project_cost / total_units if total_units > 0 else 0.0
    cost_per_person = total_project_cost / population if population > 0 else 0.0

    density_per_hectare = (
        total_units / (built_up_area / SQM_PER_HECTARE) if built_up_area > 0 else 0.0
    )

    utilities = assumptions.utilities
    daily_water_demand = population * utilities.water_liters_per_person
    electricity_demand = population * utilities.electricity_kwh_per_person
    waste_generation = population * utilities.waste_kg_per_person

    land_coverage = (
        built_up_area / (land_size_sqm * SQM_PER_HECTARE) * 100
        if built_up_area > 0 and land_size_sqm > 0
        else 0.0
    )

    logger.debug(
        f"Scenario '{resolved.name or resolved.id}': {total_units} units, "
        f"population {population:,.1f}, total cost {total_project_cost:,.0f}"
    )

    return ScenarioResults(
        total_units=total_units,
        estimated_population=population,
        built_up_area=built_up_area,
        land_coverage_percentage=land_coverage,
        density_per_hectare=density_per_hectare,
        density_classification=classify_density(
            density_per_hectare, assumptions.density_thresholds
        ),
        total_project_cost=total_project_cost,
        cost_per_unit=cost_per_unit,
        cost_per_person=cost_per_person,
        budget_status=classify_budget(total_project_cost, budget_range),
        daily_water_demand=daily_water_demand,
        electricity_demand=electricity_demand,
        waste_generation=waste_generation,
        infrastructure_status=classify_infrastructure(
            daily_water_demand, population, assumptions.infrastructure_warning_levels
        ),
        unit_breakdown=breakdown,
        cost_breakdown=costs,
    )
