# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Project and scenario records.

A scenario is a tagged union keyed by `project_type`; each variant carries
only the layout fields of its own topology. Cost fields, overrides and the
cached results are shared through `ScenarioBase`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional, Union

from pydantic import Field, TypeAdapter
from typing_extensions import Annotated

from ..assumptions import AssumptionOverrides, BudgetRange
from ..core.primitives import (
    FinishLevelEnum,
    LandSizeUnitEnum,
    Model,
    Percentage,
    PositiveFloat,
    PositiveInt,
    ProjectTypeEnum,
    TargetIncomeGroupEnum,
)
from .results import ScenarioResults


class Location(Model):
    city: str = ""
    country: str = ""
    country_code: Optional[str] = Field(
        default=None, description="ISO country code used for assumption lookups"
    )


class Project(Model):
    """A housing project: site, budget and the topology of its scenarios."""

    id: str = ""
    name: str
    project_type: ProjectTypeEnum
    location: Location = Field(default_factory=Location)
    land_size: PositiveFloat
    land_size_unit: LandSizeUnitEnum = LandSizeUnitEnum.SQM
    target_income_group: TargetIncomeGroupEnum = TargetIncomeGroupEnum.LOW
    budget_range: BudgetRange = Field(default_factory=BudgetRange)
    custom_assumptions: Optional[AssumptionOverrides] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def country_code(self) -> str:
        """Lookup code for country assumptions, falling back to the country name."""
        return self.location.country_code or self.location.country


class UnitMix(Model):
    """Apartment unit-type percentages; callers keep them summing to 100."""

    one_bedroom: Percentage = 0.0
    two_bedroom: Percentage = 0.0
    three_bedroom: Percentage = 0.0

    @property
    def total(self) -> float:
        return self.one_bedroom + self.two_bedroom + self.three_bedroom

    @property
    def is_complete(self) -> bool:
        return abs(self.total - 100.0) < 1e-9


def validate_unit_mix(unit_mix: UnitMix) -> UnitMix:
    """Raise ValueError unless the mix percentages sum to 100."""
    if not unit_mix.is_complete:
        raise ValueError(
            f"Unit mix percentages must sum to 100, got {unit_mix.total:g}"
        )
    return unit_mix


class InfrastructureCosts(Model):
    """Itemized infrastructure line items (visualization and reporting only)."""

    water: PositiveFloat = 0.0
    sewer: PositiveFloat = 0.0
    roads: PositiveFloat = 0.0
    electricity: PositiveFloat = 0.0

    @property
    def total(self) -> float:
        return self.water + self.sewer + self.roads + self.electricity


class ScenarioBase(Model):
    """Fields shared by every scenario topology."""

    id: str = ""
    project_id: str = ""
    name: str = ""

    construction_cost_per_sqm: PositiveFloat = 0.0
    infrastructure_costs: InfrastructureCosts = Field(
        default_factory=InfrastructureCosts
    )
    finish_level: FinishLevelEnum = FinishLevelEnum.STANDARD

    # Inputs to the regulatory rule set
    affordable_units_percentage: Percentage = 100.0
    accessible_units_percentage: Percentage = 0.0
    green_certified: bool = False

    custom_assumptions: Optional[AssumptionOverrides] = None
    calculated_results: Optional[ScenarioResults] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ApartmentScenario(ScenarioBase):
    """
    Multi-storey apartment building.

    `units_per_floor`, `number_of_floors` and `unit_mix` are structurally
    required; the calculator rejects a scenario that lacks any of them.
    """

    project_type: Literal[ProjectTypeEnum.APARTMENT] = ProjectTypeEnum.APARTMENT
    unit_size: Optional[PositiveFloat] = Field(default=None, description="m² per unit")
    units_per_floor: Optional[PositiveInt] = None
    number_of_floors: Optional[PositiveInt] = None
    unit_mix: Optional[UnitMix] = None
    shared_space_percentage: Optional[PositiveFloat] = Field(
        default=None, description="Corridors, stairs and lifts as % of unit area"
    )


class SingleFamilyScenario(ScenarioBase):
    project_type: Literal[ProjectTypeEnum.SINGLE_FAMILY] = (
        ProjectTypeEnum.SINGLE_FAMILY
    )
    number_of_units: Optional[PositiveInt] = None
    lot_size: Optional[PositiveFloat] = Field(default=None, description="m² per lot")
    house_size: Optional[PositiveFloat] = Field(
        default=None, description="Built-up m² per house"
    )
    unit_size: Optional[PositiveFloat] = None


class MixedScenario(ScenarioBase):
    """
    Mixed development of apartments and houses.

    Only `number_of_units` drives the calculator; the apartment and
    single-family split fields are descriptive.
    """

    project_type: Literal[ProjectTypeEnum.MIXED] = ProjectTypeEnum.MIXED
    number_of_units: Optional[PositiveInt] = None
    apartment_units: Optional[PositiveInt] = None
    single_family_units: Optional[PositiveInt] = None
    apartment_floors: Optional[PositiveInt] = None
    apartment_units_per_floor: Optional[PositiveInt] = None


Scenario = Annotated[
    Union[ApartmentScenario, SingleFamilyScenario, MixedScenario],
    Field(discriminator="project_type"),
]

scenario_adapter: TypeAdapter = TypeAdapter(Scenario)


def parse_scenario(data: dict) -> Union[ApartmentScenario, SingleFamilyScenario, MixedScenario]:
    """Build the scenario variant named by the record's `project_type`."""
    return scenario_adapter.validate_python(data)
