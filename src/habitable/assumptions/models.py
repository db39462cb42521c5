# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Country reference data and cost assumption records.

`CountryData` is the raw per-country reference row. `CountryCostAssumptions`
is what the calculator consumes: the country row reshaped and completed with
the engine-wide defaults (density thresholds, warning levels, room sizes).
Projects and scenarios carry partial `AssumptionOverrides` on top of it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator

from ..core.primitives import (
    DevelopmentLevelEnum,
    FinishLevelEnum,
    Model,
    Percentage,
    PositiveFloat,
)


class BudgetRange(Model):
    """Inclusive budget band for a project's total cost."""

    min: PositiveFloat = 0.0
    max: PositiveFloat = 0.0
    currency: str = "USD"

    @model_validator(mode="after")
    def check_bounds(self) -> "BudgetRange":
        if self.min > self.max:
            raise ValueError(f"Budget min ({self.min}) exceeds max ({self.max})")
        return self


class ConstructionCosts(Model):
    """Construction cost per square metre by finish level (USD equivalent)."""

    basic: PositiveFloat
    standard: PositiveFloat
    improved: PositiveFloat

    def for_finish(self, finish_level: FinishLevelEnum) -> float:
        """Cost per square metre for a finish level."""
        return getattr(self, FinishLevelEnum(finish_level).value)


class InfrastructureUnitCosts(Model):
    water_per_connection: PositiveFloat
    sewer_per_connection: PositiveFloat
    roads_per_meter: PositiveFloat


class PersonsPerUnit(Model):
    """Occupancy per apartment unit type."""

    one_bedroom: PositiveFloat = Field(default=2.0, gt=0)
    two_bedroom: PositiveFloat = Field(default=3.0, gt=0)
    three_bedroom: PositiveFloat = Field(default=4.0, gt=0)


class UtilityConsumption(Model):
    """Daily per-capita utility consumption."""

    water_liters_per_person: PositiveFloat
    electricity_kwh_per_person: PositiveFloat
    waste_kg_per_person: PositiveFloat


class DensityThresholds(Model):
    """
    Density band bounds in units per hectare.

    A result is classified into the highest band whose bound it exceeds;
    `low` is informational since anything at or below `medium` is low.
    """

    low: PositiveFloat = 50.0
    medium: PositiveFloat = 150.0
    high: PositiveFloat = 300.0
    very_high: PositiveFloat = 500.0

    @model_validator(mode="after")
    def check_ordering(self) -> "DensityThresholds":
        if not (self.low <= self.medium <= self.high <= self.very_high):
            raise ValueError(
                "Density thresholds must be ordered low <= medium <= high <= very_high"
            )
        return self


class InfrastructureWarningLevels(Model):
    """
    Infrastructure status thresholds.

    Water levels are compared directly against the daily water demand figure
    produced by the calculator.
    """

    water_demand_exceeds: PositiveFloat = 5_000.0
    water_demand_warning: PositiveFloat = 3_000.0
    population_exceeds: PositiveFloat = 15_000.0
    population_warning: PositiveFloat = 8_000.0

    @model_validator(mode="after")
    def check_ordering(self) -> "InfrastructureWarningLevels":
        if self.water_demand_warning > self.water_demand_exceeds:
            raise ValueError("water_demand_warning must not exceed water_demand_exceeds")
        if self.population_warning > self.population_exceeds:
            raise ValueError("population_warning must not exceed population_exceeds")
        return self


class RoomSizes(Model):
    """Room sizes in m², used for layout visualization."""

    master_bedroom: PositiveFloat = 20.0
    bedroom: PositiveFloat = 15.0
    living_room: PositiveFloat = 30.0
    kitchen: PositiveFloat = 15.0
    bathroom: PositiveFloat = 10.0
    hallway: PositiveFloat = 8.0


class TypicalProjectBudgets(Model):
    small: BudgetRange
    medium: BudgetRange
    large: BudgetRange


class CountryData(Model):
    """One row of the built-in country reference table."""

    name: str
    code: str = Field(min_length=2, max_length=2)
    region: str
    subregion: str
    currency: str
    development_level: DevelopmentLevelEnum
    construction_costs: ConstructionCosts
    infrastructure: InfrastructureUnitCosts
    occupancy: PersonsPerUnit
    utilities: UtilityConsumption
    labor_cost_percentage: Percentage
    typical_project_budgets: TypicalProjectBudgets


class CountryCostAssumptions(Model):
    """
    Fully populated assumptions for one country.

    This is the only assumptions shape the calculator reads; overrides are
    merged into it beforehand by `resolve_assumptions`.
    """

    country: str
    construction_costs: ConstructionCosts
    infrastructure: InfrastructureUnitCosts
    persons_per_unit: PersonsPerUnit = Field(default_factory=PersonsPerUnit)
    single_family_persons_per_unit: PositiveFloat = Field(default=4.0, gt=0)
    utilities: UtilityConsumption
    density_thresholds: DensityThresholds = Field(default_factory=DensityThresholds)
    infrastructure_warning_levels: InfrastructureWarningLevels = Field(
        default_factory=InfrastructureWarningLevels
    )
    room_sizes: RoomSizes = Field(default_factory=RoomSizes)
    labor_cost_percentage: Percentage = 30.0


# --- Partial overrides ---


class PersonsPerUnitOverride(Model):
    one_bedroom: Optional[PositiveFloat] = Field(default=None, gt=0)
    two_bedroom: Optional[PositiveFloat] = Field(default=None, gt=0)
    three_bedroom: Optional[PositiveFloat] = Field(default=None, gt=0)


class DensityThresholdsOverride(Model):
    low: Optional[PositiveFloat] = None
    medium: Optional[PositiveFloat] = None
    high: Optional[PositiveFloat] = None
    very_high: Optional[PositiveFloat] = None


class InfrastructureWarningLevelsOverride(Model):
    water_demand_exceeds: Optional[PositiveFloat] = None
    water_demand_warning: Optional[PositiveFloat] = None
    population_exceeds: Optional[PositiveFloat] = None
    population_warning: Optional[PositiveFloat] = None


class RoomSizesOverride(Model):
    master_bedroom: Optional[PositiveFloat] = None
    bedroom: Optional[PositiveFloat] = None
    living_room: Optional[PositiveFloat] = None
    kitchen: Optional[PositiveFloat] = None
    bathroom: Optional[PositiveFloat] = None
    hallway: Optional[PositiveFloat] = None


class AssumptionOverrides(Model):
    """
    Project or scenario level adjustments to the country assumptions.

    Every field is optional; an unset field (or an unset field inside a
    group) inherits from the next less specific tier.
    """

    persons_per_unit: Optional[PersonsPerUnitOverride] = None
    single_family_persons_per_unit: Optional[PositiveFloat] = Field(default=None, gt=0)
    density_thresholds: Optional[DensityThresholdsOverride] = None
    infrastructure_warning_levels: Optional[InfrastructureWarningLevelsOverride] = None
    room_sizes: Optional[RoomSizesOverride] = None
