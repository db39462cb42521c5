# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Result records produced by the scenario results calculator."""

from __future__ import annotations

from ..core.primitives import (
    BudgetStatusEnum,
    DensityClassEnum,
    InfrastructureStatusEnum,
    Model,
    PositiveFloat,
    PositiveInt,
)


class UnitBreakdown(Model):
    """
    Unit counts by type.

    Apartment scenarios populate the bedroom counts, single-family scenarios
    `single_family` and mixed scenarios `mixed`. The counts always sum to
    the scenario's total units.
    """

    one_bedroom: PositiveInt = 0
    two_bedroom: PositiveInt = 0
    three_bedroom: PositiveInt = 0
    single_family: PositiveInt = 0
    mixed: PositiveInt = 0

    @property
    def total(self) -> int:
        return (
            self.one_bedroom
            + self.two_bedroom
            + self.three_bedroom
            + self.single_family
            + self.mixed
        )


class CostBreakdown(Model):
    """Components of the total project cost."""

    construction: PositiveFloat = 0.0
    infrastructure: PositiveFloat = 0.0
    soft_costs: PositiveFloat = 0.0
    contingency: PositiveFloat = 0.0

    @property
    def subtotal(self) -> float:
        """Hard costs: construction plus infrastructure allowance."""
        return self.construction + self.infrastructure

    @property
    def total(self) -> float:
        return self.subtotal + self.soft_costs + self.contingency


class ScenarioResults(Model):
    """
    Derived snapshot of one scenario's metrics.

    Never mutated in place: every recomputation yields a new record that
    replaces the cached copy on the owning scenario.
    """

    total_units: PositiveInt
    estimated_population: PositiveFloat
    built_up_area: PositiveFloat
    land_coverage_percentage: PositiveFloat
    density_per_hectare: PositiveFloat
    density_classification: DensityClassEnum

    total_project_cost: PositiveFloat
    cost_per_unit: PositiveFloat
    cost_per_person: PositiveFloat
    budget_status: BudgetStatusEnum

    daily_water_demand: PositiveFloat  # liters
    electricity_demand: PositiveFloat  # kWh per day
    waste_generation: PositiveFloat  # kg per day
    infrastructure_status: InfrastructureStatusEnum

    unit_breakdown: UnitBreakdown = UnitBreakdown()
    cost_breakdown: CostBreakdown = CostBreakdown()
