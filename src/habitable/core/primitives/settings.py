# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Dict

from pydantic import Field, model_validator

from .enums import TargetIncomeGroupEnum
from .model import Model
from .types import FloatBetween0And1, PositiveFloat, PositiveInt


class CostSettings(Model):
    """
    Fixed allowances and defaults used by the scenario results calculator.

    The itemized infrastructure costs on a scenario feed the cost breakdown
    only; the project total always uses `infrastructure_cost_per_unit`.
    """

    infrastructure_cost_per_unit: PositiveFloat = Field(
        default=15_000.0,
        description="Flat per-unit infrastructure allowance added to construction cost.",
    )
    soft_cost_rate: FloatBetween0And1 = Field(
        default=0.15, description="Soft costs as a fraction of the hard-cost subtotal."
    )
    contingency_rate: FloatBetween0And1 = Field(
        default=0.10, description="Contingency as a fraction of the hard-cost subtotal."
    )
    default_apartment_unit_size: PositiveFloat = Field(
        default=50.0, description="Apartment unit size (m²) when the scenario omits it."
    )
    default_shared_space_percentage: PositiveFloat = Field(
        default=20.0,
        description="Corridors, stairs and lifts as % of unit area when omitted.",
    )
    default_single_family_unit_size: PositiveFloat = Field(
        default=150.0, description="House size (m²) when neither house nor unit size is set."
    )
    mixed_unit_area: PositiveFloat = Field(
        default=60.0, description="Fixed built-up area (m²) per unit in mixed projects."
    )
    square_meters_per_acre: PositiveFloat = 4046.86


class ForecastSettings(Model):
    """Settings for population and housing demand projections."""

    average_household_size: PositiveFloat = Field(
        default=3.5, gt=0, description="Persons per household used to convert population to units."
    )


class InvestmentSettings(Model):
    """Defaults for the investment returns engine."""

    irr_max_iterations: PositiveInt = Field(
        default=100, gt=0, description="Upper bound on IRR solver iterations."
    )
    irr_tolerance: PositiveFloat = Field(
        default=1e-9, gt=0, description="Absolute tolerance on the monthly IRR."
    )
    irr_lower_bound: float = Field(
        default=-0.5, gt=-1, description="Lowest monthly rate searched by the IRR solver."
    )
    irr_upper_bound: PositiveFloat = Field(
        default=1.0, gt=0, description="Highest monthly rate searched by the IRR solver."
    )
    default_property_management_percentage: PositiveFloat = 5.0
    default_sales_months: PositiveInt = Field(default=12, gt=0)
    affordable_price_to_income_ratio: PositiveFloat = Field(
        default=5.0,
        gt=0,
        description="Home price a household can afford, as a multiple of annual income.",
    )
    target_household_income: Dict[TargetIncomeGroupEnum, PositiveFloat] = Field(
        default_factory=lambda: {
            TargetIncomeGroupEnum.LOW: 12_000.0,
            TargetIncomeGroupEnum.LOWER_MIDDLE: 24_000.0,
            TargetIncomeGroupEnum.MIDDLE: 48_000.0,
            TargetIncomeGroupEnum.MIXED: 30_000.0,
        },
        description="Annual household income (USD equivalent) by target income group.",
    )

    @model_validator(mode="after")
    def check_irr_bracket(self) -> "InvestmentSettings":
        if self.irr_lower_bound >= self.irr_upper_bound:
            raise ValueError("irr_lower_bound must be below irr_upper_bound")
        return self


class TimelineSettings(Model):
    """Settings for construction phasing."""

    labor_cost_share: FloatBetween0And1 = Field(
        default=0.35, description="Share of phase cost spent on labour."
    )
    monthly_labor_cost_per_worker: PositiveFloat = Field(
        default=1_200.0, gt=0, description="Fully loaded monthly cost of one worker."
    )


class ComplianceSettings(Model):
    """Settings for regulatory compliance evaluation."""

    default_remediation_cost: PositiveFloat = Field(
        default=5_000.0,
        gt=0,
        description="Remediation cost of a failed rule that declares no cost impact.",
    )


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global engine settings

    Groups the fixed allowances and defaults of every component. Each engine
    function accepts an optional settings object and falls back to
    `GlobalSettings()` when none is given.
    """

    cost: CostSettings = Field(default_factory=CostSettings)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)
    investment: InvestmentSettings = Field(default_factory=InvestmentSettings)
    timeline: TimelineSettings = Field(default_factory=TimelineSettings)
    compliance: ComplianceSettings = Field(default_factory=ComplianceSettings)
