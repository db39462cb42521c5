# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Habitable Core Primitives

Essential building blocks shared by every engine component: the immutable
model base, constrained numeric types, enumerations, settings and draw
schedules.
"""

from .draw_schedule import (
    AnyDrawSchedule,
    DrawSchedule,
    SCurveDrawSchedule,
    UniformDrawSchedule,
)
from .enums import (
    BudgetStatusEnum,
    ComplianceCategoryEnum,
    DensityClassEnum,
    DevelopmentLevelEnum,
    DrawScheduleKindEnum,
    FinishLevelEnum,
    HomeSizeEnum,
    HomeStyleEnum,
    ImpactLevelEnum,
    InfrastructureStatusEnum,
    LandSizeUnitEnum,
    LoanTypeEnum,
    ProjectTypeEnum,
    RentalModelEnum,
    TargetIncomeGroupEnum,
)
from .model import Model
from .settings import (
    ComplianceSettings,
    CostSettings,
    ForecastSettings,
    GlobalSettings,
    InvestmentSettings,
    TimelineSettings,
)
from .types import FloatBetween0And1, Percentage, PositiveFloat, PositiveInt

__all__ = [
    # Core models
    "Model",
    # Settings
    "GlobalSettings",
    "CostSettings",
    "ForecastSettings",
    "InvestmentSettings",
    "TimelineSettings",
    "ComplianceSettings",
    # Draw schedules
    "AnyDrawSchedule",
    "DrawSchedule",
    "SCurveDrawSchedule",
    "UniformDrawSchedule",
    # Enums
    "BudgetStatusEnum",
    "ComplianceCategoryEnum",
    "DensityClassEnum",
    "DevelopmentLevelEnum",
    "DrawScheduleKindEnum",
    "FinishLevelEnum",
    "HomeSizeEnum",
    "HomeStyleEnum",
    "ImpactLevelEnum",
    "InfrastructureStatusEnum",
    "LandSizeUnitEnum",
    "LoanTypeEnum",
    "ProjectTypeEnum",
    "RentalModelEnum",
    "TargetIncomeGroupEnum",
    # Types
    "FloatBetween0And1",
    "Percentage",
    "PositiveFloat",
    "PositiveInt",
]
