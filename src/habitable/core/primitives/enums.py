# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class ProjectTypeEnum(str, Enum):
    """
    Building topology of a project and of every scenario under it.

    Exactly one topology's fields are authoritative for a scenario.
    """

    APARTMENT = "apartment"
    SINGLE_FAMILY = "single-family"
    MIXED = "mixed"


class FinishLevelEnum(str, Enum):
    """Construction finish quality, mapped to the country cost tiers."""

    BASIC = "basic"  # Low-quality, minimal finishes
    STANDARD = "standard"  # Medium quality, basic finishes
    IMPROVED = "improved"  # High quality, good finishes


class DensityClassEnum(str, Enum):
    """Categorical density label derived from units per hectare."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very-high"

    @property
    def rank(self) -> int:
        """Ordinal position, lowest band first."""
        return _DENSITY_ORDER.index(self)


_DENSITY_ORDER = [
    DensityClassEnum.LOW,
    DensityClassEnum.MEDIUM,
    DensityClassEnum.HIGH,
    DensityClassEnum.VERY_HIGH,
]


class BudgetStatusEnum(str, Enum):
    """Total project cost relative to the project's budget range."""

    UNDER = "under"
    WITHIN = "within"
    OVER = "over"


class InfrastructureStatusEnum(str, Enum):
    """Daily utility load relative to the infrastructure warning levels."""

    OK = "ok"
    WARNING = "warning"
    EXCEEDS = "exceeds"


class LandSizeUnitEnum(str, Enum):
    """Unit in which a project's land size was entered."""

    SQM = "sqm"
    ACRES = "acres"


class TargetIncomeGroupEnum(str, Enum):
    """Household income group a project is meant to house."""

    LOW = "low"
    LOWER_MIDDLE = "lower-middle"
    MIDDLE = "middle"
    MIXED = "mixed"


class DevelopmentLevelEnum(str, Enum):
    """World Bank style income classification of a country."""

    LOW_INCOME = "low-income"
    LOWER_MIDDLE = "lower-middle"
    UPPER_MIDDLE = "upper-middle"
    HIGH_INCOME = "high-income"


class LoanTypeEnum(str, Enum):
    """Kind of debt financing used for a project."""

    CONSTRUCTION = "construction"
    MORTGAGE = "mortgage"
    MIXED = "mixed"
    NONE = "none"


class RentalModelEnum(str, Enum):
    """
    How units generate revenue.

    SALE: units are sold at the unit pricing
    RENTAL: units are let at a monthly rate (one year of rent is modeled)
    MIXED: the average of the sale and rental revenue
    """

    SALE = "sale"
    RENTAL = "rental"
    MIXED = "mixed"


class ComplianceCategoryEnum(str, Enum):
    """Regulatory domain a compliance rule belongs to."""

    ZONING = "zoning"
    BUILDING = "building"
    ACCESSIBILITY = "accessibility"
    ENVIRONMENTAL = "environmental"
    AFFORDABILITY = "affordability"
    SUSTAINABILITY = "sustainability"


class ImpactLevelEnum(str, Enum):
    """Severity of a compliance rule, used to prioritise recommendations."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def priority(self) -> int:
        """Sort key: lower sorts first (critical before high before the rest)."""
        return _IMPACT_ORDER.index(self)


_IMPACT_ORDER = [
    ImpactLevelEnum.CRITICAL,
    ImpactLevelEnum.HIGH,
    ImpactLevelEnum.MEDIUM,
    ImpactLevelEnum.LOW,
]


class DrawScheduleKindEnum(str, Enum):
    """
    Type of draw schedule for distributing phase costs over months.

    Options:
        UNIFORM: Evenly distributed draws across the phase
        S_CURVE: S-curve distribution following construction spending patterns
    """

    UNIFORM = "uniform"
    S_CURVE = "s-curve"


class HomeStyleEnum(str, Enum):
    """Architectural style of a self-build home; drives the cost multiplier."""

    BASIC = "basic"
    STANDARD = "standard"
    LUXURY = "luxury"
    MODERN = "modern"
    TRADITIONAL = "traditional"


class HomeSizeEnum(str, Enum):
    """Size preset of a self-build home."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    SPACIOUS = "spacious"
