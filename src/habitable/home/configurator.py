# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Self-build home configurator.

Sizes and prices a single detached home for an individual owner from a
style, a size preset and a set of optional features, using the country's
construction costs and labour share.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..assumptions import get_country_data
from ..core.calculations import round_half_up
from ..core.primitives import (
    HomeSizeEnum,
    HomeStyleEnum,
    Model,
    PositiveFloat,
    PositiveInt,
)

logger = logging.getLogger(__name__)

STYLE_MULTIPLIERS = {
    HomeStyleEnum.BASIC: 1.0,
    HomeStyleEnum.STANDARD: 1.5,
    HomeStyleEnum.LUXURY: 2.5,
    HomeStyleEnum.MODERN: 1.8,
    HomeStyleEnum.TRADITIONAL: 1.3,
}

SIZE_BASE_AREAS = {
    HomeSizeEnum.SMALL: 60.0,
    HomeSizeEnum.MEDIUM: 100.0,
    HomeSizeEnum.LARGE: 150.0,
    HomeSizeEnum.SPACIOUS: 200.0,
}

FEATURE_CATALOG = {
    "solar_panels": (8_000.0, "Solar photovoltaic system for renewable energy"),
    "smart_home": (5_000.0, "IoT smart home automation system"),
    "air_conditioning": (6_000.0, "Central air conditioning system"),
    "swimming_pool": (25_000.0, "Residential swimming pool with finishing"),
    "garage": (12_000.0, "Attached garage for 2 vehicles"),
    "garden": (4_000.0, "Landscaped garden and outdoor space"),
}

# (room, share of building area, description)
ROOM_LAYOUT = (
    ("Master Bedroom", 0.15, "Primary master suite"),
    ("Bedroom 2", 0.12, "Secondary bedroom"),
    ("Bedroom 3", 0.12, "Tertiary bedroom"),
    ("Living Room", 0.25, "Main living and entertainment space"),
    ("Kitchen", 0.12, "Cooking and dining area"),
    ("Bathrooms", 0.08, "Two full bathrooms"),
    ("Hallways", 0.16, "Circulation spaces"),
)

SITE_CONNECTION_ALLOWANCE = 5_000.0
ROAD_FRONTAGE_METERS = 50.0
MAINTENANCE_RATE = 0.025
PROPERTY_TAX_RATE = 0.007
INSURANCE_RATE = 0.004
DAILY_WATER_LITERS = 300.0
WATER_COST_PER_LITER = 0.003
ELECTRICITY_COST_PER_SQM = 2.0
AREA_BUILT_PER_MONTH = 20.0


class HomeFeatures(Model):
    solar_panels: bool = False
    smart_home: bool = False
    air_conditioning: bool = False
    swimming_pool: bool = False
    garage: bool = False
    garden: bool = False


class HomeBuilderConfig(Model):
    id: str = ""
    country: str = ""
    country_code: str
    land_size: PositiveFloat = Field(description="Lot size in m²")
    budget: PositiveFloat = Field(description="Total budget in USD")
    style: HomeStyleEnum = HomeStyleEnum.STANDARD
    size_preference: HomeSizeEnum = HomeSizeEnum.MEDIUM
    features: HomeFeatures = Field(default_factory=HomeFeatures)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RoomArea(Model):
    room: str
    area: PositiveFloat
    description: str


class IncludedFeature(Model):
    feature: str
    cost: PositiveFloat
    description: str


class HomeSpecification(Model):
    total_building_area: PositiveFloat
    bedrooms: PositiveInt
    bathrooms: PositiveInt
    living_area: PositiveFloat
    kitchen_area: PositiveFloat

    # Cost breakdown
    building_cost: PositiveFloat
    cost_per_sqm: PositiveFloat
    infrastructure_cost: PositiveFloat
    features_cost: PositiveFloat
    labor_cost: PositiveFloat
    total_cost: PositiveFloat

    # Maintenance and operations
    annual_maintenance_cost: PositiveFloat
    monthly_utilities_cost: PositiveFloat
    property_tax_annual: PositiveFloat
    insurance_annual: PositiveFloat

    estimated_timeline_months: PositiveInt

    room_breakdown: List[RoomArea]
    included_features: List[IncludedFeature]

    # Budget analysis
    remaining_budget: float
    percentage_used: PositiveFloat


class HomeVisualization(Model):
    lot_size: PositiveFloat
    house_size: PositiveFloat
    coverage: PositiveFloat  # percentage of lot


class HomeBuilderResult(Model):
    config: HomeBuilderConfig
    specification: HomeSpecification
    visualization: HomeVisualization


def _bedrooms(size: HomeSizeEnum) -> int:
    if size == HomeSizeEnum.SMALL:
        return 1
    if size == HomeSizeEnum.SPACIOUS:
        return 3
    return 2


def calculate_home_specification(config: HomeBuilderConfig) -> HomeSpecification:
    """
    Price and size a self-build home.

    Basic style builds at the country's basic cost tier, luxury at the
    improved tier and every other style at the standard tier, before the
    style multiplier. Labour is the country's labour share of the building
    cost. Unknown country codes fall back to the default country.
    """
    country = get_country_data(config.country_code)
    style = HomeStyleEnum(config.style)

    if style == HomeStyleEnum.BASIC:
        base_cost_per_sqm = country.construction_costs.basic
    elif style == HomeStyleEnum.LUXURY:
        base_cost_per_sqm = country.construction_costs.improved
    else:
        base_cost_per_sqm = country.construction_costs.standard
    cost_per_sqm = base_cost_per_sqm * STYLE_MULTIPLIERS[style]

    area = SIZE_BASE_AREAS[HomeSizeEnum(config.size_preference)]
    rooms = [
        RoomArea(room=room, area=area * share, description=description)
        for room, share, description in ROOM_LAYOUT
    ]

    building_cost = round_half_up(area * cost_per_sqm)
    labor_cost = round_half_up(building_cost * country.labor_cost_percentage / 100)
    infrastructure = country.infrastructure
    infrastructure_cost = (
        infrastructure.water_per_connection
        + infrastructure.sewer_per_connection
        + infrastructure.roads_per_meter * ROAD_FRONTAGE_METERS
        + SITE_CONNECTION_ALLOWANCE
    )

    selected = config.features.model_dump()
    included = [
        IncludedFeature(feature=name, cost=cost, description=description)
        for name, (cost, description) in FEATURE_CATALOG.items()
        if selected.get(name)
    ]
    features_cost = sum(feature.cost for feature in included)

    total_cost = building_cost + labor_cost + infrastructure_cost + features_cost

    monthly_water = DAILY_WATER_LITERS * 30 * WATER_COST_PER_LITER
    monthly_electricity = area * ELECTRICITY_COST_PER_SQM

    logger.debug(
        f"Home spec for {country.code}: {area:g}m² {style.value}, total {total_cost:,.0f}"
    )

    return HomeSpecification(
        total_building_area=area,
        bedrooms=_bedrooms(config.size_preference),
        bathrooms=2,
        living_area=area * 0.25,
        kitchen_area=area * 0.12,
        building_cost=building_cost,
        cost_per_sqm=cost_per_sqm,
        infrastructure_cost=infrastructure_cost,
        features_cost=features_cost,
        labor_cost=labor_cost,
        total_cost=total_cost,
        annual_maintenance_cost=round_half_up(building_cost * MAINTENANCE_RATE),
        monthly_utilities_cost=round_half_up(monthly_water + monthly_electricity),
        property_tax_annual=round_half_up(total_cost * PROPERTY_TAX_RATE),
        insurance_annual=round_half_up(total_cost * INSURANCE_RATE),
        estimated_timeline_months=math.ceil(area / AREA_BUILT_PER_MONTH),
        room_breakdown=rooms,
        included_features=included,
        remaining_budget=config.budget - total_cost,
        percentage_used=total_cost / config.budget * 100 if config.budget > 0 else 0.0,
    )


def build_home(config: HomeBuilderConfig) -> HomeBuilderResult:
    """Specification plus the lot coverage used by the layout view."""
    specification = calculate_home_specification(config)
    coverage = (
        specification.total_building_area / config.land_size * 100
        if config.land_size > 0
        else 0.0
    )
    return HomeBuilderResult(
        config=config,
        specification=specification,
        visualization=HomeVisualization(
            lot_size=config.land_size,
            house_size=specification.total_building_area,
            coverage=coverage,
        ),
    )
