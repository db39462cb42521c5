# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Country cost assumptions.

Built-in country reference data, the assumption provider, and the
three-tier (country, project, scenario) override resolution.
"""

from .country_data import COUNTRY_DATABASE, DEFAULT_COUNTRY_CODE
from .models import (
    AssumptionOverrides,
    BudgetRange,
    ConstructionCosts,
    CountryCostAssumptions,
    CountryData,
    DensityThresholds,
    DensityThresholdsOverride,
    InfrastructureUnitCosts,
    InfrastructureWarningLevels,
    InfrastructureWarningLevelsOverride,
    PersonsPerUnit,
    PersonsPerUnitOverride,
    RoomSizes,
    RoomSizesOverride,
    TypicalProjectBudgets,
    UtilityConsumption,
)
from .provider import (
    countries_by_development_level,
    countries_by_region,
    get_cost_assumptions,
    get_country_data,
    list_countries,
    list_regions,
)
from .resolution import resolve_assumptions, to_square_meters

__all__ = [
    "COUNTRY_DATABASE",
    "DEFAULT_COUNTRY_CODE",
    "AssumptionOverrides",
    "BudgetRange",
    "ConstructionCosts",
    "CountryCostAssumptions",
    "CountryData",
    "DensityThresholds",
    "DensityThresholdsOverride",
    "InfrastructureUnitCosts",
    "InfrastructureWarningLevels",
    "InfrastructureWarningLevelsOverride",
    "PersonsPerUnit",
    "PersonsPerUnitOverride",
    "RoomSizes",
    "RoomSizesOverride",
    "TypicalProjectBudgets",
    "UtilityConsumption",
    "countries_by_development_level",
    "countries_by_region",
    "get_cost_assumptions",
    "get_country_data",
    "list_countries",
    "list_regions",
    "resolve_assumptions",
    "to_square_meters",
]
