# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Assumption provider backed by the built-in country table.

Lookups never fail on an unrecognized country code: they fall back to the
default country and log the substitution.
"""

from __future__ import annotations

import logging
from typing import List

from ..core.primitives import DevelopmentLevelEnum
from .country_data import COUNTRY_DATABASE, DEFAULT_COUNTRY_CODE
from .models import CountryCostAssumptions, CountryData

logger = logging.getLogger(__name__)


def get_country_data(country_code: str) -> CountryData:
    """
    Reference row for a country code (case-insensitive).

    Unknown or empty codes resolve to the default country (India).
    """
    code = (country_code or "").strip().upper()
    data = COUNTRY_DATABASE.get(code)
    if data is None:
        logger.debug(
            f"Unknown country code '{country_code}', using {DEFAULT_COUNTRY_CODE} data"
        )
        data = COUNTRY_DATABASE[DEFAULT_COUNTRY_CODE]
    return data


def get_cost_assumptions(country_code: str) -> CountryCostAssumptions:
    """
    Default cost assumptions for a country.

    Reshapes the country row and completes it with the engine-wide
    defaults: four persons per single-family home, density thresholds of
    50/150/300/500 units per hectare, the infrastructure warning levels and
    the standard room sizes. The `country` field echoes the requested code.
    """
    data = get_country_data(country_code)
    return CountryCostAssumptions(
        country=country_code or data.code,
        construction_costs=data.construction_costs,
        infrastructure=data.infrastructure,
        persons_per_unit=data.occupancy,
        utilities=data.utilities,
        labor_cost_percentage=data.labor_cost_percentage,
    )


def list_countries() -> List[CountryData]:
    """All countries in the table, sorted by name."""
    return sorted(COUNTRY_DATABASE.values(), key=lambda c: c.name)


def countries_by_region(region: str) -> List[CountryData]:
    return [c for c in COUNTRY_DATABASE.values() if c.region == region]


def countries_by_development_level(
    level: DevelopmentLevelEnum,
) -> List[CountryData]:
    level = DevelopmentLevelEnum(level)
    return [c for c in COUNTRY_DATABASE.values() if c.development_level == level]


def list_regions() -> List[str]:
    """Distinct regions, sorted alphabetically."""
    return sorted({c.region for c in COUNTRY_DATABASE.values()})
