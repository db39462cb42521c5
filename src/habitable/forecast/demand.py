# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Housing demand forecasting.

Compound population growth converted to housing units at a fixed average
household size.
"""

from __future__ import annotations

import logging
from typing import List, Literal, Optional

import pandas as pd
from pydantic import Field

from ..core.calculations import round_half_up
from ..core.primitives import GlobalSettings, Model, PositiveFloat, PositiveInt

logger = logging.getLogger(__name__)

TimeHorizon = Literal[5, 10, 20]
VALID_HORIZONS = (5, 10, 20)


class DemandProjection(Model):
    """One forecast year."""

    year: PositiveInt
    population: PositiveInt
    housing_demand: PositiveInt
    surplus_shortfall: int = Field(
        description="Housing demand minus the year-0 baseline demand"
    )


class DemandForecast(Model):
    """Population and housing demand projection for a project's catchment."""

    project_id: str
    current_population: PositiveFloat
    annual_growth_rate: float = Field(ge=-100, description="Percent per year")
    time_horizon: TimeHorizon
    projections: List[DemandProjection] = Field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Projections as a DataFrame indexed by year."""
        columns = ["population", "housing_demand", "surplus_shortfall"]
        if not self.projections:
            return pd.DataFrame(columns=columns, index=pd.Index([], name="year"))
        frame = pd.DataFrame([p.model_dump() for p in self.projections])
        return frame.set_index("year")[columns]


def forecast_demand(
    project_id: str,
    current_population: float,
    annual_growth_pct: float,
    horizon_years: int = 10,
    settings: Optional[GlobalSettings] = None,
) -> DemandForecast:
    """
    Project population and housing demand year by year.

    Each year is computed from the current population directly, so rounding
    never compounds across years:

        population(y) = current × (1 + g/100)^y
        housing_demand(y) = round(population(y) / household_size)
        surplus_shortfall(y) = housing_demand(y) − round(current / household_size)

    Args:
        project_id: Owning project identifier
        current_population: Population at year 0
        annual_growth_pct: Growth rate in percent per year
        horizon_years: 5, 10 or 20
        settings: Household size (GlobalSettings() if omitted)

    Returns:
        DemandForecast with `horizon_years` ordered projections

    Raises:
        ValueError: If the horizon is not 5, 10 or 20

    Example:
        >>> forecast = forecast_demand("p1", 100_000, 2.5, 10)
        >>> forecast.projections[9].population
        128008
    """
    if horizon_years not in VALID_HORIZONS:
        raise ValueError(
            f"Time horizon must be one of {VALID_HORIZONS}, got {horizon_years}"
        )
    household_size = (settings or GlobalSettings()).forecast.average_household_size

    baseline_demand = round_half_up(current_population / household_size)
    growth_factor = 1 + annual_growth_pct / 100

    projections = []
    for year in range(1, horizon_years + 1):
        population = current_population * growth_factor**year
        housing_demand = round_half_up(population / household_size)
        projections.append(
            DemandProjection(
                year=year,
                population=round_half_up(population),
                housing_demand=housing_demand,
                surplus_shortfall=housing_demand - baseline_demand,
            )
        )

    logger.debug(
        f"Forecast for project '{project_id}': {horizon_years} years at "
        f"{annual_growth_pct}% growth, final demand {projections[-1].housing_demand:,} units"
    )

    return DemandForecast(
        project_id=project_id,
        current_population=current_population,
        annual_growth_rate=annual_growth_pct,
        time_horizon=horizon_years,
        projections=projections,
    )


def supply_gap(forecast: DemandForecast, total_units: int) -> pd.Series:
    """
    Housing demand minus a scenario's unit supply, per forecast year.

    Positive values are unmet demand; negative values are surplus units.
    """
    demand = forecast.to_dataframe()["housing_demand"]
    return (demand - total_units).rename("supply_gap")
