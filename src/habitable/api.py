# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scenario Analysis API

Public entry point that takes a project and one of its scenarios through
assumption lookup, override resolution and land-size conversion before
handing them to the scenario calculator.
"""

from __future__ import annotations

import logging
from typing import Optional

from habitable.assumptions import (
    CountryCostAssumptions,
    get_cost_assumptions,
    resolve_assumptions,
    to_square_meters,
)
from habitable.core.primitives import GlobalSettings
from habitable.scenario import (
    AnyScenario,
    Project,
    ScenarioResults,
    compute_scenario_results,
)

logger = logging.getLogger(__name__)


def resolve_scenario_assumptions(
    project: Project,
    scenario: AnyScenario,
    assumptions: Optional[CountryCostAssumptions] = None,
) -> CountryCostAssumptions:
    """
    Country assumptions for a scenario with every override applied.

    `assumptions` replaces the built-in country defaults as the base layer,
    e.g. a workspace's saved per-country overrides.
    """
    base = assumptions or get_cost_assumptions(project.country_code)
    return resolve_assumptions(
        base, project.custom_assumptions, scenario.custom_assumptions
    )


def analyze_scenario(
    project: Project,
    scenario: AnyScenario,
    *,
    assumptions: Optional[CountryCostAssumptions] = None,
    settings: Optional[GlobalSettings] = None,
) -> ScenarioResults:
    """
    Compute the results of a scenario within its project.

    Args:
        project: Owning project (site, budget, location, overrides)
        scenario: Apartment, single-family or mixed scenario
        assumptions: Optional base assumptions; defaults to the project's
            country from the built-in table
        settings: Optional GlobalSettings for allowances and defaults

    Returns:
        ScenarioResults for the scenario. Neither input is modified; store
        the result with `scenario.model_copy(update={"calculated_results": ...})`.

    Raises:
        ConfigurationError: If an apartment scenario is missing structural fields
    """
    settings = settings or GlobalSettings()
    resolved = resolve_scenario_assumptions(project, scenario, assumptions)
    land_size_sqm = to_square_meters(
        project.land_size, project.land_size_unit, settings.cost
    )
    logger.debug(
        f"Analyzing scenario '{scenario.name or scenario.id}' of project "
        f"'{project.name}' on {land_size_sqm:,.0f} m²"
    )
    return compute_scenario_results(
        scenario, project.budget_range, land_size_sqm, resolved, settings
    )
