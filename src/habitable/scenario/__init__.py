# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Projects, scenarios and the scenario results calculator.
"""

from .calculator import (
    AnyScenario,
    apply_scenario_defaults,
    classify_budget,
    classify_density,
    classify_infrastructure,
    compute_scenario_results,
    split_units,
)
from .models import (
    ApartmentScenario,
    InfrastructureCosts,
    Location,
    MixedScenario,
    Project,
    Scenario,
    ScenarioBase,
    SingleFamilyScenario,
    UnitMix,
    parse_scenario,
    scenario_adapter,
    validate_unit_mix,
)
from .results import CostBreakdown, ScenarioResults, UnitBreakdown

__all__ = [
    "AnyScenario",
    "ApartmentScenario",
    "CostBreakdown",
    "InfrastructureCosts",
    "Location",
    "MixedScenario",
    "Project",
    "Scenario",
    "ScenarioBase",
    "ScenarioResults",
    "SingleFamilyScenario",
    "UnitBreakdown",
    "UnitMix",
    "apply_scenario_defaults",
    "classify_budget",
    "classify_density",
    "classify_infrastructure",
    "compute_scenario_results",
    "parse_scenario",
    "scenario_adapter",
    "split_units",
    "validate_unit_mix",
]
