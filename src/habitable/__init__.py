# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
Habitable - Affordable Housing Feasibility Engine

Deterministic building blocks for housing feasibility planning, from a single
scenario's unit and cost metrics to demand forecasts, investment returns,
construction phasing and regulatory compliance.

Key Entry Points:
- habitable.api.analyze_scenario() - Project + scenario to ScenarioResults
- habitable.scenario.compute_scenario_results() - Core metrics calculator
- habitable.forecast.forecast_demand() - Population and housing demand
- habitable.investment.evaluate_investment() - Financing and returns
- habitable.timeline.generate_timeline() - Construction phasing
- habitable.compliance.evaluate_compliance() - Rule evaluation

Example Usage:
    ```python
    from habitable.api import analyze_scenario
    from habitable.investment import InvestmentScenario, UnitPricing, evaluate_investment

    results = analyze_scenario(project, scenario)
    investment = InvestmentScenario(
        unit_pricing=UnitPricing(one_bedroom=40_000, two_bedroom=55_000, three_bedroom=70_000)
    )
    returns = evaluate_investment(investment, results)
    print(f"ROI: {returns.roi:.1f}%")
    ```
"""

# Libraries should not configure logging; applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "api",
    "assumptions",
    "compliance",
    "core",
    "forecast",
    "home",
    "investment",
    "reporting",
    "scenario",
    "storage",
    "timeline",
]


_LAZY_MODULES = {
    "api": "habitable.api",
    "assumptions": "habitable.assumptions",
    "compliance": "habitable.compliance",
    "core": "habitable.core",
    "forecast": "habitable.forecast",
    "home": "habitable.home",
    "investment": "habitable.investment",
    "reporting": "habitable.reporting",
    "scenario": "habitable.scenario",
    "storage": "habitable.storage",
    "timeline": "habitable.timeline",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'habitable' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
