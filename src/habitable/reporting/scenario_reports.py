# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scenario Reports

Presentation tables built from computed results. Reports only arrange and
label values; every number comes from the scenario record or its results.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Tuple

import pandas as pd

from ..scenario import AnyScenario, ScenarioResults

# (row label, ScenarioResults attribute)
COMPARISON_ROWS = (
    ("Total Units", "total_units"),
    ("Estimated Population", "estimated_population"),
    ("Built-up Area (m²)", "built_up_area"),
    ("Land Coverage (%)", "land_coverage_percentage"),
    ("Density (units/ha)", "density_per_hectare"),
    ("Density Class", "density_classification"),
    ("Total Project Cost", "total_project_cost"),
    ("Cost per Unit", "cost_per_unit"),
    ("Cost per Person", "cost_per_person"),
    ("Budget Status", "budget_status"),
    ("Daily Water Demand (L)", "daily_water_demand"),
    ("Electricity Demand (kWh/day)", "electricity_demand"),
    ("Waste Generation (kg/day)", "waste_generation"),
    ("Infrastructure Status", "infrastructure_status"),
)


def compare_scenarios(
    scenarios: Iterable[Tuple[AnyScenario, ScenarioResults]],
) -> pd.DataFrame:
    """
    Side-by-side results of several scenarios.

    Args:
        scenarios: (scenario, results) pairs in display order

    Returns:
        DataFrame with one row per metric and one column per scenario,
        labelled by scenario name (id when unnamed). A name shared by several
        scenarios is suffixed with each one's id. Enum metrics appear as
        their string values.
    """
    pairs = list(scenarios)
    names = [scenario.name or scenario.id for scenario, _ in pairs]
    counts = Counter(names)
    labels = [
        f"{name} ({scenario.id})" if counts[name] > 1 else name
        for name, (scenario, _) in zip(names, pairs)
    ]

    columns = []
    for _, results in pairs:
        values = []
        for _, attribute in COMPARISON_ROWS:
            value = getattr(results, attribute)
            values.append(getattr(value, "value", value))
        columns.append(values)

    index = pd.Index([label for label, _ in COMPARISON_ROWS], name="Metric")
    frame = pd.DataFrame(dict(enumerate(columns)), index=index)
    frame.columns = labels
    return frame


def cost_breakdown(scenario: AnyScenario, results: ScenarioResults) -> pd.Series:
    """
    Construction cost against the scenario's itemized infrastructure lines.

    Construction is built-up area times the scenario's cost per m²; the
    infrastructure lines are the scenario's own entries, not the per-unit
    allowance used in the project total.
    """
    infrastructure = scenario.infrastructure_costs
    return pd.Series(
        {
            "Construction": results.built_up_area * scenario.construction_cost_per_sqm,
            "Water": infrastructure.water,
            "Sewer": infrastructure.sewer,
            "Roads": infrastructure.roads,
            "Electricity": infrastructure.electricity,
        },
        name="cost",
    )
