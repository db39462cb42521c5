# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Regulatory compliance evaluator.

Each rule threshold that is set is one predicate over the scenario and its
results. A rule is compliant when all of its predicates pass; a failing
rule always carries a positive remediation cost, so full compliance and a
zero remediation total coincide.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from ..core.primitives import (
    ComplianceCategoryEnum,
    GlobalSettings,
    ImpactLevelEnum,
)
from ..core.primitives.settings import CostSettings
from ..scenario.calculator import AnyScenario
from ..scenario.models import ApartmentScenario, SingleFamilyScenario
from ..scenario.results import ScenarioResults
from .models import (
    Certification,
    ComplianceRule,
    ComplianceStatus,
    Recommendation,
    RegulatoryCompliance,
)

logger = logging.getLogger(__name__)

RECOMMENDATION_TIMELINES = {
    ImpactLevelEnum.CRITICAL: "1-3 months",
    ImpactLevelEnum.HIGH: "3-6 months",
}
DEFAULT_RECOMMENDATION_TIMELINE = "6-12 months"

_CERTIFICATIONS = (
    ("ISO 50001 (Energy Management)", 10_000.0),
    ("Sustainable Building Certification", 15_000.0),
)
_GREEN_CATEGORIES = (
    ComplianceCategoryEnum.ENVIRONMENTAL,
    ComplianceCategoryEnum.SUSTAINABILITY,
)


def _unit_size(scenario: AnyScenario, settings: CostSettings) -> float:
    """Unit floor area in m², with the calculator's defaults applied."""
    if isinstance(scenario, ApartmentScenario):
        return scenario.unit_size or settings.default_apartment_unit_size
    if isinstance(scenario, SingleFamilyScenario):
        return (
            scenario.house_size
            or scenario.unit_size
            or settings.default_single_family_unit_size
        )
    return settings.mixed_unit_area


def _failures(
    rule: ComplianceRule,
    scenario: AnyScenario,
    results: ScenarioResults,
    settings: CostSettings,
) -> List[Tuple[str, str]]:
    """(note, adjustment) for every failing predicate of the rule."""
    failures = []
    density = results.density_per_hectare
    unit_size = _unit_size(scenario, settings)
    open_space = max(0.0, 100.0 - results.land_coverage_percentage)

    if rule.max_allowed_density is not None and density > rule.max_allowed_density:
        failures.append(
            (
                f"Density ({density:.0f} units/ha) exceeds limit of "
                f"{rule.max_allowed_density:g}",
                "Reduce unit count or increase land area",
            )
        )
    if rule.min_allowed_density is not None and density < rule.min_allowed_density:
        failures.append(
            (
                f"Density ({density:.0f} units/ha) below minimum of "
                f"{rule.min_allowed_density:g}",
                "Increase unit count or add floors",
            )
        )
    if rule.min_unit_size is not None and unit_size < rule.min_unit_size:
        failures.append(
            (
                f"Unit size ({unit_size:g}m²) below minimum of {rule.min_unit_size:g}m²",
                f"Increase unit size to {rule.min_unit_size:g}m² minimum",
            )
        )
    if rule.max_unit_size is not None and unit_size > rule.max_unit_size:
        failures.append(
            (
                f"Unit size ({unit_size:g}m²) above maximum of {rule.max_unit_size:g}m²",
                f"Reduce unit size to {rule.max_unit_size:g}m² maximum",
            )
        )
    if (
        rule.affordability_requirement is not None
        and scenario.affordable_units_percentage < rule.affordability_requirement
    ):
        failures.append(
            (
                f"Affordable units ({scenario.affordable_units_percentage:g}%) below "
                f"required {rule.affordability_requirement:g}%",
                f"Designate at least {rule.affordability_requirement:g}% of units as affordable",
            )
        )
    if (
        rule.accessibility_requirement is not None
        and scenario.accessible_units_percentage < rule.accessibility_requirement
    ):
        failures.append(
            (
                f"Accessible units ({scenario.accessible_units_percentage:g}%) below "
                f"required {rule.accessibility_requirement:g}%",
                f"Make at least {rule.accessibility_requirement:g}% of units fully accessible",
            )
        )
    if rule.green_building_requirement and not scenario.green_certified:
        failures.append(
            (
                "Green building certification required",
                "Pursue a recognised green building certification",
            )
        )
    if (
        rule.min_open_space_percentage is not None
        and open_space < rule.min_open_space_percentage
    ):
        failures.append(
            (
                f"Open space ({open_space:.1f}%) below minimum of "
                f"{rule.min_open_space_percentage:g}%",
                "Reduce building footprint or add communal open space",
            )
        )
    return failures


def _certifications(
    evaluated: Iterable[Tuple[ComplianceRule, ComplianceStatus]],
) -> List[Certification]:
    green_failures = any(
        not status.compliant and rule.category in _GREEN_CATEGORIES
        for rule, status in evaluated
    )
    return [
        Certification(name=name, achievable=not green_failures, cost=cost)
        for name, cost in _CERTIFICATIONS
    ]


def evaluate_compliance(
    scenario: AnyScenario,
    results: ScenarioResults,
    rules: List[ComplianceRule],
    *,
    country: str = "",
    city: Optional[str] = None,
    settings: Optional[GlobalSettings] = None,
) -> RegulatoryCompliance:
    """
    Evaluate a scenario and its results against a rule set.

    Args:
        scenario: The evaluated scenario
        results: Its computed results
        rules: Applicable rules, e.g. from `get_compliance_rules`
        country: Location recorded on the evaluation
        city: Optional city recorded on the evaluation
        settings: Default remediation cost and unit-size defaults

    Returns:
        RegulatoryCompliance with per-rule status, totals and recommendations
        ordered critical, high, medium, low (rule order within a level).
        An empty rule set is 100% compliant.
    """
    settings = settings or GlobalSettings()

    evaluated: List[Tuple[ComplianceRule, ComplianceStatus]] = []
    for rule in rules:
        failures = _failures(rule, scenario, results, settings.cost)
        if not failures:
            evaluated.append((rule, ComplianceStatus(rule_id=rule.id, compliant=True)))
            continue
        status = ComplianceStatus(
            rule_id=rule.id,
            compliant=False,
            notes="; ".join(note for note, _ in failures),
            suggested_adjustment="; ".join(adj for _, adj in failures),
            remedial_cost=rule.cost_impact or settings.compliance.default_remediation_cost,
        )
        evaluated.append((rule, status))

    statuses = [status for _, status in evaluated]

    total = len(statuses)
    compliant = sum(1 for s in statuses if s.compliant)
    percentage = compliant / total * 100 if total else 100.0
    remediation = sum(s.remedial_cost or 0.0 for s in statuses if not s.compliant)

    failing = sorted(
        ((rule, s) for rule, s in evaluated if not s.compliant),
        key=lambda pair: pair[0].impact.priority,
    )
    recommendations = [
        Recommendation(
            priority=rule.impact,
            action=s.suggested_adjustment or "Review and adjust configuration",
            rule_id=s.rule_id,
            estimated_cost=s.remedial_cost,
            timeline=RECOMMENDATION_TIMELINES.get(
                rule.impact, DEFAULT_RECOMMENDATION_TIMELINE
            ),
        )
        for rule, s in failing
    ]

    if total - compliant:
        logger.info(
            f"Scenario '{scenario.name or scenario.id}' fails {total - compliant} of "
            f"{total} rules; remediation estimate {remediation:,.0f}"
        )

    return RegulatoryCompliance(
        project_id=scenario.project_id,
        scenario_id=scenario.id,
        country=country,
        city=city,
        applicable_rules=list(rules),
        compliance_status=statuses,
        total_rules_applied=total,
        compliant_rules=compliant,
        non_compliant_rules=total - compliant,
        compliance_percentage=percentage,
        total_remediate_cost=remediation,
        certifications=_certifications(evaluated),
        recommendations=recommendations,
    )
