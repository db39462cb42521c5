# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Regulatory rules and compliance evaluation records."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..core.primitives import (
    ComplianceCategoryEnum,
    ImpactLevelEnum,
    Model,
    Percentage,
    PositiveFloat,
)


class ComplianceRule(Model):
    """
    A single regulation.

    Each optional threshold that is set becomes one predicate; a rule with
    no thresholds always passes.
    """

    id: str
    code: str
    name: str
    category: ComplianceCategoryEnum
    description: str = ""
    requirement: str = ""
    impact: ImpactLevelEnum = ImpactLevelEnum.MEDIUM

    min_allowed_density: Optional[PositiveFloat] = None
    max_allowed_density: Optional[PositiveFloat] = None
    min_unit_size: Optional[PositiveFloat] = None
    max_unit_size: Optional[PositiveFloat] = None
    affordability_requirement: Optional[Percentage] = None
    green_building_requirement: Optional[bool] = None
    accessibility_requirement: Optional[Percentage] = None
    min_open_space_percentage: Optional[Percentage] = None

    cost_impact: Optional[PositiveFloat] = Field(
        default=None, description="Estimated cost to bring a failing scenario into line"
    )


class ComplianceStatus(Model):
    rule_id: str
    compliant: bool
    notes: str = ""
    suggested_adjustment: Optional[str] = None
    remedial_cost: Optional[PositiveFloat] = None


class Certification(Model):
    name: str
    achievable: bool
    cost: Optional[PositiveFloat] = None


class Recommendation(Model):
    priority: ImpactLevelEnum
    action: str
    rule_id: Optional[str] = None
    estimated_cost: Optional[PositiveFloat] = None
    timeline: Optional[str] = None


class RegulatoryCompliance(Model):
    """Evaluation of one scenario against a location's rule set."""

    id: str = ""
    project_id: str = ""
    scenario_id: str = ""
    country: str = ""
    region: Optional[str] = None
    city: Optional[str] = None

    applicable_rules: List[ComplianceRule] = Field(default_factory=list)
    compliance_status: List[ComplianceStatus] = Field(default_factory=list)

    total_rules_applied: int = 0
    compliant_rules: int = 0
    non_compliant_rules: int = 0
    compliance_percentage: Percentage = 100.0

    total_remediate_cost: PositiveFloat = 0.0

    certifications: List[Certification] = Field(default_factory=list)
    recommendations: List[Recommendation] = Field(default_factory=list)

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_fully_compliant(self) -> bool:
        return self.non_compliant_rules == 0
