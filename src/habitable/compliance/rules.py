# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Default regulatory rule set."""

from __future__ import annotations

from typing import List, Optional

from ..core.primitives import ComplianceCategoryEnum, ImpactLevelEnum
from .models import ComplianceRule


def get_compliance_rules(country: str, city: Optional[str] = None) -> List[ComplianceRule]:
    """
    Ordered rules applicable to a location.

    Every location currently receives the same baseline rules (density,
    affordability, unit size, open space and accessibility); the location
    is written into the affordability requirement text.
    """
    location = f"{city}, {country}" if city else country

    return [
        ComplianceRule(
            id="rule-1",
            code="DENSITY-001",
            name="Density Limitation",
            category=ComplianceCategoryEnum.ZONING,
            description="Maximum residential density",
            requirement="Must not exceed 400 units/hectare",
            impact=ImpactLevelEnum.HIGH,
            max_allowed_density=400,
            cost_impact=50_000,
        ),
        ComplianceRule(
            id="rule-2",
            code="AFFORD-001",
            name="Affordability Requirement",
            category=ComplianceCategoryEnum.AFFORDABILITY,
            description="Affordable housing percentage",
            requirement=f"Minimum 30% affordable units in {location}",
            impact=ImpactLevelEnum.HIGH,
            affordability_requirement=30,
        ),
        ComplianceRule(
            id="rule-3",
            code="BUILD-001",
            name="Unit Size Standard",
            category=ComplianceCategoryEnum.BUILDING,
            description="Minimum unit size",
            requirement="Studio minimum 30m², 1BR minimum 45m²",
            impact=ImpactLevelEnum.MEDIUM,
            min_unit_size=45,
        ),
        ComplianceRule(
            id="rule-4",
            code="ENV-001",
            name="Green Space",
            category=ComplianceCategoryEnum.ENVIRONMENTAL,
            description="Open space requirement",
            requirement="Minimum 20% open space for community use",
            impact=ImpactLevelEnum.MEDIUM,
            min_open_space_percentage=20,
        ),
        ComplianceRule(
            id="rule-5",
            code="ACC-001",
            name="Accessibility",
            category=ComplianceCategoryEnum.ACCESSIBILITY,
            description="Accessible unit quota",
            requirement="Minimum 5% of units fully accessible",
            impact=ImpactLevelEnum.HIGH,
            accessibility_requirement=5,
        ),
    ]
