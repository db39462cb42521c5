# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Three-tier assumption resolution.

Country defaults, project overrides and scenario overrides are merged once,
field by field within each group, most specific tier winning. Formulas then
read a single fully populated `CountryCostAssumptions`.
"""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from ..core.primitives import LandSizeUnitEnum, Model
from ..core.primitives.settings import CostSettings
from .models import AssumptionOverrides, CountryCostAssumptions

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Model)

_OVERRIDABLE_GROUPS = (
    "persons_per_unit",
    "density_thresholds",
    "infrastructure_warning_levels",
    "room_sizes",
)


def _merge_group(base: M, override: Optional[Model]) -> M:
    if override is None:
        return base
    updates = override.model_dump(exclude_none=True)
    if not updates:
        return base
    # Re-validate so group invariants (e.g. threshold ordering) still hold
    return type(base).model_validate({**base.model_dump(), **updates})


def _apply(
    assumptions: CountryCostAssumptions, overrides: Optional[AssumptionOverrides]
) -> CountryCostAssumptions:
    if overrides is None:
        return assumptions

    updates = {
        group: _merge_group(getattr(assumptions, group), getattr(overrides, group))
        for group in _OVERRIDABLE_GROUPS
    }
    if overrides.single_family_persons_per_unit is not None:
        updates["single_family_persons_per_unit"] = (
            overrides.single_family_persons_per_unit
        )
    return assumptions.model_copy(update=updates)


def resolve_assumptions(
    base: CountryCostAssumptions,
    project_overrides: Optional[AssumptionOverrides] = None,
    scenario_overrides: Optional[AssumptionOverrides] = None,
) -> CountryCostAssumptions:
    """
    Merge project and scenario overrides into country assumptions.

    Args:
        base: Country defaults (see `get_cost_assumptions`)
        project_overrides: Project level overrides, applied first
        scenario_overrides: Scenario level overrides, applied last

    Returns:
        A new, fully populated assumptions record. `base` is not modified.

    Example:
        >>> resolved = resolve_assumptions(
        ...     get_cost_assumptions("KE"),
        ...     project.custom_assumptions,
        ...     scenario.custom_assumptions,
        ... )
    """
    resolved = _apply(_apply(base, project_overrides), scenario_overrides)
    if resolved is not base:
        logger.debug(f"Resolved assumptions for '{base.country}' with overrides")
    return resolved


def to_square_meters(
    land_size: float,
    unit: LandSizeUnitEnum = LandSizeUnitEnum.SQM,
    settings: Optional[CostSettings] = None,
) -> float:
    """Convert a land size entered in square metres or acres to square metres."""
    settings = settings or CostSettings()
    if LandSizeUnitEnum(unit) == LandSizeUnitEnum.ACRES:
        return land_size * settings.square_meters_per_acre
    return land_size
