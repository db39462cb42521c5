# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Construction timeline and phasing.

Five strictly sequential phases share the total duration and cost by fixed
proportions. Phase boundaries are the rounded cumulative duration shares,
so the phases are contiguous, their durations sum to the total and the last
phase always ends at the total.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import List, NamedTuple, Optional

import pandas as pd
from dateutil.relativedelta import relativedelta

from ..core.calculations import round_half_up
from ..core.primitives import AnyDrawSchedule, GlobalSettings, UniformDrawSchedule
from ..core.primitives.settings import TimelineSettings
from ..scenario.results import ScenarioResults
from .models import ConstructionPhase, MonthlyBreakdownEntry, ProjectTimeline

logger = logging.getLogger(__name__)


class PhaseTemplate(NamedTuple):
    id: str
    name: str
    description: str
    duration_percentage: int
    cost_percentage: int
    milestone_name: str


DEFAULT_PHASES = (
    PhaseTemplate(
        "phase-1",
        "Planning & Permitting",
        "Site analysis, design, and regulatory approvals",
        10,
        5,
        "Permits Approved",
    ),
    PhaseTemplate(
        "phase-2",
        "Site Preparation",
        "Excavation, grading, and infrastructure setup",
        15,
        10,
        "Site Ready",
    ),
    PhaseTemplate(
        "phase-3",
        "Foundation & Structure",
        "Foundation, structural frame, and major systems",
        35,
        40,
        "Structure Complete",
    ),
    PhaseTemplate(
        "phase-4",
        "Finishing & Systems",
        "Interior finishing, MEP systems, and utilities",
        25,
        30,
        "Systems Commissioned",
    ),
    PhaseTemplate(
        "phase-5",
        "Landscaping & Closeout",
        "Landscaping, final inspections, and handover",
        15,
        15,
        "Project Handover",
    ),
)


def _phase_boundaries(total_months: int) -> List[int]:
    """Start of each phase followed by the end of the last one."""
    boundaries = [0]
    cumulative = 0
    for template in DEFAULT_PHASES:
        cumulative += template.duration_percentage
        boundaries.append(round_half_up(total_months * cumulative / 100))
    boundaries[-1] = total_months
    return boundaries


def _labor_units(
    cost: float, duration_months: int, settings: TimelineSettings
) -> int:
    if duration_months <= 0 or cost <= 0:
        return 0
    labor_budget = cost * settings.labor_cost_share
    return math.ceil(
        labor_budget / (duration_months * settings.monthly_labor_cost_per_worker)
    )


def _add_months(start: date, months: int) -> date:
    return start + relativedelta(months=months)


def _spend_milestone(
    cumulative: pd.Series, total_cost: float, share: float, start_date: date
) -> Optional[date]:
    """Date at the end of the month in which cumulative spend reaches `share`."""
    if total_cost <= 0:
        return None
    # Tolerance absorbs float noise in the running sum
    reached = cumulative >= total_cost * share - 1e-6 * total_cost
    if not reached.any():
        return None
    return _add_months(start_date, int(reached.idxmax()) + 1)


def generate_timeline(
    total_duration_months: int,
    results: Optional[ScenarioResults] = None,
    *,
    total_cost: Optional[float] = None,
    start_date: Optional[date] = None,
    draw_schedule: Optional[AnyDrawSchedule] = None,
    settings: Optional[GlobalSettings] = None,
) -> ProjectTimeline:
    """
    Build the construction phase schedule and its monthly spend.

    Args:
        total_duration_months: Total build duration, at least 1
        results: Scenario results supplying the cost basis; None for a
            blank scenario
        total_cost: Explicit cost basis, taking precedence over `results`
        start_date: Project start; enables the completion and spend dates
        draw_schedule: Distribution of each phase's cost over its months
            (uniform if omitted)
        settings: Labour assumptions (GlobalSettings() if omitted)

    Returns:
        ProjectTimeline whose phases are contiguous and whose monthly
        breakdown sums to the total cost

    Raises:
        ValueError: If the duration is below 1 month or the cost is negative

    Example:
        >>> timeline = generate_timeline(24, results)
        >>> [p.duration_months for p in timeline.phases]
        [2, 4, 8, 6, 4]
    """
    if total_duration_months < 1:
        raise ValueError(
            f"Total duration must be at least 1 month, got {total_duration_months}"
        )
    timeline_settings = (settings or GlobalSettings()).timeline
    schedule = draw_schedule or UniformDrawSchedule()

    if total_cost is None:
        total_cost = results.total_project_cost if results is not None else 0.0
    if total_cost < 0:
        raise ValueError(f"Total cost must be non-negative, got {total_cost}")

    boundaries = _phase_boundaries(total_duration_months)
    months = pd.RangeIndex(0, total_duration_months, name="month")
    outflow = pd.Series(0.0, index=months)

    phases = []
    previous_id = None
    for template, start, end in zip(DEFAULT_PHASES, boundaries, boundaries[1:]):
        duration = end - start
        cost = total_cost * template.cost_percentage / 100

        if duration > 0:
            draws = schedule.apply_to_amount(
                cost, duration, index=pd.RangeIndex(start, end)
            )
            outflow = outflow.add(draws, fill_value=0.0)
        else:
            # Book in the start month; clamp for a zero-length final phase
            outflow.iloc[min(start, total_duration_months - 1)] += cost

        phases.append(
            ConstructionPhase(
                id=template.id,
                name=template.name,
                description=template.description,
                duration_months=duration,
                start_month=start,
                end_month=end,
                cost_percentage=template.cost_percentage,
                estimated_cost=cost,
                milestone_name=template.milestone_name,
                dependencies=[previous_id] if previous_id else [],
                labor_units=_labor_units(cost, duration, timeline_settings),
            )
        )
        previous_id = template.id

    monthly_breakdown = [
        MonthlyBreakdownEntry(
            month=int(month),
            cost_outflow=float(amount),
            net_cash_flow=-float(amount),
        )
        for month, amount in outflow.items()
    ]

    dates = {}
    if start_date is not None:
        cumulative = outflow.cumsum()
        dates = {
            "start_date": start_date,
            "estimated_completion": _add_months(start_date, total_duration_months),
            "first_50_percent_completion": _spend_milestone(
                cumulative, total_cost, 0.5, start_date
            ),
            "first_100_percent_completion": _spend_milestone(
                cumulative, total_cost, 1.0, start_date
            ),
        }

    logger.debug(
        f"Generated {len(phases)} phases over {total_duration_months} months "
        f"for a cost basis of {total_cost:,.0f}"
    )

    return ProjectTimeline(
        phases=phases,
        total_months=total_duration_months,
        # Strictly sequential layout: every phase has zero slack
        critical_path=[phase.id for phase in phases],
        monthly_breakdown=monthly_breakdown,
        **dates,
    )
