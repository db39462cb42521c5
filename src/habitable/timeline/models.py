# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Construction phase and timeline records."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

import pandas as pd
from pydantic import Field, model_validator

from ..core.primitives import Model, PositiveFloat, PositiveInt


class ConstructionPhase(Model):
    """
    One phase of the build.

    Months are 0-based and the span is half-open: the phase occupies
    months `start_month` through `end_month - 1`.
    """

    id: str
    name: str
    description: str = ""
    duration_months: PositiveInt
    start_month: PositiveInt
    end_month: PositiveInt
    cost_percentage: PositiveFloat
    estimated_cost: PositiveFloat
    milestone_name: Optional[str] = None
    dependencies: List[str] = Field(default_factory=list)
    labor_units: Optional[PositiveInt] = None

    @model_validator(mode="after")
    def check_span(self) -> "ConstructionPhase":
        if self.end_month - self.start_month != self.duration_months:
            raise ValueError(
                f"Phase '{self.id}' span {self.start_month}-{self.end_month} "
                f"does not match duration {self.duration_months}"
            )
        return self


class MonthlyBreakdownEntry(Model):
    month: PositiveInt
    cost_outflow: PositiveFloat
    revenue_inflow: Optional[PositiveFloat] = None
    net_cash_flow: float


class ProjectTimeline(Model):
    """Ordered, contiguous construction phases and their monthly spend."""

    phases: List[ConstructionPhase]
    total_months: PositiveInt
    critical_path: List[str] = Field(default_factory=list)

    start_date: Optional[date] = None
    estimated_completion: Optional[date] = None
    first_50_percent_completion: Optional[date] = None
    first_100_percent_completion: Optional[date] = None

    monthly_breakdown: List[MonthlyBreakdownEntry] = Field(default_factory=list)

    @property
    def total_cost(self) -> float:
        return sum(phase.estimated_cost for phase in self.phases)

    def get_phase(self, phase_id: str) -> ConstructionPhase:
        for phase in self.phases:
            if phase.id == phase_id:
                return phase
        raise KeyError(phase_id)

    def to_dataframe(self) -> pd.DataFrame:
        """Monthly breakdown as a DataFrame indexed by month."""
        columns = ["cost_outflow", "revenue_inflow", "net_cash_flow"]
        if not self.monthly_breakdown:
            return pd.DataFrame(columns=columns, index=pd.Index([], name="month"))
        frame = pd.DataFrame([m.model_dump() for m in self.monthly_breakdown])
        return frame.set_index("month")[columns]
