# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Construction timeline and phasing.
"""

from .models import ConstructionPhase, MonthlyBreakdownEntry, ProjectTimeline
from .phasing import DEFAULT_PHASES, PhaseTemplate, generate_timeline

__all__ = [
    "DEFAULT_PHASES",
    "ConstructionPhase",
    "MonthlyBreakdownEntry",
    "PhaseTemplate",
    "ProjectTimeline",
    "generate_timeline",
]
