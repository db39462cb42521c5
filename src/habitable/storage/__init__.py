# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Persistence of projects, scenarios and saved country assumptions.
"""

from .repository import InMemoryRepository, JsonFileRepository, Repository
from .workspace import PlanningWorkspace, SavedCountryAssumptions

__all__ = [
    "InMemoryRepository",
    "JsonFileRepository",
    "PlanningWorkspace",
    "Repository",
    "SavedCountryAssumptions",
]
