# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Habitable Core Framework

Primitives and errors shared by all engine components.
"""

from .calculations import FinancialCalculations, round_half_up
from .errors import ConfigurationError, HabitableError, RecordNotFoundError
from .primitives import GlobalSettings, Model

__all__ = [
    "ConfigurationError",
    "FinancialCalculations",
    "GlobalSettings",
    "HabitableError",
    "Model",
    "RecordNotFoundError",
    "round_half_up",
]
