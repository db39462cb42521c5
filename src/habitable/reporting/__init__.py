# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Presentation helpers: display formatting and scenario comparison tables.
"""

from .formatting import format_currency, format_number
from .scenario_reports import compare_scenarios, cost_breakdown

__all__ = [
    "compare_scenarios",
    "cost_breakdown",
    "format_currency",
    "format_number",
]
