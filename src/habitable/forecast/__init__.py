# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Population and housing demand forecasting.
"""

from .demand import (
    VALID_HORIZONS,
    DemandForecast,
    DemandProjection,
    forecast_demand,
    supply_gap,
)

__all__ = [
    "VALID_HORIZONS",
    "DemandForecast",
    "DemandProjection",
    "forecast_demand",
    "supply_gap",
]
