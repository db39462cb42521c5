# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Investment returns and financial projections.
"""

from .engine import evaluate_investment, loan_amortization_schedule
from .models import (
    ConstructionCostSensitivity,
    FinancingModel,
    InvestmentResults,
    InvestmentScenario,
    MonthlyCashFlow,
    OccupancySensitivity,
    PriceSensitivity,
    SensitivityAnalysis,
    UnitPricing,
)

__all__ = [
    "ConstructionCostSensitivity",
    "FinancingModel",
    "InvestmentResults",
    "InvestmentScenario",
    "MonthlyCashFlow",
    "OccupancySensitivity",
    "PriceSensitivity",
    "SensitivityAnalysis",
    "UnitPricing",
    "evaluate_investment",
    "loan_amortization_schedule",
]
