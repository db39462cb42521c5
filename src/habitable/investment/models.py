# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Investment inputs and results."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

import pandas as pd
from pydantic import Field

from ..core.primitives import (
    LoanTypeEnum,
    Model,
    Percentage,
    PositiveFloat,
    PositiveInt,
    RentalModelEnum,
    TargetIncomeGroupEnum,
)


class FinancingModel(Model):
    """Debt terms for a project."""

    loan_type: LoanTypeEnum = LoanTypeEnum.NONE
    loan_amount: PositiveFloat = 0.0
    interest_rate: PositiveFloat = Field(default=0.0, description="Annual rate in %")
    loan_term_months: PositiveInt = 0
    down_payment_percentage: Percentage = 0.0

    @property
    def has_loan(self) -> bool:
        return (
            self.loan_type != LoanTypeEnum.NONE
            and self.loan_amount > 0
            and self.loan_term_months > 0
        )


class UnitPricing(Model):
    """Sale price per unit type."""

    one_bedroom: PositiveFloat = 0.0
    two_bedroom: PositiveFloat = 0.0
    three_bedroom: PositiveFloat = 0.0
    single_family: Optional[PositiveFloat] = Field(
        default=None, description="Falls back to the three-bedroom price"
    )

    @property
    def single_family_price(self) -> float:
        if self.single_family is None:
            return self.three_bedroom
        return self.single_family

    @property
    def mixed_price(self) -> float:
        """Price of a mixed-development unit: mean of one and two bedroom."""
        return (self.one_bedroom + self.two_bedroom) / 2

    @property
    def average_apartment_price(self) -> float:
        return (self.one_bedroom + self.two_bedroom + self.three_bedroom) / 3

    def scaled(self, factor: float) -> "UnitPricing":
        return UnitPricing(
            one_bedroom=self.one_bedroom * factor,
            two_bedroom=self.two_bedroom * factor,
            three_bedroom=self.three_bedroom * factor,
            single_family=(
                None if self.single_family is None else self.single_family * factor
            ),
        )


class InvestmentScenario(Model):
    """
    Financing, revenue and cost assumptions for one scenario.

    `construction_cost` defaults to the scenario's total project cost when
    left unset.
    """

    id: str = ""
    project_id: str = ""
    scenario_id: str = ""
    name: str = ""

    # Financing
    financing: FinancingModel = Field(default_factory=FinancingModel)

    # Revenue
    unit_pricing: UnitPricing = Field(default_factory=UnitPricing)
    occupancy_rate: Percentage = 100.0
    rental_model: RentalModelEnum = RentalModelEnum.SALE
    rental_monthly_rate: Optional[PositiveFloat] = None

    # Costs
    construction_cost: Optional[PositiveFloat] = None
    soft_costs_percentage: Percentage = 15.0
    marketing_budget: PositiveFloat = 0.0
    property_management_percentage: Optional[Percentage] = None

    # Subsidy committed to the project
    subsidy_per_unit: Optional[PositiveFloat] = None
    subsidy_percentage: Optional[Percentage] = Field(
        default=None, description="Percent of total project cost"
    )

    # Timeline
    construction_months: PositiveInt = Field(default=24, gt=0)
    pre_sales_months: PositiveInt = 0
    sales_months: Optional[PositiveInt] = Field(default=None, gt=0)

    # Affordability target
    target_income_group: TargetIncomeGroupEnum = TargetIncomeGroupEnum.LOW
    target_household_income: Optional[PositiveFloat] = None
    affordable_price_to_income_ratio: Optional[PositiveFloat] = Field(
        default=None, gt=0
    )

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MonthlyCashFlow(Model):
    month: PositiveInt
    cost_outflow: PositiveFloat
    revenue_inflow: PositiveFloat
    net_cash_flow: float
    cumulative_cash_flow: float


class ConstructionCostSensitivity(Model):
    increase_10_percent: float
    decrease_10_percent: float


class OccupancySensitivity(Model):
    occupancy_85_percent: float
    occupancy_100_percent: float


class PriceSensitivity(Model):
    increase_10_percent: float
    decrease_10_percent: float


class SensitivityAnalysis(Model):
    """Net profit of full model re-runs under shocked inputs."""

    construction_cost_change: ConstructionCostSensitivity
    occupancy_change: OccupancySensitivity
    price_change: PriceSensitivity


class InvestmentResults(Model):
    """
    Returns of one investment scenario.

    Percentages (margins, ROI, IRR) are in percent. Payback and break-even
    are month numbers of the cash-flow series, None when never reached.
    """

    # Revenue Analysis
    total_revenue: float
    revenue_per_unit: float
    gross_margin: float
    gross_margin_percentage: float

    # Financing Impact
    total_loan_cost: float
    interest_expense: float
    monthly_loan_payment: float

    # Financial Summary
    total_project_cost: float
    property_management_expense: float = 0.0
    committed_subsidy: float = Field(
        default=0.0, description="Subsidy pledged to the project; excluded from net profit"
    )
    total_expenses: float
    net_profit: float
    profit_margin: float

    # Return Metrics
    roi: float
    irr: float
    payback_months: Optional[int] = None
    break_even_months: Optional[int] = None

    # Affordability Impact
    minimum_affordable_price: float
    market_price: float
    affordability_gap: float
    subsidy_required: float

    monthly_cash_flows: List[MonthlyCashFlow] = Field(default_factory=list)
    sensitivity: Optional[SensitivityAnalysis] = None

    def cash_flow_frame(self) -> pd.DataFrame:
        """Monthly cash flows as a DataFrame indexed by month."""
        columns = [
            "cost_outflow",
            "revenue_inflow",
            "net_cash_flow",
            "cumulative_cash_flow",
        ]
        if not self.monthly_cash_flows:
            return pd.DataFrame(columns=columns, index=pd.Index([], name="month"))
        frame = pd.DataFrame([m.model_dump() for m in self.monthly_cash_flows])
        return frame.set_index("month")[columns]
