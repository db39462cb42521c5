# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Investment returns engine.

Prices a scenario's units, finances it, lays the result out as a monthly
cash-flow series and derives ROI, IRR, payback, break-even, the
affordability gap and a sensitivity table.

Cash-flow layout (months are numbered from 1):

- Development cost (construction, soft costs, marketing) is spread evenly
  over the construction months.
- Revenue is spread evenly over the sales period, which starts
  `pre_sales_months` before construction completes.
- Interest and property management are spread evenly over the sales period.

The series therefore sums to net profit.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from ..core.calculations import FinancialCalculations
from ..core.primitives import (
    GlobalSettings,
    RentalModelEnum,
    UniformDrawSchedule,
)
from ..core.primitives.settings import InvestmentSettings
from ..scenario.results import ScenarioResults
from .models import (
    ConstructionCostSensitivity,
    InvestmentResults,
    InvestmentScenario,
    MonthlyCashFlow,
    OccupancySensitivity,
    PriceSensitivity,
    SensitivityAnalysis,
)

logger = logging.getLogger(__name__)


def _gross_sales_value(investment: InvestmentScenario, results: ScenarioResults) -> float:
    """Sum of list prices over every unit, before occupancy."""
    pricing = investment.unit_pricing
    units = results.unit_breakdown
    if units.total != results.total_units:
        # No usable breakdown on the record: price every unit at the
        # average apartment price
        return results.total_units * pricing.average_apartment_price
    return (
        units.one_bedroom * pricing.one_bedroom
        + units.two_bedroom * pricing.two_bedroom
        + units.three_bedroom * pricing.three_bedroom
        + units.single_family * pricing.single_family_price
        + units.mixed * pricing.mixed_price
    )


def _revenue(
    investment: InvestmentScenario, results: ScenarioResults, gross_sales: float
) -> float:
    occupancy = investment.occupancy_rate / 100
    sale_revenue = gross_sales * occupancy
    rental_revenue = (
        results.total_units * (investment.rental_monthly_rate or 0.0) * 12 * occupancy
    )
    if investment.rental_model == RentalModelEnum.SALE:
        return sale_revenue
    if investment.rental_model == RentalModelEnum.RENTAL:
        return rental_revenue
    return (sale_revenue + rental_revenue) / 2


def _cash_flow_series(
    investment: InvestmentScenario,
    settings: InvestmentSettings,
    development_cost: float,
    revenue: float,
    sales_period_costs: float,
) -> Tuple[pd.Series, pd.Series]:
    """Monthly (inflow, outflow) series, both non-negative."""
    construction_months = investment.construction_months
    pre_sales = min(investment.pre_sales_months, construction_months)
    sales_months = investment.sales_months or settings.default_sales_months
    sales_start = construction_months - pre_sales

    horizon = max(construction_months, sales_start + sales_months)
    index = pd.RangeIndex(1, horizon + 1, name="month")
    construction_index = index[:construction_months]
    sales_index = index[sales_start : sales_start + sales_months]

    schedule = UniformDrawSchedule()
    inflow = pd.Series(0.0, index=index)
    outflow = pd.Series(0.0, index=index)

    outflow = outflow.add(
        schedule.apply_to_amount(development_cost, construction_months, construction_index),
        fill_value=0.0,
    )
    outflow = outflow.add(
        schedule.apply_to_amount(sales_period_costs, sales_months, sales_index),
        fill_value=0.0,
    )
    inflow = inflow.add(
        schedule.apply_to_amount(revenue, sales_months, sales_index), fill_value=0.0
    )
    return inflow, outflow


def _annual_irr(net_cash_flow: pd.Series, settings: InvestmentSettings) -> float:
    monthly_irr = FinancialCalculations.calculate_irr(
        net_cash_flow,
        lower_bound=settings.irr_lower_bound,
        upper_bound=settings.irr_upper_bound,
        tolerance=settings.irr_tolerance,
        max_iterations=settings.irr_max_iterations,
    )
    if monthly_irr is None:
        logger.warning(
            "IRR could not be determined within the search bracket; reporting 0%"
        )
        return 0.0
    return FinancialCalculations.annualize_rate(monthly_irr) * 100


def _evaluate(
    investment: InvestmentScenario,
    results: ScenarioResults,
    settings: InvestmentSettings,
) -> InvestmentResults:
    """One full evaluation without the sensitivity table."""
    total_units = results.total_units

    construction_cost = (
        investment.construction_cost
        if investment.construction_cost is not None
        else results.total_project_cost
    )
    soft_costs = construction_cost * investment.soft_costs_percentage / 100
    total_project_cost = construction_cost + soft_costs + investment.marketing_budget

    gross_sales = _gross_sales_value(investment, results)
    total_revenue = _revenue(investment, results, gross_sales)
    revenue_per_unit = total_revenue / total_units if total_units > 0 else 0.0

    # Financing
    financing = investment.financing
    monthly_loan_payment = 0.0
    total_loan_cost = 0.0
    interest_expense = 0.0
    if financing.has_loan:
        monthly_loan_payment = FinancialCalculations.monthly_payment(
            financing.loan_amount, financing.interest_rate, financing.loan_term_months
        )
        total_loan_cost = monthly_loan_payment * financing.loan_term_months
        interest_expense = max(0.0, total_loan_cost - financing.loan_amount)

    management_pct = (
        investment.property_management_percentage
        if investment.property_management_percentage is not None
        else settings.default_property_management_percentage
    )
    property_management = (
        total_revenue * management_pct / 100
        if investment.rental_model in (RentalModelEnum.RENTAL, RentalModelEnum.MIXED)
        else 0.0
    )

    # Reported beside the returns; not part of net profit
    committed_subsidy = (investment.subsidy_per_unit or 0.0) * total_units + (
        total_project_cost * (investment.subsidy_percentage or 0.0) / 100
    )

    total_expenses = total_project_cost + interest_expense + property_management
    net_profit = total_revenue - total_expenses

    gross_margin = total_revenue - total_project_cost
    gross_margin_pct = gross_margin / total_revenue * 100 if total_revenue > 0 else 0.0
    profit_margin = net_profit / total_revenue * 100 if total_revenue > 0 else 0.0
    roi = net_profit / total_project_cost * 100 if total_project_cost > 0 else 0.0

    inflow, outflow = _cash_flow_series(
        investment,
        settings,
        development_cost=total_project_cost,
        revenue=total_revenue,
        sales_period_costs=interest_expense + property_management,
    )
    net_cash_flow = inflow - outflow
    cumulative = net_cash_flow.cumsum()

    # Affordability
    household_income = (
        investment.target_household_income
        if investment.target_household_income is not None
        else settings.target_household_income[investment.target_income_group]
    )
    price_to_income = (
        investment.affordable_price_to_income_ratio
        or settings.affordable_price_to_income_ratio
    )
    minimum_affordable_price = household_income * price_to_income
    market_price = gross_sales / total_units if total_units > 0 else 0.0
    affordability_gap = market_price - minimum_affordable_price
    subsidy_required = max(0.0, affordability_gap) * total_units

    return InvestmentResults(
        total_revenue=total_revenue,
        revenue_per_unit=revenue_per_unit,
        gross_margin=gross_margin,
        gross_margin_percentage=gross_margin_pct,
        total_loan_cost=total_loan_cost,
        interest_expense=interest_expense,
        monthly_loan_payment=monthly_loan_payment,
        total_project_cost=total_project_cost,
        property_management_expense=property_management,
        committed_subsidy=committed_subsidy,
        total_expenses=total_expenses,
        net_profit=net_profit,
        profit_margin=profit_margin,
        roi=roi,
        irr=_annual_irr(net_cash_flow, settings),
        payback_months=FinancialCalculations.payback_period(net_cash_flow),
        break_even_months=FinancialCalculations.break_even_period(inflow, outflow),
        minimum_affordable_price=minimum_affordable_price,
        market_price=market_price,
        affordability_gap=affordability_gap,
        subsidy_required=subsidy_required,
        monthly_cash_flows=[
            MonthlyCashFlow(
                month=int(month),
                cost_outflow=float(outflow[month]),
                revenue_inflow=float(inflow[month]),
                net_cash_flow=float(net_cash_flow[month]),
                cumulative_cash_flow=float(cumulative[month]),
            )
            for month in net_cash_flow.index
        ],
    )


def _sensitivity(
    investment: InvestmentScenario,
    results: ScenarioResults,
    settings: InvestmentSettings,
) -> SensitivityAnalysis:
    base_construction = (
        investment.construction_cost
        if investment.construction_cost is not None
        else results.total_project_cost
    )

    def net_profit(**updates) -> float:
        variant = investment.model_copy(update=updates)
        return _evaluate(variant, results, settings).net_profit

    def priced(factor: float) -> float:
        rent = investment.rental_monthly_rate
        return net_profit(
            unit_pricing=investment.unit_pricing.scaled(factor),
            rental_monthly_rate=None if rent is None else rent * factor,
        )

    return SensitivityAnalysis(
        construction_cost_change=ConstructionCostSensitivity(
            increase_10_percent=net_profit(construction_cost=base_construction * 1.1),
            decrease_10_percent=net_profit(construction_cost=base_construction * 0.9),
        ),
        occupancy_change=OccupancySensitivity(
            occupancy_85_percent=net_profit(occupancy_rate=85.0),
            occupancy_100_percent=net_profit(occupancy_rate=100.0),
        ),
        price_change=PriceSensitivity(
            increase_10_percent=priced(1.1),
            decrease_10_percent=priced(0.9),
        ),
    )


def evaluate_investment(
    investment: InvestmentScenario,
    results: ScenarioResults,
    settings: Optional[GlobalSettings] = None,
) -> InvestmentResults:
    """
    Evaluate the financial returns of a scenario.

    Args:
        investment: Financing, pricing and cost assumptions
        results: The scenario's computed results (unit counts and cost)
        settings: IRR solver bounds and affordability defaults
            (GlobalSettings() if omitted)

    Returns:
        InvestmentResults including the monthly cash flows and a sensitivity
        table built from full re-evaluations of the model

    Example:
        >>> returns = evaluate_investment(
        ...     InvestmentScenario(
        ...         unit_pricing=UnitPricing(
        ...             one_bedroom=45_000, two_bedroom=60_000, three_bedroom=75_000
        ...         ),
        ...     ),
        ...     results,
        ... )
        >>> returns.sensitivity.occupancy_change.occupancy_85_percent
    """
    investment_settings = (settings or GlobalSettings()).investment
    base = _evaluate(investment, results, investment_settings)
    sensitivity = _sensitivity(investment, results, investment_settings)

    logger.debug(
        f"Investment '{investment.name or investment.id}': revenue "
        f"{base.total_revenue:,.0f}, net profit {base.net_profit:,.0f}, "
        f"ROI {base.roi:.1f}%, IRR {base.irr:.1f}%"
    )
    return base.model_copy(update={"sensitivity": sensitivity})


def loan_amortization_schedule(
    principal: float, annual_rate_pct: float, term_months: int
) -> pd.DataFrame:
    """
    Month-by-month amortization of a level-payment loan.

    Returns:
        DataFrame indexed by payment number with Begin Balance, Payment,
        Interest, Principal and End Balance columns
    """
    columns = ["Begin Balance", "Payment", "Interest", "Principal", "End Balance"]
    if principal <= 0 or term_months <= 0:
        return pd.DataFrame(columns=columns, index=pd.Index([], name="Period"))

    monthly_rate = annual_rate_pct / 100 / 12
    payment = FinancialCalculations.monthly_payment(
        principal, annual_rate_pct, term_months
    )
    payments = np.full(shape=(term_months,), fill_value=payment)

    interest_paid = np.empty(shape=(term_months,))
    begin_balances = np.empty(shape=(term_months,))
    end_balances = np.empty(shape=(term_months,))

    balance = principal
    for i in range(term_months):
        begin_balances[i] = balance
        interest_paid[i] = balance * monthly_rate
        balance = balance - (payments[i] - interest_paid[i])
        end_balances[i] = balance

    # Final balance is zero
    end_balances[-1] = 0.0

    return pd.DataFrame(
        {
            "Begin Balance": begin_balances,
            "Payment": payments,
            "Interest": interest_paid,
            "Principal": payments - interest_paid,
            "End Balance": end_balances,
        },
        index=pd.RangeIndex(1, term_months + 1, name="Period"),
    )
