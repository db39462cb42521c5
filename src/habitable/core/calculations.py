# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Contains static methods for core financial metrics. These functions are pure
(math-only) and independent of the engine records; the investment engine
delegates to them so each metric has a single definition.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
import pandas as pd
from pyxirr import pmt
from scipy.optimize import brentq

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


class FinancialCalculations:
    """
    Pure mathematical functions for financial calculations.
    """

    @staticmethod
    def monthly_payment(
        principal: float, annual_rate_pct: float, term_months: int
    ) -> float:
        """
        Level monthly payment of a fully amortizing loan.

        Args:
            principal: Loan amount
            annual_rate_pct: Annual interest rate in percent (e.g. 8.0)
            term_months: Number of monthly payments

        Returns:
            Monthly payment; 0.0 when there is no principal or no term.
            A zero rate gives exactly principal / term.

        Example:
            ```python
            FinancialCalculations.monthly_payment(120_000, 0.0, 12)  # 10000.0
            ```
        """
        if principal <= 0 or term_months <= 0:
            return 0.0
        monthly_rate = annual_rate_pct / 100 / 12
        if monthly_rate == 0:
            return principal / term_months
        return pmt(monthly_rate, term_months, principal) * -1

    @staticmethod
    def calculate_npv(cash_flows: pd.Series, rate: float) -> float:
        """Net present value of periodic flows, first flow undiscounted."""
        periods = np.arange(len(cash_flows))
        return float(np.sum(cash_flows.to_numpy() / np.power(1.0 + rate, periods)))

    @staticmethod
    def calculate_irr(
        cash_flows: pd.Series,
        lower_bound: float = -0.5,
        upper_bound: float = 1.0,
        tolerance: float = 1e-9,
        max_iterations: int = 100,
    ) -> Optional[float]:
        """
        Periodic internal rate of return by bounded root finding.

        Args:
            cash_flows: Periodic flows, negative = outflows
            lower_bound: Lowest periodic rate searched
            upper_bound: Highest periodic rate searched
            tolerance: Absolute tolerance on the rate
            max_iterations: Iteration cap for Brent's method

        Returns:
            Periodic IRR as decimal, or None if no root exists in the
            bracket or the solver does not converge

        Edge Cases Handled:
            - Empty series → None
            - All negative flows → None
            - All positive flows → None
            - No sign change of NPV across the bracket → None
        """
        if cash_flows.empty:
            return None
        if not ((cash_flows < 0).any() and (cash_flows > 0).any()):
            return None

        def npv(rate: float) -> float:
            return FinancialCalculations.calculate_npv(cash_flows, rate)

        low_value, high_value = npv(lower_bound), npv(upper_bound)
        if not (np.isfinite(low_value) and np.isfinite(high_value)):
            return None
        if low_value == 0:
            return lower_bound
        if high_value == 0:
            return upper_bound
        if np.sign(low_value) == np.sign(high_value):
            return None

        root, result = brentq(
            npv,
            lower_bound,
            upper_bound,
            xtol=tolerance,
            maxiter=max_iterations,
            full_output=True,
            disp=False,
        )
        if not result.converged:
            logger.debug(
                f"IRR solver stopped after {result.iterations} iterations: {result.flag}"
            )
            return None
        return float(root)

    @staticmethod
    def annualize_rate(periodic_rate: float, periods_per_year: int = 12) -> float:
        """Compound a periodic rate to an annual rate (decimal)."""
        return (1 + periodic_rate) ** periods_per_year - 1

    @staticmethod
    def payback_period(cash_flows: pd.Series) -> Optional[int]:
        """
        First period at which cumulative net cash flow is non-negative.

        Returns:
            The index label of that period, or None if it never is
        """
        recovered = cash_flows.cumsum() >= 0
        if not recovered.any():
            return None
        return int(recovered.idxmax())

    @staticmethod
    def break_even_period(inflows: pd.Series, outflows: pd.Series) -> Optional[int]:
        """
        First period at which cumulative inflow covers the total outflow.

        Args:
            inflows: Positive amounts received per period
            outflows: Positive amounts spent per period (same index)

        Returns:
            The index label of that period, or None if inflows never cover it
        """
        total_outflow = float(outflows.sum())
        covered = inflows.cumsum() >= total_outflow
        if not covered.any():
            return None
        return int(covered.idxmax())
