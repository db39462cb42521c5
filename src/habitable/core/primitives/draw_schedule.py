# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Monthly spend profiles.

Construction phases and the investment build period spend a lump sum over
a run of months. A draw schedule gives the share of that sum falling in
each month: flat, or along an S-curve that starts slow, peaks mid-span and
tapers toward completion.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Literal, Optional, Union

import numpy as np
import pandas as pd
from pydantic import Field, model_validator
from scipy.stats import norm
from typing_extensions import Annotated

from .enums import DrawScheduleKindEnum
from .model import Model
from .types import PositiveFloat, PositiveInt


class SpendRequest(Model):
    """A lump sum to spread over `months` months, optionally labelled."""

    amount: PositiveFloat
    months: PositiveInt = Field(gt=0)
    index: Optional[pd.Index] = None

    @model_validator(mode="after")
    def check_index(self) -> "SpendRequest":
        if self.index is not None and len(self.index) != self.months:
            raise ValueError(
                f"Month index length ({len(self.index)}) must match periods ({self.months})"
            )
        return self


class DrawSchedule(Model, ABC):
    """Spend profile; subclasses supply the monthly shares."""

    kind: DrawScheduleKindEnum

    def apply_to_amount(
        self, amount: float, periods: int, index: Optional[pd.Index] = None
    ) -> pd.Series:
        """
        Spread `amount` over `periods` months.

        Args:
            amount: Non-negative total to spend
            periods: Number of months, at least 1
            index: Month labels for the result (e.g. a phase's months)

        Returns:
            Series of monthly amounts summing to `amount`

        Example:
            >>> UniformDrawSchedule().apply_to_amount(90_000, periods=3).tolist()
            [30000.0, 30000.0, 30000.0]
        """
        request = SpendRequest(amount=amount, months=periods, index=index)
        values = request.amount * self._shares(request.months)
        return pd.Series(values, index=request.index)

    @abstractmethod
    def _shares(self, months: int) -> np.ndarray:
        """Fraction of the total per month; sums to 1."""


class UniformDrawSchedule(DrawSchedule):
    """Equal spend every month."""

    kind: Literal[DrawScheduleKindEnum.UNIFORM] = DrawScheduleKindEnum.UNIFORM

    def _shares(self, months: int) -> np.ndarray:
        return np.full(months, 1.0 / months)


class SCurveDrawSchedule(DrawSchedule):
    """
    Spend following a normal curve centred on the middle month.

    `sigma` is in months: small values concentrate spend around the
    midpoint, large values flatten it toward a uniform profile.
    """

    kind: Literal[DrawScheduleKindEnum.S_CURVE] = DrawScheduleKindEnum.S_CURVE
    sigma: PositiveFloat = Field(default=1.0, gt=0)

    def _shares(self, months: int) -> np.ndarray:
        edges = norm.cdf(np.arange(months + 1), loc=months / 2, scale=self.sigma)
        weights = np.diff(edges)
        # Renormalize the tails that fall outside the span
        return weights / weights.sum()


AnyDrawSchedule = Annotated[
    Union[UniformDrawSchedule, SCurveDrawSchedule],
    Field(discriminator="kind"),
]
