# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for draw schedule classes."""

import pandas as pd
import pytest
from pydantic import TypeAdapter, ValidationError

from habitable.core.primitives import (
    AnyDrawSchedule,
    DrawScheduleKindEnum,
    SCurveDrawSchedule,
    UniformDrawSchedule,
)


class TestUniformDrawSchedule:
    """Tests for UniformDrawSchedule."""

    def test_uniform_schedule_creation(self):
        """Test creating a uniform draw schedule."""
        schedule = UniformDrawSchedule()
        assert schedule.kind == DrawScheduleKindEnum.UNIFORM

    def test_uniform_schedule_json_serialization(self):
        """Test JSON serialization of uniform schedule."""
        schedule = UniformDrawSchedule()
        assert schedule.model_dump(mode="json") == {"kind": "uniform"}

    def test_uniform_apply_to_amount(self):
        """Test applying uniform schedule to an amount."""
        schedule = UniformDrawSchedule()
        result = schedule.apply_to_amount(amount=100_000, periods=5)

        assert result.tolist() == [20_000, 20_000, 20_000, 20_000, 20_000]
        assert result.sum() == 100_000

    def test_uniform_apply_with_index(self):
        """Phase months are carried onto the resulting series."""
        schedule = UniformDrawSchedule()
        index = pd.RangeIndex(6, 10)
        result = schedule.apply_to_amount(amount=400, periods=4, index=index)

        assert list(result.index) == [6, 7, 8, 9]
        assert result.tolist() == [100, 100, 100, 100]

    def test_index_length_must_match_periods(self):
        """A mismatched index is rejected."""
        schedule = UniformDrawSchedule()
        with pytest.raises(ValidationError, match="must match periods"):
            schedule.apply_to_amount(amount=100, periods=3, index=pd.RangeIndex(0, 4))

    def test_negative_amount_rejected(self):
        schedule = UniformDrawSchedule()
        with pytest.raises(ValidationError):
            schedule.apply_to_amount(amount=-1, periods=3)

    def test_zero_periods_rejected(self):
        schedule = UniformDrawSchedule()
        with pytest.raises(ValidationError):
            schedule.apply_to_amount(amount=100, periods=0)


class TestSCurveDrawSchedule:
    """Tests for SCurveDrawSchedule."""

    def test_s_curve_default_sigma(self):
        """Test S-curve with default sigma value."""
        schedule = SCurveDrawSchedule()
        assert schedule.kind == DrawScheduleKindEnum.S_CURVE
        assert schedule.sigma == 1.0

    def test_s_curve_invalid_sigma(self):
        """Test S-curve with invalid sigma value."""
        with pytest.raises(ValidationError):
            SCurveDrawSchedule(sigma=-1.0)

    def test_s_curve_apply_to_amount(self):
        """Test applying S-curve schedule to an amount."""
        schedule = SCurveDrawSchedule(sigma=1.0)
        result = schedule.apply_to_amount(amount=100_000, periods=6)

        assert result.sum() == pytest.approx(100_000)
        # Low -> high -> low
        assert result.iloc[0] < result.iloc[2]
        assert result.iloc[-1] < result.iloc[2]

    def test_s_curve_is_symmetric(self):
        schedule = SCurveDrawSchedule(sigma=2.0)
        result = schedule.apply_to_amount(amount=1_000, periods=8)
        assert result.tolist() == pytest.approx(result.tolist()[::-1])


class TestDiscriminatedUnion:
    """Schedules are selected by their `kind` tag."""

    def test_parse_by_kind(self):
        adapter = TypeAdapter(AnyDrawSchedule)
        assert isinstance(adapter.validate_python({"kind": "uniform"}), UniformDrawSchedule)
        parsed = adapter.validate_python({"kind": "s-curve", "sigma": 1.5})
        assert isinstance(parsed, SCurveDrawSchedule)
        assert parsed.sigma == 1.5

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(AnyDrawSchedule).validate_python({"kind": "manual"})
