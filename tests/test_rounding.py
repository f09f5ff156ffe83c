"""Tests for directional rounding."""

import decimal
import logging
from contextlib import contextmanager

import pytest

from gridmath.rounding import INT_MAX, INT_MIN, RoundDirection, round_double, rounding_mode


class TestDirections:
    """Test each rounding direction."""

    @pytest.mark.parametrize("value,expected", [
        (2.4, 2), (2.5, 3), (2.6, 3), (-2.5, -3), (-2.4, -2), (0.0, 0), (7.0, 7),
    ])
    def test_nearest(self, value, expected):
        assert round_double(value, RoundDirection.NEAREST) == expected

    @pytest.mark.parametrize("value,expected", [
        (2.1, 3), (2.0, 2), (-2.1, -2), (-0.5, 0),
    ])
    def test_up(self, value, expected):
        assert round_double(value, RoundDirection.UP) == expected

    @pytest.mark.parametrize("value,expected", [
        (2.9, 2), (2.0, 2), (-2.1, -3), (0.5, 0),
    ])
    def test_down(self, value, expected):
        assert round_double(value, RoundDirection.DOWN) == expected

    @pytest.mark.parametrize("value,expected", [
        (2.9, 2), (-2.9, -2), (-2.5, -2), (0.999, 0),
    ])
    def test_toward_zero(self, value, expected):
        assert round_double(value, RoundDirection.TOWARD_ZERO) == expected

    def test_direction_by_value(self):
        assert round_double(2.1, "up") == 3
        assert round_double(2.9, "toward_zero") == 2

    def test_unknown_direction_uses_current_mode(self):
        # decimal's default context rounds ties to even
        assert round_double(2.5, "sideways") == 2
        with rounding_mode(decimal.ROUND_CEILING):
            assert round_double(2.1, None) == 3

    def test_returns_int(self):
        assert isinstance(round_double(3.7), int)


class TestLimits:
    """Test range validation."""

    def test_extremes_allowed(self):
        assert round_double(float(INT_MAX)) == INT_MAX
        assert round_double(float(INT_MIN)) == INT_MIN

    @pytest.mark.parametrize("value", [2.0 ** 31, -(2.0 ** 31) - 1, float("inf"), float("-inf")])
    def test_out_of_range(self, value, caplog):
        with caplog.at_level(logging.WARNING, logger="gridmath"):
            assert round_double(value, RoundDirection.NEAREST) == 0
        assert "round_double" in caplog.text

    def test_nan(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gridmath"):
            assert round_double(float("nan")) == 0
        assert "not a number" in caplog.text

    @pytest.mark.parametrize("value,reason", [(10 ** 400, "int overflow"), (-10 ** 400, "int underflow")])
    def test_huge_int(self, value, reason, caplog):
        with caplog.at_level(logging.WARNING, logger="gridmath"):
            assert round_double(value) == 0
        assert reason in caplog.text

    def test_non_numeric(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gridmath"):
            assert round_double("3") == 0
            assert round_double(True) == 0
        assert "not a number" in caplog.text


class TestRoundingScope:
    """Test that rounding never leaks its mode."""

    def test_mode_restored(self):
        before = decimal.getcontext().rounding
        round_double(2.5, RoundDirection.TOWARD_ZERO)
        round_double(2.5, RoundDirection.NEAREST)
        assert decimal.getcontext().rounding == before

    def test_mode_restored_on_error(self):
        before = decimal.getcontext().rounding
        with pytest.raises(RuntimeError):
            with rounding_mode(decimal.ROUND_FLOOR):
                raise RuntimeError("boom")
        assert decimal.getcontext().rounding == before

    @pytest.mark.parametrize("value", [-3.5, -0.2, 0.49, 12.5, 1e6 + 0.5])
    def test_idempotent(self, value):
        once = round_double(value, RoundDirection.NEAREST)
        assert round_double(once * 1.0, RoundDirection.NEAREST) == once

    def test_mode_switch_failure(self, monkeypatch, caplog):
        @contextmanager
        def stuck_mode(mode):
            with decimal.localcontext() as ctx:
                ctx.rounding = decimal.ROUND_HALF_EVEN
                yield ctx

        monkeypatch.setattr("gridmath.rounding.rounding_mode", stuck_mode)
        with caplog.at_level(logging.WARNING, logger="gridmath"):
            # builtin round() fallback: ties go to even
            assert round_double(2.5, RoundDirection.NEAREST) == 2
        assert "rounding mode switch failed" in caplog.text
