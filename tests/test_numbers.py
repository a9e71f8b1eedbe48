"""Unit tests for numeric helpers."""

import math

import pytest

from hubble.utils.numbers import (
    degrees_to_radians,
    is_negative,
    is_positive,
    radians_to_degrees,
    random_int_between,
    to_double,
    to_float,
    to_int,
)


class TestAngles:
    """Test angle conversion."""

    @pytest.mark.unit
    def test_degrees_to_radians(self):
        assert degrees_to_radians(180) == pytest.approx(math.pi)
        assert degrees_to_radians(0) == 0.0

    @pytest.mark.unit
    def test_radians_to_degrees(self):
        assert radians_to_degrees(math.pi / 2) == pytest.approx(90.0)

    @pytest.mark.unit
    def test_inverse(self):
        for degrees in (-720.0, -45.0, 1.5, 359.0):
            assert radians_to_degrees(degrees_to_radians(degrees)) == pytest.approx(degrees)


class TestConversions:
    """Test numeric narrowing and widening."""

    @pytest.mark.unit
    def test_to_int_truncates_toward_zero(self):
        assert to_int(3.9) == 3
        assert to_int(-3.9) == -3
        assert isinstance(to_int(2.0), int)

    @pytest.mark.unit
    def test_to_int_rejects_non_finite(self):
        with pytest.raises(ValueError):
            to_int(float("nan"))
        with pytest.raises(OverflowError):
            to_int(float("inf"))

    @pytest.mark.unit
    def test_to_float_single_precision(self):
        assert to_float(0.1) == 0.10000000149011612
        assert to_float(0.5) == 0.5
        assert type(to_float(1)) is float

    @pytest.mark.unit
    def test_to_double(self):
        assert to_double(3) == 3.0
        assert type(to_double(3)) is float


class TestSign:
    """Test sign predicates."""

    @pytest.mark.unit
    def test_zero_is_neither(self):
        assert not is_positive(0)
        assert not is_negative(0)

    @pytest.mark.unit
    def test_signs(self):
        assert is_positive(0.001)
        assert is_negative(-2)


class TestRandomIntBetween:
    """Test bounded random integers."""

    @pytest.mark.unit
    def test_bounds_inclusive(self, rng):
        seen = {random_int_between(1, 3, rng) for _ in range(300)}
        assert seen == {1, 2, 3}

    @pytest.mark.unit
    def test_single_value(self):
        assert random_int_between(5, 5) == 5
