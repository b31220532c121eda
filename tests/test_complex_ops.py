"""Tests for complex arithmetic."""
import math

import pytest

from lagrange.complex_ops import (
    OMEGA,
    OMEGA_SQ,
    Complex,
    add,
    cube,
    divide,
    from_angle,
    from_complex,
    magnitude,
    multiply,
    subtract,
)
from lagrange.errors import DivisionByZeroError, LagrangeError

SAMPLES = [
    Complex(0.0, 0.0),
    Complex(1.5, -2.0),
    Complex(-0.3, 0.7),
    Complex(3.0, 4.0),
    Complex(-1e3, 2.5e-3),
]


def _close(a, b, tol=1e-9):
    return abs(a.r - b.r) <= tol * max(1.0, abs(b.r)) and abs(a.i - b.i) <= tol * max(1.0, abs(b.i))


class TestFieldOperations:
    def test_add_commutes(self):
        for a in SAMPLES:
            for b in SAMPLES:
                assert add(a, b) == add(b, a)

    def test_multiply_commutes(self):
        for a in SAMPLES:
            for b in SAMPLES:
                assert multiply(a, b) == multiply(b, a)

    def test_subtract_inverts_add(self):
        a, b = Complex(2.0, -1.0), Complex(0.5, 0.25)
        assert subtract(add(a, b), b) == a

    def test_multiply_known_value(self):
        # (1 + 2i)(3 - i) = 5 + 5i
        assert multiply(Complex(1, 2), Complex(3, -1)) == Complex(5, 5)

    def test_divide_then_multiply_roundtrips(self):
        for a in SAMPLES:
            for b in SAMPLES:
                if magnitude(b) == 0.0:
                    continue
                assert _close(multiply(divide(a, b), b), a)

    def test_matches_builtin_complex(self):
        a, b = Complex(1.25, -0.5), Complex(-2.0, 3.0)
        assert divide(a, b).to_complex() == pytest.approx(a.to_complex() / b.to_complex())

    def test_values_are_immutable(self):
        z = Complex(1.0, 2.0)
        with pytest.raises(Exception):
            z.r = 3.0  # type: ignore[misc]


class TestDivisionByZero:
    def test_zero_divisor_raises(self):
        with pytest.raises(DivisionByZeroError):
            divide(Complex(1.0, 1.0), Complex(0.0, 0.0))

    def test_error_is_zero_division_and_engine_error(self):
        with pytest.raises(ZeroDivisionError):
            divide(Complex(1.0, 0.0), Complex(-0.0, 0.0))
        with pytest.raises(LagrangeError):
            divide(Complex(1.0, 0.0), Complex(0.0, 0.0))

    def test_tiny_divisor_is_allowed(self):
        out = divide(Complex(1.0, 0.0), Complex(1e-150, 0.0))
        assert out.r == pytest.approx(1e150)


class TestPolarAndPowers:
    @pytest.mark.parametrize("theta", [0.0, 0.3, math.pi / 2, 2.0, -4.5, 100.0])
    def test_from_angle_is_unit(self, theta):
        assert magnitude(from_angle(theta)) == pytest.approx(1.0, abs=1e-12)

    def test_magnitude_nonnegative(self):
        assert magnitude(Complex(3.0, -4.0)) == 5.0
        assert all(magnitude(z) >= 0 for z in SAMPLES)

    def test_cube_is_two_multiplications(self):
        for z in SAMPLES:
            assert cube(z) == multiply(multiply(z, z), z)

    def test_omega_is_primitive_cube_root(self):
        assert _close(cube(OMEGA), Complex(1.0, 0.0), 1e-12)
        assert _close(cube(OMEGA_SQ), Complex(1.0, 0.0), 1e-12)
        assert abs(OMEGA.to_complex() - 1) > 1.0
        assert _close(multiply(OMEGA, OMEGA), OMEGA_SQ, 1e-12)

    def test_converters(self):
        z = from_complex(complex(2.0, -3.0))
        assert z == Complex(2.0, -3.0)
        assert z.as_tuple() == (2.0, -3.0)
        assert str(z) == "2.000000 - 3.000000i"
