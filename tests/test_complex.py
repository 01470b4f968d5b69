import numpy as np
import pytest
from conic_geom.algebra.complex import Complex


def test_magnitude_and_conjugate():
    z = Complex(3, 4)
    assert z.magnitude == 5
    assert z.magnitude_squared == 25
    assert z.conjugated() == Complex(3, -4)
    assert Complex.ZERO + Complex.ONE == Complex.ONE


def test_multiplication_and_division():
    """(2+3i)(7-13i) = 14 - 26i + 21i + 39 = 53 - 5i."""
    a = Complex(2, 3)
    b = Complex(7, -13)
    assert a * b == Complex(53, -5)

    # (2+3i)/(7-13i) = (2+3i)(7+13i)/218 = (-25 + 47i)/218
    q = a / b
    assert q.real == pytest.approx(-25 / 218)
    assert q.imaginary == pytest.approx(47 / 218)


def test_real_operands_mix_with_complex():
    z = Complex(1, 2)
    assert z * 2 == Complex(2, 4)
    assert 2 * z == Complex(2, 4)
    assert 1 - z == Complex(0, -2)
    assert z + 0.5 == Complex(1.5, 2)
    assert -z == Complex(-1, -2)
    # numpy scalars defer to the Complex operators
    assert np.float64(3.0) * Complex.I == Complex(0, 3)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Complex(1, 1) / Complex.ZERO
    with pytest.raises(ZeroDivisionError):
        1 / Complex.ZERO


def test_equals_epsilon():
    a = Complex(1.0, 2.0)
    assert a.equals_epsilon(Complex(1.0 + 1e-9, 2.0 - 1e-9), 1e-8)
    assert not a.equals_epsilon(Complex(1.0 + 1e-7, 2.0), 1e-8)
    assert a.equals_epsilon(a)


def test_sqrt_principal_branch():
    """sqrt(3 ± 4i) = 2 ± i; a negative real gets a positive imaginary root."""
    r = Complex(3, 4).sqrt()
    assert r.real == pytest.approx(2.0)
    assert r.imaginary == pytest.approx(1.0)

    r = Complex(3, -4).sqrt()
    assert r.real == pytest.approx(2.0)
    assert r.imaginary == pytest.approx(-1.0)

    r = Complex(-4, 0).sqrt()
    assert r.real == pytest.approx(0.0)
    assert r.imaginary == pytest.approx(2.0)


def test_exponentiated():
    """e^(2-3i) = e² (cos 3 - i sin 3)."""
    e = Complex(2, -3).exponentiated()
    assert e.real == pytest.approx(-7.315110094901103)
    assert e.imaginary == pytest.approx(-1.0427436562359045)


def test_polar_and_argument():
    z = Complex.polar(2.0, np.pi / 2)
    assert z.real == pytest.approx(0.0, abs=1e-12)
    assert z.imaginary == pytest.approx(2.0)
    assert Complex(-1, 0).argument == pytest.approx(np.pi)
    assert Complex(0, -1).phase() == pytest.approx(-np.pi / 2)


def test_cube_roots_order():
    """Cube roots of 8i: principal at π/6, then 5π/6, then -π/2."""
    roots = Complex(0, 8).cube_roots()
    expected = [complex(np.sqrt(3), 1), complex(-np.sqrt(3), 1), complex(0, -2)]
    for root, exp in zip(roots, expected):
        assert complex(root) == pytest.approx(exp)
    for root in roots:
        assert complex(root * root * root) == pytest.approx(8j)


def test_cube_root_of_one_is_exact():
    roots = Complex.ONE.cube_roots()
    assert roots[0] == Complex.ONE


def test_coerce_and_constructors():
    assert Complex.coerce(2) == Complex(2.0, 0.0)
    assert Complex.real_value(1.5) == Complex(1.5, 0.0)
    assert Complex.imaginary_value(-2) == Complex(0.0, -2.0)
    assert complex(Complex(1, -1)) == 1 - 1j
    assert str(Complex(1.0, 2.0)) == "Complex(1.0, 2.0)"
