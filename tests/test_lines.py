import numpy as np
from conic_geom.algebra.complex import Complex
from conic_geom.conics.lines import intersect_lines


def _line(a, b, c):
    return (Complex.coerce(a), Complex.coerce(b), Complex.coerce(c))


def test_real_lines_cross():
    """x + y - 2 = 0 and x - y = 0 meet at (1, 1)."""
    p = intersect_lines(_line(1, 1, -2), _line(1, -1, 0))
    assert p is not None
    assert np.allclose(p, [1.0, 1.0])


def test_vertical_first_line_uses_second_for_y():
    """x = 3 has b = 0, so y comes from y = 2x - 1."""
    p = intersect_lines(_line(1, 0, -3), _line(-2, 1, 1))
    assert p is not None
    assert np.allclose(p, [3.0, 5.0])


def test_parallel_and_coincident_lines():
    assert intersect_lines(_line(1, 1, 0), _line(2, 2, 5)) is None
    assert intersect_lines(_line(1, 1, -1), _line(1, 1, -1)) is None
    assert intersect_lines(_line(1, 0, -1), _line(1, 0, -2)) is None


def test_conjugate_lines_meet_at_real_point():
    """x - 1 + iy = 0 and x - 1 - iy = 0 only share the real point (1, 0)."""
    p = intersect_lines(_line(1, Complex(0, 1), -1), _line(1, Complex(0, -1), -1))
    assert p is not None
    assert np.allclose(p, [1.0, 0.0])


def test_non_real_crossing_is_rejected():
    """x + iy = 0 and x = 1 cross at (1, i)."""
    assert intersect_lines(_line(1, Complex(0, 1), 0), _line(1, 0, -1)) is None
