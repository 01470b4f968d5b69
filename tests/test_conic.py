import numpy as np
import pytest
from conic_geom.types import Conic, RealRay


def test_circle_matrix_and_evaluate():
    """(x - 1)² + (y + 2)² = 4 -> x² + y² - 2x + 4y + 1."""
    c = Conic.circle((1.0, -2.0), 2.0)
    assert c.coefficients == pytest.approx((1, 0, 1, -2, 4, 1))
    assert c.m02 == pytest.approx(-1.0)
    assert c.m12 == pytest.approx(2.0)
    assert c.evaluate(3.0, -2.0) == pytest.approx(0.0)
    assert c.evaluate(1.0, -2.0) == pytest.approx(-4.0)


def test_from_coefficients_round_trip():
    c = Conic.from_coefficients(2, 3, -1, 4, -5, 6)
    assert c.coefficients == pytest.approx((2, 3, -1, 4, -5, 6))
    assert np.allclose(c.matrix, c.matrix.T)


def test_axis_aligned_ellipse():
    """x²/4 + y² = 1."""
    e = Conic.ellipse((0.0, 0.0), 2.0, 1.0)
    assert np.allclose(e.matrix, np.diag([0.25, 1.0, -1.0]))


def test_rotated_translated_ellipse_points():
    center = np.array([1.0, -0.5])
    rx, ry, rotation = 3.0, 1.5, 0.7
    e = Conic.ellipse(center, rx, ry, rotation)
    c, s = np.cos(rotation), np.sin(rotation)
    for theta in np.linspace(0.0, 2 * np.pi, 9):
        local = np.array([rx * np.cos(theta), ry * np.sin(theta)])
        p = center + np.array([c * local[0] - s * local[1], s * local[0] + c * local[1]])
        assert e.evaluate(*p) == pytest.approx(0.0, abs=1e-12)
    # Center is inside
    assert e.evaluate(*center) < 0
    assert np.allclose(e.matrix, e.matrix.T)


def test_determinant_of_unit_circle():
    assert Conic.circle((0.0, 0.0), 1.0).determinant == pytest.approx(-1.0)


def test_invalid_conics_rejected():
    with pytest.raises(ValueError):
        Conic(np.eye(2))
    with pytest.raises(ValueError):
        Conic(np.array([[1.0, 0, 0], [0, np.nan, 0], [0, 0, -1]]))
    with pytest.raises(ValueError):
        Conic.circle((0.0, 0.0), 0.0)
    with pytest.raises(ValueError):
        Conic.ellipse((0.0, 0.0), 1.0, -1.0)


def test_conic_matrix_is_read_only():
    c = Conic(np.diag([1.0, 1.0, -1.0]))
    with pytest.raises(ValueError):
        c.matrix[0, 0] = 5.0


def test_real_ray_point_at():
    ray = RealRay((1.0, 2.0), (0.0, 1.0))
    assert np.allclose(ray.point_at(2.5), [1.0, 4.5])
