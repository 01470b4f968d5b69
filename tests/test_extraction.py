import numpy as np
import pytest
from conic_geom.algebra.complex import Complex
from conic_geom.algebra.matrix import ComplexMatrix3
from conic_geom.conics.extraction import (
    bootstrap_solutions,
    conic_coefficients,
    extract_real_solutions,
)
from conic_geom.constants import PROBE_ALPHA
from conic_geom.errors import ConicError, UnsolvableBootstrapError
from conic_geom.types import Conic, RealRay


def _member(A, B, C, D, E, F):
    return ComplexMatrix3.from_real(Conic.from_coefficients(A, B, C, D, E, F).matrix)


def test_conic_coefficients_double_off_diagonal():
    m = _member(1, 2, 3, 4, 5, 6)
    coefficients = conic_coefficients(m)
    assert [complex(c) for c in coefficients] == pytest.approx([1, 2, 3, 4, 5, 6])


def test_bootstrap_uses_x_probe_first():
    """x² - y² - 2x + 2y at x = α is a quadratic in y with two roots."""
    m = _member(1, 0, -1, -2, 2, 0)
    solutions = bootstrap_solutions(m)
    assert len(solutions) == 2
    for x, y in solutions:
        assert x == PROBE_ALPHA
        q = x * x - y * y - x * 2 + y * 2
        assert q.magnitude < 1e-9


def test_bootstrap_falls_back_to_single_root():
    """-3x + 3 = 0 has no y term: only the y = α probe yields (1, α)."""
    m = _member(0, 0, 0, -3, 0, 3)
    solutions = bootstrap_solutions(m)
    assert len(solutions) == 1
    x, y = solutions[0]
    assert complex(x) == pytest.approx(1.0)
    assert y == PROBE_ALPHA


def test_bootstrap_failure_raises_typed_error():
    zero = ComplexMatrix3.from_real(np.zeros((3, 3)))
    with pytest.raises(UnsolvableBootstrapError) as excinfo:
        bootstrap_solutions(zero)
    assert excinfo.value.matrix is zero
    assert isinstance(excinfo.value, ConicError)

    constant = _member(0, 0, 0, 0, 0, 1)
    with pytest.raises(UnsolvableBootstrapError):
        extract_real_solutions(constant)


def test_conjugate_lines_give_their_real_crossing():
    """(x - 1)² + y² = 0 has the single real point (1, 0), found from both lines."""
    m = _member(1.5, 0, 1.5, -3, 0, 1.5)
    solutions = extract_real_solutions(m)
    assert len(solutions) == 2
    for s in solutions:
        assert isinstance(s, np.ndarray)
        assert np.allclose(s, [1.0, 0.0], atol=1e-8)


def test_complex_member_point_lies_on_member():
    """
    A complex pencil member of two unit circles, λ = (-1 + √3 i)/2.

    Its real points are real intersections of the circles, (0.5, ±√3/2).
    """
    lam = Complex(-0.5, np.sqrt(3) / 2)
    a = Conic.circle((0.0, 0.0), 1.0).matrix.ravel()
    b = Conic.circle((1.0, 0.0), 1.0).matrix.ravel()
    m = ComplexMatrix3(tuple(lam * x + y for x, y in zip(a, b)))

    solutions = extract_real_solutions(m)
    assert solutions
    for s in solutions:
        assert isinstance(s, np.ndarray)
        assert s[0] == pytest.approx(0.5, abs=1e-8)
        assert abs(s[1]) == pytest.approx(np.sqrt(3) / 2, abs=1e-8)


def test_real_line_pair_gives_rays():
    """Real lines x = y and x + y = 2 each come back as a RealRay."""
    m = _member(1, 0, -1, -2, 2, 0)
    solutions = extract_real_solutions(m)
    assert len(solutions) == 2

    directions = []
    for s in solutions:
        assert isinstance(s, RealRay)
        assert np.linalg.norm(s.direction) == pytest.approx(1.0)
        for t in (0.0, 1.5, -2.0):
            x, y = s.point_at(t)
            assert abs((x - y) * (x + y - 2)) < 1e-8
        directions.append(s.direction)

    # One ray along (1, 1), the other along (1, -1)
    diagonal = np.array([1.0, 1.0]) / np.sqrt(2)
    alignments = sorted(abs(float(np.dot(d, diagonal))) for d in directions)
    assert alignments == pytest.approx([0.0, 1.0], abs=1e-8)


def test_single_real_line_gives_one_ray():
    """-3x + 3 = 0 (x = 1 with the line at infinity)."""
    m = _member(0, 0, 0, -3, 0, 3)
    solutions = extract_real_solutions(m)
    assert len(solutions) == 1
    ray = solutions[0]
    assert isinstance(ray, RealRay)
    assert ray.position[0] == pytest.approx(1.0, abs=1e-8)
    assert np.allclose(np.abs(ray.direction), [0.0, 1.0], atol=1e-8)
