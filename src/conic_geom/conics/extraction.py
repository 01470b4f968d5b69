# MIT License (see LICENSE)
"""
Real solutions of a degenerate (complex) conic.

A degenerate pencil member may be a pair of complex-conjugate lines whose
only real point is their crossing, which is not obvious from the
decomposed lines alone. Here the member itself is searched for real
points directly.

Each complex line is a real 2-plane inside C² ≅ R⁴, with coordinates
(re x, re y, im x, im y). Starting from one complex solution per line:

1. The gradients of Re Q and Im Q span the normal space of the solution
   set; Gram-Schmidt against two fixed probe vectors gives a basis
   (B0, B1) of the tangent plane, which for a line is the line itself.
2. Moving P + t B0 + u B1 stays on the line. The real points are those
   whose imaginary part cancels:

       [ B0.z  B1.z ] [ t ]   [ -im x ]
       [ B0.w  B1.w ] [ u ] = [ -im y ]

3. The singular values of that 2x2 matrix decide the outcome: rank 2 is a
   single real point, rank 1 is a whole real line (or nothing), and rank 0
   means the plane is parallel to the real plane, so only an already-real
   solution counts.
"""
from __future__ import annotations
import logging

import numpy as np

from ..algebra.complex import Complex
from ..algebra.matrix import ComplexMatrix3
from ..algebra.roots import Roots, RootSet, solve_quadratic
from ..constants import PROBE_A, PROBE_ALPHA, PROBE_B, RANK_EPS, REAL_EPS
from ..errors import UnsolvableBootstrapError
from ..types import RealRay
from ..util import point2, project, unit

logger = logging.getLogger(__name__)

RealSolution = np.ndarray | RealRay
ComplexPoint = tuple[Complex, Complex]


def conic_coefficients(matrix: ComplexMatrix3) -> tuple[Complex, ...]:
    """(A, B, C, D, E, F) of Ax² + Bxy + Cy² + Dx + Ey + F from the matrix form."""
    return (
        matrix.m00,
        matrix.m01 * 2,
        matrix.m11,
        matrix.m02 * 2,
        matrix.m12 * 2,
        matrix.m22,
    )


def _root_count(roots: RootSet) -> int:
    return len(roots) if isinstance(roots, Roots) else 0


def bootstrap_solutions(matrix: ComplexMatrix3) -> list[ComplexPoint]:
    """
    Find one or two complex points on the conic by fixing a coordinate.

    First x = α is substituted, leaving
        C y² + (Bα + E) y + (Aα² + Dα + F) = 0
    and if that does not give two roots, y = α:
        A x² + (Bα + D) x + (Cα² + Eα + F) = 0
    A single root on either axis is accepted as a fallback (a repeated or
    axis-parallel line).

    Raises:
        UnsolvableBootstrapError: If neither axis yields any root.
    """
    A, B, C, D, E, F = conic_coefficients(matrix)
    alpha = PROBE_ALPHA

    x_alpha_roots = solve_quadratic(C, B * alpha + E, A * alpha * alpha + D * alpha + F)
    if _root_count(x_alpha_roots) >= 2:
        return [(alpha, x_alpha_roots[0]), (alpha, x_alpha_roots[1])]

    y_alpha_roots = solve_quadratic(A, B * alpha + D, C * alpha * alpha + E * alpha + F)
    if _root_count(y_alpha_roots) >= 2:
        return [(y_alpha_roots[0], alpha), (y_alpha_roots[1], alpha)]

    if _root_count(x_alpha_roots) == 1:
        return [(alpha, x_alpha_roots[0])]
    if _root_count(y_alpha_roots) == 1:
        return [(y_alpha_roots[0], alpha)]

    logger.debug("No probe solution for degenerate conic %s", matrix)
    raise UnsolvableBootstrapError(matrix)


def _tangent_basis(
    coefficients: tuple[Complex, ...],
    x: Complex,
    y: Complex,
) -> tuple[np.ndarray, np.ndarray]:
    """Two 4D vectors spanning the directions that stay on the conic at (x, y)."""
    A, B, C, D, E, _ = coefficients

    # Complex partial derivatives; by Cauchy-Riemann these give both real gradients
    gx = A * x * 2 + B * y + D
    gy = B * x + C * y * 2 + E

    real_gradient = np.array([gx.real, gy.real, -gx.imaginary, -gy.imaginary], dtype=np.float64)
    imaginary_gradient = np.array([gx.imaginary, gy.imaginary, gx.real, gy.real], dtype=np.float64)

    # Gram-Schmidt
    basis_real = real_gradient
    basis_imaginary = imaginary_gradient - project(imaginary_gradient, basis_real)
    plane0 = PROBE_A - project(PROBE_A, basis_real) - project(PROBE_A, basis_imaginary)
    plane1 = (
        PROBE_B
        - project(PROBE_B, basis_real)
        - project(PROBE_B, basis_imaginary)
        - project(PROBE_B, plane0)
    )
    return plane0, plane1


def _imaginary_weight(v: np.ndarray) -> float:
    return abs(float(v[2])) + abs(float(v[3]))


def _solutions_at(
    coefficients: tuple[Complex, ...],
    x: Complex,
    y: Complex,
) -> list[RealSolution]:
    """Real solutions reachable from the complex solution (x, y)."""
    rx, ry, ix, iy = x.real, y.real, x.imaginary, y.imaginary

    if abs(ix) < RANK_EPS and abs(iy) < RANK_EPS:
        return [point2(rx, ry)]

    plane0, plane1 = _tangent_basis(coefficients, x, y)
    basis_matrix = np.array([
        [plane0[2], plane1[2]],
        [plane0[3], plane1[3]],
    ], dtype=np.float64)
    singular_values = np.linalg.svd(basis_matrix, compute_uv=False)

    if abs(singular_values[1]) > RANK_EPS:
        # Rank 2: exactly one combination cancels the imaginary part
        t, u = np.linalg.solve(basis_matrix, np.array([-ix, -iy], dtype=np.float64))
        return [point2(
            rx + t * plane0[0] + u * plane1[0],
            ry + t * plane0[1] + u * plane1[1],
        )]

    if abs(singular_values[0]) <= RANK_EPS:
        # Rank 0: every move keeps the imaginary part, and it is non-zero
        return []

    # Rank 1: imaginary parts of the bases are parallel (one possibly zero)
    plane0_larger = _imaginary_weight(plane0) > _imaginary_weight(plane1)
    largest = plane0 if plane0_larger else plane1
    smallest = plane1 if plane0_larger else plane0

    largest_imaginary = largest[2:]
    t = float(np.dot([ix, iy], largest_imaginary)) / float(np.dot(largest_imaginary, largest_imaginary))
    candidate = np.array([rx, ry, ix, iy], dtype=np.float64) - largest * t
    if abs(candidate[2]) >= REAL_EPS or abs(candidate[3]) >= REAL_EPS:
        return []

    # A real combination of the bases spans the line of real solutions;
    # largest * k = smallest in the imaginary components (smallest may be zero)
    if abs(largest[2]) > abs(largest[3]):
        k = smallest[2] / largest[2]
    else:
        k = smallest[3] / largest[3]
    direction = largest * k - smallest
    return [RealRay(candidate[:2], unit(direction[:2]))]


def extract_real_solutions(matrix: ComplexMatrix3) -> list[RealSolution]:
    """
    Real points (or real lines) satisfying a degenerate conic.

    Args:
        matrix: A degenerate conic matrix (determinant ≈ 0), possibly complex.

    Returns:
        A list holding real points ([x, y] arrays) and RealRay instances,
        at most one entry per bootstrap solution.

    Raises:
        UnsolvableBootstrapError: If no complex solution could be found to
            start from.
    """
    coefficients = conic_coefficients(matrix)
    result: list[RealSolution] = []
    for x, y in bootstrap_solutions(matrix):
        result.extend(_solutions_at(coefficients, x, y))
    return result
