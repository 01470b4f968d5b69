# MIT License (see LICENSE)
"""
Intersection of two conics through their pencil of degenerate members.

For conics with matrices A and B, the pencil λA + B contains (generically)
three degenerate members, the roots of the cubic det(λA + B) = 0. Each
degenerate member is a pair of lines through the intersection points, so
the real intersections are found by crossing the lines of different
members (and the two lines of the same member, which catches tangency).

Pipeline:
    1. Expand det(λA + B) into cubic coefficients in λ.
    2. Solve the cubic (complex arithmetic).
    3. Build the distinct degenerate members λA + B.
    4. Split each into lines, and search each for real solutions directly.
    5. Intersect line pairs, polish each crossing with Newton steps and
       keep the real points that lie on both conics.

Inputs are assumed non-degenerate (circles, ellipses, ...). The result may
contain the same point more than once.

Reference:
    https://math.stackexchange.com/questions/425366/
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ..algebra.complex import Complex
from ..algebra.matrix import ComplexMatrix3, determinant
from ..algebra.roots import Roots, solve_cubic
from ..constants import ON_CONIC_EPS, OVERLAP_EPS, REFINE_MIN_SINE, REFINE_STEPS
from ..profiler import Profiler, maybe_section
from ..trace import TraceHook, resolve_trace
from ..types import Conic
from .degenerate import Line, LinePair, lines_for_degenerate_conic
from .extraction import RealSolution, extract_real_solutions
from .lines import intersect_lines

logger = logging.getLogger(__name__)


@dataclass
class IntersectionResult:
    """
    Real intersection points of two conics, with intermediate diagnostics.

    Attributes:
        points: Real intersection points as [x, y] arrays (0-4 distinct,
                duplicates possible).
        degenerate_conic_matrices: The distinct degenerate pencil members.
        lines: Decomposed lines, two per degenerate member, flattened.
        intersection_collections: Per degenerate member, the real points and
                                  RealRay lines found on it directly.
                                  Diagnostic only: the rank test runs on an
                                  unnormalized basis, so a real line pair can
                                  come out as a stray point, and these
                                  entries need not lie on either input.
    """
    points: list[np.ndarray] = field(default_factory=list)
    degenerate_conic_matrices: list[ComplexMatrix3] = field(default_factory=list)
    lines: list[Line] = field(default_factory=list)
    intersection_collections: list[list[RealSolution]] = field(default_factory=list)

    def distinct_points(self, epsilon: float = 1e-8) -> list[np.ndarray]:
        """Points with near-duplicates (within epsilon per coordinate) removed."""
        out: list[np.ndarray] = []
        for p in self.points:
            if not any(np.allclose(p, q, rtol=0.0, atol=epsilon) for q in out):
                out.append(p)
        return out


def _as_conic(value: Any) -> Any:
    """Accept anything with m00 .. m22 accessors, or a 3x3 array-like."""
    if hasattr(value, "m00"):
        return value
    return Conic(value)


def _entries(conic: Any) -> tuple[float, ...]:
    return (
        float(conic.m00), float(conic.m01), float(conic.m02),
        float(conic.m10), float(conic.m11), float(conic.m12),
        float(conic.m20), float(conic.m21), float(conic.m22),
    )


def pencil_cubic(a: Any, b: Any) -> tuple[float, float, float, float]:
    """
    Coefficients (A, B, C, D) of det(λa + b) = Aλ³ + Bλ² + Cλ + D.

    A is det(a) and D is det(b); B and C are the mixed terms of the
    expansion with cij = aij λ + bij.
    """
    a00, a01, a02, a10, a11, a12, a20, a21, a22 = _entries(a)
    b00, b01, b02, b10, b11, b12, b20, b21, b22 = _entries(b)

    A = (-a02 * a11 * a20 + a01 * a12 * a20 + a02 * a10 * a21
         - a00 * a12 * a21 - a01 * a10 * a22 + a00 * a11 * a22)
    B = (-a10 * a22 * b01 + a10 * a21 * b02 + a02 * a21 * b10 - a01 * a22 * b10
         - a02 * a20 * b11 + a00 * a22 * b11 + a01 * a20 * b12 - a00 * a21 * b12
         + a02 * a10 * b21 + a12 * (-a21 * b00 + a20 * b01 + a01 * b20 - a00 * b21)
         - a01 * a10 * b22 + a11 * (a22 * b00 - a20 * b02 - a02 * b20 + a00 * b22))
    C = (-a22 * b01 * b10 + a21 * b02 * b10 + a22 * b00 * b11 - a20 * b02 * b11
         - a21 * b00 * b12 + a20 * b01 * b12 + a12 * b01 * b20 - a11 * b02 * b20
         - a02 * b11 * b20 + a01 * b12 * b20 - a12 * b00 * b21 + a10 * b02 * b21
         + a02 * b10 * b21 - a00 * b12 * b21 + a11 * b00 * b22 - a10 * b01 * b22
         - a01 * b10 * b22 + a00 * b11 * b22)
    D = (-b02 * b11 * b20 + b01 * b12 * b20 + b02 * b10 * b21
         - b00 * b12 * b21 - b01 * b10 * b22 + b00 * b11 * b22)
    return A, B, C, D


def pencil_member(a: Any, b: Any, lam: Complex) -> ComplexMatrix3:
    """The (complex) pencil member λa + b."""
    return ComplexMatrix3(tuple(
        lam * x + y for x, y in zip(_entries(a), _entries(b))
    ))


def _proportional(a: Any, b: Any) -> bool:
    """True if b = k·a up to OVERLAP_EPS, k fitted by least squares."""
    va = np.array(_entries(a), dtype=np.float64)
    vb = np.array(_entries(b), dtype=np.float64)
    aa = float(np.dot(va, va))
    if aa == 0.0:
        return not np.any(vb)
    k = float(np.dot(va, vb)) / aa
    return float(np.linalg.norm(vb - k * va)) <= OVERLAP_EPS * float(np.linalg.norm(vb))


def _real_matrix(conic: Any) -> np.ndarray:
    return np.array(_entries(conic), dtype=np.float64).reshape(3, 3)


def _homogeneous(point: np.ndarray) -> np.ndarray:
    return np.array([point[0], point[1], 1.0], dtype=np.float64)


def _lies_on(matrix: np.ndarray, point: np.ndarray) -> bool:
    """Relative residual test of (x, y, 1) M (x, y, 1)ᵀ against ON_CONIC_EPS."""
    v = _homogeneous(point)
    residual = abs(float(v @ matrix @ v))
    return residual <= ON_CONIC_EPS * float(np.max(np.abs(matrix))) * float(np.dot(v, v))


def _worst_residual(ma: np.ndarray, mb: np.ndarray, point: np.ndarray) -> float:
    v = _homogeneous(point)
    return max(abs(float(v @ ma @ v)), abs(float(v @ mb @ v)))


def refine_point(
    ma: np.ndarray,
    mb: np.ndarray,
    point: np.ndarray,
    steps: int = REFINE_STEPS,
) -> np.ndarray:
    """
    Polish an intersection estimate with Newton steps on Q_a = Q_b = 0.

    Q(x, y) = vᵀMv with v = (x, y, 1), so ∂Q/∂(x, y) = ((M + Mᵀ) v)[:2] and
    each step is a 2x2 solve. Line-pair crossings are only good to about
    1e-6, which one or two steps take down to rounding level.

    A step is kept only if it lowers max(|Q_a|, |Q_b|). Near a tangent point
    the two gradients are parallel and the solve is skipped, leaving the
    estimate as it is (REFINE_MIN_SINE bounds "parallel").

    Args:
        ma: Real 3x3 matrix of the first conic.
        mb: Real 3x3 matrix of the second conic.
        point: Starting [x, y] estimate.
        steps: Maximum number of Newton steps.

    Returns:
        The refined [x, y] point (a new array).
    """
    p = np.array(point, dtype=np.float64)
    error = _worst_residual(ma, mb, p)
    sa = ma + ma.T
    sb = mb + mb.T
    for _ in range(steps):
        if error == 0.0:
            break
        v = _homogeneous(p)
        ga = (sa @ v)[:2]
        gb = (sb @ v)[:2]
        # |ga × gb| = |ga| |gb| |sin θ|
        spread = abs(float(ga[0] * gb[1] - ga[1] * gb[0]))
        if spread <= REFINE_MIN_SINE * float(np.linalg.norm(ga)) * float(np.linalg.norm(gb)):
            break
        jacobian = np.array([ga, gb], dtype=np.float64)
        q = np.array([v @ ma @ v, v @ mb @ v], dtype=np.float64)
        try:
            step = np.linalg.solve(jacobian, -q)
        except np.linalg.LinAlgError:
            break
        moved = p + step
        moved_error = _worst_residual(ma, mb, moved)
        # Also stops on NaN from a near-singular Jacobian
        if not moved_error < error:
            break
        p, error = moved, moved_error
    return p


def _unique(values: tuple[Complex, ...]) -> list[Complex]:
    out: list[Complex] = []
    for v in values:
        if v not in out:
            out.append(v)
    return out


def intersect_conic_matrices(
    a: Any,
    b: Any,
    *,
    trace: TraceHook | None = None,
    profiler: Profiler | None = None,
) -> IntersectionResult:
    """
    Real intersection points of two non-degenerate conics.

    Args:
        a: First conic (Conic, anything with m00 .. m22, or a 3x3 array).
        b: Second conic.
        trace: Optional hook called as trace(event, payload) with
               intermediate results. Defaults to logging when
               CONIC_GEOM_TRACE=1, otherwise off.
        profiler: Optional Profiler timing the "cubic", "decompose",
                  "extract" and "pairs" phases.

    Returns:
        IntersectionResult. Its lists are all empty when the conics look
        like they overlap entirely.

    Raises:
        UnsolvableBootstrapError: If a degenerate member defeats the real
            solution search. Concentric circles do this: the member for
            λ = -1 keeps only its constant term.
    """
    a = _as_conic(a)
    b = _as_conic(b)
    trace = resolve_trace(trace)

    with maybe_section(profiler, "cubic"):
        roots = solve_cubic(*pencil_cubic(a, b))

    if not isinstance(roots, Roots):
        # No λ at all: most likely the conics overlap (infinite intersections)
        logger.debug("Pencil cubic gave %s; treating conics as overlapping", type(roots).__name__)
        if trace:
            trace("overlap", {"reason": type(roots).__name__})
        return IntersectionResult()

    lambdas = _unique(roots.values)
    if trace:
        trace("lambdas", {"lambdas": lambdas})

    degenerate_conic_matrices = [pencil_member(a, b, lam) for lam in lambdas]

    if _proportional(a, b):
        # Some member λa + b vanishes identically: the conics coincide
        logger.debug("Conic matrices are proportional; conics coincide")
        if trace:
            trace("overlap", {"reason": "proportional conics", "lambdas": lambdas})
        return IntersectionResult()

    if trace:
        trace("determinants", {
            "magnitudes": [determinant(m).magnitude for m in degenerate_conic_matrices],
        })

    with maybe_section(profiler, "decompose"):
        line_collections: list[LinePair] = [
            lines_for_degenerate_conic(m) for m in degenerate_conic_matrices
        ]
    if trace:
        trace("lines", {"lines": line_collections})

    with maybe_section(profiler, "extract"):
        intersection_collections = [
            extract_real_solutions(m) for m in degenerate_conic_matrices
        ]
    if trace:
        trace("intersection_collections", {"collections": intersection_collections})

    candidates: list[np.ndarray] = []
    with maybe_section(profiler, "pairs"):
        for i, lines0 in enumerate(line_collections):
            # Two conics touching at a tangent point meet where a member's own lines cross
            self_intersection = intersect_lines(lines0[0], lines0[1])
            if self_intersection is not None:
                candidates.append(self_intersection)

            for lines1 in line_collections[i + 1:]:
                for line0 in lines0:
                    for line1 in lines1:
                        candidate = intersect_lines(line0, line1)
                        if candidate is not None:
                            candidates.append(candidate)

        ma = _real_matrix(a)
        mb = _real_matrix(b)
        refined = [refine_point(ma, mb, p) for p in candidates]
        # A real line pair also crosses away from the conics (a diagonal
        # point of the complete quadrangle)
        points = [p for p in refined if _lies_on(ma, p) and _lies_on(mb, p)]

    logger.debug("Found %d real intersection point(s) (%d rejected) from %d pencil member(s)",
                 len(points), len(candidates) - len(points), len(degenerate_conic_matrices))
    if trace:
        trace("points", {"points": points, "rejected": len(candidates) - len(points)})

    return IntersectionResult(
        points=points,
        degenerate_conic_matrices=degenerate_conic_matrices,
        lines=[line for pair in line_collections for line in pair],
        intersection_collections=intersection_collections,
    )
