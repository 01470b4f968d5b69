# MIT License (see LICENSE)
"""
conic_geom - Real intersections of conic sections over complex arithmetic.

This package computes the real intersection points of two conics (circles,
ellipses, ...) given as 3x3 matrices, using the pencil of degenerate conics
and closed-form complex root solving.

Main entry points:
    - intersect_conic_matrices: Intersect two conics.
    - Conic: Real conic in matrix form (circle, ellipse, coefficients).
    - Complex: Complex value type used throughout.
    - solve_linear, solve_quadratic, solve_cubic: Closed-form solvers.

Submodules:
    - algebra: Complex numbers, root solvers, 3x3 complex matrices.
    - conics: Degenerate conic decomposition, real extraction, intersection.
    - profiler: Optional timing of the pipeline phases.
    - trace: Optional structured tracing hook.

Example:
    from conic_geom import Conic, intersect_conic_matrices

    result = intersect_conic_matrices(
        Conic.circle((0, 0), 1.0),
        Conic.circle((1, 0), 1.0),
    )
    print(result.points)
"""
from .algebra import Complex, AllRoots, NoRoots, Roots, solve_cubic, solve_linear, solve_quadratic
from .algebra.matrix import ComplexMatrix3
from .conics import IntersectionResult, intersect_conic_matrices
from .errors import ConicError, UnsolvableBootstrapError
from .types import Conic, RealRay

__all__ = [
    # Intersection
    "intersect_conic_matrices",
    "IntersectionResult",
    # Types
    "Conic",
    "RealRay",
    "Complex",
    "ComplexMatrix3",
    # Solvers
    "solve_linear",
    "solve_quadratic",
    "solve_cubic",
    "NoRoots",
    "AllRoots",
    "Roots",
    # Errors
    "ConicError",
    "UnsolvableBootstrapError",
]
