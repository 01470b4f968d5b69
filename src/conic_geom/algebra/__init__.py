# MIT License (see LICENSE)
"""
Complex arithmetic, polynomial root solving and 3x3 complex matrices.

This subpackage provides:
    - Complex: immutable complex value type.
    - solve_linear / solve_quadratic / solve_cubic: closed-form solvers
      returning a NoRoots | AllRoots | Roots tagged union.
    - ComplexMatrix3 and helpers: determinant, adjugate, transpose,
      dominant row/column selection.

Typical usage:
    from conic_geom.algebra import Complex, Roots, solve_cubic

    result = solve_cubic(1, -6, 11, -6)
    if isinstance(result, Roots):
        print([str(r) for r in result.values])
"""
from .complex import Complex
from .roots import (
    ALL_ROOTS,
    NO_ROOTS,
    AllRoots,
    NoRoots,
    Roots,
    RootSet,
    solve_cubic,
    solve_linear,
    solve_quadratic,
)
from .matrix import (
    ComplexMatrix3,
    adjugate,
    determinant,
    determinant2,
    dominant_column,
    dominant_row,
    transpose,
)

__all__ = [
    # Complex
    "Complex",
    # Roots
    "RootSet",
    "NoRoots",
    "AllRoots",
    "Roots",
    "NO_ROOTS",
    "ALL_ROOTS",
    "solve_linear",
    "solve_quadratic",
    "solve_cubic",
    # Matrices
    "ComplexMatrix3",
    "determinant2",
    "determinant",
    "adjugate",
    "transpose",
    "dominant_row",
    "dominant_column",
]
