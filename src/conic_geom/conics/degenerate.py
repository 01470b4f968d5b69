# MIT License (see LICENSE)
"""
Splitting degenerate conics into pairs of lines.

A degenerate conic is the product of two (possibly complex) lines,
(Px + Qy + R)(Sx + Ty + U) = 0, and its symmetric matrix M is
(l mᵀ + m lᵀ) / 2 with rank 2 (or 1 for a repeated line). Adding a
suitable multiple of an anti-symmetric matrix S leaves the zero set
unchanged (xᵀ S x = 0 for every x) and turns M into the rank-1 matrix
l mᵀ, from which the lines are read off as a row and a column.

The anti-symmetric matrix is built from the null vector p of M (the
point where the lines cross, proportional to any non-zero row of
adj(M)):

    S = [[ 0,   p2, -p1 ],
         [-p2,  0,   p0 ],
         [ p1, -p0,  0  ]]

Reference:
    https://math.stackexchange.com/questions/425366/
"""
from __future__ import annotations

from ..algebra.complex import Complex
from ..algebra.matrix import (
    ComplexMatrix3,
    Triple,
    adjugate,
    dominant_column,
    dominant_row,
)
from ..algebra.roots import Roots, solve_quadratic
from ..constants import MINOR_EPS

Line = Triple
LinePair = tuple[Line, Line]

# Principal 2x2 minors, as (i, j) row/column index pairs
PRINCIPAL_MINORS = ((0, 1), (0, 2), (1, 2))


def anti_symmetric_matrix(matrix: ComplexMatrix3) -> ComplexMatrix3:
    """Anti-symmetric correction direction built from the dominant row of adj(matrix)."""
    # All three entries count: lines crossing at the origin have p = (0, 0, 1)
    p0, p1, p2 = dominant_row(adjugate(matrix), check_last=True)
    zero = Complex.ZERO
    return ComplexMatrix3((
        zero, p2, -p1,
        -p2, zero, p0,
        p1, -p0, zero,
    ))


def correction_minor(anti_symmetric: ComplexMatrix3) -> tuple[int, int]:
    """
    The principal minor used to solve for the rank-1 correction.

    The upper-left (0, 1) minor is used unless its anti-symmetric entry
    s01 = p2 is negligible, which happens when the lines cross at
    infinity (parallel lines). Then the minor with the largest s_ij wins.
    """
    weights = [anti_symmetric[i, j].magnitude for i, j in PRINCIPAL_MINORS]
    largest = max(weights)
    if weights[0] > MINOR_EPS * largest:
        return PRINCIPAL_MINORS[0]
    return PRINCIPAL_MINORS[weights.index(largest)]


def rank_one_correction(
    degenerate: ComplexMatrix3,
    anti_symmetric: ComplexMatrix3,
    minor: tuple[int, int] | None = None,
) -> Complex | None:
    """
    Scale α such that degenerate + α·anti_symmetric has rank 1.

    Every 2x2 minor of a rank-1 matrix vanishes. For the principal minor
    on rows/columns (i, j):

        (dii + α aii)(djj + α ajj) - (dij + α aij)(dji + α aji) = 0

    which is the quadratic

        (aij aji - aii ajj) α² + (-ajj dii + aji dij + aij dji - aii djj) α
            + (dij dji - dii djj) = 0

    Args:
        degenerate: The degenerate conic matrix.
        anti_symmetric: Output of anti_symmetric_matrix().
        minor: (i, j) of the principal minor; chosen by correction_minor()
               when omitted.

    Returns:
        The first root, or None if the quadratic has no roots or is
        satisfied by every α (the matrix is already in rank-1 form as far
        as this minor can tell).
    """
    i, j = minor if minor is not None else correction_minor(anti_symmetric)
    dii, dij, dji, djj = degenerate[i, i], degenerate[i, j], degenerate[j, i], degenerate[j, j]
    aii, aij, aji, ajj = anti_symmetric[i, i], anti_symmetric[i, j], anti_symmetric[j, i], anti_symmetric[j, j]

    A = aij * aji - aii * ajj
    B = -ajj * dii + aji * dij + aij * dji - aii * djj
    C = dij * dji - dii * djj

    roots = solve_quadratic(A, B, C)
    if isinstance(roots, Roots):
        return roots[0]
    return None


def rank_one_degenerate_conic(matrix: ComplexMatrix3) -> ComplexMatrix3:
    """Force a (near-)singular conic matrix to rank 1 without changing its zero set."""
    anti_symmetric = anti_symmetric_matrix(matrix)
    alpha = rank_one_correction(matrix, anti_symmetric)
    if alpha is None:
        # Adding any multiple of the anti-symmetric matrix keeps it as is
        return matrix
    return matrix + anti_symmetric.scaled(alpha)


def lines_for_degenerate_conic(matrix: ComplexMatrix3) -> LinePair:
    """
    Decompose a degenerate conic into its two homogeneous lines.

    Returns:
        (row_line, column_line) where each line (a, b, c) means
        ax + by + c = 0. The lines may coincide or be complex conjugates.
    """
    rank_one = rank_one_degenerate_conic(matrix)
    return dominant_row(rank_one), dominant_column(rank_one)
