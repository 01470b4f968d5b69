# MIT License (see LICENSE)
"""
Conic intersection via the pencil of degenerate conics.

This subpackage provides:
    - Degenerate: rank-1 correction and decomposition into line pairs.
    - Extraction: real points / lines lying on a degenerate member.
    - Lines: real intersection of homogeneous complex lines.
    - Intersect: the full pipeline for two conics.

Typical usage:
    from conic_geom import Conic
    from conic_geom.conics import intersect_conic_matrices

    result = intersect_conic_matrices(Conic.circle((0, 0), 1), Conic.circle((1, 0), 1))
    for p in result.points:
        print(p)
"""
from .degenerate import (
    anti_symmetric_matrix,
    correction_minor,
    lines_for_degenerate_conic,
    rank_one_correction,
    rank_one_degenerate_conic,
)
from .extraction import bootstrap_solutions, conic_coefficients, extract_real_solutions
from .lines import intersect_lines
from .intersect import (
    IntersectionResult,
    intersect_conic_matrices,
    pencil_cubic,
    pencil_member,
    refine_point,
)

__all__ = [
    # Degenerate
    "anti_symmetric_matrix",
    "correction_minor",
    "rank_one_correction",
    "rank_one_degenerate_conic",
    "lines_for_degenerate_conic",
    # Extraction
    "conic_coefficients",
    "bootstrap_solutions",
    "extract_real_solutions",
    # Lines
    "intersect_lines",
    # Intersect
    "IntersectionResult",
    "intersect_conic_matrices",
    "pencil_cubic",
    "pencil_member",
    "refine_point",
]
