# MIT License (see LICENSE)
"""
Intersection of homogeneous complex lines, keeping only real results.
"""
from __future__ import annotations

import numpy as np

from ..algebra.complex import Complex
from ..constants import LINE_EPS, REAL_EPS
from ..util import point2
from .degenerate import Line


def intersect_lines(line1: Line, line2: Line) -> np.ndarray | None:
    """
    Intersect a1 x + b1 y + c1 = 0 with a2 x + b2 y + c2 = 0.

    Eliminating y:
        x = (b2 c1 - b1 c2) / (a2 b1 - a1 b2)
    then y is recovered from whichever line has a non-negligible b.

    Args:
        line1: Coefficients (a1, b1, c1).
        line2: Coefficients (a2, b2, c2).

    Returns:
        The real point [x, y], or None if the lines are parallel (or
        coincident), both are vertical, or the crossing is not real.
    """
    a1, b1, c1 = line1
    a2, b2, c2 = line2

    determinant = a2 * b1 - a1 * b2
    if determinant.equals_epsilon(Complex.ZERO, LINE_EPS):
        return None

    x = (b2 * c1 - b1 * c2) / determinant
    if not b1.equals_epsilon(Complex.ZERO, LINE_EPS):
        y = (-a1 * x - c1) / b1
    elif not b2.equals_epsilon(Complex.ZERO, LINE_EPS):
        y = (-a2 * x - c2) / b2
    else:
        return None

    if abs(x.imaginary) < REAL_EPS and abs(y.imaginary) < REAL_EPS:
        return point2(x.real, y.real)
    return None
