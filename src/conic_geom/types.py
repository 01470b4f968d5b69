# MIT License (see LICENSE)
"""
Core type definitions for conic intersection.

Defines:
- Conic: a real conic section as a symmetric 3x3 matrix.
- RealRay: a real point plus direction, describing a whole line of real
  solutions.

A conic Q(x, y) = Ax² + Bxy + Cy² + Dx + Ey + F = 0 has the matrix form
(https://en.wikipedia.org/wiki/Matrix_representation_of_conic_sections):

    [ A,   B/2, D/2 ]
    [ B/2, C,   E/2 ]
    [ D/2, E/2, F   ]

so that Q(x, y) = (x, y, 1) M (x, y, 1)ᵀ.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .algebra.matrix import RowMajorAccessors
from .util import f64

# Conic matrix of the unit circle x² + y² - 1 = 0
UNIT_CIRCLE_MATRIX = np.diag([1.0, 1.0, -1.0])


# =============================================================================
# Conic
# =============================================================================

@dataclass(frozen=True)
class Conic(RowMajorAccessors):
    """
    A real conic section in matrix form.

    Intersection routines assume non-degenerate conics (determinant well
    away from zero); that is a precondition and is not checked here.

    Attributes:
        matrix: 3x3 float64 array, expected to be symmetric.
    """
    matrix: np.ndarray

    def __post_init__(self) -> None:
        """Store the matrix as float64 and reject malformed input."""
        matrix = f64(self.matrix)
        if matrix.shape != (3, 3):
            raise ValueError(f"Conic matrix must be 3x3, got shape {matrix.shape}")
        if not np.all(np.isfinite(matrix)):
            raise ValueError("Conic matrix entries must be finite")
        matrix.setflags(write=False)
        object.__setattr__(self, "matrix", matrix)

    def entry(self, row: int, col: int) -> float:
        return float(self.matrix[row, col])

    @staticmethod
    def from_coefficients(A: float, B: float, C: float, D: float, E: float, F: float) -> Conic:
        """Conic for Ax² + Bxy + Cy² + Dx + Ey + F = 0."""
        return Conic(np.array([
            [A, B / 2, D / 2],
            [B / 2, C, E / 2],
            [D / 2, E / 2, F],
        ], dtype=np.float64))

    @staticmethod
    def circle(center: tuple[float, float] | np.ndarray, radius: float) -> Conic:
        """
        Circle (x - a)² + (y - b)² = r².

        Expanded: x² + y² - 2ax - 2by + (a² + b² - r²) = 0.
        """
        if radius <= 0:
            raise ValueError(f"Circle radius must be positive, got {radius}")
        a, b = f64(center)
        return Conic.from_coefficients(1.0, 0.0, 1.0, -2 * a, -2 * b, a * a + b * b - radius * radius)

    @staticmethod
    def ellipse(
        center: tuple[float, float] | np.ndarray,
        radius_x: float,
        radius_y: float,
        rotation: float = 0.0,
    ) -> Conic:
        """
        Ellipse with the given center, semi-axes and rotation (radians).

        With M the transform taking the unit circle to this ellipse
        (translate · rotate · scale), a point p lies on the ellipse iff
        M⁻¹p lies on the unit circle, so the conic matrix is M⁻ᵀ U M⁻¹.
        """
        if radius_x <= 0 or radius_y <= 0:
            raise ValueError(f"Ellipse radii must be positive, got ({radius_x}, {radius_y})")
        cx, cy = f64(center)
        c, s = np.cos(rotation), np.sin(rotation)
        unit_transform = np.array([
            [c * radius_x, -s * radius_y, cx],
            [s * radius_x, c * radius_y, cy],
            [0.0, 0.0, 1.0],
        ], dtype=np.float64)
        inverted = np.linalg.inv(unit_transform)
        matrix = inverted.T @ UNIT_CIRCLE_MATRIX @ inverted
        # Symmetrize away rounding noise
        return Conic(0.5 * (matrix + matrix.T))

    @property
    def coefficients(self) -> tuple[float, float, float, float, float, float]:
        """(A, B, C, D, E, F) of Ax² + Bxy + Cy² + Dx + Ey + F."""
        m = self.matrix
        return (
            float(m[0, 0]),
            float(m[0, 1] + m[1, 0]),
            float(m[1, 1]),
            float(m[0, 2] + m[2, 0]),
            float(m[1, 2] + m[2, 1]),
            float(m[2, 2]),
        )

    @property
    def determinant(self) -> float:
        return float(np.linalg.det(self.matrix))

    def evaluate(self, x: float, y: float) -> float:
        """Q(x, y); zero on the conic."""
        p = np.array([x, y, 1.0], dtype=np.float64)
        return float(p @ self.matrix @ p)


# =============================================================================
# Real ray
# =============================================================================

@dataclass(frozen=True)
class RealRay:
    """
    A real line of solutions, as a point on it and a unit direction.

    Produced when a degenerate pencil member touches the real plane along a
    whole line (tangential or overlapping cases).

    Attributes:
        position: A real point on the line as [x, y].
        direction: Unit direction of the line as [dx, dy].
    """
    position: np.ndarray
    direction: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", f64(self.position))
        object.__setattr__(self, "direction", f64(self.direction))

    def point_at(self, t: float) -> np.ndarray:
        return self.position + t * self.direction
