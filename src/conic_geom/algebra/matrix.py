# MIT License (see LICENSE)
"""
Fixed-size 3x3 complex matrices and the helpers used to split degenerate
conics into lines.

Matrices are stored row-major, so

    [ A, B, C ]
    [ D, E, F ]
    [ G, H, I ]

is held as (A, B, C, D, E, F, G, H, I). Entries are accessed by name
(m.m12) or by (row, column) index (m[1, 2]).
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .complex import Complex

# A row, column or homogeneous line (a, b, c) meaning ax + by + c = 0
Triple = tuple[Complex, Complex, Complex]


class RowMajorAccessors(ABC):
    """Named m00 .. m22 accessors over a row-major 3x3 entry lookup."""

    @abstractmethod
    def entry(self, row: int, col: int):
        """Entry at (row, col), both in 0..2."""

    @property
    def m00(self):
        return self.entry(0, 0)

    @property
    def m01(self):
        return self.entry(0, 1)

    @property
    def m02(self):
        return self.entry(0, 2)

    @property
    def m10(self):
        return self.entry(1, 0)

    @property
    def m11(self):
        return self.entry(1, 1)

    @property
    def m12(self):
        return self.entry(1, 2)

    @property
    def m20(self):
        return self.entry(2, 0)

    @property
    def m21(self):
        return self.entry(2, 1)

    @property
    def m22(self):
        return self.entry(2, 2)


@dataclass(frozen=True)
class ComplexMatrix3(RowMajorAccessors):
    """
    Immutable 3x3 matrix of Complex entries in row-major order.

    Attributes:
        entries: Exactly nine Complex values, row by row.
    """
    entries: tuple[Complex, ...]

    def __post_init__(self) -> None:
        """Store entries as a tuple of Complex and check the size."""
        entries = tuple(Complex.coerce(e) for e in self.entries)
        if len(entries) != 9:
            raise ValueError(f"ComplexMatrix3 needs 9 entries, got {len(entries)}")
        object.__setattr__(self, "entries", entries)

    @staticmethod
    def from_rows(rows: Sequence[Sequence[Complex | float]]) -> ComplexMatrix3:
        """Build from three rows of three values each."""
        return ComplexMatrix3(tuple(value for row in rows for value in row))

    @staticmethod
    def from_real(matrix) -> ComplexMatrix3:
        """Build from a real 3x3 array-like."""
        arr = np.asarray(matrix, dtype=np.float64)
        if arr.shape != (3, 3):
            raise ValueError(f"Expected a 3x3 matrix, got shape {arr.shape}")
        return ComplexMatrix3(tuple(Complex.real_value(v) for v in arr.ravel()))

    def entry(self, row: int, col: int) -> Complex:
        return self.entries[3 * row + col]

    def __getitem__(self, index: tuple[int, int]) -> Complex:
        row, col = index
        return self.entry(row, col)

    def row(self, i: int) -> Triple:
        return self.entries[3 * i], self.entries[3 * i + 1], self.entries[3 * i + 2]

    def column(self, j: int) -> Triple:
        return self.entries[j], self.entries[3 + j], self.entries[6 + j]

    def rows(self) -> tuple[Triple, Triple, Triple]:
        return self.row(0), self.row(1), self.row(2)

    def __add__(self, other: ComplexMatrix3) -> ComplexMatrix3:
        if not isinstance(other, ComplexMatrix3):
            return NotImplemented
        return ComplexMatrix3(tuple(a + b for a, b in zip(self.entries, other.entries)))

    def scaled(self, factor: Complex | float) -> ComplexMatrix3:
        """Every entry multiplied by factor."""
        return ComplexMatrix3(tuple(e * factor for e in self.entries))

    def max_magnitude(self) -> float:
        return max(e.magnitude for e in self.entries)

    def is_zero(self, epsilon: float = 0.0) -> bool:
        """True if every entry is within epsilon of zero (per component)."""
        return all(e.equals_epsilon(Complex.ZERO, epsilon) for e in self.entries)

    def to_numpy(self) -> np.ndarray:
        """As a 3x3 numpy complex128 array."""
        return np.array([complex(e) for e in self.entries], dtype=np.complex128).reshape(3, 3)


def determinant2(a: Complex, b: Complex, c: Complex, d: Complex) -> Complex:
    """Determinant of the 2x2 matrix [[a, b], [c, d]]."""
    return a * d - b * c


def determinant(m: ComplexMatrix3) -> Complex:
    """Determinant by cofactor expansion."""
    return (
        m.m00 * m.m11 * m.m22
        + m.m01 * m.m12 * m.m20
        + m.m02 * m.m10 * m.m21
        - m.m02 * m.m11 * m.m20
        - m.m01 * m.m10 * m.m22
        - m.m00 * m.m12 * m.m21
    )


def adjugate(m: ComplexMatrix3) -> ComplexMatrix3:
    """
    Adjugate (transpose of the cofactor matrix).

    For a rank-2 matrix the adjugate has rank 1, and any non-zero row of it
    is proportional to the null vector of m.
    """
    return ComplexMatrix3((
        determinant2(m.m11, m.m12, m.m21, m.m22),
        -determinant2(m.m01, m.m02, m.m21, m.m22),
        determinant2(m.m01, m.m02, m.m11, m.m12),
        -determinant2(m.m10, m.m12, m.m20, m.m22),
        determinant2(m.m00, m.m02, m.m20, m.m22),
        -determinant2(m.m00, m.m02, m.m10, m.m12),
        determinant2(m.m10, m.m11, m.m20, m.m21),
        -determinant2(m.m00, m.m01, m.m20, m.m21),
        determinant2(m.m00, m.m01, m.m10, m.m11),
    ))


def transpose(m: ComplexMatrix3) -> ComplexMatrix3:
    """Plain transpose (entries are not conjugated)."""
    e = m.entries
    return ComplexMatrix3((e[0], e[3], e[6], e[1], e[4], e[7], e[2], e[5], e[8]))


def dominant_row(m: ComplexMatrix3, check_last: bool = False) -> Triple:
    """
    The row with the greatest combined magnitude.

    Only the first two entries are weighed unless check_last is set, so a
    row that is zero in x and y (the line at infinity) is never preferred
    over a finite line. Ties keep the earliest row.
    """
    def weight(row: Triple) -> float:
        w = row[0].magnitude + row[1].magnitude
        if check_last:
            w += row[2].magnitude
        return w

    best = m.row(0)
    best_weight = weight(best)
    for i in (1, 2):
        row = m.row(i)
        w = weight(row)
        if w > best_weight:
            best, best_weight = row, w
    return best


def dominant_column(m: ComplexMatrix3, check_last: bool = False) -> Triple:
    """The column with the greatest combined magnitude (see dominant_row)."""
    return dominant_row(transpose(m), check_last)
