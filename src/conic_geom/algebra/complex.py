# MIT License (see LICENSE)
"""
Immutable complex number type used by the root solvers and conic routines.

Intermediate discriminants go negative (or complex) even for real conic
inputs, so the whole pipeline works over complex values. Only the
operations the solvers need are provided.

Operands of the arithmetic operators may be Complex or real numbers:
    z = Complex(2, 3) * 2 + Complex.I
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Union

import numpy as np

Operand = Union["Complex", float, int]


@dataclass(frozen=True)
class Complex:
    """
    A complex number a + bi with value semantics.

    Equality (==) is exact; use equals_epsilon() for tolerant comparison.

    Attributes:
        real: The real part a.
        imaginary: The imaginary part b.
    """
    real: float
    imaginary: float

    ZERO: ClassVar[Complex]
    ONE: ClassVar[Complex]
    I: ClassVar[Complex]

    # numpy scalars defer to our reflected operators instead of broadcasting
    __array_ufunc__ = None

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @staticmethod
    def real_value(real: float) -> Complex:
        """Complex number with only a real part."""
        return Complex(float(real), 0.0)

    @staticmethod
    def imaginary_value(imaginary: float) -> Complex:
        """Complex number with only an imaginary part."""
        return Complex(0.0, float(imaginary))

    @staticmethod
    def polar(magnitude: float, phase: float) -> Complex:
        """Complex number r(cos φ + i sin φ) from magnitude r and phase φ."""
        return Complex(
            magnitude * float(np.cos(phase)),
            magnitude * float(np.sin(phase)),
        )

    @staticmethod
    def coerce(value: Operand) -> Complex:
        """Return value as a Complex, wrapping real numbers."""
        if isinstance(value, Complex):
            return value
        return Complex(float(value), 0.0)

    # -------------------------------------------------------------------------
    # Magnitude / phase
    # -------------------------------------------------------------------------

    @property
    def magnitude(self) -> float:
        """Euclidean norm sqrt(a² + b²)."""
        return float(np.hypot(self.real, self.imaginary))

    @property
    def magnitude_squared(self) -> float:
        """Squared norm a² + b²."""
        return self.real * self.real + self.imaginary * self.imaginary

    @property
    def argument(self) -> float:
        """Phase angle in radians, in (-π, π]."""
        return float(np.arctan2(self.imaginary, self.real))

    def phase(self) -> float:
        return self.argument

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equals_epsilon(self, other: Operand, epsilon: float = 0.0) -> bool:
        """True if both parts differ by at most epsilon."""
        other = Complex.coerce(other)
        return (
            abs(self.real - other.real) <= epsilon
            and abs(self.imaginary - other.imaginary) <= epsilon
        )

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        other = Complex.coerce(other)
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        other = Complex.coerce(other)
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def __rsub__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return Complex.coerce(other) - self

    def __mul__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        other = Complex.coerce(other)
        return Complex(
            self.real * other.real - self.imaginary * other.imaginary,
            self.real * other.imaginary + self.imaginary * other.real,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: Operand) -> Complex:
        """
        Complex division.

        Raises:
            ZeroDivisionError: If the divisor is exactly zero.
        """
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        other = Complex.coerce(other)
        denom = other.magnitude_squared
        if denom == 0.0:
            raise ZeroDivisionError(f"complex division of {self} by zero")
        return Complex(
            (self.real * other.real + self.imaginary * other.imaginary) / denom,
            (self.imaginary * other.real - self.real * other.imaginary) / denom,
        )

    def __rtruediv__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return Complex.coerce(other) / self

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imaginary)

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __str__(self) -> str:
        return f"Complex({self.real}, {self.imaginary})"

    def conjugated(self) -> Complex:
        """Complex conjugate a - bi."""
        return Complex(self.real, -self.imaginary)

    def squared(self) -> Complex:
        return self * self

    def sqrt(self) -> Complex:
        """
        Principal square root, by the half-angle formula.

        The imaginary part takes the sign of this number's imaginary part,
        with zero treated as positive (so sqrt(-4) == 2i).
        """
        mag = self.magnitude
        sign = 1.0 if self.imaginary >= 0 else -1.0
        return Complex(
            float(np.sqrt((mag + self.real) / 2)),
            sign * float(np.sqrt((mag - self.real) / 2)),
        )

    def exponentiated(self) -> Complex:
        """e^(a+bi) = e^a (cos b + i sin b)."""
        return Complex.polar(float(np.exp(self.real)), self.imaginary)

    def cube_roots(self) -> tuple[Complex, Complex, Complex]:
        """
        The three cube roots of this number.

        Ordered as the principal root (angle arg/3), then arg/3 + 2π/3,
        then arg/3 - 2π/3.
        """
        arg3 = self.argument / 3
        root_magnitude = Complex.real_value(float(np.cbrt(self.magnitude)))
        return (
            root_magnitude * Complex.imaginary_value(arg3).exponentiated(),
            root_magnitude * Complex.imaginary_value(arg3 + np.pi * 2 / 3).exponentiated(),
            root_magnitude * Complex.imaginary_value(arg3 - np.pi * 2 / 3).exponentiated(),
        )


Complex.ZERO = Complex(0.0, 0.0)
Complex.ONE = Complex(1.0, 0.0)
Complex.I = Complex(0.0, 1.0)
