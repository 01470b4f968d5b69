# MIT License (see LICENSE)
"""
Closed-form root solvers for complex polynomials of degree 1 to 3.

Every solver returns a RootSet, a tagged union with three members:
    - NoRoots:  no value satisfies the equation (e.g. 0x + 1 = 0).
    - AllRoots: every value satisfies it (0x + 0 = 0).
    - Roots:    a non-empty tuple of roots, repeated by multiplicity.

Callers dispatch with isinstance() over the three members. A leading
coefficient of exactly zero drops to the next lower degree.

The cubic uses Cardano's method in complex arithmetic:
    https://en.wikipedia.org/wiki/Cubic_equation#General_cubic_formula
"""
from __future__ import annotations
from dataclasses import dataclass

from .complex import Complex, Operand


@dataclass(frozen=True)
class NoRoots:
    """The equation has no solution."""

    @property
    def values(self) -> tuple[Complex, ...]:
        return ()


@dataclass(frozen=True)
class AllRoots:
    """Every value is a solution (all coefficients are zero)."""

    @property
    def values(self) -> tuple[Complex, ...]:
        return ()


@dataclass(frozen=True)
class Roots:
    """
    A finite, non-empty set of roots.

    Attributes:
        values: The roots, with repeated roots listed once per multiplicity.
    """
    values: tuple[Complex, ...]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Complex:
        return self.values[index]


RootSet = NoRoots | AllRoots | Roots

NO_ROOTS = NoRoots()
ALL_ROOTS = AllRoots()


def solve_linear(a: Operand, b: Operand) -> RootSet:
    """
    Solve ax + b = 0.

    Returns:
        NO_ROOTS if a = 0 and b != 0, ALL_ROOTS if a = b = 0,
        otherwise the single root -b/a.
    """
    a = Complex.coerce(a)
    b = Complex.coerce(b)
    if a == Complex.ZERO:
        return ALL_ROOTS if b == Complex.ZERO else NO_ROOTS
    return Roots((-(b / a),))


def solve_quadratic(a: Operand, b: Operand, c: Operand) -> RootSet:
    """
    Solve ax² + bx + c = 0.

    The two roots are (√disc - b)/2a and (-√disc - b)/2a, where
    disc = b² - 4ac and √ is the principal complex square root. A double
    root is returned twice.
    """
    a = Complex.coerce(a)
    b = Complex.coerce(b)
    c = Complex.coerce(c)
    if a == Complex.ZERO:
        return solve_linear(b, c)

    denom = a * 2
    discriminant = (b * b - a * c * 4).sqrt()
    return Roots((
        (discriminant - b) / denom,
        (-discriminant - b) / denom,
    ))


def solve_cubic(a: Operand, b: Operand, c: Operand, d: Operand) -> RootSet:
    """
    Solve ax³ + bx² + cx + d = 0.

    With Δ0 = b² - 3ac and Δ1 = 2b³ - 9abc + 27a²d:
      - Δ0 = Δ1 = 0 (exactly) gives a triple root -b/3a.
      - A zero discriminant (exact comparison of its two halves) gives a
        simple root followed by a double root.
      - Otherwise C³ = (Δ1 + √(Δ1² - 4Δ0³)) / 2 (or Δ1 when Δ0 = 0), and
        each cube root Cₖ maps to the root (b + Cₖ + Δ0/Cₖ) / (-3a).

    Returns:
        Roots with three values (repeated by multiplicity), or the result
        of solve_quadratic() when a = 0.
    """
    a = Complex.coerce(a)
    b = Complex.coerce(b)
    c = Complex.coerce(c)
    d = Complex.coerce(d)
    if a == Complex.ZERO:
        return solve_quadratic(b, c, d)

    denom = -(a * 3)
    a2 = a * a
    b2 = b * b
    b3 = b2 * b
    c2 = c * c
    c3 = c2 * c
    abc = a * b * c

    delta0_lhs = b2
    delta0_rhs = a * c * 3
    delta1_lhs = b3 * 2 + a2 * d * 27
    delta1_rhs = abc * 9

    if delta0_lhs == delta0_rhs and delta1_lhs == delta1_rhs:
        triple_root = b / denom
        return Roots((triple_root, triple_root, triple_root))

    delta0 = delta0_lhs - delta0_rhs
    delta1 = delta1_lhs - delta1_rhs

    # discriminant = 18abcd - 4b³d + b²c² - 4ac³ - 27a²d², split by sign
    discriminant_pos = abc * d * 18 + b2 * c2
    discriminant_neg = b3 * d * 4 + c3 * a * 4 + a2 * d * d * 27
    if discriminant_pos == discriminant_neg:
        simple_root = (abc * 4 - (b3 + a2 * d * 9)) / (a * delta0)
        double_root = (a * d * 9 - b * c) / (delta0 * 2)
        return Roots((simple_root, double_root, double_root))

    if delta0_lhs == delta0_rhs:
        c_cubed = delta1
    else:
        c_cubed = (delta1 + (delta1 * delta1 - delta0 * delta0 * delta0 * 4).sqrt()) / 2

    return Roots(tuple(
        (b + root + delta0 / root) / denom
        for root in c_cubed.cube_roots()
    ))
