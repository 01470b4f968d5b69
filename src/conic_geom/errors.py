# MIT License (see LICENSE)
"""
Exceptions raised by conic_geom.

Soft failures (no roots, parallel lines, non-real intersections) are
reported as ``None`` or empty collections. Exceptions are reserved for
situations the algorithms cannot handle at all.
"""
from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .algebra.matrix import ComplexMatrix3


class ConicError(Exception):
    """Base class for conic_geom errors."""


class UnsolvableBootstrapError(ConicError):
    """
    No complex solution of a pencil member was found along either probe axis.

    This signals a conic degeneracy the extraction step does not handle
    (for example a repeated line that slipped through). It is not retried.

    Attributes:
        matrix: The degenerate conic matrix that could not be bootstrapped.
    """

    def __init__(self, matrix: ComplexMatrix3) -> None:
        super().__init__(
            "Could not find a complex solution of the degenerate conic along "
            "either probe axis; more advanced initialization is required"
        )
        self.matrix = matrix
