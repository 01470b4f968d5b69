# MIT License (see LICENSE)
"""
Utility functions for vector math and environment configuration.

Real points are 2D numpy arrays of shape (2,). The extraction step also
works with 4D vectors (re x, re y, im x, im y) of shape (4,).
"""
from __future__ import annotations
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for centers and points.
    """
    return np.array(x, dtype=np.float64)


def point2(x: float, y: float) -> np.ndarray:
    """Build a real 2D point."""
    return np.array([x, y], dtype=np.float64)


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit vector in the same direction as v.

    Returns the zero vector if |v| < eps to avoid division by zero.
    """
    n = float(np.linalg.norm(v))
    if n < eps:
        return np.zeros_like(v, dtype=np.float64)
    return v / n


def project(v: np.ndarray, u: np.ndarray) -> np.ndarray:
    """
    Orthogonal projection of v onto u: u (v·u) / (u·u).

    Projecting onto the zero vector gives the zero vector.
    """
    uu = float(np.dot(u, u))
    if uu == 0.0:
        return np.zeros_like(u, dtype=np.float64)
    return u * (float(np.dot(v, u)) / uu)


def trace_enabled() -> bool:
    """Check if diagnostic tracing is enabled via environment variable."""
    return os.environ.get("CONIC_GEOM_TRACE", "0") == "1"
