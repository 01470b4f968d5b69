# MIT License (see LICENSE)
"""
Tolerances and probe constants shared by the conic intersection routines.

The probe values are arbitrary, irrational-looking numbers. They only need
to avoid landing on special points of a conic, so they are fixed once here
rather than chosen per call, keeping results reproducible.
"""
from __future__ import annotations

import numpy as np

from .algebra.complex import Complex

# Line-pair determinant and "negligible b coefficient" threshold.
LINE_EPS: float = 1e-8

# Imaginary parts below this are treated as zero when accepting a real point.
REAL_EPS: float = 1e-8

# Singular values of the imaginary basis, and imaginary parts of a bootstrap
# solution, below this count as zero in the extraction step.
RANK_EPS: float = 1e-10

# Conic matrices with |b - k·a| <= OVERLAP_EPS·|b| (least-squares k) are
# proportional: some pencil member vanishes identically.
OVERLAP_EPS: float = 1e-9

# Fixed x (or y) value substituted into a pencil member to bootstrap
# complex solutions of it.
PROBE_ALPHA: Complex = Complex(-2.51653525696959, 1.52928502844020)

# Fixed 4D vectors (re x, re y, im x, im y) orthogonalized against the
# gradients to span the tangent plane of a pencil member.
PROBE_A: np.ndarray = np.array(
    [6.1951068548253, -1.1592689503860, 0.1602918829294, 3.205818692048202],
    dtype=np.float64,
)
PROBE_B: np.ndarray = np.array(
    [-5.420628549296924, -15.2069583028685, 0.1595906020488680, 5.10688288040682],
    dtype=np.float64,
)

# The upper-left minor drives the rank-1 correction unless its anti-symmetric
# entry is below MINOR_EPS times the largest one (lines crossing at infinity).
MINOR_EPS: float = 1e-8

# Candidate points must satisfy both input conics: |vᵀMv| <= ON_CONIC_EPS·max|M|·|v|²
# with v = (x, y, 1).
ON_CONIC_EPS: float = 1e-6

# Newton steps on (Q_a, Q_b) = 0 applied to each candidate before the
# on-conic test. A step is kept only if it lowers the larger residual.
REFINE_STEPS: int = 3

# Newton refinement stops when the two conic gradients are this close to
# parallel (|sin| of their angle), as at a tangent point.
REFINE_MIN_SINE: float = 1e-6
