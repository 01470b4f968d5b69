# MIT License (see LICENSE)
"""
Optional structured tracing of the intersection pipeline.

A trace hook is any callable taking an event name and a payload dict. It is
off by default; pass one explicitly, or set CONIC_GEOM_TRACE=1 to route
events to the ``conic_geom.trace`` logger at DEBUG level.

Events emitted by intersect_conic_matrices():
    - "lambdas": pencil parameters from the cubic solve.
    - "overlap": the empty sentinel was returned (with a "reason").
    - "determinants": determinant magnitudes of the degenerate conics.
    - "lines": decomposed line pairs.
    - "intersection_collections": per-conic real solutions.
    - "points": collected real intersection points.
"""
from __future__ import annotations
import logging
from typing import Any, Callable

from .util import trace_enabled

logger = logging.getLogger(__name__)

TraceHook = Callable[[str, dict[str, Any]], None]


def log_trace(event: str, payload: dict[str, Any]) -> None:
    """Trace hook that forwards events to the module logger."""
    logger.debug("%s: %s", event, payload)


def resolve_trace(trace: TraceHook | None) -> TraceHook | None:
    """Return the explicit hook, or log_trace when enabled by environment."""
    if trace is not None:
        return trace
    if trace_enabled():
        return log_trace
    return None
