"""
Configuration & Defaults
========================
Central registry for the kernel's tunable constants.

The kernel functions take these as keyword defaults, so a caller can always
override them per call. Nothing here is read from the environment or from
disk.

Exports:
    DEFAULT_SEGMENTS (int): Curve sampling resolution.
    DEFAULT_EPSILON (float): Tolerance of the circularity check.
    DEFAULT_PARAMS (EllipsoidParams): The demonstration ellipsoid (4, 6, 3).
    SEMI_AXIS_RANGE, THETA_RANGE_DEG: Input ranges for slider-style hosts.
"""
from __future__ import annotations

import numpy as np

from .models import EllipsoidParams

# Curve sampling
DEFAULT_SEGMENTS: int = 128
MIN_SEGMENTS: int = 3

# |a - b_int| below this counts as a circle for interactive feedback
DEFAULT_EPSILON: float = 0.05

DEFAULT_PARAMS: EllipsoidParams = EllipsoidParams(a=4.0, b=6.0, c=3.0, theta=0.0)

# Host input ranges. The kernel itself imposes no upper bound.
SEMI_AXIS_RANGE: tuple[float, float] = (1.0, 10.0)
THETA_RANGE_DEG: tuple[float, float] = (-180.0, 180.0)


def clamp_to_ui_range(params: EllipsoidParams) -> EllipsoidParams:
    """Clamp a parameter snapshot to the slider ranges above.

    Args:
        params: Any valid parameter snapshot

    Returns:
        New EllipsoidParams with every field inside its range
    """
    lo, hi = SEMI_AXIS_RANGE
    theta_lo, theta_hi = np.radians(THETA_RANGE_DEG)
    return EllipsoidParams(
        a=float(np.clip(params.a, lo, hi)),
        b=float(np.clip(params.b, lo, hi)),
        c=float(np.clip(params.c, lo, hi)),
        theta=float(np.clip(params.theta, theta_lo, theta_hi)),
    )
