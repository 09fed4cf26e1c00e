"""
Ellipsoid Sections - Circular Sections of a Triaxial Ellipsoid.

Intersects the ellipsoid x²/a² + y²/b² + z²/c² = 1 with a plane rotating
about the X-axis, decides whether a circular section exists, solves for the
angle that produces it, and samples the intersection curve. Angles are in
radians throughout.

Example:
    >>> import numpy as np
    >>> from ellipsoid_sections import feasible, solve_target_angle, is_circular
    >>>
    >>> feasible(4, 6, 3)
    True
    >>> target = solve_target_angle(4, 6, 3)
    >>> round(target.degrees, 2)
    40.2
    >>> is_circular(4, 6, 3, target.angle, epsilon=0.01)
    True

    >>> # Everything for one parameter snapshot
    >>> from ellipsoid_sections import EllipsoidParams, analyze
    >>> result = analyze(EllipsoidParams.from_degrees(4, 6, 3, theta_deg=30))
    >>> len(result.curve)
    129
"""

__version__ = "1.0.0"

# Core section functions
from .geometry import (
    analyze,
    feasible,
    generate_curve,
    is_circular,
    plane_normal,
    section_ellipse,
    section_semi_axes,
    snap_to_circular,
    solve_target_angle,
)

# Data classes
from .models import (
    EllipsoidParams,
    IntersectionCurve,
    SectionAnalysis,
    SectionEllipse,
    SectionStatus,
    TargetAngle,
)

# Errors, defaults and logging
from .config import (
    DEFAULT_EPSILON,
    DEFAULT_PARAMS,
    DEFAULT_SEGMENTS,
    clamp_to_ui_range,
)
from .errors import InvalidParameterError
from .logging_config import setup_logging

__all__ = [
    # Version
    "__version__",
    # Core functions
    "feasible",
    "solve_target_angle",
    "generate_curve",
    "is_circular",
    # Supporting geometry
    "section_ellipse",
    "section_semi_axes",
    "plane_normal",
    "analyze",
    "snap_to_circular",
    # Data classes
    "EllipsoidParams",
    "IntersectionCurve",
    "SectionAnalysis",
    "SectionEllipse",
    "SectionStatus",
    "TargetAngle",
    # Errors
    "InvalidParameterError",
    # Configuration
    "DEFAULT_EPSILON",
    "DEFAULT_PARAMS",
    "DEFAULT_SEGMENTS",
    "clamp_to_ui_range",
    "setup_logging",
]
