"""
Ellipsoid Section Engine.

Intersects the ellipsoid x²/a² + y²/b² + z²/c² = 1 with a plane that contains
the X-axis and is rotated about it by theta (radians). Points on the plane
are parameterized by local coordinates (u, v):

    x = u,  y = v cos θ,  z = v sin θ

which turns the ellipsoid equation into the section ellipse

    u²/a² + v² (cos²θ/b² + sin²θ/c²) = 1.

The section is a circle when both coefficients agree. Every function here is
pure; hosts recompute from scratch on each parameter change.
"""

import logging

import numpy as np

from .config import DEFAULT_EPSILON, DEFAULT_SEGMENTS, MIN_SEGMENTS
from .errors import (
    InvalidParameterError,
    validate_angle,
    validate_semi_axes,
    validate_tolerance,
)
from .models import (
    EllipsoidParams,
    IntersectionCurve,
    SectionAnalysis,
    SectionEllipse,
    TargetAngle,
)

logger = logging.getLogger(__name__)


def feasible(a: float, b: float, c: float) -> bool:
    """Check whether some plane through the X-axis cuts a circle.

    That happens exactly when a lies between b and c, bounds included.

    Args:
        a: Semi-axis along X
        b: Semi-axis along Y
        c: Semi-axis along Z

    Returns:
        True if a circular section through the X-axis exists

    Raises:
        InvalidParameterError: If any semi-axis is not positive
    """
    validate_semi_axes(a, b, c)
    return bool((b <= a <= c) or (c <= a <= b))


def solve_target_angle(a: float, b: float, c: float) -> TargetAngle:
    """Solve 1/a² = cos²θ/b² + sin²θ/c² for the plane angle.

    With S = sin²θ the condition is linear in S:

        S = (1/a² − 1/b²) / (1/c² − 1/b²) = c²(b² − a²) / (a²(b² − c²))

    which is evaluated as tan θ = c√(b² − a²) / (b√(a² − c²)) on axes
    scaled by max(a, b, c), so no square of a raw semi-axis is formed.

    Only the principal value θ = arcsin(√S) in [0, π/2] is returned. The
    angles −θ and π ± θ cut the same circles; see
    :meth:`TargetAngle.solution_set`.

    Args:
        a: Semi-axis along X
        b: Semi-axis along Y
        c: Semi-axis along Z

    Returns:
        TargetAngle that is FOUND, NO_SOLUTION, or DEGENERATE when b == c

    Raises:
        InvalidParameterError: If any semi-axis is not positive
    """
    validate_semi_axes(a, b, c)

    # Surface of revolution about X: all sections are congruent and
    # S = 0/0 has no single value.
    if b == c:
        logger.debug("b == c == %g: no discriminating angle", b)
        return TargetAngle.degenerate()

    if not feasible(a, b, c):
        logger.debug("a=%g is not between b=%g and c=%g", a, b, c)
        return TargetAngle.no_solution()

    # S is dimensionless; scaling keeps every product below 1
    scale = max(a, b, c)
    a_s, b_s, c_s = a / scale, b / scale, c / scale
    opposite = c_s * np.sqrt(abs(b_s - a_s)) * np.sqrt(b_s + a_s)
    adjacent = b_s * np.sqrt(abs(a_s - c_s)) * np.sqrt(a_s + c_s)

    if opposite == 0.0 and adjacent == 0.0:
        logger.debug("sin²θ undefined for a=%g, b=%g, c=%g", a, b, c)
        return TargetAngle.no_solution()

    # a between b and c puts both legs on the same side, so θ is in [0, π/2]
    angle = float(np.arctan2(opposite, adjacent))
    logger.debug("Circular section at θ=%.6f rad (%.4f°)", angle, np.degrees(angle))
    return TargetAngle.found(angle)


def section_semi_axes(a: float, b: float, c: float, theta: float) -> tuple[float, float]:
    """Semi-axes (a_int, b_int) of the section ellipse at angle theta.

    b_int = 1/√(cos²θ/b² + sin²θ/c²) = bc / hypot(c cos θ, b sin θ). With b
    and c scaled by their maximum one of them is 1, so the hypotenuse is
    positive for every real theta and nothing overflows.
    """
    validate_semi_axes(a, b, c)
    validate_angle(theta)
    scale = max(b, c)
    b_s, c_s = b / scale, c / scale
    ratio = b_s * c_s / np.hypot(c_s * np.cos(theta), b_s * np.sin(theta))
    return float(a), float(scale * ratio)


def section_ellipse(a: float, b: float, c: float, theta: float) -> SectionEllipse:
    """Analytic section ellipse of the ellipsoid and the plane at theta."""
    a_int, b_int = section_semi_axes(a, b, c, theta)
    return SectionEllipse(semi_axis_u=a_int, semi_axis_v=b_int, theta=float(theta))


def plane_normal(theta: float) -> np.ndarray:
    """Unit normal of the plane y sin θ − z cos θ = 0.

    Args:
        theta: Plane angle in radians

    Returns:
        3-element array (0, sin θ, −cos θ)
    """
    validate_angle(theta)
    return np.array([0.0, np.sin(theta), -np.cos(theta)])


def generate_curve(
    a: float,
    b: float,
    c: float,
    theta: float,
    segments: int = DEFAULT_SEGMENTS
) -> IntersectionCurve:
    """Sample the intersection ellipse as a closed 3D polyline.

    φ runs over [0, 2π] in ``segments`` equal steps, endpoints included, and
    each local point (a_int cos φ, b_int sin φ) is mapped back into the
    global frame.

    Args:
        a: Semi-axis along X
        b: Semi-axis along Y
        c: Semi-axis along Z
        theta: Plane angle in radians
        segments: Number of segments; the curve has segments + 1 points

    Returns:
        IntersectionCurve whose first and last points are identical

    Raises:
        InvalidParameterError: On non-positive semi-axes or too few segments
    """
    if isinstance(segments, bool) or not isinstance(segments, (int, np.integer)):
        raise InvalidParameterError("segments", segments, "must be an integer")
    if segments < MIN_SEGMENTS:
        raise InvalidParameterError(
            "segments", segments, f"must be at least {MIN_SEGMENTS}"
        )

    ellipse = section_ellipse(a, b, c, theta)

    phi = np.linspace(0.0, 2.0 * np.pi, int(segments) + 1)
    u = ellipse.semi_axis_u * np.cos(phi)
    v = ellipse.semi_axis_v * np.sin(phi)
    points = np.column_stack((u, v * np.cos(theta), v * np.sin(theta)))

    # cos(2π) and sin(2π) are not exact in floating point
    points[-1] = points[0]

    logger.debug(
        "Generated %d-point section curve at θ=%.6f (a_int=%g, b_int=%g)",
        len(points), theta, ellipse.semi_axis_u, ellipse.semi_axis_v,
    )
    return IntersectionCurve(points=points, ellipse=ellipse, segments=int(segments))


def is_circular(
    a: float,
    b: float,
    c: float,
    theta: float,
    epsilon: float = DEFAULT_EPSILON
) -> bool:
    """Classify the section at theta as circular within a tolerance.

    Used for live feedback while theta changes in small steps, where exact
    equality of the semi-axes would practically never hold.

    Args:
        a: Semi-axis along X
        b: Semi-axis along Y
        c: Semi-axis along Z
        theta: Plane angle in radians
        epsilon: Largest |a − b_int| still treated as a circle

    Returns:
        True if |a − b_int| < epsilon
    """
    validate_tolerance(epsilon)
    return section_ellipse(a, b, c, theta).is_circle(epsilon)


def analyze(
    params: EllipsoidParams,
    segments: int = DEFAULT_SEGMENTS,
    epsilon: float = DEFAULT_EPSILON
) -> SectionAnalysis:
    """Recompute every derived quantity for one parameter snapshot.

    Args:
        params: Ellipsoid semi-axes and plane angle
        segments: Curve resolution
        epsilon: Circularity tolerance

    Returns:
        SectionAnalysis bundling feasibility, target angle, curve and
        circularity at ``params.theta``
    """
    a, b, c = params.semi_axes
    curve = generate_curve(a, b, c, params.theta, segments)
    return SectionAnalysis(
        params=params,
        feasible=feasible(a, b, c),
        target=solve_target_angle(a, b, c),
        curve=curve,
        circular=is_circular(a, b, c, params.theta, epsilon),
    )


def snap_to_circular(params: EllipsoidParams) -> EllipsoidParams:
    """Move the plane to the principal circular-section angle, if one exists.

    Returns:
        Parameters with theta replaced by the target angle, or ``params``
        itself when the solver finds no single angle
    """
    target = solve_target_angle(*params.semi_axes)
    if not target:
        return params
    return params.with_theta(target.angle)
