"""
Data models for ellipsoid plane sections.

All models are immutable snapshots. Angles are stored in radians; degree
values are produced only by the explicit ``*_degrees`` accessors.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterator

import numpy as np

from .errors import validate_angle, validate_semi_axes


@dataclass(frozen=True)
class EllipsoidParams:
    """Semi-axes of the ellipsoid x²/a² + y²/b² + z²/c² = 1 plus a plane angle.

    The plane contains the X-axis and is rotated about it by ``theta``.

    Attributes:
        a: Semi-axis along X (the fixed axis of the rotating plane)
        b: Semi-axis along Y
        c: Semi-axis along Z
        theta: Plane angle in radians, measured from the XY plane toward Z
    """
    a: float
    b: float
    c: float
    theta: float = 0.0

    def __post_init__(self):
        validate_semi_axes(self.a, self.b, self.c)
        validate_angle(self.theta)

    @classmethod
    def from_degrees(
        cls,
        a: float,
        b: float,
        c: float,
        theta_deg: float = 0.0
    ) -> EllipsoidParams:
        """Build parameters from a plane angle given in degrees."""
        validate_angle(theta_deg, "theta_deg")
        return cls(a=a, b=b, c=c, theta=float(np.radians(theta_deg)))

    @property
    def theta_degrees(self) -> float:
        return float(np.degrees(self.theta))

    @property
    def semi_axes(self) -> tuple[float, float, float]:
        return (self.a, self.b, self.c)

    @property
    def is_surface_of_revolution(self) -> bool:
        """True when b == c, i.e. the ellipsoid is rotationally symmetric about X."""
        return self.b == self.c

    def with_theta(self, theta: float) -> EllipsoidParams:
        """Return a copy with a different plane angle (radians)."""
        return replace(self, theta=theta)

    def to_dict(self) -> dict[str, float]:
        return {
            'a': float(self.a),
            'b': float(self.b),
            'c': float(self.c),
            'theta': float(self.theta),
        }


class SectionStatus(Enum):
    """Outcome of solving for the circular-section angle."""
    FOUND = "found"
    NO_SOLUTION = "no_solution"
    DEGENERATE = "degenerate"


@dataclass(frozen=True)
class TargetAngle:
    """Result of the target angle solver.

    ``angle`` is set exactly when ``status`` is FOUND. The solver reports the
    principal value in [0, π/2]; the full solution set is ±θ and π ± θ,
    available from :meth:`solution_set`.

    Attributes:
        status: Which branch the solver took
        angle: Principal angle in radians, or None
    """
    status: SectionStatus
    angle: float | None = None

    def __post_init__(self):
        if self.status is SectionStatus.FOUND and self.angle is None:
            raise ValueError("FOUND result requires an angle")
        if self.status is not SectionStatus.FOUND and self.angle is not None:
            raise ValueError(f"{self.status.name} result cannot carry an angle")

    @classmethod
    def found(cls, angle: float) -> TargetAngle:
        return cls(SectionStatus.FOUND, float(angle))

    @classmethod
    def no_solution(cls) -> TargetAngle:
        return cls(SectionStatus.NO_SOLUTION)

    @classmethod
    def degenerate(cls) -> TargetAngle:
        return cls(SectionStatus.DEGENERATE)

    @property
    def is_found(self) -> bool:
        return self.status is SectionStatus.FOUND

    @property
    def degrees(self) -> float | None:
        if self.angle is None:
            return None
        return float(np.degrees(self.angle))

    def solution_set(self) -> tuple[float, ...]:
        """All angles in (-π, π] that give the same circular section family.

        Returns:
            Sorted, de-duplicated angles in radians; empty unless FOUND
        """
        if self.angle is None:
            return ()
        t = self.angle
        candidates = [t, -t, math.pi - t, t - math.pi]
        solutions: list[float] = []
        for angle in candidates:
            # Map into (-π, π]
            wrapped = math.pi - math.fmod(math.pi - angle, 2 * math.pi)
            if not any(math.isclose(wrapped, s, abs_tol=1e-12) for s in solutions):
                solutions.append(wrapped)
        return tuple(sorted(solutions))

    def __bool__(self) -> bool:
        return self.is_found

    def to_dict(self) -> dict[str, Any]:
        return {
            'status': self.status.value,
            'angle': self.angle,
            'degrees': self.degrees,
        }


@dataclass(frozen=True)
class SectionEllipse:
    """The ellipse cut from the ellipsoid, in plane-local (u, v) coordinates.

    u runs along the X-axis and v along the in-plane direction
    (0, cos θ, sin θ), so the section is u²/semi_axis_u² + v²/semi_axis_v² = 1.

    Attributes:
        semi_axis_u: Semi-axis along X (always equal to the ellipsoid's a)
        semi_axis_v: Semi-axis perpendicular to X within the plane
        theta: Plane angle in radians
    """
    semi_axis_u: float
    semi_axis_v: float
    theta: float

    def is_circle(self, epsilon: float) -> bool:
        return bool(abs(self.semi_axis_u - self.semi_axis_v) < epsilon)

    @property
    def major(self) -> float:
        return max(self.semi_axis_u, self.semi_axis_v)

    @property
    def minor(self) -> float:
        return min(self.semi_axis_u, self.semi_axis_v)

    @property
    def eccentricity(self) -> float:
        ratio = self.minor / self.major
        return float(np.sqrt(max(0.0, 1.0 - ratio * ratio)))

    @property
    def area(self) -> float:
        return float(np.pi * self.semi_axis_u * self.semi_axis_v)

    def to_dict(self) -> dict[str, float]:
        return {
            'semi_axis_u': float(self.semi_axis_u),
            'semi_axis_v': float(self.semi_axis_v),
            'theta': float(self.theta),
            'eccentricity': self.eccentricity,
            'area': self.area,
        }


@dataclass(frozen=True, eq=False)
class IntersectionCurve:
    """Closed polyline sampled along the ellipsoid-plane intersection.

    Point i and point i + 1 are neighbours on the curve; point 0 and point
    ``segments`` are the same point.

    Attributes:
        points: (segments + 1) x 3 array of (x, y, z) coordinates
        ellipse: The analytic section this curve samples
        segments: Number of segments between consecutive samples
    """
    points: np.ndarray = field(repr=False)
    ellipse: SectionEllipse
    segments: int

    def __post_init__(self):
        # Own a read-only copy; the caller's array stays untouched
        points = np.array(self.points, dtype=float)
        points.setflags(write=False)
        object.__setattr__(self, 'points', points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[tuple[float, float, float]]:
        for x, y, z in self.points:
            yield (float(x), float(y), float(z))

    @property
    def theta(self) -> float:
        return self.ellipse.theta

    def is_closed(self, tol: float = 1e-12) -> bool:
        return bool(np.allclose(self.points[0], self.points[-1], atol=tol, rtol=0.0))

    def distances_from_axis(self) -> np.ndarray:
        """Distance of each point from the X-axis."""
        return np.hypot(self.points[:, 1], self.points[:, 2])

    def radii(self) -> np.ndarray:
        """Distance of each point from the origin."""
        return np.linalg.norm(self.points, axis=1)

    def plane_residuals(self) -> np.ndarray:
        """Evaluate y·sin θ − z·cos θ per point; zero for points on the plane."""
        return (self.points[:, 1] * np.sin(self.theta)
                - self.points[:, 2] * np.cos(self.theta))

    def ellipsoid_residuals(self, params: EllipsoidParams) -> np.ndarray:
        """Evaluate x²/a² + y²/b² + z²/c² − 1 per point."""
        scaled = self.points / np.array(params.semi_axes)
        return np.sum(scaled * scaled, axis=1) - 1.0

    def to_dict(self) -> dict[str, Any]:
        return {
            'points': self.points.tolist(),
            'segments': self.segments,
            'ellipse': self.ellipse.to_dict(),
        }


@dataclass(frozen=True)
class SectionAnalysis:
    """Every derived quantity for one parameter snapshot.

    Attributes:
        params: The snapshot everything below was computed from
        feasible: Whether any plane through X gives a circle
        target: Solver result for the circular-section angle
        curve: Sampled intersection at ``params.theta``
        circular: Whether the section at ``params.theta`` is (nearly) a circle
    """
    params: EllipsoidParams
    feasible: bool
    target: TargetAngle
    curve: IntersectionCurve
    circular: bool

    @property
    def ellipse(self) -> SectionEllipse:
        return self.curve.ellipse

    def to_dict(self, include_points: bool = False) -> dict[str, Any]:
        result = {
            'params': self.params.to_dict(),
            'feasible': self.feasible,
            'target': self.target.to_dict(),
            'ellipse': self.ellipse.to_dict(),
            'circular': self.circular,
        }
        if include_points:
            result['points'] = self.curve.points.tolist()
        return result

