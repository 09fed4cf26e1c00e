"""
Exceptions raised by the ellipsoid section kernel.

Only malformed input is an error. "No real angle" and the degenerate
``b == c`` case are ordinary outcomes carried by
:class:`~ellipsoid_sections.models.TargetAngle`.
"""

import math


class InvalidParameterError(ValueError):
    """A parameter is outside its valid domain.

    Attributes:
        name: Name of the offending parameter (e.g. ``"a"``, ``"segments"``)
        value: The rejected value
    """

    def __init__(self, name: str, value: object, reason: str = "must be positive"):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}={value!r}: {reason}")


def validate_semi_axes(a: float, b: float, c: float) -> None:
    """Fail fast unless every semi-axis is a finite number greater than zero.

    Raises:
        InvalidParameterError: On the first offending semi-axis
    """
    for name, value in (("a", a), ("b", b), ("c", c)):
        if not _is_finite_number(value):
            raise InvalidParameterError(name, value, "must be a finite number")
        if value <= 0:
            raise InvalidParameterError(name, value)


def validate_angle(theta: float, name: str = "theta") -> None:
    if not _is_finite_number(theta):
        raise InvalidParameterError(name, theta, "must be a finite angle in radians")


def validate_tolerance(epsilon: float, name: str = "epsilon") -> None:
    if not _is_finite_number(epsilon):
        raise InvalidParameterError(name, epsilon, "must be a finite number")
    if epsilon <= 0:
        raise InvalidParameterError(name, epsilon)


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except TypeError:
        return False
