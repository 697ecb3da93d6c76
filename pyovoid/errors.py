# pyovoid/errors.py
from __future__ import annotations


class OvoidError(ValueError):
    """Base class for every error raised while building an ovoid mesh."""


class InvalidSampleCount(OvoidError):
    def __init__(self, value: object) -> None:
        super().__init__(
            f"nb_samples must be a positive integer greater than 2 (got {value!r})"
        )
        self.value = value


class InvalidOptionType(OvoidError):
    def __init__(self, name: str, value: object) -> None:
        super().__init__(
            f"{name} must be either a bool or numeric 0/1 (got {value!r})"
        )
        self.name = name
        self.value = value


class TooManyArguments(OvoidError):
    def __init__(self, given: int, allowed: int) -> None:
        super().__init__(f"Too many input arguments: expected at most {allowed}, got {given}")
        self.given = given
        self.allowed = allowed


class DegenerateGrid(OvoidError):
    def __init__(self, profile_count: int, ring_count: int) -> None:
        super().__init__(
            "Vertex grid too small to form a triangle strip "
            f"(profile samples={profile_count}, rings={ring_count}; both must be >= 2)"
        )
        self.profile_count = profile_count
        self.ring_count = ring_count


class InvalidCurveParameter(OvoidError):
    """A curve family was configured with values that do not describe a closed profile."""


class InvalidTolerance(OvoidError):
    def __init__(self, tolerance: float, minimum: float) -> None:
        super().__init__(
            f"weld tolerance {tolerance:g} is below the rounding noise of the sweep "
            f"(must be >= {minimum:g})"
        )
        self.tolerance = tolerance
        self.minimum = minimum


class MeshNotClosed(OvoidError):
    """Welding did not produce a closed manifold, e.g. the tolerance merged distinct rings."""
