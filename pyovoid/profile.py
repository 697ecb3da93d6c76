"""
Profile curves: the half-section of the ovoid in its meridian plane.

A profile is an ordered tuple of ``ProfilePoint(radius, height)`` samples,
traced from the upper pole (largest height) down to the lower pole. Both end
points lie on the rotation axis and carry a radius of exactly 0.0, which is
what lets the revolved rings collapse into a single pole vertex when welded.

Three families are available:

* ``CompositeArcFamily`` ("arcs"): a unit half-sphere base, a radius 2 side
  arc and a small top cap, joined tangentially. Revolved about the y axis.
* ``EggCurveFamily`` ("egg"): the Hugelschaffer egg curve with axis lengths
  ``a``, ``b`` and offset ``d``. Revolved about the z axis.
* ``ExpressionFamily``: radius(t) / height(t) given as restricted math
  expressions (see ``pyovoid.expression``).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Sequence, Tuple

import numpy as np

from .errors import InvalidCurveParameter, InvalidSampleCount
from .expression import Expression, compile_expression

logger = logging.getLogger(__name__)

Vec2 = Tuple[float, float]

AXES = ("x", "y", "z")

# Radius below which an expression profile end is considered on the axis,
# relative to the profile extent when that exceeds 1.
POLE_TOLERANCE = 1e-9


class ProfilePoint(NamedTuple):
    radius: float
    height: float


def require_sample_count(nb_samples: object) -> int:
    """Return ``nb_samples`` as int, or raise InvalidSampleCount."""
    if isinstance(nb_samples, (bool, np.bool_)):
        raise InvalidSampleCount(nb_samples)
    if not isinstance(nb_samples, (int, np.integer)) or nb_samples <= 2:
        raise InvalidSampleCount(nb_samples)
    return int(nb_samples)


def _linspace(start: float, stop: float, count: int) -> List[float]:
    # count points, both ends included
    if count == 1:
        return [stop]
    step = (stop - start) / (count - 1)
    return [start + i * step for i in range(count - 1)] + [stop]


def _close_at_poles(points: Sequence[ProfilePoint]) -> Tuple[ProfilePoint, ...]:
    first, last = points[0], points[-1]
    middle = tuple(points[1:-1])
    return (ProfilePoint(0.0, first.height),) + middle + (ProfilePoint(0.0, last.height),)


# ---------------
# Curve families
# ---------------

class CurveFamily:
    """A closed-form profile curve that can be sampled at a given density.

    Subclasses set ``name`` and ``axis`` and implement ``_sample``; the base
    class validates the sample count and pins both ends onto the axis.
    """

    name: str = "curve"
    axis: str = "z"

    def sample(self, nb_samples: int) -> Tuple[ProfilePoint, ...]:
        n = require_sample_count(nb_samples)
        points = self._sample(n)
        profile = _close_at_poles(points)
        logger.debug("%s profile: %d samples for nb_samples=%d", self.name, len(profile), n)
        return profile

    def _sample(self, nb_samples: int) -> List[ProfilePoint]:
        raise NotImplementedError


@dataclass(frozen=True)
class ArcSegment:
    """Circular arc in the meridian plane, sampled from ``start`` to ``stop`` (radians)."""

    center: Vec2
    radius: float
    start: float
    stop: float
    count: int

    def points(self) -> List[ProfilePoint]:
        cr, ch = self.center
        return [
            ProfilePoint(cr + self.radius * math.cos(t), ch + self.radius * math.sin(t))
            for t in _linspace(self.start, self.stop, self.count)
        ]


class CompositeArcFamily(CurveFamily):
    name = "arcs"
    axis = "y"

    def segments(self, nb_samples: int) -> Tuple[ArcSegment, ...]:
        cap = 2.0 - math.sqrt(2.0)
        return (
            ArcSegment((0.0, 1.0), cap, 0.5 * math.pi, 0.25 * math.pi, max(2, nb_samples // 2)),
            ArcSegment((-1.0, 0.0), 2.0, 0.25 * math.pi, 0.0, nb_samples),
            ArcSegment((0.0, 0.0), 1.0, 0.0, -0.5 * math.pi, nb_samples),
        )

    def _sample(self, nb_samples: int) -> List[ProfilePoint]:
        points: List[ProfilePoint] = []
        for seg in self.segments(nb_samples):
            pts = seg.points()
            # segments are joined end to start; keep one copy of each joint
            points.extend(pts if not points else pts[1:])
        return points


@dataclass(frozen=True)
class EggCurveFamily(CurveFamily):
    """Hugelschaffer egg: radius = b sin t, height = (sqrt(a^2 - d^2 sin^2 t) + d cos t) cos t."""

    a: float = 6.0
    b: float = 4.0
    d: float = 1.0

    name = "egg"
    axis = "z"

    def __post_init__(self) -> None:
        if not (self.a > 0 and self.b > 0):
            raise InvalidCurveParameter(f"egg axis lengths must be > 0 (got a={self.a}, b={self.b})")
        if not 0 <= self.d < self.a:
            raise InvalidCurveParameter(f"egg offset must satisfy 0 <= d < a (got d={self.d}, a={self.a})")

    def _sample(self, nb_samples: int) -> List[ProfilePoint]:
        a2, d = self.a * self.a, self.d
        points: List[ProfilePoint] = []
        for t in _linspace(0.0, math.pi, nb_samples + 1):
            s, c = math.sin(t), math.cos(t)
            points.append(ProfilePoint(self.b * s, (math.sqrt(a2 - d * d * s * s) + d * c) * c))
        return points


class ExpressionFamily(CurveFamily):
    """Profile given by ``radius(t)`` and ``height(t)`` over ``t_range``.

    ``nb_samples`` intervals are sampled over the range. The curve must start
    and end on the axis and never cross it.
    """

    def __init__(self, radius: str, height: str, t_range: Tuple[float, float] = (0.0, math.pi),
                 axis: str = "z", name: str = "expression") -> None:
        if axis not in AXES:
            raise InvalidCurveParameter(f"axis must be one of {AXES} (got {axis!r})")
        t0, t1 = t_range
        if not (math.isfinite(t0) and math.isfinite(t1)) or t0 == t1:
            raise InvalidCurveParameter(f"t_range must be a finite, non-empty interval (got {t_range})")
        self.radius: Expression = compile_expression(radius)
        self.height: Expression = compile_expression(height)
        self.t_range = (float(t0), float(t1))
        self.axis = axis
        self.name = name

    def _sample(self, nb_samples: int) -> List[ProfilePoint]:
        ts = _linspace(self.t_range[0], self.t_range[1], nb_samples + 1)
        try:
            points = [ProfilePoint(self.radius(t), self.height(t)) for t in ts]
        except (ValueError, TypeError, ZeroDivisionError, OverflowError) as exc:
            raise InvalidCurveParameter(f"{self.name}: evaluation failed: {exc}") from exc
        for p in points:
            if not (math.isfinite(p.radius) and math.isfinite(p.height)):
                raise InvalidCurveParameter(f"{self.name}: non-finite sample {tuple(p)}")
        extent = max(max(abs(p.radius), abs(p.height)) for p in points)
        on_axis = POLE_TOLERANCE * max(1.0, extent)
        for p in points:
            if p.radius < -on_axis:
                raise InvalidCurveParameter(f"{self.name}: profile crosses the axis at {tuple(p)}")
        if abs(points[0].radius) > on_axis or abs(points[-1].radius) > on_axis:
            raise InvalidCurveParameter(
                f"{self.name}: profile must start and end on the axis "
                f"(radius {points[0].radius:g} .. {points[-1].radius:g})"
            )
        if points[0].height < points[-1].height:
            # trace upper pole first so the triangulation winds outward
            points.reverse()
        return points


FAMILIES: Dict[str, CurveFamily] = {
    CompositeArcFamily.name: CompositeArcFamily(),
    EggCurveFamily.name: EggCurveFamily(),
}


def get_family(family: object) -> CurveFamily:
    if isinstance(family, CurveFamily):
        return family
    try:
        return FAMILIES[str(family)]
    except KeyError:
        raise InvalidCurveParameter(
            f"Unknown curve family {family!r}; choose from {sorted(FAMILIES)}"
        ) from None


def generate(nb_samples: int, family: object = "arcs") -> Tuple[ProfilePoint, ...]:
    """Sample the profile curve of ``family`` at density ``nb_samples``."""
    return get_family(family).sample(nb_samples)
