# pyovoid/revolve.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .errors import InvalidCurveParameter
from .profile import AXES, ProfilePoint, require_sample_count

logger = logging.getLogger(__name__)


# -------------------
# Rotation matrices
# -------------------

def rotate_x(a: float) -> np.ndarray:
    c, s = math.cos(a), math.sin(a)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0, c, -s],
        [0.0, s, c],
    ])


def rotate_y(a: float) -> np.ndarray:
    c, s = math.cos(a), math.sin(a)
    return np.array([
        [c, 0.0, s],
        [0.0, 1.0, 0.0],
        [-s, 0.0, c],
    ])


def rotate_z(a: float) -> np.ndarray:
    c, s = math.cos(a), math.sin(a)
    return np.array([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0],
    ])


_ROTATIONS = {"x": rotate_x, "y": rotate_y, "z": rotate_z}


def rotation_matrix(axis: str, angle: float) -> np.ndarray:
    """Right-handed rotation by ``angle`` radians about the named coordinate axis."""
    try:
        return _ROTATIONS[axis](angle)
    except KeyError:
        raise InvalidCurveParameter(f"axis must be one of {AXES} (got {axis!r})") from None


def embed_profile(profile: Sequence[ProfilePoint], axis: str) -> np.ndarray:
    """Place the 2-D profile in 3-D as ring 0.

    The height goes on ``axis`` and the radius on the next axis in cyclic order
    (z -> x, x -> y, y -> z), so a positive rotation about ``axis`` moves the
    radial direction towards the remaining axis.
    """
    if axis not in AXES:
        raise InvalidCurveParameter(f"axis must be one of {AXES} (got {axis!r})")
    k = AXES.index(axis)
    pts = np.zeros((len(profile), 3))
    pts[:, (k + 1) % 3] = [p.radius for p in profile]
    pts[:, k] = [p.height for p in profile]
    return pts


# ------------
# Vertex grid
# ------------

@dataclass(frozen=True)
class VertexGrid:
    """Swept profile, rings stored one after another (row-major by ring).

    ``points[ring * profile_count + sample]`` is the profile sample ``sample``
    rotated to ring ``ring``. The array is read-only.
    """

    points: np.ndarray
    profile_count: int
    ring_count: int

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.ring_count, self.profile_count)

    def index(self, ring: int, sample: int) -> int:
        return ring * self.profile_count + sample

    def ring(self, ring: int) -> np.ndarray:
        start = ring * self.profile_count
        return self.points[start:start + self.profile_count]

    def __len__(self) -> int:
        return self.points.shape[0]


def sweep(profile: Sequence[ProfilePoint], axis: str, nb_samples: int) -> VertexGrid:
    """Revolve ``profile`` about ``axis`` in steps of ``pi / nb_samples``.

    Ring 0 is the unrotated profile and ring ``2 * nb_samples`` lands back on
    it at a full turn, so there are ``2 * nb_samples + 1`` rings.
    """
    n = require_sample_count(nb_samples)
    base = embed_profile(profile, axis)
    s1 = base.shape[0]
    s2 = 2 * n + 1
    angle_step = math.pi / n

    points = np.empty((s1 * s2, 3))
    points[:s1] = base
    for k in range(1, s2):
        r = rotation_matrix(axis, k * angle_step)
        points[k * s1:(k + 1) * s1] = base @ r.T
    points.flags.writeable = False

    logger.debug("swept %d profile samples about %s into %d rings", s1, axis, s2)
    return VertexGrid(points=points, profile_count=s1, ring_count=s2)
