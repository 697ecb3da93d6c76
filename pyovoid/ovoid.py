"""
Ovoid mesh generation.

    >>> from pyovoid import generate_ovoid_mesh
    >>> vertices, triangles = generate_ovoid_mesh(16, "arcs")

``generate_ovoid_mesh`` runs the whole pipeline: sample the profile curve,
revolve it into a ring grid, triangulate the grid, weld the seam and pole
duplicates and drop the triangles that collapsed at the poles.

``mesh_ovoid`` is the positional front-end: ``mesh_ovoid()``,
``mesh_ovoid(nb_samples)`` or ``mesh_ovoid(nb_samples, option_display)``,
with the mesh displayed in a wireframe window unless the option is false.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

import numpy as np

from . import profile as _profile
from .analysis import is_closed_manifold
from .errors import InvalidOptionType, InvalidSampleCount, InvalidTolerance, MeshNotClosed, TooManyArguments
from .profile import CurveFamily, get_family, require_sample_count
from .revolve import sweep
from .triangulate import build
from .weld import DEFAULT_TOLERANCE, discard_collapsed, weld

logger = logging.getLogger(__name__)

DEFAULT_NB_SAMPLES = 16
DEFAULT_FAMILY = "arcs"
DEFAULT_DISPLAY = True
MAX_POSITIONAL = 2

# Smallest weld tolerance, relative to the largest coordinate; seam rings differ
# from ring 0 by a few ulps.
SEAM_NOISE = 1e-12


@dataclass(frozen=True, eq=False)
class OvoidMesh:
    """Welded ovoid mesh. Unpacks as ``vertices, triangles``."""

    vertices: np.ndarray   # (N, 3) float64
    triangles: np.ndarray  # (M, 3) int64, 0-based
    family: str
    axis: str
    nb_samples: int
    profile_count: int
    ring_count: int

    @property
    def raw_vertex_count(self) -> int:
        return self.profile_count * self.ring_count

    @property
    def raw_triangle_count(self) -> int:
        return 2 * (self.profile_count - 1) * (self.ring_count - 1)

    def __iter__(self) -> Iterator[np.ndarray]:
        yield self.vertices
        yield self.triangles

    def __repr__(self) -> str:
        return (f"OvoidMesh(family={self.family!r}, nb_samples={self.nb_samples}, "
                f"vertices={len(self.vertices)}, triangles={len(self.triangles)})")


def generate_ovoid_mesh(nb_samples: int, curve_family: Union[str, CurveFamily] = DEFAULT_FAMILY,
                        *, tolerance: float = DEFAULT_TOLERANCE) -> OvoidMesh:
    n = require_sample_count(nb_samples)
    family = get_family(curve_family)

    profile = _profile.generate(n, family)
    grid = sweep(profile, family.axis, n)
    minimum = SEAM_NOISE * float(np.abs(grid.points).max())
    if 0 < tolerance < minimum:
        raise InvalidTolerance(tolerance, minimum)
    raw = build(grid.profile_count, grid.ring_count)
    vertices, triangles = weld(grid.points, raw, tolerance)
    triangles = discard_collapsed(triangles)
    if not is_closed_manifold(triangles):
        raise MeshNotClosed(
            f"{family.name}: welding at tolerance {tolerance:g} left {len(vertices)} vertices "
            f"and {len(triangles)} triangles that do not form a closed surface"
        )

    vertices.flags.writeable = False
    triangles.flags.writeable = False
    logger.debug("%s ovoid: %d vertices, %d triangles (raw %d / %d)",
                 family.name, len(vertices), len(triangles), len(grid), len(raw))
    return OvoidMesh(
        vertices=vertices,
        triangles=triangles,
        family=family.name,
        axis=family.axis,
        nb_samples=n,
        profile_count=grid.profile_count,
        ring_count=grid.ring_count,
    )


# -----------------
# Argument parsing
# -----------------

def _as_sample_count(value: object) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidSampleCount(value)
    if isinstance(value, numbers.Integral):
        n = int(value)
    elif math.isfinite(value) and float(value).is_integer():
        n = int(value)
    else:
        raise InvalidSampleCount(value)
    if n <= 2:
        raise InvalidSampleCount(value)
    return n


def _as_flag(name: str, value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, numbers.Real) and value in (0, 1):
        return bool(value)
    raise InvalidOptionType(name, value)


def parse_arguments(*args: object) -> Tuple[int, bool]:
    """Validate ``(nb_samples, option_display)`` and fill in the defaults."""
    if len(args) > MAX_POSITIONAL:
        raise TooManyArguments(len(args), MAX_POSITIONAL)
    nb_samples = _as_sample_count(args[0]) if len(args) > 0 else DEFAULT_NB_SAMPLES
    display = _as_flag("option_display", args[1]) if len(args) > 1 else DEFAULT_DISPLAY
    return nb_samples, display


def mesh_ovoid(*args: object, family: Union[str, CurveFamily] = DEFAULT_FAMILY,
               tolerance: float = DEFAULT_TOLERANCE) -> OvoidMesh:
    nb_samples, display = parse_arguments(*args)
    mesh = generate_ovoid_mesh(nb_samples, family, tolerance=tolerance)
    if display:
        from .display import display_mesh
        display_mesh(mesh.vertices, mesh.triangles)
    return mesh
