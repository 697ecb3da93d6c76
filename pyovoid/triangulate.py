"""
Quad-strip triangulation of a swept vertex grid.

Grid positions are ``(ring, sample)`` pairs; the flat index of a position is
``ring * S1 + sample`` with ``S1`` profile samples per ring and ``S2`` rings.
Each cell between rings ``i, i+1`` and samples ``j, j+1`` is cut along the
``(i, j+1) - (i+1, j)`` diagonal into

    ((i, j),   (i, j+1),   (i+1, j))
    ((i, j+1), (i+1, j+1), (i+1, j))

which faces outward when the profile runs from the upper pole to the lower
one and the rings advance with a right-handed rotation about the axis.

The seam needs no extra triangles: the sweep repeats ring 0 as its last ring,
and welding glues the two together. Pole cells likewise need no special case;
after welding one triangle of each collapses and the other joins the fan.
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from .errors import DegenerateGrid

logger = logging.getLogger(__name__)


def quad_indices(s1: int, s2: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Flat indices of the four corners of every grid cell, ring-major.

    Returns (a, b, c, d) for corners (i, j), (i, j+1), (i+1, j), (i+1, j+1).
    """
    if s1 < 2 or s2 < 2:
        raise DegenerateGrid(s1, s2)
    ring, sample = np.meshgrid(np.arange(s2 - 1), np.arange(s1 - 1), indexing="ij")
    ring = ring.ravel()
    sample = sample.ravel()
    a = ring * s1 + sample
    c = (ring + 1) * s1 + sample
    return a, a + 1, c, c + 1


def build(s1: int, s2: int) -> np.ndarray:
    """Triangles over an ``s2`` x ``s1`` vertex grid, two per cell.

    Returns an int64 array of shape ``(2 * (s1 - 1) * (s2 - 1), 3)`` holding
    0-based indices into the raw (unwelded) grid.
    """
    a, b, c, d = quad_indices(s1, s2)
    first = np.stack([a, b, c], axis=1)
    second = np.stack([b, d, c], axis=1)
    tris = np.stack([first, second], axis=1).reshape(-1, 3).astype(np.int64)
    logger.debug("built %d triangles over %d x %d grid", tris.shape[0], s2, s1)
    return tris
