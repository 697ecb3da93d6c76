# pyovoid/weld.py
from __future__ import annotations

import logging
from typing import Dict, Tuple

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-9


def weld(points: np.ndarray, triangles: np.ndarray,
         tolerance: float = DEFAULT_TOLERANCE) -> Tuple[np.ndarray, np.ndarray]:
    """Merge coincident vertices and remap the triangles onto the survivors.

    Coordinates are quantized to multiples of ``tolerance``; the first vertex
    seen with a given key is kept and later ones map onto it. Output vertices
    keep their first-occurrence order. The triangle count does not change.
    """
    if not tolerance > 0:
        raise ValueError(f"tolerance must be > 0 (got {tolerance})")
    points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    triangles = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)

    with np.errstate(over="ignore", invalid="ignore"):
        scaled = points / tolerance
    if not np.isfinite(scaled).all():
        raise ValueError(f"cannot quantize coordinates at tolerance {tolerance:g}")

    # python ints, so large coordinates never wrap
    quantize = lambda v: (round(v[0]), round(v[1]), round(v[2]))
    first_seen: Dict[Tuple[int, int, int], int] = {}
    remap = np.empty(points.shape[0], dtype=np.int64)
    keep = []
    for i, key in enumerate(map(quantize, scaled.tolist())):
        j = first_seen.get(key)
        if j is None:
            j = first_seen[key] = len(keep)
            keep.append(i)
        remap[i] = j

    vertices = points[keep]
    welded = remap[triangles]
    logger.debug("welded %d vertices down to %d", points.shape[0], vertices.shape[0])
    return vertices, welded


def discard_collapsed(triangles: np.ndarray) -> np.ndarray:
    """Drop triangles that use the same vertex more than once."""
    t = np.asarray(triangles).reshape(-1, 3)
    ok = (t[:, 0] != t[:, 1]) & (t[:, 1] != t[:, 2]) & (t[:, 2] != t[:, 0])
    if not ok.all():
        logger.debug("discarded %d collapsed triangles", int((~ok).sum()))
    return t[ok]
