# pyovoid/analysis.py
from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

Edge = Tuple[int, int]


# ----------------------------
# Mesh measures: area & volume
# ----------------------------

def _corners(vertices: np.ndarray, triangles: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    v = np.asarray(vertices, dtype=np.float64)
    t = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    return v[t[:, 0]], v[t[:, 1]], v[t[:, 2]]


def surface_area(vertices: np.ndarray, triangles: np.ndarray) -> float:
    a, b, c = _corners(vertices, triangles)
    return float(0.5 * np.linalg.norm(np.cross(b - a, c - a), axis=1).sum())


def signed_volume(vertices: np.ndarray, triangles: np.ndarray,
                  reference: Optional[Sequence[float]] = None) -> float:
    """
    Signed volume of a closed triangle mesh, positive when faces wind outward.
    Sums tetrahedra (reference, a, b, c); the reference defaults to the vertex centroid.
    """
    v = np.asarray(vertices, dtype=np.float64)
    ref = v.mean(axis=0) if reference is None else np.asarray(reference, dtype=np.float64)
    a, b, c = _corners(v - ref, triangles)
    return float(np.einsum("ij,ij->i", a, np.cross(b, c)).sum() / 6.0)


def bounds(vertices: np.ndarray) -> Tuple[Tuple[float, ...], Tuple[float, ...]]:
    v = np.asarray(vertices, dtype=np.float64)
    return tuple(v.min(axis=0).tolist()), tuple(v.max(axis=0).tolist())


# --------------------
# Connectivity checks
# --------------------

def edge_use_counts(triangles: np.ndarray) -> Dict[Edge, int]:
    """How many triangles use each undirected edge."""
    counts: Counter = Counter()
    for a, b, c in np.asarray(triangles, dtype=np.int64).reshape(-1, 3).tolist():
        for u, w in ((a, b), (b, c), (c, a)):
            counts[(u, w) if u < w else (w, u)] += 1
    return dict(counts)


def boundary_edges(triangles: np.ndarray) -> List[Edge]:
    return sorted(e for e, n in edge_use_counts(triangles).items() if n != 2)


def is_closed_manifold(triangles: np.ndarray) -> bool:
    """Every edge shared by exactly two triangles, traversed once in each direction.

    An empty triangle list is not a closed surface.
    """
    t = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    if t.shape[0] == 0:
        return False
    src = t.ravel()
    dst = t[:, [1, 2, 0]].ravel()
    n = int(t.max()) + 1
    forward = np.sort(src * n + dst)
    if (np.diff(forward) == 0).any():
        return False
    return bool(np.array_equal(forward, np.sort(dst * n + src)))


def vertex_valence(triangles: np.ndarray, vertex_count: int) -> np.ndarray:
    """Number of triangles incident to each vertex."""
    t = np.asarray(triangles, dtype=np.int64).reshape(-1)
    return np.bincount(t, minlength=vertex_count)


def pole_vertices(vertices: np.ndarray, axis: str) -> Tuple[int, int]:
    """Indices of the vertices with the largest and smallest coordinate along ``axis``."""
    k = "xyz".index(axis)
    coords = np.asarray(vertices)[:, k]
    return int(np.argmax(coords)), int(np.argmin(coords))
