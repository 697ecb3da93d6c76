# pyovoid/export.py
from __future__ import annotations

import logging
import os
import struct
from typing import Callable, Dict

import numpy as np

logger = logging.getLogger(__name__)

STL_HEADER = b"pyovoid STL export"


def _arrays(vertices, triangles):
    v = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
    t = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    if t.size and (t.min() < 0 or t.max() >= len(v)):
        raise ValueError("triangle index out of range for vertex array")
    return v, t


def save_obj(path: str, vertices, triangles, name: str = "ovoid") -> None:
    """Wavefront OBJ, vertices and faces only. Face indices are 1-based."""
    v, t = _arrays(vertices, triangles)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"o {name}\n")
        for x, y, z in v.tolist():
            f.write(f"v {x:.6f} {y:.6f} {z:.6f}\n")
        for a, b, c in (t + 1).tolist():
            f.write(f"f {a} {b} {c}\n")


def save_stl_binary(path: str, vertices, triangles) -> None:
    """Binary STL with one flat normal per face."""
    v, t = _arrays(vertices, triangles)
    a, b, c = v[t[:, 0]], v[t[:, 1]], v[t[:, 2]]
    n = np.cross(b - a, c - a)
    lengths = np.linalg.norm(n, axis=1, keepdims=True)
    n = np.divide(n, lengths, out=np.zeros_like(n), where=lengths > 0)
    with open(path, "wb") as f:
        f.write(STL_HEADER + bytes(80 - len(STL_HEADER)))
        f.write(struct.pack("<I", len(t)))
        for row in np.hstack([n, a, b, c]).tolist():
            f.write(struct.pack("<12f", *row))
            f.write(struct.pack("<H", 0))  # attribute byte count


def save_ply_ascii(path: str, vertices, triangles) -> None:
    v, t = _arrays(vertices, triangles)
    with open(path, "w", encoding="utf-8") as f:
        f.write("ply\nformat ascii 1.0\n")
        f.write(f"element vertex {len(v)}\n")
        f.write("property float x\nproperty float y\nproperty float z\n")
        f.write(f"element face {len(t)}\n")
        f.write("property list uchar int vertex_indices\nend_header\n")
        for x, y, z in v.tolist():
            f.write(f"{x:.6f} {y:.6f} {z:.6f}\n")
        for a, b, c in t.tolist():
            f.write(f"3 {a} {b} {c}\n")


_WRITERS: Dict[str, Callable[..., None]] = {
    ".obj": save_obj,
    ".stl": save_stl_binary,
    ".ply": save_ply_ascii,
}


def save_mesh(path: str, vertices, triangles, fmt: str = "") -> str:
    """Write the mesh in the format named by ``fmt`` or by the file suffix.

    Returns the format used (".obj", ".stl" or ".ply").
    """
    ext = ("." + fmt.lstrip(".")).lower() if fmt else os.path.splitext(path)[1].lower()
    if ext not in _WRITERS:
        raise ValueError(f"Unsupported mesh format {ext or path!r}; use one of {sorted(_WRITERS)}")
    _WRITERS[ext](path, vertices, triangles)
    logger.info("wrote %s (%d vertices, %d triangles)", path, len(vertices), len(triangles))
    return ext
