"""
Wireframe display of an ovoid mesh with matplotlib.

Edges only: triangle faces are drawn fully transparent with green edges on a
black background, axes in white, equal aspect ratio.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

logger = logging.getLogger(__name__)

BACKGROUND = "black"
FOREGROUND = "white"
EDGE_COLOR = (0.0, 1.0, 0.0)


def _style_axes(ax) -> None:
    ax.set_facecolor(BACKGROUND)
    for axis in (ax.xaxis, ax.yaxis, ax.zaxis):
        axis.set_pane_color((0.0, 0.0, 0.0, 1.0))
        axis.label.set_color(FOREGROUND)
        axis.line.set_color(FOREGROUND)
    ax.tick_params(colors=FOREGROUND)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")


def _fit_equal(ax, vertices: np.ndarray) -> None:
    lo, hi = vertices.min(axis=0), vertices.max(axis=0)
    center = 0.5 * (lo + hi)
    half = 0.5 * float((hi - lo).max()) or 1.0
    ax.set_xlim(center[0] - half, center[0] + half)
    ax.set_ylim(center[1] - half, center[1] + half)
    ax.set_zlim(center[2] - half, center[2] + half)
    ax.set_box_aspect((1, 1, 1))


def display_mesh(vertices: np.ndarray, triangles: np.ndarray, *, ax=None,
                 show: bool = True, line_width: float = 1.0, title: Optional[str] = None):
    """Draw the mesh edges and return the matplotlib figure."""
    v = np.asarray(vertices, dtype=np.float64)
    t = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    if v.ndim != 2 or v.shape[1] != 3 or len(v) == 0:
        raise ValueError(f"vertices must be a non-empty (N, 3) array (got shape {v.shape})")

    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(projection="3d")
    else:
        fig = ax.figure
    fig.patch.set_facecolor(BACKGROUND)

    wire = Poly3DCollection(v[t], facecolors="none", edgecolors=[EDGE_COLOR],
                            linewidths=line_width)
    ax.add_collection3d(wire)
    _style_axes(ax)
    _fit_equal(ax, v)
    ax.view_init(elev=30, azim=-37.5)
    if title:
        ax.set_title(title, color=FOREGROUND)

    logger.debug("displaying %d triangles", len(t))
    if show:
        plt.show()
    return fig
