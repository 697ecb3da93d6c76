import numpy as np
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from mpl_toolkits.mplot3d.art3d import Poly3DCollection  # noqa: E402

from pyovoid import generate_ovoid_mesh  # noqa: E402
from pyovoid.display import display_mesh  # noqa: E402


@pytest.fixture
def mesh():
    return generate_ovoid_mesh(5, "egg")


def test_wireframe_figure(mesh):
    fig = display_mesh(mesh.vertices, mesh.triangles, show=False, title="egg")
    try:
        fig.canvas.draw()
        ax = fig.axes[0]
        assert ax.name == "3d"
        assert len(ax.collections) == 1
        wire = ax.collections[0]
        assert isinstance(wire, Poly3DCollection)
        assert len(wire.get_paths()) == len(mesh.triangles)
        # edges only
        assert wire.get_facecolor().shape[0] == 0 or np.allclose(wire.get_facecolor()[:, 3], 0.0)
        assert np.allclose(wire.get_edgecolor()[0][:3], (0.0, 1.0, 0.0))
        assert ax.get_title() == "egg"
    finally:
        plt.close(fig)


def test_draws_into_given_axes(mesh):
    fig = plt.figure()
    ax = fig.add_subplot(projection="3d")
    try:
        assert display_mesh(mesh.vertices, mesh.triangles, ax=ax, show=False) is fig
        lo, hi = ax.get_zlim()
        assert lo <= -5.0 + 1e-9 and hi >= 7.0 - 1e-9
    finally:
        plt.close(fig)


def test_rejects_bad_vertices():
    with pytest.raises(ValueError):
        display_mesh(np.zeros((0, 3)), np.zeros((0, 3), dtype=int), show=False)
    with pytest.raises(ValueError):
        display_mesh(np.zeros((4, 2)), np.array([[0, 1, 2]]), show=False)
