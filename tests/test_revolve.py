import math

import numpy as np
import pytest

from pyovoid.errors import InvalidCurveParameter, InvalidSampleCount
from pyovoid.profile import ProfilePoint, generate
from pyovoid.revolve import embed_profile, rotation_matrix, sweep

QUARTER = 0.5 * math.pi


@pytest.mark.parametrize("axis, src, dst", [
    ("x", (0, 1, 0), (0, 0, 1)),
    ("y", (0, 0, 1), (1, 0, 0)),
    ("z", (1, 0, 0), (0, 1, 0)),
])
def test_rotations_are_right_handed(axis, src, dst):
    r = rotation_matrix(axis, QUARTER)
    assert np.allclose(r @ np.array(src, dtype=float), dst)
    assert np.allclose(r @ r.T, np.eye(3))
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_unknown_axis():
    with pytest.raises(InvalidCurveParameter):
        rotation_matrix("w", 1.0)
    with pytest.raises(InvalidCurveParameter):
        embed_profile([ProfilePoint(0.0, 1.0)], "w")


@pytest.mark.parametrize("axis, expected", [
    ("x", (3.0, 2.0, 0.0)),
    ("y", (0.0, 3.0, 2.0)),
    ("z", (2.0, 0.0, 3.0)),
])
def test_embed_profile(axis, expected):
    pts = embed_profile([ProfilePoint(2.0, 3.0)], axis)
    assert pts.tolist() == [list(expected)]


@pytest.mark.parametrize("family, axis", [("arcs", "y"), ("egg", "z")])
@pytest.mark.parametrize("n", [3, 8])
def test_sweep_grid_layout(family, axis, n):
    profile = generate(n, family)
    grid = sweep(profile, axis, n)
    s1 = len(profile)
    assert grid.profile_count == s1
    assert grid.ring_count == 2 * n + 1
    assert len(grid) == s1 * (2 * n + 1)
    assert grid.shape == (2 * n + 1, s1)
    assert grid.points.shape == (s1 * (2 * n + 1), 3)
    # ring 0 is the profile itself
    assert np.array_equal(grid.ring(0), embed_profile(profile, axis))
    # a full turn lands back on ring 0
    assert np.allclose(grid.ring(2 * n), grid.ring(0), rtol=0, atol=1e-12)


def test_sweep_keeps_distance_to_axis():
    n = 6
    profile = generate(n, "egg")
    grid = sweep(profile, "z", n)
    radii = np.array([p.radius for p in profile])
    heights = np.array([p.height for p in profile])
    for k in range(grid.ring_count):
        ring = grid.ring(k)
        assert np.allclose(np.hypot(ring[:, 0], ring[:, 1]), radii)
        assert np.array_equal(ring[:, 2], heights)


def test_sweep_angle_step():
    n = 4
    grid = sweep([ProfilePoint(0.0, 1.0), ProfilePoint(1.0, 0.0), ProfilePoint(0.0, -1.0)], "z", n)
    # sample 1 sits at radius 1, so ring k is at angle k * pi / n
    for k in range(grid.ring_count):
        x, y, z = grid.points[grid.index(k, 1)]
        assert x == pytest.approx(math.cos(k * math.pi / n), abs=1e-12)
        assert y == pytest.approx(math.sin(k * math.pi / n), abs=1e-12)
        assert z == 0.0


def test_sweep_pole_rows_are_identical():
    n = 5
    grid = sweep(generate(n, "arcs"), "y", n)
    last = grid.profile_count - 1
    for k in range(grid.ring_count):
        assert (grid.points[grid.index(k, 0)] == grid.points[0]).all()
        assert (grid.points[grid.index(k, last)] == grid.points[last]).all()


def test_sweep_is_read_only():
    grid = sweep(generate(3, "arcs"), "y", 3)
    with pytest.raises(ValueError):
        grid.points[0, 0] = 1.0


def test_sweep_rejects_bad_sample_count():
    with pytest.raises(InvalidSampleCount):
        sweep(generate(3, "arcs"), "y", 2)
