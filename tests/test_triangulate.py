from collections import Counter

import numpy as np
import pytest

from pyovoid.errors import DegenerateGrid
from pyovoid.triangulate import build, quad_indices


def test_first_cell():
    tris = build(3, 4)
    # S1 = 3: corners (0,0)=0, (0,1)=1, (1,0)=3, (1,1)=4
    assert tris[0].tolist() == [0, 1, 3]
    assert tris[1].tolist() == [1, 4, 3]


@pytest.mark.parametrize("s1, s2", [(2, 2), (3, 4), (6, 7), (38, 33)])
def test_counts_and_range(s1, s2):
    tris = build(s1, s2)
    assert tris.shape == (2 * (s1 - 1) * (s2 - 1), 3)
    assert tris.dtype == np.int64
    assert tris.min() == 0
    assert tris.max() == s1 * s2 - 1


def test_cells_share_one_diagonal():
    s1, s2 = 5, 4
    a, b, c, d = quad_indices(s1, s2)
    tris = build(s1, s2).reshape(-1, 2, 3)
    for k, (t1, t2) in enumerate(tris):
        assert set(t1) & set(t2) == {b[k], c[k]}
        assert set(t1) | set(t2) == {a[k], b[k], c[k], d[k]}


def test_quad_corners_follow_grid_math():
    s1, s2 = 4, 3
    a, b, c, d = quad_indices(s1, s2)
    assert len(a) == (s1 - 1) * (s2 - 1)
    cells = [(i, j) for i in range(s2 - 1) for j in range(s1 - 1)]
    assert a.tolist() == [i * s1 + j for i, j in cells]
    assert b.tolist() == [i * s1 + j + 1 for i, j in cells]
    assert c.tolist() == [(i + 1) * s1 + j for i, j in cells]
    assert d.tolist() == [(i + 1) * s1 + j + 1 for i, j in cells]


def test_raw_strip_is_consistently_wound():
    # every directed edge appears once; interior edges appear in both directions
    s1, s2 = 6, 5
    directed = Counter()
    for x, y, z in build(s1, s2).tolist():
        directed.update([(x, y), (y, z), (z, x)])
    assert max(directed.values()) == 1
    interior = [(u, w) for (u, w) in directed if (w, u) in directed]
    boundary = [e for e in directed if (e[1], e[0]) not in directed]
    # open grid boundary: two profile columns and two rings
    assert len(boundary) == 2 * (s1 - 1) + 2 * (s2 - 1)
    assert len(interior) + len(boundary) == len(directed)


@pytest.mark.parametrize("s1, s2", [(1, 5), (5, 1), (0, 0)])
def test_degenerate_grid(s1, s2):
    with pytest.raises(DegenerateGrid):
        build(s1, s2)
