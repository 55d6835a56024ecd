import math

import pytest

from odrkit.earcut import earcut


def _shoelace(points):
    total = 0.0
    for idx, (x1, y1) in enumerate(points):
        x2, y2 = points[(idx + 1) % len(points)]
        total += x1 * y2 - x2 * y1
    return abs(total) / 2


def _triangles_area(points, indices):
    total = 0.0
    for k in range(0, len(indices), 3):
        a, b, c = (points[i] for i in indices[k : k + 3])
        total += abs((b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1])) / 2
    return total


def test_empty_input_gives_no_triangles():
    assert earcut([]) == []


@pytest.mark.parametrize("points", [[(0.0, 0.0)], [(0.0, 0.0), (1.0, 1.0)]])
def test_too_few_points_give_no_triangles(points):
    assert earcut(points) == []


def test_single_triangle_uses_all_vertices():
    points = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
    indices = earcut(points)
    assert len(indices) == 3
    assert sorted(indices) == [0, 1, 2]


@pytest.mark.parametrize("reverse", [False, True])
def test_square_gives_two_triangles_covering_area(reverse):
    points = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    if reverse:
        points = points[::-1]
    indices = earcut(points)
    assert len(indices) == 6
    assert set(indices) == {0, 1, 2, 3}
    assert _triangles_area(points, indices) == pytest.approx(_shoelace(points))


def test_concave_polygon_area_is_preserved():
    points = [(0, 0), (4, 0), (4, 1), (1, 1), (1, 4), (0, 4)]
    indices = earcut(points)
    assert len(indices) % 3 == 0
    assert len(indices) // 3 == len(points) - 2
    assert all(0 <= i < len(points) for i in indices)
    assert _triangles_area(points, indices) == pytest.approx(_shoelace(points))


def test_collinear_point_on_edge_area_is_preserved():
    points = [(0, 0), (1, 0), (2, 0), (2, 2), (0, 2)]
    indices = earcut(points)
    assert len(indices) % 3 == 0
    assert _triangles_area(points, indices) == pytest.approx(_shoelace(points))


def test_large_polygon_uses_hashed_path_and_preserves_area():
    n = 120
    points = [(10 * math.cos(2 * math.pi * k / n), 10 * math.sin(2 * math.pi * k / n)) for k in range(n)]
    indices = earcut(points)
    assert len(indices) // 3 == n - 2
    assert set(indices) == set(range(n))
    assert _triangles_area(points, indices) == pytest.approx(_shoelace(points))


def test_large_star_shape_area_is_preserved():
    n = 100
    points = []
    for k in range(n):
        r = 10 if k % 2 == 0 else 5
        angle = 2 * math.pi * k / n
        points.append((r * math.cos(angle), r * math.sin(angle)))
    indices = earcut(points)
    assert all(0 <= i < n for i in indices)
    assert _triangles_area(points, indices) == pytest.approx(_shoelace(points))


def test_triangles_have_consistent_orientation():
    points = [(0, 0), (3, 0), (3, 3), (2, 1), (0, 3)]
    indices = earcut(points)
    signs = set()
    for k in range(0, len(indices), 3):
        a, b, c = (points[i] for i in indices[k : k + 3])
        cross = (b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1])
        if cross != 0:
            signs.add(cross > 0)
    assert len(signs) == 1
    assert _triangles_area(points, indices) == pytest.approx(_shoelace(points))


def test_repeated_closing_point_is_dropped():
    points = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)]
    indices = earcut(points)
    assert len(indices) == 6
    assert _triangles_area(points, indices) == pytest.approx(1.0)