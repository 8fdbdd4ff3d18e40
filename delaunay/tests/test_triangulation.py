"""Tests for the Bowyer-Watson triangulator."""
import dataclasses
import logging
import random

import numpy as np
import pytest
from scipy.spatial import Delaunay

from delaunay.core.config import TriangulationConfig
from delaunay.core.diagnostics import is_delaunay
from delaunay.core.errors import CollinearPointsError, DelaunayError, DuplicatePointsError
from delaunay.core.examples import circle_points, random_points, square_with_center
from delaunay.core.geometry import Point, Triangle
from delaunay.core.triangulation import are_collinear, super_triangle, triangulate, triangulate_coords
from delaunay.core.voronoi import voronoi_diagram


def _vertex_sets(triangles):
    return {frozenset((v.x, v.y) for v in t.vertices) for t in triangles}


def test_single_triangle():
    pts = [Point(0.0, 0.0), Point(10.0, 0.0), Point(5.0, 8.66)]
    tris = triangulate(pts)
    assert len(tris) == 1
    assert set(tris[0].vertices) == set(pts)
    assert voronoi_diagram(tris) == []


def test_square():
    pts = [Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0), Point(0.0, 10.0)]
    tris = triangulate(pts)
    assert len(tris) == 2
    edges = {e for t in tris for e in t.edges}
    assert len(edges) == 5
    assert len(voronoi_diagram(tris)) == 1


def test_square_with_center_is_a_fan():
    pts = square_with_center()
    tris = triangulate(pts)
    assert len(tris) == 4
    assert all(t.has_vertex(Point(5.0, 5.0)) for t in tris)
    assert sum(t.area for t in tris) == pytest.approx(100.0)


def test_circle_with_center_is_a_fan():
    pts = circle_points(16)
    tris = triangulate(pts)
    assert len(tris) == 16
    assert all(t.has_vertex(Point(0.0, 0.0)) for t in tris)


@pytest.mark.parametrize('pts', [
    [],
    [Point(1.0, 1.0)],
    [Point(1.0, 1.0), Point(2.0, 3.0)],
    [Point(1.0, 1.0), Point(1.0, 1.0)],
])
def test_fewer_than_three_points(pts):
    assert triangulate(pts) == []


def test_duplicate_points():
    with pytest.raises(DuplicatePointsError):
        triangulate([Point(0.0, 0.0), Point(10.0, 0.0), Point(0.0, 0.0)])
    with pytest.raises(DelaunayError):
        triangulate([(0, 0), (10, 0), (5, 5), (10, 0)])


def test_collinear_triple():
    with pytest.raises(CollinearPointsError):
        triangulate([Point(0.0, 0.0), Point(5.0, 0.0), Point(10.0, 0.0)])


def test_all_collinear():
    pts = [Point(float(i), 2.0 * i) for i in range(6)]
    with pytest.raises(CollinearPointsError):
        triangulate(pts)


def test_mostly_collinear_with_one_offset_point():
    pts = [Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 0.0), Point(3.0, 0.0), Point(1.5, 1.0)]
    tris = triangulate(pts)
    assert len(tris) == 3
    assert all(t.has_vertex(Point(1.5, 1.0)) for t in tris)


def test_nearly_collinear_points_triangulate():
    pts = [Point(0.0, 0.0), Point(1.0, 0.0), Point(0.5, 0.5), Point(2.0, 0.2)]
    tris = triangulate(pts)
    assert tris
    assert is_delaunay(tris, pts)


def test_are_collinear():
    assert are_collinear([])
    assert are_collinear([Point(1.0, 1.0)])
    assert are_collinear([Point(1.0, 1.0), Point(2.0, 2.0)])
    assert are_collinear([Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 2.0), Point(3.0, 3.0)])
    assert not are_collinear([Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 0.0)])
    assert are_collinear([(0, 0), (0, 1), (0, 5)])


@pytest.mark.parametrize('seed', [0, 1, 7, 42])
def test_random_points_are_delaunay(seed):
    pts = random_points(60, seed=seed)
    tris = triangulate(pts)
    assert tris
    assert is_delaunay(tris, pts)
    inputs = set(pts)
    for t in tris:
        assert set(t.vertices) <= inputs


def test_no_super_triangle_vertices():
    pts = random_points(40, seed=3)
    seed_tri = super_triangle(pts)
    for t in triangulate(pts):
        assert not t.shared_vertices(seed_tri)


def test_super_triangle_encloses_points():
    pts = random_points(30, seed=5, low=-50.0, high=50.0)
    seed_tri = super_triangle(pts)
    assert all(seed_tri.contains(p) for p in pts)
    assert all(not seed_tri.is_point_on_edge(p) for p in pts)


@pytest.mark.parametrize('seed', [4, 11])
def test_matches_scipy(seed):
    pts = random_points(80, seed=seed)
    ours = _vertex_sets(triangulate(pts))
    coords = np.array([(p.x, p.y) for p in pts])
    ref = Delaunay(coords)
    theirs = {frozenset(tuple(coords[i]) for i in simplex) for simplex in ref.simplices}
    assert ours <= theirs
    # the finite super triangle can only cost triangles on the convex hull
    hull = {tuple(coords[i]) for i in np.unique(ref.convex_hull)}
    missing = theirs - ours
    assert all(tri & hull for tri in missing)


def test_insertion_order_does_not_change_result():
    pts = random_points(50, seed=8)
    shuffled = list(pts)
    random.Random(1).shuffle(shuffled)
    assert set(triangulate(pts)) == set(triangulate(shuffled))


def test_triangulate_coords():
    tris = triangulate_coords([(0, 0), (10, 0), (10, 10), (0, 10)])
    assert len(tris) == 2
    for tri in tris:
        assert len(tri) == 3
        for xy in tri:
            assert isinstance(xy, tuple) and len(xy) == 2
            assert xy in {(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)}
    with pytest.raises(DuplicatePointsError):
        triangulate_coords([(0, 0), (1, 0), (0, 0)])
    assert triangulate_coords([(0, 0), (1, 1)]) == []


def test_accepts_point_tuples():
    tris = triangulate([(0, 0), (10, 0), (5, 8.66)])
    assert tris == [Triangle((0, 0), (10, 0), (5, 8.66))]


def test_config_margin():
    pts = random_points(25, seed=2)
    wide = triangulate(pts, TriangulationConfig(super_triangle_margin=100.0))
    assert is_delaunay(wide, pts)
    with pytest.raises(ValueError):
        TriangulationConfig(super_triangle_margin=0.0)
    with pytest.raises(ValueError):
        TriangulationConfig(circumcircle_eps=-1.0)
    cfg = TriangulationConfig().with_overrides(super_triangle_margin=50.0)
    assert cfg.super_triangle_margin == 50.0


def test_config_skips_validation():
    # a collinear triple is only rejected by validation
    pts = [Point(0.0, 0.0), Point(5.0, 0.0), Point(10.0, 0.0)]
    assert triangulate(pts, TriangulationConfig(validate_input=False)) == []


def test_config_fields():
    names = [f.name for f in dataclasses.fields(TriangulationConfig)]
    assert names == ['super_triangle_margin', 'circumcircle_eps', 'collinear_eps', 'validate_input']
    assert TriangulationConfig() == TriangulationConfig()
    assert hash(TriangulationConfig()) == hash(TriangulationConfig())


def test_logs_summary():
    records = []

    class _ListHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    log = logging.getLogger('delaunay.triangulation')
    handler = _ListHandler(level=logging.DEBUG)
    old_level = log.level
    log.addHandler(handler)
    log.setLevel(logging.DEBUG)
    try:
        triangulate(square_with_center())
    finally:
        log.removeHandler(handler)
        log.setLevel(old_level)
    messages = [r.getMessage() for r in records]
    assert any('super triangle' in m for m in messages)
    assert any('into 4 triangles' in m for m in messages)
