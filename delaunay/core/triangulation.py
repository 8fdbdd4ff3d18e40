"""Bowyer-Watson Delaunay triangulation of planar point sets.

Points are inserted one at a time into a working set seeded with a super
triangle that encloses the whole input. Each insertion removes the triangles
whose circumcircle contains the new point and reconnects the boundary of the
resulting cavity to it. Triangles touching the super triangle are dropped at
the end.
"""
from __future__ import annotations

import time
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, TriangulationConfig
from .constants import EMPTY_SUPER_TRIANGLE
from .errors import CollinearPointsError, DuplicatePointsError, InvalidTriangleError
from .geometry import Point, PointLike, Triangle, as_point, triangle_area
from .incremental import EdgeTriangleMap, TriangleArena
from .logging_utils import get_logger

logger = get_logger('delaunay.triangulation')

__all__ = [
    'triangulate',
    'triangulate_coords',
    'are_collinear',
    'super_triangle',
]

Coord = Tuple[float, float]


def are_collinear(points: Sequence[PointLike], eps: float = DEFAULT_CONFIG.collinear_eps) -> bool:
    """Return True when every point lies on the line through the first two.

    Zero, one or two points are always collinear. The test compares the
    absolute area of the triangle (points[0], points[1], p) against ``eps``
    for every later point ``p``.
    """
    if len(points) <= 2:
        return True
    a = as_point(points[0])
    b = as_point(points[1])
    for p in points[2:]:
        if abs(triangle_area(a, b, as_point(p))) > eps:
            return False
    return True


def super_triangle(points: Sequence[Point], margin: float = DEFAULT_CONFIG.super_triangle_margin) -> Triangle:
    """Triangle strictly enclosing ``points``.

    Centered on the bounding-box midpoint and sized by ``margin`` times the
    larger bounding-box side. An empty input gets a fixed triangle.

    The triangle is finite: a convex-hull triangle of ``points`` whose
    circumcircle reaches one of its vertices is cut away during insertion
    and does not reappear, so ``triangulate`` can miss a few hull triangles.
    A larger ``margin`` narrows the gap.
    """
    if not points:
        return Triangle(*EMPTY_SUPER_TRIANGLE)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    mid_x = (min_x + max_x) / 2.0
    mid_y = (min_y + max_y) / 2.0
    dmax = max(max_x - min_x, max_y - min_y)
    # a single point has a zero-size box
    span = dmax * margin if dmax > 0 else margin
    return Triangle(
        Point(mid_x - span, mid_y - span),
        Point(mid_x + span, mid_y - span),
        Point(mid_x, mid_y + span),
    )


def _validate(points: Sequence[Point], config: TriangulationConfig) -> None:
    seen = set()
    for p in points:
        if p in seen:
            raise DuplicatePointsError()
        seen.add(p)
    if len(points) == 3:
        if abs(triangle_area(*points)) < config.collinear_eps:
            raise CollinearPointsError()
    elif are_collinear(points, eps=config.collinear_eps):
        raise CollinearPointsError()


def _insert_point(arena: TriangleArena, point: Point, eps: float) -> Tuple[int, int]:
    """Insert ``point`` into ``arena``; returns (cavity size, skipped candidates)."""
    bad = [(idx, tri) for idx, tri in arena.items() if tri.is_point_in_circumcircle(point, eps)]
    # edges used by exactly one bad triangle bound the cavity
    boundary = EdgeTriangleMap(bad).get_boundary_edges()
    arena.remove(idx for idx, _ in bad)
    skipped = 0
    for edge in boundary:
        try:
            arena.add(Triangle(point, edge.p1, edge.p2))
        except InvalidTriangleError:
            skipped += 1
    return len(bad), skipped


def triangulate(points: Iterable[PointLike], config: Optional[TriangulationConfig] = None) -> List[Triangle]:
    """Delaunay triangulation of ``points``.

    Parameters
    ----------
    points : iterable of Point or (x, y) pairs
    config : TriangulationConfig, optional
        Tolerances and super triangle sizing; ``DEFAULT_CONFIG`` when omitted.

    Returns
    -------
    list of Triangle
        Empty for fewer than three points. Triangles on the convex hull can be
        missing when their circumcircle reaches the super triangle; see
        ``super_triangle``.

    Raises
    ------
    DuplicatePointsError
        Two input points are exactly equal.
    CollinearPointsError
        Three points are given and they are collinear, or more than three are
        given and all of them are.
    """
    cfg = config or DEFAULT_CONFIG
    pts = [as_point(p) for p in points]
    if len(pts) < 3:
        return []
    if cfg.validate_input:
        _validate(pts, cfg)

    t0 = time.perf_counter()
    seed = super_triangle(pts, cfg.super_triangle_margin)
    logger.debug("super triangle %r for %d points", seed, len(pts))

    arena = TriangleArena([seed])
    skipped_total = 0
    for i, point in enumerate(pts):
        cavity, skipped = _insert_point(arena, point, cfg.circumcircle_eps)
        skipped_total += skipped
        if skipped:
            logger.debug("point %d %r: skipped %d degenerate candidate(s)", i, point, skipped)
        logger.debug("point %d: cavity of %d triangle(s), %d live", i, cavity, len(arena))
        # compact once tombstones dominate the slot list
        if arena.tombstones > 2 * len(arena):
            arena.compact()

    result = [tri for tri in arena if not tri.shared_vertices(seed)]
    logger.info(
        "triangulated %d points into %d triangles in %.4fs (%d degenerate candidates skipped)",
        len(pts), len(result), time.perf_counter() - t0, skipped_total,
    )
    return result


def triangulate_coords(coords: Iterable[Sequence[float]],
                       config: Optional[TriangulationConfig] = None) -> List[Tuple[Coord, Coord, Coord]]:
    """``triangulate`` for plain ``(x, y)`` pairs.

    Same validation as ``triangulate``; each triangle comes back as a triple
    of ``(x, y)`` tuples in construction order.
    """
    triangles = triangulate((Point(float(x), float(y)) for x, y in coords), config=config)
    return [(t.p1.as_tuple(), t.p2.as_tuple(), t.p3.as_tuple()) for t in triangles]
