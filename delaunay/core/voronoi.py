"""Voronoi diagram as the dual of a Delaunay triangulation.

Every pair of edge-adjacent triangles contributes one Voronoi edge joining
their circumcenters.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

from .geometry import Edge, Triangle
from .incremental import EdgeTriangleMap
from .logging_utils import get_logger

logger = get_logger('delaunay.voronoi')

__all__ = ['adjacent_triangle_pairs', 'voronoi_diagram']


def adjacent_triangle_pairs(triangles: Sequence[Triangle]) -> List[Tuple[Triangle, Triangle]]:
    """Pairs of triangles sharing exactly two vertices.

    Candidates are found by grouping triangles on their canonical edges, then
    confirmed with the shared-vertex count, so the result matches an all-pairs
    scan without its quadratic cost.
    """
    edge_map = EdgeTriangleMap(enumerate(triangles))
    return [(triangles[i], triangles[j]) for i, j in edge_map.adjacent_pairs()]


def voronoi_diagram(triangles: Sequence[Triangle]) -> List[Edge]:
    """Voronoi edges dual to ``triangles``.

    Returns one ``Edge`` per distinct pair of circumcenters of adjacent
    triangles. Triangles sharing a circumcircle (cocircular vertices) give a
    zero-length edge, which is kept.
    """
    triangles = list(triangles)
    edges = {}
    for t1, t2 in adjacent_triangle_pairs(triangles):
        edges.setdefault(Edge(t1.circumcenter, t2.circumcenter), None)
    logger.debug("voronoi: %d triangles -> %d edges", len(triangles), len(edges))
    return list(edges)
