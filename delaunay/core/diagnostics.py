"""Diagnostics helpers for triangulation results.

Functions operate on lists of ``Triangle`` or on raw numpy arrays in the
``(N, 2)`` points / ``(M, 3)`` vertex-index layout.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial import cKDTree

from .geometry import Point, PointLike, Triangle, as_point, triangles_min_angles, triangles_signed_areas
from .logging_utils import get_logger

logger = get_logger('delaunay.diagnostics')

__all__ = [
    'triangles_to_arrays',
    'find_delaunay_violations',
    'is_delaunay',
    'triangulation_summary',
]


def triangles_to_arrays(triangles: Sequence[Triangle]) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(points, tris)`` arrays for a triangle list.

    Vertices are deduplicated in first-seen order; ``tris`` rows keep each
    triangle's vertex order.
    """
    index: Dict[Point, int] = {}
    rows = []
    for tri in triangles:
        row = []
        for v in tri.vertices:
            if v not in index:
                index[v] = len(index)
            row.append(index[v])
        rows.append(row)
    if not index:
        return np.empty((0, 2), dtype=np.float64), np.empty((0, 3), dtype=np.int32)
    pts = np.array([(p.x, p.y) for p in index], dtype=np.float64)
    tris = np.array(rows, dtype=np.int32)
    return pts, tris


def find_delaunay_violations(triangles: Sequence[Triangle],
                             points: Optional[Iterable[PointLike]] = None,
                             tol: float = 1e-9) -> List[Tuple[Triangle, Point]]:
    """List ``(triangle, point)`` pairs where ``point`` is strictly inside the circumcircle.

    ``points`` defaults to the triangulation's own vertices. A point counts as
    strictly inside when its squared distance to the circumcenter is below
    ``r^2 - tol * max(1, r^2)``; a triangle's own vertices are never reported.
    """
    if points is None:
        pts_list = list({v: None for t in triangles for v in t.vertices})
    else:
        pts_list = [as_point(p) for p in points]
    if not triangles or not pts_list:
        return []
    coords = np.array([(p.x, p.y) for p in pts_list], dtype=np.float64)
    tree = cKDTree(coords)
    violations = []
    for tri in triangles:
        center = tri.circumcenter
        r2 = tri.circumradius_squared
        limit = r2 - tol * max(1.0, r2)
        for k in tree.query_ball_point((center.x, center.y), np.sqrt(r2)):
            p = pts_list[k]
            if tri.has_vertex(p):
                continue
            if p.squared_distance(center) < limit:
                violations.append((tri, p))
    if violations:
        logger.debug("found %d empty-circumcircle violation(s)", len(violations))
    return violations


def is_delaunay(triangles: Sequence[Triangle],
                points: Optional[Iterable[PointLike]] = None,
                tol: float = 1e-9) -> bool:
    return not find_delaunay_violations(triangles, points, tol)


def triangulation_summary(triangles: Sequence[Triangle]) -> Dict[str, Any]:
    """Counts and quality figures for a triangle list."""
    pts, tris = triangles_to_arrays(triangles)
    areas = np.abs(triangles_signed_areas(pts, tris))
    min_angles = triangles_min_angles(pts, tris)
    edges = {e for t in triangles for e in t.edges}
    return {
        'n_vertices': int(pts.shape[0]),
        'n_triangles': int(tris.shape[0]),
        'n_edges': len(edges),
        'total_area': float(areas.sum()) if areas.size else 0.0,
        'min_angle_deg': float(min_angles.min()) if min_angles.size else None,
    }
