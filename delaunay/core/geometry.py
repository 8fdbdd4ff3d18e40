"""Geometry primitives for planar Delaunay triangulation.

``Point``, ``Edge`` and ``Triangle`` are immutable values. Points compare by
exact floating-point equality; edges and triangles compare by their vertex
sets, so they can be stored in sets and dicts regardless of the order their
vertices were given in.

The module also carries scalar helpers (``orient``, ``triangle_area``,
``circumcenter_of``) and vectorized numpy helpers working on the usual
``(N, 2)`` points / ``(M, 3)`` vertex-index layout.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from .constants import (
    EPS_AREA,
    EPS_CIRCUMCIRCLE,
    EPS_ON_EDGE,
    EPS_SLOPE,
    MACHINE_EPS,
)
from .errors import InvalidTriangleError, NumericalError
from .logging_utils import get_logger

logger = get_logger('delaunay.geometry')

__all__ = [
    'Point', 'Edge', 'Triangle', 'as_point',
    'orient', 'triangle_area', 'circumcenter_of',
    'triangles_signed_areas', 'triangles_min_angles',
]


@dataclass(frozen=True, order=True)
class Point:
    """A point in the plane. Equality and hashing use exact coordinates."""
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def squared_distance(self, other: 'Point') -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: 'Point') -> float:
        return math.sqrt(self.squared_distance(other))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


PointLike = Union[Point, Sequence[float]]


def as_point(p: PointLike) -> Point:
    """Coerce a ``Point`` or an ``(x, y)`` pair into a ``Point``."""
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))


@dataclass(frozen=True)
class Edge:
    """Unordered segment between two points.

    The lexicographically smaller endpoint (by x, then y) is always stored as
    ``p1``, so ``Edge(a, b) == Edge(b, a)`` and both hash the same.
    """
    p1: Point
    p2: Point

    def __post_init__(self):
        a = as_point(self.p1)
        b = as_point(self.p2)
        if (b.x, b.y) < (a.x, a.y):
            a, b = b, a
        object.__setattr__(self, 'p1', a)
        object.__setattr__(self, 'p2', b)

    def __iter__(self) -> Iterator[Point]:
        yield self.p1
        yield self.p2

    @property
    def midpoint(self) -> Point:
        return Point((self.p1.x + self.p2.x) / 2.0, (self.p1.y + self.p2.y) / 2.0)

    @property
    def squared_length(self) -> float:
        return self.p1.squared_distance(self.p2)

    @property
    def length(self) -> float:
        return math.sqrt(self.squared_length)


def orient(a: PointLike, b: PointLike, c: PointLike) -> float:
    """2D orientation (signed area * 2) for points a,b,c.

    Returns a positive value when (a,b,c) are counter-clockwise, negative when clockwise,
    and zero when colinear.
    """
    ax, ay = a
    bx, by = b
    cx, cy = c
    return (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)


def triangle_area(p0: PointLike, p1: PointLike, p2: PointLike) -> float:
    """Signed area of the triangle (positive when counter-clockwise)."""
    return 0.5 * orient(p0, p1, p2)


def _is_vertical(dx: float, dy: float) -> bool:
    return abs(dx) <= EPS_SLOPE * abs(dy)


def _is_horizontal(dx: float, dy: float) -> bool:
    return abs(dy) <= EPS_SLOPE * abs(dx)


def _bisector_intersection(a: Point, b: Point, c: Point) -> Optional[Point]:
    """Intersect the perpendicular bisectors of segments ab and bc.

    Returns None when the pair is ill-conditioned (zero-length segment or
    numerically parallel segments). A vertical segment has a horizontal
    bisector and a horizontal segment a vertical one; when only one of the
    two segments is axis-aligned that case is solved directly instead of
    dividing by a near-zero delta. Two segments aligned with the same axis
    go through the general solve.
    """
    dx1, dy1 = b.x - a.x, b.y - a.y
    dx2, dy2 = c.x - b.x, c.y - b.y
    if (dx1 == 0.0 and dy1 == 0.0) or (dx2 == 0.0 and dy2 == 0.0):
        return None
    mx1, my1 = (a.x + b.x) / 2.0, (a.y + b.y) / 2.0
    mx2, my2 = (b.x + c.x) / 2.0, (b.y + c.y) / 2.0

    v1, h1 = _is_vertical(dx1, dy1), _is_horizontal(dx1, dy1)
    v2, h2 = _is_vertical(dx2, dy2), _is_horizontal(dx2, dy2)

    if v1 and not v2:
        # bisector of ab is the line y = my1
        if h2:
            return Point(mx2, my1)
        return Point(mx2 - (my1 - my2) * dy2 / dx2, my1)
    if h1 and not h2:
        # bisector of ab is the line x = mx1
        if v2:
            return Point(mx1, my2)
        return Point(mx1, my2 - (mx1 - mx2) * dx2 / dy2)
    if v2 and not v1:
        return Point(mx1 - (my2 - my1) * dy1 / dx1, my2)
    if h2 and not h1:
        return Point(mx2, my1 - (mx2 - mx1) * dx1 / dy1)

    # General case, solved relative to a: u = center - a satisfies
    # 2 u.(b - a) = |b - a|^2 and 2 u.(c - a) = |c - a|^2
    bx, by = dx1, dy1
    cx, cy = c.x - a.x, c.y - a.y
    det = 2.0 * (bx * cy - by * cx)
    if abs(det) <= 2.0 * MACHINE_EPS * math.hypot(bx, by) * math.hypot(cx, cy):
        return None
    b2 = bx * bx + by * by
    c2 = cx * cx + cy * cy
    x = a.x + (cy * b2 - by * c2) / det
    y = a.y + (bx * c2 - cx * b2) / det
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return Point(x, y)


def circumcenter_of(p1: PointLike, p2: PointLike, p3: PointLike) -> Point:
    """Circumcenter of three points.

    Tries the bisector pairs (p1p2, p2p3), (p2p3, p3p1) and (p3p1, p1p2) in
    turn. Raises ``NumericalError`` when none of them resolves, which happens
    for collinear or coincident input.
    """
    a, b, c = as_point(p1), as_point(p2), as_point(p3)
    for u, v, w in ((a, b, c), (b, c, a), (c, a, b)):
        center = _bisector_intersection(u, v, w)
        if center is not None:
            return center
    raise NumericalError(
        f"no stable perpendicular bisector intersection for ({a.x}, {a.y}), "
        f"({b.x}, {b.y}), ({c.x}, {c.y})"
    )


def _canonical_key(p: Point) -> Tuple[float, float]:
    return (p.x, p.y)


class Triangle:
    """Triangle with order-independent equality.

    Construction checks that the three vertices are distinct and not
    collinear and raises ``InvalidTriangleError`` otherwise. Use
    ``Triangle.unchecked`` to build a possibly degenerate triangle.
    """

    __slots__ = ('p1', 'p2', 'p3', '_key', '_center', '_r2')

    def __init__(self, p1: PointLike, p2: PointLike, p3: PointLike, *, validate: bool = True):
        self.p1 = as_point(p1)
        self.p2 = as_point(p2)
        self.p3 = as_point(p3)
        self._key = tuple(sorted((self.p1, self.p2, self.p3), key=_canonical_key))
        self._center = None
        self._r2 = None
        if validate:
            if self.p1 == self.p2 or self.p2 == self.p3 or self.p1 == self.p3:
                raise InvalidTriangleError()
            if self.is_degenerate:
                raise InvalidTriangleError()

    @classmethod
    def unchecked(cls, p1: PointLike, p2: PointLike, p3: PointLike) -> 'Triangle':
        """Build a triangle without the validity checks."""
        return cls(p1, p2, p3, validate=False)

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __repr__(self):
        return f"Triangle({self.p1!r}, {self.p2!r}, {self.p3!r})"

    def __iter__(self) -> Iterator[Point]:
        yield self.p1
        yield self.p2
        yield self.p3

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.p1, self.p2, self.p3)

    @property
    def edges(self) -> Tuple[Edge, Edge, Edge]:
        return (Edge(self.p1, self.p2), Edge(self.p2, self.p3), Edge(self.p3, self.p1))

    @property
    def signed_area(self) -> float:
        return triangle_area(self.p1, self.p2, self.p3)

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def is_degenerate(self) -> bool:
        return self.area < EPS_AREA

    @property
    def centroid(self) -> Point:
        return Point((self.p1.x + self.p2.x + self.p3.x) / 3.0,
                     (self.p1.y + self.p2.y + self.p3.y) / 3.0)

    @property
    def circumcenter(self) -> Point:
        """Center of the circumscribed circle.

        Never raises. When no bisector pair is well conditioned the centroid
        is returned instead; that value is an approximation and is logged as
        such at debug level.
        """
        if self._center is None:
            try:
                self._center = circumcenter_of(self.p1, self.p2, self.p3)
            except NumericalError as exc:
                logger.debug("circumcenter fallback to centroid for %r: %s", self, exc)
                self._center = self.centroid
        return self._center

    @property
    def circumradius_squared(self) -> float:
        if self._r2 is None:
            self._r2 = self.circumcenter.squared_distance(self.p1)
        return self._r2

    @property
    def circumradius(self) -> float:
        return math.sqrt(self.circumradius_squared)

    def is_point_in_circumcircle(self, point: PointLike, eps: float = EPS_CIRCUMCIRCLE) -> bool:
        """True when ``point`` lies inside or on the circumcircle.

        ``eps`` is relative slack: the squared distance may exceed ``r^2`` by
        ``eps * max(1, r^2)``.
        """
        p = as_point(point)
        r2 = self.circumradius_squared
        return p.squared_distance(self.circumcenter) <= r2 + eps * max(1.0, r2)

    def contains(self, point: PointLike) -> bool:
        """Barycentric point-in-triangle test; boundary points are contained."""
        p = as_point(point)
        a, b, c = self.p1, self.p2, self.p3
        denom = (b.y - c.y) * (a.x - c.x) + (c.x - b.x) * (a.y - c.y)
        if abs(denom) < EPS_AREA:
            return False
        w1 = ((b.y - c.y) * (p.x - c.x) + (c.x - b.x) * (p.y - c.y)) / denom
        w2 = ((c.y - a.y) * (p.x - c.x) + (a.x - c.x) * (p.y - c.y)) / denom
        w3 = 1.0 - w1 - w2
        return 0.0 <= w1 <= 1.0 and 0.0 <= w2 <= 1.0 and 0.0 <= w3 <= 1.0

    def is_point_on_edge(self, point: PointLike) -> bool:
        """True when ``point`` lies on one of the three edges (vertices included)."""
        p = as_point(point)
        for a, b in ((self.p1, self.p2), (self.p2, self.p3), (self.p3, self.p1)):
            scale = max(abs(b.x - a.x), abs(b.y - a.y), 1.0)
            tol = EPS_ON_EDGE * scale
            if not (min(a.x, b.x) - tol <= p.x <= max(a.x, b.x) + tol):
                continue
            if not (min(a.y, b.y) - tol <= p.y <= max(a.y, b.y) + tol):
                continue
            if abs(orient(a, b, p)) <= tol * scale:
                return True
        return False

    def shared_vertices(self, other: 'Triangle') -> set:
        return set(self._key).intersection(other._key)

    def has_vertex(self, point: PointLike) -> bool:
        return as_point(point) in self._key


# ---------------------------------------------------------------------------
# Vectorized helpers for (N,2) points / (M,3) index arrays
# ---------------------------------------------------------------------------

def triangles_signed_areas(points, tris):
    """Vectorized signed area for a batch of triangles.

    points: (N,2) float array
    tris:   (M,3) int array
    Returns: (M,) float64 array of signed areas (0.5 * cross).
    """
    pts = np.asarray(points, dtype=np.float64)
    T = np.asarray(tris, dtype=np.int32)
    if T.size == 0:
        return np.empty((0,), dtype=float)
    p0 = pts[T[:, 0]]; p1 = pts[T[:, 1]]; p2 = pts[T[:, 2]]
    d1 = p1 - p0
    d2 = p2 - p0
    return 0.5 * (d1[:, 0] * d2[:, 1] - d1[:, 1] * d2[:, 0])


def triangles_min_angles(points, tris):
    """Vectorized per-triangle minimum internal angle (degrees).

    points: (N,2) float array
    tris:   (M,3) int array
    Returns: (M,) float64 array of min angles.
    """
    pts = np.asarray(points, dtype=np.float64)
    T = np.asarray(tris, dtype=np.int32)
    if T.size == 0:
        return np.empty((0,), dtype=float)
    p0 = pts[T[:, 0]]
    p1 = pts[T[:, 1]]
    p2 = pts[T[:, 2]]
    # side lengths opposite to vertices: a=|p1-p2|, b=|p0-p2|, c=|p0-p1|
    a = np.linalg.norm(p1 - p2, axis=1)
    b = np.linalg.norm(p0 - p2, axis=1)
    c = np.linalg.norm(p0 - p1, axis=1)
    eps = 1e-20

    def angle_opposite(A, B, C):
        cosang = (B*B + C*C - A*A) / (2.0 * B * C + eps)
        return np.degrees(np.arccos(np.clip(cosang, -1.0, 1.0)))

    return np.minimum(angle_opposite(a, b, c),
                      np.minimum(angle_opposite(b, c, a), angle_opposite(c, a, b)))
