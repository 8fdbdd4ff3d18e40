"""Incremental data structures for the triangulation working set.

``TriangleArena`` keeps triangles in index-stable slots so the insertion loop
can remove cavity triangles without shifting the rest of the list.
``EdgeTriangleMap`` maps canonical edges to the slots of the triangles using
them; it yields cavity boundaries (edges used once) and adjacent triangle
pairs (edges used twice).
"""
from __future__ import annotations

from itertools import combinations
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from .geometry import Edge, Triangle

__all__ = [
    'TriangleArena',
    'EdgeTriangleMap',
]


class TriangleArena:
    """Index-stable container of triangles.

    Removed slots are tombstoned (set to None) rather than deleted, so indices
    handed out by ``add`` stay valid until ``compact`` is called.

    Example:
        >>> arena = TriangleArena()
        >>> i = arena.add(tri)
        >>> arena.remove([i])
        >>> len(arena)
        0
    """

    def __init__(self, triangles: Iterable[Triangle] = ()):
        self._slots: List[Optional[Triangle]] = []
        self._alive = 0
        for tri in triangles:
            self.add(tri)

    def __len__(self) -> int:
        return self._alive

    def __iter__(self) -> Iterator[Triangle]:
        for tri in self._slots:
            if tri is not None:
                yield tri

    def items(self) -> Iterator[Tuple[int, Triangle]]:
        """Yield ``(slot, triangle)`` for every live triangle."""
        for idx, tri in enumerate(self._slots):
            if tri is not None:
                yield idx, tri

    def add(self, tri: Triangle) -> int:
        self._slots.append(tri)
        self._alive += 1
        return len(self._slots) - 1

    def remove(self, indices: Iterable[int]) -> None:
        for idx in indices:
            if self._slots[idx] is not None:
                self._slots[idx] = None
                self._alive -= 1

    @property
    def tombstones(self) -> int:
        return len(self._slots) - self._alive

    def compact(self) -> None:
        """Drop tombstoned slots. Invalidates previously returned indices."""
        self._slots = [t for t in self._slots if t is not None]


class EdgeTriangleMap:
    """Edge-to-triangle mapping keyed by canonical ``Edge``.

    Building it is O(N) in the number of triangles; each edge keeps the set
    of triangle indices using it.

    Example:
        >>> edge_map = EdgeTriangleMap(enumerate(bad_triangles))
        >>> cavity = edge_map.get_boundary_edges()
    """

    def __init__(self, indexed_triangles: Iterable[Tuple[int, Triangle]] = ()):
        self.edge_to_tris: Dict[Edge, Set[int]] = {}
        self._triangles: Dict[int, Triangle] = {}
        for idx, tri in indexed_triangles:
            self.add_triangle(idx, tri)

    def add_triangle(self, idx: int, tri: Triangle) -> None:
        self._triangles[idx] = tri
        for edge in tri.edges:
            self.edge_to_tris.setdefault(edge, set()).add(idx)

    def get_boundary_edges(self) -> List[Edge]:
        """Edges used by exactly one triangle, in first-seen order."""
        return [edge for edge, tris in self.edge_to_tris.items() if len(tris) == 1]

    def adjacent_pairs(self) -> List[Tuple[int, int]]:
        """Index pairs ``(i, j)`` with ``i < j`` of triangles sharing exactly two vertices."""
        seen: Set[Tuple[int, int]] = set()
        pairs: List[Tuple[int, int]] = []
        for owners in self.edge_to_tris.values():
            if len(owners) < 2:
                continue
            for i, j in combinations(sorted(owners), 2):
                if (i, j) in seen:
                    continue
                seen.add((i, j))
                if len(self._triangles[i].shared_vertices(self._triangles[j])) == 2:
                    pairs.append((i, j))
        return pairs
