"""Point set generators used by the demo command and the tests."""
from __future__ import annotations

import math
from typing import List

import numpy as np

from .geometry import Point

__all__ = ['square_with_center', 'circle_points', 'random_points']


def square_with_center(size: float = 10.0) -> List[Point]:
    """Corners of an axis-aligned square plus its center."""
    h = size / 2.0
    return [Point(0.0, 0.0), Point(size, 0.0), Point(size, size), Point(0.0, size), Point(h, h)]


def circle_points(count: int = 16, radius: float = 10.0, center: bool = True) -> List[Point]:
    """``count`` points evenly spaced on a circle, optionally preceded by its center."""
    pts = [Point(0.0, 0.0)] if center else []
    for i in range(count):
        angle = 2.0 * math.pi * i / count
        pts.append(Point(radius * math.cos(angle), radius * math.sin(angle)))
    return pts


def random_points(count: int = 20, seed: int = 42, low: float = 0.0, high: float = 100.0) -> List[Point]:
    """Reproducible uniform random points in ``[low, high)^2`` with no duplicates."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if not high > low:
        raise ValueError(f"empty sampling range [{low}, {high})")
    rng = np.random.default_rng(seed)
    pts = {}
    while len(pts) < count:
        xy = rng.uniform(low, high, size=(count - len(pts), 2))
        for x, y in xy:
            pts.setdefault(Point(float(x), float(y)), None)
    return list(pts)
