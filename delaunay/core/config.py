"""Configuration objects for the Bowyer-Watson triangulator."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .constants import EPS_CIRCUMCIRCLE, EPS_COLLINEAR, SUPER_TRIANGLE_MARGIN


@dataclass(frozen=True)
class TriangulationConfig:
    """Tunable parameters for ``triangulate``.

    Attributes
    ----------
    super_triangle_margin : float
        Multiplier applied to the larger bounding-box side when sizing the
        super triangle.
    circumcircle_eps : float
        Relative slack on the squared circumradius; points on the circle or
        within ``eps * max(1, r^2)`` of it count as inside.
    collinear_eps : float
        Maximum triangle area for three points to be treated as collinear
        during input validation.
    validate_input : bool
        Run the duplicate and collinearity checks before triangulating.
    """
    super_triangle_margin: float = SUPER_TRIANGLE_MARGIN
    circumcircle_eps: float = EPS_CIRCUMCIRCLE
    collinear_eps: float = EPS_COLLINEAR
    validate_input: bool = True

    def __post_init__(self):
        if not self.super_triangle_margin > 0:
            raise ValueError(f"super_triangle_margin must be positive, got {self.super_triangle_margin!r}")
        if self.circumcircle_eps < 0 or self.collinear_eps < 0:
            raise ValueError("tolerances must be non-negative")

    def with_overrides(self, **overrides: Any) -> 'TriangulationConfig':
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)


DEFAULT_CONFIG = TriangulationConfig()

__all__ = ['TriangulationConfig', 'DEFAULT_CONFIG']
