"""Central numerical tolerances for the triangulation code.

This module centralizes tiny numeric thresholds used across the package so
they can be tuned consistently and referenced without scattering literals.
All values are absolute; callers working far from unit scale can override
the circumcircle and collinearity tolerances through ``TriangulationConfig``.
"""
from __future__ import annotations

import sys

MACHINE_EPS: float = sys.float_info.epsilon

# Geometry tolerances
EPS_AREA: float = MACHINE_EPS          # minimum absolute triangle area for a valid triangle
EPS_COLLINEAR: float = MACHINE_EPS     # max triangle area for points to count as collinear
EPS_CIRCUMCIRCLE: float = MACHINE_EPS  # relative slack on r^2 in the circumcircle test
EPS_SLOPE: float = 1e-10               # near-vertical / near-horizontal / parallel bisectors
EPS_ON_EDGE: float = 10.0 * MACHINE_EPS  # cross-product tolerance for point-on-edge

# Super triangle
SUPER_TRIANGLE_MARGIN: float = 10.0
EMPTY_SUPER_TRIANGLE = ((-1000.0, -1000.0), (1000.0, -1000.0), (0.0, 1000.0))

__all__ = [
    'MACHINE_EPS',
    'EPS_AREA',
    'EPS_COLLINEAR',
    'EPS_CIRCUMCIRCLE',
    'EPS_SLOPE',
    'EPS_ON_EDGE',
    'SUPER_TRIANGLE_MARGIN',
    'EMPTY_SUPER_TRIANGLE',
]
