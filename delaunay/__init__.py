"""Public package API for planar Delaunay triangulation and Voronoi diagrams.

This facade provides a flat import surface on top of the internal
implementation package ``delaunay.core`` while deferring the matplotlib
based plotting module until first use, keeping ``import delaunay`` light.

Example
-------
    from delaunay import Point, triangulate, voronoi_diagram

    tris = triangulate([Point(0, 0), Point(10, 0), Point(5, 8.66)])
    edges = voronoi_diagram(tris)
"""
from importlib import import_module as _imp
import logging as _logging

try:  # populated when installed
    from importlib.metadata import PackageNotFoundError as _NotFound, version as _pkg_version
    __version__ = _pkg_version("delaunay-voronoi")
except _NotFound:  # pragma: no cover - source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core import constants, diagnostics, examples, geometry, incremental, triangulation, voronoi
from .core.config import DEFAULT_CONFIG, TriangulationConfig
from .core.constants import EPS_AREA, EPS_CIRCUMCIRCLE, EPS_COLLINEAR, EPS_ON_EDGE, EPS_SLOPE
from .core.errors import (
    CollinearPointsError,
    DelaunayError,
    DuplicatePointsError,
    InvalidTriangleError,
    NumericalError,
)
from .core.geometry import Edge, Point, Triangle
from .core.logging_utils import configure_logging, get_logger
from .core.triangulation import are_collinear, triangulate, triangulate_coords
from .core.voronoi import adjacent_triangle_pairs, voronoi_diagram


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)

        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m

        def __getattr__(self, item):
            if item == '_m':  # unset slot
                raise AttributeError(item)
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# matplotlib is only imported when plotting is used
visualization = _lazy_module('delaunay.core.visualization')


def plot_triangulation(*args, **kwargs):
    return visualization.plot_triangulation(*args, **kwargs)


__all__ = [
    '__version__',
    # primitives
    'Point', 'Edge', 'Triangle',
    # algorithms
    'triangulate', 'triangulate_coords', 'are_collinear',
    'voronoi_diagram', 'adjacent_triangle_pairs',
    # errors
    'DelaunayError', 'DuplicatePointsError', 'CollinearPointsError',
    'InvalidTriangleError', 'NumericalError',
    # configuration / logging
    'TriangulationConfig', 'DEFAULT_CONFIG', 'configure_logging', 'get_logger',
    # tolerances
    'EPS_AREA', 'EPS_COLLINEAR', 'EPS_CIRCUMCIRCLE', 'EPS_SLOPE', 'EPS_ON_EDGE',
    # plotting
    'plot_triangulation',
    # submodules
    'constants', 'diagnostics', 'examples', 'geometry', 'incremental',
    'triangulation', 'voronoi', 'visualization',
]
