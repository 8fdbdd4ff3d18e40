"""Matplotlib plotting of triangulations and their Voronoi duals."""
from __future__ import annotations

import os as _os
from typing import Iterable, Optional, Sequence

import matplotlib as _mpl
# Non-interactive backend in headless environments, before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from .diagnostics import triangles_to_arrays
from .geometry import Edge, PointLike, Triangle, as_point
from .logging_utils import get_logger

logger = get_logger('delaunay.viz')

__all__ = ['plot_triangulation']


def plot_triangulation(
    triangles: Sequence[Triangle],
    voronoi_edges: Optional[Iterable[Edge]] = None,
    points: Optional[Iterable[PointLike]] = None,
    outname: Optional[str] = None,
    ax=None,
    title: Optional[str] = None,
):
    """Draw ``triangles`` (and optionally Voronoi edges and extra points).

    Args:
        triangles: Delaunay triangles
        voronoi_edges: Voronoi segments drawn dashed in red
        points: input points; defaults to the triangle vertices
        outname: when given, the figure is saved there and closed
        ax: existing axes to draw into; a new figure is created otherwise
        title: optional axes title

    Returns the axes drawn into.
    """
    own_figure = ax is None
    if own_figure:
        fig, ax = plt.subplots(figsize=(6, 6))
    else:
        fig = ax.figure
    pts, tris = triangles_to_arrays(triangles)
    if tris.size:
        ax.triplot(pts[:, 0], pts[:, 1], tris, color='0.35', linewidth=0.8)
    if points is not None:
        extra = [as_point(p) for p in points]
        if extra:
            ax.scatter([p.x for p in extra], [p.y for p in extra], s=10, color='black', zorder=3)
    elif pts.size:
        ax.scatter(pts[:, 0], pts[:, 1], s=10, color='black', zorder=3)
    if voronoi_edges is not None:
        segs = [((e.p1.x, e.p1.y), (e.p2.x, e.p2.y)) for e in voronoi_edges]
        if segs:
            ax.add_collection(LineCollection(segs, colors='tab:red', linestyles='dashed', linewidths=0.8))
    ax.set_aspect('equal')
    if title:
        ax.set_title(title)
    if outname:
        fig.savefig(outname, dpi=150)
        logger.info("wrote %s", outname)
        if own_figure:
            plt.close(fig)
    return ax
