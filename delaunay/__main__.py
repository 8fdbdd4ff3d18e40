"""Command line demo: ``python -m delaunay``.

Triangulates a few example point sets, prints the triangles and times the
triangulation and Voronoi steps.
"""
from __future__ import annotations

import argparse
import sys
import time

from .core.examples import circle_points, random_points, square_with_center
from .core.logging_utils import configure_logging, get_logger
from .core.triangulation import triangulate
from .core.voronoi import voronoi_diagram

logger = get_logger('delaunay.cli')

DEMOS = ('square', 'circle', 'random')


def print_triangles(triangles, out=None):
    out = out or sys.stdout
    for i, tri in enumerate(triangles, start=1):
        c = tri.circumcenter
        print(f"Triangle {i}:", file=out)
        for k, p in enumerate(tri.vertices, start=1):
            print(f"  Point {k}: ({p.x}, {p.y})", file=out)
        print(f"  Area: {tri.area}", file=out)
        print(f"  Circumcenter: ({c.x}, {c.y})", file=out)
        print("", file=out)
    print(f"Total triangles: {len(triangles)}", file=out)


def _run(name, points, args):
    t0 = time.perf_counter()
    triangles = triangulate(points)
    t_tri = time.perf_counter() - t0
    t0 = time.perf_counter()
    edges = voronoi_diagram(triangles)
    t_vor = time.perf_counter() - t0

    print(f"\n{name}: {len(points)} points")
    if args.list:
        print_triangles(triangles)
    print(f"Triangulation completed in {t_tri:.6f} seconds, {len(triangles)} triangles")
    print(f"Voronoi diagram completed in {t_vor:.6f} seconds, {len(edges)} edges")

    if args.plot:
        from .core.visualization import plot_triangulation
        outname = args.plot if len(args.demo) == 1 else f"{name}_{args.plot}"
        plot_triangulation(triangles, edges, points=points, outname=outname, title=name)
    return triangles, edges


def build_parser():
    ap = argparse.ArgumentParser(prog='delaunay', description='Delaunay triangulation demo')
    ap.add_argument('--demo', choices=DEMOS + ('all',), default='all')
    ap.add_argument('--count', type=int, default=10, help='number of points for circle/random demos')
    ap.add_argument('--seed', type=int, default=42, help='seed for the random demo')
    ap.add_argument('--no-list', dest='list', action='store_false', help='do not print triangle listings')
    ap.add_argument('--plot', default=None, help='save a PNG of each demo to this path')
    ap.add_argument('--log-level', default='WARNING')
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    args.demo = list(DEMOS) if args.demo == 'all' else [args.demo]
    sets = {
        'square': lambda: square_with_center(),
        'circle': lambda: circle_points(args.count),
        'random': lambda: random_points(args.count, seed=args.seed),
    }
    print("Delaunay Triangulation Demo")
    print("===========================")
    for name in args.demo:
        _run(name, sets[name](), args)
    print("\nDemo completed successfully!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
