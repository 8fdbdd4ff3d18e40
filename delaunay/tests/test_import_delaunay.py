"""Smoke test to ensure top-level package import works and exposes the
flat API layer (`delaunay/__init__.py`).
"""
import sys


def test_import_delaunay_smoke():
    import delaunay  # noqa: F401
    assert hasattr(delaunay, 'triangulate')
    assert hasattr(delaunay, 'voronoi_diagram')
    assert hasattr(delaunay, 'Point')
    assert isinstance(delaunay.__version__, str)


def test_visualization_is_lazy():
    import delaunay
    # plotting resolves through the proxy on first attribute access
    assert callable(delaunay.visualization.plot_triangulation)
    assert 'delaunay.core.visualization' in sys.modules
