"""Geometry for 2D scenes: shapes, .geo files, SVG output and visibility sweep parts."""

__version__ = "0.1.0"

__all__ = [
    "active_segments",
    "geo",
    "geometry",
    "point",
    "segment",
    "shapes",
    "sourcefile",
]