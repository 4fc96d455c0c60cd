"""Planar geometry types, measurements, collection operations and WKB, GeoJSON and text conversion."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "planar",
    "wkb",
    "geojson",
    "aggregate",
    "text",
    "construct",
    "multi",
    "accessors",
]