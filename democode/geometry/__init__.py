"""Geometric value types."""

from .regular_polygon import RegularPolygon

__all__ = [
    'RegularPolygon',
]
