"""Utility functions for shape fitting.

Rendering utilities:
    render_canvas: Draw finished shapes and a pending path with Pillow.
"""

from .rendering import render_canvas

__all__ = ['render_canvas']
