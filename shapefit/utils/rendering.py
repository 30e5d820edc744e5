"""Canvas rendering utilities.

Renders finished shapes and an optional in-progress path onto a Pillow
image, using the sketch canvas colours from shapefit.config.

Example usage::

    from shapefit.utils.rendering import render_canvas

    img = render_canvas(session.shapes, size=(640, 480))
    img.save('canvas.png')
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from ..config import (
    CANVAS_BACKGROUND,
    PENDING_COLOR,
    PENDING_WIDTH,
    SHAPE_COLOR,
    SHAPE_WIDTH,
)
from ..domain.geometry import as_path
from ..domain.shapes import Circle


def _draw_polyline(draw: ImageDraw.ImageDraw, points: np.ndarray, color: str, width: int) -> None:
    pts = as_path(points)
    if len(pts) == 0:
        return
    if len(pts) == 1:
        x, y = pts[0]
        draw.point((float(x), float(y)), fill=color)
        return
    draw.line([(float(x), float(y)) for x, y in pts], fill=color, width=width)


def render_canvas(shapes: Iterable, size: Tuple[int, int] = (640, 480),
                  pending: Optional[Sequence] = None) -> Image.Image:
    """Render DrawnShape objects (and an optional pending path) as an RGB image.

    Args:
        shapes: DrawnShape objects. Circles are drawn as true ellipses,
            everything else as its drawing polyline.
        size: (width, height) of the canvas in pixels.
        pending: Optional path of the drag in progress, drawn in red.

    Returns:
        PIL.Image in RGB mode.
    """
    img = Image.new('RGB', size, CANVAS_BACKGROUND)
    draw = ImageDraw.Draw(img)

    for shape in shapes:
        fit = getattr(shape, 'fit', None)
        if fit is not None and isinstance(fit.shape, Circle):
            c = fit.shape
            r = abs(c.radius)
            draw.ellipse([c.origin.x - r, c.origin.y - r, c.origin.x + r, c.origin.y + r],
                         outline=SHAPE_COLOR, width=SHAPE_WIDTH)
        else:
            _draw_polyline(draw, shape.drawing, SHAPE_COLOR, SHAPE_WIDTH)

    if pending is not None and len(pending) > 0:
        _draw_polyline(draw, as_path(pending), PENDING_COLOR, PENDING_WIDTH)

    return img
