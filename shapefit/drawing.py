"""Headless drawing session.

DrawingSession reproduces the canvas interaction of a sketching app
without any UI: a drag records sample points (skipping samples that are
too close to the previous one), and releasing the drag hands the path to
the recognizer. The session keeps the finished shapes, either recognized
fits or raw freehand paths.

Example usage::

    from shapefit.drawing import DrawingSession

    session = DrawingSession()
    session.begin((0, 0))
    for x in range(10, 200, 10):
        session.move((x, 0))
    shape = session.end((200, 0))
    print(shape.kind)  # 'line'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .config import MIN_SAMPLE_SPACING
from .domain.geometry import Point
from .fitting.fitters import FitResult
from .fitting.recognizer import ShapeRecognizer, create_default_recognizer

logger = logging.getLogger(__name__)


@dataclass
class DrawnShape:
    """A finished drag: the recognized fit, or the raw path if none matched."""
    path: np.ndarray
    fit: FitResult | None = None

    @property
    def kind(self) -> str:
        return self.fit.kind if self.fit is not None else 'path'

    @property
    def drawing(self) -> np.ndarray:
        """Polyline to draw: the fitted outline or the raw path."""
        return self.fit.path if self.fit is not None else self.path

    def to_dict(self) -> dict:
        if self.fit is not None:
            return self.fit.to_dict()
        return {'kind': 'path', 'path': self.path.tolist()}


def _to_point(p: Point | Sequence[float]) -> Point:
    return p if isinstance(p, Point) else Point.from_tuple(p)


@dataclass
class DrawingSession:
    recognizer: ShapeRecognizer = field(default_factory=create_default_recognizer)
    min_spacing: float = MIN_SAMPLE_SPACING
    shapes: list[DrawnShape] = field(default_factory=list)
    _path: list[Point] | None = field(default=None, repr=False)

    @property
    def dragging(self) -> bool:
        return self._path is not None

    @property
    def pending(self) -> list[Point]:
        """Samples of the drag in progress."""
        return list(self._path) if self._path is not None else []

    def begin(self, p) -> None:
        self._path = [_to_point(p)]

    def move(self, p) -> bool:
        """Record a sample; returns True if it was far enough to be kept."""
        if self._path is None:
            return False
        point = _to_point(p)
        if point.in_circle(self._path[-1], self.min_spacing):
            return False
        self._path.append(point)
        return True

    def end(self, p=None) -> DrawnShape | None:
        """Finish the drag and recognize the recorded path."""
        if self._path is None:
            return None
        if p is not None:
            self._path.append(_to_point(p))

        path = np.array([q.to_tuple() for q in self._path], dtype=np.float64)
        self._path = None

        fit = self.recognizer.recognize(path)
        shape = DrawnShape(path=path, fit=fit)
        self.shapes.append(shape)
        logger.debug("drag of %d samples finished as %s", len(path), shape.kind)
        return shape

    def clear(self) -> None:
        self.shapes = []
