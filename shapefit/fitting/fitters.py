"""Shape fitter implementations.

Each fitter builds a cost function and an initial guess for one kind of
shape, runs the Nelder-Mead optimizer, and applies a geometric acceptance
check on the fitted shape. Rejected fits return None rather than raising.

The module provides the following classes:
    FitResult: Data class describing an accepted fit.
    ShapeFitter: Protocol defining the fitter interface.
    LineFitter: Straight line through the path.
    CircleFitter: Circle whose circumference matches the path length.
    RectFitter: Oriented rectangle whose perimeter matches the path length.

Example usage::

    from shapefit.fitting.fitters import CircleFitter

    fit = CircleFitter().fit(points)
    if fit is not None:
        print(fit.kind, fit.cost, fit.shape.radius)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Union

import numpy as np

from ..config import (
    FIT_MAX_ITERATIONS,
    MIN_CIRCUMFERENCE,
    MIN_RECT_SIDE,
    PATH_LENGTH_RATIO_TOLERANCE,
    OptimizerConfig,
)
from ..domain.geometry import BBox, as_path, centroid, path_length
from ..domain.shapes import Circle, Line, OrientedRect
from ..optimization.optimizer import OptimizationResult, minimize
from .costs import make_circle_cost, make_line_cost, make_rect_cost

logger = logging.getLogger(__name__)

Shape = Union[Line, Circle, OrientedRect]


@dataclass
class FitResult:
    """An accepted shape fit.

    Attributes:
        kind: 'line', 'circle' or 'rect'.
        shape: The fitted shape value object.
        cost: Optimizer cost of the fit (sum of squared distances).
        path: Nx2 polyline for drawing the fitted shape.
        iterations: Optimizer iterations used.
    """
    kind: str
    shape: Shape
    cost: float
    path: np.ndarray
    iterations: int = 0

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            'kind': self.kind,
            'params': [float(v) for v in self.shape.to_vars()],
            'cost': float(self.cost),
            'iterations': self.iterations,
            'path': self.path.tolist(),
        }


class ShapeFitter(Protocol):
    """Protocol for shape fitters.

    Fitters take an Nx2 path and return a FitResult, or None when the
    fitted shape does not plausibly match the drawing.
    """

    kind: str

    def fit(self, points: np.ndarray) -> FitResult | None:
        ...


def path_length_matches(points: np.ndarray, outline_length: float) -> bool:
    """True if the drawn path length is within tolerance of the outline length."""
    if outline_length == 0:
        return False
    ratio = path_length(points) / outline_length
    return abs(ratio - 1.0) < PATH_LENGTH_RATIO_TOLERANCE


@dataclass
class LineFitter:
    """Fit an infinite line, drawn as the segment spanned by the path.

    Lines are never rejected; the recognizer compares their cost.
    """
    max_iterations: int = FIT_MAX_ITERATIONS
    kind: str = 'line'

    def optimize(self, points: np.ndarray) -> OptimizationResult:
        c = centroid(points)
        initial = [c.x, c.y, 0.0]
        return minimize(initial, make_line_cost(points),
                        OptimizerConfig(max_iterations=self.max_iterations))

    def fit(self, points) -> FitResult | None:
        pts = as_path(points)
        if len(pts) < 2:
            return None
        result = self.optimize(pts)
        line = Line.from_vars(result.variables)
        return FitResult(self.kind, line, result.cost, line.to_drawing(pts), result.iterations)


@dataclass
class CircleFitter:
    """Fit a circle, rejecting tiny circles and path length mismatches."""
    max_iterations: int = FIT_MAX_ITERATIONS
    kind: str = 'circle'

    def optimize(self, points: np.ndarray) -> OptimizationResult:
        c = centroid(points)
        bbox = BBox.from_points(points)
        initial = [c.x, c.y, max(bbox.width, bbox.height)]
        return minimize(initial, make_circle_cost(points),
                        OptimizerConfig(max_iterations=self.max_iterations))

    def matches(self, points: np.ndarray, circle: Circle) -> bool:
        circumference = circle.circumference
        if circumference < MIN_CIRCUMFERENCE:
            logger.debug("circle rejected: circumference %.2f too small", circumference)
            return False
        if not path_length_matches(points, circumference):
            logger.debug("circle rejected: path length %.2f vs circumference %.2f",
                         path_length(points), circumference)
            return False
        return True

    def fit(self, points) -> FitResult | None:
        pts = as_path(points)
        if len(pts) < 2:
            return None
        result = self.optimize(pts)
        circle = Circle.from_vars(result.variables)
        if not self.matches(pts, circle):
            return None
        return FitResult(self.kind, circle, result.cost, circle.to_drawing(), result.iterations)


@dataclass
class RectFitter:
    """Fit an oriented rectangle, rejecting thin rectangles and length mismatches."""
    max_iterations: int = FIT_MAX_ITERATIONS
    kind: str = 'rect'

    def optimize(self, points: np.ndarray) -> OptimizationResult:
        bbox = BBox.from_points(points)
        initial = [bbox.x_min, bbox.y_min, bbox.width, bbox.height, 0.0]
        return minimize(initial, make_rect_cost(points),
                        OptimizerConfig(max_iterations=self.max_iterations))

    def matches(self, points: np.ndarray, rect: OrientedRect) -> bool:
        if rect.size.x < MIN_RECT_SIDE or rect.size.y < MIN_RECT_SIDE:
            logger.debug("rect rejected: size %.2f x %.2f too small", rect.size.x, rect.size.y)
            return False
        if not path_length_matches(points, rect.perimeter):
            logger.debug("rect rejected: path length %.2f vs perimeter %.2f",
                         path_length(points), rect.perimeter)
            return False
        return True

    def fit(self, points) -> FitResult | None:
        pts = as_path(points)
        if len(pts) < 2:
            return None
        result = self.optimize(pts)
        rect = OrientedRect.from_vars(result.variables)
        if not self.matches(pts, rect):
            return None
        return FitResult(self.kind, rect, result.cost, rect.to_drawing(), result.iterations)
