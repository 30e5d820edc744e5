"""Cost functions for fitting shapes to a drawn path.

Every cost is a sum of squared point-to-shape distances, evaluated with
numpy over the whole Nx2 path at once. The make_*_cost factories bind a
path and return a function of the optimizer's flat variable vector.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from ..domain.geometry import as_path
from ..domain.shapes import Circle, Line, OrientedRect

VarsCost = Callable[[np.ndarray], float]


def sum_of_squares(distances: np.ndarray) -> float:
    return float(np.sum(np.square(distances)))


def line_distances(points: np.ndarray, line: Line) -> np.ndarray:
    """Signed perpendicular distances from points to the line."""
    normal = np.array(line.direction.orthogonal().to_tuple())
    return (points - np.array(line.origin.to_tuple())) @ normal


def circle_distances(points: np.ndarray, circle: Circle) -> np.ndarray:
    """Absolute distances from points to the circle outline."""
    radial = np.linalg.norm(points - np.array(circle.origin.to_tuple()), axis=1)
    return np.abs(radial - circle.radius)


def rect_distances(local_points: np.ndarray, width: float, height: float) -> np.ndarray:
    """Distances from points to the outline of the rectangle [0, w] x [0, h].

    Points outside the rectangle measure to the nearest edge or corner;
    points inside measure to the nearest edge.
    """
    x = local_points[:, 0]
    y = local_points[:, 1]
    side_x = np.where(x < 0, -1, np.where(x > width, 1, 0))
    side_y = np.where(y < 0, -1, np.where(y > height, 1, 0))

    dx = np.where(side_x < 0, -x, np.where(side_x > 0, x - width, 0.0))
    dy = np.where(side_y < 0, -y, np.where(side_y > 0, y - height, 0.0))
    outside = np.hypot(dx, dy)

    inside = np.minimum(np.minimum(x, y), np.minimum(width - x, height - y))
    return np.where((side_x == 0) & (side_y == 0), inside, outside)


def oriented_rect_distances(points: np.ndarray, rect: OrientedRect) -> np.ndarray:
    local = rect.transform.apply_inverse(points)
    return rect_distances(local, rect.size.x, rect.size.y)


def make_line_cost(points) -> VarsCost:
    pts = as_path(points)
    return lambda v: sum_of_squares(line_distances(pts, Line.from_vars(v)))


def make_circle_cost(points) -> VarsCost:
    pts = as_path(points)
    return lambda v: sum_of_squares(circle_distances(pts, Circle.from_vars(v)))


def make_rect_cost(points) -> VarsCost:
    pts = as_path(points)
    return lambda v: sum_of_squares(oriented_rect_distances(pts, OrientedRect.from_vars(v)))
