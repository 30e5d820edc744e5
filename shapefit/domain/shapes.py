"""Parametric shapes recognized from drawn paths.

Each shape converts to and from the flat variable vector the optimizer
searches over, and produces a polyline for drawing:

    - Line: origin and direction angle, [ox, oy, angle]
    - Circle: origin and radius, [ox, oy, r]
    - OrientedRect: corner translation, size and rotation,
      [tx, ty, w, h, angle]

Example:
    >>> circle = Circle.from_vars([10.0, 20.0, 5.0])
    >>> round(circle.circumference, 3)
    31.416
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .geometry import Point, RigidTransform, as_path


@dataclass(frozen=True)
class Line:
    """Infinite line through origin along a unit direction."""
    origin: Point
    direction: Point

    @classmethod
    def from_vars(cls, variables: Sequence[float]) -> Line:
        return cls(Point(float(variables[0]), float(variables[1])),
                   Point.from_angle(float(variables[2])))

    @property
    def angle(self) -> float:
        return math.atan2(self.direction.y, self.direction.x)

    def to_vars(self) -> list[float]:
        return [self.origin.x, self.origin.y, self.angle]

    def to_drawing(self, points: np.ndarray) -> np.ndarray:
        """Segment covering the projections of points onto the line."""
        pts = as_path(points)
        d = np.array(self.direction.to_tuple())
        o = np.array(self.origin.to_tuple())
        t = (pts - o) @ d
        return np.array([o + d * t.min(), o + d * t.max()])


@dataclass(frozen=True)
class Circle:
    origin: Point
    radius: float

    @classmethod
    def from_vars(cls, variables: Sequence[float]) -> Circle:
        return cls(Point(float(variables[0]), float(variables[1])), float(variables[2]))

    @property
    def circumference(self) -> float:
        return 2.0 * math.pi * self.radius

    def to_vars(self) -> list[float]:
        return [self.origin.x, self.origin.y, self.radius]

    def to_drawing(self, n_pts: int = 64) -> np.ndarray:
        """Closed polygon approximating the circle."""
        t = np.linspace(0.0, 2.0 * math.pi, n_pts + 1)
        r = abs(self.radius)
        return np.column_stack([self.origin.x + r * np.cos(t),
                                self.origin.y + r * np.sin(t)])


@dataclass(frozen=True)
class OrientedRect:
    """Rectangle [0, w] x [0, h] in its own frame, rotated then translated."""
    translate: Point
    size: Point
    angle: float

    @classmethod
    def from_vars(cls, variables: Sequence[float]) -> OrientedRect:
        return cls(Point(float(variables[0]), float(variables[1])),
                   Point(float(variables[2]), float(variables[3])),
                   float(variables[4]))

    @property
    def transform(self) -> RigidTransform:
        return RigidTransform(self.translate, self.angle)

    @property
    def perimeter(self) -> float:
        return 2.0 * self.size.x + 2.0 * self.size.y

    def to_vars(self) -> list[float]:
        return [self.translate.x, self.translate.y, self.size.x, self.size.y, self.angle]

    def to_drawing(self) -> np.ndarray:
        """Closed 5-point outline in drawing coordinates."""
        w, h = self.size.x, self.size.y
        local = np.array([[0.0, 0.0], [w, 0.0], [w, h], [0.0, h], [0.0, 0.0]])
        return self.transform.apply(local)
