"""Geometric value objects and path helpers for shape fitting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Point:
        return Point(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def dot(self, other: Point) -> float:
        """Dot product treating points as vectors."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Length when treated as a vector from origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def orthogonal(self) -> Point:
        """Vector rotated a quarter turn counter-clockwise."""
        return Point(-self.y, self.x)

    def normalized(self) -> Point:
        """Unit vector in same direction."""
        length = self.length()
        if length < 0.0001:
            return Point(0.0, 0.0)
        return self / length

    def in_circle(self, center: Point, radius: float) -> bool:
        """True if strictly inside the circle around center."""
        dx = self.x - center.x
        dy = self.y - center.y
        return dx * dx + dy * dy < radius * radius

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [float(self.x), float(self.y)]

    @classmethod
    def from_angle(cls, angle: float) -> Point:
        """Unit vector at the given angle in radians."""
        return cls(math.cos(angle), math.sin(angle))

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> Point:
        return cls(float(t[0]), float(t[1]))


@dataclass(frozen=True)
class BBox:
    """Immutable bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def min_point(self) -> Point:
        return Point(self.x_min, self.y_min)

    @property
    def max_point(self) -> Point:
        return Point(self.x_max, self.y_max)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    @classmethod
    def from_points(cls, points: np.ndarray) -> BBox:
        """Create bounding box containing all points of an Nx2 array."""
        pts = as_path(points)
        if len(pts) == 0:
            return cls(0.0, 0.0, 0.0, 0.0)
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
        return cls(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))


@dataclass(frozen=True)
class RigidTransform:
    """Rotation by angle (radians) followed by translation.

    Maps local shape coordinates into drawing coordinates. The inverse maps
    drawing points back into the shape's frame, which is how the oriented
    rectangle cost measures distances.
    """
    translate: Point
    angle: float

    @property
    def matrix(self) -> np.ndarray:
        c = math.cos(self.angle)
        s = math.sin(self.angle)
        return np.array([[c, -s], [s, c]])

    def apply(self, points: np.ndarray) -> np.ndarray:
        """Transform an Nx2 array of local points."""
        pts = as_path(points)
        return pts @ self.matrix.T + np.array(self.translate.to_tuple())

    def apply_inverse(self, points: np.ndarray) -> np.ndarray:
        """Map an Nx2 array of drawing points into local coordinates."""
        pts = as_path(points)
        # Rotation inverse is its transpose
        return (pts - np.array(self.translate.to_tuple())) @ self.matrix


def as_path(points) -> np.ndarray:
    """Coerce points (Nx2 array, list of pairs or Points) into a float Nx2 array."""
    if isinstance(points, np.ndarray):
        arr = points.astype(np.float64, copy=False)
    else:
        pts = list(points)
        if pts and isinstance(pts[0], Point):
            arr = np.array([p.to_tuple() for p in pts], dtype=np.float64)
        else:
            arr = np.asarray(pts, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an Nx2 point array, got shape {arr.shape}")
    return arr


def centroid(points: np.ndarray) -> Point:
    """Mean of all points."""
    pts = as_path(points)
    if len(pts) == 0:
        raise ValueError("centroid of an empty path is undefined")
    c = pts.mean(axis=0)
    return Point(float(c[0]), float(c[1]))


def path_length(points: np.ndarray) -> float:
    """Total length of the polyline through the points."""
    pts = as_path(points)
    if len(pts) < 2:
        return 0.0
    return float(np.sum(np.linalg.norm(np.diff(pts, axis=0), axis=1)))
