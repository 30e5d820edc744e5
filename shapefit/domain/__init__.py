"""Domain objects for shape fitting.

Geometry classes:
    Point: Immutable 2D point with vector operations.
    BBox: Immutable axis-aligned bounding box.
    RigidTransform: Rotation followed by translation.

Shape classes:
    Line, Circle, OrientedRect: Parametric shapes with conversions to and
        from the optimizer's flat variable vector.

Path helpers:
    as_path, centroid, path_length

Example usage::

    from shapefit.domain import BBox, centroid, path_length

    path = [(0, 0), (10, 0), (10, 10)]
    print(centroid(path), path_length(path), BBox.from_points(path))
"""

from .geometry import BBox, Point, RigidTransform, as_path, centroid, path_length
from .shapes import Circle, Line, OrientedRect

__all__ = [
    'Point', 'BBox', 'RigidTransform',
    'as_path', 'centroid', 'path_length',
    'Line', 'Circle', 'OrientedRect',
]
