"""Unit tests for geometry value objects and path helpers.

Tests shapefit.domain.geometry and shapefit.domain.shapes:
    - Point vector operations
    - BBox construction from paths
    - RigidTransform forward and inverse mapping
    - as_path, centroid, path_length
    - Shape conversions to and from optimizer variables
"""

import math
import unittest

import numpy as np

from shapefit.domain.geometry import BBox, Point, RigidTransform, as_path, centroid, path_length
from shapefit.domain.shapes import Circle, Line, OrientedRect


class TestPoint(unittest.TestCase):

    def test_arithmetic(self):
        a = Point(1.0, 2.0)
        b = Point(3.0, -1.0)
        self.assertEqual(a + b, Point(4.0, 1.0))
        self.assertEqual(a - b, Point(-2.0, 3.0))
        self.assertEqual(a * 2, Point(2.0, 4.0))
        self.assertEqual(-a, Point(-1.0, -2.0))

    def test_distance(self):
        """Distance along diagonal (3-4-5 triangle)."""
        self.assertEqual(Point(0, 0).distance_to(Point(3, 4)), 5.0)

    def test_orthogonal_is_perpendicular(self):
        v = Point(3.0, 4.0)
        self.assertEqual(v.dot(v.orthogonal()), 0.0)
        self.assertEqual(v.orthogonal(), Point(-4.0, 3.0))

    def test_from_angle(self):
        v = Point.from_angle(math.pi / 2)
        self.assertAlmostEqual(v.x, 0.0)
        self.assertAlmostEqual(v.y, 1.0)

    def test_in_circle_is_strict(self):
        self.assertTrue(Point(5.9, 0).in_circle(Point(0, 0), 6.0))
        self.assertFalse(Point(6.0, 0).in_circle(Point(0, 0), 6.0))

    def test_normalized_zero_vector(self):
        self.assertEqual(Point(0, 0).normalized(), Point(0.0, 0.0))


class TestBBox(unittest.TestCase):

    def test_from_points(self):
        bbox = BBox.from_points(np.array([[1.0, 5.0], [-2.0, 3.0], [4.0, 8.0]]))
        self.assertEqual(bbox.to_tuple(), (-2.0, 3.0, 4.0, 8.0))
        self.assertEqual(bbox.width, 6.0)
        self.assertEqual(bbox.height, 5.0)

    def test_empty(self):
        self.assertEqual(BBox.from_points([]).to_tuple(), (0.0, 0.0, 0.0, 0.0))


class TestRigidTransform(unittest.TestCase):

    def test_quarter_turn_then_translate(self):
        t = RigidTransform(Point(10.0, 0.0), math.pi / 2)
        out = t.apply(np.array([[1.0, 0.0]]))
        np.testing.assert_allclose(out, [[10.0, 1.0]], atol=1e-12)

    def test_inverse_undoes_apply(self):
        t = RigidTransform(Point(-3.0, 7.5), 0.7)
        pts = np.array([[0.0, 0.0], [2.0, -1.0], [5.0, 4.0]])
        np.testing.assert_allclose(t.apply_inverse(t.apply(pts)), pts, atol=1e-12)


class TestPathHelpers(unittest.TestCase):

    def test_as_path_accepts_points_and_pairs(self):
        np.testing.assert_array_equal(as_path([Point(1, 2), Point(3, 4)]), [[1, 2], [3, 4]])
        np.testing.assert_array_equal(as_path([(1, 2)]), [[1.0, 2.0]])
        self.assertEqual(as_path([]).shape, (0, 2))

    def test_as_path_rejects_bad_shape(self):
        with self.assertRaises(ValueError):
            as_path([1.0, 2.0, 3.0])

    def test_centroid(self):
        self.assertEqual(centroid([(0, 0), (4, 0), (4, 2), (0, 2)]), Point(2.0, 1.0))

    def test_centroid_empty_raises(self):
        with self.assertRaises(ValueError):
            centroid([])

    def test_path_length(self):
        self.assertEqual(path_length([(0, 0), (3, 4), (3, 10)]), 11.0)
        self.assertEqual(path_length([(1, 1)]), 0.0)


class TestShapes(unittest.TestCase):

    def test_line_from_vars(self):
        line = Line.from_vars([1.0, 2.0, 0.0])
        self.assertEqual(line.origin, Point(1.0, 2.0))
        self.assertAlmostEqual(line.direction.x, 1.0)
        self.assertAlmostEqual(line.to_vars()[2], 0.0)

    def test_line_drawing_spans_projections(self):
        line = Line.from_vars([0.0, 0.0, 0.0])
        seg = line.to_drawing(np.array([[5.0, 3.0], [-2.0, -1.0], [1.0, 0.0]]))
        np.testing.assert_allclose(seg, [[-2.0, 0.0], [5.0, 0.0]])

    def test_circle_circumference(self):
        self.assertAlmostEqual(Circle(Point(0, 0), 1.0).circumference, 2 * math.pi)

    def test_circle_drawing_is_closed(self):
        pts = Circle(Point(1.0, 1.0), 2.0).to_drawing(n_pts=16)
        self.assertEqual(len(pts), 17)
        np.testing.assert_allclose(pts[0], pts[-1], atol=1e-12)
        np.testing.assert_allclose(np.linalg.norm(pts - [1.0, 1.0], axis=1), 2.0)

    def test_rect_drawing(self):
        rect = OrientedRect.from_vars([10.0, 20.0, 4.0, 2.0, 0.0])
        self.assertEqual(rect.perimeter, 12.0)
        np.testing.assert_allclose(rect.to_drawing(),
                                   [[10, 20], [14, 20], [14, 22], [10, 22], [10, 20]])


if __name__ == '__main__':
    unittest.main()
