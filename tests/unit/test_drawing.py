"""Unit tests for DrawingSession and canvas rendering."""

import unittest

import numpy as np

from shapefit.domain.geometry import Point
from shapefit.drawing import DrawingSession, DrawnShape
from shapefit.fitting import ShapeRecognizer
from shapefit.utils.rendering import render_canvas

from conftest import sample_circle


class TestDrawingSession(unittest.TestCase):

    def test_close_samples_are_dropped(self):
        session = DrawingSession()
        session.begin((0.0, 0.0))
        self.assertFalse(session.move((3.0, 0.0)))
        self.assertTrue(session.move((6.0, 0.0)))
        self.assertFalse(session.move((8.0, 1.0)))
        self.assertEqual(session.pending, [Point(0.0, 0.0), Point(6.0, 0.0)])

    def test_move_without_begin_is_ignored(self):
        session = DrawingSession()
        self.assertFalse(session.move((10.0, 10.0)))
        self.assertFalse(session.dragging)

    def test_end_without_begin(self):
        self.assertIsNone(DrawingSession().end((1.0, 1.0)))

    def test_straight_drag_becomes_line(self):
        session = DrawingSession()
        session.begin((0.0, 50.0))
        for x in range(2, 200, 2):
            session.move((float(x), 50.0))
        shape = session.end((200.0, 50.0))

        self.assertEqual(shape.kind, 'line')
        self.assertFalse(session.dragging)
        self.assertEqual(session.shapes, [shape])
        self.assertEqual(shape.path[-1].tolist(), [200.0, 50.0])

    def test_circle_drag(self):
        session = DrawingSession()
        pts = sample_circle(n=64)
        session.begin(pts[0])
        for p in pts[1:-1]:
            session.move(p)
        shape = session.end(pts[-1])
        self.assertEqual(shape.kind, 'circle')

    def test_unrecognized_drag_keeps_raw_path(self):
        session = DrawingSession(recognizer=ShapeRecognizer())
        session.begin((0.0, 0.0))
        session.move((50.0, 10.0))
        shape = session.end((100.0, 0.0))

        self.assertEqual(shape.kind, 'path')
        self.assertIsNone(shape.fit)
        np.testing.assert_array_equal(shape.drawing, shape.path)
        self.assertEqual(shape.to_dict()['kind'], 'path')

    def test_clear(self):
        session = DrawingSession(recognizer=ShapeRecognizer())
        session.begin((0.0, 0.0))
        session.end((10.0, 0.0))
        session.clear()
        self.assertEqual(session.shapes, [])


class TestRenderCanvas(unittest.TestCase):

    def test_background_and_size(self):
        img = render_canvas([], size=(40, 30))
        self.assertEqual(img.size, (40, 30))
        self.assertEqual(img.getpixel((0, 0)), (0xC1, 0xFF, 0xC9))

    def test_shapes_black_and_pending_red(self):
        session = DrawingSession()
        pts = sample_circle(cx=100.0, cy=100.0, r=40.0, n=48)
        session.begin(pts[0])
        for p in pts[1:]:
            session.move(p)
        session.end()
        raw = DrawnShape(path=np.array([[10.0, 190.0], [190.0, 190.0]]))

        img = render_canvas(session.shapes + [raw], size=(200, 200),
                            pending=[(10.0, 10.0), (190.0, 10.0)])
        pixels = np.array(img).reshape(-1, 3)

        self.assertTrue(np.any(np.all(pixels == [0, 0, 0], axis=1)))
        self.assertTrue(np.any(np.all(pixels == [255, 0, 0], axis=1)))
        column = np.array(img)[:, 100]
        self.assertTrue(any(tuple(c) == (0, 0, 0) for c in column[186:195]))
        self.assertTrue(any(tuple(c) == (255, 0, 0) for c in column[6:15]))


if __name__ == '__main__':
    unittest.main()
