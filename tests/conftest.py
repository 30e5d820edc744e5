"""Shared pytest fixtures for the shapefit test suite.

Fixtures:
    circle_path: Closed path sampled on a circle (center (200, 150), r=60)
    rect_path: Closed path along an axis-aligned 200x120 rectangle
    line_path: Collinear samples along a 30 degree line
    zigzag_path: Scribble that should not be recognized as any shape

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import math
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def sample_circle(cx=200.0, cy=150.0, r=60.0, n=64):
    t = np.linspace(0.0, 2.0 * math.pi, n + 1)
    return np.column_stack([cx + r * np.cos(t), cy + r * np.sin(t)])


def sample_rect(x0=100.0, y0=100.0, w=200.0, h=120.0, spacing=6.0):
    corners = [(x0, y0), (x0 + w, y0), (x0 + w, y0 + h), (x0, y0 + h), (x0, y0)]
    pts = []
    for (ax, ay), (bx, by) in zip(corners[:-1], corners[1:]):
        steps = max(1, int(math.hypot(bx - ax, by - ay) / spacing))
        for k in range(steps):
            t = k / steps
            pts.append((ax + t * (bx - ax), ay + t * (by - ay)))
    pts.append(corners[-1])
    return np.array(pts)


def sample_line(x0=50.0, y0=60.0, angle=math.pi / 6, length=200.0, n=30):
    t = np.linspace(0.0, length, n)
    return np.column_stack([x0 + t * math.cos(angle), y0 + t * math.sin(angle)])


@pytest.fixture
def circle_path():
    return sample_circle()


@pytest.fixture
def rect_path():
    return sample_rect()


@pytest.fixture
def line_path():
    return sample_line()


@pytest.fixture
def zigzag_path():
    xs = np.arange(0.0, 200.0, 10.0)
    ys = np.where(np.arange(len(xs)) % 2 == 0, 0.0, 100.0)
    return np.column_stack([xs, ys])
