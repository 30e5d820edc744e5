"""Standard test objectives for exercising the optimizer."""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np


def sphere(x: np.ndarray) -> float:
    """Quadratic bowl sum(x_i^2), minimum 0 at the origin."""
    return float(np.dot(x, x))


def rosenbrock(x: np.ndarray) -> float:
    """Rosenbrock valley, minimum 0 at (1, ..., 1)."""
    x = np.asarray(x)
    return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))


def make_ackley(a: float = 20.0, b: float = 0.2,
                c: float = 2.0 * math.pi) -> Callable[[np.ndarray], float]:
    """Ackley function with many local minima, global minimum 0 at the origin."""
    def ackley(x: np.ndarray) -> float:
        x = np.asarray(x)
        n = len(x)
        sum_squares = float(np.dot(x, x))
        sum_cos = float(np.sum(np.cos(c * x)))
        return (-a * math.exp(-b * math.sqrt(sum_squares / n))
                - math.exp(sum_cos / n) + a + math.e)
    return ackley


BENCHMARKS: dict[str, Callable[[np.ndarray], float]] = {
    'sphere': sphere,
    'rosenbrock': rosenbrock,
    'ackley': make_ackley(),
}
