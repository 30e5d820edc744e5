"""Shape fitting package.

Recognizes lines, circles and oriented rectangles in freehand-drawn paths
by minimizing per-shape cost functions with a Nelder-Mead simplex
optimizer.

The package is organized into the following modules:
    config: Default constants, OptimizerConfig and logging setup.
    domain: Geometric value objects (Point, BBox) and parametric shapes.
    optimization: Simplex data structure and the Nelder-Mead driver.
    fitting: Per-shape cost functions, fitters and the recognizer.
    drawing: Headless drag capture feeding the recognizer.
    utils: Canvas rendering with Pillow.

Example usage:
    Minimize a function::

        from shapefit import minimize

        result = minimize([0.0, 0.0], lambda v: (v[0] - 3) ** 2 + (v[1] + 1) ** 2)
        print(result.variables, result.cost, result.iterations)

    Recognize a drawn shape::

        from shapefit import create_default_recognizer

        fit = create_default_recognizer().recognize(points)
        if fit:
            print(fit.kind, fit.cost)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .config import OptimizerConfig, configure_logging
from .domain import BBox, Circle, Line, OrientedRect, Point
from .drawing import DrawingSession, DrawnShape
from .fitting import FitResult, ShapeRecognizer, create_default_recognizer
from .optimization import NelderMead, OptimizationResult, Simplex, minimize

__all__ = [
    # Configuration
    'OptimizerConfig', 'configure_logging',
    # Domain objects
    'Point', 'BBox', 'Line', 'Circle', 'OrientedRect',
    # Optimization
    'Simplex', 'NelderMead', 'OptimizationResult', 'minimize',
    # Fitting
    'FitResult', 'ShapeRecognizer', 'create_default_recognizer',
    'DrawingSession', 'DrawnShape',
]

__version__ = '1.0.0'
