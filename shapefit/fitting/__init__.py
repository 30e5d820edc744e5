"""Fitting geometric shapes to freehand paths.

The module exports the following:

Fitters:
    ShapeFitter: Protocol for fitters.
    FitResult: Accepted fit with shape, cost and drawable path.
    LineFitter, CircleFitter, RectFitter: Concrete fitters.

Recognizer:
    ShapeRecognizer: Picks the lowest-cost acceptable fit.
    create_default_recognizer: Recognizer with all three fitters.

Example usage::

    from shapefit.fitting import create_default_recognizer

    fit = create_default_recognizer().recognize([(0, 0), (50, 1), (100, 0)])
    if fit:
        print(fit.kind, fit.path)
"""

from .fitters import CircleFitter, FitResult, LineFitter, RectFitter, ShapeFitter
from .recognizer import ShapeRecognizer, create_default_recognizer

__all__ = [
    'ShapeFitter', 'FitResult',
    'LineFitter', 'CircleFitter', 'RectFitter',
    'ShapeRecognizer', 'create_default_recognizer',
]
