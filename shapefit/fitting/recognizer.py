"""Shape recognizer selecting the best fitter for a drawn path.

The recognizer runs every registered fitter on the path, drops the fits
that were rejected, and keeps the one with the lowest cost. That fit is
accepted only if its cost is within a per-point tolerance, so a scribble
that matches nothing well is left as a freehand path.

Example usage::

    from shapefit.fitting import create_default_recognizer

    recognizer = create_default_recognizer()
    fit = recognizer.recognize(path)
    print(fit.kind if fit else 'freehand')
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from ..config import PER_POINT_TOLERANCE
from ..domain.geometry import as_path
from .fitters import CircleFitter, FitResult, LineFitter, RectFitter, ShapeFitter

logger = logging.getLogger(__name__)


@dataclass
class ShapeRecognizer:
    """Runs fitters over a path and returns the best acceptable fit.

    Attributes:
        fitters: ShapeFitter instances to try, in order.
        per_point_tolerance: Accept the best fit only if its cost is below
            len(path) * per_point_tolerance ** 2.
        progress_callback: Optional function called after each fitter with
            (fit_or_None, fitter_kind).
    """
    fitters: list[ShapeFitter] = field(default_factory=list)
    per_point_tolerance: float = PER_POINT_TOLERANCE
    progress_callback: Callable[[FitResult | None, str], None] | None = None

    def acceptable_tolerance(self, points: np.ndarray) -> float:
        return len(points) * self.per_point_tolerance * self.per_point_tolerance

    def fit_all(self, points) -> list[FitResult]:
        """Run every fitter and return the fits that were not rejected."""
        pts = as_path(points)
        results = []
        for fitter in self.fitters:
            fit = fitter.fit(pts)
            if self.progress_callback:
                self.progress_callback(fit, fitter.kind)
            if fit is not None:
                results.append(fit)
        return results

    def recognize(self, points) -> FitResult | None:
        """Best fit by cost, or None if nothing fits within tolerance."""
        pts = as_path(points)
        if len(pts) < 2:
            return None

        results = self.fit_all(pts)
        if not results:
            logger.debug("no fitter accepted a path of %d points", len(pts))
            return None

        best = min(results, key=lambda r: r.cost)
        limit = self.acceptable_tolerance(pts)
        if best.cost < limit:
            logger.info("recognized %s (cost %.3f, limit %.3f)", best.kind, best.cost, limit)
            return best

        logger.debug("best fit %s rejected: cost %.3f >= limit %.3f", best.kind, best.cost, limit)
        return None

    def add_fitter(self, fitter: ShapeFitter) -> ShapeRecognizer:
        """Add a fitter (fluent interface)."""
        self.fitters.append(fitter)
        return self


def create_default_recognizer(
    progress_callback: Callable | None = None
) -> ShapeRecognizer:
    """Recognizer trying line, circle and rectangle in that order."""
    return ShapeRecognizer(
        fitters=[LineFitter(), CircleFitter(), RectFitter()],
        progress_callback=progress_callback,
    )
