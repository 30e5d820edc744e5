"""Configuration and logging setup for shape fitting.

This module centralizes the default values used across the package:

    - Nelder-Mead coefficients and stopping criteria
    - Acceptance thresholds for the shape fitters
    - Drawing session sample spacing and canvas colours

It also provides OptimizerConfig, the per-call configuration record passed
into the optimizer, and configure_logging for applications and the CLI.

Example usage:
    Configure logging at startup::

        from shapefit.config import configure_logging
        configure_logging(level='DEBUG')

    Override a few optimizer settings::

        from shapefit.config import OptimizerConfig
        config = OptimizerConfig(max_iterations=500, tolerance=1e-6)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .optimization.optimizer import IterationEvent

logger = logging.getLogger(__name__)

# --- Nelder-Mead defaults ---
DEFAULT_MAX_ITERATIONS = 10000
DEFAULT_TOLERANCE = 0.001
DEFAULT_RHO = 1.0    # reflection
DEFAULT_CHI = 2.0    # expansion
DEFAULT_GAMMA = 0.5  # contraction
DEFAULT_SIGMA = 0.5  # shrink

# Initial step per dimension: STEP_FRACTION * |x| + STEP_EPSILON
STEP_FRACTION = 0.05
STEP_EPSILON = 0.00025

# --- Shape fitting ---
FIT_MAX_ITERATIONS = 1000
PATH_LENGTH_RATIO_TOLERANCE = 0.15  # |path_len / outline_len - 1| must be below this
MIN_CIRCUMFERENCE = 10.0
MIN_RECT_SIDE = 6.0
PER_POINT_TOLERANCE = 6.0  # recognizer accepts cost < n_points * this**2

# --- Drawing session / canvas ---
MIN_SAMPLE_SPACING = 6.0
CANVAS_BACKGROUND = '#C1FFC9'
SHAPE_COLOR = '#000000'
SHAPE_WIDTH = 2
PENDING_COLOR = '#FF0000'
PENDING_WIDTH = 3


@dataclass(frozen=True)
class OptimizerConfig:
    """Settings for a single Nelder-Mead run.

    Attributes:
        max_iterations: Hard cap on the number of iterations.
        tolerance: Stop once the best cost drops below this value.
        rho: Reflection coefficient.
        chi: Expansion coefficient.
        gamma: Contraction coefficient.
        sigma: Shrink coefficient.
        debug: Emit an IterationEvent for every iteration. Without a trace
            sink the events go to the optimizer logger at DEBUG level.
        trace: Optional sink receiving an IterationEvent per iteration.
            Setting a sink enables tracing regardless of debug.
    """
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    tolerance: float = DEFAULT_TOLERANCE
    rho: float = DEFAULT_RHO
    chi: float = DEFAULT_CHI
    gamma: float = DEFAULT_GAMMA
    sigma: float = DEFAULT_SIGMA
    debug: bool = False
    trace: Callable[[IterationEvent], Any] | None = None

    def __post_init__(self) -> None:
        if self.max_iterations < 0:
            raise ValueError(f"max_iterations must be >= 0, got {self.max_iterations}")
        if self.rho <= 0:
            raise ValueError(f"rho must be positive, got {self.rho}")
        if self.chi <= 1 or self.chi < self.rho:
            raise ValueError(f"chi must be > 1 and >= rho, got {self.chi}")
        if not (0 < self.gamma < 1):
            raise ValueError(f"gamma must be in (0, 1), got {self.gamma}")
        if not (0 < self.sigma < 1):
            raise ValueError(f"sigma must be in (0, 1), got {self.sigma}")

    @property
    def tracing(self) -> bool:
        return self.debug or self.trace is not None

    def should_stop(self, iterations: int, best_cost: float) -> bool:
        """Default stopping predicate: iteration cap or cost below tolerance."""
        return iterations >= self.max_iterations or best_cost < self.tolerance


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Configure application-wide logging.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger('PIL').setLevel(logging.WARNING)

    logger.debug("Logging configured: level=%s, file=%s", level, log_file or 'stderr')
