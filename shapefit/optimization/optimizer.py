"""Nelder-Mead optimizer driver.

This module runs the Nelder-Mead iteration over a Simplex. The driver owns
four scratch vertices (centroid, reflected, expanded, contracted) that are
reused every iteration and never exposed to callers.

Each iteration reflects the worst vertex through the centroid of the
others, then decides between expansion, plain reflection, outside or
inside contraction, or shrinking the whole simplex toward the best vertex.
The run stops when the stopping predicate holds; the default predicate
stops at max_iterations or once the best cost is below tolerance.

Example usage:
    Minimize a function from an initial guess::

        from shapefit.optimization import minimize

        result = minimize([0.0, 0.0], lambda v: (v[0] - 3) ** 2 + (v[1] + 1) ** 2)
        print(result.variables, result.cost, result.iterations)

    Trace the operation chosen each iteration::

        from shapefit.config import OptimizerConfig

        events = []
        result = minimize([1.0], lambda v: v[0] ** 2,
                          OptimizerConfig(trace=events.append))
        print([e.operation.value for e in events])
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from ..config import STEP_EPSILON, STEP_FRACTION, OptimizerConfig
from .simplex import CostFunction, Simplex, SimplexVertex

logger = logging.getLogger(__name__)

StopPredicate = Callable[[int, float], bool]


class Operation(Enum):
    """Simplex update chosen by one iteration."""
    EXPAND = 'expand'
    REFLECT = 'reflect'
    CONTRACT_OUTSIDE = 'contract_outside'
    CONTRACT_INSIDE = 'contract_inside'
    SHRINK = 'shrink'


@dataclass(frozen=True)
class IterationEvent:
    """Trace record emitted after each iteration."""
    iteration: int
    operation: Operation
    best_cost: float
    best: np.ndarray


@dataclass
class OptimizationResult:
    """Outcome of a Nelder-Mead run.

    Attributes:
        variables: Copy of the best vertex coordinates.
        cost: Cost at variables.
        iterations: Number of completed iterations.
        converged: Whether cost fell below the configured tolerance. A run
            that hit max_iterations instead still returns its best vertex.
    """
    variables: np.ndarray
    cost: float
    iterations: int
    converged: bool = False

    def to_dict(self) -> dict:
        return {
            'variables': [float(x) for x in self.variables],
            'cost': float(self.cost),
            'iterations': self.iterations,
            'converged': self.converged,
        }


def guess_step_sizes(initial: Sequence[float]) -> np.ndarray:
    """Default per-dimension step: 5% of |x| plus a small epsilon for zeros."""
    x0 = np.asarray(initial, dtype=np.float64)
    return STEP_FRACTION * np.abs(x0) + STEP_EPSILON


def _log_event(event: IterationEvent) -> None:
    logger.debug("iteration %d: %s best=%s cost=%g", event.iteration,
                 event.operation.value, event.best.tolist(), event.best_cost)


class NelderMead:
    """Stateful Nelder-Mead run over one Simplex.

    Call start() once to evaluate the initial simplex, then step() per
    iteration, or run() to loop until the stopping predicate holds.

    Attributes:
        cost_fn: Objective mapping a coordinate array to a float. Called
            sequentially; the array passed in must not be kept or mutated.
        simplex: The simplex being evolved. Ascending by cost between steps.
        config: OptimizerConfig with coefficients and stopping settings.
        iterations: Completed iterations so far.
    """

    def __init__(self, cost_fn: CostFunction, simplex: Simplex,
                 config: OptimizerConfig | None = None) -> None:
        self.cost_fn = cost_fn
        self.simplex = simplex
        self.config = config or OptimizerConfig()
        self.iterations = 0
        self.evaluations = 0
        self._started = False

        n = simplex.dimension
        self._centroid = SimplexVertex.zeros(n)
        self._reflected = SimplexVertex.zeros(n)
        self._expanded = SimplexVertex.zeros(n)
        self._contracted = SimplexVertex.zeros(n)

        if self.config.trace is not None:
            self._trace = self.config.trace
        elif self.config.debug:
            self._trace = _log_event
        else:
            self._trace = None

    def _cost(self, vertex: SimplexVertex) -> float:
        self.evaluations += 1
        return vertex.evaluate(self.cost_fn)

    def start(self) -> None:
        """Evaluate all vertices, sort them and compute the first centroid."""
        for vertex in self.simplex.vertices:
            self._cost(vertex)
        self.simplex.sort()
        self.simplex.centroid(self._centroid)
        self._started = True

    def step(self) -> Operation:
        """Run a single iteration and return the operation applied."""
        if not self._started:
            self.start()

        cfg = self.config
        simplex = self.simplex
        best = simplex.best
        worst = simplex.worst

        reflected = simplex.new_point(self._centroid, cfg.rho, self._reflected)
        self._cost(reflected)

        op: Operation
        if reflected.cost < best.cost:
            expanded = simplex.new_point(self._centroid, cfg.rho * cfg.chi, self._expanded)
            self._cost(expanded)
            if expanded.cost < reflected.cost:
                op = Operation.EXPAND
                simplex.replace_worst(expanded)
            else:
                op = Operation.REFLECT
                simplex.replace_worst(reflected)
        elif reflected.cost < simplex.second_worst.cost:
            op = Operation.REFLECT
            simplex.replace_worst(reflected)
        elif reflected.cost < worst.cost:
            contracted = simplex.new_point(self._centroid, cfg.rho * cfg.gamma, self._contracted)
            self._cost(contracted)
            if contracted.cost <= reflected.cost:
                op = Operation.CONTRACT_OUTSIDE
                simplex.replace_worst(contracted)
            else:
                op = Operation.SHRINK
        else:
            contracted = simplex.new_point(self._centroid, -cfg.gamma, self._contracted)
            self._cost(contracted)
            if contracted.cost < worst.cost:
                op = Operation.CONTRACT_INSIDE
                simplex.replace_worst(contracted)
            else:
                op = Operation.SHRINK

        if op is Operation.SHRINK:
            simplex.shrink(cfg.sigma)
            for vertex in simplex.vertices:
                self._cost(vertex)
            simplex.sort()
        else:
            simplex.restore_order()

        simplex.centroid(self._centroid)
        self.iterations += 1

        if self._trace is not None:
            self._trace(IterationEvent(
                iteration=self.iterations,
                operation=op,
                best_cost=simplex.best.cost,
                best=simplex.best.point.copy(),
            ))
        return op

    def run(self, stop: StopPredicate | None = None) -> OptimizationResult:
        """Iterate until stop(iterations, best_cost) holds.

        The predicate is checked before each iteration, after the initial
        evaluation pass. Defaults to the config's predicate.
        """
        if stop is None:
            stop = self.config.should_stop
        if not self._started:
            self.start()

        while not stop(self.iterations, self.simplex.best.cost):
            self.step()

        return self.result()

    def result(self) -> OptimizationResult:
        best = self.simplex.best
        return OptimizationResult(
            variables=best.point.copy(),
            cost=best.cost,
            iterations=self.iterations,
            converged=bool(best.cost < self.config.tolerance),
        )


def minimize(initial: Sequence[float], cost_fn: CostFunction,
             config: OptimizerConfig | None = None,
             step_sizes: Sequence[float] | None = None) -> OptimizationResult:
    """Minimize cost_fn with Nelder-Mead starting from initial.

    Args:
        initial: Initial guess, n real numbers (n >= 1).
        cost_fn: Objective mapping an n-vector to a float.
        config: Optimizer settings; defaults to OptimizerConfig().
        step_sizes: Per-dimension offsets used to build the initial simplex.
            Defaults to guess_step_sizes(initial). Every entry should be
            nonzero.

    Returns:
        OptimizationResult with the best point found. Non-convergence is
        reported through cost and converged, never by raising.

    Raises:
        ValueError: If initial is empty or step_sizes has the wrong length.
    """
    x0 = np.asarray(initial, dtype=np.float64).ravel()
    if x0.size == 0:
        raise ValueError("initial guess must have at least one variable")
    steps = guess_step_sizes(x0) if step_sizes is None else np.asarray(step_sizes, dtype=np.float64)

    simplex = Simplex.around(x0, steps)
    optimizer = NelderMead(cost_fn, simplex, config)
    result = optimizer.run()
    if optimizer.config.tracing:
        logger.debug("finished after %d iterations (%d evaluations), cost=%g",
                     result.iterations, optimizer.evaluations, result.cost)
    return result
