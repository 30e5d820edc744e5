"""Derivative-free optimization with the Nelder-Mead simplex method.

The module exports the following:

Data structures:
    Simplex: n+1 vertices with cached costs and geometric primitives.
    SimplexVertex: Coordinates plus cached cost.

Driver:
    NelderMead: Stateful iteration over a Simplex.
    minimize: One-call entry point returning an OptimizationResult.
    guess_step_sizes: Default initial simplex step sizes.
    Operation, IterationEvent: Per-iteration trace records.

Example usage::

    from shapefit.optimization import minimize

    result = minimize([0.1], lambda v: (v[0] ** 2 - 1) ** 2)
    print(result.variables, result.cost)
"""

from .optimizer import (
    IterationEvent,
    NelderMead,
    Operation,
    OptimizationResult,
    guess_step_sizes,
    minimize,
)
from .simplex import CostFunction, Simplex, SimplexVertex

__all__ = [
    'Simplex', 'SimplexVertex', 'CostFunction',
    'NelderMead', 'Operation', 'IterationEvent', 'OptimizationResult',
    'minimize', 'guess_step_sizes',
]
