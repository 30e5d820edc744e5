"""Simplex data structure for Nelder-Mead optimization.

A Simplex holds n+1 vertices in n-dimensional space, each caching the cost
of its coordinates. The geometric primitives here are all the driver needs:

    - position_around: build the initial simplex from a guess and step sizes
    - evaluate: compute every vertex cost and sort ascending
    - centroid: mean of all vertices except the worst
    - new_point: (1 + lam) * centroid - lam * worst, which yields the
      reflected, expanded and both contracted points depending on lam
    - shrink: pull every vertex except the best toward the best
    - restore_order: single insertion pass after the worst slot changed

Vertex arrays are owned by the simplex and mutated in place. Scratch
vertices passed to centroid/new_point are filled in place too, so the
driver can reuse them across iterations.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import numpy as np

CostFunction = Callable[[np.ndarray], float]


@dataclass
class SimplexVertex:
    """Coordinates plus the cached cost at those coordinates."""
    point: np.ndarray
    cost: float = 0.0

    @classmethod
    def zeros(cls, n: int) -> SimplexVertex:
        return cls(np.zeros(n, dtype=np.float64))

    def copy_from(self, other: SimplexVertex) -> None:
        """Overwrite this vertex in place with other's coordinates and cost."""
        np.copyto(self.point, other.point)
        self.cost = other.cost

    def evaluate(self, cost_fn: CostFunction) -> float:
        self.cost = float(cost_fn(self.point))
        return self.cost


@dataclass
class Simplex:
    """n+1 vertices in n dimensions, kept ascending by cost."""
    dimension: int
    vertices: list[SimplexVertex] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.dimension < 1:
            raise ValueError(f"dimension must be >= 1, got {self.dimension}")
        if not self.vertices:
            self.vertices = [SimplexVertex.zeros(self.dimension)
                             for _ in range(self.dimension + 1)]
        elif len(self.vertices) != self.dimension + 1:
            raise ValueError(
                f"expected {self.dimension + 1} vertices, got {len(self.vertices)}")

    @classmethod
    def around(cls, initial: Sequence[float], step_sizes: Sequence[float]) -> Simplex:
        """Create a simplex positioned around initial."""
        simplex = cls(len(initial))
        simplex.position_around(initial, step_sizes)
        return simplex

    def __len__(self) -> int:
        return len(self.vertices)

    def __getitem__(self, idx: int) -> SimplexVertex:
        return self.vertices[idx]

    @property
    def best(self) -> SimplexVertex:
        return self.vertices[0]

    @property
    def worst(self) -> SimplexVertex:
        return self.vertices[self.dimension]

    @property
    def second_worst(self) -> SimplexVertex:
        return self.vertices[self.dimension - 1]

    @property
    def costs(self) -> list[float]:
        return [v.cost for v in self.vertices]

    def is_sorted(self) -> bool:
        costs = self.costs
        return all(costs[i] <= costs[i + 1] for i in range(len(costs) - 1))

    def position_around(self, initial: Sequence[float], step_sizes: Sequence[float]) -> None:
        """Vertex 0 is initial; vertex i is initial offset by step_sizes[i-1] in dimension i-1.

        A zero step collapses the simplex in that dimension; callers must
        supply nonzero steps.
        """
        n = self.dimension
        x0 = np.asarray(initial, dtype=np.float64)
        steps = np.asarray(step_sizes, dtype=np.float64)
        if x0.shape != (n,) or steps.shape != (n,):
            raise ValueError(
                f"initial and step_sizes must both have length {n}, "
                f"got {x0.shape} and {steps.shape}")
        for i, vertex in enumerate(self.vertices):
            np.copyto(vertex.point, x0)
            if i > 0:
                vertex.point[i - 1] += steps[i - 1]

    def sort(self) -> None:
        # list.sort is stable, so ties keep their relative order
        self.vertices.sort(key=lambda v: v.cost)

    def evaluate(self, cost_fn: CostFunction) -> None:
        """Compute every vertex cost, then sort ascending."""
        for vertex in self.vertices:
            vertex.evaluate(cost_fn)
        self.sort()

    def centroid(self, out: SimplexVertex | None = None) -> SimplexVertex:
        """Per-dimension mean of all vertices except the worst."""
        if out is None:
            out = SimplexVertex.zeros(self.dimension)
        n = self.dimension
        np.copyto(out.point, self.vertices[0].point)
        for i in range(1, n):
            out.point += self.vertices[i].point
        out.point /= n
        return out

    def new_point(self, centroid: SimplexVertex, lam: float,
                  out: SimplexVertex | None = None) -> SimplexVertex:
        """Write (1 + lam) * centroid - lam * worst into out.

        lam = rho gives the reflection, rho * chi the expansion, rho * gamma
        the outside contraction and -gamma the inside contraction.
        """
        if out is None:
            out = SimplexVertex.zeros(self.dimension)
        np.multiply(centroid.point, 1.0 + lam, out=out.point)
        out.point -= lam * self.worst.point
        return out

    def shrink(self, sigma: float) -> None:
        """Move every vertex except the best to best + sigma * (v - best).

        Costs of the moved vertices are stale afterwards.
        """
        best = self.vertices[0].point
        for vertex in self.vertices[1:]:
            vertex.point -= best
            vertex.point *= sigma
            vertex.point += best

    def replace_worst(self, vertex: SimplexVertex) -> None:
        """Copy vertex into the worst slot without aliasing it."""
        self.worst.copy_from(vertex)

    def restore_order(self) -> None:
        """Bubble the worst slot down until the vertices are ascending again.

        Only valid when the worst slot is the sole vertex that changed.
        """
        verts = self.vertices
        i = self.dimension - 1
        while i >= 0 and verts[i + 1].cost < verts[i].cost:
            verts[i], verts[i + 1] = verts[i + 1], verts[i]
            i -= 1
