"""
Route optimisation heuristics for TripWise.

This module implements simple travelling salesman heuristics for
constructing a short open tour through a set of milestones.
It provides two main functions:

    - ``nearest_neighbor``: build an initial route by repeatedly
      visiting the nearest unvisited location.
    - ``two_opt``: improve a route by reversing sub-segments until no
      reversal shortens it.

The algorithms operate on a square, symmetric distance matrix indexed
by milestone position. Tours are open paths: there is no return leg
from the last stop to the first.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


def tour_length(route: Sequence[int], dist_matrix: Sequence[Sequence[float]]) -> float:
    """Sum of the distances between consecutive stops of ``route``."""
    length = 0.0
    for i in range(len(route) - 1):
        length += dist_matrix[route[i]][route[i + 1]]
    return length


def nearest_neighbor(dist_matrix: Sequence[Sequence[float]], start: int = 0) -> List[int]:
    """Construct an initial route using the nearest neighbor heuristic.

    Args:
        dist_matrix: A square matrix of distances.
        start: Index of the start location in the matrix.

    Returns:
        A list of indices representing the visiting order, starting
        with ``start`` and including all other indices exactly once.
        Equally near candidates resolve to the lowest index.
    """
    n = len(dist_matrix)
    if n == 0:
        return []
    visited = {start}
    route = [start]
    current = start
    while len(visited) < n:
        # min() keeps the first of equal keys, and candidates come in ascending order
        next_city = min(
            (j for j in range(n) if j not in visited),
            key=lambda j: dist_matrix[current][j],
        )
        route.append(next_city)
        visited.add(next_city)
        current = next_city
    return route


def two_opt(
    route: List[int],
    dist_matrix: Sequence[Sequence[float]],
    max_sweeps: Optional[int] = None,
) -> List[int]:
    """Perform 2-opt optimisation on a given route.

    Each sweep tries every reversal of ``route[i..j]`` (inclusive) with
    ``1 <= i < n - 2`` and ``i + 1 < j < n``, so the first stop stays
    fixed and neighbouring pairs are never swapped. An improving reversal
    is accepted immediately and the sweep carries on against the new
    route. Sweeps repeat until one makes no change, or ``max_sweeps``
    sweeps have run.

    Args:
        route: Initial route as a list of indices. Not modified.
        dist_matrix: Square matrix of distances corresponding to the
            indices in ``route``.
        max_sweeps: Optional bound on the number of full sweeps.

    Returns:
        A route no longer than ``route``.
    """
    best = list(route)
    best_length = tour_length(best, dist_matrix)
    n = len(best)
    sweeps = 0
    improved = True
    while improved:
        if max_sweeps is not None and sweeps >= max_sweeps:
            logger.warning("2-opt stopped after %d sweeps without converging", sweeps)
            break
        improved = False
        sweeps += 1
        for i in range(1, n - 2):
            for j in range(i + 1, n):
                if j - i == 1:
                    continue  # adjacent pair, skip
                new_route = best[:i] + best[i:j + 1][::-1] + best[j + 1:]
                new_length = tour_length(new_route, dist_matrix)
                if new_length < best_length:
                    best = new_route
                    best_length = new_length
                    improved = True
    logger.debug("2-opt finished after %d sweeps, length %.4f km", sweeps, best_length)
    return best
