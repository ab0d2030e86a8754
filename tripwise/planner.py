"""
Route planning entry point for TripWise.

``optimize`` runs the whole pipeline over a list of milestones: it builds
the distance matrix, picks the starting milestone, constructs a nearest
neighbour tour, refines it with 2-opt and assembles the resulting
``OptimizedRoute`` with per-leg distances and times.

The function is pure: identical inputs always produce an identical route
and the input milestones are never modified.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

from .config import Settings, settings as default_settings
from .errors import InvalidDurationError, TooFewMilestonesError, TooManyMilestonesError
from .models import Milestone, OptimizedRoute, RouteSegment
from .optimisation import nearest_neighbor, tour_length, two_opt
from .routing import check_coordinate, compute_distance_matrix, find_starting_index, travel_minutes

logger = logging.getLogger(__name__)


def _round_half_up(value: float, ndigits: int = 0) -> float:
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def _check_milestones(milestones: Sequence[Milestone], config: Settings) -> None:
    count = len(milestones)
    if count < config.min_milestones:
        raise TooFewMilestonesError(count, config.min_milestones)
    if count > config.max_milestones:
        raise TooManyMilestonesError(count, config.max_milestones)
    for milestone in milestones:
        check_coordinate(milestone.coordinates)
        duration = milestone.estimated_duration
        if (
            isinstance(duration, bool)
            or not isinstance(duration, (int, float))
            or not math.isfinite(duration)
            or duration < 0
        ):
            raise InvalidDurationError(
                f"Milestone {milestone.id!r} has invalid duration {duration!r}"
            )


def assemble_route(
    milestones: Sequence[Milestone],
    tour: Sequence[int],
    dist_matrix: Sequence[Sequence[float]],
    speed_kmh: float,
) -> OptimizedRoute:
    """Turn a tour over ``milestones`` into an ``OptimizedRoute``.

    Travel time per leg is ``distance / speed_kmh * 60`` minutes. The total
    time adds the dwell time of every stop, counting the first stop once
    and every other stop as the destination of its incoming leg.
    """
    ordered = tuple(milestones[index].with_order(order) for order, index in enumerate(tour))
    segments: List[RouteSegment] = []
    total_distance = 0.0
    total_time = 0.0
    for i in range(len(tour) - 1):
        distance = dist_matrix[tour[i]][tour[i + 1]]
        travel_time = travel_minutes(distance, speed_kmh)
        segments.append(
            RouteSegment(
                from_milestone=ordered[i],
                to_milestone=ordered[i + 1],
                distance=distance,
                estimated_time=travel_time,
            )
        )
        total_distance += distance
        total_time += travel_time + ordered[i + 1].estimated_duration
    total_time += ordered[0].estimated_duration
    return OptimizedRoute(
        milestones=ordered,
        total_distance=_round_half_up(total_distance, 2),
        estimated_total_time=int(_round_half_up(total_time)),
        starting_point=ordered[0],
        route_segments=tuple(segments),
    )


def optimize(
    milestones: Sequence[Milestone],
    current_location: Optional[Tuple[float, float]] = None,
    settings: Optional[Settings] = None,
) -> OptimizedRoute:
    """Compute a short visiting order through ``milestones``.

    Args:
        milestones: Between 2 and 10 milestones (limits come from settings).
        current_location: Optional (lat, lon) of the user. When given, the
            tour starts at the milestone nearest to it.
        settings: Engine settings; defaults to the environment-loaded ones.

    Returns:
        The optimised route.

    Raises:
        TooFewMilestonesError: fewer milestones than allowed.
        TooManyMilestonesError: more milestones than allowed.
        InvalidCoordinateError: a coordinate is out of range or not finite.
        InvalidDurationError: a dwell duration is negative or not finite.
    """
    config = settings or default_settings
    _check_milestones(milestones, config)
    if current_location is not None:
        check_coordinate(current_location)

    dist_matrix = compute_distance_matrix(milestones)
    start = find_starting_index(milestones, current_location)
    logger.debug("Optimising %d milestones starting at index %d", len(milestones), start)

    initial = nearest_neighbor(dist_matrix, start=start)
    tour = two_opt(initial, dist_matrix, max_sweeps=config.max_two_opt_sweeps)
    logger.debug(
        "Tour length %.4f km after nearest neighbour, %.4f km after 2-opt",
        tour_length(initial, dist_matrix),
        tour_length(tour, dist_matrix),
    )
    return assemble_route(milestones, tour, dist_matrix, config.walking_speed_kmh)
