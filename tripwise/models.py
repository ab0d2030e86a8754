"""
Data records shared by the TripWise modules.

Records are immutable: the engine never mutates the milestones it is
given and always returns new sequences. ``Coordinate`` is a named tuple
so that plain ``(lat, lon)`` tuples can be used interchangeably.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import NamedTuple, Optional, Tuple


class Coordinate(NamedTuple):
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Milestone:
    """A planned stop with a location and an expected dwell time.

    Attributes:
        id: Stable identifier chosen by the caller.
        name: Display name of the place.
        coordinates: Location in decimal degrees.
        estimated_duration: Expected dwell time in minutes.
        address: Free-form postal address.
        order: Position in the visiting sequence (0-based).
        completed: Whether the stop has been visited.
        visit_time: When the stop was visited, if known.
    """

    id: str
    name: str
    coordinates: Coordinate
    estimated_duration: float = 0
    address: str = ""
    order: int = 0
    completed: bool = False
    visit_time: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not isinstance(self.coordinates, Coordinate):
            object.__setattr__(self, "coordinates", Coordinate(*self.coordinates))

    def with_order(self, order: int) -> "Milestone":
        """Return a copy of this milestone placed at ``order``."""
        return replace(self, order=order)


@dataclass(frozen=True)
class RouteSegment:
    from_milestone: Milestone
    to_milestone: Milestone
    distance: float  # km
    estimated_time: float  # minutes


@dataclass(frozen=True)
class OptimizedRoute:
    """The result of one optimisation call.

    ``total_distance`` is in kilometres rounded to two decimals and
    ``estimated_total_time`` is travel plus dwell time in whole minutes.
    """

    milestones: Tuple[Milestone, ...]
    total_distance: float
    estimated_total_time: int
    starting_point: Milestone
    route_segments: Tuple[RouteSegment, ...]

    @property
    def tour_ids(self) -> Tuple[str, ...]:
        return tuple(m.id for m in self.milestones)
