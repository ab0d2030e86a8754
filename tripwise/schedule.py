"""
Schedule calculation utilities for TripWise.

This module turns an optimised route into a time-based itinerary. It
produces arrival and departure times for each stop and flags stops
whose arrival falls outside an optional opening interval.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import List, Mapping, Optional, Tuple

from .models import OptimizedRoute


@dataclass
class StopSchedule:
    milestone_id: str
    order: int
    arrival: datetime
    departure: datetime
    status: str  # "ok", "warning", "closed"


def parse_time_string(t: str) -> time:
    """Parse a HH:MM formatted time string into a datetime.time object."""
    try:
        h, m = map(int, t.strip().split(":"))
        return time(hour=h, minute=m)
    except ValueError as exc:
        raise ValueError(f"Invalid time {t!r}, expected HH:MM") from exc


def schedule_route(
    route: OptimizedRoute,
    departure_time_str: str,
    open_hours: Optional[Mapping[str, Tuple[str, str]]] = None,
    day: Optional[date] = None,
) -> List[StopSchedule]:
    """Generate a schedule for an optimised route.

    Args:
        route: The route to schedule, in visiting order.
        departure_time_str: Arrival time at the first stop as HH:MM.
        open_hours: Optional mapping of milestone id to an
            (open_time, close_time) pair in HH:MM format.
        day: Date of the trip. Defaults to today.

    Returns:
        A list of ``StopSchedule`` objects, one per milestone.
    """
    day = day or datetime.now().date()
    open_hours = open_hours or {}
    current_time = datetime.combine(day, parse_time_string(departure_time_str))

    schedule: List[StopSchedule] = []
    for idx, milestone in enumerate(route.milestones):
        arrival_time = current_time
        status = "ok"
        open_spec = open_hours.get(milestone.id)
        if open_spec:
            open_str, close_str = open_spec
            open_dt = datetime.combine(day, parse_time_string(open_str))
            close_dt = datetime.combine(day, parse_time_string(close_str))
            if arrival_time < open_dt:
                status = "warning"
            elif arrival_time > close_dt:
                status = "closed"
        departure_time = arrival_time + timedelta(minutes=milestone.estimated_duration)
        schedule.append(
            StopSchedule(
                milestone_id=milestone.id,
                order=milestone.order,
                arrival=arrival_time,
                departure=departure_time,
                status=status,
            )
        )
        # Travel to next stop, except for the last
        if idx < len(route.route_segments):
            travel = route.route_segments[idx].estimated_time
            current_time = departure_time + timedelta(minutes=travel)
    return schedule
