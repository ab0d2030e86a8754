"""
TripWise package initialization.

This package provides the route optimisation engine of the TripWise trip
planner: given 2-10 milestones and optionally the user's position, it
computes a short visiting order, per-leg distances and times, and a
feasibility verdict.

Modules:
    routing      – Haversine distances, distance matrices and start selection.
    optimisation – Nearest neighbour and 2‑opt heuristics for tour optimisation.
    planner      – The ``optimize`` entry point and route assembly.
    validation   – Feasibility checks for optimised routes.
    schedule     – Arrival/departure timeline with opening hours.
    config       – Engine settings.

Distances are great-circle estimates; road networks, turn restrictions
and traffic are not taken into account.
"""

from .errors import (
    InputError,
    InvalidCoordinateError,
    InvalidDurationError,
    RouteOptimizationError,
    TooFewMilestonesError,
    TooManyMilestonesError,
)
from .models import Coordinate, Milestone, OptimizedRoute, RouteSegment
from .planner import optimize
from .validation import ValidationReport, Violation, check_route, validate

__all__ = [
    "Coordinate",
    "InputError",
    "InvalidCoordinateError",
    "InvalidDurationError",
    "Milestone",
    "OptimizedRoute",
    "RouteOptimizationError",
    "RouteSegment",
    "TooFewMilestonesError",
    "TooManyMilestonesError",
    "ValidationReport",
    "Violation",
    "check_route",
    "optimize",
    "validate",
]
