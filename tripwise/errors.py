"""
Error types raised by the TripWise route optimisation engine.

Every error derives from ``RouteOptimizationError``. Invalid call input
raises a subclass of ``InputError`` (itself a ``ValueError``) so that
callers can either catch the whole family or discriminate, for example,
"too few stops" from "too many stops".
"""

from __future__ import annotations


class RouteOptimizationError(Exception):
    """Base class for all errors raised by the engine."""


class InputError(RouteOptimizationError, ValueError):
    """Raised when the input to an optimisation call is unusable."""


class TooFewMilestonesError(InputError):
    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(
            f"At least {limit} milestones are required for route optimisation, got {count}"
        )


class TooManyMilestonesError(InputError):
    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"Maximum {limit} milestones allowed per route, got {count}")


class InvalidCoordinateError(InputError):
    """Raised for non-finite or out-of-range latitude/longitude values."""


class InvalidDurationError(InputError):
    """Raised for negative or non-finite dwell durations."""
