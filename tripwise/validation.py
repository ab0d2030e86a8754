"""
Feasibility checks for optimised routes.

``check_route`` reports every violated constraint; ``validate`` collapses
the report into the single pass/fail verdict used by callers deciding
whether to offer a route for saving or navigation.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import Settings, settings as default_settings
from .models import OptimizedRoute


class Violation(str, enum.Enum):
    TOTAL_DISTANCE = "total_distance"
    TOTAL_TIME = "total_time"
    SEGMENT_DISTANCE = "segment_distance"


@dataclass(frozen=True)
class ConstraintViolation:
    kind: Violation
    value: float
    limit: float
    segment_index: Optional[int] = None


@dataclass(frozen=True)
class ValidationReport:
    violations: Tuple[ConstraintViolation, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def __bool__(self) -> bool:
        return self.is_valid


def check_route(route: OptimizedRoute, settings: Optional[Settings] = None) -> ValidationReport:
    """Check ``route`` against the distance and time limits.

    A route fails when its total distance, its total time or any single
    segment exceeds the configured maximum (20 km, 480 minutes and 5 km
    by default). Each offending segment is reported separately.
    """
    config = settings or default_settings
    violations: List[ConstraintViolation] = []
    if route.total_distance > config.max_total_distance_km:
        violations.append(
            ConstraintViolation(Violation.TOTAL_DISTANCE, route.total_distance, config.max_total_distance_km)
        )
    if route.estimated_total_time > config.max_total_time_minutes:
        violations.append(
            ConstraintViolation(Violation.TOTAL_TIME, route.estimated_total_time, config.max_total_time_minutes)
        )
    for index, segment in enumerate(route.route_segments):
        if segment.distance > config.max_segment_distance_km:
            violations.append(
                ConstraintViolation(
                    Violation.SEGMENT_DISTANCE,
                    segment.distance,
                    config.max_segment_distance_km,
                    segment_index=index,
                )
            )
    return ValidationReport(tuple(violations))


def validate(route: OptimizedRoute, settings: Optional[Settings] = None) -> bool:
    """Return ``True`` if ``route`` is walkable within the configured limits."""
    return check_route(route, settings).is_valid
