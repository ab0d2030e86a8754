"""
Distance utilities for TripWise.

This module provides the great-circle distance model used throughout the
engine, the pairwise distance matrix built over a set of milestones, and
the selection of the milestone a tour should start from.

Distances are straight-line (haversine) estimates on a sphere of radius
6371 km; real road networks are not taken into account.

Example usage:

    coords = [(35.6586, 139.7454), (35.6812, 139.7671)]
    matrix = compute_haversine_matrix(coords)
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from .errors import InvalidCoordinateError
from .models import Milestone

EARTH_RADIUS_KM = 6371.0


def check_coordinate(coord: Tuple[float, float]) -> None:
    """Raise ``InvalidCoordinateError`` unless ``coord`` is a valid (lat, lon)."""
    lat, lon = coord
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidCoordinateError(f"Coordinate {coord!r} is not finite")
    if abs(lat) > 90:
        raise InvalidCoordinateError(f"Latitude {lat} is outside [-90, 90]")
    if abs(lon) > 180:
        raise InvalidCoordinateError(f"Longitude {lon} is outside [-180, 180]")


def haversine_distance(coord1: Tuple[float, float], coord2: Tuple[float, float]) -> float:
    """Compute the great-circle distance between two coordinates in kilometers."""
    check_coordinate(coord1)
    check_coordinate(coord2)
    lat1, lon1 = coord1
    lat2, lon2 = coord2
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # rounding can push a past 1 for near-antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def travel_minutes(distance_km: float, speed_kmh: float) -> float:
    """Convert a distance to travel time in minutes at a constant speed."""
    if speed_kmh <= 0:
        raise ValueError("speed_kmh must be positive")
    return distance_km / speed_kmh * 60.0


def compute_haversine_matrix(coords: Sequence[Tuple[float, float]]) -> List[List[float]]:
    """Compute the pairwise distance matrix using the Haversine formula.

    Args:
        coords: List of (lat, lon) tuples.

    Returns:
        An n x n matrix in kilometers with a zero diagonal. Only the upper
        triangle is computed, the lower one mirrors it so the matrix is
        exactly symmetric.
    """
    n = len(coords)
    dist_matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            dist = haversine_distance(coords[i], coords[j])
            dist_matrix[i][j] = dist
            dist_matrix[j][i] = dist
    return dist_matrix


def compute_distance_matrix(milestones: Sequence[Milestone]) -> List[List[float]]:
    """Distance matrix indexed by position in ``milestones``."""
    return compute_haversine_matrix([m.coordinates for m in milestones])


def find_starting_index(
    milestones: Sequence[Milestone],
    current_location: Optional[Tuple[float, float]] = None,
) -> int:
    """Return the index of the milestone a tour should start from.

    Without a current location the first milestone is used. Otherwise the
    milestone nearest to the current location wins; on ties the lowest
    index is kept.
    """
    if current_location is None or not milestones:
        return 0
    nearest_index = 0
    nearest_distance = math.inf
    for index, milestone in enumerate(milestones):
        distance = haversine_distance(current_location, milestone.coordinates)
        if distance < nearest_distance:
            nearest_distance = distance
            nearest_index = index
    return nearest_index
