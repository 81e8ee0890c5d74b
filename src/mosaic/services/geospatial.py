"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..models.domain import Coordinates

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push `a` past 1 for antipodal points; NaN still propagates through sqrt(a).
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(max(0.0, 1 - a)))
    return EARTH_RADIUS_KM * c


def bearing_degrees(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the initial bearing from (lat1, lon1) to (lat2, lon2)."""

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_lambda = math.radians(lon2 - lon1)
    y = math.sin(delta_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(delta_lambda)
    bearing = math.degrees(math.atan2(y, x))
    return (bearing + 360) % 360


def distance_km(a: Coordinates, b: Coordinates) -> float:
    """Great-circle distance between two coordinate values."""

    return haversine_km(a.lat, a.lng, b.lat, b.lng)


def bearing_between(origin: Coordinates, target: Coordinates) -> float:
    return bearing_degrees(origin.lat, origin.lng, target.lat, target.lng)
