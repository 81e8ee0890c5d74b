"""Circular delivery zone lookup."""

from __future__ import annotations

from typing import Optional, Sequence

from ...models.domain import Coordinates, DeliveryZone, DriverCandidate
from ..geospatial import distance_km


def contains(zone: DeliveryZone, point: Coordinates) -> bool:
    return distance_km(point, zone.center) <= zone.radius_km


def find_zone_for_point(point: Coordinates, zones: Sequence[DeliveryZone]) -> Optional[DeliveryZone]:
    """Return the first zone covering ``point``.

    Zones may overlap; the order of ``zones`` decides which one wins.
    """

    for zone in zones:
        if contains(zone, point):
            return zone
    return None


def count_drivers_in_zone(zone: DeliveryZone, drivers: Sequence[DriverCandidate]) -> int:
    return sum(1 for driver in drivers if contains(zone, driver.location))
