"""Travel time estimation from great-circle distance and city speed profiles."""

from __future__ import annotations

from typing import Optional

from ...config import settings
from ...models.domain import Coordinates, DeliveryEta, TimePeriod
from ..geospatial import distance_km
from .profiles import get_city_profile

WALKING_SPEED_KMH = 4.0
FRIDAY_PRAYER_SPEED_FACTOR = 0.5
RAMADAN_IFTAR_SPEED_FACTOR = 0.4


def effective_speed_kmh(
    city: Optional[str] = None,
    in_medina: bool = False,
    period: TimePeriod = TimePeriod.MIDDAY,
) -> float:
    """Average city speed with each contextual slow-down applied multiplicatively."""

    profile = get_city_profile(city)
    speed = profile.average_speed_kmh

    if in_medina and profile.has_medina:
        speed *= profile.medina_multiplier
    if period.is_rush:
        speed *= profile.peak_hour_multiplier
    if period is TimePeriod.FRIDAY_PRAYER:
        speed *= FRIDAY_PRAYER_SPEED_FACTOR
    if period is TimePeriod.RAMADAN_IFTAR:
        speed *= RAMADAN_IFTAR_SPEED_FACTOR

    return max(WALKING_SPEED_KMH, speed)


def estimate_travel_minutes(
    origin: Coordinates,
    target: Coordinates,
    city: Optional[str] = None,
    in_medina: bool = False,
    period: TimePeriod = TimePeriod.MIDDAY,
) -> float:
    """Estimate minutes to travel between two points, rounded to 2 decimals."""

    hours = distance_km(origin, target) / effective_speed_kmh(city, in_medina, period)
    return round(hours * 60, 2)


def calculate_delivery_eta(
    driver_location: Coordinates,
    pickup: Coordinates,
    dropoff: Coordinates,
    city: Optional[str] = None,
    in_medina: bool = False,
    prep_minutes: Optional[float] = None,
) -> DeliveryEta:
    """Break a delivery into pickup travel, kitchen prep and drop-off travel."""

    prep = settings.default_prep_minutes if prep_minutes is None else prep_minutes
    pickup_minutes = estimate_travel_minutes(driver_location, pickup, city, in_medina)
    delivery_minutes = estimate_travel_minutes(pickup, dropoff, city, in_medina)

    return DeliveryEta(
        pickup_minutes=pickup_minutes,
        prep_minutes=prep,
        delivery_minutes=delivery_minutes,
        total_minutes=round(pickup_minutes + prep + delivery_minutes, 2),
    )
