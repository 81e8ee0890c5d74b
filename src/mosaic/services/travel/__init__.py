"""Travel time services."""

from .estimator import calculate_delivery_eta, effective_speed_kmh, estimate_travel_minutes
from .profiles import CITY_PROFILES, get_city_profile

__all__ = [
    "CITY_PROFILES",
    "get_city_profile",
    "effective_speed_kmh",
    "estimate_travel_minutes",
    "calculate_delivery_eta",
]
