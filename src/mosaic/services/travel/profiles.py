"""Static city speed profiles for Moroccan delivery markets."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from ...config import settings
from ...models.domain import CitySpeedProfile

logger = logging.getLogger(__name__)

CITY_PROFILES: Mapping[str, CitySpeedProfile] = MappingProxyType(
    {
        "casablanca": CitySpeedProfile("Casablanca", 25.0, 0.6, 0.3, True),
        "rabat": CitySpeedProfile("Rabat", 22.0, 0.65, 0.35, True),
        "marrakech": CitySpeedProfile("Marrakech", 20.0, 0.55, 0.25, True),
        "fes": CitySpeedProfile("Fès", 18.0, 0.6, 0.2, True),
        "tangier": CitySpeedProfile("Tangier", 23.0, 0.65, 0.3, True),
        "agadir": CitySpeedProfile("Agadir", 28.0, 0.7, 0.4, False),
        "meknes": CitySpeedProfile("Meknès", 22.0, 0.65, 0.3, True),
        "oujda": CitySpeedProfile("Oujda", 25.0, 0.7, 0.35, False),
        "kenitra": CitySpeedProfile("Kénitra", 24.0, 0.65, 0.35, False),
    }
)

FALLBACK_CITY = "casablanca"


def get_city_profile(city: Optional[str] = None) -> CitySpeedProfile:
    """Look up a city profile, falling back to the configured default city."""

    key = (city or settings.default_city).strip().lower()
    profile = CITY_PROFILES.get(key)
    if profile is not None:
        return profile

    logger.warning(f"Unknown city '{city}', using '{settings.default_city}' speed profile")
    return CITY_PROFILES.get(settings.default_city.lower(), CITY_PROFILES[FALLBACK_CITY])
