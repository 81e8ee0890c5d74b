"""Time-of-day classification for traffic and demand context."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..models.domain import TimePeriod

FRIDAY = 4  # datetime.weekday(): Monday == 0


def classify_time_period(timestamp: datetime) -> TimePeriod:
    """Map a wall-clock timestamp to a traffic period.

    The timestamp is read as-is: callers that need Morocco local time must pass
    an already-localized value. Ramadan iftar is never derived here because it
    depends on the Hijri calendar; see ``resolve_time_period``.
    """

    hour = timestamp.hour

    if timestamp.weekday() == FRIDAY and 12 <= hour < 14:
        return TimePeriod.FRIDAY_PRAYER
    if 7 <= hour < 10:
        return TimePeriod.MORNING_RUSH
    if 10 <= hour < 13:
        return TimePeriod.MIDDAY
    if 13 <= hour < 17:
        return TimePeriod.AFTERNOON
    if 17 <= hour < 21:
        return TimePeriod.EVENING_RUSH
    return TimePeriod.NIGHT


def resolve_time_period(timestamp: datetime, override: Optional[TimePeriod] = None) -> TimePeriod:
    """Return the caller's calendar override when given, else the classified period."""

    if override is not None:
        return override
    return classify_time_period(timestamp)
