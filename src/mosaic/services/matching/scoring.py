"""Mosaic Score: composite 0-100 match quality for a driver/order pair."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ...config import settings
from ...models.domain import DriverCandidate, MatchingWeights, OrderInfo
from ..geospatial import distance_km
from .weights import DEFAULT_WEIGHTS

TIER_SCORES: Mapping[str, float] = MappingProxyType(
    {
        "bronze": 0.0,
        "silver": 20.0,
        "gold": 40.0,
        "platinum": 60.0,
        "diamond": 100.0,
    }
)


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """Individual factor scores, each on a 0-100 scale."""

    proximity: float
    rating: float
    load: float
    tier: float
    acceptance: float
    specialization: float

    def weighted_total(self, weights: MatchingWeights) -> float:
        return (
            self.proximity * weights.proximity
            + self.rating * weights.rating
            + self.load * weights.load_balance
            + self.tier * weights.tier_bonus
            + self.acceptance * weights.acceptance_rate
            + self.specialization * weights.specialization
        )


def score_breakdown(driver: DriverCandidate, order: OrderInfo) -> ScoreBreakdown:
    pickup_km = distance_km(driver.location, order.pickup)
    proximity = max(0.0, 100 * (1 - pickup_km / settings.max_pickup_distance_km))
    rating = (driver.rating - 1) / 4 * 100
    if driver.max_deliveries > 0:
        load = max(0.0, 100 * (1 - driver.active_deliveries / driver.max_deliveries))
    else:
        load = 0.0
    tier = TIER_SCORES.get(driver.tier.lower(), 0.0)
    specialization = 100.0 if order.cuisine in driver.specializations else 0.0

    return ScoreBreakdown(
        proximity=proximity,
        rating=rating,
        load=load,
        tier=tier,
        acceptance=driver.acceptance_rate,
        specialization=specialization,
    )


def calculate_mosaic_score(
    driver: DriverCandidate,
    order: OrderInfo,
    weights: MatchingWeights = DEFAULT_WEIGHTS,
    city: str | None = None,
) -> float:
    """Weighted sum of the factor scores, clamped to [0, 100] and rounded to 2 decimals.

    ``city`` is accepted for call-site symmetry with the matcher; proximity is
    scored on straight-line distance so the city profile does not affect it.
    """

    total = score_breakdown(driver, order).weighted_total(weights)
    return round(max(0.0, min(100.0, total)), 2)
