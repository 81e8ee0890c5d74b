"""Single-pass driver selection for a pending order."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import DriverCandidate, MatchingWeights, MatchResult, OrderInfo
from ..geospatial import distance_km
from ..travel.estimator import estimate_travel_minutes
from .scoring import calculate_mosaic_score
from .weights import DEFAULT_WEIGHTS

logger = logging.getLogger(__name__)


def is_eligible(driver: DriverCandidate, order: OrderInfo) -> bool:
    """A driver is eligible with spare capacity and within pickup range."""

    if not driver.has_capacity:
        return False
    return distance_km(driver.location, order.pickup) <= settings.max_pickup_distance_km


def _match_reasons(driver: DriverCandidate, order: OrderInfo, pickup_km: float) -> tuple[str, ...]:
    reasons: list[str] = []
    if pickup_km < settings.close_pickup_km:
        reasons.append("Very close to pickup")
    if driver.rating >= settings.highly_rated_threshold:
        reasons.append("Highly rated driver")
    if driver.active_deliveries == 0:
        reasons.append("Currently available")
    if order.cuisine in driver.specializations:
        reasons.append(f"Specializes in {order.cuisine}")
    return tuple(reasons)


def find_best_driver(
    order: OrderInfo,
    drivers: Sequence[DriverCandidate],
    weights: MatchingWeights = DEFAULT_WEIGHTS,
    city: Optional[str] = None,
) -> Optional[MatchResult]:
    """Pick the highest scoring eligible driver, or None when nobody qualifies.

    Ties keep the earliest driver in ``drivers``. The best candidate is still
    rejected when its score falls below the configured minimum.
    """

    eligible = [driver for driver in drivers if is_eligible(driver, order)]
    logger.debug(f"Order {order.id}: {len(eligible)} of {len(drivers)} drivers eligible")
    if not eligible:
        return None

    best_driver: DriverCandidate | None = None
    best_score = -1.0
    for driver in eligible:
        score = calculate_mosaic_score(driver, order, weights, city)
        if score > best_score:
            best_driver, best_score = driver, score

    if best_driver is None or best_score < settings.min_score_threshold:
        logger.debug(f"Order {order.id}: best score {best_score} below threshold, no match")
        return None

    pickup_km = distance_km(best_driver.location, order.pickup)
    delivery_km = distance_km(order.pickup, order.dropoff)
    pickup_minutes = estimate_travel_minutes(best_driver.location, order.pickup, city, best_driver.is_in_medina)
    delivery_minutes = estimate_travel_minutes(order.pickup, order.dropoff, city)

    logger.debug(f"Order {order.id}: matched driver {best_driver.id} with score {best_score}")
    return MatchResult(
        driver_id=best_driver.id,
        order_id=order.id,
        score=best_score,
        estimated_pickup_minutes=pickup_minutes,
        estimated_delivery_minutes=delivery_minutes,
        distance_km=round(pickup_km + delivery_km, 2),
        reasons=_match_reasons(best_driver, order, pickup_km),
    )
