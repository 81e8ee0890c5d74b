"""Demand/supply driven surge pricing."""

from __future__ import annotations

import logging
from typing import Optional

from ...config import settings
from ...models.domain import SurgePricingResult

logger = logging.getLogger(__name__)


def _surge_band(demand_ratio: float) -> tuple[float, str]:
    if demand_ratio > 3:
        return settings.surge_max_multiplier, "Extreme demand, maximum surge"
    if demand_ratio > 2:
        return 2.0, "Very high demand, double surge"
    if demand_ratio > 1.5:
        return 1.5, "High demand, moderate surge"
    if demand_ratio > settings.surge_demand_threshold:
        return 1.2, "Elevated demand, light surge"
    return settings.surge_base_multiplier, "Normal demand"


def calculate_surge_pricing(
    active_orders: int,
    available_drivers: int,
    base_price: int,
    city: Optional[str] = None,
) -> SurgePricingResult:
    """Price multiplier from the ratio of active orders to available drivers.

    ``base_price`` is in minor units (centimes). ``city`` is accepted so callers
    can pass their market; every city currently shares the same thresholds.
    """

    if available_drivers == 0:
        if active_orders > 0:
            multiplier, reason = settings.surge_max_multiplier, "No drivers available, maximum surge applied"
            logger.info(f"Maximum surge in {city or settings.default_city}: {active_orders} orders, no drivers")
        else:
            multiplier, reason = settings.surge_base_multiplier, "No demand, no surge"
    else:
        multiplier, reason = _surge_band(active_orders / available_drivers)

    return SurgePricingResult(
        multiplier=multiplier,
        reason=reason,
        base_price=base_price,
        surge_price=round(base_price * multiplier),
    )
