"""Simple statistical demand forecast from historical hourly order counts."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ...config import settings
from ...models.domain import DemandForecast


def forecast_demand(
    zone_id: str,
    hour: int,
    historical_counts: Sequence[float],
    available_drivers: int,
) -> DemandForecast:
    """Project expected orders as the historical mean.

    Confidence is ``100 * (1 - CV)`` with CV the coefficient of variation of
    the history (population standard deviation over mean), clamped to
    [0, 100]. A zero mean is treated as CV 1, i.e. no confidence.
    """
    if len(historical_counts) == 0:
        return DemandForecast(zone_id=zone_id, hour=hour, expected_orders=0.0, confidence=0.0, drivers_needed=0)

    counts = np.asarray(historical_counts, dtype=float)
    mean = float(counts.mean())
    std_dev = float(counts.std())

    cv = std_dev / mean if mean > 0 else 1.0
    confidence = round(max(0.0, min(100.0, 100 * (1 - cv))), 2)
    expected_orders = round(mean, 2)
    drivers_needed = max(0, math.ceil(expected_orders / settings.orders_per_driver) - available_drivers)

    return DemandForecast(
        zone_id=zone_id,
        hour=hour,
        expected_orders=expected_orders,
        confidence=confidence,
        drivers_needed=drivers_needed,
    )
