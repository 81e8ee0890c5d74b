"""Urgency score used to decide which orders are matched first."""

from __future__ import annotations

from datetime import datetime

from ...models.domain import OrderInfo

# (fraction of max wait exceeded, bonus) checked from most to least urgent
WAIT_BONUS_TIERS = ((1.0, 50), (0.7, 30), (0.5, 15))
# Minor units (centimes): 200 MAD and 500 MAD
VALUE_BONUS_THRESHOLDS = (20_000, 50_000)
VALUE_BONUS = 10


def calculate_order_priority(order: OrderInfo, now: datetime) -> float:
    priority = order.priority * 10

    wait_minutes = (now - order.created_at).total_seconds() / 60
    for fraction, bonus in WAIT_BONUS_TIERS:
        if wait_minutes > order.max_wait_minutes * fraction:
            priority += bonus
            break

    for threshold in VALUE_BONUS_THRESHOLDS:
        if order.estimated_value > threshold:
            priority += VALUE_BONUS

    return max(0, min(100, priority))
