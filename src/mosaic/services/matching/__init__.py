"""Driver/order matching services."""

from .leaderboard import rank_drivers_for_leaderboard
from .matcher import find_best_driver, is_eligible
from .priority import calculate_order_priority
from .scoring import TIER_SCORES, calculate_mosaic_score
from .weights import DEFAULT_WEIGHTS, adjust_weights_for_period, normalize_weights

__all__ = [
    "DEFAULT_WEIGHTS",
    "TIER_SCORES",
    "adjust_weights_for_period",
    "normalize_weights",
    "calculate_mosaic_score",
    "find_best_driver",
    "is_eligible",
    "calculate_order_priority",
    "rank_drivers_for_leaderboard",
]
