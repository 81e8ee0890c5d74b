"""Contextual adjustment of Mosaic Score weights."""

from __future__ import annotations

import logging
from dataclasses import asdict, replace

from ...models.domain import MatchingWeights, TimePeriod

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS = MatchingWeights(
    proximity=0.35,
    rating=0.2,
    load_balance=0.15,
    tier_bonus=0.1,
    acceptance_rate=0.1,
    specialization=0.1,
)


def _boost(value: float, factor: float) -> float:
    return min(1.0, value * factor)


def _apply_period(weights: MatchingWeights, period: TimePeriod) -> MatchingWeights:
    match period:
        case TimePeriod.MORNING_RUSH | TimePeriod.EVENING_RUSH:
            return replace(
                weights,
                proximity=_boost(weights.proximity, 1.3),
                rating=weights.rating * 0.8,
            )
        case TimePeriod.FRIDAY_PRAYER:
            # Fewer drivers on the road, so reliability of acceptance counts more.
            return replace(
                weights,
                acceptance_rate=_boost(weights.acceptance_rate, 1.5),
                proximity=weights.proximity * 0.9,
            )
        case TimePeriod.RAMADAN_IFTAR:
            return replace(
                weights,
                load_balance=_boost(weights.load_balance, 1.4),
                proximity=_boost(weights.proximity, 1.2),
            )
        case TimePeriod.NIGHT:
            return replace(
                weights,
                rating=_boost(weights.rating, 1.3),
                tier_bonus=_boost(weights.tier_bonus, 1.2),
            )
        case _:
            return weights


def normalize_weights(weights: MatchingWeights) -> MatchingWeights:
    """Scale the weights so they sum to 1. An all-zero set is returned as-is."""

    total = weights.total()
    if total == 0:
        logger.warning("Matching weights sum to zero, leaving them unnormalized")
        return weights
    return MatchingWeights(**{name: value / total for name, value in asdict(weights).items()})


def adjust_weights_for_period(
    period: TimePeriod,
    base: MatchingWeights = DEFAULT_WEIGHTS,
) -> MatchingWeights:
    """Perturb ``base`` for the traffic period, then renormalize to sum to 1."""

    return normalize_weights(_apply_period(base, period))
