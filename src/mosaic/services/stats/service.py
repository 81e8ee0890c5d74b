"""Aggregate statistics over a batch of match results."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import AssignmentStats, MatchResult


def compute_assignment_stats(results: Sequence[MatchResult], total_orders: int) -> AssignmentStats:
    if not results:
        return AssignmentStats(
            total_orders=total_orders,
            assigned_orders=0,
            average_score=0.0,
            average_pickup_minutes=0.0,
            average_distance_km=0.0,
        )

    count = len(results)
    return AssignmentStats(
        total_orders=total_orders,
        assigned_orders=count,
        average_score=round(sum(r.score for r in results) / count, 2),
        average_pickup_minutes=round(sum(r.estimated_pickup_minutes for r in results) / count, 2),
        average_distance_km=round(sum(r.distance_km for r in results) / count, 2),
    )
