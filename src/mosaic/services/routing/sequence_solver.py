"""Nearest-neighbor sequencing for multi-stop delivery batches.

This is a greedy heuristic, not an exact TSP solver: from the current
position it always moves to the closest unvisited stop.
"""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Coordinates
from ..geospatial import distance_km
from .models import OptimizedRoute, RouteStop


def optimize_batch_route(start: Coordinates, stops: Sequence[Coordinates]) -> OptimizedRoute:
    if not stops:
        return OptimizedRoute(ordered_stops=(), total_distance_km=0.0)
    if len(stops) == 1:
        direct = distance_km(start, stops[0])
        return OptimizedRoute(
            ordered_stops=(stops[0],),
            total_distance_km=direct,
            legs=(RouteStop(location=stops[0], sequence=1, distance_from_prev_km=direct),),
        )

    remaining = list(stops)
    legs: list[RouteStop] = []
    current = start
    total_distance = 0.0

    while remaining:
        # min() keeps the first of equally distant stops
        nearest_index = min(range(len(remaining)), key=lambda i: distance_km(current, remaining[i]))
        step = distance_km(current, remaining[nearest_index])
        current = remaining.pop(nearest_index)
        total_distance += step
        legs.append(RouteStop(location=current, sequence=len(legs) + 1, distance_from_prev_km=step))

    return OptimizedRoute(
        ordered_stops=tuple(leg.location for leg in legs),
        total_distance_km=round(total_distance, 2),
        legs=tuple(legs),
    )
