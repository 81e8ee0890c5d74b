"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass

from ...models.domain import Coordinates


@dataclass(frozen=True, slots=True)
class RouteStop:
    location: Coordinates
    sequence: int
    distance_from_prev_km: float


@dataclass(frozen=True, slots=True)
class OptimizedRoute:
    ordered_stops: tuple[Coordinates, ...]
    total_distance_km: float
    legs: tuple[RouteStop, ...] = ()
