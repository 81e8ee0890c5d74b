"""Domain value types for drivers, orders and matching outcomes.

Every type here is an immutable snapshot. Driver and order values are built
fresh for each matching pass from state owned by the dispatch service, and
results are transient outputs handed back to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal, Optional


@dataclass(frozen=True, slots=True)
class Coordinates:
    """WGS84-like latitude/longitude pair in degrees."""

    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class CitySpeedProfile:
    name: str
    average_speed_kmh: float
    peak_hour_multiplier: float
    medina_multiplier: float
    has_medina: bool


class TimePeriod(str, Enum):
    """Traffic and demand periods of the day."""

    MORNING_RUSH = "morning_rush"
    MIDDAY = "midday"
    AFTERNOON = "afternoon"
    EVENING_RUSH = "evening_rush"
    NIGHT = "night"
    FRIDAY_PRAYER = "friday_prayer"
    RAMADAN_IFTAR = "ramadan_iftar"

    @property
    def is_rush(self) -> bool:
        return self in (TimePeriod.MORNING_RUSH, TimePeriod.EVENING_RUSH)


@dataclass(frozen=True, slots=True)
class MatchingWeights:
    """Relative importance of the six Mosaic Score factors."""

    proximity: float
    rating: float
    load_balance: float
    tier_bonus: float
    acceptance_rate: float
    specialization: float

    def total(self) -> float:
        return (
            self.proximity
            + self.rating
            + self.load_balance
            + self.tier_bonus
            + self.acceptance_rate
            + self.specialization
        )


@dataclass(frozen=True, slots=True)
class DriverCandidate:
    id: str
    location: Coordinates
    rating: float
    active_deliveries: int
    max_deliveries: int
    tier: str
    acceptance_rate: float
    vehicle_type: str = "motorbike"
    is_in_medina: bool = False
    last_delivery_at: Optional[datetime] = None
    specializations: tuple[str, ...] = ()

    @property
    def has_capacity(self) -> bool:
        return self.active_deliveries < self.max_deliveries


@dataclass(frozen=True, slots=True)
class OrderInfo:
    id: str
    pickup: Coordinates
    dropoff: Coordinates
    estimated_value: int
    cuisine: str
    max_wait_minutes: float
    created_at: datetime
    priority: int = 0
    is_fragile: bool = False


@dataclass(frozen=True, slots=True)
class MatchResult:
    driver_id: str
    order_id: str
    score: float
    estimated_pickup_minutes: float
    estimated_delivery_minutes: float
    distance_km: float
    reasons: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class BatchCluster:
    centroid: Coordinates
    orders: tuple[OrderInfo, ...]
    radius_km: float


@dataclass(frozen=True, slots=True)
class DeliveryEta:
    pickup_minutes: float
    prep_minutes: float
    delivery_minutes: float
    total_minutes: float


@dataclass(frozen=True, slots=True)
class SurgePricingResult:
    multiplier: float
    reason: str
    base_price: int
    surge_price: int


@dataclass(frozen=True, slots=True)
class DemandForecast:
    zone_id: str
    hour: int
    expected_orders: float
    confidence: float
    drivers_needed: int


@dataclass(frozen=True, slots=True)
class DeliveryZone:
    id: str
    name: str
    center: Coordinates
    radius_km: float
    demand_level: Literal["low", "medium", "high"] = "medium"


@dataclass(frozen=True, slots=True)
class ReassignmentEvaluation:
    should_reassign: bool
    reason: str
    new_driver_id: Optional[str] = None
    expected_time_saving: float = 0.0


@dataclass(frozen=True, slots=True)
class AssignmentStats:
    total_orders: int
    assigned_orders: int
    average_score: float
    average_pickup_minutes: float
    average_distance_km: float


@dataclass(frozen=True, slots=True)
class LeaderboardEntry:
    driver_id: str
    rank: int
    score: float
