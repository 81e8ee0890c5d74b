"""Pydantic models for driver/order snapshots and match results exchanged with the dispatcher."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional, Sequence

from pydantic import BaseModel, Field, field_validator

from ..config import settings
from ..models.domain import (
    Coordinates,
    DeliveryZone,
    DriverCandidate,
    MatchResult,
    OrderInfo,
)

DriverTier = Literal["bronze", "silver", "gold", "platinum", "diamond"]


class CoordinatesModel(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)

    def to_domain(self) -> Coordinates:
        return Coordinates(lat=self.lat, lng=self.lng)


class DriverSnapshot(BaseModel):
    id: str = Field(..., min_length=1)
    location: CoordinatesModel
    rating: float = Field(..., ge=1.0, le=5.0, description="Average customer rating (1-5).")
    active_deliveries: int = Field(default=0, ge=0)
    max_deliveries: int = Field(
        default_factory=lambda: settings.max_active_deliveries,
        ge=1,
        description="Concurrent delivery capacity.",
    )
    tier: DriverTier = "bronze"
    acceptance_rate: float = Field(default=0.0, ge=0.0, le=100.0)
    vehicle_type: str = "motorbike"
    is_in_medina: bool = False
    last_delivery_at: Optional[datetime] = None
    specializations: Sequence[str] = Field(default_factory=tuple)

    @field_validator("tier", mode="before")
    @classmethod
    def _normalize_tier(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def to_domain(self) -> DriverCandidate:
        return DriverCandidate(
            id=self.id,
            location=self.location.to_domain(),
            rating=self.rating,
            active_deliveries=self.active_deliveries,
            max_deliveries=self.max_deliveries,
            tier=self.tier,
            acceptance_rate=self.acceptance_rate,
            vehicle_type=self.vehicle_type,
            is_in_medina=self.is_in_medina,
            last_delivery_at=self.last_delivery_at,
            specializations=tuple(self.specializations),
        )


class OrderSnapshot(BaseModel):
    id: str = Field(..., min_length=1)
    pickup: CoordinatesModel
    dropoff: CoordinatesModel
    estimated_value: int = Field(..., ge=0, description="Order value in centimes.")
    cuisine: str
    is_fragile: bool = False
    max_wait_minutes: float = Field(..., gt=0.0)
    created_at: datetime
    priority: int = Field(default=0, ge=0, le=10)

    def to_domain(self) -> OrderInfo:
        return OrderInfo(
            id=self.id,
            pickup=self.pickup.to_domain(),
            dropoff=self.dropoff.to_domain(),
            estimated_value=self.estimated_value,
            cuisine=self.cuisine,
            is_fragile=self.is_fragile,
            max_wait_minutes=self.max_wait_minutes,
            created_at=self.created_at,
            priority=self.priority,
        )


class DeliveryZoneModel(BaseModel):
    id: str
    name: str
    center: CoordinatesModel
    radius_km: float = Field(..., gt=0.0)
    demand_level: Literal["low", "medium", "high"] = "medium"

    def to_domain(self) -> DeliveryZone:
        return DeliveryZone(
            id=self.id,
            name=self.name,
            center=self.center.to_domain(),
            radius_km=self.radius_km,
            demand_level=self.demand_level,
        )


class MatchResultModel(BaseModel):
    driver_id: str = Field(..., min_length=1)
    order_id: str = Field(..., min_length=1)
    score: float = Field(..., ge=0.0, le=100.0)
    estimated_pickup_minutes: float
    estimated_delivery_minutes: float
    distance_km: float
    reasons: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, result: MatchResult) -> "MatchResultModel":
        return cls(
            driver_id=result.driver_id,
            order_id=result.order_id,
            score=result.score,
            estimated_pickup_minutes=result.estimated_pickup_minutes,
            estimated_delivery_minutes=result.estimated_delivery_minutes,
            distance_km=result.distance_km,
            reasons=list(result.reasons),
        )
