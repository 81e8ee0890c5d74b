"""Matching engine configuration and settings management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime tunables loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="MOSAIC_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_city: str = Field(
        default="casablanca",
        description="City profile used when a city key is missing or unknown.",
    )
    max_pickup_distance_km: float = Field(
        default=10.0,
        gt=0.0,
        description="Drivers farther than this from the pickup are not eligible.",
    )
    max_active_deliveries: int = Field(default=3, ge=1)
    min_score_threshold: float = Field(
        default=20.0,
        ge=0.0,
        le=100.0,
        description="Best candidates scoring below this are rejected.",
    )
    close_pickup_km: float = Field(default=2.0, ge=0.0)
    highly_rated_threshold: float = Field(default=4.5, ge=1.0, le=5.0)
    surge_base_multiplier: float = Field(default=1.0, ge=0.0)
    surge_max_multiplier: float = Field(default=3.0, ge=1.0)
    surge_demand_threshold: float = Field(
        default=0.8,
        ge=0.0,
        description="Demand/supply ratio above which light surge applies.",
    )
    cluster_radius_km: float = Field(default=2.0, ge=0.0)
    reassessment_window_minutes: float = Field(
        default=15.0,
        ge=0.0,
        description="Minimum elapsed minutes before an assignment may be revisited.",
    )
    reassignment_min_saving_minutes: float = Field(default=5.0, ge=0.0)
    orders_per_driver: int = Field(
        default=3,
        ge=1,
        description="Concurrent orders one driver is assumed to serve when forecasting.",
    )
    default_prep_minutes: float = Field(default=10.0, ge=0.0)


settings = Settings()
