from datetime import datetime

import pytest
from pydantic import ValidationError

from src.mosaic.config import Settings
from src.mosaic.models.domain import Coordinates, DriverCandidate, OrderInfo
from src.mosaic.schemas.matching import DeliveryZoneModel, DriverSnapshot, MatchResultModel, OrderSnapshot
from src.mosaic.services.matching import find_best_driver


def _driver_payload(**overrides) -> dict:
    payload = {
        "id": "D1",
        "location": {"lat": 33.589, "lng": -7.603},
        "rating": 4.7,
        "active_deliveries": 1,
        "max_deliveries": 3,
        "tier": "Gold",
        "acceptance_rate": 92,
        "specializations": ["tagine", "harira"],
    }
    payload.update(overrides)
    return payload


def _order_payload(**overrides) -> dict:
    payload = {
        "id": "O1",
        "pickup": {"lat": 33.589, "lng": -7.603},
        "dropoff": {"lat": 33.599, "lng": -7.603},
        "estimated_value": 18_500,
        "cuisine": "tagine",
        "max_wait_minutes": 35,
        "created_at": "2026-10-15T19:05:00",
        "priority": 6,
    }
    payload.update(overrides)
    return payload


def test_driver_snapshot_converts_to_domain():
    driver = DriverSnapshot.model_validate(_driver_payload()).to_domain()

    assert isinstance(driver, DriverCandidate)
    assert driver.location == Coordinates(33.589, -7.603)
    assert driver.tier == "gold"
    assert driver.specializations == ("tagine", "harira")


@pytest.mark.parametrize(
    "overrides",
    [
        {"rating": 5.5},
        {"rating": 0.5},
        {"acceptance_rate": 101},
        {"max_deliveries": 0},
        {"active_deliveries": -1},
        {"tier": "titanium"},
        {"location": {"lat": 95.0, "lng": 0.0}},
    ],
)
def test_driver_snapshot_rejects_out_of_range_values(overrides):
    with pytest.raises(ValidationError):
        DriverSnapshot.model_validate(_driver_payload(**overrides))


def test_order_snapshot_converts_to_domain():
    order = OrderSnapshot.model_validate(_order_payload()).to_domain()

    assert isinstance(order, OrderInfo)
    assert order.created_at == datetime(2026, 10, 15, 19, 5)
    assert order.priority == 6


@pytest.mark.parametrize("overrides", [{"priority": 11}, {"max_wait_minutes": 0}, {"estimated_value": -1}])
def test_order_snapshot_rejects_out_of_range_values(overrides):
    with pytest.raises(ValidationError):
        OrderSnapshot.model_validate(_order_payload(**overrides))


def test_zone_model_converts_to_domain():
    zone = DeliveryZoneModel(id="Z1", name="Maarif", center={"lat": 33.58, "lng": -7.63}, radius_km=2.5).to_domain()
    assert zone.center == Coordinates(33.58, -7.63)
    assert zone.demand_level == "medium"


def test_match_result_round_trip_from_snapshots():
    driver = DriverSnapshot.model_validate(_driver_payload()).to_domain()
    order = OrderSnapshot.model_validate(_order_payload()).to_domain()
    result = find_best_driver(order, [driver])
    assert result is not None

    payload = MatchResultModel.from_domain(result).model_dump()
    assert payload["driver_id"] == "D1"
    assert payload["order_id"] == "O1"
    assert "Specializes in tagine" in payload["reasons"]


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.default_city == "casablanca"
    assert settings.max_pickup_distance_km == 10
    assert settings.min_score_threshold == 20
    assert settings.reassessment_window_minutes == 15
    assert settings.orders_per_driver == 3


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("MOSAIC_MIN_SCORE_THRESHOLD", "35")
    monkeypatch.setenv("MOSAIC_DEFAULT_CITY", "rabat")
    settings = Settings(_env_file=None)
    assert settings.min_score_threshold == 35
    assert settings.default_city == "rabat"


def test_settings_reject_invalid_values(monkeypatch):
    monkeypatch.setenv("MOSAIC_MAX_PICKUP_DISTANCE_KM", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_driver_snapshot_default_capacity_comes_from_settings(monkeypatch):
    from src.mosaic.config import settings

    payload = _driver_payload()
    del payload["max_deliveries"]
    assert DriverSnapshot.model_validate(payload).max_deliveries == 3

    monkeypatch.setattr(settings, "max_active_deliveries", 5)
    assert DriverSnapshot.model_validate(payload).max_deliveries == 5
