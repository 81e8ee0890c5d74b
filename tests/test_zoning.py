from src.mosaic.models.domain import Coordinates, DeliveryZone, DriverCandidate
from src.mosaic.services.zoning.zones import count_drivers_in_zone, find_zone_for_point

GUELIZ = DeliveryZone(id="MRK-1", name="Gueliz", center=Coordinates(31.6340, -8.0100), radius_km=2.0, demand_level="high")
MEDINA = DeliveryZone(id="MRK-2", name="Medina", center=Coordinates(31.6260, -7.9890), radius_km=3.0)


def _driver(driver_id: str, lat: float, lng: float) -> DriverCandidate:
    return DriverCandidate(
        id=driver_id,
        location=Coordinates(lat, lng),
        rating=4.2,
        active_deliveries=0,
        max_deliveries=3,
        tier="gold",
        acceptance_rate=90,
    )


def test_point_in_single_zone():
    assert find_zone_for_point(Coordinates(31.6340, -8.0110), [GUELIZ, MEDINA]) == GUELIZ


def test_overlapping_zones_resolve_by_input_order():
    between = Coordinates(31.6300, -8.0000)
    assert find_zone_for_point(between, [GUELIZ, MEDINA]) == GUELIZ
    assert find_zone_for_point(between, [MEDINA, GUELIZ]) == MEDINA


def test_point_outside_every_zone():
    assert find_zone_for_point(Coordinates(31.7500, -8.2000), [GUELIZ, MEDINA]) is None
    assert find_zone_for_point(Coordinates(31.6340, -8.0100), []) is None


def test_count_drivers_in_zone():
    drivers = [
        _driver("D1", 31.6340, -8.0100),
        _driver("D2", 31.6400, -8.0150),
        _driver("D3", 31.7000, -8.1000),
    ]
    assert count_drivers_in_zone(GUELIZ, drivers) == 2
    assert count_drivers_in_zone(GUELIZ, []) == 0
