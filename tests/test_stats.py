from src.mosaic.models.domain import MatchResult
from src.mosaic.services.stats.service import compute_assignment_stats


def _result(order_id: str, score: float, pickup: float, distance: float) -> MatchResult:
    return MatchResult(
        driver_id=f"D-{order_id}",
        order_id=order_id,
        score=score,
        estimated_pickup_minutes=pickup,
        estimated_delivery_minutes=12.0,
        distance_km=distance,
    )


def test_empty_results_report_zeros():
    stats = compute_assignment_stats([], 7)
    assert stats.total_orders == 7
    assert stats.assigned_orders == 0
    assert stats.average_score == 0
    assert stats.average_pickup_minutes == 0
    assert stats.average_distance_km == 0


def test_averages_are_rounded():
    results = [
        _result("O1", 80.0, 4.0, 3.1),
        _result("O2", 60.0, 6.5, 2.2),
        _result("O3", 71.0, 5.0, 1.0),
    ]
    stats = compute_assignment_stats(results, 5)

    assert stats.total_orders == 5
    assert stats.assigned_orders == 3
    assert stats.average_score == 70.33
    assert stats.average_pickup_minutes == 5.17
    assert stats.average_distance_km == 2.1
