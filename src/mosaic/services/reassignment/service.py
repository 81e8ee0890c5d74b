"""Evaluation of whether an in-flight assignment should move to another driver."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...config import settings
from ...models.domain import Coordinates, DriverCandidate, ReassignmentEvaluation
from ..travel.estimator import estimate_travel_minutes

logger = logging.getLogger(__name__)


def _closest_alternative(
    current_driver_id: str,
    pickup: Coordinates,
    alternatives: Sequence[DriverCandidate],
) -> tuple[DriverCandidate | None, float]:
    best: DriverCandidate | None = None
    best_eta = math.inf
    for driver in alternatives:
        if driver.id == current_driver_id or not driver.has_capacity:
            continue
        eta = estimate_travel_minutes(driver.location, pickup)
        if eta < best_eta:
            best, best_eta = driver, eta
    return best, best_eta


def evaluate_reassignment(
    current_driver_id: str,
    current_location: Coordinates,
    pickup: Coordinates,
    alternatives: Sequence[DriverCandidate],
    elapsed_minutes: float,
    max_wait_minutes: float,
) -> ReassignmentEvaluation:
    """Decide whether to hand the pickup to a faster alternative driver.

    Nothing is reconsidered inside the reassessment window, or while the
    current driver still arrives within the order's maximum wait. A switch is
    recommended only when the best alternative beats the current ETA by more
    than the minimum saving, so marginal gains never cause driver churn.
    """
    if elapsed_minutes < settings.reassessment_window_minutes:
        return ReassignmentEvaluation(should_reassign=False, reason="Too early to reassess")

    current_eta = estimate_travel_minutes(current_location, pickup)
    if current_eta + elapsed_minutes <= max_wait_minutes:
        return ReassignmentEvaluation(
            should_reassign=False,
            reason="Current driver will arrive within acceptable time",
        )

    best, best_eta = _closest_alternative(current_driver_id, pickup, alternatives)
    if best is None or best_eta >= current_eta:
        return ReassignmentEvaluation(should_reassign=False, reason="No closer driver available")

    saving = current_eta - best_eta
    if saving <= settings.reassignment_min_saving_minutes:
        return ReassignmentEvaluation(
            should_reassign=False,
            reason=f"Time saving of {saving:.1f} min too small to justify reassignment",
            expected_time_saving=round(saving, 2),
        )

    logger.info(f"Reassignment from {current_driver_id} to {best.id} saves {saving:.1f} minutes")
    return ReassignmentEvaluation(
        should_reassign=True,
        reason=f"Found closer driver saving {saving:.1f} minutes",
        new_driver_id=best.id,
        expected_time_saving=round(saving, 2),
    )
