"""Driver leaderboard ranking."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence

from ...models.domain import DriverCandidate, LeaderboardEntry

TIER_BONUS: Mapping[str, float] = MappingProxyType(
    {"diamond": 20.0, "platinum": 15.0, "gold": 10.0, "silver": 5.0}
)


def leaderboard_score(driver: DriverCandidate) -> float:
    score = driver.rating * 20 + driver.acceptance_rate * 0.3 + TIER_BONUS.get(driver.tier.lower(), 0.0)
    return round(score, 2)


def rank_drivers_for_leaderboard(drivers: Sequence[DriverCandidate]) -> list[LeaderboardEntry]:
    """Rank drivers by reputation score, best first. Ties keep input order."""

    scored = sorted(
        ((driver.id, leaderboard_score(driver)) for driver in drivers),
        key=lambda item: item[1],
        reverse=True,
    )
    return [
        LeaderboardEntry(driver_id=driver_id, rank=rank, score=score)
        for rank, (driver_id, score) in enumerate(scored, start=1)
    ]
