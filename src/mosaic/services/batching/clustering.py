"""Greedy spatial clustering of pending orders for batch assignment."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from ...config import settings
from ...models.domain import BatchCluster, Coordinates, OrderInfo
from ..geospatial import distance_km

logger = logging.getLogger(__name__)


def _centroid(orders: Sequence[OrderInfo]) -> Coordinates:
    coordinates = np.array([(order.pickup.lat, order.pickup.lng) for order in orders])
    lat, lng = coordinates.mean(axis=0)
    return Coordinates(lat=float(lat), lng=float(lng))


def batch_cluster_orders(
    orders: Sequence[OrderInfo],
    radius_km: Optional[float] = None,
) -> list[BatchCluster]:
    """Group orders whose pickups lie within ``radius_km`` of a seed order.

    Orders are visited by descending priority. Each unassigned order seeds a
    new cluster and absorbs every other unassigned order within the radius of
    the seed's pickup (not of the running centroid), so clusters may be
    elongated. Every input order ends up in exactly one cluster.

    The reported cluster radius is the farthest member pickup from the
    centroid, computed after membership is fixed.
    """
    if not orders:
        return []

    radius = settings.cluster_radius_km if radius_km is None else radius_km
    ranked = sorted(orders, key=lambda order: order.priority, reverse=True)
    assigned: set[int] = set()
    clusters: list[BatchCluster] = []

    for seed_index, seed in enumerate(ranked):
        if seed_index in assigned:
            continue
        members = [seed]
        assigned.add(seed_index)

        for index, other in enumerate(ranked):
            if index in assigned:
                continue
            if distance_km(seed.pickup, other.pickup) <= radius:
                members.append(other)
                assigned.add(index)

        center = _centroid(members)
        spread = max(distance_km(center, member.pickup) for member in members)
        clusters.append(BatchCluster(centroid=center, orders=tuple(members), radius_km=spread))

    logger.debug(f"Clustered {len(orders)} orders into {len(clusters)} batches (radius {radius} km)")
    return clusters
