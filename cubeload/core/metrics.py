"""
Load metrics computed over a set of placements.

All functions are pure and can be used on their own by reporting code
without running the solver again.
"""

from __future__ import annotations

from typing import Optional, Sequence

from cubeload.core.geometry import Placement, Vec3
from cubeload.models.container import Container


def volume_utilization(container: Container, placements: Sequence[Placement]) -> float:
    """
    Volume utilisation metric expressed as a percentage (0.0 - 100.0).
    """
    container_volume = container.volume
    if container_volume == 0:
        return 0.0
    used_volume = sum(placement.volume for placement in placements)
    return float(used_volume) / float(container_volume) * 100.0


def total_weight(placements: Sequence[Placement]) -> float:
    return float(sum(placement.weight for placement in placements))


def weight_utilization(max_weight: float, current_weight: float) -> float:
    """Loaded weight as a percentage of the container's weight limit."""
    if max_weight == 0:
        return 0.0
    return float(current_weight) / float(max_weight) * 100.0


def center_of_gravity(placements: Sequence[Placement]) -> Optional[Vec3]:
    """
    Weight-weighted average of the placement centroids, or None when nothing
    with weight has been loaded.
    """
    weight = total_weight(placements)
    if weight == 0:
        return None

    cx = cy = cz = 0.0
    for placement in placements:
        centroid = placement.centroid
        cx += centroid.x * placement.weight
        cy += centroid.y * placement.weight
        cz += centroid.z * placement.weight
    return Vec3(cx / weight, cy / weight, cz / weight)
