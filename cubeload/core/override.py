"""
Manual placement overrides coming from the interactive layout view.

Overrides are checked against bounds and collisions only; the solver is never
re-run and unplaced items are left alone.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from cubeload.core.geometry import Placement, overlaps, within_container
from cubeload.core.solution import Solution
from cubeload.models.container import Container

logger = logging.getLogger(__name__)


def validate_override(
    candidate: Placement,
    current_placements: Sequence[Placement],
    container: Container,
) -> bool:
    """
    Return True when the candidate can replace the existing placement with the
    same instance id.
    """
    existing = next(
        (placement for placement in current_placements if placement.instance_id == candidate.instance_id),
        None,
    )
    if existing is None:
        logger.info("Override rejected: unknown instance %s", candidate.instance_id)
        return False
    # A move may rotate the item but never change what it is.
    if (
        candidate.sku_id != existing.sku_id
        or sorted(candidate.dims) != sorted(existing.dims)
        or candidate.weight != existing.weight
    ):
        logger.info("Override rejected: %s changes the item itself", candidate.instance_id)
        return False
    if not within_container(candidate, container):
        logger.info("Override rejected: %s leaves the container", candidate.instance_id)
        return False
    for placement in current_placements:
        if placement.instance_id == candidate.instance_id:
            continue
        if overlaps(placement, candidate):
            logger.info(
                "Override rejected: %s collides with %s",
                candidate.instance_id,
                placement.instance_id,
            )
            return False
    return True


def apply_override(solution: Solution, candidate: Placement, container: Container) -> bool:
    """
    Validate the candidate and, if accepted, swap it into the solution.

    The stored placement is marked as locked and the solution metrics are
    recomputed. A rejected candidate leaves the solution untouched.
    """
    if not validate_override(candidate, solution.placements, container):
        return False

    for index, placement in enumerate(solution.placements):
        if placement.instance_id == candidate.instance_id:
            solution.placements[index] = replace(candidate, locked=True)
            break
    solution.refresh_metrics(container)
    return True
