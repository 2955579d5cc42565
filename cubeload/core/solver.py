"""
Greedy shelf-packing solver for loading item instances into a single container.

Items fill a row along x, rows stack along y into a layer, and layers stack
upward along z. The sweep is forward-only and deterministic; a light
compaction pass afterwards slides boxes toward the origin along x.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from cubeload.core.geometry import Orientation, Placement, Vec3, fits_within, overlaps
from cubeload.core.orientations import allowed_orientations
from cubeload.core.solution import Solution, assemble_solution
from cubeload.models.container import Container
from cubeload.models.sku import ItemInstance, Sku, expand_skus

logger = logging.getLogger(__name__)

MAX_PASSES = 3
MAX_POSITION_TRIES = 3
COMPACTION_WINDOW = 50.0  # mm scanned back from the current x
COMPACTION_STEP = 5.0


@dataclass
class ShelfCursor:
    """Column/row/layer cursor local to one solve call."""

    x: float = 0.0
    y: float = 0.0
    row_depth: float = 0.0
    z: float = 0.0
    layer_height: float = 0.0

    def fits(self, footprint: Orientation, container: Container) -> bool:
        return (
            self.z + footprint[2] <= container.height
            and self.y + footprint[1] <= container.width
            and self.x + footprint[0] <= container.length
        )

    def advance(self, footprint: Orientation) -> None:
        self.x += footprint[0]
        self.row_depth = max(self.row_depth, footprint[1])
        self.layer_height = max(self.layer_height, footprint[2])

    def reset_row(self) -> None:
        self.x = 0.0
        self.row_depth = 0.0

    def new_row(self, clearance: float) -> None:
        self.y += self.row_depth + clearance
        self.reset_row()

    def new_layer(self, clearance: float) -> None:
        self.z += self.layer_height + clearance
        self.y = 0.0
        self.layer_height = 0.0
        self.reset_row()


def solve(container: Container, skus: Iterable[Sku]) -> Solution:
    """
    Plan a loading arrangement for the SKUs inside the container.

    Items that cannot be sited are returned in ``Solution.unplaced``; the
    call itself never fails because of an infeasible item.
    """
    instances = _sort_instances(expand_skus(skus))

    placements: List[Placement] = []
    unplaced: List[ItemInstance] = []
    cursor = ShelfCursor()

    for instance in instances:
        placement = _place_instance(instance, container, cursor, placements)
        if placement is None:
            logger.debug("No position found for %s (%s)", instance.instance_id, instance.name)
            unplaced.append(instance)
        else:
            placements.append(placement)

    compact_placements(placements)
    solution = assemble_solution(container, placements, unplaced)

    logger.info(
        "Solved %d instances: %d placed, %d unplaced, utilisation %.2f%%",
        len(instances),
        len(solution.placements),
        solution.unplaced_count,
        solution.utilization,
    )
    return solution


def _sort_instances(instances: List[ItemInstance]) -> List[ItemInstance]:
    # Non-fragile first so fragile items end up in later, higher layers;
    # largest native volume first within each group.
    return sorted(instances, key=lambda item: (item.fragile, -item.volume))


def _place_instance(
    instance: ItemInstance,
    container: Container,
    cursor: ShelfCursor,
    placements: List[Placement],
) -> Optional[Placement]:
    clearance = container.clearance
    orientations = allowed_orientations(instance.dimensions, instance.upright_only)

    for pass_index in range(MAX_PASSES):
        for dims in orientations:
            # An orientation that cannot fit an empty container is never retried.
            if not fits_within(dims, container.dimensions):
                continue
            footprint = (dims[0] + clearance, dims[1] + clearance, dims[2] + clearance)

            for attempt in range(MAX_POSITION_TRIES):
                if cursor.fits(footprint, container):
                    candidate = Placement(
                        instance_id=instance.instance_id,
                        sku_id=instance.sku_id,
                        name=instance.name,
                        position=Vec3(cursor.x, cursor.y, cursor.z),
                        dims=dims,
                        weight=instance.weight,
                    )
                    if not any(overlaps(existing, candidate) for existing in placements):
                        cursor.advance(footprint)
                        return candidate

                if attempt == 0:
                    cursor.new_row(clearance)
                elif attempt == 1:
                    cursor.new_layer(clearance)

        if pass_index < MAX_PASSES - 1:
            cursor.new_layer(clearance)

    return None


def compact_placements(placements: List[Placement]) -> None:
    """
    Slide each placement toward x = 0 without introducing overlap.

    Placements are visited in ascending x and checked against the live
    positions of all others, so the outcome depends on visiting order. For
    each one the lowest collision-free x within the scan window wins. Only
    ``position.x`` is changed; list order is preserved.
    """
    for placement in sorted(placements, key=lambda item: item.position.x):
        current_x = placement.position.x
        start_x = max(0.0, current_x - COMPACTION_WINDOW)
        steps = int((current_x - start_x) // COMPACTION_STEP) + 1
        for step in range(steps):
            candidate_x = start_x + step * COMPACTION_STEP
            if candidate_x > current_x:
                break
            moved = Placement(
                instance_id=placement.instance_id,
                sku_id=placement.sku_id,
                name=placement.name,
                position=Vec3(candidate_x, placement.position.y, placement.position.z),
                dims=placement.dims,
                weight=placement.weight,
            )
            if not any(other is not placement and overlaps(other, moved) for other in placements):
                placement.position = moved.position
                break
