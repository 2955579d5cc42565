"""
Solution record returned by the solver and consumed by views and exports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from cubeload.core.geometry import Placement, Vec3
from cubeload.core.metrics import (
    center_of_gravity,
    total_weight,
    volume_utilization,
    weight_utilization,
)
from cubeload.models.container import Container
from cubeload.models.sku import ItemInstance


@dataclass
class Solution:
    placements: List[Placement] = field(default_factory=list)
    unplaced: List[ItemInstance] = field(default_factory=list)
    utilization: float = 0.0
    weight_utilization: float = 0.0
    center_of_gravity: Optional[Vec3] = None
    total_weight: float = 0.0

    @property
    def unplaced_count(self) -> int:
        return len(self.unplaced)

    def placement_for(self, instance_id: str) -> Optional[Placement]:
        for placement in self.placements:
            if placement.instance_id == instance_id:
                return placement
        return None

    def refresh_metrics(self, container: Container) -> None:
        """Recompute the derived metrics from the current placements."""
        weight = total_weight(self.placements)
        self.utilization = volume_utilization(container, self.placements)
        self.total_weight = weight
        self.weight_utilization = weight_utilization(container.max_weight, weight)
        self.center_of_gravity = center_of_gravity(self.placements)

    def to_dict(self) -> dict:
        return {
            "placements": [placement.to_dict() for placement in self.placements],
            "unplaced": [item.to_dict() for item in self.unplaced],
            "utilization": self.utilization,
            "weight_utilization": self.weight_utilization,
            "center_of_gravity": (
                self.center_of_gravity.to_dict() if self.center_of_gravity is not None else None
            ),
            "total_weight": self.total_weight,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Solution":
        cog = payload.get("center_of_gravity")
        return cls(
            placements=[Placement.from_dict(item) for item in payload.get("placements", [])],
            unplaced=[ItemInstance.from_dict(item) for item in payload.get("unplaced", [])],
            utilization=float(payload.get("utilization", 0.0)),
            weight_utilization=float(payload.get("weight_utilization", 0.0)),
            center_of_gravity=Vec3.from_dict(cog) if cog is not None else None,
            total_weight=float(payload.get("total_weight", 0.0)),
        )


def assemble_solution(
    container: Container,
    placements: Sequence[Placement],
    unplaced: Sequence[ItemInstance],
) -> Solution:
    """Combine placements and unplaced residue with freshly computed metrics."""
    solution = Solution(placements=list(placements), unplaced=list(unplaced))
    solution.refresh_metrics(container)
    return solution


def metrics_summary(solution: Solution) -> Dict[str, Any]:
    """Flat metric rows shared by the UI cards and the PDF report."""
    cog = solution.center_of_gravity
    return {
        "Volume Utilisation (%)": f"{solution.utilization:.1f}",
        "Weight Utilisation (%)": f"{solution.weight_utilization:.1f}",
        "Total Weight (kg)": f"{solution.total_weight:.1f}",
        "Center of Gravity (mm)": f"{cog.x:.1f}, {cog.y:.1f}, {cog.z:.1f}" if cog is not None else "-",
        "Placed Items": len(solution.placements),
        "Unplaced Items": solution.unplaced_count,
    }
