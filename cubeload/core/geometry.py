"""
Geometry helpers shared by the solver, the compaction pass and override checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Mapping, Sequence, Tuple

if TYPE_CHECKING:
    from cubeload.models.container import Container


Orientation = Tuple[float, float, float]


@dataclass(frozen=True)
class Vec3:
    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Vec3":
        return cls(x=float(payload["x"]), y=float(payload["y"]), z=float(payload["z"]))


@dataclass
class Placement:
    """
    Represents one item instance sited inside the container.

    ``position`` is the minimum (lower x/y/z) corner and ``dims`` the oriented
    dimensions without clearance.
    """

    instance_id: str
    sku_id: str
    name: str
    position: Vec3
    dims: Orientation
    weight: float
    locked: bool = field(default=False)

    @property
    def max_corner(self) -> Vec3:
        return Vec3(
            self.position.x + self.dims[0],
            self.position.y + self.dims[1],
            self.position.z + self.dims[2],
        )

    @property
    def centroid(self) -> Vec3:
        return Vec3(
            self.position.x + self.dims[0] / 2.0,
            self.position.y + self.dims[1] / 2.0,
            self.position.z + self.dims[2] / 2.0,
        )

    @property
    def volume(self) -> float:
        return self.dims[0] * self.dims[1] * self.dims[2]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "instance_id": self.instance_id,
            "sku_id": self.sku_id,
            "name": self.name,
            "position": self.position.to_dict(),
            "dims": list(self.dims),
            "weight": self.weight,
            "locked": self.locked,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Placement":
        dx, dy, dz = (float(value) for value in payload["dims"])
        return cls(
            instance_id=str(payload["instance_id"]),
            sku_id=str(payload["sku_id"]),
            name=str(payload["name"]),
            position=Vec3.from_dict(payload["position"]),
            dims=(dx, dy, dz),
            weight=float(payload["weight"]),
            locked=bool(payload.get("locked", False)),
        )


def overlaps(a: Placement, b: Placement) -> bool:
    """
    Check whether two axis-aligned boxes intersect.

    Comparisons are strict, so boxes that only share a face do not overlap.
    """
    a_max = a.max_corner
    b_max = b.max_corner
    return (
        a.position.x < b_max.x and a_max.x > b.position.x
        and a.position.y < b_max.y and a_max.y > b.position.y
        and a.position.z < b_max.z and a_max.z > b.position.z
    )


def fits_within(dims: Sequence[float], space: Sequence[float]) -> bool:
    """Return True when each oriented dimension is no larger than the space."""
    return dims[0] <= space[0] and dims[1] <= space[1] and dims[2] <= space[2]


def within_container(placement: Placement, container: "Container") -> bool:
    """Check that a placement's box lies inside [0, L] x [0, W] x [0, H]."""
    position = placement.position
    if position.x < 0 or position.y < 0 or position.z < 0:
        return False
    return fits_within(placement.max_corner.as_tuple(), container.dimensions)
