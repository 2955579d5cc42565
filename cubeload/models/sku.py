"""
Data model for item types (SKUs) and the individual units expanded from them.

Dimensions are expressed in millimetres (mm) and weight in kilograms (kg).
A SKU describes the native length x width x height of one unit; the solver
decides the orientation each unit is loaded in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple


def _require_non_negative(name: str, value: float) -> float:
    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {value!r}")
    return value


def _require_whole(name: str, value: Any) -> int:
    if isinstance(value, bool) or int(value) != value:
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    return int(_require_non_negative(name, value))


@dataclass(frozen=True)
class Sku:
    """Immutable item-type definition supplied by the caller."""

    id: str
    name: str
    length: float
    width: float
    height: float
    weight: float
    qty: int
    upright_only: bool = field(default=False)
    fragile: bool = field(default=False)
    # Carried for compatibility with saved jobs; the solver does not enforce it.
    stack_limit: Optional[int] = field(default=None)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(self, "length", float(_require_non_negative("length", self.length)))
        object.__setattr__(self, "width", float(_require_non_negative("width", self.width)))
        object.__setattr__(self, "height", float(_require_non_negative("height", self.height)))
        object.__setattr__(self, "weight", float(_require_non_negative("weight", self.weight)))
        object.__setattr__(self, "qty", _require_whole("qty", self.qty))
        object.__setattr__(self, "upright_only", bool(self.upright_only))
        object.__setattr__(self, "fragile", bool(self.fragile))
        if self.stack_limit is not None:
            object.__setattr__(self, "stack_limit", _require_whole("stack_limit", self.stack_limit))

    @property
    def dimensions(self) -> Tuple[float, float, float]:
        """Expose native dimensions as an (L, W, H) tuple."""
        return self.length, self.width, self.height

    @property
    def volume(self) -> float:
        """Return the cubic volume of a single unit in mm^3."""
        return self.length * self.width * self.height

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "length": self.length,
            "width": self.width,
            "height": self.height,
            "weight": self.weight,
            "qty": self.qty,
            "upright_only": self.upright_only,
            "fragile": self.fragile,
            "stack_limit": self.stack_limit,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Sku":
        return cls(
            id=str(payload["id"]),
            name=str(payload.get("name", payload["id"])),
            length=float(payload["length"]),
            width=float(payload["width"]),
            height=float(payload["height"]),
            weight=float(payload["weight"]),
            qty=payload["qty"],
            upright_only=bool(payload.get("upright_only", False)),
            fragile=bool(payload.get("fragile", False)),
            stack_limit=payload.get("stack_limit"),
        )


@dataclass(frozen=True)
class ItemInstance:
    """One physical unit of a SKU, tracked individually through a solve call."""

    sku: Sku
    instance_id: str

    @property
    def sku_id(self) -> str:
        return self.sku.id

    @property
    def name(self) -> str:
        return self.sku.name

    @property
    def dimensions(self) -> Tuple[float, float, float]:
        return self.sku.dimensions

    @property
    def volume(self) -> float:
        return self.sku.volume

    @property
    def weight(self) -> float:
        return self.sku.weight

    @property
    def fragile(self) -> bool:
        return self.sku.fragile

    @property
    def upright_only(self) -> bool:
        return self.sku.upright_only

    @property
    def stack_limit(self) -> Optional[int]:
        return self.sku.stack_limit

    def to_dict(self) -> Dict[str, Any]:
        payload = self.sku.to_dict()
        payload["instance_id"] = self.instance_id
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ItemInstance":
        return cls(sku=Sku.from_dict(payload), instance_id=str(payload["instance_id"]))


def expand_skus(skus: Iterable[Sku]) -> List[ItemInstance]:
    """
    Expand every SKU into ``qty`` item instances.

    Instance ids combine the SKU id with a serial that runs across the whole
    request, so they stay unique even if two SKUs share an id and are
    identical between repeated calls with the same input.
    """
    instances: List[ItemInstance] = []
    serial = 0
    for sku in skus:
        for _ in range(sku.qty):
            serial += 1
            instances.append(ItemInstance(sku=sku, instance_id=f"{sku.id}-{serial}"))
    return instances
