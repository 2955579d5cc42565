"""
Data model representing the container (shipper) that items are loaded into.

Dimensions are internal dimensions in millimetres (mm) along x (length),
y (width) and z (height); max weight is in kilograms (kg). Values are checked
eagerly so invalid configurations surface before the solver runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple


def _require_non_negative(name: str, value: float) -> float:
    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {value!r}")
    return value


@dataclass(frozen=True)
class Container:
    """Immutable container used as the single bin for a solve call."""

    length: float
    width: float
    height: float
    max_weight: float
    clearance: float = field(default=0)
    name: str = field(default="Container")

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", float(_require_non_negative("length", self.length)))
        object.__setattr__(self, "width", float(_require_non_negative("width", self.width)))
        object.__setattr__(self, "height", float(_require_non_negative("height", self.height)))
        object.__setattr__(self, "max_weight", float(_require_non_negative("max_weight", self.max_weight)))
        object.__setattr__(self, "clearance", float(_require_non_negative("clearance", self.clearance)))

    @property
    def volume(self) -> float:
        """Return usable internal volume in mm^3."""
        return self.length * self.width * self.height

    @property
    def dimensions(self) -> Tuple[float, float, float]:
        """Return inner dimensions (length, width, height)."""
        return self.length, self.width, self.height

    def to_dict(self) -> Dict[str, float | str]:
        return {
            "name": self.name,
            "length": self.length,
            "width": self.width,
            "height": self.height,
            "max_weight": self.max_weight,
            "clearance": self.clearance,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Container":
        """Instantiate from a raw configuration dictionary."""
        return cls(
            name=str(payload.get("name", "Container")),
            length=float(payload["length"]),
            width=float(payload["width"]),
            height=float(payload["height"]),
            max_weight=float(payload["max_weight"]),
            clearance=float(payload.get("clearance", 0)),
        )
