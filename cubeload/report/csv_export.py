"""
Tabular export of a packing plan.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Dict, List, Sequence

from cubeload.core.geometry import Placement

CSV_COLUMNS = ["instance_id", "sku_id", "name", "x", "y", "z", "L", "W", "H", "weight"]


def placement_rows(placements: Sequence[Placement]) -> List[Dict[str, object]]:
    rows = []
    for placement in placements:
        rows.append(
            {
                "instance_id": placement.instance_id,
                "sku_id": placement.sku_id,
                "name": placement.name,
                "x": placement.position.x,
                "y": placement.position.y,
                "z": placement.position.z,
                "L": placement.dims[0],
                "W": placement.dims[1],
                "H": placement.dims[2],
                "weight": placement.weight,
            }
        )
    return rows


def placements_to_csv(placements: Sequence[Placement]) -> str:
    """Render the placement list as CSV text with a header row."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_COLUMNS, lineterminator="\n")
    writer.writeheader()
    writer.writerows(placement_rows(placements))
    return buffer.getvalue()


def write_placements_csv(placements: Sequence[Placement], output_path: str | Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(placements_to_csv(placements), encoding="utf-8")
    return output_path
