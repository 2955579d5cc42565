"""
Orientation enumeration for rectangular items.
"""

from __future__ import annotations

from typing import List, Sequence

from cubeload.core.geometry import Orientation


def allowed_orientations(dimensions: Sequence[float], upright_only: bool = False) -> List[Orientation]:
    """
    Return the axis-aligned orientations an item may be loaded in.

    Upright-only items keep their native (L, W, H) order. Otherwise all six
    permutations are returned in a fixed order; equal edge lengths produce
    repeated entries, which the solver simply tries again.
    """
    length, width, height = (float(value) for value in dimensions)
    if upright_only:
        return [(length, width, height)]
    return [
        (length, width, height),
        (length, height, width),
        (width, length, height),
        (width, height, length),
        (height, length, width),
        (height, width, length),
    ]
