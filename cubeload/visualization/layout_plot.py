"""
Plotly-based 3D visualisation of a container load plan.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import plotly.graph_objects as go
import plotly.io as pio
from plotly.colors import qualitative

from cubeload.core.geometry import Placement
from cubeload.core.solution import Solution
from cubeload.models.container import Container

DEFAULT_COLOR_SEQUENCE = qualitative.Light24
EDGE_COLOR = "#000000"
LOCKED_EDGE_COLOR = "#e53e3e"

# Vertex index pairs for the 12 edges of a prism built by _prism_vertices.
_PRISM_EDGES = [
    (0, 1),
    (1, 2),
    (2, 3),
    (3, 0),
    (4, 5),
    (5, 6),
    (6, 7),
    (7, 4),
    (0, 4),
    (1, 5),
    (2, 6),
    (3, 7),
]

# Two triangles per face: bottom, top, front, back, left, right.
_PRISM_TRIANGLES_I = [0, 0, 4, 4, 0, 0, 3, 3, 0, 0, 1, 1]
_PRISM_TRIANGLES_J = [1, 2, 5, 6, 1, 5, 2, 6, 3, 7, 2, 6]
_PRISM_TRIANGLES_K = [2, 3, 6, 7, 5, 4, 6, 7, 7, 4, 6, 5]


def _prism_vertices(
    x: float, y: float, z: float, dx: float, dy: float, dz: float
) -> Tuple[List[float], List[float], List[float]]:
    xs = [x, x + dx, x + dx, x, x, x + dx, x + dx, x]
    ys = [y, y, y + dy, y + dy, y, y, y + dy, y + dy]
    zs = [z, z, z, z, z + dz, z + dz, z + dz, z + dz]
    return xs, ys, zs


def _placement_mesh(placement: Placement, color: str) -> go.Mesh3d:
    xs, ys, zs = _prism_vertices(
        placement.position.x,
        placement.position.y,
        placement.position.z,
        *placement.dims,
    )
    hover = (
        f"{placement.name} ({placement.instance_id})<br>"
        f"pos: {placement.position.x:g}, {placement.position.y:g}, {placement.position.z:g}<br>"
        f"dims: {placement.dims[0]:g} x {placement.dims[1]:g} x {placement.dims[2]:g}<br>"
        f"weight: {placement.weight:g} kg"
    )
    return go.Mesh3d(
        x=xs,
        y=ys,
        z=zs,
        i=_PRISM_TRIANGLES_I,
        j=_PRISM_TRIANGLES_J,
        k=_PRISM_TRIANGLES_K,
        color=color,
        opacity=0.9,
        name=placement.name,
        flatshading=True,
        lighting=dict(ambient=0.7, diffuse=0.9, specular=0.1),
        hovertext=hover,
        hoverinfo="text",
        showscale=False,
    )


def _edge_trace(placement: Placement, color: str) -> go.Scatter3d:
    xs, ys, zs = _prism_vertices(
        placement.position.x,
        placement.position.y,
        placement.position.z,
        *placement.dims,
    )
    x_coords: List[float | None] = []
    y_coords: List[float | None] = []
    z_coords: List[float | None] = []
    for start, end in _PRISM_EDGES:
        x_coords.extend([xs[start], xs[end], None])
        y_coords.extend([ys[start], ys[end], None])
        z_coords.extend([zs[start], zs[end], None])

    return go.Scatter3d(
        x=x_coords,
        y=y_coords,
        z=z_coords,
        mode="lines",
        line=dict(color=color, width=2.5),
        name=placement.instance_id,
        showlegend=False,
        hoverinfo="skip",
    )


def _container_wireframe(container: Container, color: str = "#2d3748") -> go.Scatter3d:
    xs, ys, zs = _prism_vertices(0, 0, 0, container.length, container.width, container.height)
    x_coords = []
    y_coords = []
    z_coords = []
    for start, end in _PRISM_EDGES:
        x_coords.extend([xs[start], xs[end], None])
        y_coords.extend([ys[start], ys[end], None])
        z_coords.extend([zs[start], zs[end], None])

    return go.Scatter3d(
        x=x_coords,
        y=y_coords,
        z=z_coords,
        mode="lines",
        name=container.name,
        line=dict(color=color, width=4),
        showlegend=True,
        hoverinfo="skip",
    )


def _sku_colors(placements: Sequence[Placement]) -> Dict[str, str]:
    colors: Dict[str, str] = {}
    for placement in placements:
        if placement.sku_id not in colors:
            colors[placement.sku_id] = DEFAULT_COLOR_SEQUENCE[len(colors) % len(DEFAULT_COLOR_SEQUENCE)]
    return colors


def container_layout_figure(container: Container, solution: Solution) -> go.Figure:
    """Build the interactive 3D view of the container and its placements."""
    fig = go.Figure()
    fig.add_trace(_container_wireframe(container))

    colors = _sku_colors(solution.placements)
    for placement in solution.placements:
        fig.add_trace(_placement_mesh(placement, colors[placement.sku_id]))
        edge_color = LOCKED_EDGE_COLOR if placement.locked else EDGE_COLOR
        fig.add_trace(_edge_trace(placement, edge_color))

    axis_style = dict(
        backgroundcolor="#f2f5fb",
        gridcolor="#cbd5e0",
        zerolinecolor="#a0aec0",
    )
    fig.update_layout(
        title=f"{container.name} load plan",
        scene=dict(
            xaxis_title="Length (mm)",
            yaxis_title="Width (mm)",
            zaxis_title="Height (mm)",
            aspectmode="data",
            xaxis=axis_style,
            yaxis=axis_style,
            zaxis=axis_style,
        ),
        paper_bgcolor="#f7f9fc",
        plot_bgcolor="#f7f9fc",
        legend=dict(
            bgcolor="rgba(255,255,255,0.8)",
            bordercolor="#cbd5e0",
            borderwidth=1,
        ),
        margin=dict(l=0, r=0, t=40, b=0),
    )
    return fig


def save_figure_image(fig: go.Figure, output_path: str | Path, width: int = 900, height: int = 650) -> None:
    """
    Persist a figure to disk as a static PNG using Kaleido.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    pio.write_image(fig, str(output_path), format="png", width=width, height=height, scale=2)
