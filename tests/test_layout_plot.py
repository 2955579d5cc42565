"""
Tests for the Plotly container layout figure.
"""

from conftest import make_placement

from cubeload.core.solution import assemble_solution
from cubeload.visualization.layout_plot import (
    EDGE_COLOR,
    LOCKED_EDGE_COLOR,
    container_layout_figure,
)


def test_one_mesh_and_edge_trace_per_placement(cube_container):
    placements = [
        make_placement("a-1", 0, 0, 0, sku_id="a"),
        make_placement("a-2", 100, 0, 0, sku_id="a"),
        make_placement("b-3", 200, 0, 0, sku_id="b"),
    ]
    fig = container_layout_figure(cube_container, assemble_solution(cube_container, placements, []))

    assert len(fig.data) == 1 + 2 * len(placements)
    assert fig.data[0].name == cube_container.name

    meshes = [trace for trace in fig.data if trace.type == "mesh3d"]
    assert meshes[0].color == meshes[1].color
    assert meshes[0].color != meshes[2].color


def test_locked_placements_are_highlighted(cube_container):
    placements = [make_placement("a-1", 0, 0, 0), make_placement("a-2", 100, 0, 0)]
    placements[1].locked = True
    fig = container_layout_figure(cube_container, assemble_solution(cube_container, placements, []))

    edges = [trace for trace in fig.data[1:] if trace.type == "scatter3d"]
    assert edges[0].line.color == EDGE_COLOR
    assert edges[1].line.color == LOCKED_EDGE_COLOR


def test_empty_solution_draws_container_only(cube_container):
    fig = container_layout_figure(cube_container, assemble_solution(cube_container, [], []))
    assert len(fig.data) == 1
