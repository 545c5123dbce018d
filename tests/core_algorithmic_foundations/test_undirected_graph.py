"""Regression tests for the undirected multigraph."""

from __future__ import annotations

import copy
import io
from pathlib import Path

import pytest

from algs.core_algorithmic_foundations.undirected_graph import (
    EdgeListFormatError,
    Graph,
    InvalidArgumentError,
    VertexOutOfRangeError,
)

TINY_CG = """6
8
0 5
2 4
2 3
1 2
0 1
3 4
3 5
0 2
"""


def tiny_cg() -> Graph:
    return Graph.from_stream(TINY_CG)


def test_new_graph_is_empty() -> None:
    graph = Graph(4)
    assert graph.vertex_count == 4
    assert graph.edge_count == 0
    assert all(len(graph.neighbors_of(v)) == 0 for v in graph.vertices())


@pytest.mark.parametrize("vertex_count", [-1, 2.5, True])
def test_invalid_vertex_count_rejected(vertex_count: object) -> None:
    with pytest.raises(InvalidArgumentError):
        Graph(vertex_count)  # type: ignore[arg-type]


def test_add_edge_records_both_endpoints_newest_first() -> None:
    graph = Graph(3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)

    assert graph.edge_count == 2
    assert list(graph.neighbors_of(0)) == [2, 1]
    assert 0 in graph.neighbors_of(1)
    assert 0 in graph.neighbors_of(2)


def test_self_loops_and_parallel_edges_are_kept() -> None:
    graph = Graph(2)
    graph.add_edge(1, 1)
    graph.add_edge(0, 1)
    graph.add_edge(0, 1)

    assert graph.edge_count == 3
    assert list(graph.neighbors_of(1)) == [0, 0, 1, 1]
    assert list(graph.neighbors_of(0)) == [1, 1]
    assert sum(graph.degree(v) for v in graph.vertices()) == 2 * graph.edge_count
    assert list(graph.edges()) == [(1, 1), (0, 1), (0, 1)]


@pytest.mark.parametrize("edge", [(-1, 0), (0, 3), (3, 3)])
def test_add_edge_out_of_range_leaves_graph_untouched(edge: tuple[int, int]) -> None:
    graph = Graph(3)
    with pytest.raises(VertexOutOfRangeError):
        graph.add_edge(*edge)
    assert graph.edge_count == 0
    assert list(graph.edges()) == []


def test_neighbors_of_validates_vertex() -> None:
    graph = Graph(2)
    with pytest.raises(VertexOutOfRangeError):
        graph.neighbors_of(2)
    with pytest.raises(TypeError):
        graph.neighbors_of(True)  # type: ignore[arg-type]


def test_neighbor_view_is_restartable_and_live() -> None:
    graph = Graph(3)
    graph.add_edge(0, 1)
    view = graph.neighbors_of(0)
    assert list(view) == list(view) == [1]

    graph.add_edge(0, 2)
    assert list(view) == [2, 1]
    assert len(view) == 2


def test_describe_matches_classic_rendering() -> None:
    assert tiny_cg().describe() == (
        "6 vertices, 8 edges\n"
        "0: 2 1 5\n"
        "1: 0 2\n"
        "2: 0 1 3 4\n"
        "3: 5 4 2\n"
        "4: 3 2\n"
        "5: 3 0\n"
    )
    assert str(Graph(1)) == "1 vertices, 0 edges\n0: \n"


def test_copy_preserves_order_and_is_independent() -> None:
    original = tiny_cg()
    original.add_edge(4, 4)
    duplicate = Graph.from_graph(original)

    assert duplicate == original
    assert duplicate.vertex_count == original.vertex_count
    assert duplicate.edge_count == original.edge_count
    for v in original.vertices():
        assert list(duplicate.neighbors_of(v)) == list(original.neighbors_of(v))

    duplicate.add_edge(0, 3)
    assert original.edge_count == 9
    assert 3 not in original.neighbors_of(0)
    assert copy.copy(original) == original


def test_from_stream_accepts_text_streams(tmp_path: Path) -> None:
    assert Graph.from_stream(io.StringIO(TINY_CG)) == tiny_cg()

    target = tmp_path / "tinyCG.txt"
    target.write_text(TINY_CG, encoding="utf-8")
    assert Graph.from_file(target) == tiny_cg()


@pytest.mark.parametrize(
    "payload",
    [
        "",
        "3",
        "3 2 0 1",
        "3 1 0 x",
        "three 0",
        "2 1 0 1 5",
    ],
)
def test_from_stream_rejects_malformed_input(payload: str) -> None:
    with pytest.raises(EdgeListFormatError):
        Graph.from_stream(payload)


@pytest.mark.parametrize("payload", ["2 1 0 2", "2 1 -1 0", "-1 0", "2 -1"])
def test_from_stream_rejects_invalid_values(payload: str) -> None:
    with pytest.raises(InvalidArgumentError):
        Graph.from_stream(payload)


def test_random_graph_is_reproducible_with_seed() -> None:
    first = Graph.random(20, 40, seed=7)
    second = Graph.random(20, 40, seed=7)

    assert first == second
    assert first.edge_count == 40
    assert sum(first.degree(v) for v in first.vertices()) == 80


@pytest.mark.parametrize("vertex_count,edge_count", [(-1, 0), (3, -1), (0, 1)])
def test_random_graph_rejects_invalid_counts(vertex_count: int, edge_count: int) -> None:
    with pytest.raises(InvalidArgumentError):
        Graph.random(vertex_count, edge_count, seed=0)


def test_networkx_export_round_trip() -> None:
    nx = pytest.importorskip("networkx")
    graph = tiny_cg()
    graph.add_edge(1, 1)
    graph.add_edge(0, 5)

    exported = graph.to_networkx()
    assert isinstance(exported, nx.MultiGraph)
    assert set(exported.nodes) == set(range(6))
    assert exported.number_of_edges() == graph.edge_count
    assert exported.number_of_edges(0, 5) == 2
    assert exported.has_edge(1, 1)
