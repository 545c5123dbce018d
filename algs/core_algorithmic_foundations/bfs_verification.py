"""Optimality checks for breadth-first search results.

These helpers re-derive the correctness of a :class:`BreadthFirstPaths` index
from first principles using only its public queries. They are diagnostics for
test suites; building an index never runs them.

Conditions checked:

* every source sits at distance ``0``;
* for each edge ``v-w`` both endpoints are reached or neither is, and when
  reached ``distance(w) <= distance(v) + 1`` (checked from both ends);
* every reached non-source ``w`` satisfies
  ``distance(w) == distance(predecessor(w)) + 1``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .breadth_first_paths import BreadthFirstPaths
from .undirected_graph import GraphLike

__all__ = [
    "InvariantReport",
    "assert_bfs_invariants",
    "check_bfs_invariants",
]


@dataclass(frozen=True)
class InvariantReport:
    """Outcome of :func:`check_bfs_invariants`."""

    violations: Tuple[str, ...]

    @property
    def ok(self) -> bool:
        return not self.violations

    def __bool__(self) -> bool:  # pragma: no cover - thin wrapper
        return self.ok


def check_bfs_invariants(graph: GraphLike, paths: BreadthFirstPaths) -> InvariantReport:
    """Collect every optimality violation of *paths* against *graph*."""

    violations: List[str] = []
    if paths.vertex_count != graph.vertex_count:
        violations.append(
            f"index covers {paths.vertex_count} vertices, graph has {graph.vertex_count}"
        )
        return InvariantReport(tuple(violations))

    sources = set(paths.sources)
    for source in paths.sources:
        if paths.distance_to(source) != 0:
            violations.append(
                f"distance of source {source} to itself = {paths.distance_to(source)}"
            )

    for v in range(graph.vertex_count):
        for w in graph.neighbors_of(v):
            if paths.is_reached(v) != paths.is_reached(w):
                violations.append(
                    f"edge {v}-{w}: is_reached({v}) = {paths.is_reached(v)}, "
                    f"is_reached({w}) = {paths.is_reached(w)}"
                )
                continue
            if not paths.is_reached(v):
                continue
            dist_v = paths.distance_to(v)
            dist_w = paths.distance_to(w)
            if dist_w > dist_v + 1:  # type: ignore[operator]
                violations.append(
                    f"edge {v}-{w}: distance_to({v}) = {dist_v}, distance_to({w}) = {dist_w}"
                )

    for w in range(graph.vertex_count):
        if not paths.is_reached(w) or w in sources:
            continue
        v = paths.predecessor_of(w)
        if v is None:
            violations.append(f"reached vertex {w} has no predecessor")
            continue
        if paths.distance_to(w) != paths.distance_to(v) + 1:  # type: ignore[operator]
            violations.append(
                f"shortest path edge {v}-{w}: distance_to({v}) = {paths.distance_to(v)}, "
                f"distance_to({w}) = {paths.distance_to(w)}"
            )

    return InvariantReport(tuple(violations))


def assert_bfs_invariants(graph: GraphLike, paths: BreadthFirstPaths) -> None:
    """Raise ``AssertionError`` listing every violation found."""

    report = check_bfs_invariants(graph, paths)
    if not report.ok:
        raise AssertionError(
            "Breadth-first search invariants violated:\n" + "\n".join(report.violations)
        )
