"""Breadth-first shortest paths on undirected graphs.

``BreadthFirstPaths`` runs breadth-first search from one source vertex or from
a set of sources and keeps, for every vertex, whether it was reached, its hop
distance to the nearest source and the vertex it was discovered from. The
index is a snapshot: it holds no reference to the graph, so mutating the graph
afterwards requires building a fresh index.

Unreached vertices report ``None`` for both distance and predecessor rather
than a magic "infinite" integer.

The module also exposes ``format_paths`` and a ``main`` CLI entry point that
reads an edge-list file and prints one line per vertex::

    0 to 3 (2): 0-2-3
    0 to 7 (-): not connected
"""

from __future__ import annotations

from collections import deque
import argparse
import logging
from pathlib import Path
from typing import Any, Deque, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .undirected_graph import (
    GraphError,
    GraphLike,
    Graph,
    InvalidArgumentError,
    validate_vertex,
)

logger = logging.getLogger(__name__)

__all__ = [
    "BreadthFirstPaths",
    "format_paths",
    "main",
]


class BreadthFirstPaths:
    """Reachability, distance and predecessor index computed by BFS.

    Parameters
    ----------
    graph:
        Any object exposing ``vertex_count`` and ``neighbors_of``.
    sources:
        A single vertex id or a non-empty iterable of vertex ids. With several
        sources every one of them starts at distance ``0`` and ties between
        equidistant sources go to whichever was listed first.

    Raises
    ------
    InvalidArgumentError
        If *sources* is an empty iterable.
    VertexOutOfRangeError
        If any source is not a vertex of *graph*.
    """

    __slots__ = ("_vertex_count", "_sources", "_reached", "_distance", "_predecessor")

    def __init__(self, graph: GraphLike, sources: Union[int, Iterable[int]]) -> None:
        vertex_count = graph.vertex_count
        if isinstance(sources, int) and not isinstance(sources, bool):
            source_list = [sources]
        else:
            source_list = list(sources)
            if not source_list:
                raise InvalidArgumentError("At least one source vertex is required")
        for source in source_list:
            validate_vertex(source, vertex_count)

        self._vertex_count = vertex_count
        self._reached: List[bool] = [False] * vertex_count
        self._distance: List[Optional[int]] = [None] * vertex_count
        self._predecessor: List[Optional[int]] = [None] * vertex_count

        queue: Deque[int] = deque()
        ordered_sources: List[int] = []
        for source in source_list:
            if self._reached[source]:
                continue
            self._reached[source] = True
            self._distance[source] = 0
            ordered_sources.append(source)
            queue.append(source)
        self._sources: Tuple[int, ...] = tuple(ordered_sources)

        while queue:
            v = queue.popleft()
            next_distance = self._distance[v] + 1  # type: ignore[operator]
            for w in graph.neighbors_of(v):
                if not self._reached[w]:
                    self._reached[w] = True
                    self._distance[w] = next_distance
                    self._predecessor[w] = v
                    queue.append(w)

        logger.debug(
            "BFS from %s reached %d of %d vertices",
            self._sources,
            self.reached_count,
            vertex_count,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def sources(self) -> Tuple[int, ...]:
        """Distinct source vertices in the order they were enqueued."""

        return self._sources

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def reached_count(self) -> int:
        return sum(self._reached)

    def is_reached(self, vertex: int) -> bool:
        """Return ``True`` when some source has a path to *vertex*."""

        return self._reached[validate_vertex(vertex, self._vertex_count)]

    def distance_to(self, vertex: int) -> Optional[int]:
        """Return the hop count from the nearest source, ``None`` if unreached."""

        return self._distance[validate_vertex(vertex, self._vertex_count)]

    def predecessor_of(self, vertex: int) -> Optional[int]:
        """Return the vertex *vertex* was discovered from.

        Sources and unreached vertices have no predecessor.
        """

        return self._predecessor[validate_vertex(vertex, self._vertex_count)]

    def path_to(self, vertex: int) -> Optional[List[int]]:
        """Reconstruct a shortest path from a source to *vertex*.

        ``None`` means there is no path; it is not an error. Otherwise the
        returned list starts at a source and ends at *vertex*, and has
        ``distance_to(vertex) + 1`` entries.
        """

        if not self.is_reached(vertex):
            return None
        path: List[int] = []
        cursor = vertex
        while self._distance[cursor] != 0:
            path.append(cursor)
            cursor = self._predecessor[cursor]  # type: ignore[assignment]
        path.append(cursor)
        path.reverse()
        return path

    def as_dict(self) -> Dict[str, Any]:
        """Return a serialisable snapshot of the breadth-first tree."""

        snapshot: Dict[str, Any] = {"sources": list(self._sources)}
        snapshot["vertices"] = {
            vertex: {
                "distance": self._distance[vertex],
                "predecessor": self._predecessor[vertex],
                "path": self.path_to(vertex),
            }
            for vertex in range(self._vertex_count)
        }
        return snapshot

    def __repr__(self) -> str:
        return (
            f"BreadthFirstPaths(sources={self._sources!r}, "
            f"reached={self.reached_count}/{self._vertex_count})"
        )


def format_paths(paths: BreadthFirstPaths) -> List[str]:
    """Render one report line per vertex.

    Reached vertices appear as ``"<s> to <v> (<dist>): <p0>-<p1>-..."`` and
    unreached ones as ``"<s> to <v> (-): not connected"``. ``<s>`` lists the
    sources separated by commas.
    """

    label = ",".join(str(source) for source in paths.sources)
    lines: List[str] = []
    for vertex in range(paths.vertex_count):
        path = paths.path_to(vertex)
        if path is None:
            lines.append(f"{label} to {vertex} (-): not connected")
            continue
        route = "-".join(str(step) for step in path)
        lines.append(f"{label} to {vertex} ({paths.distance_to(vertex)}): {route}")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point printing shortest paths from the given sources."""

    parser = argparse.ArgumentParser(
        description="Print breadth-first shortest paths for an edge-list graph."
    )
    parser.add_argument("edge_list", type=Path, help="Path to the edge-list file.")
    parser.add_argument(
        "sources",
        type=int,
        nargs="+",
        help="One or more source vertex ids.",
    )
    parser.add_argument(
        "--describe",
        action="store_true",
        help="Print the adjacency lists before the path report.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        graph = Graph.from_file(args.edge_list)
        paths = BreadthFirstPaths(graph, args.sources)
    except (GraphError, OSError) as exc:
        logger.error("Failed to compute paths for %s: %s", args.edge_list, exc)
        return 1

    if args.describe:
        print(graph.describe(), end="")
    for line in format_paths(paths):
        print(line)
    logger.info("Reached %d of %d vertices", paths.reached_count, graph.vertex_count)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
