"""Undirected multigraph over integer-labelled vertices.

The ``Graph`` class stores an adjacency list for vertices ``0 .. V-1`` and
permits both self-loops and parallel edges. Neighbours are kept in insertion
order and iterated most-recently-added first, which keeps the rendering of a
graph loaded from an edge list identical to the classic textbook output::

    13 vertices, 13 edges
    0: 6 2 1 5
    1: 0
    ...

Graphs can be created empty, filled with seeded random edges, parsed from the
whitespace-delimited edge-list format (``V``, ``E`` then ``E`` vertex pairs) or
copied from another graph. ``to_networkx`` exports a ``networkx.MultiGraph``
for visualisation and cross-checking; NetworkX is imported lazily so the core
structure stays usable without it.
"""

from __future__ import annotations

from collections import deque
import logging
from pathlib import Path
import random
from typing import (
    TYPE_CHECKING,
    Any,
    Deque,
    Iterable,
    Iterator,
    List,
    Optional,
    Protocol,
    TextIO,
    Tuple,
    TypeAlias,
    Union,
)

if TYPE_CHECKING:  # pragma: no cover - import is for type checking only
    import networkx as nx  # type: ignore[import-not-found,import-untyped]

    NxMultiGraph: TypeAlias = nx.MultiGraph
else:  # pragma: no cover - alias keeps runtime dependency optional
    NxMultiGraph: TypeAlias = Any

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]
EdgeListSource = Union[str, TextIO, Iterable[str]]

__all__ = [
    "EdgeListFormatError",
    "Graph",
    "GraphError",
    "GraphLike",
    "InvalidArgumentError",
    "NeighborView",
    "VertexOutOfRangeError",
    "validate_vertex",
]


class GraphError(Exception):
    """Base class for graph construction and query failures."""


class InvalidArgumentError(GraphError, ValueError):
    """Raised for negative counts, empty source sets and similar misuse."""


class VertexOutOfRangeError(GraphError, IndexError):
    """Raised when a vertex id falls outside ``[0, vertex_count)``."""


class EdgeListFormatError(GraphError, ValueError):
    """Raised when an edge-list stream is malformed or truncated."""


class GraphLike(Protocol):
    """Minimal traversal capability consumed by breadth-first search."""

    @property
    def vertex_count(self) -> int:  # pragma: no cover - protocol
        ...

    def neighbors_of(self, vertex: int) -> Iterable[int]:  # pragma: no cover
        ...


def validate_vertex(vertex: int, vertex_count: int) -> int:
    """Return *vertex* unchanged when it names a vertex of the graph.

    Booleans are rejected even though ``bool`` subclasses ``int`` so that a
    stray ``True`` never silently addresses vertex ``1``.
    """

    if not isinstance(vertex, int) or isinstance(vertex, bool):
        raise TypeError(f"Vertex ids must be integers, got {vertex!r}")
    if vertex < 0 or vertex >= vertex_count:
        raise VertexOutOfRangeError(
            f"Vertex {vertex} is not between 0 and {vertex_count - 1}"
        )
    return vertex


def _validate_count(value: int, label: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(f"{label} must be an integer")
    if value < 0:
        raise InvalidArgumentError(f"{label} must be nonnegative")
    return value


class NeighborView:
    """Read-only, restartable view over one vertex's neighbours.

    Each iteration walks the live adjacency storage, so the view reflects
    edges added after it was created.
    """

    __slots__ = ("_storage",)

    def __init__(self, storage: Deque[int]) -> None:
        self._storage = storage

    def __iter__(self) -> Iterator[int]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._storage

    def __repr__(self) -> str:
        return f"NeighborView({list(self._storage)!r})"


class Graph:
    """Undirected graph with parallel edges and self-loops.

    ``edge_count`` counts each ``add_edge`` call once even though the edge is
    recorded in the adjacency of both endpoints.
    """

    __slots__ = ("_vertex_count", "_edge_count", "_adjacency", "_edges")

    def __init__(self, vertex_count: int) -> None:
        self._vertex_count = _validate_count(vertex_count, "Number of vertices")
        self._edge_count = 0
        self._adjacency: List[Deque[int]] = [deque() for _ in range(vertex_count)]
        self._edges: List[Edge] = []

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------
    @classmethod
    def random(
        cls, vertex_count: int, edge_count: int, *, seed: Optional[int] = None
    ) -> "Graph":
        """Create a graph with *edge_count* edges between uniform random vertices.

        Self-loops and parallel edges may occur. Passing *seed* makes the
        result reproducible; ``None`` draws from fresh system entropy.
        """

        graph = cls(vertex_count)
        _validate_count(edge_count, "Number of edges")
        if edge_count and not vertex_count:
            raise InvalidArgumentError("Cannot add edges to a graph without vertices")
        rng = random.Random(seed)
        for _ in range(edge_count):
            graph.add_edge(rng.randrange(vertex_count), rng.randrange(vertex_count))
        return graph

    @classmethod
    def from_stream(cls, source: EdgeListSource) -> "Graph":
        """Parse the edge-list format: ``V``, ``E`` then ``E`` pairs ``v w``.

        *source* may be a string, an open text stream or any iterable of
        lines. Non-integer tokens, truncated input and trailing tokens raise
        :class:`EdgeListFormatError`; vertex ids outside ``[0, V)`` raise
        :class:`InvalidArgumentError`.
        """

        if isinstance(source, str):
            lines: Iterable[str] = source.splitlines()
        else:
            lines = source
        tokens = (token for line in lines for token in line.split())
        position = 0

        def next_int(label: str) -> int:
            nonlocal position
            try:
                token = next(tokens)
            except StopIteration:
                raise EdgeListFormatError(
                    f"Edge list truncated: expected {label} at token {position}"
                ) from None
            position += 1
            try:
                return int(token)
            except ValueError as exc:
                raise EdgeListFormatError(
                    f"Expected an integer for {label} at token {position - 1}, "
                    f"got {token!r}"
                ) from exc

        graph = cls(next_int("vertex count"))
        edge_count = _validate_count(next_int("edge count"), "Number of edges")
        for index in range(edge_count):
            v = next_int(f"edge {index} endpoint")
            w = next_int(f"edge {index} endpoint")
            try:
                graph.add_edge(v, w)
            except VertexOutOfRangeError as exc:
                raise InvalidArgumentError(f"Edge {index} ({v}, {w}): {exc}") from exc

        trailing = next(tokens, None)
        if trailing is not None:
            raise EdgeListFormatError(
                f"Unexpected trailing data at token {position}: {trailing!r}"
            )
        logger.debug(
            "Loaded graph with %d vertices and %d edges",
            graph.vertex_count,
            graph.edge_count,
        )
        return graph

    @classmethod
    def from_file(cls, path: Path) -> "Graph":
        """Read an edge-list file encoded as UTF-8."""

        with Path(path).open("r", encoding="utf-8") as handle:
            return cls.from_stream(handle)

    @classmethod
    def from_graph(cls, other: "Graph") -> "Graph":
        """Deep copy *other*, keeping every neighbour list in the same order."""

        graph = cls(other.vertex_count)
        graph._edge_count = other._edge_count
        graph._adjacency = [deque(neighbors) for neighbors in other._adjacency]
        graph._edges = list(other._edges)
        return graph

    def copy(self) -> "Graph":
        return Graph.from_graph(self)

    __copy__ = copy

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------
    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def add_edge(self, v: int, w: int) -> None:
        """Add the undirected edge ``v-w``.

        Both endpoints are validated before anything is recorded, so a failed
        call leaves the graph untouched.
        """

        validate_vertex(v, self._vertex_count)
        validate_vertex(w, self._vertex_count)
        self._edge_count += 1
        self._adjacency[v].appendleft(w)
        self._adjacency[w].appendleft(v)
        self._edges.append((v, w))

    def neighbors_of(self, vertex: int) -> NeighborView:
        """Return the neighbours of *vertex*, most recently added first."""

        validate_vertex(vertex, self._vertex_count)
        return NeighborView(self._adjacency[vertex])

    def degree(self, vertex: int) -> int:
        validate_vertex(vertex, self._vertex_count)
        return len(self._adjacency[vertex])

    def vertices(self) -> range:
        return range(self._vertex_count)

    def edges(self) -> Iterator[Edge]:
        """Yield every edge once, in the order it was added."""

        return iter(self._edges)

    # ------------------------------------------------------------------
    # Rendering and export
    # ------------------------------------------------------------------
    def describe(self) -> str:
        lines = [f"{self._vertex_count} vertices, {self._edge_count} edges"]
        for vertex, neighbors in enumerate(self._adjacency):
            lines.append(f"{vertex}: " + " ".join(str(w) for w in neighbors))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self._vertex_count}, edge_count={self._edge_count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self._vertex_count == other._vertex_count
            and self._edge_count == other._edge_count
            and self._adjacency == other._adjacency
        )

    __hash__ = None  # type: ignore[assignment]

    def to_networkx(self) -> NxMultiGraph:
        """Convert the graph to a ``networkx.MultiGraph``.

        Every vertex is added, including isolated ones, and every recorded
        edge becomes its own multi-edge.
        """

        try:
            import networkx as nx  # type: ignore[import-not-found]
        except ImportError as exc:  # pragma: no cover - exercised when missing
            raise ModuleNotFoundError(
                "NetworkX is required for graph export. Install it via 'pip install networkx'."
            ) from exc

        nx_graph = nx.MultiGraph()
        nx_graph.add_nodes_from(self.vertices())
        nx_graph.add_edges_from(self._edges)
        return nx_graph
