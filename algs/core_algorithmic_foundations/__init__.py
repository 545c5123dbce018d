"""Core algorithmic implementations: graphs, searching and sorting."""

from .undirected_graph import (
    EdgeListFormatError,
    Graph,
    GraphError,
    GraphLike,
    InvalidArgumentError,
    NeighborView,
    VertexOutOfRangeError,
)
from .breadth_first_paths import BreadthFirstPaths, format_paths
from .bfs_verification import (
    InvariantReport,
    assert_bfs_invariants,
    check_bfs_invariants,
)
from .kmp_search import KMP, PatternError, kmp_search
from .merge_sort import index_sort, is_sorted, merge_sort, sort_in_place

__all__ = [
    "BreadthFirstPaths",
    "EdgeListFormatError",
    "Graph",
    "GraphError",
    "GraphLike",
    "InvalidArgumentError",
    "InvariantReport",
    "KMP",
    "NeighborView",
    "PatternError",
    "VertexOutOfRangeError",
    "assert_bfs_invariants",
    "check_bfs_invariants",
    "format_paths",
    "index_sort",
    "is_sorted",
    "kmp_search",
    "merge_sort",
    "sort_in_place",
]
