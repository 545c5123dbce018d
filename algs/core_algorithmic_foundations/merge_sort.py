"""Top-down merge sort and index merge sort.

Both variants are stable and share one auxiliary buffer across the whole
recursion. ``index_sort`` leaves the input untouched and returns the
permutation that would order it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, List, MutableSequence, Optional, Protocol, Sequence, TypeVar

logger = logging.getLogger(__name__)

__all__ = [
    "SupportsLessThan",
    "index_sort",
    "is_sorted",
    "main",
    "merge_sort",
    "sort_in_place",
]


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any, /) -> bool:  # pragma: no cover - protocol
        ...


T = TypeVar("T", bound=SupportsLessThan)


def _merge(items: MutableSequence[T], aux: List[T], lo: int, mid: int, hi: int) -> None:
    # items[lo..mid] and items[mid+1..hi] are sorted on entry.
    aux[lo : hi + 1] = items[lo : hi + 1]
    i, j = lo, mid + 1
    for k in range(lo, hi + 1):
        if i > mid:
            items[k] = aux[j]
            j += 1
        elif j > hi:
            items[k] = aux[i]
            i += 1
        elif aux[j] < aux[i]:
            items[k] = aux[j]
            j += 1
        else:
            items[k] = aux[i]
            i += 1


def _sort(items: MutableSequence[T], aux: List[T], lo: int, hi: int) -> None:
    if hi <= lo:
        return
    mid = lo + (hi - lo) // 2
    _sort(items, aux, lo, mid)
    _sort(items, aux, mid + 1, hi)
    _merge(items, aux, lo, mid, hi)


def sort_in_place(items: MutableSequence[T]) -> None:
    """Stably sort *items* in place."""

    aux = list(items)
    _sort(items, aux, 0, len(items) - 1)


def merge_sort(values: Iterable[T]) -> List[T]:
    """Return a new, stably sorted list of *values*."""

    items = list(values)
    sort_in_place(items)
    return items


def is_sorted(values: Sequence[T], lo: int = 0, hi: Optional[int] = None) -> bool:
    """Return ``True`` when ``values[lo..hi]`` (inclusive) is non-decreasing."""

    if hi is None:
        hi = len(values) - 1
    return all(not values[i] < values[i - 1] for i in range(lo + 1, hi + 1))


def _merge_index(
    values: Sequence[T], index: List[int], aux: List[int], lo: int, mid: int, hi: int
) -> None:
    aux[lo : hi + 1] = index[lo : hi + 1]
    i, j = lo, mid + 1
    for k in range(lo, hi + 1):
        if i > mid:
            index[k] = aux[j]
            j += 1
        elif j > hi:
            index[k] = aux[i]
            i += 1
        elif values[aux[j]] < values[aux[i]]:
            index[k] = aux[j]
            j += 1
        else:
            index[k] = aux[i]
            i += 1


def _sort_index(
    values: Sequence[T], index: List[int], aux: List[int], lo: int, hi: int
) -> None:
    if hi <= lo:
        return
    mid = lo + (hi - lo) // 2
    _sort_index(values, index, aux, lo, mid)
    _sort_index(values, index, aux, mid + 1, hi)
    _merge_index(values, index, aux, lo, mid, hi)


def index_sort(values: Sequence[T]) -> List[int]:
    """Return the stable permutation that lists *values* in ascending order."""

    index = list(range(len(values)))
    aux = list(index)
    _sort_index(values, index, aux, 0, len(values) - 1)
    return index


def main(argv: Sequence[str] | None = None) -> int:
    """Read whitespace-separated strings, print them sorted one per line."""

    parser = argparse.ArgumentParser(description="Sort strings with merge sort.")
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=None,
        help="File to read instead of standard input.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.input is None:
        words = sys.stdin.read().split()
    else:
        try:
            words = args.input.read_text(encoding="utf-8").split()
        except OSError as exc:
            logger.error("Failed to read %s: %s", args.input, exc)
            return 1

    logger.debug("Sorting %d strings", len(words))
    for word in merge_sort(words):
        print(word)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
