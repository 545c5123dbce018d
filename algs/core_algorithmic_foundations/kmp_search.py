"""Knuth-Morris-Pratt substring search driven by a finite automaton.

``KMP`` compiles a pattern into a deterministic finite automaton with one
state per pattern character. ``dfa[c][j]`` is the state reached after reading
character code ``c`` in state ``j``; reaching state ``len(pattern)`` means the
pattern has been matched. Scanning the text therefore never backs up and runs
in ``O(n)`` once the ``O(radix * m)`` table is built.

Patterns may be given as a ``str`` or as a sequence of single-character
strings. The alphabet defaults to the 256 extended-ASCII codes; pass a larger
``radix`` for wider alphabets.
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence, Union

__all__ = [
    "KMP",
    "PatternError",
    "kmp_search",
    "main",
]

Characters = Union[str, Sequence[str]]


class PatternError(ValueError):
    """Raised when a pattern cannot be compiled into an automaton."""


def _as_codes(characters: Characters, label: str) -> List[int]:
    if isinstance(characters, str):
        return [ord(char) for char in characters]
    codes: List[int] = []
    for char in characters:
        if not isinstance(char, str) or len(char) != 1:
            raise TypeError(f"{label} must contain single-character strings")
        codes.append(ord(char))
    return codes


class KMP:
    """Compiled KMP automaton for a single pattern."""

    __slots__ = ("pattern", "radix", "_dfa")

    def __init__(self, pattern: Characters, radix: int = 256) -> None:
        if not isinstance(radix, int) or radix < 1:
            raise PatternError("radix must be a positive integer")
        codes = _as_codes(pattern, "pattern")
        if not codes:
            raise PatternError("pattern must be non-empty")
        for code in codes:
            if code >= radix:
                raise PatternError(
                    f"pattern character {chr(code)!r} is outside the radix {radix}"
                )

        self.pattern = "".join(chr(code) for code in codes)
        self.radix = radix
        length = len(codes)
        dfa = [[0] * length for _ in range(radix)]
        dfa[codes[0]][0] = 1
        restart = 0
        for j in range(1, length):
            for c in range(radix):
                dfa[c][j] = dfa[c][restart]
            dfa[codes[j]][j] = j + 1
            restart = dfa[codes[j]][restart]
        self._dfa = dfa

    def __len__(self) -> int:
        return len(self.pattern)

    def transition(self, state: int, char: str) -> int:
        """Return the state reached from *state* after reading *char*."""

        code = ord(char)
        if code >= self.radix:
            return 0
        return self._dfa[code][state]

    def search(self, text: Characters) -> Optional[int]:
        """Return the offset of the first match in *text*, or ``None``."""

        codes = _as_codes(text, "text")
        length = len(self.pattern)
        dfa = self._dfa
        state = 0
        index = 0
        while index < len(codes) and state < length:
            code = codes[index]
            state = dfa[code][state] if code < self.radix else 0
            index += 1
        if state == length:
            return index - length
        return None


def kmp_search(pattern: Characters, text: Characters, *, radix: int = 256) -> Optional[int]:
    """Compile *pattern* and return its first offset in *text*."""

    return KMP(pattern, radix).search(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Print *text* with *pattern* aligned beneath its first match."""

    parser = argparse.ArgumentParser(description="Search text with the KMP automaton.")
    parser.add_argument("pattern")
    parser.add_argument("text")
    parser.add_argument("--radix", type=int, default=256, help="Alphabet size.")
    args = parser.parse_args(argv)

    try:
        matcher = KMP(args.pattern, args.radix)
    except PatternError as exc:
        parser.error(str(exc))

    offset = matcher.search(args.text)
    print(f"text:    {args.text}")
    if offset is None:
        # Push the pattern past the end of the text, as the classic client does.
        offset = len(args.text)
    print("pattern: " + " " * offset + args.pattern)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
