"""Data models for pairsim."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import TypeAlias

# Type aliases
Symbol: TypeAlias = Hashable
SymbolSequence: TypeAlias = Sequence[Symbol]
Histogram: TypeAlias = dict[Symbol, int]
PairKey: TypeAlias = int


@dataclass(slots=True, frozen=True)
class MatchTriple:
    """Overlap counts between two sequences.

    Attributes:
        a: Shared occurrences, sum of min(count_x, count_y) over common symbols.
        b: Occurrences only in x, equal to len(x) - a.
        c: Occurrences only in y, equal to len(y) - a.
    """

    a: int
    b: int
    c: int

    def swapped(self) -> MatchTriple:
        """Triple for the reversed comparison (y, x)."""
        return MatchTriple(self.a, self.c, self.b)


@dataclass(slots=True, frozen=True)
class CacheStats:
    """Read-only snapshot of a ValueCache."""

    size: int
    capacity: int
    hits: int
    misses: int
    evictions: int

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0
