"""Histogram (bag-of-symbols) construction."""

from __future__ import annotations

from collections import Counter

from ..types import Histogram, SymbolSequence


def bag_create(x: SymbolSequence) -> Histogram:
    """Count occurrences of each distinct symbol in ``x``.

    Strings are treated as character sequences. An empty sequence yields an
    empty histogram; entries only exist for observed symbols, so every count
    is positive.
    """
    return Counter(x)
