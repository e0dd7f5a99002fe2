"""
Set matching: reduce two histograms to (shared, left-only, right-only) counts.

For histograms Hx, Hy of sequences x, y:

    a = sum(min(Hx[s], Hy[s]) for s in Hx if s in Hy)
    b = len(x) - a
    c = len(y) - a

So a + b == len(x) and a + c == len(y) for every pair, and swapping the
arguments swaps b and c while leaving a unchanged.
"""

from __future__ import annotations

from ..types import Histogram, MatchTriple, SymbolSequence
from .histogram import bag_create


def match_histograms(hx: Histogram, hy: Histogram) -> MatchTriple:
    """Compute the match triple from two prebuilt histograms.

    Useful in all-pairs workloads where each sequence's histogram is built
    once and compared against many others.
    """
    shared = 0
    left_only = 0
    for sym, cnt_x in hx.items():
        cnt_y = hy.get(sym)
        if cnt_y is None:
            left_only += cnt_x
        else:
            common = min(cnt_x, cnt_y)
            shared += common
            left_only += cnt_x - common

    # Everything in y not matched against x
    right_only = sum(hy.values()) - shared
    return MatchTriple(shared, left_only, right_only)


def match(x: SymbolSequence, y: SymbolSequence) -> MatchTriple:
    """Build histograms for ``x`` and ``y`` and compute their match triple."""
    return match_histograms(bag_create(x), bag_create(y))
