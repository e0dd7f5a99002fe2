"""Similarity measurement: histogram -> match triple -> coefficient, with optional caching."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import blake3
import numpy as np
from numpy.typing import NDArray

from .cache import ValueCache
from .config import DEFAULT_COEFFICIENT
from .core import bag_create, combine_digests, get_coefficient, match, match_histograms
from .core.hashing import sequence_digest
from .types import PairKey, SymbolSequence

logger = logging.getLogger(__name__)


def _coefficient_tag(name: str) -> int:
    """64-bit tag separating cache keys of different coefficients."""
    return int.from_bytes(blake3.blake3(name.encode()).digest(length=8), "little")


def similarity(
    x: SymbolSequence,
    y: SymbolSequence,
    coefficient: str = DEFAULT_COEFFICIENT,
) -> float:
    """Score ``x`` against ``y`` with the named coefficient (uncached).

    Returns nan when the coefficient is undefined for the pair.
    """
    return get_coefficient(coefficient)(match(x, y))


def cached_similarity(
    cache: ValueCache,
    key: PairKey,
    x: SymbolSequence,
    y: SymbolSequence,
    coefficient: str = DEFAULT_COEFFICIENT,
) -> float:
    """Score ``x`` against ``y``, memoized under ``key``.

    The key must identify both the pair and the coefficient; keys shared
    across coefficients return whichever score was stored first.
    """
    func = get_coefficient(coefficient)
    value = cache.load(key)
    if value is not None:
        return value
    value = func(match(x, y))
    cache.store(key, value)
    return value


def pairwise(
    sequences: Sequence[SymbolSequence],
    coefficient: str = DEFAULT_COEFFICIENT,
    cache: ValueCache | None = None,
    symmetric: bool = True,
) -> NDArray[np.float64]:
    """
    Score every ordered pair of ``sequences``.

    Histograms are built once per sequence. With ``symmetric=True`` only the
    upper triangle (diagonal included) is computed and mirrored. When a cache
    is given, scores are memoized under ``combine_digests`` pair keys mixed
    with the coefficient name, so duplicate sequences in the input are only
    compared once and one cache can serve several coefficients.

    Returns:
        (n, n) float64 matrix, nan where the coefficient is undefined
    """
    func = get_coefficient(coefficient)
    tag = _coefficient_tag(func.__name__)
    n = len(sequences)
    bags = [bag_create(s) for s in sequences]
    digests = [sequence_digest(s) for s in sequences] if cache is not None else None
    out = np.empty((n, n), dtype=np.float64)

    for i in range(n):
        for j in range(i if symmetric else 0, n):
            key = None
            if digests is not None:
                key = combine_digests(digests[i], digests[j], symmetric) ^ tag
                cached = cache.load(key)
                if cached is not None:
                    out[i, j] = cached
                    if symmetric:
                        out[j, i] = cached
                    continue

            score = func(match_histograms(bags[i], bags[j]))
            if key is not None:
                cache.store(key, score)
            out[i, j] = score
            if symmetric:
                out[j, i] = score

    logger.debug(f"Computed {n}x{n} {coefficient} matrix")
    return out
