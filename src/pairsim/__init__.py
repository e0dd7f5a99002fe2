"""pairsim - set-similarity coefficients over symbol sequences with a bounded value cache."""

from importlib.metadata import version as _pkg_version

from .cache import ValueCache
from .config import DEFAULT_COEFFICIENT, VCACHE_CAPACITY
from .core import (
    available_coefficients,
    bag_create,
    coefficient_matrix,
    get_coefficient,
    match,
    match_histograms,
    pair_key,
)
from .measure import cached_similarity, pairwise, similarity
from .types import CacheStats, MatchTriple

__version__ = _pkg_version("pairsim")

__all__ = [
    # Main classes
    "ValueCache",
    "MatchTriple",
    "CacheStats",
    # Functions
    "similarity",
    "cached_similarity",
    "pairwise",
    "bag_create",
    "match",
    "match_histograms",
    "get_coefficient",
    "available_coefficients",
    "coefficient_matrix",
    "pair_key",
    # Configuration
    "DEFAULT_COEFFICIENT",
    "VCACHE_CAPACITY",
]
