"""Core algorithms: histograms, set matching, coefficients, pair hashing."""

from .coefficients import (
    COEFFICIENTS,
    available_coefficients,
    coefficient_matrix,
    get_coefficient,
    sim_braun_blanquet,
    sim_czekanowski,
    sim_jaccard,
    sim_kulczynski1,
    sim_kulczynski2,
    sim_otsuka,
    sim_simpson,
    sim_sokal_sneath,
)
from .hashing import combine_digests, pair_key, sequence_digest
from .histogram import bag_create
from .matching import match, match_histograms

__all__ = [
    "bag_create",
    "match",
    "match_histograms",
    "COEFFICIENTS",
    "available_coefficients",
    "get_coefficient",
    "coefficient_matrix",
    "sim_jaccard",
    "sim_simpson",
    "sim_braun_blanquet",
    "sim_czekanowski",
    "sim_sokal_sneath",
    "sim_kulczynski1",
    "sim_kulczynski2",
    "sim_otsuka",
    "pair_key",
    "combine_digests",
    "sequence_digest",
]
