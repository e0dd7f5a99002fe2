"""
Set-similarity coefficients computed from a match triple (a, b, c).

    jaccard         a / (a + b + c)
    simpson         a / min(a + b, a + c)
    braun_blanquet  a / max(a + b, a + c)
    czekanowski     2a / (2a + b + c)
    sokal_sneath    a / (a + 2(b + c))
    kulczynski1     a / (b + c)
    kulczynski2     (a / (a + b) + a / (a + c)) / 2
    otsuka          a / sqrt((a + b)(a + c))

A zero denominator yields ``nan`` for every coefficient (e.g. both sequences
empty, or kulczynski1 on identical sequences). Callers treat ``nan`` as
undefined similarity.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TypeAlias

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..types import MatchTriple

Coefficient: TypeAlias = Callable[[MatchTriple], float]

NAN = math.nan


def _div(num: float, den: float) -> float:
    return num / den if den != 0 else NAN


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_")


# ---------------------------------------------------------------------------
# Scalar coefficients
# ---------------------------------------------------------------------------


def sim_jaccard(m: MatchTriple) -> float:
    """Jaccard coefficient."""
    return _div(m.a, m.a + m.b + m.c)


def sim_simpson(m: MatchTriple) -> float:
    """Simpson (overlap) coefficient."""
    return _div(m.a, min(m.a + m.b, m.a + m.c))


def sim_braun_blanquet(m: MatchTriple) -> float:
    """Braun-Blanquet coefficient."""
    return _div(m.a, max(m.a + m.b, m.a + m.c))


def sim_czekanowski(m: MatchTriple) -> float:
    """Czekanowski (Dice) coefficient."""
    return _div(2 * m.a, 2 * m.a + m.b + m.c)


def sim_sokal_sneath(m: MatchTriple) -> float:
    """Sokal-Sneath coefficient."""
    return _div(m.a, m.a + 2 * (m.b + m.c))


def sim_kulczynski1(m: MatchTriple) -> float:
    """First Kulczynski coefficient. Unbounded above; nan when b + c == 0."""
    return _div(m.a, m.b + m.c)


def sim_kulczynski2(m: MatchTriple) -> float:
    """Second Kulczynski coefficient."""
    return 0.5 * (_div(m.a, m.a + m.b) + _div(m.a, m.a + m.c))


def sim_otsuka(m: MatchTriple) -> float:
    """Otsuka (Ochiai, cosine) coefficient."""
    return _div(m.a, math.sqrt((m.a + m.b) * (m.a + m.c)))


COEFFICIENTS: dict[str, Coefficient] = {
    "jaccard": sim_jaccard,
    "simpson": sim_simpson,
    "braun_blanquet": sim_braun_blanquet,
    "czekanowski": sim_czekanowski,
    "sokal_sneath": sim_sokal_sneath,
    "kulczynski1": sim_kulczynski1,
    "kulczynski2": sim_kulczynski2,
    "otsuka": sim_otsuka,
}


def available_coefficients() -> list[str]:
    """Names accepted by ``get_coefficient``."""
    return list(COEFFICIENTS)


def get_coefficient(name: str) -> Coefficient:
    """Look up a coefficient function by name (case-insensitive, '-' == '_')."""
    try:
        return COEFFICIENTS[_normalize(name)]
    except KeyError:
        raise ValueError(
            f"Unknown coefficient {name!r}; available: {', '.join(COEFFICIENTS)}"
        ) from None


# ---------------------------------------------------------------------------
# Vectorized coefficients (NumPy)
# ---------------------------------------------------------------------------


def _safe_divide(num: NDArray[np.float64], den: NDArray[np.float64]) -> NDArray[np.float64]:
    """Elementwise num / den with nan wherever den == 0."""
    num, den = np.broadcast_arrays(num, den)
    out = np.full(num.shape, np.nan, dtype=np.float64)
    np.divide(num, den, out=out, where=den != 0)
    return out


_MATRIX_FORMULAS: dict[
    str,
    Callable[[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]], NDArray[np.float64]],
] = {
    "jaccard": lambda a, b, c: _safe_divide(a, a + b + c),
    "simpson": lambda a, b, c: _safe_divide(a, np.minimum(a + b, a + c)),
    "braun_blanquet": lambda a, b, c: _safe_divide(a, np.maximum(a + b, a + c)),
    "czekanowski": lambda a, b, c: _safe_divide(2 * a, 2 * a + b + c),
    "sokal_sneath": lambda a, b, c: _safe_divide(a, a + 2 * (b + c)),
    "kulczynski1": lambda a, b, c: _safe_divide(a, b + c),
    "kulczynski2": lambda a, b, c: 0.5 * (_safe_divide(a, a + b) + _safe_divide(a, a + c)),
    "otsuka": lambda a, b, c: _safe_divide(a, np.sqrt((a + b) * (a + c))),
}


def coefficient_matrix(
    name: str,
    a: ArrayLike,
    b: ArrayLike,
    c: ArrayLike,
) -> NDArray[np.float64]:
    """Evaluate one coefficient over arrays of triples.

    Args:
        name: Coefficient name (see ``available_coefficients``)
        a, b, c: Broadcastable arrays of shared / left-only / right-only counts

    Returns:
        float64 array of scores, nan where the denominator is zero
    """
    get_coefficient(name)
    formula = _MATRIX_FORMULAS[_normalize(name)]
    a_arr = np.asarray(a, dtype=np.float64)
    b_arr = np.asarray(b, dtype=np.float64)
    c_arr = np.asarray(c, dtype=np.float64)
    return formula(a_arr, b_arr, c_arr)
