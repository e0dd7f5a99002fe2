"""
BLAKE3 digests of symbol sequences and 64-bit pair keys for the value cache.

Symbols are encoded unambiguously before hashing:
- str symbols as a 1-byte tag, 4-byte length, UTF-8 bytes
- int symbols as a 1-byte tag and 8-byte little-endian two's complement
- bytes symbols as a 1-byte tag, 4-byte length, raw bytes

A str sequence is hashed as its UTF-8 text directly (character symbols).
"""

from __future__ import annotations

import struct
from numbers import Integral
from functools import lru_cache

import blake3

from ..config import KEY_MAX
from ..types import PairKey, SymbolSequence

DIGEST_SIZE = 32

_TAG_STR = b"s"
_TAG_INT = b"i"
_TAG_BYTES = b"b"
_PAIR_SEP = b"\x00pair\x00"


def _encode_symbol(sym: object) -> bytes:
    if isinstance(sym, str):
        raw = sym.encode("utf-8")
        return _TAG_STR + struct.pack("<I", len(raw)) + raw
    if isinstance(sym, Integral):
        return _TAG_INT + (int(sym) & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "little")
    if isinstance(sym, (bytes, bytearray)):
        return _TAG_BYTES + struct.pack("<I", len(sym)) + bytes(sym)
    raise TypeError(f"Cannot hash symbol of type {type(sym).__name__}")


@lru_cache(maxsize=4096)
def _text_digest(text: str) -> bytes:
    """LRU-cached digest for character sequences."""
    return blake3.blake3(_TAG_STR + text.encode("utf-8")).digest()


def sequence_digest(x: SymbolSequence) -> bytes:
    """
    Hash a symbol sequence.

    Args:
        x: str (character sequence) or sequence of str/int/bytes symbols

    Returns:
        32-byte BLAKE3 digest
    """
    if isinstance(x, str):
        return _text_digest(x)
    hasher = blake3.blake3()
    hasher.update(b"q")
    for sym in x:
        hasher.update(_encode_symbol(sym))
    return hasher.digest()


def pair_key(x: SymbolSequence, y: SymbolSequence, symmetric: bool = True) -> PairKey:
    """
    Compute a 64-bit cache key for the pair (x, y).

    With ``symmetric=True`` the two digests are ordered before combining, so
    ``pair_key(x, y) == pair_key(y, x)``. Use ``symmetric=False`` when the
    comparison is order-dependent.

    Returns:
        Unsigned integer in [0, 2**64)
    """
    return combine_digests(sequence_digest(x), sequence_digest(y), symmetric)


def combine_digests(dx: bytes, dy: bytes, symmetric: bool = True) -> PairKey:
    """Pair key from two precomputed sequence digests (see ``pair_key``)."""
    if symmetric and dy < dx:
        dx, dy = dy, dx
    digest = blake3.blake3(dx + _PAIR_SEP + dy).digest(length=8)
    return int.from_bytes(digest, "little") & KEY_MAX
