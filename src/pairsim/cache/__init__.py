"""Cache package - bounded value cache for pair similarity scores."""

from __future__ import annotations

from .vcache import ValueCache

__all__ = [
    "ValueCache",
]
