"""Pytest fixtures for pairsim tests."""

from __future__ import annotations

from typing import Generator

import pytest

from pairsim.cache import ValueCache


@pytest.fixture
def value_cache() -> Generator[ValueCache, None, None]:
    """Ready cache with room for 1000 entries, destroyed after the test."""
    cache = ValueCache().init(1000)
    yield cache
    if cache.is_ready:
        cache.destroy()


@pytest.fixture
def tiny_cache() -> Generator[ValueCache, None, None]:
    """Ready cache with capacity 2 (forces evictions)."""
    cache = ValueCache().init(2)
    yield cache
    if cache.is_ready:
        cache.destroy()


@pytest.fixture
def sample_strings() -> list[str]:
    """Small collection with a duplicate and an empty string."""
    return [
        "hello world",
        "world peace",
        "aab",
        "ab",
        "hello world",
        "",
        "xyz",
    ]


@pytest.fixture
def sample_tokens() -> list[list[str]]:
    """Token sequences (word symbols instead of characters)."""
    return [
        ["the", "quick", "brown", "fox"],
        ["the", "lazy", "dog"],
        ["the", "the", "fox"],
        [],
    ]
