"""Tests for the end-to-end measurement path and the all-pairs driver."""

from __future__ import annotations

import math

import numpy as np
import pytest

from pairsim import ValueCache, cached_similarity, pair_key, pairwise, similarity


class TestSimilarity:
    """Tests for uncached similarity."""

    def test_reference_example(self) -> None:
        assert similarity("aab", "ab", "jaccard") == pytest.approx(2 / 3)
        assert similarity("aab", "ab", "czekanowski") == pytest.approx(0.8)

    def test_tokens(self) -> None:
        x = ["the", "quick", "fox"]
        y = ["the", "lazy", "fox"]
        assert similarity(x, y, "jaccard") == pytest.approx(2 / 4)

    def test_default_coefficient(self) -> None:
        assert similarity("aab", "ab") == pytest.approx(similarity("aab", "ab", "jaccard"))

    def test_numpy_token_ids(self) -> None:
        x = np.array([1, 2, 2, 3])
        y = np.array([2, 3, 4])
        assert similarity(x, y, "jaccard") == pytest.approx(2 / 5)

    def test_empty_pair_is_nan(self) -> None:
        assert math.isnan(similarity("", "", "otsuka"))


class TestCachedSimilarity:
    """Tests for the cache-backed path."""

    def test_miss_then_hit(self, value_cache: ValueCache) -> None:
        key = pair_key("aab", "ab")
        first = cached_similarity(value_cache, key, "aab", "ab", "jaccard")
        second = cached_similarity(value_cache, key, "aab", "ab", "jaccard")
        assert first == second == pytest.approx(2 / 3)
        stats = value_cache.info()
        assert (stats.hits, stats.misses, stats.size) == (1, 1, 1)

    def test_hit_skips_computation(self, value_cache: ValueCache) -> None:
        """A cached value is returned as-is, whatever the sequences are."""
        value_cache.store(7, 0.125)
        assert cached_similarity(value_cache, 7, "abc", "xyz") == 0.125

    def test_nan_cached(self, value_cache: ValueCache) -> None:
        key = pair_key("", "")
        assert math.isnan(cached_similarity(value_cache, key, "", "", "jaccard"))
        assert math.isnan(cached_similarity(value_cache, key, "", "", "jaccard"))
        assert value_cache.info().hits == 1

    def test_unknown_coefficient_raises_on_hit(self, value_cache: ValueCache) -> None:
        """A bad coefficient name fails even when the key is already cached."""
        value_cache.store(11, 0.5)
        with pytest.raises(ValueError, match="Unknown coefficient"):
            cached_similarity(value_cache, 11, "ab", "ab", "cosine")
        assert value_cache.info().hits == 0

    def test_requires_ready_cache(self) -> None:
        with pytest.raises(RuntimeError):
            cached_similarity(ValueCache(), 1, "a", "b")


class TestPairwise:
    """Tests for the all-pairs driver."""

    def test_matrix_shape_and_values(self, sample_strings: list[str]) -> None:
        matrix = pairwise(sample_strings, "jaccard")
        n = len(sample_strings)
        assert matrix.shape == (n, n)
        for i in range(n):
            for j in range(n):
                expected = similarity(sample_strings[i], sample_strings[j], "jaccard")
                if math.isnan(expected):
                    assert math.isnan(matrix[i, j])
                else:
                    assert matrix[i, j] == pytest.approx(expected)

    def test_symmetric_matrix(self, sample_strings: list[str]) -> None:
        matrix = pairwise(sample_strings, "otsuka")
        np.testing.assert_allclose(matrix, matrix.T, equal_nan=True)

    def test_ordered_mode_matches_symmetric_for_symmetric_coefficient(
        self, sample_strings: list[str]
    ) -> None:
        full = pairwise(sample_strings, "kulczynski2", symmetric=False)
        half = pairwise(sample_strings, "kulczynski2", symmetric=True)
        np.testing.assert_allclose(full, half, equal_nan=True)

    def test_cached_matches_uncached(
        self, sample_strings: list[str], value_cache: ValueCache
    ) -> None:
        plain = pairwise(sample_strings, "sokal_sneath")
        cached = pairwise(sample_strings, "sokal_sneath", cache=value_cache)
        np.testing.assert_allclose(plain, cached, equal_nan=True)

    def test_duplicates_hit_cache(self, value_cache: ValueCache) -> None:
        strings = ["abc", "abd", "abc"]
        pairwise(strings, "jaccard", cache=value_cache)
        stats = value_cache.info()
        # 6 upper-triangle pairs; (0,1)/(1,2) and (0,0)/(0,2)/(2,2) coincide
        assert stats.misses == 3
        assert stats.hits == 3

    def test_second_run_all_hits(
        self, sample_strings: list[str], value_cache: ValueCache
    ) -> None:
        pairwise(sample_strings, "jaccard", cache=value_cache)
        before = value_cache.info()
        pairwise(sample_strings, "jaccard", cache=value_cache)
        after = value_cache.info()
        assert after.misses == before.misses
        assert after.size == before.size

    def test_coefficients_do_not_share_entries(self, value_cache: ValueCache) -> None:
        strings = ["aab", "ab"]
        jac = pairwise(strings, "jaccard", cache=value_cache)
        dice = pairwise(strings, "czekanowski", cache=value_cache)
        assert jac[0, 1] == pytest.approx(2 / 3)
        assert dice[0, 1] == pytest.approx(0.8)

    def test_small_cache_still_correct(self, sample_strings: list[str]) -> None:
        with ValueCache().init(2) as cache:
            cached = pairwise(sample_strings, "braun_blanquet", cache=cache)
            assert cache.info().size <= 2
        np.testing.assert_allclose(
            cached, pairwise(sample_strings, "braun_blanquet"), equal_nan=True
        )

    def test_token_sequences(self, sample_tokens: list[list[str]]) -> None:
        matrix = pairwise(sample_tokens, "czekanowski")
        assert matrix[0, 0] == pytest.approx(1.0)
        # {the, fox} shared between [the quick brown fox] and [the the fox]
        assert matrix[0, 2] == pytest.approx(2 * 2 / (2 * 2 + 2 + 1))
        assert math.isnan(matrix[3, 3])

    def test_numpy_token_arrays_cached(self, value_cache: ValueCache) -> None:
        arrays = [np.array([1, 2, 2, 3]), np.array([2, 3, 4]), np.array([1, 2, 2, 3])]
        cached = pairwise(arrays, "jaccard", cache=value_cache)
        assert cached[0, 1] == pytest.approx(2 / 5)
        np.testing.assert_allclose(cached, pairwise(arrays, "jaccard"))
        assert value_cache.info().hits > 0

    def test_empty_collection(self) -> None:
        assert pairwise([], "jaccard").shape == (0, 0)
