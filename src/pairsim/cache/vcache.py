"""Bounded FIFO value cache for similarity scores.

Memoizes ``pair key -> float`` so repeated comparisons in an all-pairs run
skip the histogram, matching and coefficient work. Keys are unsigned 64-bit
integers computed by the caller (see ``core.hashing.pair_key``).

Storage is a dict for the values plus a ring buffer of keys in insertion
order. The ring has one slot per unit of capacity; once full, ``_head``
points at the oldest live key, which is the one evicted on the next insert.
Overwriting an existing key keeps its slot, so order is insertion-only.

Lifecycle: a new instance is uninitialized. ``init()`` makes it ready,
``destroy()`` drops all entries and returns it to uninitialized. Any other
operation on an uninitialized cache, or ``init()`` on a ready one, raises
``RuntimeError``.
"""

from __future__ import annotations

import logging
import threading
from numbers import Integral
from types import TracebackType

from ..config import KEY_MAX, VCACHE_CAPACITY
from ..types import CacheStats, PairKey

logger = logging.getLogger(__name__)


class ValueCache:
    """Thread-safe bounded key -> float cache with FIFO eviction.

    A single lock guards the value map, the order ring and the counters, so
    concurrent ``store`` calls for the same key end with the last value
    written and never duplicate a ring slot.
    """

    __slots__ = (
        "_lock",
        "_ready",
        "_capacity",
        "_values",
        "_ring",
        "_head",
        "_hits",
        "_misses",
        "_evictions",
    )

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ready = False
        self._capacity = 0
        self._values: dict[PairKey, float] = {}
        self._ring: list[PairKey] = []
        self._head = 0
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    # -- lifecycle -----------------------------------------------------------

    def init(self, capacity: int = VCACHE_CAPACITY) -> ValueCache:
        """Allocate an empty cache holding at most ``capacity`` entries."""
        if isinstance(capacity, bool) or not isinstance(capacity, Integral):
            raise ValueError(f"capacity must be an integer, got {capacity!r}")
        capacity = int(capacity)
        if capacity <= 0:
            raise ValueError(f"capacity must be > 0, got {capacity}")
        with self._lock:
            if self._ready:
                raise RuntimeError("init: value cache already initialized; destroy() it first")
            self._capacity = capacity
            self._values = {}
            self._ring = []
            self._head = 0
            self._hits = 0
            self._misses = 0
            self._evictions = 0
            self._ready = True
        logger.debug(f"Value cache initialized (capacity {capacity})")
        return self

    def destroy(self) -> None:
        """Release all entries and return to the uninitialized state."""
        with self._lock:
            self._require_ready("destroy")
            size = len(self._values)
            self._values = {}
            self._ring = []
            self._head = 0
            self._capacity = 0
            self._ready = False
        logger.debug(f"Value cache destroyed ({size} entries released)")

    @property
    def is_ready(self) -> bool:
        return self._ready

    def __enter__(self) -> ValueCache:
        if not self._ready:
            self.init()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._ready:
            self.destroy()

    # -- operations ----------------------------------------------------------

    def load(self, key: PairKey) -> float | None:
        """Return the cached value for ``key``, or None on a miss.

        Counts a hit or a miss. Does not change eviction order.
        """
        key = _check_key(key)
        with self._lock:
            self._require_ready("load")
            value = self._values.get(key)
            if value is None:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def store(self, key: PairKey, value: float) -> bool:
        """Insert or overwrite ``key``.

        A new key evicts the oldest inserted key first when the cache is full.
        An existing key gets the new value and keeps its position.

        Returns:
            True if an entry was evicted to make room
        """
        key = _check_key(key)
        value = float(value)
        with self._lock:
            self._require_ready("store")
            if key in self._values:
                self._values[key] = value
                return False

            if len(self._ring) < self._capacity:
                self._ring.append(key)
                self._values[key] = value
                return False

            # Full: reuse the oldest slot
            oldest = self._ring[self._head]
            del self._values[oldest]
            self._ring[self._head] = key
            self._head = (self._head + 1) % self._capacity
            self._values[key] = value
            self._evictions += 1
            return True

    def info(self) -> CacheStats:
        """Snapshot of size, capacity and cumulative counters."""
        with self._lock:
            self._require_ready("info")
            stats = CacheStats(
                size=len(self._values),
                capacity=self._capacity,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
            )
        logger.info(
            f"Value cache: {stats.size}/{stats.capacity} entries, "
            f"{stats.hits} hits, {stats.misses} misses, {stats.evictions} evictions"
        )
        return stats

    def __contains__(self, key: object) -> bool:
        """Membership test; does not touch the hit/miss counters."""
        with self._lock:
            self._require_ready("contains")
            return key in self._values

    def _require_ready(self, op: str) -> None:
        if not self._ready:
            raise RuntimeError(f"{op}: value cache is not initialized; call init() first")


def _check_key(key: PairKey) -> PairKey:
    """Validate a pair key and return it as a plain int."""
    if isinstance(key, bool) or not isinstance(key, Integral) or not 0 <= key <= KEY_MAX:
        raise ValueError(f"key must be an unsigned 64-bit integer, got {key!r}")
    return int(key)
