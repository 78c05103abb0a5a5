"""Per-model scan cache.

The structural walk is the expensive part of a text scan and its result only
depends on the model, so it is memoized per model instance. Entries are keyed
by identity and hold a strong reference to their model, which keeps the id
from being reused while the entry is alive. The table is a bounded LRU.

Concurrent first access to the same model is serialized on a per-model lock,
so the walk runs at most once per cached model; scans of different models
proceed in parallel.
"""

import threading
from collections import OrderedDict
from typing import Any

from modeltext.config_runtime import load_runtime_config
from modeltext.model.shapes import Model, ShapeId
from modeltext.utils.constants import DEFAULT_CACHE_ENTRIES, PRELUDE_NAMESPACE
from modeltext.utils.logging import logger

from .occurrence import ScanResult
from .walker import DEFAULT_SKIP_TRAITS, collect_occurrences


class ScanCache:
    """Bounded, thread-safe memo of ScanResults keyed by model identity."""

    def __init__(
        self,
        max_entries: int = DEFAULT_CACHE_ENTRIES,
        prelude_namespace: str = PRELUDE_NAMESPACE,
        skip_traits: frozenset[ShapeId] = DEFAULT_SKIP_TRAITS,
    ):
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")

        self.max_entries = max_entries
        self.prelude_namespace = prelude_namespace
        self.skip_traits = frozenset(skip_traits)

        self._lock = threading.Lock()
        self._entries: OrderedDict[int, tuple[Model, ScanResult]] = OrderedDict()
        self._key_locks: dict[int, threading.Lock] = {}
        self._stats = {"hits": 0, "misses": 0, "scans": 0, "evicted": 0}

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ScanCache":
        """Build a cache from a runtime config dict (see config_runtime)."""
        scan_cfg = config.get("scan", {})
        prelude = scan_cfg.get("prelude_namespace", PRELUDE_NAMESPACE)
        skip = scan_cfg.get("skip_traits")
        skip_traits = (
            frozenset(ShapeId.parse(name, default_namespace=prelude) for name in skip)
            if skip is not None
            else DEFAULT_SKIP_TRAITS
        )
        return cls(
            max_entries=config.get("cache", {}).get("max_entries", DEFAULT_CACHE_ENTRIES),
            prelude_namespace=prelude,
            skip_traits=skip_traits,
        )

    def _lookup(self, key: int, model: Model) -> ScanResult | None:
        # Caller holds self._lock
        entry = self._entries.get(key)
        if entry is None or entry[0] is not model:
            return None
        self._entries.move_to_end(key)
        self._stats["hits"] += 1
        return entry[1]

    def get(self, model: Model) -> ScanResult:
        """Return the scan result for a model, walking it on first request."""
        key = id(model)

        with self._lock:
            result = self._lookup(key, model)
            if result is not None:
                return result
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            with self._lock:
                result = self._lookup(key, model)
                if result is not None:
                    return result
                self._stats["misses"] += 1

            logger.debug(f"Scan cache miss for {model!r}, walking model")
            try:
                result = collect_occurrences(model, self.prelude_namespace, self.skip_traits)

                with self._lock:
                    self._stats["scans"] += 1
                    self._entries[key] = (model, result)
                    self._entries.move_to_end(key)
                    self._evict_if_needed()
            finally:
                with self._lock:
                    self._key_locks.pop(key, None)

        return result

    def _evict_if_needed(self) -> None:
        # Caller holds self._lock
        while len(self._entries) > self.max_entries:
            _, (evicted_model, _) = self._entries.popitem(last=False)
            self._stats["evicted"] += 1
            logger.debug(f"Evicted scan result for {evicted_model!r}")

    def invalidate(self, model: Model) -> None:
        """Drop the cached result for one model, if any."""
        with self._lock:
            entry = self._entries.get(id(model))
            if entry is not None and entry[0] is model:
                del self._entries[id(model)]

    def clear(self) -> None:
        """Drop all cached results."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, model: Model) -> bool:
        with self._lock:
            entry = self._entries.get(id(model))
            return entry is not None and entry[0] is model

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_stats(self) -> dict[str, int]:
        """Get cache statistics."""
        with self._lock:
            stats = dict(self._stats)
            stats["entries"] = len(self._entries)

        total_requests = stats["hits"] + stats["misses"]
        stats["hit_rate"] = round(stats["hits"] / total_requests * 100, 1) if total_requests else 0
        return stats


_default_cache: ScanCache | None = None
_default_cache_lock = threading.Lock()


def default_cache() -> ScanCache:
    """Process-wide cache used when a caller passes none, built from runtime config."""
    global _default_cache

    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = ScanCache.from_config(load_runtime_config())
        return _default_cache


def reset_default_cache() -> None:
    """Forget the process-wide cache; the next default_cache() call rebuilds it."""
    global _default_cache

    with _default_cache_lock:
        _default_cache = None
