"""In-memory cycle caches.

This module provides the process-lifetime cycle cache used by the API and a
no-op cache for callers (and tests) that must always re-enumerate.
Entries are never evicted; keys are exact structural digests of the graph,
so staleness is impossible but memory grows with every distinct graph shape.
"""

import hashlib
import json
import threading

from depcycle.domain.entities.dependency_graph import DependencyGraph
from depcycle.domain.repositories.cycle_cache import CycleCacheInterface
from depcycle.infrastructure.observability.metrics import (
    record_cache_hit,
    record_cache_miss,
    update_cache_size,
)

CACHE_TYPE = "cycles"


def graph_cache_key(graph: DependencyGraph) -> str:
    """Compute a deterministic key for a graph's structure.

    Entries are sorted by node identifier; successor order is kept as-is.
    Two graphs with the same nodes and edges built in a different order
    produce the same key.

    Args:
        graph: Graph to key

    Returns:
        SHA-256 hex digest of the canonical JSON serialization
    """
    entries = sorted(graph.adjacency.items(), key=lambda item: item[0])
    serialized = json.dumps(entries, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()


class InMemoryCycleCache(CycleCacheInterface):
    """Unbounded, thread-safe map from graph digest to cycle set."""

    def __init__(self):
        self._entries: dict[str, tuple[tuple[str, ...], ...]] = {}
        self._lock = threading.Lock()

    def get(self, graph: DependencyGraph) -> list[list[str]] | None:
        """Get the cached cycle set for a graph.

        Args:
            graph: Graph to look up

        Returns:
            Copy of the cached cycle set, or None on a miss
        """
        key = graph_cache_key(graph)
        with self._lock:
            cached = self._entries.get(key)

        if cached is None:
            record_cache_miss(CACHE_TYPE)
            return None

        record_cache_hit(CACHE_TYPE)
        return [list(cycle) for cycle in cached]

    def store(self, graph: DependencyGraph, cycles: list[list[str]]) -> None:
        """Store a cycle set for a graph, replacing any existing entry.

        Args:
            graph: Graph the cycles were computed for
            cycles: Deduplicated cycle set
        """
        key = graph_cache_key(graph)
        frozen = tuple(tuple(cycle) for cycle in cycles)
        with self._lock:
            self._entries[key] = frozen
            size = len(self._entries)

        update_cache_size(CACHE_TYPE, size)

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        """Clear all entries (for testing and operator resets)."""
        with self._lock:
            self._entries.clear()

        update_cache_size(CACHE_TYPE, 0)


class NullCycleCache(CycleCacheInterface):
    """Cache that never stores anything."""

    def get(self, graph: DependencyGraph) -> list[list[str]] | None:
        return None

    def store(self, graph: DependencyGraph, cycles: list[list[str]]) -> None:
        pass

    @property
    def size(self) -> int:
        return 0

    def clear(self) -> None:
        pass
