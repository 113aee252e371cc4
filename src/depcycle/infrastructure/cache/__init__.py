"""Cache infrastructure module.

Provides the in-memory cycle cache and its no-op counterpart.
"""

from depcycle.infrastructure.cache.in_memory_cycle_cache import (
    InMemoryCycleCache,
    NullCycleCache,
    graph_cache_key,
)

__all__ = ["InMemoryCycleCache", "NullCycleCache", "graph_cache_key"]
