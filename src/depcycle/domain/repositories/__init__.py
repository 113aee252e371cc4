"""Repository interfaces - Abstract contracts for infrastructure."""

from depcycle.domain.repositories.cycle_cache import CycleCacheInterface

__all__ = ["CycleCacheInterface"]
