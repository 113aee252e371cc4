"""
Dependency injection for FastAPI routes.

Provides factory functions for creating use cases with their required dependencies.
Uses FastAPI's Depends() for dependency injection.
"""

import threading

from fastapi import Depends

from depcycle.application.use_cases.analyze_dependency_cycles import (
    AnalyzeDependencyCyclesUseCase,
)
from depcycle.domain.repositories.cycle_cache import CycleCacheInterface
from depcycle.domain.services.class_reference_resolver import (
    ClassReferenceResolver,
)
from depcycle.domain.services.cycle_canonicalizer import CycleCanonicalizer
from depcycle.domain.services.cycle_enumerator import CycleEnumerator
from depcycle.domain.services.hotspot_analyzer import HotspotAnalyzer
from depcycle.infrastructure.cache.in_memory_cycle_cache import (
    InMemoryCycleCache,
    NullCycleCache,
)
from depcycle.infrastructure.config import Settings, get_settings

# Shared across requests for the process lifetime
_cycle_cache: InMemoryCycleCache | NullCycleCache | None = None
_cycle_cache_lock = threading.Lock()


# Configuration


def get_app_settings() -> Settings:
    """Get Settings instance."""
    return get_settings()


# Cache factories


def get_cycle_cache(
    settings: Settings = Depends(get_app_settings),
) -> InMemoryCycleCache | NullCycleCache:
    """Get the process-wide cycle cache (no-op when caching is disabled)."""
    global _cycle_cache
    if _cycle_cache is None:
        with _cycle_cache_lock:
            if _cycle_cache is None:
                if settings.analysis.cache_enabled:
                    _cycle_cache = InMemoryCycleCache()
                else:
                    _cycle_cache = NullCycleCache()
    return _cycle_cache


def reset_cycle_cache() -> None:
    """Forget the shared cache so the next request builds a new one (for testing)."""
    global _cycle_cache
    with _cycle_cache_lock:
        _cycle_cache = None


# Domain service factories


def get_cycle_canonicalizer() -> CycleCanonicalizer:
    """Get CycleCanonicalizer instance."""
    return CycleCanonicalizer()


def get_cycle_enumerator(
    canonicalizer: CycleCanonicalizer = Depends(get_cycle_canonicalizer),
    cache: CycleCacheInterface = Depends(get_cycle_cache),
) -> CycleEnumerator:
    """Get CycleEnumerator instance wired to the shared cache."""
    return CycleEnumerator(canonicalizer=canonicalizer, cache=cache)


def get_hotspot_analyzer() -> HotspotAnalyzer:
    """Get HotspotAnalyzer instance."""
    return HotspotAnalyzer()


def get_class_reference_resolver() -> ClassReferenceResolver:
    """Get ClassReferenceResolver instance."""
    return ClassReferenceResolver()


# Use case factories


def get_analyze_dependency_cycles_use_case(
    enumerator: CycleEnumerator = Depends(get_cycle_enumerator),
    hotspot_analyzer: HotspotAnalyzer = Depends(get_hotspot_analyzer),
    reference_resolver: ClassReferenceResolver = Depends(
        get_class_reference_resolver
    ),
    settings: Settings = Depends(get_app_settings),
) -> AnalyzeDependencyCyclesUseCase:
    """Get AnalyzeDependencyCyclesUseCase instance bounded by configuration."""
    return AnalyzeDependencyCyclesUseCase(
        enumerator=enumerator,
        hotspot_analyzer=hotspot_analyzer,
        reference_resolver=reference_resolver,
        max_nodes=settings.analysis.max_nodes,
        max_edges=settings.analysis.max_edges,
    )
