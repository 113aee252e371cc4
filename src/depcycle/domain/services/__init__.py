"""Domain services - Business logic that doesn't fit in entities."""

from depcycle.domain.services.class_reference_resolver import (
    ClassReferenceResolver,
)
from depcycle.domain.services.cycle_canonicalizer import CycleCanonicalizer
from depcycle.domain.services.cycle_enumerator import CycleEnumerator
from depcycle.domain.services.hotspot_analyzer import HotspotAnalyzer

__all__ = [
    "ClassReferenceResolver",
    "CycleCanonicalizer",
    "CycleEnumerator",
    "HotspotAnalyzer",
]
