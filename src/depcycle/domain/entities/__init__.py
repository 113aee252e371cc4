"""Domain entities - Core business objects."""

from depcycle.domain.entities.dependency_cycle import (
    Breakpoint,
    Cycle,
    CycleAnalysisResult,
    CycleType,
    Hotspot,
)
from depcycle.domain.entities.class_declaration import (
    ClassDeclaration,
    ClassReference,
)
from depcycle.domain.entities.dependency_graph import DependencyGraph, GraphNode

__all__ = [
    "Breakpoint",
    "ClassDeclaration",
    "ClassReference",
    "Cycle",
    "CycleAnalysisResult",
    "CycleType",
    "DependencyGraph",
    "GraphNode",
    "Hotspot",
]
