"""Use cases - Application-specific business rules.

This package contains use cases that orchestrate domain logic
and implement application-specific workflows.
"""

from depcycle.application.use_cases.analyze_dependency_cycles import (
    AnalyzeDependencyCyclesUseCase,
    GraphTooLargeError,
)

__all__ = [
    "AnalyzeDependencyCyclesUseCase",
    "GraphTooLargeError",
]
