"""Application layer DTOs.

This package contains data transfer objects (DTOs) for the application layer.
Uses dataclasses (not Pydantic) per Clean Architecture principles.
"""

from depcycle.application.dtos.cycle_analysis_dto import (
    BreakpointDTO,
    ClassDependencyDTO,
    ClassReferenceDTO,
    CycleAnalysisResponse,
    CycleDTO,
    HotspotDTO,
    ProjectDependencyDTO,
)

__all__ = [
    # Requests
    "ProjectDependencyDTO",
    "ClassDependencyDTO",
    "ClassReferenceDTO",
    # Responses
    "CycleAnalysisResponse",
    "CycleDTO",
    "HotspotDTO",
    "BreakpointDTO",
]
