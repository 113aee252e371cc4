"""
Pydantic schemas for cycle analysis API endpoints.

These schemas define the API request/response contracts and provide validation.
They are separate from application layer DTOs (which use dataclasses).
"""

from pydantic import BaseModel, Field


# ============================================================================
# Request Schemas
# ============================================================================


class ProjectApiModel(BaseModel):
    """A project and the projects it references."""

    id: str = Field(..., min_length=1, description="Unique project name")
    dependency_ids: list[str] = Field(
        default_factory=list, description="Names of referenced projects"
    )


class ProjectCycleAnalysisApiRequest(BaseModel):
    """Request to analyze cycles between projects."""

    projects: list[ProjectApiModel] = Field(
        default_factory=list, description="Projects with their references"
    )

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "projects": [
                    {"id": "Core", "dependency_ids": ["Data"]},
                    {"id": "Data", "dependency_ids": ["Core"]},
                    {"id": "Web", "dependency_ids": ["Core"]},
                ]
            }
        }


class ClassReferenceApiModel(BaseModel):
    """An unresolved reference to another class."""

    class_name: str = Field(..., min_length=1, description="Referenced class name")
    namespace: str = Field(default="", description="Referenced class namespace")


class ClassApiModel(BaseModel):
    """A class and the classes it references."""

    class_name: str = Field(..., min_length=1, description="Class name")
    namespace: str = Field(default="", description="Declaring namespace")
    project_id: str = Field(..., min_length=1, description="Owning project")
    dependency_refs: list[ClassReferenceApiModel] = Field(
        default_factory=list, description="Referenced classes"
    )


class ClassCycleAnalysisApiRequest(BaseModel):
    """Request to analyze cycles between classes."""

    classes: list[ClassApiModel] = Field(
        default_factory=list, description="Classes with their references"
    )

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "classes": [
                    {
                        "class_name": "OrderService",
                        "namespace": "Shop.Orders",
                        "project_id": "Shop.Core",
                        "dependency_refs": [
                            {"class_name": "InvoiceService", "namespace": "Shop.Billing"}
                        ],
                    },
                    {
                        "class_name": "InvoiceService",
                        "namespace": "Shop.Billing",
                        "project_id": "Shop.Core",
                        "dependency_refs": [
                            {"class_name": "OrderService", "namespace": "Shop.Orders"}
                        ],
                    },
                ]
            }
        }


# ============================================================================
# Response Schemas
# ============================================================================


class CycleApiModel(BaseModel):
    """A detected dependency cycle."""

    nodes: list[str] = Field(
        ..., description="Node identifiers, first node repeated at the end"
    )
    cycle_type: str = Field(..., description="Cycle type: project or class")
    complexity: int = Field(
        ..., ge=2, description="Number of nodes including the repeated start"
    )


class HotspotApiModel(BaseModel):
    """Node ranked by the number of cycles it appears in."""

    node: str
    cycle_count: int = Field(..., ge=1)


class BreakpointApiModel(BaseModel):
    """Node ranked by the number of cycles modifying it would break."""

    node: str
    impact: int = Field(..., ge=1)


class CycleAnalysisApiResponse(BaseModel):
    """Result of a cycle analysis."""

    cycle_type: str = Field(..., description="Kind of entities analyzed")
    node_count: int = Field(..., ge=0, description="Nodes in the analyzed graph")
    edge_count: int = Field(..., ge=0, description="Edges in the analyzed graph")
    total_cycles: int = Field(..., ge=0, description="Number of cycles detected")
    longest_cycle: int = Field(
        0, ge=0, description="Largest cycle complexity, 0 when acyclic"
    )
    cycles: list[CycleApiModel] = Field(default_factory=list)
    hotspots: list[HotspotApiModel] = Field(default_factory=list)
    breakpoints: list[BreakpointApiModel] = Field(default_factory=list)


class CycleCacheStatusApiResponse(BaseModel):
    """State of the shared cycle cache."""

    enabled: bool = Field(..., description="Whether results are memoized")
    entries: int = Field(..., ge=0, description="Number of cached graph shapes")
