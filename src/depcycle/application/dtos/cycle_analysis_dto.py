"""Cycle analysis DTOs.

This module defines data transfer objects for dependency cycle analysis.
Uses dataclasses for application layer (not Pydantic - that's for infrastructure/API).
"""

from dataclasses import dataclass, field


@dataclass
class ProjectDependencyDTO:
    """A project and the projects it references.

    Attributes:
        project_id: Project name (graph node identifier)
        dependency_ids: Names of referenced projects
    """

    project_id: str
    dependency_ids: list[str] = field(default_factory=list)


@dataclass
class ClassReferenceDTO:
    """An unresolved reference to another class.

    Attributes:
        class_name: Simple name of the referenced class
        namespace: Namespace of the referenced class
    """

    class_name: str
    namespace: str = ""


@dataclass
class ClassDependencyDTO:
    """A class and the classes it references.

    Attributes:
        class_name: Simple class name
        namespace: Declaring namespace
        project_id: Owning project
        dependency_refs: Referenced classes (resolved by the use case)
    """

    class_name: str
    project_id: str
    namespace: str = ""
    dependency_refs: list[ClassReferenceDTO] = field(default_factory=list)


@dataclass
class CycleDTO:
    """A detected dependency cycle.

    Attributes:
        nodes: Node identifiers including the repeated closing node
        cycle_type: "project" or "class"
        complexity: Length of nodes
    """

    nodes: list[str]
    cycle_type: str
    complexity: int


@dataclass
class HotspotDTO:
    """Node ranked by the number of cycles it appears in."""

    node: str
    cycle_count: int


@dataclass
class BreakpointDTO:
    """Node ranked by the number of cycles modifying it would break."""

    node: str
    impact: int


@dataclass
class CycleAnalysisResponse:
    """Result of a cycle analysis.

    Attributes:
        cycle_type: Kind of entities analyzed
        node_count: Number of source nodes in the graph
        edge_count: Number of edges in the graph (duplicates included)
        longest_cycle: Largest cycle complexity, 0 when acyclic
        cycles: Deduplicated cycles
        hotspots: Nodes by descending cycle membership
        breakpoints: Nodes by descending impact
    """

    cycle_type: str
    node_count: int
    edge_count: int
    longest_cycle: int = 0
    cycles: list[CycleDTO] = field(default_factory=list)
    hotspots: list[HotspotDTO] = field(default_factory=list)
    breakpoints: list[BreakpointDTO] = field(default_factory=list)

    @property
    def total_cycles(self) -> int:
        return len(self.cycles)
