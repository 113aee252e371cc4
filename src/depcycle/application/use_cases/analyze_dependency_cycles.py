"""Analyze dependency cycles use case.

Orchestrates the cycle analysis workflow:
1. Build the dependency graph from project or class entities
2. Enforce the configured graph size bounds
3. Enumerate and deduplicate cycles (consulting the result cache)
4. Rank hotspots and breakpoints
5. Return a structured result
"""

import logging

from opentelemetry import trace

from depcycle.application.dtos.cycle_analysis_dto import (
    BreakpointDTO,
    ClassDependencyDTO,
    CycleAnalysisResponse,
    CycleDTO,
    HotspotDTO,
    ProjectDependencyDTO,
)
from depcycle.domain.entities.class_declaration import (
    ClassDeclaration,
    ClassReference,
)
from depcycle.domain.entities.dependency_cycle import (
    Cycle,
    CycleAnalysisResult,
    CycleType,
)
from depcycle.domain.entities.dependency_graph import DependencyGraph, GraphNode
from depcycle.domain.services.class_reference_resolver import (
    ClassReferenceResolver,
)
from depcycle.domain.services.cycle_enumerator import CycleEnumerator
from depcycle.domain.services.hotspot_analyzer import HotspotAnalyzer

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class GraphTooLargeError(ValueError):
    """Raised when a graph exceeds the configured analysis bounds."""

    def __init__(
        self,
        node_count: int,
        edge_count: int,
        max_nodes: int | None,
        max_edges: int | None,
    ):
        self.node_count = node_count
        self.edge_count = edge_count
        self.max_nodes = max_nodes
        self.max_edges = max_edges
        super().__init__(
            f"Graph too large for cycle analysis: {node_count} nodes "
            f"(max {max_nodes}), {edge_count} edges (max {max_edges})"
        )


class AnalyzeDependencyCyclesUseCase:
    """Detect dependency cycles and rank the nodes involved.

    The enumeration cost can grow exponentially with graph density, so
    ``max_nodes`` and ``max_edges`` bound what this use case accepts.
    Leaving both as None disables the check.
    """

    def __init__(
        self,
        enumerator: CycleEnumerator,
        hotspot_analyzer: HotspotAnalyzer,
        reference_resolver: ClassReferenceResolver | None = None,
        max_nodes: int | None = None,
        max_edges: int | None = None,
    ):
        """Initialize the use case.

        Args:
            enumerator: Cycle enumerator (carries the result cache)
            hotspot_analyzer: Ranking service
            reference_resolver: Class reference resolver for class analysis
            max_nodes: Maximum number of source nodes accepted
            max_edges: Maximum number of edges accepted
        """
        self._enumerator = enumerator
        self._hotspot_analyzer = hotspot_analyzer
        self._reference_resolver = reference_resolver or ClassReferenceResolver()
        self._max_nodes = max_nodes
        self._max_edges = max_edges

    def analyze_projects(
        self, projects: list[ProjectDependencyDTO]
    ) -> CycleAnalysisResponse:
        """Analyze cycles between projects.

        Args:
            projects: Projects with the names of the projects they reference

        Returns:
            CycleAnalysisResponse with project cycles

        Raises:
            GraphTooLargeError: If the graph exceeds the configured bounds
        """
        graph = DependencyGraph.from_nodes(
            GraphNode(node_id=p.project_id, dependency_ids=tuple(p.dependency_ids))
            for p in projects
        )
        result = self.analyze_graph(graph, CycleType.PROJECT)
        return self._to_response(graph, CycleType.PROJECT, result)

    def analyze_classes(
        self, classes: list[ClassDependencyDTO]
    ) -> CycleAnalysisResponse:
        """Analyze cycles between classes.

        Class references are resolved to "<project>.<class>" nodes first;
        references that match no known class are dropped.

        Args:
            classes: Classes with their unresolved references

        Returns:
            CycleAnalysisResponse with class cycles

        Raises:
            GraphTooLargeError: If the graph exceeds the configured bounds
        """
        declarations = [
            ClassDeclaration(
                class_name=c.class_name,
                namespace=c.namespace,
                project_id=c.project_id,
                dependency_refs=[
                    ClassReference(class_name=r.class_name, namespace=r.namespace)
                    for r in c.dependency_refs
                ],
            )
            for c in classes
        ]
        graph = DependencyGraph.from_nodes(self._reference_resolver.resolve(declarations))
        result = self.analyze_graph(graph, CycleType.CLASS)
        return self._to_response(graph, CycleType.CLASS, result)

    def analyze_graph(
        self, graph: DependencyGraph, cycle_type: CycleType
    ) -> CycleAnalysisResult:
        """Run cycle detection and ranking on an already built graph.

        Args:
            graph: Graph to analyze
            cycle_type: Kind of entities the graph connects

        Returns:
            CycleAnalysisResult with cycles, hotspots, and breakpoints

        Raises:
            GraphTooLargeError: If the graph exceeds the configured bounds
        """
        self._check_bounds(graph)

        with tracer.start_as_current_span("analyze_dependency_cycles") as span:
            span.set_attribute("cycle_type", cycle_type.value)
            span.set_attribute("node_count", graph.node_count)
            span.set_attribute("edge_count", graph.edge_count)

            cycles = [
                Cycle(nodes=list(nodes), cycle_type=cycle_type)
                for nodes in self._enumerator.detect_cycles(graph)
            ]
            hotspots, breakpoints = self._hotspot_analyzer.analyze(cycles)
            result = CycleAnalysisResult(
                cycles=cycles, hotspots=hotspots, breakpoints=breakpoints
            )

            span.set_attribute("cycle_count", len(cycles))
            span.set_attribute("longest_cycle", result.longest_cycle)

        if result.has_cycles:
            logger.info(
                f"Detected {len(cycles)} {cycle_type.value} cycles "
                f"(longest {result.longest_cycle}) in graph with "
                f"{graph.node_count} nodes and {graph.edge_count} edges"
            )
        else:
            logger.debug(
                f"No {cycle_type.value} cycles in graph with "
                f"{graph.node_count} nodes and {graph.edge_count} edges"
            )

        return result

    def _check_bounds(self, graph: DependencyGraph) -> None:
        node_count = graph.node_count
        edge_count = graph.edge_count
        too_many_nodes = self._max_nodes is not None and node_count > self._max_nodes
        too_many_edges = self._max_edges is not None and edge_count > self._max_edges

        if too_many_nodes or too_many_edges:
            logger.warning(
                f"Rejecting graph with {node_count} nodes and {edge_count} edges"
            )
            raise GraphTooLargeError(
                node_count=node_count,
                edge_count=edge_count,
                max_nodes=self._max_nodes,
                max_edges=self._max_edges,
            )

    @staticmethod
    def _to_response(
        graph: DependencyGraph,
        cycle_type: CycleType,
        result: CycleAnalysisResult,
    ) -> CycleAnalysisResponse:
        return CycleAnalysisResponse(
            cycle_type=cycle_type.value,
            node_count=graph.node_count,
            edge_count=graph.edge_count,
            longest_cycle=result.longest_cycle,
            cycles=[
                CycleDTO(
                    nodes=list(cycle.nodes),
                    cycle_type=cycle.cycle_type.value,
                    complexity=cycle.complexity,
                )
                for cycle in result.cycles
            ],
            hotspots=[
                HotspotDTO(node=h.node, cycle_count=h.cycle_count)
                for h in result.hotspots
            ],
            breakpoints=[
                BreakpointDTO(node=b.node, impact=b.impact)
                for b in result.breakpoints
            ],
        )
