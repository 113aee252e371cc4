"""Unit tests for AnalyzeDependencyCyclesUseCase."""

from unittest.mock import MagicMock

import pytest

from depcycle.application.dtos.cycle_analysis_dto import (
    ClassDependencyDTO,
    ClassReferenceDTO,
    ProjectDependencyDTO,
)
from depcycle.application.use_cases.analyze_dependency_cycles import (
    AnalyzeDependencyCyclesUseCase,
    GraphTooLargeError,
)
from depcycle.domain.entities.dependency_cycle import CycleType
from depcycle.domain.entities.dependency_graph import DependencyGraph
from depcycle.domain.services.cycle_enumerator import CycleEnumerator
from depcycle.domain.services.hotspot_analyzer import HotspotAnalyzer
from depcycle.infrastructure.cache.in_memory_cycle_cache import (
    InMemoryCycleCache,
    NullCycleCache,
)


def projects_of(mapping: dict[str, list[str]]) -> list[ProjectDependencyDTO]:
    return [
        ProjectDependencyDTO(project_id=project, dependency_ids=deps)
        for project, deps in mapping.items()
    ]


class TestAnalyzeProjects:
    """Test project cycle analysis."""

    @pytest.fixture
    def enumerator(self):
        """Create real enumerator with a no-op cache."""
        return CycleEnumerator(cache=NullCycleCache())

    @pytest.fixture
    def use_case(self, enumerator):
        """Create use case instance with real domain services."""
        return AnalyzeDependencyCyclesUseCase(
            enumerator=enumerator,
            hotspot_analyzer=HotspotAnalyzer(),
        )

    def test_empty_input(self, use_case):
        response = use_case.analyze_projects([])

        assert response.cycle_type == "project"
        assert response.node_count == 0
        assert response.edge_count == 0
        assert response.total_cycles == 0
        assert response.longest_cycle == 0
        assert response.hotspots == []
        assert response.breakpoints == []

    def test_acyclic_graph_has_no_rankings(self, use_case):
        response = use_case.analyze_projects(
            projects_of({"Web": ["Core"], "Core": ["Data"], "Data": []})
        )

        assert response.cycles == []
        assert response.hotspots == []
        assert response.breakpoints == []
        assert response.node_count == 3
        assert response.edge_count == 2

    def test_mutual_reference(self, use_case):
        response = use_case.analyze_projects(projects_of({"A": ["B"], "B": ["A"]}))

        assert response.total_cycles == 1
        cycle = response.cycles[0]
        assert cycle.nodes == ["A", "B", "A"]
        assert cycle.complexity == 3
        assert cycle.cycle_type == "project"

    def test_disjoint_two_cycles_rank_each_node_once(self, use_case):
        response = use_case.analyze_projects(
            projects_of({"A": ["B"], "B": ["A"], "C": ["D"], "D": ["C"]})
        )

        assert response.total_cycles == 2
        assert {h.node: h.cycle_count for h in response.hotspots} == {
            "A": 1,
            "B": 1,
            "C": 1,
            "D": 1,
        }
        assert {b.node: b.impact for b in response.breakpoints} == {
            "A": 1,
            "B": 1,
            "C": 1,
            "D": 1,
        }

    def test_unknown_dependencies_are_leaves(self, use_case):
        response = use_case.analyze_projects(
            projects_of({"A": ["External.Package"], "B": ["A"]})
        )

        assert response.total_cycles == 0
        assert response.node_count == 2
        assert response.edge_count == 2


class TestAnalyzeClasses:
    """Test class cycle analysis."""

    @pytest.fixture
    def use_case(self):
        return AnalyzeDependencyCyclesUseCase(
            enumerator=CycleEnumerator(),
            hotspot_analyzer=HotspotAnalyzer(),
        )

    def test_class_cycle_uses_qualified_node_ids(self, use_case):
        classes = [
            ClassDependencyDTO(
                class_name="Order",
                namespace="Shop",
                project_id="Core",
                dependency_refs=[ClassReferenceDTO(class_name="Invoice", namespace="Shop")],
            ),
            ClassDependencyDTO(
                class_name="Invoice",
                namespace="Shop",
                project_id="Core",
                dependency_refs=[
                    ClassReferenceDTO(class_name="Order", namespace="Shop"),
                    ClassReferenceDTO(class_name="Logger", namespace="System"),
                ],
            ),
        ]

        response = use_case.analyze_classes(classes)

        assert response.cycle_type == "class"
        assert response.node_count == 2
        # The unresolved Logger reference is dropped before the graph is built
        assert response.edge_count == 2
        assert [c.nodes for c in response.cycles] == [
            ["Core.Order", "Core.Invoice", "Core.Order"]
        ]
        assert response.cycles[0].cycle_type == "class"
        assert response.longest_cycle == 3

    def test_empty_class_name_is_analyzed(self, use_case):
        response = use_case.analyze_classes(
            [ClassDependencyDTO(class_name="", project_id="P")]
        )

        assert response.node_count == 1
        assert response.total_cycles == 0
        assert response.longest_cycle == 0

    def test_incomplete_declarations_can_form_cycles(self, use_case):
        response = use_case.analyze_classes(
            [
                ClassDependencyDTO(
                    class_name="",
                    project_id="",
                    dependency_refs=[ClassReferenceDTO(class_name="")],
                )
            ]
        )

        assert [c.nodes for c in response.cycles] == [[".", "."]]
        assert response.hotspots[0].node == "."


class TestCaching:
    """Test that repeated analyses are served from the cache."""

    def test_identical_graph_served_from_cache(self):
        enumerator = CycleEnumerator(cache=InMemoryCycleCache())
        enumerator.find_all_cycles = MagicMock(wraps=enumerator.find_all_cycles)
        use_case = AnalyzeDependencyCyclesUseCase(
            enumerator=enumerator,
            hotspot_analyzer=HotspotAnalyzer(),
        )

        first = use_case.analyze_projects(
            projects_of({"A": ["B"], "B": ["C"], "C": ["A"]})
        )
        second = use_case.analyze_projects(
            projects_of({"C": ["A"], "B": ["C"], "A": ["B"]})
        )

        assert enumerator.find_all_cycles.call_count == 1
        assert first.cycles == second.cycles
        assert {(h.node, h.cycle_count) for h in first.hotspots} == {
            (h.node, h.cycle_count) for h in second.hotspots
        }

    def test_null_cache_reenumerates(self):
        enumerator = CycleEnumerator(cache=NullCycleCache())
        enumerator.find_all_cycles = MagicMock(wraps=enumerator.find_all_cycles)
        use_case = AnalyzeDependencyCyclesUseCase(
            enumerator=enumerator,
            hotspot_analyzer=HotspotAnalyzer(),
        )

        use_case.analyze_projects(projects_of({"A": ["B"], "B": ["A"]}))
        use_case.analyze_projects(projects_of({"A": ["B"], "B": ["A"]}))

        assert enumerator.find_all_cycles.call_count == 2


class TestGraphBounds:
    """Test rejection of graphs above the configured size."""

    @pytest.fixture
    def enumerator(self):
        return MagicMock(spec=CycleEnumerator)

    def test_too_many_nodes(self, enumerator):
        use_case = AnalyzeDependencyCyclesUseCase(
            enumerator=enumerator,
            hotspot_analyzer=HotspotAnalyzer(),
            max_nodes=2,
        )

        with pytest.raises(GraphTooLargeError) as exc_info:
            use_case.analyze_projects(projects_of({"A": [], "B": [], "C": []}))

        assert exc_info.value.node_count == 3
        assert exc_info.value.max_nodes == 2
        enumerator.detect_cycles.assert_not_called()

    def test_too_many_edges(self, enumerator):
        use_case = AnalyzeDependencyCyclesUseCase(
            enumerator=enumerator,
            hotspot_analyzer=HotspotAnalyzer(),
            max_edges=1,
        )

        with pytest.raises(GraphTooLargeError, match="2 edges"):
            use_case.analyze_projects(projects_of({"A": ["B"], "B": ["A"]}))

    def test_graph_at_limit_is_accepted(self, enumerator):
        enumerator.detect_cycles.return_value = [["A", "B", "A"]]
        use_case = AnalyzeDependencyCyclesUseCase(
            enumerator=enumerator,
            hotspot_analyzer=HotspotAnalyzer(),
            max_nodes=2,
            max_edges=2,
        )

        response = use_case.analyze_projects(projects_of({"A": ["B"], "B": ["A"]}))

        assert response.total_cycles == 1

    def test_graph_too_large_is_value_error(self):
        """Test that callers catching ValueError also catch size rejections."""
        assert issubclass(GraphTooLargeError, ValueError)


class TestAnalyzeGraph:
    """Test the graph-level entry point."""

    def test_returns_domain_result(self):
        use_case = AnalyzeDependencyCyclesUseCase(
            enumerator=CycleEnumerator(),
            hotspot_analyzer=HotspotAnalyzer(),
        )
        graph = DependencyGraph({"A": ["A"]})

        result = use_case.analyze_graph(graph, CycleType.CLASS)

        assert result.has_cycles
        assert result.cycles[0].nodes == ["A", "A"]
        assert result.cycles[0].cycle_type == CycleType.CLASS
        assert result.longest_cycle == 2
