"""Unit tests for HotspotAnalyzer."""

import pytest

from depcycle.domain.entities.dependency_cycle import Cycle
from depcycle.domain.services.hotspot_analyzer import HotspotAnalyzer


def cycles_of(*sequences: list[str]) -> list[Cycle]:
    return [Cycle(nodes=list(nodes)) for nodes in sequences]


class TestHotspotAnalyzer:
    """Test cases for hotspot and breakpoint ranking."""

    @pytest.fixture
    def analyzer(self):
        """Fixture for creating HotspotAnalyzer instance."""
        return HotspotAnalyzer()

    def test_no_cycles(self, analyzer):
        hotspots, breakpoints = analyzer.analyze([])

        assert hotspots == []
        assert breakpoints == []

    def test_closing_repeat_counted_once(self, analyzer):
        """Test that the start node of [A, B, A] counts as one membership."""
        hotspots = analyzer.hotspots(cycles_of(["A", "B", "A"]))

        assert [(h.node, h.cycle_count) for h in hotspots] == [("A", 1), ("B", 1)]

    def test_self_loop(self, analyzer):
        hotspots = analyzer.hotspots(cycles_of(["A", "A"]))

        assert [(h.node, h.cycle_count) for h in hotspots] == [("A", 1)]

    def test_disjoint_two_cycles(self, analyzer):
        hotspots, _ = analyzer.analyze(cycles_of(["A", "B", "A"], ["C", "D", "C"]))

        assert {h.node: h.cycle_count for h in hotspots} == {
            "A": 1,
            "B": 1,
            "C": 1,
            "D": 1,
        }

    def test_descending_with_stable_ties(self, analyzer):
        """Test ranking by count, with ties in first-seen order."""
        cycles = cycles_of(
            ["A", "B", "D", "F", "A"],
            ["A", "C", "D", "F", "A"],
            ["A", "C", "E", "F", "A"],
            ["A", "C", "E", "G", "F", "A"],
        )

        hotspots = analyzer.hotspots(cycles)

        assert [(h.node, h.cycle_count) for h in hotspots] == [
            ("A", 4),
            ("F", 4),
            ("C", 3),
            ("D", 2),
            ("E", 2),
            ("B", 1),
            ("G", 1),
        ]

    def test_breakpoints_mirror_hotspots(self, analyzer):
        """Test that impact uses the same membership count as hotspots."""
        cycles = cycles_of(["A", "B", "A"], ["B", "C", "B"], ["A", "C", "A"], ["C", "C"])

        hotspots, breakpoints = analyzer.analyze(cycles)

        assert [(b.node, b.impact) for b in breakpoints] == [
            (h.node, h.cycle_count) for h in hotspots
        ]
        assert breakpoints[0].node == "C"
        assert breakpoints[0].impact == 3
