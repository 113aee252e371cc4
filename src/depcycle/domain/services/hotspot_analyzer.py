"""Hotspot and breakpoint analyzer module.

Aggregates cycle membership into per-node rankings.
"""

from depcycle.domain.entities.dependency_cycle import Breakpoint, Cycle, Hotspot


class HotspotAnalyzer:
    """Ranks nodes by how many cycles they take part in.

    The breakpoint "impact" uses the same formula as the hotspot count.
    A true impact would simulate removing the node and recount cycles;
    reports built on the current numbers depend on them staying as they are.
    """

    def analyze(self, cycles: list[Cycle]) -> tuple[list[Hotspot], list[Breakpoint]]:
        """Compute hotspots and breakpoints for a cycle set.

        Args:
            cycles: Deduplicated cycles

        Returns:
            Tuple of (hotspots, breakpoints), each sorted by descending count.
            Ties keep the order in which nodes were first seen.
        """
        return self.hotspots(cycles), self.breakpoints(cycles)

    def hotspots(self, cycles: list[Cycle]) -> list[Hotspot]:
        counts = self._membership_counts(cycles)
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [Hotspot(node=node, cycle_count=count) for node, count in ranked]

    def breakpoints(self, cycles: list[Cycle]) -> list[Breakpoint]:
        impacts: dict[str, int] = {}
        for node in self._membership_counts(cycles):
            impacts[node] = sum(1 for cycle in cycles if cycle.contains(node))

        ranked = sorted(impacts.items(), key=lambda item: item[1], reverse=True)
        return [Breakpoint(node=node, impact=impact) for node, impact in ranked]

    @staticmethod
    def _membership_counts(cycles: list[Cycle]) -> dict[str, int]:
        counts: dict[str, int] = {}
        for cycle in cycles:
            for node in dict.fromkeys(cycle.distinct_nodes):
                counts[node] = counts.get(node, 0) + 1
        return counts
