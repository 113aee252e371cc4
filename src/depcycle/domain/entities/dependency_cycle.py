"""Dependency cycle entity module.

This module defines the Cycle entity and the ranked diagnostics
(hotspots and breakpoints) derived from a set of cycles.
"""

from dataclasses import dataclass, field
from enum import Enum


class CycleType(str, Enum):
    """Kind of entity a cycle was discovered between."""

    PROJECT = "project"
    CLASS = "class"


@dataclass
class Cycle:
    """Represents an elementary dependency cycle.

    Domain invariants:
    - nodes must contain at least 2 elements (a self-loop is [n, n])
    - nodes must form a closed loop (first == last)

    Attributes:
        nodes: Node identifiers [n0, n1, ..., n0] including the closing repeat
        cycle_type: Whether the cycle is between projects or classes
    """

    nodes: list[str]
    cycle_type: CycleType = CycleType.PROJECT

    def __post_init__(self):
        """Validate domain invariants after initialization."""
        if len(self.nodes) < 2:
            raise ValueError(
                f"Cycle must contain at least 2 nodes, got: {len(self.nodes)}"
            )

        if self.nodes[0] != self.nodes[-1]:
            raise ValueError(
                f"Cycle must be closed (first == last), "
                f"got: {self.nodes[0]!r} -> {self.nodes[-1]!r}"
            )

    @property
    def complexity(self) -> int:
        """Sequence length including the repeated closing node."""
        return len(self.nodes)

    @property
    def distinct_nodes(self) -> list[str]:
        """Nodes of the cycle without the closing repeat."""
        return self.nodes[:-1]

    def contains(self, node_id: str) -> bool:
        return node_id in self.nodes


@dataclass(frozen=True)
class Hotspot:
    """A node ranked by how many cycles include it."""

    node: str
    cycle_count: int

    def __post_init__(self):
        if self.cycle_count < 1:
            raise ValueError(f"cycle_count must be >= 1, got: {self.cycle_count}")


@dataclass(frozen=True)
class Breakpoint:
    """A node ranked by how many cycles modifying it would break.

    Currently computed with the same formula as Hotspot.cycle_count;
    no removal simulation is performed.
    """

    node: str
    impact: int

    def __post_init__(self):
        if self.impact < 1:
            raise ValueError(f"impact must be >= 1, got: {self.impact}")


@dataclass
class CycleAnalysisResult:
    """Deduplicated cycles of one graph plus their rankings.

    Attributes:
        cycles: Deduplicated cycle set
        hotspots: Nodes sorted by descending cycle membership
        breakpoints: Nodes sorted by descending impact
    """

    cycles: list[Cycle] = field(default_factory=list)
    hotspots: list[Hotspot] = field(default_factory=list)
    breakpoints: list[Breakpoint] = field(default_factory=list)

    @property
    def has_cycles(self) -> bool:
        return bool(self.cycles)

    @property
    def longest_cycle(self) -> int:
        """Largest complexity among the cycles, 0 if there are none."""
        return max((cycle.complexity for cycle in self.cycles), default=0)
