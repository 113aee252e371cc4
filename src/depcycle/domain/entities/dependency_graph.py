"""DependencyGraph entity module.

This module defines the adjacency-map representation of a dependency graph.
The graph carries no cycle logic; it only answers structural questions.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GraphNode:
    """A named entity and the identifiers it depends on.

    Attributes:
        node_id: Opaque identifier (project name or "<project>.<class>")
        dependency_ids: Ordered identifiers this node depends on
    """

    node_id: str
    dependency_ids: tuple[str, ...] = ()


@dataclass
class DependencyGraph:
    """Directed dependency graph stored as an adjacency map.

    Domain invariants:
    - Every source node is a key, even with no outgoing edges
    - Successor order is preserved and duplicate edges are kept
    - Targets that never appear as sources are not required to be keys

    The graph is treated as immutable once built; analysis code reads
    ``adjacency`` but never mutates it.

    Attributes:
        adjacency: Map of node_id -> ordered list of successor node_ids
    """

    adjacency: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_nodes(cls, nodes: Iterable[GraphNode]) -> "DependencyGraph":
        """Build a graph from nodes in O(total edges).

        Dangling targets are accepted as-is. A node_id supplied twice keeps
        the later dependency list.

        Args:
            nodes: Entities with their dependency identifiers

        Returns:
            New DependencyGraph (empty for empty input)
        """
        adjacency: dict[str, list[str]] = {}
        for node in nodes:
            adjacency[node.node_id] = list(node.dependency_ids)
        return cls(adjacency=adjacency)

    @property
    def nodes(self) -> list[str]:
        """Source node identifiers in insertion order."""
        return list(self.adjacency.keys())

    @property
    def node_count(self) -> int:
        return len(self.adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(successors) for successors in self.adjacency.values())

    def successors(self, node_id: str) -> list[str]:
        """Get successors of a node; unknown nodes have none."""
        return self.adjacency.get(node_id, [])

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)
