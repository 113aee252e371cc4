"""Cycle cache interface module.

This module defines the abstract interface for memoizing cycle sets
per graph shape.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from depcycle.domain.entities.dependency_graph import DependencyGraph


class CycleCacheInterface(ABC):
    """Cache interface for deduplicated cycle sets.

    Implementations key entries on a deterministic serialization of the
    graph, so two graphs with identical nodes and edges built in a different
    order must map to the same entry. Returned cycle sets must be copies.
    """

    @abstractmethod
    def get(self, graph: "DependencyGraph") -> list[list[str]] | None:
        """Get the cached cycle set for a graph.

        Args:
            graph: Graph to look up

        Returns:
            Cycle set if the graph shape was analyzed before, None otherwise
        """
        pass

    @abstractmethod
    def store(self, graph: "DependencyGraph", cycles: list[list[str]]) -> None:
        """Store the cycle set computed for a graph.

        Args:
            graph: Graph the cycles were computed for
            cycles: Deduplicated cycle set
        """
        pass
