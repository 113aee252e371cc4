"""Cycle enumerator module.

This module discovers elementary cycles in a dependency graph with an
iterative depth-first search. An explicit frame stack replaces recursion so
long dependency chains (hundreds of nodes) cannot exhaust the call stack.

Completeness caveat: once a start node's search completes it is marked
visited and never entered again from later roots. This is a reachability
optimization borrowed from plain graph search, not Johnson's algorithm, so
completeness on graphs with overlapping cycles is not formally guaranteed and
the enumeration should be treated as an approximation. Existing consumers rely
on the current output, so the behavior is kept.
"""

import logging
from dataclasses import dataclass, field

from depcycle.domain.entities.dependency_graph import DependencyGraph
from depcycle.domain.repositories.cycle_cache import CycleCacheInterface
from depcycle.domain.services.cycle_canonicalizer import CycleCanonicalizer

logger = logging.getLogger(__name__)


@dataclass
class _DfsFrame:
    """State a recursive call frame would hold."""

    node: str
    successors: list[str]
    cursor: int = 0
    path: list[str] = field(default_factory=list)
    on_path: set[str] = field(default_factory=set)

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.successors)


class CycleEnumerator:
    """Enumerates elementary cycles with an iterative DFS.

    Time Complexity: exponential in the worst case (complete digraphs);
    callers must bound input size before invoking.
    Space Complexity: O(V) frames, each holding a copy of its path.
    """

    def __init__(
        self,
        canonicalizer: CycleCanonicalizer | None = None,
        cache: CycleCacheInterface | None = None,
    ):
        """Initialize the enumerator.

        Args:
            canonicalizer: Rotation/dedup helper (default instance if omitted)
            cache: Result cache consulted by ``detect_cycles``; None disables it
        """
        self.canonicalizer = canonicalizer or CycleCanonicalizer()
        self.cache = cache

    def detect_cycles(self, graph: DependencyGraph) -> list[list[str]]:
        """Get the deduplicated cycle set, using the cache when possible.

        Args:
            graph: Graph to analyze

        Returns:
            Deduplicated list of closed cycles
        """
        if self.cache is not None:
            cached = self.cache.get(graph)
            if cached is not None:
                logger.debug(f"Serving {len(cached)} cycles from cache")
                return cached

        raw_cycles = self.find_all_cycles(graph)
        cycles = self.canonicalizer.deduplicate(raw_cycles)

        if self.cache is not None:
            self.cache.store(graph, cycles)

        return cycles

    def find_all_cycles(self, graph: DependencyGraph) -> list[list[str]]:
        """Enumerate cycles from every not-yet-visited start node.

        Rotational duplicates are rejected as cycles close, but the result
        still needs ``CycleCanonicalizer.deduplicate`` for node-set dedup.

        Args:
            graph: Graph to traverse

        Returns:
            Raw closed cycles in discovery order
        """
        cycles: list[list[str]] = []
        visited: set[str] = set()

        for start_node in graph.nodes:
            if start_node in visited:
                continue
            self._search_from(start_node, graph, visited, cycles)
            visited.add(start_node)

        logger.debug(
            f"Enumerated {len(cycles)} raw cycles over {graph.node_count} nodes"
        )
        return cycles

    def _search_from(
        self,
        start_node: str,
        graph: DependencyGraph,
        visited: set[str],
        cycles: list[list[str]],
    ) -> None:
        """Run the iterative DFS rooted at start_node."""
        stack: list[_DfsFrame] = [
            _DfsFrame(
                node=start_node,
                successors=graph.successors(start_node),
                path=[start_node],
                on_path={start_node},
            )
        ]

        while stack:
            current = stack[-1]

            if current.exhausted:
                self._backtrack(stack)
                continue

            successor = current.successors[current.cursor]
            current.cursor += 1

            if successor in current.on_path:
                self._close_cycle(current.path, successor, cycles)
                continue

            if successor in visited:
                continue

            stack.append(
                _DfsFrame(
                    node=successor,
                    successors=graph.successors(successor),
                    path=current.path + [successor],
                    on_path=current.on_path | {successor},
                )
            )

    @staticmethod
    def _backtrack(stack: list[_DfsFrame]) -> None:
        """Pop the top frame and restore the parent's path."""
        finished = stack.pop()
        if not stack:
            return

        parent = stack[-1]
        if parent.path and parent.path[-1] == finished.node:
            parent.path.pop()
            parent.on_path.discard(finished.node)

    def _close_cycle(
        self, path: list[str], cycle_end: str, cycles: list[list[str]]
    ) -> None:
        """Slice the cycle out of the path and record it unless seen."""
        start_index = path.index(cycle_end)
        cycle = path[start_index:] + [cycle_end]

        if not self.canonicalizer.is_duplicate(cycle, cycles):
            cycles.append(cycle)
