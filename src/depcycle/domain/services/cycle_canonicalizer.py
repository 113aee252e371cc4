"""Cycle canonicalizer module.

Normalizes discovered cycles to a comparable form and removes duplicates.
All operations are pure and stateless given their inputs.
"""

KEY_SEPARATOR = "->"


class CycleCanonicalizer:
    """Rotation normalization and node-set deduplication for cycles.

    Two dedup notions are used:
    - ``is_duplicate`` compares rotation-normalized sequences, so
      [B, C, B] and [C, B, C] are the same cycle.
    - ``deduplicate`` compares sorted node sets plus length, so two cycles
      over the same nodes in a different order collapse into one entry.
      This loses precision but matches the numbers downstream reports use.
    """

    def canonicalize(self, cycle: list[str]) -> list[str]:
        """Rotate a closed cycle to start at its smallest node.

        The closing repeat is excluded before rotating and appended again
        afterwards. Ties keep the first occurrence.

        Args:
            cycle: Closed node sequence [n0, ..., n0]

        Returns:
            Rotated, re-closed node sequence
        """
        if not cycle:
            return []

        body = cycle[:-1] if len(cycle) > 1 and cycle[0] == cycle[-1] else cycle
        if not body:
            return list(cycle)

        min_index = 0
        for i in range(1, len(body)):
            if body[i] < body[min_index]:
                min_index = i

        rotated = body[min_index:] + body[:min_index]
        return rotated + [rotated[0]]

    def canonical_key(self, cycle: list[str]) -> tuple[str, int]:
        """Build the dedup key: sorted distinct nodes and cycle length."""
        return KEY_SEPARATOR.join(sorted(set(cycle))), len(cycle)

    def is_duplicate(self, cycle: list[str], existing_cycles: list[list[str]]) -> bool:
        """Check whether a cycle, or a rotation of it, was already found.

        Args:
            cycle: Newly closed cycle
            existing_cycles: Cycles accepted so far

        Returns:
            True for an empty cycle or a rotational duplicate
        """
        if not cycle:
            return True

        normalized = self.canonicalize(cycle)
        for existing in existing_cycles:
            if len(existing) != len(cycle):
                continue
            if self.canonicalize(existing) == normalized:
                return True

        return False

    def deduplicate(self, cycles: list[list[str]]) -> list[list[str]]:
        """Keep one cycle per canonical key.

        The shorter cycle wins; on equal length the first one found wins.
        Output follows the order in which keys were first seen.

        Args:
            cycles: Raw cycles from enumeration

        Returns:
            Deduplicated cycle set
        """
        by_key: dict[tuple[str, int], list[str]] = {}

        for cycle in cycles:
            key = self.canonical_key(cycle)
            kept = by_key.get(key)
            if kept is None or len(kept) > len(cycle):
                by_key[key] = cycle

        return list(by_key.values())
