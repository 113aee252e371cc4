"""Class reference resolver module.

Maps class-to-class references onto "<project>.<class>" graph nodes.
"""

import logging

from depcycle.domain.entities.class_declaration import (
    ClassDeclaration,
    ClassReference,
)
from depcycle.domain.entities.dependency_graph import GraphNode

logger = logging.getLogger(__name__)


class ClassReferenceResolver:
    """Resolves class references, preferring the referring class's project.

    A reference is matched on class name and namespace. Candidates in the
    same project win; otherwise the first match across all projects (in input
    order) is used. Unresolved references are dropped.
    """

    def resolve(self, classes: list[ClassDeclaration]) -> list[GraphNode]:
        """Turn class declarations into graph nodes.

        Args:
            classes: Parsed class declarations

        Returns:
            One GraphNode per declaration, in input order
        """
        index = self._build_index(classes)
        nodes: list[GraphNode] = []

        for declaration in classes:
            targets: list[str] = []
            for reference in declaration.dependency_refs:
                target = self._resolve_reference(declaration, reference, index)
                if target is None:
                    logger.debug(
                        f"Dropping unresolved reference {reference.namespace}."
                        f"{reference.class_name} from {declaration.node_id}"
                    )
                    continue
                targets.append(target.node_id)

            nodes.append(
                GraphNode(node_id=declaration.node_id, dependency_ids=tuple(targets))
            )

        return nodes

    @staticmethod
    def _build_index(
        classes: list[ClassDeclaration],
    ) -> dict[str, list[ClassDeclaration]]:
        index: dict[str, list[ClassDeclaration]] = {}
        for declaration in classes:
            index.setdefault(declaration.class_name, []).append(declaration)
        return index

    @staticmethod
    def _resolve_reference(
        source: ClassDeclaration,
        reference: ClassReference,
        index: dict[str, list[ClassDeclaration]],
    ) -> ClassDeclaration | None:
        candidates = [
            candidate
            for candidate in index.get(reference.class_name, [])
            if candidate.matches(reference)
        ]
        if not candidates:
            return None

        for candidate in candidates:
            if candidate.project_id == source.project_id:
                return candidate

        return candidates[0]
