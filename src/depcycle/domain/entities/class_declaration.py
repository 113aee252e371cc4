"""ClassDeclaration entity module.

Source-level classes as produced by the parser layer, before their
dependency references are resolved to graph node identifiers.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClassReference:
    """An unresolved reference from one class to another.

    Attributes:
        class_name: Simple name of the referenced class
        namespace: Namespace the referenced class lives in
    """

    class_name: str
    namespace: str


@dataclass
class ClassDeclaration:
    """A class and the classes it references.

    Identifiers are taken as given. Empty names still yield a node, so an
    incomplete parse never aborts an analysis.

    Attributes:
        class_name: Simple class name
        namespace: Namespace declaring the class
        project_id: Project that owns the source file
        dependency_refs: References to other classes
    """

    class_name: str
    namespace: str
    project_id: str
    dependency_refs: list[ClassReference] = field(default_factory=list)

    @property
    def node_id(self) -> str:
        """Graph node identifier: "<project>.<class>"."""
        return f"{self.project_id}.{self.class_name}"

    def matches(self, reference: ClassReference) -> bool:
        return (
            self.class_name == reference.class_name
            and self.namespace == reference.namespace
        )
