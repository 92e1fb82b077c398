"""
Core DirectoryNode model for the dirtree package.

A node carries no payload beyond its children; its name lives in the parent's
child mapping.
"""

from pydantic import BaseModel, Field

from dirtree.core.types import NodeMapping


class DirectoryNode(BaseModel):
    """
    A single node in the namespace tree.

    Children are keyed by name and kept in ascending name order by the owning
    Directory after every insert or replace.
    """

    children: dict[str, "DirectoryNode"] = Field(default_factory=dict)

    @property
    def names(self) -> list[str]:
        """Child names in storage order."""
        return list(self.children)

    def get(self, name: str) -> "DirectoryNode | None":
        return self.children.get(name)

    def sort_children(self) -> None:
        """
        Rebuild the child mapping in ascending name order.

        The rebuilt mapping is reassigned on this same node, so the parent's
        reference keeps pointing at the sorted version.
        """
        self.children = dict(sorted(self.children.items()))

    def to_mapping(self) -> NodeMapping:
        """
        Snapshot this subtree as nested dicts.

        Returns:
            Mapping of child name to that child's own mapping
        """
        return {name: child.to_mapping() for name, child in self.children.items()}

    @classmethod
    def from_mapping(cls, mapping: NodeMapping) -> "DirectoryNode":
        """
        Build a subtree from nested dicts, sorting every level.

        Params:
            mapping: Nested mapping of names to child mappings (or None for leaves)

        Returns:
            New DirectoryNode owning freshly built children
        """
        node = cls(
            children={
                name: cls.from_mapping(child or {}) for name, child in mapping.items()
            }
        )
        node.sort_children()
        return node

    def __contains__(self, name: object) -> bool:
        return name in self.children
