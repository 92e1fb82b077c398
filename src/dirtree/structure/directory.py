"""
Namespace tree operations for dirtree.

This module contains the Directory class, which owns the root DirectoryNode
and implements the path-addressed operations on it: find, create, delete,
move and list. Every insert or replace re-sorts the affected child set
immediately, so storage order and listing order never diverge.
"""

import logging
from dataclasses import dataclass

from dirtree.config import DEFAULT_SETTINGS, CollisionPolicy, TreeSettings
from dirtree.core.path_utils import PathComponents, is_within, join_path
from dirtree.core.tree_node import DirectoryNode
from dirtree.core.types import NodeMapping, NodePath
from dirtree.exceptions.core import (
    CyclicMoveError,
    InvalidPathError,
    NameCollisionError,
    NodeNotFoundError,
    PathNotFoundError,
)

logger = logging.getLogger(__name__)


@dataclass
class DeleteResult:
    """Outcome of a delete: the removed name and its subtree, if one existed."""

    key: str
    node: DirectoryNode | None = None

    @property
    def found(self) -> bool:
        return self.node is not None


class Directory:
    """
    In-memory namespace tree addressed by segment paths.

    The root is owned by the Directory and is never replaced; every other
    node is owned by exactly one parent.
    """

    def __init__(
        self,
        root: DirectoryNode | None = None,
        settings: TreeSettings | None = None,
    ):
        self._root = root if root is not None else DirectoryNode()
        self.settings = settings or DEFAULT_SETTINGS

    @classmethod
    def from_mapping(
        cls, mapping: NodeMapping, settings: TreeSettings | None = None
    ) -> "Directory":
        """
        Build a Directory from nested dicts.

        Params:
            mapping: Nested mapping of names to child mappings
            settings: Optional tree settings

        Returns:
            Directory whose every level is already sorted
        """
        return cls(root=DirectoryNode.from_mapping(mapping), settings=settings)

    @property
    def root(self) -> DirectoryNode:
        return self._root

    def find(self, path: NodePath) -> DirectoryNode:
        """
        Walk from the root following one child per segment.

        Params:
            path: Segment list; the empty path is the root

        Returns:
            The node the path resolves to

        Raises:
            PathNotFoundError: On the first segment that does not exist
        """
        current = self._root
        for segment in path:
            child = current.get(segment)
            if child is None:
                raise PathNotFoundError(segment)
            current = child
        return current

    def exists(self, path: NodePath) -> bool:
        try:
            self.find(path)
        except PathNotFoundError:
            return False
        return True

    def create(self, path: NodePath) -> None:
        """
        Create an empty node at the end of `path`.

        Params:
            path: Segment list; all but the last segment must resolve

        Raises:
            InvalidPathError: If the path is empty or has an empty segment
            PathNotFoundError: If the prefix does not resolve
            NameCollisionError: If the name exists and collisions are disallowed
        """
        components = self._split(path)
        parent = self.find(components.parent)
        self._check_collision(parent, components.final)
        self._attach(parent, components.final, DirectoryNode())
        logger.debug("Created %s", join_path(components.full))

    def delete(self, path: NodePath) -> DeleteResult:
        """
        Detach the node at the end of `path` together with its subtree.

        Deleting a name that is not present is not an error; only an
        unresolved prefix is.

        Params:
            path: Segment list; all but the last segment must resolve

        Returns:
            DeleteResult with the removed name and subtree (node is None if absent)

        Raises:
            InvalidPathError: If the path is empty or has an empty segment
            PathNotFoundError: If the prefix does not resolve
        """
        components = self._split(path)
        parent = self.find(components.parent)
        removed = parent.children.pop(components.final, None)
        if removed is None:
            logger.debug("Nothing to delete at %s", join_path(components.full))
        else:
            logger.debug("Deleted %s", join_path(components.full))
        return DeleteResult(key=components.final, node=removed)

    def move(self, from_path: NodePath, to_path: NodePath) -> None:
        """
        Move the subtree at `from_path` under the node at `to_path`.

        The subtree keeps its name and content. All checks run before the
        source is detached, so a failed move leaves the tree unchanged.

        Params:
            from_path: Path of the node to move
            to_path: Path of the new parent; empty means the root

        Raises:
            InvalidPathError: If from_path is empty, or either path has an empty segment
            PathNotFoundError: If from_path's prefix or to_path does not resolve
            NodeNotFoundError: If the node at from_path does not exist
            CyclicMoveError: If to_path lies inside the moved subtree
            NameCollisionError: If the name exists at the destination and
                collisions are disallowed
        """
        components = self._split(from_path)
        source_parent = self.find(components.parent)
        if components.final not in source_parent:
            raise NodeNotFoundError(components.final)

        if not all(to_path):
            raise InvalidPathError(to_path, "Empty path segment")
        if is_within(to_path, components.full):
            raise CyclicMoveError(components.full, to_path)
        destination = self.find(to_path)
        if destination is not source_parent:
            self._check_collision(destination, components.final)

        detached = self.delete(components.full)
        self._attach(destination, detached.key, detached.node)
        logger.debug(
            "Moved %s under %s",
            join_path(components.full),
            join_path(to_path) or "<root>",
        )

    def _split(self, path: NodePath) -> PathComponents:
        components = PathComponents.split_path(path)
        if components is None:
            raise InvalidPathError(path)
        if not all(components.full):
            raise InvalidPathError(path, "Empty path segment")
        return components

    def _check_collision(self, parent: DirectoryNode, name: str) -> None:
        if name not in parent:
            return
        if self.settings.collision_policy is CollisionPolicy.fail:
            raise NameCollisionError(name)
        logger.debug("Replacing existing node %s", name)

    def _attach(self, parent: DirectoryNode, name: str, node: DirectoryNode) -> None:
        parent.children[name] = node
        parent.sort_children()

    def _render(self, node: DirectoryNode, level: int, lines: list[str]) -> None:
        indent = " " * (level * self.settings.indent_width)
        for name, child in node.children.items():
            lines.append(f"{indent}{name}")
            self._render(child, level + 1, lines)

    def list(self) -> str:
        """
        Render the tree as an indented listing.

        Returns:
            One name per line in depth-first pre-order, root's children at
            indent 0, with trailing whitespace trimmed
        """
        lines: list[str] = []
        self._render(self._root, 0, lines)
        return "\n".join(lines).rstrip()

    def __str__(self) -> str:
        return self.list()
