"""
Common path utilities for the dirtree package.

Paths travel through the tree as segment lists. This module converts the
`/`-joined text form used by commands into segments and back, and splits a
segment list into the prefix that must resolve and the final segment an
operation acts on.
"""

from dataclasses import dataclass

from dirtree.core.types import NodePath

PATH_SEPARATOR = "/"


@dataclass(frozen=True)
class PathComponents:
    """Result of splitting a path into its parent prefix and final segment."""

    prefix: tuple[str, ...]
    final: str

    @classmethod
    def split_path(cls, path: NodePath) -> "PathComponents | None":
        """
        Split a segment list at its last element without mutating it.

        Params:
            path: Segment list (e.g., ["fruits", "apples", "fuji"])

        Returns:
            PathComponents with the prefix and final segment, or None for the
            empty path

        Examples:
            ["fruits", "apples", "fuji"] -> PathComponents(("fruits", "apples"), "fuji")
            ["meat"] -> PathComponents((), "meat")
            [] -> None
        """
        if not path:
            return None
        return cls(prefix=tuple(path[:-1]), final=path[-1])

    @property
    def parent(self) -> NodePath:
        """The prefix as a fresh list."""
        return list(self.prefix)

    @property
    def full(self) -> NodePath:
        return [*self.prefix, self.final]


def split_path(path: str) -> NodePath:
    """
    Split a `/`-joined path into its segments.

    Params:
        path: Path text (e.g., "fruits/apples/fuji")

    Returns:
        List of path segments; the empty string yields the empty path

    Examples:
        "fruits/apples/fuji" -> ["fruits", "apples", "fuji"]
        "" -> []
    """
    if not path:
        return []
    return path.split(PATH_SEPARATOR)


def join_path(path: NodePath) -> str:
    """Join segments back into `/`-joined text."""
    return PATH_SEPARATOR.join(path)


def is_within(path: NodePath, ancestor: NodePath) -> bool:
    """
    Check whether `path` equals `ancestor` or lies beneath it.

    Params:
        path: Candidate descendant path
        ancestor: Candidate ancestor path

    Returns:
        True if `ancestor` is a (non-strict) prefix of `path`
    """
    return len(path) >= len(ancestor) and list(path[: len(ancestor)]) == list(ancestor)
