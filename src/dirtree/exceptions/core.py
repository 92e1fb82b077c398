"""
Exception classes for dirtree tree operations and command processing.

This module defines specific exception types for the failures a tree
operation or a command line can produce. Tree errors are recoverable per
command; CommandParseError is fatal for a batch.
"""

from dataclasses import dataclass

from dirtree.core.path_utils import join_path
from dirtree.core.types import NodePath


@dataclass
class ErrorContext:
    """
    Context information for command error messages.

    Captures where in a batch a command came from so that fatal errors can
    point back at the offending line.

    Params:
        line_number: 1-based line number within the batch
        command_text: The original command text that caused the error
    """

    line_number: int | None = None
    command_text: str | None = None

    def format_location(self) -> str:
        """
        Format location information for appending to an error message.

        Returns:
            Indented location lines, or an empty string when nothing is known
        """
        lines = []

        if self.line_number is not None:
            lines.append(f"  at line {self.line_number}")

        if self.command_text is not None:
            lines.append(f"  command: {self.command_text}")

        return "\n".join(lines)


class DirTreeError(Exception):
    """Base exception for all dirtree errors."""

    pass


class InvalidPathError(DirTreeError):
    """Raised when a path is empty where a node is required, or has an empty segment."""

    def __init__(self, path: NodePath, reason: str = "Empty path"):
        """
        Initialize the exception.

        Params:
            path: The offending path
            reason: Why the path is invalid
        """
        self.path = list(path)
        self.reason = reason
        super().__init__(f"Invalid Input: {reason}")


class PathNotFoundError(DirTreeError):
    """Raised when a path walk reaches a segment that does not exist."""

    def __init__(self, segment: str):
        """
        Initialize the exception.

        Params:
            segment: The first segment that could not be found
        """
        self.segment = segment
        super().__init__(f"{segment} does not exist")


class NodeNotFoundError(DirTreeError):
    """Raised when a move source resolves its parent but the node itself is absent."""

    def __init__(self, name: str):
        """
        Initialize the exception.

        Params:
            name: Name of the missing node
        """
        self.name = name
        super().__init__(f"{name} does not exist")


class NameCollisionError(DirTreeError):
    """Raised when an insert would replace an existing sibling and collisions are disallowed."""

    def __init__(self, name: str):
        """
        Initialize the exception.

        Params:
            name: The name that already exists at the destination
        """
        self.name = name
        super().__init__(f"{name} already exists")


class CyclicMoveError(DirTreeError):
    """Raised when a node would be moved into its own subtree."""

    def __init__(self, from_path: NodePath, to_path: NodePath):
        """
        Initialize the exception.

        Params:
            from_path: Path of the node being moved
            to_path: Destination path inside that node's subtree
        """
        self.from_path = list(from_path)
        self.to_path = list(to_path)
        super().__init__(
            f"{join_path(self.to_path)} is inside {join_path(self.from_path)}"
        )


class CommandParseError(DirTreeError):
    """Raised when a command line cannot be parsed. Fatal for the whole batch."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            message: Primary error message
            context: Optional location of the command within its batch
        """
        self.message = message
        self.context = context

        location_info = context.format_location() if context else ""
        full_message = f"{message}\n{location_info}" if location_info else message

        super().__init__(full_message)
