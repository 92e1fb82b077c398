"""
dirtree exception classes.

This package provides all exception types used throughout dirtree for
consistent error handling and reporting.
"""

from dirtree.exceptions.core import (
    CommandParseError,
    CyclicMoveError,
    DirTreeError,
    ErrorContext,
    InvalidPathError,
    NameCollisionError,
    NodeNotFoundError,
    PathNotFoundError,
)

__all__ = [
    "DirTreeError",
    "ErrorContext",
    "InvalidPathError",
    "PathNotFoundError",
    "NodeNotFoundError",
    "NameCollisionError",
    "CyclicMoveError",
    "CommandParseError",
]
