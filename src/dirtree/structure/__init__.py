"""
dirtree structure components.

This package provides the namespace tree and its path-addressed operations.
"""

from dirtree.structure.directory import DeleteResult, Directory

__all__ = [
    "DeleteResult",
    "Directory",
]
