"""
Core dirtree components.

This package provides the node model, path helpers and type definitions the
rest of the package builds on.
"""

from dirtree.core.path_utils import (
    PATH_SEPARATOR,
    PathComponents,
    is_within,
    join_path,
    split_path,
)
from dirtree.core.tree_node import DirectoryNode
from dirtree.core.types import NodeMapping, NodePath, OutputSink

__all__ = [
    "DirectoryNode",
    "NodeMapping",
    "NodePath",
    "OutputSink",
    "PATH_SEPARATOR",
    "PathComponents",
    "is_within",
    "join_path",
    "split_path",
]
