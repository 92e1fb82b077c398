"""
dirtree - An in-memory directory tree driven by path-addressed commands

dirtree keeps a sorted namespace tree and runs CREATE/DELETE/MOVE/LIST
command batches against it.
"""

from importlib.metadata import version

from dirtree.config import CollisionPolicy, TreeSettings
from dirtree.core.tree_node import DirectoryNode
from dirtree.execution.executor import Executor
from dirtree.structure.directory import DeleteResult, Directory

__version__ = version("dirtree")

__all__ = [
    "__version__",
    "CollisionPolicy",
    "DeleteResult",
    "Directory",
    "DirectoryNode",
    "Executor",
    "TreeSettings",
]
