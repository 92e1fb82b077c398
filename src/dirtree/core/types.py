"""
Core type definitions for the dirtree package.

This module contains the type aliases shared by the tree, the parser and
the executor.
"""

from collections.abc import Callable

NodePath = list[str]

NodeMapping = dict[str, "NodeMapping"]

OutputSink = Callable[[str], None]
