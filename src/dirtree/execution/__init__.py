"""
dirtree execution components.

This package runs batches of command lines against a Directory.
"""

from dirtree.execution.executor import Executor

__all__ = [
    "Executor",
]
