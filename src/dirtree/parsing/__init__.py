"""
dirtree parsing components.

This package provides command line parsing for the directory tree
interpreter.
"""

from dirtree.exceptions.core import CommandParseError
from dirtree.parsing.parser import (
    CommandParser,
    CommandType,
    ParsedCommand,
    parse_command,
)

__all__ = [
    "CommandParseError",
    "CommandParser",
    "CommandType",
    "ParsedCommand",
    "parse_command",
]
