"""
Parser for directory tree commands.

This module turns one line of command text (`CREATE a/b`, `MOVE a/b c`,
`DELETE a`, `LIST`) into a ParsedCommand holding the command type and its
path arguments. Paths are `/`-joined and split into segment lists here so the
tree only ever sees segments.
"""

from dataclasses import dataclass, field
from enum import Enum

from dirtree.core.path_utils import split_path
from dirtree.core.types import NodePath
from dirtree.exceptions.core import CommandParseError, ErrorContext


class CommandType(Enum):
    """Type of command operation."""

    CREATE = "CREATE"
    DELETE = "DELETE"
    MOVE = "MOVE"
    LIST = "LIST"

    @property
    def verb(self) -> str:
        """Lowercase verb used in failure messages ("Cannot create ...")."""
        return self.value.lower()

    @property
    def arity(self) -> int:
        """Number of path arguments the command takes."""
        return {"MOVE": 2, "LIST": 0}.get(self.value, 1)


@dataclass
class ParsedCommand:
    """
    Represents a parsed command line.

    Params:
        command_type: Type of command (CREATE, DELETE, MOVE, LIST)
        arguments: Raw `/`-joined path arguments as written, at most `arity` of them
        raw: Original command text as written
        line_number: Line number within the batch, if known
        paths: One segment list per argument slot, derived from `arguments`;
            a missing argument is the empty path (the root)
    """

    command_type: CommandType
    arguments: list[str]
    raw: str
    line_number: int | None = None
    paths: list[NodePath] = field(init=False)

    def __post_init__(self):
        """Split every path argument into segments, filling missing slots with the root."""
        self.paths = [split_path(argument) for argument in self.arguments]
        missing = self.command_type.arity - len(self.paths)
        self.paths.extend([] for _ in range(missing))

    def __str__(self) -> str:
        """Return a string representation of the command."""
        return " ".join([self.command_type.value, *self.arguments])

    @property
    def source(self) -> str:
        """The first path argument as written, used in failure messages."""
        return self.arguments[0] if self.arguments else ""


class CommandParser:
    """
    Parser for directory tree command lines.

    Tokens are separated by single spaces and the keyword is matched
    case-sensitively. Tokens beyond a command's arity are ignored; missing
    path arguments become the empty path, which the tree either rejects
    (CREATE, DELETE, MOVE source) or treats as the root (MOVE destination).
    """

    TOKEN_SEPARATOR = " "

    def parse(self, command: str, line_number: int | None = None) -> ParsedCommand:
        """
        Parse a command line into a ParsedCommand.

        Params:
            command: The command text to parse
            line_number: Optional line number for error reporting

        Returns:
            ParsedCommand for the line

        Raises:
            CommandParseError: If the keyword is unknown
        """
        keyword, *tokens = command.split(self.TOKEN_SEPARATOR)

        try:
            command_type = CommandType(keyword)
        except ValueError:
            context = ErrorContext(line_number=line_number, command_text=command)
            raise CommandParseError("Invalid Command", context) from None

        arguments = tokens[: command_type.arity]
        # Trailing separators leave empty tokens that are not real arguments
        while arguments and not arguments[-1]:
            arguments.pop()

        return ParsedCommand(
            command_type=command_type,
            arguments=arguments,
            raw=command,
            line_number=line_number,
        )


def parse_command(command: str, line_number: int | None = None) -> ParsedCommand:
    """
    Convenience function to parse a command line.

    Params:
        command: The command text to parse
        line_number: Optional line number for error reporting

    Returns:
        ParsedCommand for the line

    Raises:
        CommandParseError: If the command is malformed
    """
    parser = CommandParser()
    return parser.parse(command, line_number)
