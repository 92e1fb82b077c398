"""
Batch command execution against a Directory.

The Executor echoes each command, dispatches it to the tree and reports
per-command failures without stopping the batch. An unparseable command is
the one fatal condition: CommandParseError propagates to the caller and no
further lines run.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from dirtree.config import TreeSettings
from dirtree.core.types import OutputSink
from dirtree.exceptions.core import CommandParseError, DirTreeError
from dirtree.parsing.parser import CommandParser, CommandType, ParsedCommand
from dirtree.structure.directory import Directory

logger = logging.getLogger(__name__)


class Executor:
    """Runs command lines against a Directory, sending output to a sink.

    Every public method returns the output lines it produced, in addition to
    sending each one to the sink.
    """

    def __init__(
        self,
        directory: Directory | None = None,
        sink: OutputSink | None = print,
        settings: TreeSettings | None = None,
    ):
        """
        Params:
            directory: Tree to run commands against; a new one is built if omitted
            sink: Callable receiving each output string, or None to only return them
            settings: Settings for the newly built tree

        Raises:
            ValueError: If both directory and settings are given
        """
        if directory is not None and settings is not None:
            raise ValueError(
                "Pass settings to the Directory itself when supplying a directory"
            )
        self.directory = (
            directory if directory is not None else Directory(settings=settings)
        )
        self.sink = sink
        self.parser = CommandParser()

    def execute(self, command: str, line_number: int | None = None) -> list[str]:
        """
        Execute a single command line.

        Params:
            command: Command text (e.g., "CREATE fruits/apples")
            line_number: Optional line number used in parse error messages

        Returns:
            Output lines produced by the command

        Raises:
            CommandParseError: If the command cannot be parsed
        """
        parsed = self.parser.parse(command, line_number)
        output = [self._emit(parsed.raw)]

        if parsed.command_type is CommandType.LIST:
            output.append(self._emit(self.directory.list()))
            return output

        try:
            self._dispatch(parsed)
        except DirTreeError as e:
            logger.info("%s failed: %s", parsed, e)
            output.append(
                self._emit(f"Cannot {parsed.command_type.verb} {parsed.source} - {e}")
            )
        return output

    def run(self, lines: Iterable[str]) -> list[str]:
        """
        Execute a batch of command lines in order.

        Blank lines are skipped.

        Params:
            lines: Command lines

        Returns:
            All output lines produced by the batch

        Raises:
            CommandParseError: On the first unparseable line; later lines are not run
        """
        output = []
        for line_number, line in enumerate(lines, start=1):
            line = line.rstrip("\r")
            if not line.strip():
                continue
            try:
                output.extend(self.execute(line, line_number))
            except CommandParseError as e:
                logger.error("Stopping batch at line %d: %s", line_number, e)
                raise
        return output

    def run_text(self, text: str) -> list[str]:
        """Execute newline-separated command text."""
        return self.run(text.split("\n"))

    def run_file(self, file: str | Path) -> list[str]:
        """
        Read a command file and execute each line.

        Params:
            file: Path of the command file (UTF-8)

        Returns:
            All output lines produced by the batch
        """
        return self.run_text(Path(file).read_text(encoding="utf-8"))

    def _dispatch(self, parsed: ParsedCommand) -> None:
        if parsed.command_type is CommandType.CREATE:
            self.directory.create(parsed.paths[0])
        elif parsed.command_type is CommandType.DELETE:
            self.directory.delete(parsed.paths[0])
        elif parsed.command_type is CommandType.MOVE:
            self.directory.move(parsed.paths[0], parsed.paths[1])

    def _emit(self, text: str) -> str:
        if self.sink is not None:
            self.sink(text)
        return text
