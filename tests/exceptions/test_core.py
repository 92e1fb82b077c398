"""
Tests for dirtree exception classes and error context formatting.
"""

import pytest

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


class TestErrorContext:
    """Tests for ErrorContext dataclass."""

    def test_empty_context_formats_to_empty_string(self):
        """Test an empty context adds nothing."""
        assert ErrorContext().format_location() == ""

    def test_format_line_and_command(self):
        """Test both line number and command text are shown."""
        ctx = ErrorContext(line_number=4, command_text="COPY a b")
        formatted = ctx.format_location()

        assert "line 4" in formatted
        assert "command: COPY a b" in formatted

    def test_format_command_only(self):
        """Test context without a line number."""
        formatted = ErrorContext(command_text="FOO").format_location()

        assert "line" not in formatted
        assert "FOO" in formatted


class TestTreeErrors:
    """Tests for tree operation exceptions."""

    def test_invalid_path_message(self):
        """Test the empty-path message."""
        error = InvalidPathError([])
        assert str(error) == "Invalid Input: Empty path"
        assert error.path == []

    def test_invalid_path_custom_reason(self):
        error = InvalidPathError(["a", ""], "Empty path segment")
        assert str(error) == "Invalid Input: Empty path segment"
        assert error.reason == "Empty path segment"

    def test_invalid_path_copies_path(self):
        """Test the stored path is independent of the caller's list."""
        path = ["a", ""]
        error = InvalidPathError(path)
        path.append("b")
        assert error.path == ["a", ""]

    def test_path_not_found_names_segment(self):
        error = PathNotFoundError("banana")
        assert str(error) == "banana does not exist"
        assert error.segment == "banana"

    def test_node_not_found_names_node(self):
        error = NodeNotFoundError("fuji")
        assert str(error) == "fuji does not exist"
        assert error.name == "fuji"

    def test_name_collision(self):
        error = NameCollisionError("apples")
        assert str(error) == "apples already exists"

    def test_cyclic_move_shows_both_paths(self):
        error = CyclicMoveError(["fruits"], ["fruits", "apples"])
        assert str(error) == "fruits/apples is inside fruits"

    @pytest.mark.parametrize(
        "error",
        [
            InvalidPathError([]),
            PathNotFoundError("x"),
            NodeNotFoundError("x"),
            NameCollisionError("x"),
            CyclicMoveError(["x"], ["x"]),
            CommandParseError("Invalid Command"),
        ],
    )
    def test_all_errors_share_base(self, error):
        """Test every error derives from DirTreeError."""
        assert isinstance(error, DirTreeError)


class TestCommandParseError:
    """Tests for CommandParseError message assembly."""

    def test_message_without_context(self):
        error = CommandParseError("Invalid Command")
        assert str(error) == "Invalid Command"
        assert error.context is None

    def test_message_with_context(self):
        """Test location lines are appended below the message."""
        ctx = ErrorContext(line_number=2, command_text="COPY a b")
        error = CommandParseError("Invalid Command", ctx)

        lines = str(error).split("\n")
        assert lines[0] == "Invalid Command"
        assert "line 2" in lines[1]
        assert error.message == "Invalid Command"
        assert error.context is ctx
