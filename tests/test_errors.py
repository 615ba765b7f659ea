"""Tests for taskflow.errors module."""

from __future__ import annotations

from pathlib import Path

from taskflow.errors import EMPTY_TEXT, ParseError, TaskflowError, ValidationError


class TestParseError:
    """Tests for ParseError."""

    def test_message_names_file(self) -> None:
        """Test the message starts with the file name."""
        error = ParseError(Path("/work/.taskflow.yaml"), "bad indent")
        assert str(error) == "Invalid .taskflow.yaml: bad indent"
        assert error.path == Path("/work/.taskflow.yaml")
        assert error.detail == "bad indent"
        assert error.code == "PARSE_ERROR"

    def test_is_taskflow_error(self) -> None:
        """Test callers can catch the base class."""
        assert isinstance(ParseError(Path("x.yaml"), "oops"), TaskflowError)


class TestValidationError:
    """Tests for ValidationError."""

    def test_code_and_message(self) -> None:
        """Test the reason code is kept alongside the message."""
        error = ValidationError(EMPTY_TEXT, "Task text is required")
        assert error.code == EMPTY_TEXT
        assert error.message == "Task text is required"
        assert str(error) == "Task text is required"
