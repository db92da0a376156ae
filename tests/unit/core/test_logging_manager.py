"""
Tests for logging_manager module.

Covers QuillLogger file output, the NullLogger no-op interface,
safe_logger, and the shared CLI error handler.
"""
from pathlib import Path
from unittest.mock import MagicMock

import click
import pytest

from quill.core.exceptions import NotFoundError
from quill.core.logging_manager import (
    NullLogger,
    QuillLogger,
    handle_cli_error,
    safe_logger,
)


class TestQuillLogger:
    """Tests for QuillLogger file handlers."""

    def test_creates_log_files(self, tmp_path: Path):
        """Operations and errors land in separate files."""
        logger = QuillLogger(tmp_path, component_name="buildtest")
        try:
            logger.log_operation("build", {"documents": 3})
            logger.log_error(NotFoundError("Document not found: x"))
        finally:
            logger.close()

        operations = (tmp_path / "buildtest.log").read_text(encoding="utf-8")
        errors = (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert "OPERATION - build" in operations
        assert '"documents": 3' in operations
        assert "NotFoundError: Document not found: x" in errors

    def test_log_cli_error_message(self, tmp_path: Path):
        """CLI message is a single line naming the error type."""
        logger = QuillLogger(tmp_path, component_name="clitest")
        try:
            message = logger.log_cli_error(NotFoundError("missing"))
        finally:
            logger.close()
        assert message == "❌ NotFoundError: missing"


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_null_logger_methods_no_op(self):
        """Every logging method accepts calls silently."""
        logger = NullLogger()
        logger.log_operation("op", {"key": "value"})
        logger.log_error(ValueError("boom"), {"context": "test"})
        logger.log_debug("debug")
        logger.log_info("info")
        logger.log_warning("warning")

    def test_null_logger_log_cli_error_returns_formatted(self):
        """NullLogger.log_cli_error still formats the message."""
        result = NullLogger().log_cli_error(ValueError("test error"))
        assert "ValueError" in result
        assert "test error" in result


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_returns_logger_when_provided(self):
        mock_logger = MagicMock(spec=QuillLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_returns_null_logger_singleton(self):
        assert isinstance(safe_logger(None), NullLogger)
        assert safe_logger(None) is safe_logger(None)


class TestHandleCliError:
    """Tests for handle_cli_error."""

    def test_exits_with_code_and_message(self, capsys):
        """Prints the error to stderr and exits with status 1."""
        ctx = click.Context(click.Command("x"), obj={"logger": None, "verbose": False})
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, NotFoundError("nope"), "build")
        assert exc_info.value.code == 1
        assert "NotFoundError: nope" in capsys.readouterr().err

    def test_tolerates_missing_context_object(self, capsys):
        """Works when the command was invoked without a context object."""
        ctx = click.Context(click.Command("x"))
        with pytest.raises(SystemExit):
            handle_cli_error(ctx, ValueError("bad"), "build", exit_code=2)
        assert "ValueError: bad" in capsys.readouterr().err


class TestVerboseConsole:
    """Verbose loggers echo debug records to stderr."""

    def test_debug_reaches_console(self, tmp_path: Path, capsys):
        logger = QuillLogger(tmp_path, component_name="verbosetest", verbose=True)
        try:
            logger.log_debug("rendering", {"layout": "post"})
        finally:
            logger.close()
        assert 'DEBUG - rendering: {"layout": "post"}' in capsys.readouterr().err

    def test_quiet_by_default(self, tmp_path: Path, capsys):
        logger = QuillLogger(tmp_path, component_name="quiettest")
        try:
            logger.log_debug("rendering")
        finally:
            logger.close()
        assert capsys.readouterr().err == ""
