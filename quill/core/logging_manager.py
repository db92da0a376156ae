#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Centralized logging system for Quill builds.

Provides structured logging with rotation for loading, rendering, and
emitting, plus the CLI error handler every command funnels through.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


class QuillLogger:
    """
    Rotating file logger shared by the loader, renderer and emitter.

    Every record goes to ``<component>.log``; errors are duplicated to
    ``errors.log`` with their traceback. The console shows warnings, or
    everything when verbose.

    Attributes:
        log_dir: Directory for log files
        component_name: Prefix of the stdlib logger names
        verbose: Whether debug records reach the console
        main_logger: Logger for build operations
        error_logger: Logger for failures only
    """

    FILE_FORMAT = (
        "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
    )
    CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "quill",
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        verbose: bool = False,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Logger prefix and main log file stem
            max_bytes: Size at which a log file rotates (default: 10MB)
            backup_count: Rotated files kept per log (default: 5)
            verbose: Send debug records to the console as well
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.verbose = verbose
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._reset(f"{self.component_name}.operations", logging.DEBUG)
        self.error_logger = self._reset(f"{self.component_name}.errors", logging.ERROR)

        self.main_logger.addHandler(
            self._file_handler(self.log_dir / f"{self.component_name}.log", logging.DEBUG)
        )
        self.error_logger.addHandler(
            self._file_handler(self.log_dir / "errors.log", logging.ERROR)
        )

        console = logging.StreamHandler()
        console.setLevel(logging.DEBUG if self.verbose else logging.WARNING)
        console.setFormatter(logging.Formatter(self.CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console)

    @staticmethod
    def _reset(name: str, level: int) -> logging.Logger:
        """Fetch a stdlib logger and drop handlers left by an earlier instance."""
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        return logger

    def _file_handler(self, file_path: Path, level: int) -> RotatingFileHandler:
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(self.FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        return handler

    def close(self) -> None:
        """Close and detach all handlers (releases log files)."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    # ---- Records ----
    def _log(
        self, level: int, tag: str, message: str, details: Optional[Dict[str, Any]]
    ) -> None:
        if details:
            message = f"{message}: {json.dumps(details, default=str)}"
        self.main_logger.log(level, f"{tag} - {message}", stacklevel=3)

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Record a build stage (load_all, build_start, build_complete, ...).

        Details are serialized as JSON; paths and dates fall back to str().
        """
        self._log(logging.INFO, "OPERATION", operation, details or {})

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.DEBUG, "DEBUG", message, details)

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.INFO, "INFO", message, details)

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.WARNING, "WARNING", message, details)

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Write an error, its context and the active traceback to errors.log.

        Args:
            error: Exception being handled
            context: Where it happened (operation, content dir, ...)
        """
        lines = [f"ERROR - {type(error).__name__}: {error}"]
        if context:
            lines.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))
        lines.append(f"Traceback:\n{traceback.format_exc()}")
        self.error_logger.error("\n".join(lines))
        self.main_logger.debug(f"ERROR - {type(error).__name__}: {error}")

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log full error details to file and return a short CLI message.

        Examples:
            >>> logger.log_cli_error(NotFoundError("Document not found: x"))
            '❌ NotFoundError: Document not found: x'
        """
        self.log_error(error, context or {"source": "cli"})
        return _cli_message(error, show_traceback)


def _cli_message(error: Exception, show_traceback: bool = False) -> str:
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        return f"{message}\n\n{traceback.format_exc()}"
    return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Standardized error handling for all CLI commands.

    Logs the error with context, prints a one-line message to stderr,
    and exits. Never returns.

    Args:
        ctx: Click context object containing logger and verbose flag
        error: Exception that occurred
        operation: Name of the operation that failed (e.g. 'build')
        additional_context: Optional extra context (content dir, etc.)
        exit_code: Exit code for sys.exit() (default: 1)
    """
    obj = ctx.obj or {}
    logger: Optional[QuillLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    error_msg = safe_logger(logger).log_cli_error(
        error, context, show_traceback=verbose
    )
    click.echo(error_msg, err=True)
    sys.exit(exit_code)


class NullLogger:
    """
    Null Object logger implementing the QuillLogger interface.

    Lets library code call logger methods unconditionally.
    """

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return _cli_message(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[QuillLogger]) -> QuillLogger:
    """
    Return the provided logger, or a null logger if None.

    Args:
        logger: QuillLogger instance or None

    Returns:
        The provided logger or the shared NullLogger
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
