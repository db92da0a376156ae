#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for Quill commands.

Functions:
    setup_logger: Initialize QuillLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    BuildStats: For site builds

Usage:
    from quill.core.cli import setup_logger, BuildStats

    logger = setup_logger(log_dir, "build")
    stats = BuildStats()
    stats.documents_loaded += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from quill.core.logging_manager import QuillLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(
    log_dir: Path, component_name: str, verbose: bool = False
) -> QuillLogger:
    """
    Setup logging for CLI operations.

    Creates ``<log_dir>/operations`` if needed and returns a logger
    writing there.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'build')
        verbose: Echo debug records to the console

    Returns:
        Configured QuillLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return QuillLogger(
        operations_log_dir, component_name=component_name, verbose=verbose
    )


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of files successfully processed
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Elapsed seconds since start_time (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        """Human-readable summary of operation statistics."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class BuildStats(OperationStats):
    """
    Statistics for a site build.

    Attributes:
        documents_loaded: Documents read from the content directory
        drafts_skipped: Draft documents left out of the build
        pages_created: Output files that did not exist before
        pages_updated: Output files whose content changed
        pages_unchanged: Output files already identical
    """
    documents_loaded: int = 0
    drafts_skipped: int = 0
    pages_created: int = 0
    pages_updated: int = 0
    pages_unchanged: int = 0

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        super().__post_init__()
        for name in (
            "documents_loaded",
            "drafts_skipped",
            "pages_created",
            "pages_updated",
            "pages_unchanged",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def record(self, status: str) -> None:
        """
        Count one emitted file by its emit status.

        Args:
            status: 'created', 'updated', or 'unchanged'
        """
        self.files_processed += 1
        if status == "created":
            self.pages_created += 1
        elif status == "updated":
            self.pages_updated += 1
        else:
            self.pages_unchanged += 1

    def summary(self) -> str:
        """Get formatted summary with build metrics."""
        parts = [
            f"{self.documents_loaded} documents loaded",
            f"{self.pages_created} created",
            f"{self.pages_updated} updated",
            f"{self.pages_unchanged} unchanged",
        ]
        if self.drafts_skipped:
            parts.append(f"{self.drafts_skipped} drafts skipped")
        parts.append(f"{self.errors} errors")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with build metrics."""
        d = super().to_dict()
        d.update({
            "documents_loaded": self.documents_loaded,
            "drafts_skipped": self.drafts_skipped,
            "pages_created": self.pages_created,
            "pages_updated": self.pages_updated,
            "pages_unchanged": self.pages_unchanged,
        })
        return d
