#!/usr/bin/env python3
"""
emitter.py
----------
Site emitter: writes rendered pages beneath the output directory.

Writes are scoped: a target must resolve inside the output directory.
Existing files are overwritten, except that a file whose content is
already identical is left untouched so its timestamp survives.

Key Features:
    - One page per document at ``posts/<identifier>/index.html``
    - Change detection (created / updated / unchanged)
    - OS failures surface as EmitError, an OSError subclass

Usage:
    from quill.site.emitter import SiteEmitter

    emitter = SiteEmitter(Path("_site"))
    status = emitter.emit_document("2020-07-24-combine", html)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import shutil
from pathlib import Path
from typing import Optional, Union

# --- Local imports ---
from quill.core.exceptions import EmitError
from quill.core.logging_manager import QuillLogger, safe_logger
from quill.core.paths import PAGE_FILENAME, POSTS_OUTPUT
from quill.utils.fs import is_within

CREATED = "created"
UPDATED = "updated"
UNCHANGED = "unchanged"


class SiteEmitter:
    """
    Writes site artifacts to an output directory.

    Attributes:
        output_dir: Root all writes are scoped to
        logger: Logger (null logger if none given)
    """

    def __init__(
        self,
        output_dir: Path,
        logger: Optional[QuillLogger] = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.logger = safe_logger(logger)

    def resolve(self, target: Union[str, Path]) -> Path:
        """
        Resolve a target relative to the output directory.

        Args:
            target: Relative path of the artifact

        Returns:
            Absolute output path

        Raises:
            EmitError: If the target is absolute or escapes the output dir
        """
        relative = Path(target)
        if relative.is_absolute():
            raise EmitError(f"Target must be relative to the output directory: {target}")

        path = self.output_dir / relative
        if not is_within(path, self.output_dir):
            raise EmitError(f"Target escapes output directory: {target}")
        return path

    @staticmethod
    def document_target(identifier: str) -> Path:
        """Relative output path for a document's page."""
        return Path(POSTS_OUTPUT) / identifier / PAGE_FILENAME

    def emit(self, markup: str, target: Union[str, Path]) -> str:
        """
        Write markup to a target with overwrite semantics.

        Args:
            markup: Content to write
            target: Path relative to the output directory

        Returns:
            'created', 'updated', or 'unchanged'

        Raises:
            EmitError: If the target is out of scope or cannot be written
        """
        path = self.resolve(target)

        try:
            if path.is_file():
                if path.read_text(encoding="utf-8") == markup:
                    return UNCHANGED
                status = UPDATED
            else:
                status = CREATED

            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(markup, encoding="utf-8")
        except OSError as e:
            raise EmitError(f"Cannot write {path}: {e.strerror or e}") from e

        self.logger.log_debug(f"Emitted {target}", {"status": status})
        return status

    def emit_document(self, identifier: str, markup: str) -> str:
        """Write a document page; see emit()."""
        return self.emit(markup, self.document_target(identifier))

    def clean(self) -> None:
        """
        Remove everything inside the output directory.

        Raises:
            EmitError: If removal fails
        """
        if not self.output_dir.exists():
            return

        try:
            for item in self.output_dir.iterdir():
                if item.is_dir() and not item.is_symlink():
                    shutil.rmtree(item)
                else:
                    item.unlink()
        except OSError as e:
            raise EmitError(f"Cannot clean {self.output_dir}: {e.strerror or e}") from e

        self.logger.log_info(f"Cleaned {self.output_dir}")
