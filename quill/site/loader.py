#!/usr/bin/env python3
"""
loader.py
---------
Content loader: reads documents from a content directory.

Every Markdown file under the directory is a document whose identifier
is its file stem. Identifiers must be unique across subdirectories.
Loading has no side effects.

Usage:
    from quill.site.loader import ContentLoader

    loader = ContentLoader(Path("posts"))
    doc = loader.load("2020-07-24-combine")
    docs = loader.load_all()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Dict, List, Optional

# --- Local imports ---
from quill.core.exceptions import DuplicateDocumentError, NotFoundError
from quill.core.logging_manager import QuillLogger, safe_logger
from quill.dataclasses.document import Document
from quill.utils.fs import find_markdown_files


class ContentLoader:
    """
    Reads Documents from a directory of Markdown sources.

    Attributes:
        content_dir: Directory searched recursively for sources
        logger: Logger (null logger if none given)
    """

    def __init__(
        self,
        content_dir: Path,
        logger: Optional[QuillLogger] = None,
    ) -> None:
        self.content_dir = Path(content_dir)
        self.logger = safe_logger(logger)
        self._index: Optional[Dict[str, Path]] = None

    def _build_index(self) -> Dict[str, Path]:
        """
        Map identifiers to source files.

        Raises:
            NotFoundError: If the content directory does not exist
            DuplicateDocumentError: If two files share a stem
        """
        if not self.content_dir.is_dir():
            raise NotFoundError(f"Content directory not found: {self.content_dir}")

        index: Dict[str, Path] = {}
        for path in find_markdown_files(self.content_dir):
            identifier = path.stem
            if identifier in index:
                raise DuplicateDocumentError(
                    f"Duplicate identifier '{identifier}': "
                    f"{index[identifier].relative_to(self.content_dir)}, "
                    f"{path.relative_to(self.content_dir)}"
                )
            index[identifier] = path

        self.logger.log_debug(
            "Indexed content", {"content_dir": self.content_dir, "documents": len(index)}
        )
        return index

    @property
    def index(self) -> Dict[str, Path]:
        if self._index is None:
            self._index = self._build_index()
        return self._index

    def identifiers(self) -> List[str]:
        """All document identifiers, sorted."""
        return sorted(self.index)

    def load(self, identifier: str) -> Document:
        """
        Load one document by identifier.

        Args:
            identifier: Document identifier (file stem)

        Returns:
            The parsed Document

        Raises:
            NotFoundError: If no document has this identifier
            FrontmatterParseError: If its front matter is malformed
        """
        path = self.index.get(identifier)
        if path is None:
            raise NotFoundError(f"Document not found: {identifier}")
        return Document.from_file(path)

    def load_all(self) -> List[Document]:
        """
        Load every document, newest first.

        Returns:
            Documents sorted by date (undated last), then identifier
        """
        documents = [Document.from_file(path) for path in self.index.values()]
        documents.sort(key=Document.sort_key)
        self.logger.log_operation(
            "load_all", {"content_dir": self.content_dir, "documents": len(documents)}
        )
        return documents
