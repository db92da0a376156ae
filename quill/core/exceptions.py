#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Quill project.

Every failure a build can hit is reported through one of these. None of
them are retried: a build is a single batch pass, so any error aborts it
before output is written.

Exception Hierarchy:
    Exception (built-in)
    └── QuillError - Base for all Quill errors
        ├── NotFoundError - Missing document, layout, or theme file
        ├── ValidationError - Content failed validation
        │   ├── MissingFieldError - Layout references absent metadata
        │   └── DuplicateDocumentError - Two documents share an identifier
        ├── FrontmatterParseError - Malformed YAML front matter
        ├── ThemeError - Malformed theme definition
        ├── ConfigError - Malformed site configuration
        └── EmitError - Output could not be written (also an OSError)

Usage:
    from quill.core.exceptions import NotFoundError, MissingFieldError

    try:
        html = renderer.render(document)
    except MissingFieldError as e:
        logger.log_error(e, {"document": document.identifier})
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional


class QuillError(Exception):
    """
    Base exception for all Quill errors.

    Catch this to handle any failure raised by the loader, renderer,
    emitter, or theme compiler.
    """

    pass


class NotFoundError(QuillError):
    """
    Exception for a missing document or referenced asset.

    Raised when:
    - A document identifier is not present in the content directory
    - A document asks for a layout with no template
    - A theme or content directory does not exist

    Examples:
        >>> raise NotFoundError("Document not found: 2020-07-24-post")
        >>> raise NotFoundError("Layout 'gallery' has no template")
    """

    pass


class ValidationError(QuillError):
    """
    Exception for content validation failures.

    Raised when a document or its metadata breaks an invariant the build
    relies on.
    """

    pass


class MissingFieldError(ValidationError):
    """
    Exception for a metadata field referenced by a layout but absent.

    Attributes:
        field: Name of the missing field, when known
        identifier: Document identifier, when known

    Examples:
        >>> raise MissingFieldError("Missing field 'title'", field="title")
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        identifier: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.identifier = identifier


class DuplicateDocumentError(ValidationError):
    """
    Exception for two source files resolving to the same identifier.

    Examples:
        >>> raise DuplicateDocumentError(
        ...     "Duplicate identifier 'hello': posts/hello.md, drafts/hello.md"
        ... )
    """

    pass


class FrontmatterParseError(QuillError):
    """
    Exception for front matter that cannot be parsed.

    Raised when:
    - The YAML block is syntactically invalid
    - The YAML block is not a mapping
    - A metadata value is a nested mapping
    - The source file is not valid UTF-8

    Examples:
        >>> raise FrontmatterParseError("Invalid YAML front matter: ...")
    """

    pass


class ThemeError(QuillError):
    """
    Exception for a malformed theme definition.

    Examples:
        >>> raise ThemeError("Rule 3 has an empty selector")
        >>> raise ThemeError("Unknown display mode: 'sepia'")
    """

    pass


class ConfigError(QuillError):
    """
    Exception for a malformed site configuration file.

    Examples:
        >>> raise ConfigError("Unknown config key: 'thme'")
    """

    pass


class EmitError(QuillError, OSError):
    """
    Exception for output that cannot be written.

    Subclasses OSError so callers treating the emitter as ordinary file
    I/O can catch it as such.

    Examples:
        >>> raise EmitError("Cannot write _site/index.html: permission denied")
        >>> raise EmitError("Target escapes output directory: ../etc/passwd")
    """

    pass
