"""
Site Commands
-------------

Commands that read a content directory and produce (or preview) the site.

Commands:
    - build: Content → HTML pages + stylesheet
    - check: Dry run of load and render, nothing written
    - list: Document identifiers, dates and titles
    - stylesheet: Compiled CSS to stdout
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional

# --- Third party imports ---
import click

# --- Local imports ---
from quill.core.cli_options import (
    clean_option,
    content_dir_argument,
    drafts_option,
    output_option,
    theme_option,
)
from quill.core.logging_manager import QuillLogger, handle_cli_error
from quill.site.builder import SiteBuilder
from quill.site.config import SiteConfig
from quill.site.stylesheet import compile_stylesheet, load_theme


@click.command()
@content_dir_argument
@output_option
@theme_option
@clean_option
@drafts_option
@click.pass_context
def build(
    ctx: click.Context,
    content_dir: str,
    output: Optional[str],
    theme: Optional[str],
    clean: bool,
    drafts: bool,
) -> None:
    """Build the site from a content directory."""
    logger: QuillLogger = ctx.obj["logger"]

    try:
        config = SiteConfig.load(Path(content_dir))
        builder = SiteBuilder(
            config,
            output_dir=Path(output) if output else None,
            include_drafts=True if drafts else None,
            theme_path=Path(theme) if theme else None,
            logger=logger,
        )

        click.echo(f"🔨 Building {config.title} → {builder.output_dir}")
        result = builder.build(clean=clean)

        click.echo(f"\n✅ Built {len(result.documents)} documents")
        click.echo(f"  Created: {result.stats.pages_created}")
        click.echo(f"  Updated: {result.stats.pages_updated}")
        click.echo(f"  Unchanged: {result.stats.pages_unchanged}")
        if result.stats.drafts_skipped:
            click.echo(f"  Drafts skipped: {result.stats.drafts_skipped}")
        click.echo(f"  Time: {result.stats.duration():.2f}s")

    except Exception as e:
        handle_cli_error(ctx, e, "build", {"content_dir": content_dir})


@click.command()
@content_dir_argument
@theme_option
@drafts_option
@click.pass_context
def check(
    ctx: click.Context,
    content_dir: str,
    theme: Optional[str],
    drafts: bool,
) -> None:
    """Load and render every page without writing anything."""
    logger: QuillLogger = ctx.obj["logger"]

    try:
        config = SiteConfig.load(Path(content_dir))
        builder = SiteBuilder(
            config,
            include_drafts=True if drafts else None,
            theme_path=Path(theme) if theme else None,
            logger=logger,
        )
        count = builder.check()
        click.echo(f"✅ {count} documents render cleanly")

    except Exception as e:
        handle_cli_error(ctx, e, "check", {"content_dir": content_dir})


@click.command("list")
@content_dir_argument
@click.pass_context
def list_documents(ctx: click.Context, content_dir: str) -> None:
    """List documents, newest first."""
    logger: QuillLogger = ctx.obj["logger"]

    try:
        config = SiteConfig.load(Path(content_dir))
        builder = SiteBuilder(config, include_drafts=True, logger=logger)
        documents = builder.loader.load_all()

        if not documents:
            click.echo(f"📭 No documents in {config.posts_path}")
            return

        for doc in documents:
            posted = doc.date.isoformat() if doc.date else "----------"
            flag = " [draft]" if doc.draft else ""
            click.echo(f"{posted}  {doc.identifier}  {doc.title}{flag}")

        click.echo(f"\nTotal: {len(documents)}")

    except Exception as e:
        handle_cli_error(ctx, e, "list", {"content_dir": content_dir})


@click.command()
@theme_option
@click.pass_context
def stylesheet(ctx: click.Context, theme: Optional[str]) -> None:
    """Print the compiled stylesheet for a theme."""
    try:
        click.echo(compile_stylesheet(load_theme(Path(theme) if theme else None)), nl=False)
    except Exception as e:
        handle_cli_error(ctx, e, "stylesheet", {"theme": theme})
