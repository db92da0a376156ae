#!/usr/bin/env python3
"""
Quill CLI
---------

Command-line interface for building the site.

Commands:
    - build: Load, render and write the whole site
    - check: Load and render everything without writing
    - list: Show documents with dates and titles
    - stylesheet: Print the compiled theme CSS

Usage:
    quill build
    quill build path/to/blog -o public --clean
    quill check
    quill list
    quill stylesheet --theme theme.yaml
"""
from __future__ import annotations

import click
from pathlib import Path

from quill.core.paths import LOG_DIR
from quill.core.cli import setup_logger


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """Quill static blog builder"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "quill", verbose=verbose)


from .site import build, check, list_documents, stylesheet

cli.add_command(build)
cli.add_command(check)
cli.add_command(list_documents)
cli.add_command(stylesheet)


if __name__ == "__main__":
    cli(obj={})
