#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for consistent CLI interfaces.

Usage:
    from quill.core.cli_options import content_dir_argument, theme_option

    @cli.command()
    @content_dir_argument
    @theme_option
    def my_command(content_dir, theme):
        pass
"""
import click


# ═══════════════════════════════════════════════════════════════════════════
# PATH OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

content_dir_argument = click.argument(
    "content_dir",
    type=click.Path(exists=True, file_okay=False),
    default=".",
)

output_option = click.option(
    "-o", "--output",
    type=click.Path(file_okay=False),
    default=None,
    help="Output directory (default: output_dir from quill.yaml, or _site)"
)

theme_option = click.option(
    "--theme",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Theme YAML file (default: theme from quill.yaml, or bundled theme)"
)


# ═══════════════════════════════════════════════════════════════════════════
# BUILD OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

clean_option = click.option(
    "--clean",
    is_flag=True,
    help="Remove existing output before building"
)

drafts_option = click.option(
    "--drafts",
    is_flag=True,
    help="Include documents marked draft: true"
)
