"""Shared helpers for revdeps subcommands: loading settings and the index."""

from __future__ import annotations

import sys

import click

from revdeps.config import Settings, load_settings
from revdeps.core.graph import GraphBuilder, LibraryIndex
from revdeps.exceptions import ConfigError, LibraryLoadError
from revdeps.library import load_packages

FORMAT_OPTION = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)


def load_context_settings(ctx: click.Context) -> Settings:
    """Load settings named by the group's ``--config`` option.

    Exits with code 2 on an invalid settings file.
    """
    config_path = (ctx.obj or {}).get("config_path")
    try:
        return load_settings(config_path)
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)


def load_index(path: str) -> LibraryIndex:
    """Load the library at *path* and build its index.

    Exits with code 2 if the snapshot cannot be loaded or is empty.
    """
    try:
        packages = load_packages(path)
    except LibraryLoadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    if not packages:
        click.echo("No packages found in the library.")
        sys.exit(2)

    return GraphBuilder().build_index(packages)
