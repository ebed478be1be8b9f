"""revdeps CLI -- Reverse dependencies for package libraries.

Entry point for the ``revdeps`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    graph       -- Every installed package with its dependents.
    dependents  -- Packages that depend on one package.
    orphans     -- Packages nothing depends on.
    check       -- Missing and version-mismatched dependencies.

Usage::

    revdeps graph ./library.json
    revdeps dependents ./AddonPackages C.D.2
    revdeps orphans ./library.json --format json
    revdeps --config revdeps.yaml check ./AddonPackages
"""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from revdeps import __version__
from revdeps.cli.check_cmd import check_command
from revdeps.cli.dependents_cmd import dependents_command
from revdeps.cli.graph_cmd import graph_command
from revdeps.cli.orphans_cmd import orphans_command
from revdeps.cli.output import err_console


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    envvar="REVDEPS_CONFIG",
    default=None,
    help="YAML settings file (system prefixes, self-edge handling).",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    envvar="REVDEPS_VERBOSE",
    help="Enable debug logging.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """revdeps: Reverse dependencies for creator/package/version libraries.

    Resolve exact, ".latest" and loosely versioned dependency references
    to installed packages and report who depends on what.
    """
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


# Register all subcommands
cli.add_command(graph_command)
cli.add_command(dependents_command)
cli.add_command(orphans_command)
cli.add_command(check_command)
