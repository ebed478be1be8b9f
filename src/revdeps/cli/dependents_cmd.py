"""``revdeps dependents <path> <package-id>`` -- Who depends on one package.

Exit Codes:
    0 -- Package found; its dependents (possibly none) are listed.
    1 -- PACKAGE_ID is not an installed canonical identifier.
    2 -- Library could not be loaded or holds no packages.
"""

from __future__ import annotations

import sys

import click

from revdeps.cli.common import FORMAT_OPTION, load_index
from revdeps.core.graph import normalize_id
from revdeps.exceptions import UnknownPackageError


@click.command("dependents")
@click.argument("path", type=click.Path(exists=True))
@click.argument("package_id")
@FORMAT_OPTION
def dependents_command(path: str, package_id: str, output_format: str) -> None:
    """List packages in PATH that depend on PACKAGE_ID.

    PACKAGE_ID is a creator.package.version identifier (any case). A
    ".latest" identifier selects the highest installed version.
    """
    from revdeps.cli.output import print_dependents, print_json

    index = load_index(path)
    identifier = normalize_id(package_id.strip())
    if identifier.endswith(".latest"):
        identifier = index.latest(identifier[: -len(".latest")]) or identifier

    if identifier not in index.reverse_deps:
        error = UnknownPackageError(package_id)
        if output_format == "json":
            print_json({"package": identifier, "error": str(error)})
        else:
            click.echo(f"Error: {error}", err=True)
        sys.exit(1)

    consumers = sorted(index.reverse_deps[identifier])
    if output_format == "json":
        print_json({"package": identifier, "dependents": consumers})
    else:
        print_dependents(identifier, consumers)
