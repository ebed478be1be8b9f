"""``revdeps orphans <path>`` -- Packages no other package depends on.

Exit Codes:
    0 -- Orphan list displayed (possibly empty).
    2 -- Library could not be loaded or holds no packages.
"""

from __future__ import annotations

import click

from revdeps.cli.common import FORMAT_OPTION, load_context_settings, load_index
from revdeps.core.analysis import find_orphans


@click.command("orphans")
@click.argument("path", type=click.Path(exists=True))
@FORMAT_OPTION
@click.pass_context
def orphans_command(ctx: click.Context, path: str, output_format: str) -> None:
    """List installed packages in PATH that nothing depends on."""
    from revdeps.cli.output import print_json, print_orphans

    settings = load_context_settings(ctx)
    index = load_index(path)
    orphans = find_orphans(index, exclude_self=settings.exclude_self_edges)

    if output_format == "json":
        print_json({"orphans": orphans, "count": len(orphans)})
    else:
        print_orphans(orphans)
