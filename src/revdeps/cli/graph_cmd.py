"""``revdeps graph <path>`` -- Show who depends on every installed package.

Loads the library snapshot, builds the reverse-dependency map and prints
one row per installed package with its dependent count and consumers.

Exit Codes:
    0 -- Graph built and displayed.
    2 -- Library could not be loaded or holds no packages.
"""

from __future__ import annotations

import logging

import click

from revdeps.cli.common import FORMAT_OPTION, load_context_settings, load_index
from revdeps.core.analysis import summarize

logger = logging.getLogger(__name__)


@click.command("graph")
@click.argument("path", type=click.Path(exists=True))
@FORMAT_OPTION
@click.pass_context
def graph_command(ctx: click.Context, path: str, output_format: str) -> None:
    """Show the reverse-dependency map of the library at PATH.

    PATH is a JSON/YAML snapshot file or a directory of meta.json files.
    """
    from revdeps.cli.output import print_graph, print_json, print_summary

    settings = load_context_settings(ctx)
    index = load_index(path)
    summary = summarize(index, exclude_self=settings.exclude_self_edges)

    for identifier in index.duplicates:
        logger.warning("Duplicate package identifier %s; keeping the last one", identifier)

    if output_format == "json":
        print_json({
            "reverse_dependencies": index.reverse_deps.to_dict(),
            "summary": summary.as_dict(),
        })
        return

    print_graph(index)
    print_summary(summary)
