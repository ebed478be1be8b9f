"""``revdeps check <path>`` -- Report missing and mismatched dependencies.

A dependency is *missing* when no installed package matches it and
*mismatched* when it only resolves by falling back to the latest
installed version of its family. Dependencies starting with a configured
system prefix (default ``vam.core``) are never reported.

Exit Codes:
    0 -- No missing dependencies (mismatches alone do not fail).
    1 -- At least one dependency is missing.
    2 -- Library or settings could not be loaded.
"""

from __future__ import annotations

import sys

import click

from revdeps.cli.common import FORMAT_OPTION, load_context_settings, load_index
from revdeps.core.analysis import check_dependencies, summarize


@click.command("check")
@click.argument("path", type=click.Path(exists=True))
@FORMAT_OPTION
@click.pass_context
def check_command(ctx: click.Context, path: str, output_format: str) -> None:
    """Check that every dependency declared in PATH resolves.

    Exit code 0 when nothing is missing, 1 otherwise.
    """
    from revdeps.cli.output import print_check_results, print_json, print_summary

    settings = load_context_settings(ctx)
    index = load_index(path)
    reports = check_dependencies(index, settings)
    summary = summarize(index, exclude_self=settings.exclude_self_edges)

    if output_format == "json":
        print_json({
            "packages": [report.as_dict() for report in reports],
            "duplicates": list(index.duplicates),
            "summary": summary.as_dict(),
        })
    else:
        print_check_results(reports)
        if index.duplicates:
            click.echo(f"Duplicate identifiers: {', '.join(sorted(set(index.duplicates)))}")
        print_summary(summary)

    sys.exit(1 if any(report.has_missing for report in reports) else 0)
