"""Rich output formatting helpers for the revdeps CLI.

Provides consistent terminal output for the reverse-dependency table,
single-package dependents, orphan lists and dependency check reports.

Status Color Mapping:
    MISSING = bold red, MISMATCH = yellow, VALID = green, SYSTEM = dim
"""

from __future__ import annotations

import json
from typing import Any

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from revdeps.core.analysis import DependencyStatus, LibrarySummary, PackageReport
from revdeps.core.graph import LibraryIndex

_STATUS_STYLES: dict[DependencyStatus, str] = {
    DependencyStatus.MISSING: "bold red",
    DependencyStatus.MISMATCH: "yellow",
    DependencyStatus.VALID: "green",
    DependencyStatus.SYSTEM: "dim",
}

console = Console()
err_console = Console(stderr=True)


def status_style(status: DependencyStatus) -> str:
    """Return the Rich style string for a dependency status."""
    return _STATUS_STYLES.get(status, "white")


def print_graph(index: LibraryIndex) -> None:
    """Print every installed package with its dependent count and consumers.

    Args:
        index: A built library index.
    """
    reverse = index.reverse_deps
    if not reverse:
        console.print("[dim]No installed packages with a creator.[/dim]")
        return

    table = Table(title="Reverse Dependencies", show_header=True, header_style="bold")
    table.add_column("Package", style="bold")
    table.add_column("Used By", justify="right")
    table.add_column("Consumers", style="dim")

    for identifier in sorted(reverse):
        consumers = sorted(reverse[identifier])
        count = Text(str(len(consumers)), style="green" if consumers else "dim")
        table.add_row(identifier, count, ", ".join(consumers) or "-")

    console.print(table)


def print_dependents(identifier: str, consumers: list[str]) -> None:
    """Print the consumers of one package.

    Args:
        identifier: Canonical identifier of the package.
        consumers: Sorted consumer identifiers.
    """
    header = Text.assemble(
        ("Package: ", "bold"), (identifier, ""),
        ("  Used by: ", "bold"), (str(len(consumers)), "green" if consumers else "dim"),
    )
    console.print(Panel(header, title="Dependents"))
    if not consumers:
        console.print("[dim]No installed package depends on this package.[/dim]")
        return
    for consumer in consumers:
        console.print(f"  - {consumer}")


def print_orphans(orphans: list[str]) -> None:
    """Print packages that no other package depends on."""
    if not orphans:
        console.print("[green]Every installed package is used by another package.[/green]")
        return
    table = Table(title="Orphan Packages", show_header=True, header_style="bold")
    table.add_column("Package", style="bold")
    for identifier in orphans:
        table.add_row(identifier)
    console.print(table)
    console.print(f"[bold]{len(orphans)}[/bold] orphan package(s)")


def print_check_results(reports: list[PackageReport]) -> None:
    """Print missing and mismatched dependencies per consumer.

    Args:
        reports: Reports from ``check_dependencies``.
    """
    if not reports:
        console.print("[green]All dependencies resolved.[/green]")
        return

    table = Table(title="Dependency Check", show_header=True, header_style="bold")
    table.add_column("Package", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Dependency")
    table.add_column("Resolved To", style="dim")

    for report in reports:
        for dep in report.missing:
            status = Text("MISSING", style=status_style(DependencyStatus.MISSING))
            table.add_row(report.package, status, dep, "-")
        for dep, target in report.mismatched.items():
            status = Text("MISMATCH", style=status_style(DependencyStatus.MISMATCH))
            table.add_row(report.package, status, dep, target)

    console.print(table)


def print_summary(summary: LibrarySummary) -> None:
    """Print a one-line summary of a built index."""
    parts = [f"[bold]{summary.packages}[/bold] packages"]
    parts.append(f"{summary.edges} edges")
    if summary.unresolved > 0:
        parts.append(f"[red]{summary.unresolved} unresolved[/red]")
    if summary.duplicates > 0:
        parts.append(f"[yellow]{summary.duplicates} duplicate ids[/yellow]")
    parts.append(f"{summary.orphans} orphans")
    console.print(" | ".join(parts))


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout.

    Args:
        data: Any JSON-serializable data structure.
    """
    click.echo(json.dumps(data, indent=2, default=str))
