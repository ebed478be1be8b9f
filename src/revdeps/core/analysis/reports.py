"""Library reports derived from a built ``LibraryIndex``.

All functions are pure and read only the index they are given:

- ``find_orphans`` -- installed packages nobody depends on.
- ``classify_dependency`` -- VALID / MISMATCH / MISSING / SYSTEM for one
  dependency string.
- ``check_dependencies`` -- per-consumer missing and mismatched lists.
- ``summarize`` -- aggregate counts (packages, edges, unresolved, ...).
"""

from __future__ import annotations

from revdeps.config import Settings
from revdeps.core.analysis.models import (
    DependencyStatus,
    LibrarySummary,
    PackageReport,
)
from revdeps.core.graph import LibraryIndex, MatchKind, resolve_dependency

_VALID_KINDS = frozenset({MatchKind.EXACT, MatchKind.LATEST, MatchKind.VERSION_HINT})


def find_orphans(index: LibraryIndex, exclude_self: bool = True) -> list[str]:
    """Return identifiers of installed packages with no dependents.

    Args:
        index: A built library index.
        exclude_self: Ignore a package listing itself as a dependency.

    Returns:
        Sorted canonical identifiers.
    """
    orphans: list[str] = []
    for identifier, consumers in index.reverse_deps.items():
        if exclude_self:
            consumers = consumers - {identifier}
        if not consumers:
            orphans.append(identifier)
    return sorted(orphans)


def classify_dependency(
    dep_id: str, index: LibraryIndex, settings: Settings | None = None
) -> DependencyStatus:
    """Classify how well one dependency string is satisfied.

    Args:
        dep_id: Declared dependency identifier.
        index: A built library index.
        settings: Report settings (system prefixes); defaults apply if None.

    Returns:
        The ``DependencyStatus`` of the dependency.
    """
    settings = settings or Settings()
    if not dep_id.strip():
        return DependencyStatus.MISSING
    if settings.is_system_dependency(dep_id):
        return DependencyStatus.SYSTEM

    match = resolve_dependency(dep_id, index.identity, index.versions)
    if match is None:
        return DependencyStatus.MISSING
    if match.kind in _VALID_KINDS:
        return DependencyStatus.VALID
    return DependencyStatus.MISMATCH


def check_dependencies(
    index: LibraryIndex, settings: Settings | None = None
) -> list[PackageReport]:
    """Collect missing and mismatched dependencies per consumer.

    Args:
        index: A built library index.
        settings: Report settings; system dependencies are never reported.

    Returns:
        Reports for consumers with at least one problem, sorted by
        consumer identifier.
    """
    settings = settings or Settings()
    reports: dict[str, PackageReport] = {}

    for item in index.unresolved:
        if settings.is_system_dependency(item.dependency):
            continue
        report = reports.setdefault(item.consumer, PackageReport(item.consumer))
        report.missing.append(item.dependency)

    for edge in index.edges:
        if edge.kind is not MatchKind.FALLBACK:
            continue
        if settings.is_system_dependency(edge.dependency):
            continue
        report = reports.setdefault(edge.consumer, PackageReport(edge.consumer))
        report.mismatched[edge.dependency] = edge.target

    return [reports[key] for key in sorted(reports)]


def summarize(index: LibraryIndex, exclude_self: bool = True) -> LibrarySummary:
    """Return aggregate counts for *index*."""
    return LibrarySummary(
        packages=len(index.identity),
        edges=len(index.edges),
        unresolved=len(index.unresolved),
        duplicates=len(index.duplicates),
        orphans=len(find_orphans(index, exclude_self=exclude_self)),
    )
