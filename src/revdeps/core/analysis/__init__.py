"""Dependency reports built on the reverse-dependency graph.

All public names are re-exported here so that callers can use
``from revdeps.core.analysis import find_orphans``.
"""

from revdeps.core.analysis.models import (
    DependencyStatus,
    LibrarySummary,
    PackageReport,
)
from revdeps.core.analysis.reports import (
    check_dependencies,
    classify_dependency,
    find_orphans,
    summarize,
)

__all__ = [
    "DependencyStatus",
    "LibrarySummary",
    "PackageReport",
    "check_dependencies",
    "classify_dependency",
    "find_orphans",
    "summarize",
]
