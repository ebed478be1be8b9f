"""Reverse-dependency resolution for package libraries.

Given every installed package of a library, answers "which installed
packages depend on package X?" by resolving each declared dependency
string to a concrete installed version.

Submodules:
    identifiers -- canonical/base identifiers, version and hint parsing
    models      -- Package, ReverseDependencyMap, LibraryIndex and friends
    strategies  -- exact / latest-suffix / fuzzy resolution chain
    builder     -- GraphBuilder (two-pass index and edge construction)
"""

from revdeps.core.graph.builder import GraphBuilder, build_reverse_dependencies
from revdeps.core.graph.identifiers import (
    base_id,
    canonical_id,
    normalize_id,
    parse_numeric_version,
    parse_version_hint,
)
from revdeps.core.graph.models import (
    LibraryIndex,
    Match,
    MatchKind,
    Package,
    ResolvedEdge,
    ReverseDependencyMap,
    UnresolvedDependency,
    VersionEntry,
)
from revdeps.core.graph.strategies import (
    ExactMatch,
    FuzzyBaseMatch,
    LatestSuffixMatch,
    ResolutionStrategy,
    default_strategies,
    resolve_dependency,
)

__all__ = [
    "ExactMatch",
    "FuzzyBaseMatch",
    "GraphBuilder",
    "LatestSuffixMatch",
    "LibraryIndex",
    "Match",
    "MatchKind",
    "Package",
    "ResolutionStrategy",
    "ResolvedEdge",
    "ReverseDependencyMap",
    "UnresolvedDependency",
    "VersionEntry",
    "base_id",
    "build_reverse_dependencies",
    "canonical_id",
    "default_strategies",
    "normalize_id",
    "parse_numeric_version",
    "parse_version_hint",
    "resolve_dependency",
]
