"""GraphBuilder: two-pass construction of the reverse-dependency map.

Pass 1 indexes every package that has a creator by canonical identifier
and groups numeric versions by base identifier (highest first, stable on
ties). Pass 2 resolves each declared dependency of every package through
the strategy chain and records a reverse edge ``target <- consumer``.

All indices are local to one call. A builder holds no state between
builds, so the same instance can be reused after every library rescan and
shared between threads.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence

from revdeps.core.graph.identifiers import parse_numeric_version
from revdeps.core.graph.models import (
    LibraryIndex,
    Package,
    ResolvedEdge,
    ReverseDependencyMap,
    UnresolvedDependency,
    VersionEntry,
)
from revdeps.core.graph.strategies import (
    ResolutionStrategy,
    default_strategies,
    resolve_dependency,
)

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Builds reverse-dependency indices from a full package snapshot.

    Args:
        strategies: Resolution chain tried in order for every dependency.
            Defaults to exact -> ``.latest`` -> fuzzy base lookup.
    """

    def __init__(self, strategies: Sequence[ResolutionStrategy] | None = None) -> None:
        self._strategies = default_strategies() if strategies is None else tuple(strategies)

    def build(self, packages: Iterable[Package]) -> ReverseDependencyMap:
        """Build the reverse-dependency map for *packages*.

        Args:
            packages: Complete package collection of one or more libraries.

        Returns:
            Read-only map of canonical identifier -> consumer identifiers,
            with an entry for every package that has a creator.
        """
        return self.build_index(packages).reverse_deps

    def build_index(self, packages: Iterable[Package]) -> LibraryIndex:
        """Build all indices and the reverse-dependency map.

        Never raises on malformed metadata: unknown references are
        collected in ``unresolved`` and repeated identifiers in
        ``duplicates``.
        """
        package_list = list(packages)

        # Pass 1: identity and version indices.
        identity: dict[str, Package] = {}
        versions: dict[str, list[VersionEntry]] = defaultdict(list)
        reverse: dict[str, set[str]] = {}
        duplicates: list[str] = []

        for package in package_list:
            if not package.is_indexable:
                continue
            identifier = package.identifier
            if identifier in identity:
                duplicates.append(identifier)
            identity[identifier] = package
            reverse.setdefault(identifier, set())

            number = parse_numeric_version(package.version)
            if number is not None:
                versions[package.base_identifier].append(VersionEntry(identifier, number))

        # list.sort is stable, equal versions keep input order.
        for entries in versions.values():
            entries.sort(key=lambda entry: entry.version, reverse=True)

        # Pass 2: edge resolution.
        edges: list[ResolvedEdge] = []
        unresolved: list[UnresolvedDependency] = []

        for consumer in package_list:
            consumer_id = consumer.identifier
            for dep_id in consumer.dependencies or {}:
                match = resolve_dependency(dep_id, identity, versions, self._strategies)
                if match is None:
                    unresolved.append(UnresolvedDependency(consumer_id, dep_id))
                    continue
                reverse[match.target].add(consumer_id)
                edges.append(ResolvedEdge(consumer_id, dep_id, match.target, match.kind))

        logger.debug(
            "Built reverse-dependency graph: %d packages, %d edges, %d unresolved",
            len(identity), len(edges), len(unresolved),
        )
        return LibraryIndex(
            identity=identity,
            versions={base: tuple(entries) for base, entries in versions.items()},
            reverse_deps=ReverseDependencyMap(reverse),
            edges=tuple(edges),
            unresolved=tuple(unresolved),
            duplicates=tuple(duplicates),
        )


def build_reverse_dependencies(packages: Iterable[Package]) -> ReverseDependencyMap:
    """Convenience wrapper around ``GraphBuilder().build``."""
    return GraphBuilder().build(packages)
