"""Resolution strategies for declared dependency strings.

A dependency string is resolved by the first strategy in the chain that
*applies* to it. The applicable strategy alone decides the outcome: it
returns a ``Match`` or ``None`` and no later strategy is consulted.

Default chain, in priority order:

1. ``ExactMatch`` -- the string is an installed canonical identifier.
2. ``LatestSuffixMatch`` -- the string ends with ``.latest``.
3. ``FuzzyBaseMatch`` -- everything else; searches for the longest known
   base identifier and reads an optional ``v``/``version`` number hint.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from revdeps.core.graph.identifiers import (
    LATEST_SUFFIX,
    candidate_bases,
    parse_version_hint,
)
from revdeps.core.graph.models import Match, MatchKind, VersionEntry

Identity = Mapping[str, Any]
VersionIndex = Mapping[str, Sequence[VersionEntry]]


class ResolutionStrategy(ABC):
    """Base class for one step of the resolution chain."""

    @abstractmethod
    def applies(self, dep_id: str, identity: Identity) -> bool:
        """Return True if this strategy owns the (lowercased) dependency."""

    @abstractmethod
    def resolve(
        self, dep_id: str, identity: Identity, versions: VersionIndex
    ) -> Match | None:
        """Resolve the dependency, or return None when nothing is installed."""


class ExactMatch(ResolutionStrategy):
    """Dependency names an installed ``creator.package.version`` exactly."""

    def applies(self, dep_id: str, identity: Identity) -> bool:
        return dep_id in identity

    def resolve(
        self, dep_id: str, identity: Identity, versions: VersionIndex
    ) -> Match | None:
        return Match(target=dep_id, kind=MatchKind.EXACT)


class LatestSuffixMatch(ResolutionStrategy):
    """``creator.package.latest`` -> highest installed numeric version."""

    def applies(self, dep_id: str, identity: Identity) -> bool:
        return dep_id.endswith(LATEST_SUFFIX)

    def resolve(
        self, dep_id: str, identity: Identity, versions: VersionIndex
    ) -> Match | None:
        entries = versions.get(dep_id[: -len(LATEST_SUFFIX)])
        if not entries:
            return None
        return Match(target=entries[0].identifier, kind=MatchKind.LATEST)


class FuzzyBaseMatch(ResolutionStrategy):
    """Longest known base identifier, honouring ``v1``/``version1`` hints.

    The whole string is tried as a base first (a dependency without any
    version segment), then each truncation at a dot from the right. The
    first base present in the version index wins. If the remainder after
    that base starts with a version hint naming an installed version, that
    version is the target; otherwise the family's highest version is.
    """

    def applies(self, dep_id: str, identity: Identity) -> bool:
        return True

    def resolve(
        self, dep_id: str, identity: Identity, versions: VersionIndex
    ) -> Match | None:
        for base, suffix in candidate_bases(dep_id):
            entries = versions.get(base)
            if not entries:
                continue
            requested = parse_version_hint(suffix)
            if requested is not None:
                for entry in entries:
                    if entry.version == requested:
                        return Match(target=entry.identifier, kind=MatchKind.VERSION_HINT)
            return Match(target=entries[0].identifier, kind=MatchKind.FALLBACK)
        return None


def default_strategies() -> tuple[ResolutionStrategy, ...]:
    """Return the standard exact -> latest -> fuzzy resolution chain."""
    return (ExactMatch(), LatestSuffixMatch(), FuzzyBaseMatch())


def resolve_dependency(
    dep_id: str,
    identity: Identity,
    versions: VersionIndex,
    strategies: Sequence[ResolutionStrategy] | None = None,
) -> Match | None:
    """Resolve one dependency string against the built indices.

    Args:
        dep_id: Declared dependency identifier (any case).
        identity: Canonical identifier index.
        versions: Version index, each entry sorted highest first.
        strategies: Resolution chain; defaults to ``default_strategies()``.

    Returns:
        The ``Match`` found by the first applicable strategy, or None.
    """
    dep_lower = dep_id.lower()
    if strategies is None:
        strategies = default_strategies()
    for strategy in strategies:
        if strategy.applies(dep_lower, identity):
            return strategy.resolve(dep_lower, identity, versions)
    return None
