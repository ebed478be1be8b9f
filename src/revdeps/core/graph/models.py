"""Data models for the reverse-dependency graph.

Defines the input record (``Package``), the intermediate index entries
(``VersionEntry``), the per-dependency resolution outcome (``Match``,
``ResolvedEdge``, ``UnresolvedDependency``) and the two build outputs
(``ReverseDependencyMap`` and ``LibraryIndex``).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from revdeps.core.graph.identifiers import base_id, canonical_id, normalize_id


# ---------------------------------------------------------------------------
# Package: one installed library entry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Package:
    """Metadata of one installed package, as produced by a library scan.

    Only ``dependencies`` keys are read by the resolver; values carry
    per-dependency metadata (licence, URL, nested dependencies) and are
    ignored.

    Attributes:
        creator: Package author. Packages without a creator are never
            resolution targets but still act as consumers.
        package_name: Package name within the creator's namespace.
        version: Version string, usually a plain integer.
        dependencies: Mapping of declared dependency identifier to metadata.
        file_path: Location of the package in the library, if known.
    """

    creator: str
    package_name: str
    version: str
    dependencies: Mapping[str, Any] = field(default_factory=dict)
    file_path: str = ""

    @property
    def identifier(self) -> str:
        """Canonical ``creator.packagename.version`` identifier."""
        return canonical_id(self.creator, self.package_name, self.version)

    @property
    def base_identifier(self) -> str:
        """Base ``creator.packagename`` identifier."""
        return base_id(self.creator, self.package_name)

    @property
    def is_indexable(self) -> bool:
        """True when the package can be the target of a dependency edge."""
        return bool(self.creator)


@dataclass(frozen=True)
class VersionEntry:
    """One numeric version of a package family in the version index."""

    identifier: str
    version: int


# ---------------------------------------------------------------------------
# Resolution outcome
# ---------------------------------------------------------------------------


class MatchKind(Enum):
    """How a dependency string was resolved to an installed package."""

    EXACT = "exact"
    LATEST = "latest"
    VERSION_HINT = "version_hint"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Match:
    """A successful resolution: the target identifier and how it was found."""

    target: str
    kind: MatchKind


@dataclass(frozen=True)
class ResolvedEdge:
    """A reverse edge ``target <- consumer`` produced by one dependency.

    Attributes:
        consumer: Canonical identifier of the declaring package.
        dependency: Dependency string as declared (original case).
        target: Canonical identifier the dependency resolved to.
        kind: Strategy that produced the match.
    """

    consumer: str
    dependency: str
    target: str
    kind: MatchKind


@dataclass(frozen=True)
class UnresolvedDependency:
    """A declared dependency that matched no installed package."""

    consumer: str
    dependency: str


# ---------------------------------------------------------------------------
# ReverseDependencyMap: the artifact consumed by callers
# ---------------------------------------------------------------------------


class ReverseDependencyMap(Mapping[str, frozenset[str]]):
    """Read-only mapping of canonical identifier to consumer identifiers.

    The mapping is total over the packages that were indexed: every
    installed package has an entry, possibly an empty set.
    """

    def __init__(self, edges: Mapping[str, set[str] | frozenset[str]]) -> None:
        self._edges: dict[str, frozenset[str]] = {
            key: frozenset(consumers) for key, consumers in edges.items()
        }

    def __getitem__(self, identifier: str) -> frozenset[str]:
        return self._edges[identifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"ReverseDependencyMap({len(self._edges)} packages)"

    def dependents(self, identifier: str) -> frozenset[str]:
        """Return consumers of *identifier* (case-insensitive).

        Unknown identifiers yield an empty set.
        """
        return self._edges.get(normalize_id(identifier), frozenset())

    def dependent_count(self, identifier: str) -> int:
        """Return the number of packages depending on *identifier*."""
        return len(self.dependents(identifier))

    def to_dict(self) -> dict[str, list[str]]:
        """Return a JSON-serializable copy with sorted keys and consumers."""
        return {key: sorted(self._edges[key]) for key in sorted(self._edges)}


# ---------------------------------------------------------------------------
# LibraryIndex: full result of one build
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LibraryIndex:
    """Everything produced by one ``GraphBuilder.build_index`` call.

    Attributes:
        identity: Canonical identifier -> package (last duplicate wins).
        versions: Base identifier -> numeric versions, highest first.
        reverse_deps: Total reverse-dependency map.
        edges: Every resolved edge, in input order.
        unresolved: Declared dependencies that resolved to nothing.
        duplicates: Canonical identifiers seen more than once in the input.
    """

    identity: Mapping[str, Package]
    versions: Mapping[str, tuple[VersionEntry, ...]]
    reverse_deps: ReverseDependencyMap
    edges: tuple[ResolvedEdge, ...] = ()
    unresolved: tuple[UnresolvedDependency, ...] = ()
    duplicates: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "identity", MappingProxyType(dict(self.identity)))
        object.__setattr__(self, "versions", MappingProxyType(dict(self.versions)))

    def latest(self, base_identifier: str) -> str | None:
        """Return the highest installed version of a family, if any."""
        entries = self.versions.get(normalize_id(base_identifier), ())
        return entries[0].identifier if entries else None
