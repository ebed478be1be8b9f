"""Data models for library dependency reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DependencyStatus(Enum):
    """Health of one declared dependency.

    - **VALID**: resolves to the version asked for (exact id, ``.latest``,
      or a ``v<N>``/``version<N>`` hint naming an installed version).
    - **MISMATCH**: only resolvable by falling back to the latest installed
      version of the family; likely works, worth a warning.
    - **MISSING**: nothing installed matches.
    - **SYSTEM**: provided by the host application, never installed.
    """

    VALID = "valid"
    MISMATCH = "mismatch"
    MISSING = "missing"
    SYSTEM = "system"


@dataclass
class PackageReport:
    """Dependency problems of one consumer package.

    Attributes:
        package: Canonical identifier of the consumer.
        missing: Declared dependencies that resolve to nothing.
        mismatched: Declared dependency -> installed identifier it fell back to.
    """

    package: str
    missing: list[str] = field(default_factory=list)
    mismatched: dict[str, str] = field(default_factory=dict)

    @property
    def has_missing(self) -> bool:
        return bool(self.missing)

    def as_dict(self) -> dict[str, object]:
        return {
            "package": self.package,
            "missing": list(self.missing),
            "mismatched": dict(self.mismatched),
        }


@dataclass(frozen=True)
class LibrarySummary:
    """Aggregate counts for one built library index."""

    packages: int
    edges: int
    unresolved: int
    duplicates: int
    orphans: int

    def as_dict(self) -> dict[str, int]:
        return {
            "packages": self.packages,
            "edges": self.edges,
            "unresolved": self.unresolved,
            "duplicates": self.duplicates,
            "orphans": self.orphans,
        }
