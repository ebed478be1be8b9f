"""Identifier helpers for the reverse-dependency graph.

Every package is addressed by two lowercase strings:

- **Canonical identifier** ``creator.packagename.version`` -- one installed
  package.
- **Base identifier** ``creator.packagename`` -- a package family across
  all of its installed versions.

Version ordering only considers versions that are plain non-negative
integers. Anything else (``1.0``, ``beta``, empty) stays addressable by exact
identifier but never takes part in "latest" or fuzzy resolution.
"""

from __future__ import annotations

import re

LATEST_SUFFIX = ".latest"

# "v1", "version12", "3", "V2-final" -> the leading digit run is the version.
_VERSION_HINT_RE = re.compile(r"^(?:version|v)?(\d+)", re.IGNORECASE)
_NUMERIC_VERSION_RE = re.compile(r"^\d+$")


def normalize_id(identifier: str) -> str:
    """Normalize an identifier for comparison (lowercase only).

    Dots are the only structure; underscores, dashes and spaces are kept.
    """
    return identifier.lower()


def canonical_id(creator: str, package_name: str, version: str) -> str:
    """Return the lowercase ``creator.packageName.version`` identifier."""
    return normalize_id(f"{creator}.{package_name}.{version}")


def base_id(creator: str, package_name: str) -> str:
    """Return the lowercase ``creator.packageName`` identifier."""
    return normalize_id(f"{creator}.{package_name}")


def parse_numeric_version(version: str) -> int | None:
    """Parse a version string as a non-negative integer.

    Numeric prefixes such as ``"2a"`` or ``"1.0"`` are rejected rather than
    read as 2 or 1.

    Args:
        version: Raw version string from package metadata.

    Returns:
        The integer value, or None when the string is not made of digits
        only (surrounding whitespace is ignored).
    """
    stripped = version.strip()
    if not _NUMERIC_VERSION_RE.match(stripped):
        return None
    return int(stripped)


def parse_version_hint(suffix: str) -> int | None:
    """Extract the requested version number from a loose dependency suffix.

    Accepts an optional ``v`` or ``version`` prefix followed by digits.
    Characters after the digit run are ignored.

    Examples:
        ``"v1"`` -> 1, ``"version12"`` -> 12, ``"3.beta"`` -> 3,
        ``""`` -> None, ``"beta"`` -> None.
    """
    match = _VERSION_HINT_RE.match(suffix)
    if match is None:
        return None
    return int(match.group(1))


def candidate_bases(dep_id: str) -> list[tuple[str, str]]:
    """Enumerate (base, suffix) splits of a dependency string.

    The first candidate is the whole string with an empty suffix, followed
    by every truncation at a dot, longest first::

        candidate_bases("a.b.v2") == [("a.b.v2", ""), ("a.b", "v2"), ("a", "b.v2")]

    Args:
        dep_id: Lowercased dependency identifier.

    Returns:
        List of (candidate base, suffix after the separating dot).
    """
    candidates = [(dep_id, "")]
    cut = dep_id.rfind(".")
    while cut != -1:
        candidates.append((dep_id[:cut], dep_id[cut + 1:]))
        cut = dep_id.rfind(".", 0, cut)
    return candidates
