"""revdeps exception hierarchy.

All public exceptions inherit from RevdepsError, giving callers a single
base class to catch when they want to handle any revdeps-specific failure
without swallowing unrelated errors.

The graph builder itself never raises: malformed metadata degrades to
missing edges. These exceptions belong to the surrounding tooling.
"""


class RevdepsError(Exception):
    """Base exception for all revdeps errors."""


class LibraryLoadError(RevdepsError):
    """Raised when a library snapshot cannot be read.

    Covers missing files, unsupported extensions, malformed JSON or YAML,
    and snapshots whose top-level structure is not a package list.
    """


class ConfigError(RevdepsError):
    """Raised when a settings file is unreadable or has invalid values."""


class UnknownPackageError(RevdepsError):
    """Raised when a requested package identifier is not installed."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Package {identifier!r} is not installed")
        self.identifier = identifier
