"""Library snapshot loading."""

from revdeps.library.loader import (
    load_directory,
    load_packages,
    load_snapshot,
    package_from_record,
)

__all__ = [
    "load_directory",
    "load_packages",
    "load_snapshot",
    "package_from_record",
]
