"""revdeps: Reverse-dependency resolution for creator/package/version libraries."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
