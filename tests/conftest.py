"""Shared fixtures for revdeps tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from revdeps.core.graph import Package


def make_package(
    creator: str,
    name: str,
    version: str,
    deps: list[str] | None = None,
) -> Package:
    """Convenience factory for Package instances."""
    return Package(
        creator=creator,
        package_name=name,
        version=version,
        dependencies={dep: {} for dep in (deps or [])},
    )


@pytest.fixture
def pkg():
    """Expose ``make_package`` to tests as a fixture."""
    return make_package


@pytest.fixture
def reference_packages() -> list[Package]:
    """C.D at versions 1 and 2 plus one consumer per reference style."""
    return [
        make_package("C", "D", "1"),
        make_package("C", "D", "2"),
        make_package("User", "Exact", "1", ["C.D.1"]),
        make_package("User", "Fuzzy", "1", ["C.D.v1"]),
        make_package("User", "Prefix", "1", ["C.D.version1"]),
        make_package("User", "Latest", "1", ["C.D"]),
    ]


@pytest.fixture
def library_records() -> list[dict]:
    """Raw meta.json records for a small library with one missing dependency."""
    return [
        {"creator": "C", "packageName": "D", "version": "1"},
        {"creator": "C", "packageName": "D", "version": "2"},
        {
            "creator": "User",
            "packageName": "Scene",
            "version": "3",
            "dependencies": {
                "C.D.latest": {"licenseType": "CC BY"},
                "C.D.v7": {},
                "Ghost.Pack.1": {},
                "VaM.Core.1": {},
            },
        },
        {
            "creator": "User",
            "packageName": "Look",
            "version": "1",
            "dependencies": {"C.D.1": {}},
        },
    ]


@pytest.fixture
def snapshot_file(tmp_path: Path, library_records: list[dict]) -> Path:
    """Write ``library_records`` to a JSON snapshot file."""
    path = tmp_path / "library.json"
    path.write_text(json.dumps({"packages": library_records}))
    return path
