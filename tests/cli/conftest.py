"""Shared fixtures for CLI tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def clean_library(tmp_path: Path) -> Path:
    """A snapshot where every dependency resolves to the version asked for."""
    path = tmp_path / "clean.json"
    path.write_text(json.dumps([
        {"creator": "C", "packageName": "D", "version": "1"},
        {"creator": "C", "packageName": "D", "version": "2"},
        {"creator": "U", "packageName": "X", "version": "1",
         "dependencies": {"C.D.1": {}, "VaM.Core.latest": {}}},
    ]))
    return path


@pytest.fixture
def meta_directory(tmp_path: Path) -> Path:
    """A directory of per-package meta.json files."""
    root = tmp_path / "AddonPackages"
    for creator, name, version, deps in (
        ("C", "D", "1", {}),
        ("U", "Y", "1", {"C.D.latest": {}}),
    ):
        folder = root / f"{creator}.{name}.{version}"
        folder.mkdir(parents=True)
        (folder / "meta.json").write_text(json.dumps({
            "creator": creator, "packageName": name,
            "version": version, "dependencies": deps,
        }))
    return root


@pytest.fixture
def empty_library(tmp_path: Path) -> Path:
    """A snapshot file with no packages."""
    path = tmp_path / "empty.json"
    path.write_text("[]")
    return path
