"""Load package metadata snapshots into ``Package`` records.

Two input shapes are supported:

- A single JSON or YAML file containing a list of package records, or a
  mapping with a ``packages`` list (the output of a library scan).
- A directory tree of ``meta.json``-style files, each holding one record
  or a list of records.

A record uses the keys of a package's ``meta.json``: ``creator`` (or
``creatorName``), ``packageName``, ``version`` and ``dependencies``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from revdeps.core.graph import Package
from revdeps.exceptions import LibraryLoadError

logger = logging.getLogger(__name__)

JSON_EXTENSIONS = (".json",)
YAML_EXTENSIONS = (".yaml", ".yml")
SNAPSHOT_EXTENSIONS = JSON_EXTENSIONS + YAML_EXTENSIONS


# --- File readers ---------------------------------------------------------


def _read_document(file_path: Path) -> Any:
    """Parse a JSON or YAML file.

    Raises:
        LibraryLoadError: On unreadable files, bad syntax, or an
            unsupported extension.
    """
    suffix = file_path.suffix.lower()
    if suffix not in SNAPSHOT_EXTENSIONS:
        raise LibraryLoadError(f"Unsupported snapshot format: {file_path.name}")
    try:
        raw = file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise LibraryLoadError(f"Cannot read {file_path}: {exc}") from exc
    try:
        if suffix in JSON_EXTENSIONS:
            return json.loads(raw)
        return yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise LibraryLoadError(f"Malformed snapshot {file_path}: {exc}") from exc


# --- Record conversion ----------------------------------------------------


def _as_dependencies(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return {str(key): meta for key, meta in value.items()}
    if isinstance(value, list):
        return {str(item): {} for item in value if isinstance(item, (str, int))}
    raise ValueError(f"dependencies must be a mapping or a list, got {type(value).__name__}")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    return str(value).strip()


def package_from_record(record: Any, default_path: str = "") -> Package:
    """Convert one metadata record into a ``Package``.

    Args:
        record: Mapping with ``meta.json`` keys.
        default_path: ``file_path`` used when the record has no ``filePath``.

    Raises:
        ValueError: If the record is not a mapping or a field has the wrong
            type.
    """
    if not isinstance(record, dict):
        raise ValueError(f"package record must be a mapping, got {type(record).__name__}")
    creator = _as_text(record.get("creator")) or _as_text(record.get("creatorName"))
    return Package(
        creator=creator,
        package_name=_as_text(record.get("packageName")),
        version=_as_text(record.get("version")),
        dependencies=_as_dependencies(record.get("dependencies")),
        file_path=_as_text(record.get("filePath")) or default_path,
    )


def _packages_from_records(records: Iterable[Any], source: Path) -> list[Package]:
    packages: list[Package] = []
    for position, record in enumerate(records):
        try:
            packages.append(package_from_record(record, default_path=str(source)))
        except ValueError as exc:
            logger.warning("Skipping record %d in %s: %s", position, source, exc)
    return packages


# --- Public loaders -------------------------------------------------------


def load_snapshot(file_path: Path) -> list[Package]:
    """Load a single snapshot file.

    Raises:
        LibraryLoadError: If the file is unreadable or its top level is not
            a record, a list of records, or a mapping with ``packages``.
    """
    data = _read_document(file_path)
    if isinstance(data, dict) and "packages" in data:
        data = data["packages"]
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise LibraryLoadError(
            f"{file_path} must contain a package record or a list of records"
        )
    return _packages_from_records(data, file_path)


def load_directory(directory: Path) -> list[Package]:
    """Load every snapshot file below *directory*, in sorted path order.

    Files that fail to parse are skipped with a warning so that one
    corrupt ``meta.json`` does not hide the rest of the library.
    """
    packages: list[Package] = []
    files = sorted(
        p for p in directory.rglob("*")
        if p.is_file() and p.suffix.lower() in SNAPSHOT_EXTENSIONS
    )
    for file_path in files:
        try:
            packages.extend(load_snapshot(file_path))
        except LibraryLoadError as exc:
            logger.warning("Skipping %s: %s", file_path, exc)
    logger.debug("Loaded %d packages from %d files in %s", len(packages), len(files), directory)
    return packages


def load_packages(path: str | Path) -> list[Package]:
    """Load packages from a snapshot file or a directory of metadata files.

    Args:
        path: Snapshot file or library directory.

    Returns:
        Packages in file order.

    Raises:
        LibraryLoadError: If *path* does not exist or a snapshot file
            cannot be parsed.
    """
    target = Path(path)
    if target.is_dir():
        return load_directory(target)
    if not target.is_file():
        raise LibraryLoadError(f"No such file or directory: {target}")
    return load_snapshot(target)
