"""Settings for dependency reports.

Settings come from an optional YAML file (``--config`` /
``REVDEPS_CONFIG``). Every key is optional::

    system_prefixes:
      - vam.core
    exclude_self_edges: true

The resolver takes no settings; these only affect the analysis reports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from revdeps.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PREFIXES: tuple[str, ...] = ("vam.core",)


@dataclass(frozen=True)
class Settings:
    """Report settings.

    Attributes:
        system_prefixes: Lowercase dependency prefixes provided by the host
            application itself; such dependencies are never missing.
        exclude_self_edges: Ignore a package's dependency on itself when
            looking for orphans.
    """

    system_prefixes: tuple[str, ...] = DEFAULT_SYSTEM_PREFIXES
    exclude_self_edges: bool = True

    def is_system_dependency(self, dep_id: str) -> bool:
        """Return True if *dep_id* is provided by the host application."""
        lowered = dep_id.strip().lower()
        return any(lowered.startswith(prefix) for prefix in self.system_prefixes)


def _settings_from_mapping(data: dict[str, Any]) -> Settings:
    unknown = set(data) - {"system_prefixes", "exclude_self_edges"}
    if unknown:
        logger.warning("Ignoring unknown settings: %s", ", ".join(sorted(unknown)))

    prefixes = data.get("system_prefixes", list(DEFAULT_SYSTEM_PREFIXES))
    if isinstance(prefixes, str):
        prefixes = [prefixes]
    if not isinstance(prefixes, list) or not all(isinstance(p, str) for p in prefixes):
        raise ConfigError("'system_prefixes' must be a string or a list of strings")

    exclude_self = data.get("exclude_self_edges", True)
    if not isinstance(exclude_self, bool):
        raise ConfigError("'exclude_self_edges' must be true or false")

    return Settings(
        system_prefixes=tuple(p.strip().lower() for p in prefixes if p.strip()),
        exclude_self_edges=exclude_self,
    )


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from a YAML file.

    Args:
        path: Settings file, or None for defaults.

    Returns:
        The parsed ``Settings``.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or
            holds values of the wrong type.
    """
    if path is None:
        return Settings()

    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
        data = yaml.safe_load(raw)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read settings file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in settings file {config_path}: {exc}") from exc

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {config_path} must contain a mapping")
    return _settings_from_mapping(data)
