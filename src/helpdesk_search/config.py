"""Application configuration.

The config file tells the CLI where the three data files live:

    data_files:
      organizations: data/organizations.json
      users: data/users.json
      tickets: data/tickets.json

It is read with ``yaml.safe_load``, so a JSON config works as well. Relative
paths are resolved against the directory holding the config file.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

DEFAULT_CONFIG_PATH = Path("config/search.yaml")

DATA_FILE_KEYS = ("organizations", "users", "tickets")


@dataclass(frozen=True)
class AppConfig:
    """Locations of the organization, user and ticket data files."""

    organizations: Path
    users: Path
    tickets: Path

    def with_overrides(
        self,
        *,
        organizations: Optional[Union[str, Path]] = None,
        users: Optional[Union[str, Path]] = None,
        tickets: Optional[Union[str, Path]] = None,
    ) -> "AppConfig":
        """Return a copy with any given paths replaced."""
        changes: Dict[str, Path] = {}
        if organizations is not None:
            changes["organizations"] = Path(organizations)
        if users is not None:
            changes["users"] = Path(users)
        if tickets is not None:
            changes["tickets"] = Path(tickets)
        return replace(self, **changes)


def _resolve(base_dir: Path, value: Any, key: str) -> Path:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"data_files.{key} must be a non-empty path string")
    path = Path(value).expanduser()
    return path if path.is_absolute() else base_dir / path


def load_config(config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load the application config.

    Args:
        config_path: YAML (or JSON) config file.

    Returns:
        AppConfig with absolute or config-relative data file paths.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the file cannot be parsed or a data file entry is missing.

    Examples:
        >>> cfg = load_config(Path("config/search.yaml"))
        >>> cfg.organizations.name
        'organizations.json'
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    data_files = data.get("data_files")
    if not isinstance(data_files, dict):
        raise ValueError(f"Config file {config_path} is missing the 'data_files' mapping")

    base_dir = config_path.parent
    paths = {}
    for key in DATA_FILE_KEYS:
        if key not in data_files:
            raise ValueError(f"Config file {config_path} is missing data_files.{key}")
        paths[key] = _resolve(base_dir, data_files[key], key)
    return AppConfig(**paths)


__all__ = ["AppConfig", "DEFAULT_CONFIG_PATH", "load_config"]
