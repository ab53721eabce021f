#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the events2md CLI.

This module finds configuration files, loads them from TOML, YAML or JSON,
and resolves which one applies.
"""

import argparse
import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Optional

import yaml

from events2md.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION

CONFIG_ENV_VAR = "EVENTS2MD_CONFIG"


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.events2md]`` section of a pyproject.toml file.

    Returns
    -------
    dict
        The section, or an empty dict if the file has none

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` to the filesystem root, checking each
    directory for the dedicated config files (in ``CONFIG_FILENAMES`` order)
    and then for a pyproject.toml with a ``[tool.events2md]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to the first config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # A broken pyproject.toml that is not ours should not stop discovery
                pass

        parent = current.parent
        if parent == current:
            return None
        current = parent


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file from the working directory upwards, then in the home directory."""
    config_in_parents = find_config_in_parents()
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def _load_toml(f: Any) -> Any:
    return tomllib.load(f)


def _load_yaml(f: Any) -> Any:
    return yaml.safe_load(f)


def _load_json(f: Any) -> Any:
    return json.load(f)


_LOADERS: Dict[str, tuple[str, Callable[[Any], Any]]] = {
    ".toml": ("rb", _load_toml),
    ".yaml": ("r", _load_yaml),
    ".yml": ("r", _load_yaml),
    ".json": ("r", _load_json),
}


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".events2md.toml")
    >>> print(config.get("unhandled_macro_mode"))
    drop

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    ext = config_path.suffix.lower()
    if ext not in _LOADERS:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")

    mode, loader = _LOADERS[ext]
    try:
        if mode == "rb":
            with open(config_path, "rb") as f:
                config = loader(f)
        else:
            with open(config_path, "r", encoding="utf-8") as f:
                config = loader(f)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise argparse.ArgumentTypeError(f"Invalid {ext[1:].upper()} in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (EVENTS2MD_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}
