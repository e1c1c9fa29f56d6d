#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for jsbeautify.

This module finds js-beautify settings files, loads them from JSON, TOML or
YAML, and turns them into raw option maps.

Supported files, in discovery priority order:

- ``.jsbeautifyrc`` (JSON, the js-beautify command line convention)
- ``.jsbeautify.toml``
- ``.jsbeautify.yaml`` / ``.jsbeautify.yml``
- ``.jsbeautify.json``
- ``pyproject.toml`` with a ``[tool.jsbeautify]`` table

As with the js-beautify command line, a file may hold per-language sections
named ``js``, ``css`` and ``html`` whose keys override the top-level ones
for that formatter::

    {
        "indent_size": 4,
        "html": {"indent_size": 2, "wrap_attributes": "force"}
    }
"""

import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from jsbeautify.constants import CONFIG_FILENAMES, ENV_CONFIG_PATH, LANGUAGES, PYPROJECT_SECTION
from jsbeautify.exceptions import ConfigError, InvalidOptionValueError
from jsbeautify.options import BeautifyOptions

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.jsbeautify] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.jsbeautify], or empty dict if not found

    Raises
    ------
    ConfigError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get(PYPROJECT_SECTION)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up the directory tree from ``start_dir`` to the filesystem root,
    checking each directory for the dedicated config files first and then for
    a pyproject.toml with a [tool.jsbeautify] section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

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
            except ConfigError as e:
                # An unrelated broken pyproject.toml should not stop the search
                logger.debug("Ignoring %s during config discovery: %s", pyproject_path, e.message)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in standard locations.

    Searches the parent directories of ``start_dir`` (default: cwd), then the
    user's home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    return _find_home_config()


def _find_home_config() -> Optional[Path]:
    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path
    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    The format is chosen from the file name: ``.jsbeautifyrc`` and ``.json``
    are JSON, ``.toml`` is TOML (pyproject.toml contributes only its
    [tool.jsbeautify] table), ``.yaml``/``.yml`` are YAML.

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
    ConfigError
        If the file cannot be read, parsed, or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".jsbeautifyrc")
    >>> config.get("indent_size")
    2

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))
    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}", str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config = _load_pyproject_section(config_path)
    elif ext == ".toml":
        config = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        config = _load_yaml_config(config_path)
    elif ext == ".json" or filename == ".jsbeautifyrc":
        config = _load_json_config(config_path)
    else:
        raise ConfigError(
            f"Unsupported config file format: {config_path.name}. Use .jsbeautifyrc, .json, .toml, or .yaml",
            str(config_path),
        )

    logger.debug("Loaded configuration from %s", config_path)
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", str(config_path), e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading TOML config {config_path}: {e}", str(config_path), e) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", str(config_path), e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading JSON config {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(f"JSON config file must contain an object, got {type(config).__name__}", str(config_path))
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", str(config_path), e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading YAML config {config_path}: {e}", str(config_path), e) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"YAML config file must contain a mapping, got {type(config).__name__}", str(config_path))
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> base = {'html': {'indent_size': 2}, 'indent_size': 4}
    >>> override = {'html': {'wrap_attributes': 'force'}, 'indent_size': 3}
    >>> merge_configs(base, override)
    {'html': {'indent_size': 2, 'wrap_attributes': 'force'}, 'indent_size': 3}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path
    2. Config path from ``env_var_path``, or the JSBEAUTIFY_CONFIG environment
       variable when ``env_var_path`` is None
    3. Auto-discovered config file. A config found in the parent
       directories is laid over the one in the home directory, so user-wide
       settings fill in whatever the project file leaves out.

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    ConfigError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path is None:
        env_var_path = os.environ.get(ENV_CONFIG_PATH)
    if env_var_path:
        return load_config_file(env_var_path)

    project_path = find_config_in_parents()
    home_path = _find_home_config()
    if project_path is None:
        return load_config_file(home_path) if home_path else {}

    config = load_config_file(project_path)
    if home_path and home_path.resolve() != project_path.resolve():
        config = merge_configs(load_config_file(home_path), config)
    return config


def options_for_language(config: Dict[str, Any], language: str) -> BeautifyOptions:
    """Flatten a loaded configuration into the option map for one formatter.

    Top-level keys apply to every formatter; keys in the ``language``
    section override them. All language sections are removed from the
    result. Values that cannot be represented as option values are dropped.

    Parameters
    ----------
    config : dict
        Configuration as returned by :func:`load_config_file`
    language : {"js", "css", "html"}
        Formatter the options are for

    Returns
    -------
    BeautifyOptions
        Flat option map

    Raises
    ------
    InvalidOptionValueError
        If ``language`` is not a supported formatter
    ConfigError
        If the language section is present but is not a mapping

    """
    if language not in LANGUAGES:
        raise InvalidOptionValueError("language", language, LANGUAGES)

    flat = {key: value for key, value in config.items() if key not in LANGUAGES}
    section = config.get(language, {})
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{language}' must be a mapping, got {type(section).__name__}")
    flat.update(section)
    return BeautifyOptions.from_dict(flat)
