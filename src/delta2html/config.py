#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for delta2html.

A configuration file holds a format registry and, optionally, converter
options. JSON, YAML and TOML are supported, as is a ``[tool.delta2html]``
section in ``pyproject.toml``::

    # .delta2html.toml
    [options]
    block_tag = "p"

    [formats.bold]
    tag = "strong"

    [formats.bullet]
    category = "line"
    tag = "li"
    parentTag = "ul"

Callbacks (``mutate``) cannot be expressed in a file; formats that need
one must be registered from Python.
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

from delta2html.constants import CONFIG_ENV_VAR, CONFIG_SECTION
from delta2html.exceptions import ConfigurationError, InvalidFormatError
from delta2html.formats import FormatRegistry
from delta2html.options import ConverterOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".delta2html.toml", ".delta2html.yaml", ".delta2html.yml", ".delta2html.json"]


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.delta2html]`` section of a pyproject.toml file.

    Returns an empty dict when the section is absent.

    Raises
    ------
    ConfigurationError
        If the file cannot be parsed or the section is not a table

    """
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"[tool.{CONFIG_SECTION}] section in {pyproject_path} must be a table, got {type(section).__name__}",
            config_path=str(pyproject_path),
        )
    return section


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Each directory is checked for the dedicated config files (in
    ``CONFIG_FILENAMES`` order), then for a pyproject.toml that has a
    ``[tool.delta2html]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        The first configuration file found

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
            except (ConfigurationError, tomllib.TOMLDecodeError, OSError):
                logger.debug(f"Skipping unreadable {pyproject_path}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def resolve_config_path(explicit: Path | str | None = None, discover: bool = False) -> Optional[Path]:
    """Pick the configuration file to use.

    Priority: the explicit path, then the ``DELTA2HTML_CONFIG`` environment
    variable, then (when ``discover`` is set) a file found by
    :func:`find_config_in_parents`.
    """
    if explicit:
        return Path(explicit)

    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)

    if discover:
        return find_config_in_parents()
    return None


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
    ConfigurationError
        If the file cannot be read, parsed, or has an unsupported extension

    Examples
    --------
    >>> config = load_config_file(".delta2html.yaml")
    >>> config["formats"]["bold"]
    {'tag': 'b'}

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", config_path=str(config_path)
            )
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(
            f"Error reading config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Config file must contain a mapping at root level, got {type(config).__name__}",
            config_path=str(config_path),
        )
    logger.debug(f"Loaded configuration from {config_path}")
    return config


def registry_from_config(config: Dict[str, Any]) -> FormatRegistry:
    """Build a format registry from a loaded configuration.

    The ``formats`` table is used when present; otherwise every top-level
    key except ``options`` is treated as a format.

    Raises
    ------
    ConfigurationError
        If the formats table is not a mapping or a descriptor is invalid

    """
    if "formats" in config:
        formats = config["formats"]
    else:
        formats = {name: entry for name, entry in config.items() if name != "options"}

    if formats is None:
        return FormatRegistry()
    if not isinstance(formats, dict):
        raise ConfigurationError(f"'formats' must be a mapping, got {type(formats).__name__}")

    try:
        return FormatRegistry(formats)
    except InvalidFormatError as e:
        raise ConfigurationError(f"Invalid format in configuration: {e.message}", original_error=e) from e


def options_from_config(config: Dict[str, Any], base: Optional[ConverterOptions] = None) -> ConverterOptions:
    """Build converter options from the ``options`` table of a configuration.

    Parameters
    ----------
    config : dict
        Loaded configuration
    base : ConverterOptions, optional
        Options to update; defaults are used when omitted

    Raises
    ------
    ConfigurationError
        If the table has unknown keys or invalid values

    """
    base = base or ConverterOptions()
    table = config.get("options") or {}
    if not isinstance(table, dict):
        raise ConfigurationError(f"'options' must be a mapping, got {type(table).__name__}")

    unknown = set(table) - ConverterOptions.field_names()
    if unknown:
        raise ConfigurationError(f"Unknown option(s) in configuration: {', '.join(sorted(unknown))}")

    try:
        return base.create_updated(**table)
    except ValueError as e:
        raise ConfigurationError(f"Invalid option in configuration: {e}", original_error=e) from e


def load_format_registry(config_path: Path | str) -> FormatRegistry:
    """Load a format registry straight from a configuration file."""
    return registry_from_config(load_config_file(config_path))
