#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/cli/config.py
"""Configuration file discovery and loading for the orgast CLI.

Configuration files hold option values keyed by option field name, either
flat or split into ``[parser]`` and ``[serializer]`` tables::

    # .orgast.toml
    strict = true

    [parser]
    todo_keywords = ["TODO", "STARTED", "DONE"]

    [serializer]
    trailing_newline = false

Values from the file are applied first; explicit command-line flags
override them.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from orgast.constants import CONFIG_FILENAMES
from orgast.options.org import OrgParserOptions, OrgSerializerOptions

PYPROJECT_FILENAME = "pyproject.toml"


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.orgast]`` table of a pyproject.toml file.

    Returns
    -------
    dict
        The table, or an empty dict when the file has none

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("orgast", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.orgast] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` or one of its parents.

    Each directory is checked for the dedicated files (``.orgast.toml``,
    ``.orgast.yaml``, ``.orgast.yml``, ``.orgast.json``) and then for a
    ``pyproject.toml`` that has a ``[tool.orgast]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Directory to start from, defaults to the current working directory

    Returns
    -------
    Path or None
        First configuration file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Unreadable pyproject files do not stop the search
                pass

        parent = current.parent
        if parent == current:
            return None
        current = parent


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in the working tree, then in the home directory."""
    found = find_config_in_parents(start_dir)
    if found is not None:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path
    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name: ``pyproject.toml`` yields its
    ``[tool.orgast]`` table, other files are read by extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    argparse.ArgumentTypeError
        If the file does not exist, cannot be parsed, or has an unsupported
        extension

    Examples
    --------
    >>> config = load_config_file(".orgast.toml")
    >>> config.get("strict")
    True

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == PYPROJECT_FILENAME:
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            if config is None:
                config = {}
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def _normalize_value(name: str, value: Any) -> Any:
    if name in ("todo_keywords", "done_keywords") and isinstance(value, str):
        return tuple(value.split())
    return value


def _select(config: Dict[str, Any], section: str, options_class: type) -> Dict[str, Any]:
    names = {f.name for f in fields(options_class)}
    flat = {key.replace("-", "_"): value for key, value in config.items() if not isinstance(value, dict)}
    nested = config.get(section, {})
    if not isinstance(nested, dict):
        raise argparse.ArgumentTypeError(f"[{section}] section must be a table, got {type(nested).__name__}")

    selected: Dict[str, Any] = {}
    for source in (flat, {key.replace("-", "_"): value for key, value in nested.items()}):
        for key, value in source.items():
            if key in names:
                selected[key] = _normalize_value(key, value)
    return selected


def options_from_config(config: Dict[str, Any]) -> tuple[OrgParserOptions, OrgSerializerOptions]:
    """Build parser and serializer options from a configuration dictionary.

    Unknown keys are ignored; values in the ``parser`` and ``serializer``
    tables take precedence over flat keys.

    Raises
    ------
    argparse.ArgumentTypeError
        If a value is rejected by option validation

    """
    try:
        parser_options = OrgParserOptions(**_select(config, "parser", OrgParserOptions))
        serializer_options = OrgSerializerOptions(**_select(config, "serializer", OrgSerializerOptions))
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid configuration value: {e}") from e
    return parser_options, serializer_options
