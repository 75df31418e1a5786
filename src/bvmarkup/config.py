#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for bvmarkup.

Component defaults can be set in a dedicated ``.bvmarkup.toml``,
``.bvmarkup.yaml``/``.yml`` or ``.bvmarkup.json`` file, or in a
``[tool.bvmarkup]`` table of ``pyproject.toml``:

.. code-block:: toml

    [tool.bvmarkup]
    modal-effect-class = "mb-slide"

    [tool.bvmarkup.popover]
    trigger = "click"
    placement = "bottom"

"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from bvmarkup.exceptions import FileError, ParsingError, ValidationError
from bvmarkup.options import ComponentOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".bvmarkup.toml", ".bvmarkup.yaml", ".bvmarkup.yml", ".bvmarkup.json"]


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.bvmarkup]`` table, or an empty dict if absent."""
    data = _load_toml_config(pyproject_path)
    config = data.get("tool", {}).get("bvmarkup", {})
    if not isinstance(config, dict):
        raise ParsingError(
            f"[tool.bvmarkup] section in {pyproject_path} must be a table, got {type(config).__name__}",
            parsing_stage="toml",
        )
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ParsingError(f"Invalid TOML in {config_path}: {e}", parsing_stage="toml", original_error=e) from e


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParsingError(f"Invalid YAML in {config_path}: {e}", parsing_stage="yaml", original_error=e) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParsingError(f"YAML config {config_path} must contain a mapping", parsing_stage="yaml")
    return data


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON in {config_path}: {e}", parsing_stage="json", original_error=e) from e
    if not isinstance(data, dict):
        raise ParsingError(f"JSON config {config_path} must contain an object", parsing_stage="json")
    return data


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest configuration file, walking up from ``start_dir``.

    In each directory the dedicated config files are checked first (in
    :data:`CONFIG_FILENAMES` order), then ``pyproject.toml`` if it has a
    ``[tool.bvmarkup]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

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
            except ParsingError:
                logger.debug(f"Ignoring unreadable {pyproject_path}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a configuration mapping from a JSON, TOML, YAML or pyproject.toml file.

    Raises
    ------
    FileError
        If the file does not exist or is not a regular file
    ParsingError
        If the file cannot be parsed or has an unsupported extension

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileError(f"Configuration file does not exist: {config_path}", file_path=str(config_path))
    if not config_path.is_file():
        raise FileError(f"Configuration path is not a file: {config_path}", file_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)
    elif ext == ".toml":
        return _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    elif ext == ".json":
        return _load_json_config(config_path)
    raise ParsingError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")


def load_options(config_path: Path | str | None = None, start_dir: Optional[Path] = None) -> ComponentOptions:
    """Build :class:`ComponentOptions` from a config file.

    Parameters
    ----------
    config_path : Path or str, optional
        Explicit config file; when omitted the nearest one is discovered
        from ``start_dir``
    start_dir : Path, optional
        Where discovery starts (defaults to the working directory)

    Returns
    -------
    ComponentOptions
        Options from the file, or defaults when no file is found

    Raises
    ------
    ValidationError
        If the file contains unknown keys or invalid values

    """
    if config_path is None:
        config_path = find_config_in_parents(start_dir)
        if config_path is None:
            return ComponentOptions()

    data = load_config_file(config_path)
    logger.debug(f"Loaded configuration from {config_path}")
    try:
        return ComponentOptions.from_dict(data)
    except ValidationError as e:
        raise ValidationError(
            f"{config_path}: {e.message}",
            parameter_name=e.parameter_name,
            parameter_value=e.parameter_value,
            original_error=e,
        ) from e
