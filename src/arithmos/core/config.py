"""
Calculator settings.

Settings are read from the first of:
- an explicit config file passed on the command line
- ``arithmos.toml`` in the working directory (``[arithmos]`` table or top level)
- ``pyproject.toml`` in the working directory (``[tool.arithmos]`` table)

``ARITHMOS_DEBUG=1`` in the environment turns on debug mode. Command-line
flags are applied on top by the CLI.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from arithmos.core.errors import make_config_error

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "arithmos.toml"
DEBUG_ENV_VAR = "ARITHMOS_DEBUG"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CalculatorSettings(BaseModel):
    """Settings for the REPL driver."""

    debug: bool = Field(default=False, description="Print tokens and AST for every line")
    prompt: str = Field(default="> ", description="Prompt shown before each line")
    exit_command: str = Field(default="exit", min_length=1, description="Line that ends the REPL")
    log_level: str = Field(default="WARNING", description="Root logger level")
    banner: bool = Field(default=True, description="Print the welcome lines on start")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def find_config_file(cwd: Path | None = None) -> Path | None:
    """Locate the settings file for ``cwd`` (default: current directory)."""
    root = cwd if cwd is not None else Path.cwd()
    candidate = root / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    pyproject = root / "pyproject.toml"
    if pyproject.is_file():
        return pyproject
    return None


def _extract_table(path: Path, data: dict[str, Any]) -> dict[str, Any]:
    if path.name == "pyproject.toml":
        table: Any = data.get("tool", {}).get("arithmos", {})
    else:
        table = data.get("arithmos", data)
    if not isinstance(table, dict):
        raise make_config_error("Settings must be a TOML table", path, key="arithmos")
    return table


def load_settings(path: Path | None = None, cwd: Path | None = None) -> CalculatorSettings:
    """Load settings from a file and the environment.

    Args:
        path: Explicit config file; it must exist.
        cwd: Directory searched when ``path`` is not given.

    Returns:
        Validated settings (defaults when no file is found).

    Raises:
        ConfigError: If the file is missing, malformed, or holds invalid values.
    """
    if path is not None and not path.is_file():
        raise make_config_error("Config file not found", path)

    config_path = path if path is not None else find_config_file(cwd)
    values: dict[str, Any] = {}
    if config_path is not None:
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise make_config_error(f"Invalid TOML: {e}", config_path) from e
        values.update(_extract_table(config_path, data))
        logger.debug("Loaded settings from %s", config_path)

    env_debug = os.environ.get(DEBUG_ENV_VAR)
    if env_debug is not None:
        values["debug"] = env_debug.strip().lower() in ("1", "true", "yes", "on")

    try:
        return CalculatorSettings(**values)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"]) or None
        raise make_config_error(first["msg"], config_path or Path(CONFIG_FILENAME), key) from e
