"""Configuration: a pydantic model fed from ~/.handpick/config.toml and env.

    [handpick]
    restore_on_startup = true
    persistence_file_path = "~/.handpick/candidates.json"
    symbol_chars = "_-"

HANDPICK_FILE and HANDPICK_RESTORE override the file.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from handpick.exceptions import ConfigError

ENV_FILE = "HANDPICK_FILE"
ENV_RESTORE = "HANDPICK_RESTORE"


def config_dir() -> Path:
    """Per-user handpick directory."""
    return Path.home() / ".handpick"


def default_candidates_path() -> Path:
    return config_dir() / "candidates.json"


def default_config_path() -> Path:
    return config_dir() / "config.toml"


class HandpickConfig(BaseModel):
    """Process-wide settings, read once at start."""

    model_config = ConfigDict(extra="forbid")

    restore_on_startup: bool = True
    persistence_file_path: Path = Field(default_factory=default_candidates_path)
    # Characters besides letters and digits that belong to a completable word.
    symbol_chars: str = "_-"

    @field_validator("persistence_file_path")
    @classmethod
    def _expand_user(cls, v: Path) -> Path:
        return v.expanduser()


def load_config(path: Path | None = None) -> HandpickConfig:
    """Build config from the TOML file (if any) and environment overrides."""
    path = path or default_config_path()
    data: dict = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        text = ""
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}", cause=e)
    if text:
        try:
            table = tomllib.loads(text).get("handpick", {})
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"invalid TOML in {path}: {e}", cause=e)
        if not isinstance(table, dict):
            raise ConfigError(f"[handpick] in {path} must be a table")
        data = dict(table)

    if env_file := os.environ.get(ENV_FILE):
        data["persistence_file_path"] = env_file
    if env_restore := os.environ.get(ENV_RESTORE):
        data["restore_on_startup"] = env_restore

    try:
        return HandpickConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}", cause=e)
