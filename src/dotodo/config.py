"""Configuration defaults and environment lookup for dotodo."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotodo.errors import ConfigError

HOME_ENV = "HOME"
DATA_FILE_NAME = ".todo"


def resolve_storage_path(env: Mapping[str, str] | None = None) -> Path:
    """Return ``$HOME/.todo``. Raises ConfigError when HOME is unset or empty."""
    env = os.environ if env is None else env
    home = env.get(HOME_ENV, "").strip()
    if not home:
        raise ConfigError(f"{HOME_ENV} is not set; cannot locate the {DATA_FILE_NAME} file")
    return Path(home) / DATA_FILE_NAME


@dataclass
class Config:
    """Runtime configuration."""

    storage_path: Path
    verbose: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None, *, verbose: bool = False) -> Config:
        return cls(storage_path=resolve_storage_path(env), verbose=verbose)
