"""Configuration: load xlbridge.yaml and environment overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from xlbridge.io.fileops import read_text_safe

CONFIG_FILENAME = "xlbridge.yaml"

_TRUTHY = {"1", "true", "yes", "on"}

# env var -> (field, parser)
_ENV_OVERRIDES = {
    "XLBRIDGE_STRICT": ("strict_contracts", lambda v: v.strip().lower() in _TRUTHY),
    "XLBRIDGE_EVENTS": ("emit_events", lambda v: v.strip().lower() in _TRUTHY),
    "XLBRIDGE_TRACE": ("trace", lambda v: v.strip().lower() in _TRUTHY),
    "XLBRIDGE_LOCK_TIMEOUT": ("lock_timeout", float),
}


class BridgeConfig(BaseModel):
    """Runtime settings for the boundary layer."""

    strict_contracts: bool = False
    emit_events: bool = False
    trace: bool = False
    lock_timeout: float = Field(default=0, ge=0)
    atomic_writes: bool = True
    default_compression_level: int = Field(default=6, ge=0, le=9)
    csv_encoding: str = "utf8"
    csv_delimiter: str = ","

    @classmethod
    def load(cls, path: str | Path) -> "BridgeConfig":
        """Load settings from a YAML file."""
        text = read_text_safe(path)
        data = yaml.safe_load(text) or {}
        return cls(**data)

    @classmethod
    def load_from_dir(cls, directory: str | Path) -> "BridgeConfig | None":
        """Try to load xlbridge.yaml from a directory. Returns None if not found."""
        path = Path(directory) / CONFIG_FILENAME
        if path.exists():
            return cls.load(path)
        return None

    def with_env(self, environ: dict[str, str] | None = None) -> "BridgeConfig":
        environ = os.environ if environ is None else environ
        updates: dict[str, Any] = {}
        for var, (field, parse) in _ENV_OVERRIDES.items():
            if var in environ:
                updates[field] = parse(environ[var])
        if not updates:
            return self
        return self.model_validate({**self.model_dump(), **updates})


_config: BridgeConfig | None = None


def get_config() -> BridgeConfig:
    """Process-wide settings, loaded lazily from the working directory."""
    global _config
    if _config is None:
        base = BridgeConfig.load_from_dir(Path.cwd()) or BridgeConfig()
        _config = base.with_env()
    return _config


def configure(**overrides: Any) -> BridgeConfig:
    """Replace selected settings for the rest of the process."""
    global _config
    current = get_config()
    _config = current.model_validate({**current.model_dump(), **overrides})
    return _config


def reset_config() -> None:
    global _config
    _config = None
