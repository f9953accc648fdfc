"""Projection settings: YAML config + env var overrides.

Priority: env var > YAML file > default.
Env vars use STRUCTPROPS_{SETTING_NAME} convention
(e.g. STRUCTPROPS_RESOLVE_REFERENCES=off).
YAML file default: ~/.structprops/config.yaml
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

_TRUTHY = {"1", "true", "on", "yes"}
_FALSY = {"0", "false", "off", "no"}
_DEFAULT_PATH = Path("~/.structprops/config.yaml").expanduser()


def _coerce(value: Any, current: Any) -> Any:
    """Coerce a YAML/env value to the type of the dataclass default.

    Returns None when a boolean setting gets a non-boolean string.
    """
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        text = str(value).lower()
        if text in _TRUTHY:
            return True
        if text in _FALSY:
            return False
        return None
    return str(value)


@dataclass
class ProjectionConfig:
    # Parse text values as URNs and resolve them into value entities.
    # Off: text values are emitted as plain strings only.
    resolve_references: bool = True
    # Registry name of the reference resolver (see projectors.registry)
    resolver: str = "urn"
    # Logging, applied by observability.setup_logging()
    log_level: str = "INFO"
    log_format: str = "json"  # "json" | "console"

    @classmethod
    def load(cls, path: Path | None = None) -> ProjectionConfig:
        """Load settings from YAML file, then override with env vars."""
        file_path = path or _DEFAULT_PATH
        file_values: dict[str, Any] = {}

        if file_path.exists():
            raw = yaml.safe_load(file_path.read_text()) or {}
            if isinstance(raw, dict):
                file_values = raw

        defaults = cls()
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            name = f.name
            current = getattr(defaults, name)
            env_key = f"STRUCTPROPS_{name.upper()}"

            if env_key in os.environ:
                value = _coerce(os.environ[env_key], current)
            elif name in file_values:
                value = _coerce(file_values[name], current)
            else:
                continue
            if value is not None:
                kwargs[name] = value

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Singleton
_config: ProjectionConfig | None = None


def get_config(path: Path | None = None) -> ProjectionConfig:
    """Get the cached ProjectionConfig instance."""
    global _config
    if _config is None:
        _config = ProjectionConfig.load(path)
    return _config


def reset_config() -> None:
    """Reset for testing."""
    global _config
    _config = None
