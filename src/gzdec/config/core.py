"""Core config state management and persistence helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from gzdec.errors import ConfigError
from gzdec.home import load_json, resolve_config_path, save_json
from gzdec.models import DecoderConfig

_CONFIG: DecoderConfig | None = None
_CONFIG_PATH: Path | None = None


def reset() -> None:
    """Reset cached config (primarily for tests)."""

    global _CONFIG, _CONFIG_PATH
    _CONFIG = None
    _CONFIG_PATH = None


def config_path() -> Path | None:
    """Return the path of the active config, if one was loaded from disk."""

    return _CONFIG_PATH


def _store(config_obj: DecoderConfig, path: Path | None) -> DecoderConfig:
    global _CONFIG, _CONFIG_PATH
    _CONFIG = config_obj
    _CONFIG_PATH = path
    return config_obj


def load(path: Path) -> DecoderConfig:
    """Read and validate a config file without caching it."""

    try:
        data = load_json(path)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    try:
        return DecoderConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e


def use(path: Path | str | None = None) -> DecoderConfig:
    """Load config from ``path`` (or fallback locations) and cache it."""

    target: Optional[Path]
    if path is None:
        target = None
    elif isinstance(path, Path):
        target = path
    else:
        target = Path(path)

    resolved = resolve_config_path(target)
    if resolved is None:
        return _store(DecoderConfig(), None)
    return _store(load(resolved), resolved)


def ensure(path: Path | str | None = None) -> DecoderConfig:
    """Ensure a config is loaded, optionally overriding the path."""

    if path is not None:
        return use(path)
    if _CONFIG is None:
        return use(None)
    return _CONFIG


def require() -> DecoderConfig:
    """Return the cached config, loading it if necessary."""

    return ensure(None)


def persist(config_obj: DecoderConfig, path: Path | str | None = None) -> DecoderConfig:
    """Write ``config_obj`` to ``path`` (or the active config path) and cache it."""

    target = Path(path) if path is not None else config_path()
    if target is None:
        raise ConfigError("Config path not set; call use() or pass a path")

    validated = DecoderConfig.model_validate(config_obj.model_dump())
    save_json(target, validated.model_dump())
    return _store(validated, target)


__all__ = ["config_path", "ensure", "load", "persist", "require", "reset", "use"]
