# src/svg_invert/utils/load_config.py

"""Load JSON config files with mtime-aware caching and typed errors.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> return dict[str, Any] after an optional validator

Used by the writer configuration loader and by tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key includes: path, mtime, mode, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str, str], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
) -> Any:
    """Load a JSON file, coerce by mode, and cache results."""
    path = Path(os.path.expanduser(os.fspath(file))).resolve()
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding)

    # Cache hit (only when no validator is used, because validator may change output)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE and validator is None:
            log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
            return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding, errors="strict") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if mode == "raw":
        result: Any = data

    elif mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected object for mode 'validated_dict', got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except ConfigTypeError:
                raise
            except Exception as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
        result = data

    else:
        raise ValueError(f"Unknown mode '{mode}'")

    if validator is None:
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = result
            log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    else:
        log.debug("Config loaded (validator present, not cached): %s (mode=%s)", path.name, mode)

    return result
