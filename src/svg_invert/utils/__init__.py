# svg_invert/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the inverter.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Configuration, color cache, markup reader/writer, pipeline and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    clear_config_cache,
    load_config,
)
from .log import (
    debug,
    enable_topics,
    is_enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enable_topics",
    "is_enabled",
    "reload_topics",
]
