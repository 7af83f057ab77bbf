"""
config.py
=========

Does: Hold writer/reader options for an inversion run and load them from JSON.
Returns: InvertConfig (frozen) via InvertConfig.from_mapping or load_invert_config.
Used By: SvgInverter, EventWriter, CLI (--config) and the SVG_INVERT_CONFIG env var.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

from svg_invert.utils.load_config import ConfigTypeError, load_config

__all__ = ["DEFAULT_CHUNK_SIZE", "ENV_CONFIG", "InvertConfig", "load_invert_config"]
__docformat__ = "google"

log = logging.getLogger(__name__)

ENV_CONFIG = "SVG_INVERT_CONFIG"
DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class InvertConfig:
    """Formatting options of the output document plus the input chunk size."""

    indent_string: str = "  "
    perform_indent: bool = True
    line_separator: str = "\n"
    pad_self_closing: bool = True
    normalize_empty_elements: bool = True
    autopad_comments: bool = False
    chunk_size: int = DEFAULT_CHUNK_SIZE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> InvertConfig:
        """Does: Build a config from a JSON-like mapping, checking keys and types."""
        fields = {f.name: f for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - set(fields))
        if unknown:
            raise ConfigTypeError(f"unknown config keys: {', '.join(unknown)}")

        defaults = cls()
        for key, value in data.items():
            expected = type(getattr(defaults, key))
            # bool is a subclass of int; keep them apart
            if type(value) is not expected:
                raise ConfigTypeError(
                    f"{key}: expected {expected.__name__}, got {type(value).__name__}"
                )
        if data.get("chunk_size", 1) <= 0:
            raise ConfigTypeError("chunk_size: must be positive")
        return cls(**data)


def load_invert_config(path: str | os.PathLike[str] | None = None) -> InvertConfig:
    """Resolve config: explicit path > SVG_INVERT_CONFIG > defaults."""
    if path is None:
        path = os.environ.get(ENV_CONFIG) or None
    if path is None:
        return InvertConfig()
    data = load_config(path, mode="validated_dict")
    log.debug("Loaded config from %s", path)
    return InvertConfig.from_mapping(data)
