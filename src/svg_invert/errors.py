"""
errors.py
=========

Does: Define the exception hierarchy of the inverter.
      - ReadError / WriteError are fatal to a run and reach the caller.
      - ColorError / UnparseableColor are local to one attribute value and are
        absorbed by the color cache.
"""

from __future__ import annotations

__all__ = [
    "InvertSvgError",
    "ReadError",
    "WriteError",
    "ColorError",
    "UnparseableColor",
]
__docformat__ = "google"


class InvertSvgError(Exception):
    """Base class for failures that abort an inversion run."""


class ReadError(InvertSvgError):
    """Raise when the input document is malformed or cannot be read."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(f"XML read error: {message}")


class WriteError(InvertSvgError):
    """Raise when the output document cannot be written."""

    def __init__(self, message: str):
        super().__init__(f"XML write error: {message}")


class ColorError(ValueError):
    """Base class for color literal failures."""


class UnparseableColor(ColorError):
    """Raise when a color literal cannot be interpreted."""

    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"Unparseable color: {literal!r}")
