"""
log.py.

Does: Lightweight debug tracer controlled by SVG_INVERT_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by color, markup and pipeline modules.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enable_topics", "is_enabled", "reload_topics"]

ENV_VAR = "SVG_INVERT_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable SVG_INVERT_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_topics(*topics: str) -> None:
    """Does: Turn on the given topics (or 'all') for the current process."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _DEBUG_TOPICS | {t.strip().lower() for t in topics if t.strip()}


def is_enabled(topic: str) -> bool:
    """Does: Tell whether debug lines for `topic` would be printed."""
    topic_key = topic.lower().strip()
    return bool(_DEBUG_TOPICS) and ("all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS)


def debug(
    msg: str,
    topic: str = "pipeline",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via SVG_INVERT_DEBUG_TOPICS.
    """
    if not is_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
