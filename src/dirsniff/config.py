"""Traversal configuration defaults."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 1

# integer, optionally followed by an all-zero fraction ("3", "-1", "3.0")
_DEPTH_PATTERN = re.compile(r"^\s*([+-]?\d+)(?:\.0*)?\s*$")


@dataclass(frozen=True, slots=True)
class TraversalConfig:
    max_depth: int = DEFAULT_MAX_DEPTH
    follow_dot_directories: bool = False
    verbose: bool = False


def parse_max_depth(raw: str | None, default: int = DEFAULT_MAX_DEPTH) -> int:
    """Parse a ``-m`` value, keeping ``default`` when the text is malformed.

    Accepts the ``-m=N`` spelling, where the option parser hands over ``=N``.
    """
    if raw is None:
        return default
    text = raw[1:] if raw.startswith("=") else raw
    match = _DEPTH_PATTERN.match(text)
    if match is None:
        LOGGER.debug("Ignoring malformed max depth %r", raw)
        return default
    return int(match.group(1), 10)
