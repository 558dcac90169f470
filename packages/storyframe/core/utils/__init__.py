"""Shared utilities for Storyframe."""

from storyframe.core.utils.logging import configure_logging, get_logger
from storyframe.core.utils.math import clamp, clamp_unit, evenly_spaced, lerp

__all__ = [
    "clamp",
    "clamp_unit",
    "configure_logging",
    "evenly_spaced",
    "get_logger",
    "lerp",
]
