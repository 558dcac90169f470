"""Bundled scenes."""

from storyframe.core.scenes.showcase import build_showcase

__all__ = [
    "build_showcase",
]
