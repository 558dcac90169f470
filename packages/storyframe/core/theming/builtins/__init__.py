"""Builtin themes.

Importing this module registers all builtin themes with the global registry.
"""

from storyframe.core.theming.builtins import (
    themes as _themes,  # pyright: ignore[reportUnusedImport]  # noqa: F401
)

__all__: list[str] = []
