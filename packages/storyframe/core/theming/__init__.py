"""Theming domain - design tokens and the theme registry.

Usage:
    from storyframe.core.theming import Theme, get_theme, list_themes

Note: Importing this module auto-registers all builtins.
"""

# Auto-register builtins on import
from storyframe.core.theming import builtins as _builtins  # noqa: F401
from storyframe.core.theming.builtins.themes import DARK_THEME, LIGHT_THEME
from storyframe.core.theming.catalog import (
    THEME_REGISTRY,
    ThemeCatalog,
    ThemeInfo,
    UnknownThemeError,
    get_theme,
    list_themes,
)
from storyframe.core.theming.models import (
    CSS_PREFIX,
    Theme,
    ThemeColors,
    ThemeShadows,
    ThemeSpacing,
    ThemeTiming,
    ThemeTypography,
)

__all__ = [
    "CSS_PREFIX",
    "DARK_THEME",
    "LIGHT_THEME",
    "THEME_REGISTRY",
    "Theme",
    "ThemeCatalog",
    "ThemeColors",
    "ThemeInfo",
    "ThemeShadows",
    "ThemeSpacing",
    "ThemeTiming",
    "ThemeTypography",
    "UnknownThemeError",
    "get_theme",
    "list_themes",
]
