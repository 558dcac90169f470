"""Name and alias lookup for registered themes.

Themes are frozen models, so the catalog stores instances directly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from storyframe.core.theming.models import Theme

logger = logging.getLogger(__name__)


def normalize_key(s: str) -> str:
    """Fold case and punctuation so ``Storyframe Dark`` finds ``storyframe-dark``."""
    return "".join(ch.lower() if ch.isalnum() else "_" for ch in s).strip("_")


class UnknownThemeError(KeyError):
    """No theme is registered under the requested name or alias."""


@dataclass(frozen=True)
class ThemeInfo:
    """Listing entry for a registered theme."""

    name: str
    description: str | None
    property_count: int


class ThemeCatalog:
    """Themes keyed by name, reachable through any registered alias.

    Example:
        >>> catalog = ThemeCatalog()
        >>> catalog.register(my_theme, aliases=["dark"])
        >>> theme = catalog.get("dark")
    """

    def __init__(self) -> None:
        self._themes: dict[str, Theme] = {}
        self._aliases: dict[str, str] = {}  # normalized_key -> theme name
        self._info: dict[str, ThemeInfo] = {}

    def register(self, theme: Theme, *, aliases: Iterable[str] = ()) -> None:
        """Register a theme.

        Args:
            theme: Theme to register.
            aliases: Additional aliases for lookup.

        Raises:
            ValueError: If the theme name is already registered.
        """
        name = theme.name
        if name in self._themes:
            raise ValueError(f"Theme already registered: {name}")

        self._themes[name] = theme
        for alias in {name, *aliases}:
            self._aliases[normalize_key(alias)] = name

        self._info[name] = ThemeInfo(
            name=name,
            description=theme.description,
            property_count=len(theme.to_css_properties()),
        )
        logger.debug(f"Registered theme: {name}")

    def get(self, key: str) -> Theme:
        """Lookup theme by name or alias.

        Raises:
            UnknownThemeError: If the theme is not found.
        """
        name = self._aliases.get(normalize_key(key), key)
        theme = self._themes.get(name)
        if theme is None:
            raise UnknownThemeError(f"Unknown theme: {key}")
        return theme

    def has(self, key: str) -> bool:
        name = self._aliases.get(normalize_key(key), key)
        return name in self._themes

    def list_all(self) -> list[ThemeInfo]:
        return sorted(self._info.values(), key=lambda x: x.name)

    def __len__(self) -> int:
        return len(self._themes)

    def __contains__(self, key: str) -> bool:
        return self.has(key)


THEME_REGISTRY = ThemeCatalog()


def get_theme(key: str) -> Theme:
    """Get a theme from the global registry."""
    return THEME_REGISTRY.get(key)


def list_themes() -> list[ThemeInfo]:
    """List themes in the global registry."""
    return THEME_REGISTRY.list_all()
