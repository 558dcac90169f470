"""Builtin theme definitions.

Registers the dark (default) and light themes with the global registry.
"""

from storyframe.core.theming.catalog import THEME_REGISTRY
from storyframe.core.theming.models import Theme, ThemeColors, ThemeShadows

DARK_THEME = Theme(
    name="storyframe-dark",
    description="Slate background, bright foreground, blue accent.",
    colors=ThemeColors(
        bg_primary="#0f172a",
        bg_secondary="#1e293b",
        bg_tertiary="#334155",
        fg_primary="#f8fafc",
        fg_secondary="#cbd5e1",
        fg_muted="#64748b",
        accent="#3b82f6",
        accent_hover="#60a5fa",
        accent_subtle="rgba(59, 130, 246, 0.15)",
        success="#22c55e",
        warning="#eab308",
        error="#ef4444",
    ),
    shadows=ThemeShadows(
        shadow_sm="0 1px 2px rgba(0, 0, 0, 0.3)",
        shadow_md="0 4px 6px rgba(0, 0, 0, 0.3)",
        shadow_lg="0 10px 15px rgba(0, 0, 0, 0.4)",
    ),
)

LIGHT_THEME = Theme(
    name="storyframe-light",
    description="Near-white background, slate foreground, deeper blue accent.",
    colors=ThemeColors(
        bg_primary="#ffffff",
        bg_secondary="#f1f5f9",
        bg_tertiary="#e2e8f0",
        fg_primary="#0f172a",
        fg_secondary="#334155",
        fg_muted="#94a3b8",
        accent="#2563eb",
        accent_hover="#1d4ed8",
        accent_subtle="rgba(37, 99, 235, 0.1)",
        success="#16a34a",
        warning="#ca8a04",
        error="#dc2626",
    ),
    shadows=ThemeShadows(
        shadow_sm="0 1px 2px rgba(15, 23, 42, 0.08)",
        shadow_md="0 4px 6px rgba(15, 23, 42, 0.1)",
        shadow_lg="0 10px 15px rgba(15, 23, 42, 0.12)",
    ),
)


def _register_themes() -> None:
    """Register all builtin themes."""
    THEME_REGISTRY.register(DARK_THEME, aliases=["dark", "default"])
    THEME_REGISTRY.register(LIGHT_THEME, aliases=["light"])


_register_themes()
