"""Theme models - design tokens exposed to the painter as CSS custom properties.

Each token group maps 1-to-1 to a block of ``--storyframe-*`` properties. The
painter injects the flat property map into its page before drawing a frame.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

CSS_PREFIX = "--storyframe-"


def _token_name(field_name: str) -> str:
    """Map a token field name to its CSS property name.

    Example:
        >>> _token_name("font_weight_bold")
        '--storyframe-font-weight-bold'
    """
    return CSS_PREFIX + field_name.replace("_", "-")


class _TokenGroup(BaseModel):
    """Base for token groups; field order is the CSS emission order."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    def css_pairs(self) -> list[tuple[str, str]]:
        return [(_token_name(name), getattr(self, name)) for name in type(self).model_fields]


class ThemeColors(_TokenGroup):
    """Background, foreground, accent and status colors."""

    bg_primary: str = Field(..., min_length=1)
    bg_secondary: str = Field(..., min_length=1)
    bg_tertiary: str = Field(..., min_length=1)

    fg_primary: str = Field(..., min_length=1)
    fg_secondary: str = Field(..., min_length=1)
    fg_muted: str = Field(..., min_length=1)

    accent: str = Field(..., min_length=1)
    accent_hover: str = Field(..., min_length=1)
    accent_subtle: str = Field(..., min_length=1)

    success: str = Field(..., min_length=1)
    warning: str = Field(..., min_length=1)
    error: str = Field(..., min_length=1)


class ThemeTypography(_TokenGroup):
    """Font families, text sizes, line-heights, and font weights."""

    font_sans: str = '"Inter", ui-sans-serif, system-ui, sans-serif'
    font_mono: str = '"JetBrains Mono", ui-monospace, monospace'

    text_xs: str = "0.75rem"
    text_sm: str = "0.875rem"
    text_base: str = "1rem"
    text_lg: str = "1.25rem"
    text_xl: str = "1.5rem"
    text_2xl: str = "2rem"
    text_3xl: str = "2.5rem"
    text_4xl: str = "3.5rem"

    leading_tight: str = "1.15"
    leading_normal: str = "1.5"
    leading_relaxed: str = "1.75"

    font_weight_normal: str = "400"
    font_weight_medium: str = "500"
    font_weight_semibold: str = "600"
    font_weight_bold: str = "700"


class ThemeSpacing(_TokenGroup):
    """Spacing scale, container padding and corner radii."""

    space_1: str = "0.25rem"
    space_2: str = "0.5rem"
    space_3: str = "0.75rem"
    space_4: str = "1rem"
    space_6: str = "1.5rem"
    space_8: str = "2rem"
    space_12: str = "3rem"
    space_16: str = "4rem"
    space_24: str = "6rem"

    container_padding: str = "3rem"

    radius_sm: str = "0.25rem"
    radius_md: str = "0.5rem"
    radius_lg: str = "1rem"
    radius_full: str = "9999px"


class ThemeTiming(_TokenGroup):
    """Durations and easing curves for painter-side transitions."""

    duration_instant: str = "0ms"
    duration_fast: str = "150ms"
    duration_normal: str = "300ms"
    duration_slow: str = "500ms"
    duration_slower: str = "800ms"

    ease_default: str = "cubic-bezier(0.4, 0, 0.2, 1)"
    ease_in: str = "cubic-bezier(0.4, 0, 1, 1)"
    ease_out: str = "cubic-bezier(0, 0, 0.2, 1)"
    ease_in_out: str = "cubic-bezier(0.4, 0, 0.2, 1)"
    ease_spring: str = "cubic-bezier(0.34, 1.56, 0.64, 1)"


class ThemeShadows(_TokenGroup):
    """Box-shadow tokens."""

    shadow_sm: str = Field(..., min_length=1)
    shadow_md: str = Field(..., min_length=1)
    shadow_lg: str = Field(..., min_length=1)


class Theme(BaseModel):
    """Complete theme definition.

    Attributes:
        name: Stable theme identifier (e.g., 'storyframe-dark').
        description: Optional human-readable description.
        colors: Color tokens.
        typography: Typography tokens.
        spacing: Spacing tokens.
        timing: Timing tokens.
        shadows: Shadow tokens.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$")
    description: str | None = None
    colors: ThemeColors
    typography: ThemeTypography = Field(default_factory=ThemeTypography)
    spacing: ThemeSpacing = Field(default_factory=ThemeSpacing)
    timing: ThemeTiming = Field(default_factory=ThemeTiming)
    shadows: ThemeShadows

    def to_css_properties(self) -> list[tuple[str, str]]:
        """Flatten the theme into ordered ``(property, value)`` pairs.

        Order is colors, typography, spacing, timing, shadows; within a group
        the declaration order of its fields.
        """
        props: list[tuple[str, str]] = []
        for group in (self.colors, self.typography, self.spacing, self.timing, self.shadows):
            props.extend(group.css_pairs())
        return props

    def css_property_map(self) -> dict[str, str]:
        return dict(self.to_css_properties())
