"""Reveal techniques: fade in, fade up."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from storyframe.core.techniques.base import Technique
from storyframe.core.techniques.models import TechniqueOutput
from storyframe.core.utils.math import clamp_unit


class FadeIn(Technique):
    """Fades an element from transparent to fully opaque."""

    technique_name: ClassVar[str] = "FadeIn"

    duration: float = Field(default=0.5, ge=0.0)

    def evaluate(self, progress: float) -> TechniqueOutput:
        return TechniqueOutput(opacity=clamp_unit(progress))


class FadeUp(Technique):
    """Fades in while rising ``distance`` pixels into place.

    Opacity is held to [0, 1] even when an easing curve overshoots; the
    vertical offset follows the overshoot.
    """

    technique_name: ClassVar[str] = "FadeUp"

    duration: float = Field(default=0.6, ge=0.0)
    distance: float = Field(default=30.0)

    def evaluate(self, progress: float) -> TechniqueOutput:
        return TechniqueOutput(
            opacity=clamp_unit(progress),
            translate_y=self.distance * (1.0 - progress),
        )
