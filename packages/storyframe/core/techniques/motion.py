"""Motion techniques: slide, scale."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from storyframe.core.techniques.base import Technique
from storyframe.core.techniques.models import TechniqueOutput
from storyframe.core.utils.math import lerp


class Slide(Technique):
    """Slides an element from ``(offset_x, offset_y)`` to its resting place.

    Negative ``offset_x`` enters from the left.
    """

    technique_name: ClassVar[str] = "Slide"

    duration: float = Field(default=0.5, ge=0.0)
    offset_x: float = Field(default=100.0)
    offset_y: float = Field(default=0.0)

    def evaluate(self, progress: float) -> TechniqueOutput:
        remaining = 1.0 - progress
        return TechniqueOutput(
            translate_x=self.offset_x * remaining,
            translate_y=self.offset_y * remaining,
        )


class Scale(Technique):
    """Scales an element from ``start`` to ``end``."""

    technique_name: ClassVar[str] = "Scale"

    duration: float = Field(default=0.4, ge=0.0)
    start: float = Field(default=0.0)
    end: float = Field(default=1.0)

    def evaluate(self, progress: float) -> TechniqueOutput:
        return TechniqueOutput(scale=lerp(self.start, self.end, progress))
