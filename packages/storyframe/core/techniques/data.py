"""Data-display techniques."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from storyframe.core.techniques.base import Technique
from storyframe.core.techniques.models import TechniqueOutput
from storyframe.core.utils.math import clamp_unit, lerp


class CountUp(Technique):
    """Counts a displayed number from ``start`` to ``end`` while fading in.

    The number itself is not part of the visual output; renderers read it via
    :meth:`value_at` using the same progress.
    """

    technique_name: ClassVar[str] = "CountUp"

    duration: float = Field(default=1.0, ge=0.0)
    start: float = Field(default=0.0)
    end: float = Field(default=100.0)

    def evaluate(self, progress: float) -> TechniqueOutput:
        return TechniqueOutput(opacity=clamp_unit(progress))

    def value_at(self, progress: float) -> float:
        """Displayed number at ``progress`` (clamped to [0, 1])."""
        return lerp(self.start, self.end, clamp_unit(progress))
