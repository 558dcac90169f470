"""Technique base class.

A technique is a pure function from normalized progress to a visual output.
Concrete techniques declare a ``duration`` (seconds) and implement
``evaluate``; ``apply`` clamps progress before delegating.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict

from storyframe.core.techniques.models import TechniqueOutput
from storyframe.core.utils.math import clamp_unit

if TYPE_CHECKING:
    from storyframe.core.techniques.easing import Ease, WithEase

ProgressRemap = Callable[[float], float]


class Technique(BaseModel, ABC):
    """Abstract animation technique.

    Subclasses provide:
    - ``technique_name`` class constant (reported as ``name``)
    - ``duration``: base duration in seconds (a field or a derived property)
    - ``evaluate(progress)``: the interpolation curve, for progress that has
      already been clamped (and possibly eased past [0, 1])
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    technique_name: ClassVar[str] = "Technique"

    if TYPE_CHECKING:
        duration: float

    @property
    def name(self) -> str:
        return type(self).technique_name

    @property
    def base_duration(self) -> float:
        return self.duration

    @property
    def is_group(self) -> bool:
        """True when outputs differ per item (e.g. stagger)."""
        return False

    @property
    def group_size(self) -> int:
        """Number of items the technique is authored for."""
        return 1

    @abstractmethod
    def evaluate(self, progress: float) -> TechniqueOutput:
        """Compute output at ``progress`` without clamping."""

    def apply(self, progress: float) -> TechniqueOutput:
        """Compute output at ``progress``, clamped to [0, 1]."""
        return self.evaluate(clamp_unit(progress))

    def apply_for_group(
        self,
        item_count: int,
        progress: float,
        remap: ProgressRemap | None = None,
    ) -> list[TechniqueOutput]:
        """Compute one output per item.

        Non-group techniques give every item the same output.

        Args:
            item_count: Number of items in the group.
            progress: Group progress, clamped to [0, 1].
            remap: Optional curve applied to each item's local progress
                (set by easing wrappers).

        Returns:
            ``item_count`` outputs, in item order.
        """
        if item_count <= 0:
            return []
        p = clamp_unit(progress)
        if remap is not None:
            p = remap(p)
        output = self.evaluate(p)
        return [output] * item_count

    def with_ease(self, ease: Ease | str) -> WithEase:
        """Wrap this technique with an easing curve."""
        from storyframe.core.techniques.easing import Ease, WithEase

        return WithEase(inner=self, ease=Ease(ease))
