"""Staging techniques: per-item staggered delegation."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, SerializeAsAny

from storyframe.core.config.models import DEFAULT_STAGGER_DELAY
from storyframe.core.techniques.base import ProgressRemap, Technique
from storyframe.core.techniques.models import TechniqueOutput
from storyframe.core.utils.math import clamp_unit


class Stagger(Technique):
    """Applies an inner technique to a sequence of items with a fixed delay.

    Item ``i`` runs the inner technique over the local window
    ``[i * delay, i * delay + inner.duration]`` measured from the group start.
    Items that have not started show the inner technique at progress 0; items
    that have finished hold it at progress 1.

    Example:
        >>> stagger = Stagger(inner=FadeUp(), delay=0.1, count=3)
        >>> stagger.duration
        0.8
    """

    technique_name: ClassVar[str] = "Stagger"

    inner: SerializeAsAny[Technique]
    delay: float = Field(default=DEFAULT_STAGGER_DELAY, ge=0.0)
    count: int = Field(default=1, ge=0)

    @property
    def duration(self) -> float:  # type: ignore[override]
        return self.group_duration(self.count)

    @property
    def is_group(self) -> bool:
        return True

    @property
    def group_size(self) -> int:
        return max(self.count, 1)

    def group_duration(self, item_count: int) -> float:
        """Length of the group window for ``item_count`` items."""
        extra = self.delay * (item_count - 1) if item_count > 1 else 0.0
        return self.inner.duration + extra

    def item_window(self, index: int) -> tuple[float, float]:
        """Local ``(start, end)`` of item ``index`` relative to the group start."""
        start = index * self.delay
        return start, start + self.inner.duration

    def evaluate(self, progress: float) -> TechniqueOutput:
        return self.apply_for_group(self.group_size, progress)[0]

    def apply_for_group(
        self,
        item_count: int,
        progress: float,
        remap: ProgressRemap | None = None,
    ) -> list[TechniqueOutput]:
        if item_count <= 0:
            return []

        elapsed = clamp_unit(progress) * self.group_duration(item_count)
        inner_duration = self.inner.duration

        outputs: list[TechniqueOutput] = []
        for i in range(item_count):
            start, end = self.item_window(i)
            if elapsed >= end:
                local = 1.0
            elif elapsed <= start:
                local = 0.0
            else:
                local = (elapsed - start) / inner_duration
            if remap is not None:
                local = remap(local)
            outputs.append(self.inner.evaluate(local))
        return outputs
