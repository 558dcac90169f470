"""Animation bindings: techniques attached to elements through a ledger index.

A binding's time window is always derived from the ledger, never stored as
absolute seconds, so it follows its owning segment through duration
resolution.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from storyframe.core.techniques.base import Technique
from storyframe.core.timeline.ledger import Timeline


class AnimationBinding(BaseModel):
    """A technique applied to target elements over one ledger segment.

    Attributes:
        technique: Technique to evaluate.
        targets: Element ids the technique animates (may be empty).
        segment_index: Ledger index of the owning animation segment.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    technique: SerializeAsAny[Technique]
    targets: tuple[int, ...] = ()
    segment_index: int = Field(..., ge=0)

    def window(self, timeline: Timeline) -> tuple[float, float]:
        """Absolute ``(start, end)`` of the owning segment."""
        start = timeline.cumulative_start(self.segment_index)
        return start, start + timeline.duration_of(self.segment_index)

    def has_started(self, timeline: Timeline, time: float) -> bool:
        start, _ = self.window(timeline)
        return time >= start

    def progress_at(self, timeline: Timeline, time: float) -> float:
        """Normalized progress at ``time``.

        0 before the window, linear inside it, 1 from its end onwards.
        Zero-length windows jump straight to 1 at their start.
        """
        start, end = self.window(timeline)
        if time < start:
            return 0.0
        if time >= end:
            return 1.0
        return (time - start) / (end - start)

    def targets_element(self, element_id: int) -> bool:
        return element_id in self.targets


class BindingTable:
    """Ordered collection of animation bindings.

    Bindings are kept in ledger order of their owning segments, which is also
    the order they were authored in.
    """

    def __init__(self) -> None:
        self._bindings: list[AnimationBinding] = []
        self._by_element: dict[int, list[int]] = {}

    def add(self, binding: AnimationBinding) -> int:
        """Record a binding and return its position in the table.

        Raises:
            ValueError: If the binding's segment precedes the last one added.
        """
        if self._bindings and binding.segment_index < self._bindings[-1].segment_index:
            raise ValueError(
                f"Binding segment {binding.segment_index} precedes "
                f"segment {self._bindings[-1].segment_index}"
            )
        position = len(self._bindings)
        self._bindings.append(binding)
        for target in dict.fromkeys(binding.targets):
            self._by_element.setdefault(target, []).append(position)
        return position

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[AnimationBinding]:
        return iter(tuple(self._bindings))

    @property
    def bindings(self) -> tuple[AnimationBinding, ...]:
        return tuple(self._bindings)

    def for_element(self, element_id: int) -> list[AnimationBinding]:
        """Bindings that target ``element_id``, in ledger order."""
        return [self._bindings[i] for i in self._by_element.get(element_id, [])]

    def active_for(
        self, element_id: int, timeline: Timeline, time: float
    ) -> AnimationBinding | None:
        """The binding that controls ``element_id`` at ``time``.

        When several bindings target the same element, the latest one whose
        window has started wins. If none has started yet, the earliest binding
        governs (at progress 0), so the element shows its pre-animation state.

        Returns:
            The controlling binding, or None if nothing targets the element.
        """
        candidates = self.for_element(element_id)
        if not candidates:
            return None
        for binding in reversed(candidates):
            if binding.has_started(timeline, time):
                return binding
        return candidates[0]
