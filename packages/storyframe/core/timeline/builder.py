"""Fluent construction of timelines and narration estimates."""

from __future__ import annotations

from storyframe.core.config.models import DEFAULT_FPS, DEFAULT_WORDS_PER_MINUTE
from storyframe.core.timeline.ledger import Timeline
from storyframe.core.timeline.segments import (
    AnimationSegment,
    ClipSegment,
    NarrationSegment,
    Segment,
    SilenceSegment,
)


def estimate_narration_duration(
    text: str, words_per_minute: float = DEFAULT_WORDS_PER_MINUTE
) -> float:
    """Estimate how long ``text`` takes to speak.

    Uses a flat words-per-minute rate; empty text still costs one word so a
    narration segment never collapses to zero length before measurement.

    Args:
        text: Narration text.
        words_per_minute: Speaking rate.

    Returns:
        Estimated duration in seconds.

    Raises:
        ValueError: If words_per_minute is not positive.
    """
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be > 0, got {words_per_minute}")
    word_count = max(1, len(text.split()))
    return word_count * 60.0 / words_per_minute


class TimelineBuilder:
    """Builder for constructing a Timeline with a fluent API.

    Example:
        >>> timeline = (
        ...     TimelineBuilder()
        ...     .fps(24)
        ...     .narration("Hello", 2.0)
        ...     .silence(0.5)
        ...     .build()
        ... )
        >>> timeline.total_duration()
        2.5
    """

    def __init__(self) -> None:
        self._fps = DEFAULT_FPS
        self._segments: list[Segment] = []

    def fps(self, fps: int) -> TimelineBuilder:
        self._fps = fps
        return self

    def narration(self, text: str, duration: float) -> TimelineBuilder:
        self._segments.append(NarrationSegment(text=text, duration=duration))
        return self

    def silence(self, duration: float) -> TimelineBuilder:
        self._segments.append(SilenceSegment(duration=duration))
        return self

    def animation(self, name: str, duration: float) -> TimelineBuilder:
        self._segments.append(AnimationSegment(name=name, duration=duration))
        return self

    def clip(self, reference: str, duration: float) -> TimelineBuilder:
        self._segments.append(ClipSegment(reference=reference, duration=duration))
        return self

    def segment(self, segment: Segment) -> TimelineBuilder:
        """Add an already-constructed segment."""
        self._segments.append(segment)
        return self

    def build(self) -> Timeline:
        """Consume the builder and produce a Timeline."""
        timeline = Timeline(fps=self._fps)
        for seg in self._segments:
            timeline.append(seg)
        return timeline
