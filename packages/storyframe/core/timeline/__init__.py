"""Segment ledger: timed segments and cumulative timing."""

from storyframe.core.timeline.builder import TimelineBuilder, estimate_narration_duration
from storyframe.core.timeline.errors import LedgerFrozenError
from storyframe.core.timeline.ledger import Timeline
from storyframe.core.timeline.segments import (
    AnimationSegment,
    ClipSegment,
    NarrationSegment,
    Segment,
    SegmentKind,
    SilenceSegment,
)

__all__ = [
    "AnimationSegment",
    "ClipSegment",
    "LedgerFrozenError",
    "NarrationSegment",
    "Segment",
    "SegmentKind",
    "SilenceSegment",
    "Timeline",
    "TimelineBuilder",
    "estimate_narration_duration",
]
