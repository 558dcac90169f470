"""Timeline segment models.

A segment is one timed operation in the authored record. Segments are
immutable values; the ledger replaces an entry when its duration is resolved.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Self

from pydantic import BaseModel, ConfigDict, Field


class SegmentKind(str, Enum):
    """Kinds of timed operation a ledger can hold.

    Attributes:
        NARRATION: Spoken text, later replaced by a measured duration.
        SILENCE: Voiceless pause; visuals hold.
        ANIMATION: Marker owning an animation binding's time window.
        CLIP: Reference to a pre-recorded external clip.
    """

    NARRATION = "narration"
    SILENCE = "silence"
    ANIMATION = "animation"
    CLIP = "clip"


class _SegmentBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    duration: float = Field(..., ge=0.0, allow_inf_nan=False, description="Seconds")

    def with_duration(self, duration: float) -> Self:
        """Return a copy of this segment carrying a new duration."""
        return type(self).model_validate({**self.model_dump(), "duration": duration})


class NarrationSegment(_SegmentBase):
    """Narrated text synthesized by an external text-to-speech stage."""

    kind: Literal["narration"] = "narration"
    text: str


class SilenceSegment(_SegmentBase):
    """A period of silence (no audio, visuals hold)."""

    kind: Literal["silence"] = "silence"


class AnimationSegment(_SegmentBase):
    """Marker for an animation technique applied to elements."""

    kind: Literal["animation"] = "animation"
    name: str = Field(..., min_length=1)


class ClipSegment(_SegmentBase):
    """A pre-recorded audio/video clip, referenced by path or URI."""

    kind: Literal["clip"] = "clip"
    reference: str = Field(..., min_length=1)


Segment = Annotated[
    NarrationSegment | SilenceSegment | AnimationSegment | ClipSegment,
    Field(discriminator="kind"),
]
