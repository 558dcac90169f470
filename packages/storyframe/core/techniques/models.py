"""Technique output model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TechniqueOutput(BaseModel):
    """Visual output of a technique at a single progress value.

    The defaults are the identity transform: fully opaque, no offset,
    natural size, no rotation.

    Attributes:
        opacity: 0.0 = transparent, 1.0 = fully opaque (nominally in [0, 1]).
        translate_x: Horizontal offset in pixels.
        translate_y: Vertical offset in pixels.
        scale: Scale factor (1.0 = natural size).
        rotation: Rotation in degrees.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    opacity: float = Field(default=1.0)
    translate_x: float = Field(default=0.0)
    translate_y: float = Field(default=0.0)
    scale: float = Field(default=1.0)
    rotation: float = Field(default=0.0)

    @classmethod
    def identity(cls) -> TechniqueOutput:
        return cls()

    @classmethod
    def hidden(cls) -> TechniqueOutput:
        """Fully suppressed output: zero opacity and zero scale."""
        return cls(opacity=0.0, scale=0.0)

    def is_identity(self) -> bool:
        return self == TechniqueOutput()
