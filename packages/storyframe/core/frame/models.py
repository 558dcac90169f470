"""Frame snapshot models: the contract with the external renderer.

Snapshots are serialized with lower-camel-case keys (``translateX``,
``activeNarration``, ``cssProperties``); Python code uses the snake_case
attribute names.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storyframe.core.scene.elements import Direction, Element, ElementKind
from storyframe.core.techniques.models import TechniqueOutput


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


# ---------------------------------------------------------------------------
# Element kind tags
# ---------------------------------------------------------------------------


class TitleKind(_SnapshotModel):
    type: Literal["title"] = "title"


class ShowKind(_SnapshotModel):
    type: Literal["show"] = "show"


class SectionKind(_SnapshotModel):
    type: Literal["section"] = "section"


class MetricKind(_SnapshotModel):
    type: Literal["metric"] = "metric"
    direction: Direction = Direction.NEUTRAL


class StepsKind(_SnapshotModel):
    type: Literal["steps"] = "steps"
    count: int = Field(default=0, ge=0)


KindState = Annotated[
    TitleKind | ShowKind | SectionKind | MetricKind | StepsKind,
    Field(discriminator="type"),
]


def kind_state_for(element: Element) -> KindState:
    """Tagged kind for an element (carries direction/count where relevant)."""
    if element.kind == ElementKind.TITLE:
        return TitleKind()
    if element.kind == ElementKind.SECTION:
        return SectionKind()
    if element.kind == ElementKind.SHOW:
        return ShowKind()
    if element.kind == ElementKind.METRIC:
        return MetricKind(direction=element.direction or Direction.NEUTRAL)
    return StepsKind(count=len(element.items))


# ---------------------------------------------------------------------------
# Per-element state
# ---------------------------------------------------------------------------


class ItemState(_SnapshotModel):
    """A single list entry of a Steps element with its own transform."""

    text: str
    opacity: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0
    scale: float = 1.0
    rotation: float = 0.0

    @classmethod
    def from_output(cls, text: str, output: TechniqueOutput) -> ItemState:
        return cls(text=text, **output.model_dump())


class ElementState(_SnapshotModel):
    """Visual state of one element at a point in time.

    Attributes:
        id: Element id.
        kind: Tagged structural type.
        content: Primary text.
        items: Per-item states (Steps only).
        visible: Whether the element is on screen.
        opacity: Element-level opacity.
        translate_x: Horizontal offset in pixels.
        translate_y: Vertical offset in pixels.
        scale: Scale factor.
        rotation: Rotation in degrees.
        layout_y: Vertical position fraction; None while hidden.
    """

    id: int
    kind: KindState
    content: str
    items: list[ItemState] = Field(default_factory=list)
    visible: bool
    opacity: float
    translate_x: float = 0.0
    translate_y: float = 0.0
    scale: float
    rotation: float = 0.0
    layout_y: float | None = None


class ThemeState(_SnapshotModel):
    """Active theme as CSS custom property pairs."""

    name: str
    css_properties: dict[str, str]


class FrameState(_SnapshotModel):
    """Complete visual state at one point in the timeline.

    Attributes:
        time: Query time in seconds, clamped to the timeline.
        frame: Frame index (0-based).
        total_duration: Timeline length in seconds.
        fps: Frames per second.
        elements: State of every element, visible or not, in creation order.
        active_narration: Text of the narration playing at ``time``, if any.
        theme: Active theme.
    """

    time: float
    frame: int
    total_duration: float
    fps: int
    elements: list[ElementState]
    active_narration: str | None = None
    theme: ThemeState

    def visible_elements(self) -> list[ElementState]:
        return [e for e in self.elements if e.visible]

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = None) -> str:
        """Serialize with camelCase keys."""
        return self.model_dump_json(by_alias=True, indent=indent)
