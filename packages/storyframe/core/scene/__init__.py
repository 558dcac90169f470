"""Scene authoring: elements, animation bindings, duration resolution."""

from storyframe.core.scene.bindings import AnimationBinding, BindingTable
from storyframe.core.scene.elements import (
    HEADER_KINDS,
    Direction,
    Element,
    ElementKind,
    ElementRegistry,
)
from storyframe.core.scene.errors import (
    DurationCountMismatchError,
    SceneNotFrozenError,
    SegmentIndexError,
    SessionFrozenError,
    StoryframeError,
    UnknownElementError,
)
from storyframe.core.scene.resolver import DurationResolver, ResolutionReport
from storyframe.core.scene.session import FrozenScene, SceneSession

__all__ = [
    "HEADER_KINDS",
    "AnimationBinding",
    "BindingTable",
    "Direction",
    "DurationCountMismatchError",
    "DurationResolver",
    "Element",
    "ElementKind",
    "ElementRegistry",
    "FrozenScene",
    "ResolutionReport",
    "SceneNotFrozenError",
    "SceneSession",
    "SegmentIndexError",
    "SessionFrozenError",
    "StoryframeError",
    "UnknownElementError",
]
