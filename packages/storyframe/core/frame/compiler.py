"""Frame state compiler: the complete snapshot of a frozen scene at a time.

``compile`` is referentially transparent: the same scene and time always give
the same snapshot. Out-of-range times are clamped to the timeline, never
rejected.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from storyframe.core.frame.layout import assign_layout
from storyframe.core.frame.models import (
    ElementState,
    FrameState,
    ItemState,
    ThemeState,
    kind_state_for,
)
from storyframe.core.scene.elements import Element, ElementKind
from storyframe.core.scene.errors import SceneNotFrozenError
from storyframe.core.scene.session import FrozenScene, SceneSession
from storyframe.core.techniques.models import TechniqueOutput
from storyframe.core.timeline.segments import NarrationSegment
from storyframe.core.utils.logging import log_performance
from storyframe.core.utils.math import clamp

logger = logging.getLogger(__name__)

_IDENTITY = TechniqueOutput.identity()
_HIDDEN = TechniqueOutput.hidden()


class FrameCompiler:
    """Compiles frame snapshots from a frozen scene.

    Args:
        scene: A frozen scene, or a session that has been frozen.

    Raises:
        SceneNotFrozenError: If given a session that is still authoring.
    """

    def __init__(self, scene: FrozenScene | SceneSession) -> None:
        if isinstance(scene, SceneSession):
            if scene.frozen is None:
                raise SceneNotFrozenError("Freeze the scene session before compiling frames")
            scene = scene.frozen
        self._scene = scene
        self._theme_state = ThemeState(
            name=scene.theme.name,
            css_properties=scene.theme.css_property_map(),
        )

    @property
    def scene(self) -> FrozenScene:
        return self._scene

    def clamp_time(self, time: float) -> float:
        """Clamp ``time`` to ``[0, total_duration]`` (NaN maps to 0)."""
        if math.isnan(time):
            return 0.0
        return float(clamp(time, 0.0, self._scene.total_duration()))

    def compile(self, time: float) -> FrameState:
        """Compute the complete visual state at ``time``."""
        clamped = self.clamp_time(time)
        return self._compile(clamped, self._scene.timeline.frame_at(clamped))

    def compile_frame(self, frame: int) -> FrameState:
        """Compute the state at the start of frame ``frame``.

        Frames outside ``0..total_frames - 1`` are clamped like times are.
        """
        total = self._scene.total_frames()
        if total == 0:
            return self.compile(0.0)
        frame = int(clamp(frame, 0, total - 1))
        return self._compile(self.clamp_time(frame / self._scene.fps), frame)

    @log_performance
    def _compile(self, time: float, frame: int) -> FrameState:
        timeline = self._scene.timeline
        elements = self._scene.elements
        visible = [e for e in elements if e.visible_at(time)]
        layout = assign_layout(visible)

        return FrameState(
            time=time,
            frame=frame,
            total_duration=timeline.total_duration(),
            fps=timeline.fps,
            elements=[self._element_state(e, time, layout) for e in elements],
            active_narration=self.active_narration(time),
            theme=self._theme_state,
        )

    def iter_frames(self) -> Iterator[FrameState]:
        """Yield the state of every frame in order."""
        total = self._scene.total_frames()
        logger.debug(f"Compiling {total} frames at {self._scene.fps} fps")
        for frame in range(total):
            yield self.compile_frame(frame)

    def active_narration(self, time: float) -> str | None:
        """Text of a narration segment playing at ``time``, if any.

        Uses a half-frame window so a point query still hits a segment that
        starts exactly at ``time``.
        """
        timeline = self._scene.timeline
        window = 1.0 / timeline.fps / 2.0
        for _start, segment in timeline.segments_in_range(time, time + window):
            if isinstance(segment, NarrationSegment):
                return segment.text
        return None

    def _element_state(
        self, element: Element, time: float, layout: dict[int, float]
    ) -> ElementState:
        visible = element.id in layout
        output = _IDENTITY if visible else _HIDDEN
        item_outputs = [output] * len(element.items)

        if visible:
            binding = self._scene.bindings.active_for(element.id, self._scene.timeline, time)
            if binding is not None:
                progress = binding.progress_at(self._scene.timeline, time)
                if element.kind == ElementKind.STEPS and element.items:
                    # Per-item outputs; the element itself stays neutral.
                    item_outputs = binding.technique.apply_for_group(len(element.items), progress)
                else:
                    output = binding.technique.apply(progress)

        return ElementState(
            id=element.id,
            kind=kind_state_for(element),
            content=element.content,
            items=[
                ItemState.from_output(text, item_output)
                for text, item_output in zip(element.items, item_outputs, strict=True)
            ],
            visible=visible,
            opacity=output.opacity,
            translate_x=output.translate_x,
            translate_y=output.translate_y,
            scale=output.scale,
            rotation=output.rotation,
            layout_y=layout.get(element.id),
        )


def compile_frame_state(scene: FrozenScene | SceneSession, time: float) -> FrameState:
    """Compile a single snapshot without keeping a compiler around."""
    return FrameCompiler(scene).compile(time)
