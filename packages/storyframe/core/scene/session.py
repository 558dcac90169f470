"""Authoring session: the build phase of a scene.

A ``SceneSession`` owns the ledger, element registry, and binding table while
a scene is being authored. Calling :meth:`SceneSession.freeze` ends the build
phase and hands back a read-only :class:`FrozenScene` for querying; any
further authoring call raises :class:`SessionFrozenError`.

Example:
    >>> session = SceneSession()
    >>> session.title("Hello")
    0
    >>> session.play(FadeIn())
    0
    >>> session.narrate("Welcome to the show.")
    1
    >>> scene = session.freeze()
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from storyframe.core.config.models import EngineConfig
from storyframe.core.scene.bindings import AnimationBinding, BindingTable
from storyframe.core.scene.elements import Direction, Element, ElementKind, ElementRegistry
from storyframe.core.scene.errors import SessionFrozenError, UnknownElementError
from storyframe.core.scene.resolver import DurationResolver, ResolutionReport
from storyframe.core.techniques.base import Technique
from storyframe.core.techniques.staging import Stagger
from storyframe.core.theming import Theme, get_theme
from storyframe.core.timeline.builder import estimate_narration_duration
from storyframe.core.timeline.ledger import Timeline
from storyframe.core.timeline.segments import (
    AnimationSegment,
    ClipSegment,
    NarrationSegment,
    Segment,
    SilenceSegment,
)

logger = logging.getLogger(__name__)


class FrozenScene:
    """Read-only view of an authored scene, ready for frame queries."""

    def __init__(
        self,
        timeline: Timeline,
        registry: ElementRegistry,
        bindings: BindingTable,
        theme: Theme,
    ) -> None:
        self._timeline = timeline
        self._registry = registry
        self._bindings = bindings
        self._theme = theme

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def registry(self) -> ElementRegistry:
        return self._registry

    @property
    def elements(self) -> tuple[Element, ...]:
        return self._registry.elements

    @property
    def bindings(self) -> BindingTable:
        return self._bindings

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def fps(self) -> int:
        return self._timeline.fps

    def total_duration(self) -> float:
        return self._timeline.total_duration()

    def total_frames(self) -> int:
        return self._timeline.total_frames()


class SceneSession:
    """Mutable authoring context for a single scene.

    Args:
        config: Engine configuration; defaults to ``EngineConfig()``.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()
        self._timeline = Timeline(fps=self._config.fps)
        self._registry = ElementRegistry(self._timeline)
        self._bindings = BindingTable()
        self._resolver = DurationResolver(self._timeline, self._registry)
        self._theme = get_theme(self._config.theme)
        self._frozen: FrozenScene | None = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def registry(self) -> ElementRegistry:
        return self._registry

    @property
    def bindings(self) -> BindingTable:
        return self._bindings

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def is_frozen(self) -> bool:
        return self._frozen is not None

    @property
    def frozen(self) -> FrozenScene | None:
        """The frozen scene, once :meth:`freeze` has been called."""
        return self._frozen

    def _ensure_mutable(self, operation: str) -> None:
        if self._frozen is not None:
            raise SessionFrozenError(f"Cannot {operation}: scene session is frozen")

    def _append(self, segment: Segment) -> int:
        self._ensure_mutable(f"append {segment.kind} segment")
        return self._timeline.append(segment)

    def _mint(
        self,
        kind: ElementKind,
        content: str,
        items: Iterable[str] = (),
        direction: Direction | str | None = None,
    ) -> int:
        self._ensure_mutable(f"create {kind.value} element")
        return self._registry.mint(kind, content, items=items, direction=direction)

    # ------------------------------------------------------------------
    # Pacing
    # ------------------------------------------------------------------

    def narrate(self, text: str) -> int:
        """Queue narration; duration is estimated until resolved.

        Returns:
            Ledger index of the narration segment.
        """
        duration = estimate_narration_duration(text, self._config.words_per_minute)
        return self._append(NarrationSegment(text=text, duration=duration))

    def beat(self) -> int:
        """Insert a short rhythmic pause."""
        return self._append(SilenceSegment(duration=self._config.beat_duration))

    def breath(self) -> int:
        """Insert a longer breathing pause."""
        return self._append(SilenceSegment(duration=self._config.breath_duration))

    def wait(self, duration: float) -> int:
        """Insert a pause of explicit length (seconds)."""
        return self._append(SilenceSegment(duration=duration))

    def clip(self, reference: str, duration: float) -> int:
        """Reference a pre-recorded clip by path or URI."""
        return self._append(ClipSegment(reference=reference, duration=duration))

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def title(self, text: str) -> int:
        return self._mint(ElementKind.TITLE, text)

    def section(self, text: str) -> int:
        return self._mint(ElementKind.SECTION, text)

    def show(self, text: str) -> int:
        return self._mint(ElementKind.SHOW, text)

    def metric(
        self, label: str, value: str, direction: Direction | str = Direction.NEUTRAL
    ) -> int:
        """Display ``label: value`` with a directional indicator."""
        return self._mint(ElementKind.METRIC, f"{label}: {value}", direction=direction)

    def steps(self, items: Sequence[str]) -> int:
        """Display a list whose items can be revealed one by one."""
        return self._mint(ElementKind.STEPS, "", items=items)

    def clear(self) -> list[int]:
        """End every open element at the current ledger length.

        Returns:
            Ids of the elements that were ended.
        """
        self._ensure_mutable("clear scene")
        return self._registry.end_all_open(len(self._timeline))

    # ------------------------------------------------------------------
    # Techniques and theme
    # ------------------------------------------------------------------

    def play(self, technique: Technique, targets: int | Iterable[int] | None = None) -> int:
        """Play a technique on target elements.

        Args:
            technique: Technique to run; its duration becomes an animation
                segment.
            targets: Element id(s) to animate. ``None`` targets the most
                recently created element (nothing, if none exists).

        Returns:
            Ledger index of the animation segment.

        Raises:
            UnknownElementError: If a target id does not exist.
            ValueError: If a group technique is sized for a different number
                of items than a targeted steps element holds.
        """
        self._ensure_mutable("play technique")
        if targets is None:
            last = self._registry.last_id
            target_ids: tuple[int, ...] = () if last is None else (last,)
        elif isinstance(targets, int):
            target_ids = (targets,)
        else:
            target_ids = tuple(targets)

        for target in target_ids:
            if target not in self._registry:
                raise UnknownElementError(target)
        if technique.is_group:
            self._check_group_size(technique, target_ids)

        index = self._append(AnimationSegment(name=technique.name, duration=technique.duration))
        self._bindings.add(
            AnimationBinding(technique=technique, targets=target_ids, segment_index=index)
        )
        logger.debug(f"Bound {technique.name} to {list(target_ids)} at segment #{index}")
        return index

    def _check_group_size(self, technique: Technique, target_ids: tuple[int, ...]) -> None:
        # The animation segment is sized from the technique's own item count
        for target in target_ids:
            element = self._registry.get(target)
            if element.kind == ElementKind.STEPS and element.items:
                if technique.group_size != len(element.items):
                    raise ValueError(
                        f"{technique.name} is sized for {technique.group_size} item(s) but "
                        f"steps element #{target} has {len(element.items)}"
                    )

    def stagger(self, inner: Technique, count: int) -> Stagger:
        """Build a stagger over ``count`` items using the configured delay."""
        return Stagger(inner=inner, delay=self._config.stagger_delay, count=count)

    def set_theme(self, theme: Theme | str) -> Theme:
        """Switch the active theme by instance or registered name."""
        self._ensure_mutable("set theme")
        self._theme = get_theme(theme) if isinstance(theme, str) else theme
        logger.debug(f"Theme set to {self._theme.name}")
        return self._theme

    # ------------------------------------------------------------------
    # Resolution and phase transition
    # ------------------------------------------------------------------

    def resolve_durations(
        self, indices: Sequence[int], durations: Sequence[float]
    ) -> ResolutionReport:
        """Replace durations of the segments at ``indices``."""
        self._ensure_mutable("resolve durations")
        return self._resolver.resolve(indices, durations)

    def resolve_narration_durations(self, durations: Sequence[float]) -> ResolutionReport:
        """Replace every narration estimate with measured durations, in ledger order."""
        self._ensure_mutable("resolve durations")
        return self._resolver.resolve_narration(durations)

    def freeze(self) -> FrozenScene:
        """End authoring and return the scene for querying.

        Calling ``freeze`` again returns the same frozen scene.
        """
        if self._frozen is None:
            self._registry.refresh_timestamps()
            self._timeline.freeze()
            self._registry.freeze()
            self._frozen = FrozenScene(
                timeline=self._timeline,
                registry=self._registry,
                bindings=self._bindings,
                theme=self._theme,
            )
            logger.debug(
                f"Froze scene: {len(self._timeline)} segments, {len(self._registry)} elements, "
                f"{len(self._bindings)} bindings, {self._timeline.total_duration():.3f}s"
            )
        return self._frozen
