"""Element registry: identity, content, and ledger anchors of visual elements.

Elements are anchored to ledger indices, never to absolute seconds. The
effective timestamps stored on each element are derived values, recomputed
from the anchors whenever segment durations change.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from storyframe.core.scene.errors import SessionFrozenError, UnknownElementError
from storyframe.core.timeline.ledger import Timeline

logger = logging.getLogger(__name__)


class ElementKind(str, Enum):
    """Structural type of a visual element."""

    TITLE = "title"
    SECTION = "section"
    SHOW = "show"
    METRIC = "metric"
    STEPS = "steps"


class Direction(str, Enum):
    """Directional indicator for metric elements."""

    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


HEADER_KINDS = frozenset({ElementKind.TITLE, ElementKind.SECTION})


class Element(BaseModel):
    """A visual element and its ledger anchors.

    Attributes:
        id: Monotonic identifier, starting at 0.
        kind: Structural type.
        content: Primary text.
        items: List entries (Steps only).
        direction: Indicator (Metric only).
        created_index: Ledger length when the element was minted.
        ended_index: Ledger length when the element was cleared, if ever.
        created_at: Effective creation time in seconds.
        ended_at: Effective end time in seconds, if ended.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int = Field(..., ge=0)
    kind: ElementKind
    content: str
    items: tuple[str, ...] = ()
    direction: Direction | None = None
    created_index: int = Field(..., ge=0)
    ended_index: int | None = Field(default=None, ge=0)
    created_at: float = Field(default=0.0, ge=0.0)
    ended_at: float | None = None

    @property
    def is_header(self) -> bool:
        return self.kind in HEADER_KINDS

    @property
    def is_open(self) -> bool:
        return self.ended_index is None

    def visible_at(self, time: float) -> bool:
        """True when created at or before ``time`` and not yet ended."""
        if self.created_at > time:
            return False
        return self.ended_at is None or self.ended_at > time


class ElementRegistry:
    """Registry of every element minted against a timeline.

    Elements are never removed; ending an element only records its end
    anchor so it stays queryable for earlier times.

    Args:
        timeline: Ledger the anchors refer to.
    """

    def __init__(self, timeline: Timeline) -> None:
        self._timeline = timeline
        self._elements: list[Element] = []
        self._frozen = False

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def elements(self) -> tuple[Element, ...]:
        return tuple(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(tuple(self._elements))

    def __contains__(self, element_id: object) -> bool:
        return isinstance(element_id, int) and 0 <= element_id < len(self._elements)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject every later mint, end or timestamp refresh."""
        self._frozen = True

    def _ensure_mutable(self, operation: str) -> None:
        if self._frozen:
            raise SessionFrozenError(f"Cannot {operation}: element registry is frozen")

    @property
    def last_id(self) -> int | None:
        """Id of the most recently minted element, if any."""
        return len(self._elements) - 1 if self._elements else None

    def get(self, element_id: int) -> Element:
        """Look up an element by id.

        Raises:
            UnknownElementError: If no element has this id.
        """
        if element_id not in self:
            raise UnknownElementError(element_id)
        return self._elements[element_id]

    def mint(
        self,
        kind: ElementKind | str,
        content: str,
        items: Iterable[str] = (),
        direction: Direction | str | None = None,
    ) -> int:
        """Create an element anchored at the current ledger length.

        Args:
            kind: Structural type.
            content: Primary text.
            items: List entries; only Steps elements may have items.
            direction: Indicator; only Metric elements may have one
                (defaults to neutral for metrics).

        Returns:
            The new element's id.

        Raises:
            ValueError: If items or direction are given for a kind that
                doesn't carry them.
            SessionFrozenError: If the registry is frozen.
        """
        self._ensure_mutable("mint element")
        kind = ElementKind(kind)
        items = tuple(items)
        if items and kind != ElementKind.STEPS:
            raise ValueError(f"Only steps elements carry items, got {len(items)} for {kind.value}")
        if kind == ElementKind.METRIC:
            direction = Direction(direction) if direction is not None else Direction.NEUTRAL
        elif direction is not None:
            raise ValueError(f"Only metric elements carry a direction, got one for {kind.value}")

        anchor = len(self._timeline)
        element = Element(
            id=len(self._elements),
            kind=kind,
            content=content,
            items=items,
            direction=direction,
            created_index=anchor,
            created_at=self._timeline.cumulative_start(anchor),
        )
        self._elements.append(element)
        logger.debug(f"Minted {kind.value} element #{element.id} at anchor {anchor}")
        return element.id

    def mark_ended(self, element_id: int, anchor: int) -> bool:
        """Set the end anchor of an element that has none yet.

        Returns:
            True if the end anchor was recorded, False if the element was
            already ended (it is left unchanged).

        Raises:
            UnknownElementError: If no element has this id.
            IndexError: If anchor is outside ``0..len(timeline)``.
            ValueError: If anchor precedes the element's creation anchor.
            SessionFrozenError: If the registry is frozen.
        """
        self._ensure_mutable("end element")
        element = self.get(element_id)
        if element.ended_index is not None:
            return False
        if anchor < element.created_index:
            raise ValueError(
                f"End anchor {anchor} precedes creation anchor {element.created_index} "
                f"of element #{element_id}"
            )
        ended_at = self._timeline.cumulative_start(anchor)
        self._elements[element_id] = element.model_copy(
            update={"ended_index": anchor, "ended_at": ended_at}
        )
        return True

    def end_all_open(self, anchor: int) -> list[int]:
        """End every still-open element at ``anchor``.

        Returns:
            Ids of the elements that were ended, in creation order.
        """
        self._ensure_mutable("end elements")
        ended = [e.id for e in self._elements if e.is_open and self.mark_ended(e.id, anchor)]
        if ended:
            logger.debug(f"Ended {len(ended)} element(s) at anchor {anchor}")
        return ended

    def refresh_timestamps(self) -> None:
        """Recompute every element's effective timestamps from its anchors."""
        self._ensure_mutable("refresh timestamps")
        starts: dict[int, float] = {}

        def start_of(anchor: int) -> float:
            if anchor not in starts:
                starts[anchor] = self._timeline.cumulative_start(anchor)
            return starts[anchor]

        self._elements = [
            element.model_copy(
                update={
                    "created_at": start_of(element.created_index),
                    "ended_at": (
                        start_of(element.ended_index) if element.ended_index is not None else None
                    ),
                }
            )
            for element in self._elements
        ]

    def open_ids(self) -> list[int]:
        return [e.id for e in self._elements if e.is_open]

    def visible_at(self, time: float) -> list[Element]:
        """Elements visible at ``time``, in creation order."""
        return [e for e in self._elements if e.visible_at(time)]
