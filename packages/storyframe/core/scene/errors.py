"""Scene engine exceptions."""

from __future__ import annotations

from storyframe.core.timeline.errors import LedgerFrozenError


class StoryframeError(Exception):
    """Base exception for all scene engine errors."""


class DurationCountMismatchError(StoryframeError, ValueError):
    """Raised when measured durations don't line up with the target segments.

    Nothing is mutated when this is raised.

    Attributes:
        expected: Number of target segments.
        actual: Number of durations provided.
    """

    def __init__(self, *, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Duration count mismatch: expected {expected} durations, got {actual}"
        )


class SegmentIndexError(StoryframeError, IndexError):
    """Raised when a resolution targets an index outside the ledger.

    Attributes:
        index: Offending ledger index.
        length: Ledger length at the time of the request.
    """

    def __init__(self, *, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Segment index {index} out of range for ledger of length {length}")


class SessionFrozenError(StoryframeError, LedgerFrozenError):
    """Raised when an authoring operation is attempted after freezing."""


class SceneNotFrozenError(StoryframeError):
    """Raised when a query is attempted before the scene is frozen."""


class UnknownElementError(StoryframeError, KeyError):
    """Raised when an element id does not exist in the registry."""

    def __init__(self, element_id: int) -> None:
        self.element_id = element_id
        super().__init__(f"Unknown element id {element_id}")

    def __str__(self) -> str:
        return str(self.args[0])
