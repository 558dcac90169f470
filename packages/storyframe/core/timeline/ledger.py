"""Segment ledger: ordered segments, cumulative timing, frame mapping.

The ``Timeline`` is the backbone of scene sequencing. It stores an ordered,
append-only list of segments and derives every absolute time from their
durations. A segment's position in the list (its ledger index) never changes,
so anything anchored to an index stays valid when durations are resolved.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from storyframe.core.config.models import DEFAULT_FPS
from storyframe.core.timeline.errors import LedgerFrozenError
from storyframe.core.timeline.segments import Segment, SegmentKind

logger = logging.getLogger(__name__)


class Timeline:
    """An ordered sequence of segments representing the full video timeline.

    Args:
        fps: Frames per second used for frame mapping.

    Raises:
        ValueError: If fps is not positive.
    """

    def __init__(self, fps: int = DEFAULT_FPS) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be > 0, got {fps}")
        self._fps = fps
        self._segments: list[Segment] = []
        self._frozen = False

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Segments in ledger order (read-only view)."""
        return tuple(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(tuple(self._segments))

    def __getitem__(self, index: int) -> Segment:
        return self._segments[index]

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject every later append or duration update."""
        self._frozen = True

    def _ensure_mutable(self, operation: str) -> None:
        if self._frozen:
            raise LedgerFrozenError(f"Cannot {operation}: timeline is frozen")

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, segment: Segment) -> int:
        """Append a segment and return its ledger index.

        Raises:
            LedgerFrozenError: If the timeline is frozen.
        """
        self._ensure_mutable("append segment")
        self._segments.append(segment)
        index = len(self._segments) - 1
        logger.debug(f"Appended {segment.kind} segment #{index} ({segment.duration:.3f}s)")
        return index

    def update_duration(self, index: int, new_duration: float) -> bool:
        """Replace the duration of the segment at ``index``.

        Args:
            index: Ledger index of the segment.
            new_duration: New duration in seconds.

        Returns:
            True if the index was valid and the duration was updated, False if
            the index is out of range (the timeline is left unchanged).

        Raises:
            ValidationError: If new_duration is negative or not finite.
            LedgerFrozenError: If the timeline is frozen.
        """
        self._ensure_mutable("update duration")
        if not 0 <= index < len(self._segments):
            logger.debug(f"Ignoring duration update for out-of-range index {index}")
            return False
        self._segments[index] = self._segments[index].with_duration(new_duration)
        return True

    # ------------------------------------------------------------------
    # Timing queries
    # ------------------------------------------------------------------

    def duration_of(self, index: int) -> float:
        """Duration of the segment at ``index``.

        Raises:
            IndexError: If index is out of range.
        """
        if not 0 <= index < len(self._segments):
            raise IndexError(f"Segment index {index} out of range (0..{len(self._segments) - 1})")
        return self._segments[index].duration

    def cumulative_start(self, index: int) -> float:
        """Sum of durations of all segments strictly before ``index``.

        ``index == len(timeline)`` is allowed and yields the total duration,
        which is where anything minted at the current end of the ledger starts.

        Raises:
            IndexError: If index is negative or greater than the ledger length.
        """
        if not 0 <= index <= len(self._segments):
            raise IndexError(f"Anchor index {index} out of range (0..{len(self._segments)})")
        return sum((seg.duration for seg in self._segments[:index]), 0.0)

    def total_duration(self) -> float:
        """Total duration of the timeline in seconds."""
        return sum((seg.duration for seg in self._segments), 0.0)

    def frame_count(self, fps: int | None = None) -> int:
        """Number of frames needed to cover the timeline at ``fps``.

        Args:
            fps: Frame rate; defaults to the timeline's own.

        Returns:
            ceil(total_duration * fps), or 0 for an empty timeline.
        """
        rate = self._fps if fps is None else fps
        total = self.total_duration()
        if total <= 0.0:
            return 0
        return math.ceil(total * rate)

    def total_frames(self) -> int:
        """Total number of frames at the timeline's FPS."""
        return self.frame_count()

    def frame_at(self, time: float) -> int:
        """Map a time in seconds to a frame number.

        Negative time maps to frame 0; time at or beyond the end maps to the
        last valid frame (or 0 for an empty timeline).
        """
        total = self.total_frames()
        if total == 0 or time <= 0.0:
            return 0
        frame = math.floor(time * self._fps)
        return min(frame, total - 1)

    def segments_in_range(self, start: float, end: float) -> list[tuple[float, Segment]]:
        """Find all segments overlapping the time range ``[start, end)``.

        Returns:
            ``(segment_start_time, segment)`` pairs, in ledger order, for
            every segment whose span ``[cs, cs + duration)`` intersects the
            query range.
        """
        result: list[tuple[float, Segment]] = []
        cursor = 0.0

        for seg in self._segments:
            seg_end = cursor + seg.duration
            if cursor < end and seg_end > start:
                result.append((cursor, seg))
            cursor = seg_end
            # Past the query range
            if cursor >= end:
                break

        return result

    def segments_overlapping(self, start: float, end: float) -> list[tuple[float, Segment]]:
        """Alias of :meth:`segments_in_range`."""
        return self.segments_in_range(start, end)

    def indices_of_kind(self, kind: SegmentKind | str) -> list[int]:
        """Ledger indices of every segment of ``kind``, in ledger order."""
        wanted = SegmentKind(kind)
        return [i for i, seg in enumerate(self._segments) if seg.kind == wanted.value]

    def narration_indices(self) -> list[int]:
        """Indices of all narration segments, in ledger order."""
        return self.indices_of_kind(SegmentKind.NARRATION)

    def __repr__(self) -> str:
        return (
            f"Timeline(fps={self._fps}, segments={len(self._segments)}, "
            f"total={self.total_duration():.3f}s)"
        )


__all__ = [
    "Timeline",
]
