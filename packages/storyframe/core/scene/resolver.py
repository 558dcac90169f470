"""Duration resolution: replace estimated segment durations with measured ones.

Resolution is all-or-nothing. Every input is validated before the ledger is
touched; once validated, each duration is written by ledger index and every
element's effective timestamps are recomputed from its (unchanged) anchors.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from storyframe.core.scene.elements import ElementRegistry
from storyframe.core.scene.errors import DurationCountMismatchError, SegmentIndexError
from storyframe.core.timeline.ledger import Timeline

logger = logging.getLogger(__name__)


class ResolutionReport(BaseModel):
    """Summary of a completed resolution pass."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    segment_count: int
    previous_total: float
    new_total: float

    @property
    def delta(self) -> float:
        return self.new_total - self.previous_total


class DurationResolver:
    """Applies measured durations to a timeline and its element registry.

    Args:
        timeline: Ledger whose durations are rewritten.
        registry: Elements whose effective timestamps are recomputed.
    """

    def __init__(self, timeline: Timeline, registry: ElementRegistry) -> None:
        self._timeline = timeline
        self._registry = registry

    def validate(self, indices: Sequence[int], durations: Sequence[float]) -> None:
        """Check a resolution request without applying it.

        Raises:
            DurationCountMismatchError: If the sequences differ in length.
            SegmentIndexError: If any index is outside the ledger.
            ValueError: If an index repeats, or any duration is negative or
                not finite.
        """
        if len(indices) != len(durations):
            raise DurationCountMismatchError(expected=len(indices), actual=len(durations))

        length = len(self._timeline)
        seen: set[int] = set()
        for index in indices:
            if not 0 <= index < length:
                raise SegmentIndexError(index=index, length=length)
            if index in seen:
                raise ValueError(f"Duplicate segment index {index} in one resolution batch")
            seen.add(index)

        for duration in durations:
            if not math.isfinite(duration) or duration < 0.0:
                raise ValueError(f"Durations must be finite and >= 0, got {duration}")

    def resolve(self, indices: Sequence[int], durations: Sequence[float]) -> ResolutionReport:
        """Write ``durations`` to the segments at ``indices``.

        Args:
            indices: Ledger indices to update.
            durations: New durations in seconds, paired with ``indices``.

        Returns:
            Report with previous and new totals.

        Raises:
            DurationCountMismatchError: If the sequences differ in length.
            SegmentIndexError: If any index is outside the ledger.
            ValueError: If an index repeats, or any duration is negative or
                not finite.
        """
        indices = list(indices)
        durations = [float(d) for d in durations]
        self.validate(indices, durations)

        previous_total = self._timeline.total_duration()
        for index, duration in zip(indices, durations, strict=True):
            self._timeline.update_duration(index, duration)
        self._registry.refresh_timestamps()

        report = ResolutionReport(
            segment_count=len(indices),
            previous_total=previous_total,
            new_total=self._timeline.total_duration(),
        )
        logger.info(
            f"Resolved {report.segment_count} segment duration(s): "
            f"{report.previous_total:.3f}s -> {report.new_total:.3f}s"
        )
        return report

    def resolve_narration(self, durations: Sequence[float]) -> ResolutionReport:
        """Resolve every narration segment, in ledger order."""
        return self.resolve(self._timeline.narration_indices(), durations)
