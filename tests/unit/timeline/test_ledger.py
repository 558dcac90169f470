"""Tests for the segment ledger."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from storyframe.core.timeline import (
    AnimationSegment,
    ClipSegment,
    LedgerFrozenError,
    NarrationSegment,
    SegmentKind,
    SilenceSegment,
    Timeline,
    TimelineBuilder,
)


class TestAppend:
    """Tests for appending segments."""

    def test_append_returns_ledger_index(self, empty_timeline: Timeline) -> None:
        """Each append returns the index of the new segment."""
        assert empty_timeline.append(SilenceSegment(duration=1.0)) == 0
        assert empty_timeline.append(SilenceSegment(duration=1.0)) == 1
        assert len(empty_timeline) == 2

    def test_segments_preserve_order(self, mixed_timeline: Timeline) -> None:
        """Segments come back in ledger order."""
        kinds = [seg.kind for seg in mixed_timeline.segments]
        assert kinds == ["narration", "silence", "animation", "clip"]

    def test_segments_is_read_only_copy(self, mixed_timeline: Timeline) -> None:
        """The segments view is a tuple snapshot."""
        assert isinstance(mixed_timeline.segments, tuple)

    def test_invalid_fps_raises(self) -> None:
        """Non-positive fps is rejected."""
        with pytest.raises(ValueError, match="fps must be > 0"):
            Timeline(fps=0)

    def test_negative_duration_rejected(self) -> None:
        """Segments cannot carry negative durations."""
        with pytest.raises(ValidationError):
            SilenceSegment(duration=-1.0)


class TestTiming:
    """Tests for cumulative timing queries."""

    def test_empty_timeline(self, empty_timeline: Timeline) -> None:
        """An empty timeline has zero duration and no frames."""
        assert empty_timeline.total_duration() == 0.0
        assert empty_timeline.total_frames() == 0
        assert empty_timeline.frame_at(1.0) == 0

    def test_total_is_sum_of_durations(self, mixed_timeline: Timeline) -> None:
        """Total duration equals the sum of segment durations."""
        expected = sum(seg.duration for seg in mixed_timeline.segments)
        assert mixed_timeline.total_duration() == pytest.approx(expected)
        assert mixed_timeline.total_duration() == pytest.approx(6.0)

    def test_duration_of(self, mixed_timeline: Timeline) -> None:
        """duration_of reads a single segment."""
        assert mixed_timeline.duration_of(2) == pytest.approx(1.0)

    def test_duration_of_out_of_range(self, mixed_timeline: Timeline) -> None:
        """duration_of raises for indices past the end."""
        with pytest.raises(IndexError):
            mixed_timeline.duration_of(4)

    @pytest.mark.parametrize(
        ("index", "expected"),
        [(0, 0.0), (1, 2.0), (2, 2.5), (3, 3.5), (4, 6.0)],
    )
    def test_cumulative_start(self, mixed_timeline: Timeline, index: int, expected: float) -> None:
        """cumulative_start sums durations strictly before the index."""
        assert mixed_timeline.cumulative_start(index) == pytest.approx(expected)

    def test_cumulative_start_past_length_raises(self, mixed_timeline: Timeline) -> None:
        """Anchors beyond the ledger length are invalid."""
        with pytest.raises(IndexError):
            mixed_timeline.cumulative_start(5)

    def test_frame_count_rounds_up(self) -> None:
        """Frame count is the ceiling of duration times fps."""
        timeline = TimelineBuilder().fps(30).silence(1.01).build()
        assert timeline.total_frames() == 31
        assert timeline.frame_count(fps=60) == 61

    def test_builder_sets_fps(self) -> None:
        """The builder passes its fps through."""
        timeline = TimelineBuilder().fps(24).silence(1.0).build()
        assert timeline.fps == 24
        assert timeline.total_frames() == 24


class TestFrameAt:
    """Tests for time-to-frame mapping."""

    def test_start_is_frame_zero(self, mixed_timeline: Timeline) -> None:
        assert mixed_timeline.frame_at(0.0) == 0

    def test_negative_time_clamps_to_zero(self, mixed_timeline: Timeline) -> None:
        assert mixed_timeline.frame_at(-3.0) == 0

    def test_interior_time_floors(self, mixed_timeline: Timeline) -> None:
        """Frame index is floor(time * fps)."""
        assert mixed_timeline.frame_at(1.0) == 30
        assert mixed_timeline.frame_at(1.02) == 30

    def test_end_clamps_to_last_frame(self, mixed_timeline: Timeline) -> None:
        """Times at or past the end map to the last frame."""
        last = mixed_timeline.total_frames() - 1
        assert mixed_timeline.frame_at(6.0) == last
        assert mixed_timeline.frame_at(100.0) == last

    def test_monotonic_non_decreasing(self, mixed_timeline: Timeline) -> None:
        """frame_at never decreases as time increases."""
        times = [-1.0 + i * 0.037 for i in range(250)]
        frames = [mixed_timeline.frame_at(t) for t in times]
        assert frames == sorted(frames)


class TestSegmentsInRange:
    """Tests for range overlap queries."""

    def test_range_inside_one_segment(self, mixed_timeline: Timeline) -> None:
        hits = mixed_timeline.segments_in_range(0.5, 1.0)
        assert len(hits) == 1
        start, seg = hits[0]
        assert start == pytest.approx(0.0)
        assert isinstance(seg, NarrationSegment)

    def test_range_spanning_segments(self, mixed_timeline: Timeline) -> None:
        hits = mixed_timeline.segments_in_range(1.5, 3.0)
        assert [seg.kind for _, seg in hits] == ["narration", "silence", "animation"]
        assert [start for start, _ in hits] == pytest.approx([0.0, 2.0, 2.5])

    def test_range_end_is_exclusive(self, mixed_timeline: Timeline) -> None:
        """A segment starting exactly at the range end is excluded."""
        hits = mixed_timeline.segments_in_range(1.0, 2.0)
        assert len(hits) == 1
        assert hits[0][1].kind == "narration"

    def test_segment_end_is_exclusive(self, mixed_timeline: Timeline) -> None:
        """A segment ending exactly at the range start is excluded."""
        hits = mixed_timeline.segments_in_range(2.0, 2.1)
        assert [seg.kind for _, seg in hits] == ["silence"]

    def test_range_past_end_is_empty(self, mixed_timeline: Timeline) -> None:
        assert mixed_timeline.segments_in_range(10.0, 11.0) == []

    def test_segments_overlapping_alias(self, mixed_timeline: Timeline) -> None:
        assert mixed_timeline.segments_overlapping(0.0, 6.0) == mixed_timeline.segments_in_range(
            0.0, 6.0
        )


class TestUpdateDuration:
    """Tests for in-place duration updates."""

    def test_update_valid_index(self, mixed_timeline: Timeline) -> None:
        assert mixed_timeline.update_duration(0, 4.0) is True
        assert mixed_timeline.duration_of(0) == pytest.approx(4.0)
        assert mixed_timeline.total_duration() == pytest.approx(8.0)

    def test_update_keeps_segment_payload(self, mixed_timeline: Timeline) -> None:
        """Only the duration changes; text and kind are preserved."""
        mixed_timeline.update_duration(0, 1.0)
        seg = mixed_timeline.segments[0]
        assert isinstance(seg, NarrationSegment)
        assert seg.text == "Hello world"

    def test_update_out_of_range_returns_false(self, mixed_timeline: Timeline) -> None:
        """Invalid indices fail without mutating anything."""
        before = mixed_timeline.segments
        assert mixed_timeline.update_duration(4, 1.0) is False
        assert mixed_timeline.update_duration(-1, 1.0) is False
        assert mixed_timeline.segments == before

    def test_update_does_not_touch_other_segments(self, mixed_timeline: Timeline) -> None:
        before = [seg.duration for seg in mixed_timeline.segments]
        mixed_timeline.update_duration(2, 0.25)
        after = [seg.duration for seg in mixed_timeline.segments]
        assert after[:2] == before[:2]
        assert after[3] == before[3]


class TestFreeze:
    """Tests for the frozen ledger."""

    def test_frozen_ledger_rejects_mutation(self, mixed_timeline: Timeline) -> None:
        before = mixed_timeline.segments
        mixed_timeline.freeze()

        assert mixed_timeline.is_frozen
        with pytest.raises(LedgerFrozenError):
            mixed_timeline.append(SilenceSegment(duration=1.0))
        with pytest.raises(LedgerFrozenError):
            mixed_timeline.update_duration(0, 5.0)
        assert mixed_timeline.segments == before

    def test_frozen_ledger_still_answers_queries(self, mixed_timeline: Timeline) -> None:
        mixed_timeline.freeze()
        assert mixed_timeline.total_duration() == pytest.approx(6.0)
        assert mixed_timeline.cumulative_start(2) == pytest.approx(2.5)
        assert mixed_timeline.frame_at(1.0) == 30


class TestKindQueries:
    """Tests for filtering the ledger by kind."""

    def test_indices_of_kind(self) -> None:
        timeline = (
            TimelineBuilder()
            .narration("a", 1.0)
            .silence(0.3)
            .narration("b", 1.0)
            .clip("c.wav", 2.0)
            .build()
        )
        assert timeline.narration_indices() == [0, 2]
        assert timeline.indices_of_kind(SegmentKind.CLIP) == [3]
        assert timeline.indices_of_kind("silence") == [1]

    def test_segment_variants(self) -> None:
        """Each variant reports its kind tag."""
        assert AnimationSegment(name="Slide", duration=0.5).kind == SegmentKind.ANIMATION.value
        assert ClipSegment(reference="a.mp4", duration=1.0).kind == SegmentKind.CLIP.value
