"""Tests for duration resolution."""

from __future__ import annotations

import logging

import pytest

from storyframe.core.scene import (
    DurationCountMismatchError,
    DurationResolver,
    ElementRegistry,
    SegmentIndexError,
)


@pytest.fixture
def resolver(anchored_registry: ElementRegistry) -> DurationResolver:
    return DurationResolver(anchored_registry.timeline, anchored_registry)


class TestResolve:
    def test_end_to_end_redistribution(
        self, anchored_registry: ElementRegistry, resolver: DurationResolver
    ) -> None:
        """Measured narration shifts the second element from 2.5s to 1.5s."""
        timeline = anchored_registry.timeline
        assert timeline.total_duration() == pytest.approx(5.5)
        assert anchored_registry.get(1).created_at == pytest.approx(2.5)

        report = resolver.resolve_narration([1.0, 4.0])

        assert anchored_registry.get(1).created_at == pytest.approx(1.5)
        assert anchored_registry.get(1).created_index == 2
        assert timeline.total_duration() == pytest.approx(5.5)
        assert [seg.duration for seg in timeline.segments] == pytest.approx([1.0, 0.5, 4.0])
        assert report.segment_count == 2
        assert report.previous_total == pytest.approx(5.5)
        assert report.new_total == pytest.approx(5.5)
        assert report.delta == pytest.approx(0.0)

    def test_only_targeted_segments_change(
        self, anchored_registry: ElementRegistry, resolver: DurationResolver
    ) -> None:
        timeline = anchored_registry.timeline
        untouched = timeline.segments[1]
        resolver.resolve([2], [0.75])

        assert timeline.segments[1] is untouched
        assert timeline.duration_of(0) == 2.0
        assert timeline.duration_of(2) == 0.75

    def test_timestamps_equal_cumulative_start(
        self, anchored_registry: ElementRegistry, resolver: DurationResolver
    ) -> None:
        resolver.resolve_narration([0.3, 0.9])
        timeline = anchored_registry.timeline
        for element in anchored_registry:
            assert element.created_at == timeline.cumulative_start(element.created_index)

    def test_end_timestamps_recomputed(
        self, anchored_registry: ElementRegistry, resolver: DurationResolver
    ) -> None:
        anchored_registry.mark_ended(0, 2)
        assert anchored_registry.get(0).ended_at == pytest.approx(2.5)
        resolver.resolve_narration([1.0, 4.0])
        assert anchored_registry.get(0).ended_index == 2
        assert anchored_registry.get(0).ended_at == pytest.approx(1.5)

    def test_logs_summary(
        self, resolver: DurationResolver, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="storyframe.core.scene.resolver"):
            resolver.resolve_narration([1.0, 4.0])
        assert "Resolved 2 segment duration(s)" in caplog.text


class TestResolveValidation:
    def test_count_mismatch_mutates_nothing(
        self, anchored_registry: ElementRegistry, resolver: DurationResolver
    ) -> None:
        timeline = anchored_registry.timeline
        before = timeline.segments
        elements_before = anchored_registry.elements

        with pytest.raises(DurationCountMismatchError) as exc_info:
            resolver.resolve_narration([1.0, 2.0, 3.0])

        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3
        assert timeline.segments == before
        assert anchored_registry.elements == elements_before

    def test_count_mismatch_is_value_error(self, resolver: DurationResolver) -> None:
        with pytest.raises(ValueError):
            resolver.resolve_narration([1.0])

    def test_bad_index_mutates_nothing(
        self, anchored_registry: ElementRegistry, resolver: DurationResolver
    ) -> None:
        timeline = anchored_registry.timeline
        before = timeline.segments

        with pytest.raises(SegmentIndexError) as exc_info:
            resolver.resolve([0, 9], [1.0, 1.0])

        assert exc_info.value.index == 9
        assert exc_info.value.length == 3
        assert timeline.segments == before

    def test_duplicate_index_mutates_nothing(
        self, anchored_registry: ElementRegistry, resolver: DurationResolver
    ) -> None:
        timeline = anchored_registry.timeline
        before = timeline.segments

        with pytest.raises(ValueError, match="Duplicate segment index 2"):
            resolver.resolve([2, 0, 2], [1.0, 1.0, 4.0])

        assert timeline.segments == before

    @pytest.mark.parametrize("bad", [-1.0, float("nan"), float("inf")])
    def test_bad_duration_mutates_nothing(
        self, anchored_registry: ElementRegistry, resolver: DurationResolver, bad: float
    ) -> None:
        timeline = anchored_registry.timeline
        before = timeline.segments

        with pytest.raises(ValueError, match="finite and >= 0"):
            resolver.resolve_narration([1.0, bad])

        assert timeline.segments == before

    def test_empty_resolution_is_noop(
        self, anchored_registry: ElementRegistry, resolver: DurationResolver
    ) -> None:
        report = resolver.resolve([], [])
        assert report.segment_count == 0
        assert anchored_registry.timeline.total_duration() == pytest.approx(5.5)
