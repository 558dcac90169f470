"""Tests for easing curves and the easing wrapper."""

from __future__ import annotations

import pytest

from storyframe.core.techniques import (
    Ease,
    FadeIn,
    FadeUp,
    Stagger,
    WithEase,
    apply_ease,
    spring,
)


class TestEaseCurves:
    """Tests for the curve functions themselves."""

    @pytest.mark.parametrize("ease", list(Ease))
    def test_endpoints(self, ease: Ease) -> None:
        """Every curve starts at 0 and lands on 1."""
        assert ease.apply(0.0) == pytest.approx(0.0, abs=1e-9)
        assert ease.apply(1.0) == pytest.approx(1.0, abs=1e-9)

    def test_linear_is_identity(self) -> None:
        assert Ease.LINEAR.apply(0.37) == pytest.approx(0.37)

    def test_quadratic_in_and_out(self) -> None:
        assert Ease.EASE_IN.apply(0.5) == pytest.approx(0.25)
        assert Ease.EASE_OUT.apply(0.5) == pytest.approx(0.75)

    def test_cubic_in_out_is_symmetric(self) -> None:
        assert Ease.EASE_IN_OUT.apply(0.5) == pytest.approx(0.5)
        assert Ease.EASE_IN_OUT.apply(0.25) < 0.25
        assert Ease.EASE_IN_OUT.apply(0.75) > 0.75

    def test_out_back_overshoots(self) -> None:
        samples = [Ease.OUT_BACK.apply(i / 50) for i in range(51)]
        assert max(samples) > 1.0

    def test_out_bounce_stays_in_range(self) -> None:
        samples = [Ease.OUT_BOUNCE.apply(i / 50) for i in range(51)]
        assert all(-1e-9 <= s <= 1.0 + 1e-9 for s in samples)

    def test_spring_overshoots_and_settles(self) -> None:
        samples = [spring(i / 100) for i in range(101)]
        assert max(samples) > 1.0
        assert samples[-1] == 1.0

    def test_apply_ease_accepts_names(self) -> None:
        assert apply_ease("ease_in", 0.5) == pytest.approx(0.25)

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError):
            apply_ease("wobble", 0.5)


class TestWithEase:
    """Tests for wrapping techniques with an ease."""

    def test_name_and_duration_delegate(self) -> None:
        eased = FadeIn(duration=0.8).with_ease(Ease.EASE_IN)
        assert isinstance(eased, WithEase)
        assert eased.name == "FadeIn"
        assert eased.duration == pytest.approx(0.8)

    def test_remaps_progress(self) -> None:
        eased = FadeIn().with_ease(Ease.EASE_IN)
        assert eased.apply(0.5).opacity == pytest.approx(0.25)

    def test_linear_is_transparent(self) -> None:
        plain = FadeUp()
        eased = plain.with_ease(Ease.LINEAR)
        for p in (0.0, 0.3, 0.7, 1.0):
            assert eased.apply(p) == plain.apply(p)

    def test_overshoot_reaches_inner_technique(self) -> None:
        """Progress is clamped before easing, not after."""
        eased = FadeUp().with_ease(Ease.OUT_BACK)
        translations = [eased.apply(i / 50).translate_y for i in range(51)]
        assert min(translations) < 0.0

    def test_nested_easing_composes_outer_first(self) -> None:
        inner = FadeIn().with_ease(Ease.EASE_IN)
        outer = inner.with_ease(Ease.EASE_OUT)
        expected = Ease.EASE_IN.apply(Ease.EASE_OUT.apply(0.3))
        assert outer.apply(0.3).opacity == pytest.approx(expected)

    def test_with_ease_accepts_string(self) -> None:
        eased = FadeIn().with_ease("spring")
        assert eased.ease is Ease.SPRING


class TestEasedStagger:
    """Easing composes with per-item delegation."""

    @pytest.fixture
    def stagger(self) -> Stagger:
        return Stagger(inner=FadeIn(duration=1.0), delay=0.5, count=3)

    def test_wrapping_stagger_eases_each_item(self, stagger: Stagger) -> None:
        eased = stagger.with_ease(Ease.EASE_IN)
        outputs = eased.apply_for_group(3, 0.5)
        # Group progress is not eased: item 1 sits at local 0.5, eased to 0.25.
        assert [o.opacity for o in outputs] == pytest.approx([1.0, 0.25, 0.0])

    def test_wrapped_stagger_stays_a_group(self, stagger: Stagger) -> None:
        eased = stagger.with_ease(Ease.EASE_OUT)
        assert eased.is_group is True
        assert eased.group_size == 3
        assert eased.duration == pytest.approx(stagger.duration)

    def test_wrapped_stagger_apply_is_first_item(self, stagger: Stagger) -> None:
        eased = stagger.with_ease(Ease.EASE_IN)
        # Group progress 0.25 -> 0.5s elapsed -> item 0 local 0.5 -> eased 0.25.
        assert eased.apply(0.25).opacity == pytest.approx(0.25)

    def test_easing_inside_stagger(self) -> None:
        stagger = Stagger(inner=FadeIn(duration=1.0).with_ease(Ease.EASE_IN), delay=0.5, count=3)
        outputs = stagger.apply_for_group(3, 0.5)
        assert [o.opacity for o in outputs] == pytest.approx([1.0, 0.25, 0.0])

    def test_matches_inner_eased_stagger(self, stagger: Stagger) -> None:
        """Easing outside a stagger equals easing its inner technique."""
        outside = stagger.with_ease(Ease.EASE_IN_OUT)
        inside = Stagger(
            inner=FadeIn(duration=1.0).with_ease(Ease.EASE_IN_OUT), delay=0.5, count=3
        )
        for p in (0.1, 0.4, 0.65, 0.9):
            assert outside.apply_for_group(3, p) == inside.apply_for_group(3, p)
