"""Easing curves and the easing wrapper technique.

Standard curves come from ``easing-functions``; the damped spring is local
because the library has no curve that settles exactly on 1.0 at ``t = 1``.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum
from typing import Protocol

from easing_functions import (
    BackEaseOut,
    BounceEaseOut,
    CubicEaseInOut,
    QuadEaseIn,
    QuadEaseOut,
)
from pydantic import SerializeAsAny

from storyframe.core.techniques.base import ProgressRemap, Technique
from storyframe.core.techniques.models import TechniqueOutput


class _EasingCallable(Protocol):
    def ease(self, t: float) -> float: ...


_EASING_DEFAULTS = {
    "start": 0.0,
    "end": 1.0,
    "duration": 1.0,
}

SPRING_DAMPING = 5.0
SPRING_FREQUENCY = 3.0


def _make_easing(easing_cls: type[_EasingCallable]) -> _EasingCallable:
    return easing_cls(**_EASING_DEFAULTS)


def spring(t: float) -> float:
    """Damped spring: overshoots, oscillates, and settles on 1.0 at t=1.

    The ``(1 - t)`` envelope forces the residual oscillation to zero at the
    end of the window so the curve lands exactly.
    """
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    envelope = (1.0 - t) * math.exp(-SPRING_DAMPING * t)
    return 1.0 - envelope * math.cos(SPRING_FREQUENCY * math.pi * t)


def _linear(t: float) -> float:
    return t


class Ease(str, Enum):
    """Easing curves a technique can be remapped through.

    Attributes:
        LINEAR: Identity.
        EASE_IN: Quadratic ease-in.
        EASE_OUT: Quadratic ease-out.
        EASE_IN_OUT: Cubic ease-in-out.
        OUT_BACK: Overshoots past 1.0 then settles.
        OUT_BOUNCE: Bounces against 1.0.
        SPRING: Damped spring.
    """

    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"
    OUT_BACK = "out_back"
    OUT_BOUNCE = "out_bounce"
    SPRING = "spring"

    def apply(self, t: float) -> float:
        """Remap progress ``t`` through this curve."""
        return _EASERS[self](t)


def _library_curve(easing: _EasingCallable) -> Callable[[float], float]:
    def _curve(t: float) -> float:
        return float(easing.ease(t))

    return _curve


_EASERS: dict[Ease, Callable[[float], float]] = {
    Ease.LINEAR: _linear,
    Ease.EASE_IN: _library_curve(_make_easing(QuadEaseIn)),
    Ease.EASE_OUT: _library_curve(_make_easing(QuadEaseOut)),
    Ease.EASE_IN_OUT: _library_curve(_make_easing(CubicEaseInOut)),
    Ease.OUT_BACK: _library_curve(_make_easing(BackEaseOut)),
    Ease.OUT_BOUNCE: _library_curve(_make_easing(BounceEaseOut)),
    Ease.SPRING: spring,
}


def apply_ease(ease: Ease | str, t: float) -> float:
    """Remap ``t`` through the named easing curve."""
    return Ease(ease).apply(t)


class WithEase(Technique):
    """Wrap a technique so its progress is remapped through an easing curve.

    Name and duration are those of the wrapped technique. Wrapping a group
    technique eases every item's local progress rather than the group's.
    Nested wrappers compose outermost first.
    """

    inner: SerializeAsAny[Technique]
    ease: Ease = Ease.LINEAR

    @property
    def duration(self) -> float:  # type: ignore[override]
        return self.inner.duration

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.inner.name

    @property
    def is_group(self) -> bool:
        return self.inner.is_group

    @property
    def group_size(self) -> int:
        return self.inner.group_size

    def evaluate(self, progress: float) -> TechniqueOutput:
        if self.inner.is_group:
            return self.apply_for_group(self.group_size, progress)[0]
        return self.inner.evaluate(self.ease.apply(progress))

    def apply_for_group(
        self,
        item_count: int,
        progress: float,
        remap: ProgressRemap | None = None,
    ) -> list[TechniqueOutput]:
        ease = self.ease

        if remap is None:
            composed: ProgressRemap = ease.apply
        else:

            def composed(t: float) -> float:
                return ease.apply(remap(t))

        return self.inner.apply_for_group(item_count, progress, remap=composed)


__all__ = [
    "Ease",
    "WithEase",
    "apply_ease",
    "spring",
]
