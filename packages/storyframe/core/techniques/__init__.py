"""Technique library: pure progress-to-output interpolation.

Usage:
    from storyframe.core.techniques import FadeUp, Stagger, Ease

    technique = Stagger(inner=FadeUp().with_ease(Ease.OUT_BACK), count=3)
"""

from storyframe.core.techniques.base import ProgressRemap, Technique
from storyframe.core.techniques.data import CountUp
from storyframe.core.techniques.easing import Ease, WithEase, apply_ease, spring
from storyframe.core.techniques.models import TechniqueOutput
from storyframe.core.techniques.motion import Scale, Slide
from storyframe.core.techniques.registry import TECHNIQUE_TYPES, build_technique
from storyframe.core.techniques.reveals import FadeIn, FadeUp
from storyframe.core.techniques.staging import Stagger

__all__ = [
    "TECHNIQUE_TYPES",
    "CountUp",
    "Ease",
    "FadeIn",
    "FadeUp",
    "ProgressRemap",
    "Scale",
    "Slide",
    "Stagger",
    "Technique",
    "TechniqueOutput",
    "WithEase",
    "apply_ease",
    "build_technique",
    "spring",
]
