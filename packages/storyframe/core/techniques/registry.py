"""Build techniques from plain data (config files, YAML scene fragments).

Example:
    >>> build_technique({"type": "stagger", "count": 3,
    ...                  "inner": {"type": "fade_up", "ease": "out_back"}})
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from storyframe.core.techniques.base import Technique
from storyframe.core.techniques.data import CountUp
from storyframe.core.techniques.easing import Ease
from storyframe.core.techniques.motion import Scale, Slide
from storyframe.core.techniques.reveals import FadeIn, FadeUp
from storyframe.core.techniques.staging import Stagger

logger = logging.getLogger(__name__)

TECHNIQUE_TYPES: dict[str, type[Technique]] = {
    "fade_in": FadeIn,
    "fade_up": FadeUp,
    "slide": Slide,
    "scale": Scale,
    "count_up": CountUp,
    "stagger": Stagger,
}


def build_technique(spec: Mapping[str, Any]) -> Technique:
    """Build a technique from a mapping.

    Keys:
        type: One of ``TECHNIQUE_TYPES`` (required).
        ease: Optional easing curve name, applied around the technique.
        inner: Nested technique mapping (stagger only).
        Any other key is passed to the technique model.

    Raises:
        ValueError: If the type is missing or unknown, or ``ease`` is invalid.
        ValidationError: If the remaining parameters are invalid.
    """
    params = dict(spec)
    type_name = params.pop("type", None)
    if type_name is None:
        raise ValueError("Technique spec is missing 'type'")

    technique_cls = TECHNIQUE_TYPES.get(str(type_name).lower())
    if technique_cls is None:
        raise ValueError(
            f"Unknown technique type '{type_name}'. Available: {sorted(TECHNIQUE_TYPES)}"
        )

    ease = params.pop("ease", None)
    if "inner" in params:
        inner = params["inner"]
        if isinstance(inner, Mapping):
            params["inner"] = build_technique(inner)

    technique = technique_cls.model_validate(params)
    if ease is not None:
        technique = technique.with_ease(Ease(ease))

    logger.debug(f"Built technique {technique.name} ({technique.duration:.3f}s)")
    return technique
