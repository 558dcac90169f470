"""Vertical layout of co-visible elements.

Layout is a pure function of the visible set. Headers (titles, sections) sit
above body elements; creation order is kept within each group.
"""

from __future__ import annotations

from collections.abc import Sequence

from storyframe.core.scene.elements import Element
from storyframe.core.utils.math import evenly_spaced

CENTER_Y = 0.5
PAIR_Y = (0.3, 0.65)
SPREAD_TOP_Y = 0.2
SPREAD_BOTTOM_Y = 0.8


def layout_order(elements: Sequence[Element]) -> list[Element]:
    """Headers first, then bodies; creation order within each group."""
    return sorted(elements, key=lambda e: (not e.is_header, e.id))


def layout_positions(count: int) -> list[float]:
    """Vertical position fractions (0 = top, 1 = bottom) for ``count`` slots."""
    if count <= 0:
        return []
    if count == 1:
        return [CENTER_Y]
    if count == 2:
        return list(PAIR_Y)
    return evenly_spaced(SPREAD_TOP_Y, SPREAD_BOTTOM_Y, count)


def assign_layout(elements: Sequence[Element]) -> dict[int, float]:
    """Assign a vertical position fraction to each visible element.

    Args:
        elements: The elements visible at the query time.

    Returns:
        Mapping of element id to position fraction.

    Example:
        >>> assign_layout([section, show])
        {0: 0.3, 1: 0.65}
    """
    ordered = layout_order(elements)
    positions = layout_positions(len(ordered))
    return {element.id: y for element, y in zip(ordered, positions, strict=True)}
