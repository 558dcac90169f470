"""Frame snapshots: layout assignment and frame state compilation."""

from storyframe.core.frame.compiler import FrameCompiler, compile_frame_state
from storyframe.core.frame.layout import assign_layout, layout_order, layout_positions
from storyframe.core.frame.models import (
    ElementState,
    FrameState,
    ItemState,
    KindState,
    MetricKind,
    SectionKind,
    ShowKind,
    StepsKind,
    ThemeState,
    TitleKind,
    kind_state_for,
)

__all__ = [
    "ElementState",
    "FrameCompiler",
    "FrameState",
    "ItemState",
    "KindState",
    "MetricKind",
    "SectionKind",
    "ShowKind",
    "StepsKind",
    "ThemeState",
    "TitleKind",
    "assign_layout",
    "compile_frame_state",
    "kind_state_for",
    "layout_order",
    "layout_positions",
]
