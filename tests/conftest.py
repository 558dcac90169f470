"""Shared pytest fixtures for storyframe tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from storyframe.core.scene.elements import ElementKind, ElementRegistry
from storyframe.core.scene.session import SceneSession
from storyframe.core.timeline.builder import TimelineBuilder
from storyframe.core.timeline.ledger import Timeline

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Timeline Fixtures
# ============================================================================


@pytest.fixture
def empty_timeline() -> Timeline:
    """Create an empty timeline at the default 30 fps."""
    return Timeline()


@pytest.fixture
def mixed_timeline() -> Timeline:
    """Create a timeline with one segment of each kind (total 6.0s)."""
    return (
        TimelineBuilder()
        .narration("Hello world", 2.0)
        .silence(0.5)
        .animation("FadeIn", 1.0)
        .clip("intro.mp4", 2.5)
        .build()
    )


@pytest.fixture
def narration_timeline() -> Timeline:
    """Create the ledger [Narration 2.0, Animation 0.5, Narration 3.0]."""
    return (
        TimelineBuilder()
        .narration("First narration", 2.0)
        .animation("FadeIn", 0.5)
        .narration("Second narration", 3.0)
        .build()
    )


@pytest.fixture
def anchored_registry(narration_timeline: Timeline) -> ElementRegistry:
    """Create a registry with elements anchored at ledger indices 0 and 2.

    Elements are minted while the ledger grows, so the anchors come from the
    real minting path. Use ``registry.timeline`` for the ledger.
    """
    staging = Timeline(fps=narration_timeline.fps)
    registry = ElementRegistry(staging)
    segments = narration_timeline.segments

    registry.mint(ElementKind.TITLE, "Intro")
    staging.append(segments[0])
    staging.append(segments[1])
    registry.mint(ElementKind.SHOW, "Body")
    staging.append(segments[2])
    return registry


# ============================================================================
# Session Fixtures
# ============================================================================


@pytest.fixture
def session() -> SceneSession:
    """Create a fresh authoring session with default configuration."""
    return SceneSession()
