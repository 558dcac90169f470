"""Showcase scene: a six-slide introduction to the engine.

Exercises every element kind, every technique, pacing pauses, and clearing
between slides.
"""

from __future__ import annotations

from storyframe.core.config.models import EngineConfig
from storyframe.core.scene.elements import Direction
from storyframe.core.scene.session import SceneSession
from storyframe.core.techniques import CountUp, Ease, FadeIn, FadeUp, Scale, Slide, Technique


def _section_slide() -> Technique:
    return Slide(duration=0.5, offset_x=-200.0, offset_y=0.0).with_ease(Ease.EASE_OUT)


def build_showcase(
    session: SceneSession | None = None, config: EngineConfig | None = None
) -> SceneSession:
    """Author the showcase scene into ``session`` (a new one by default).

    The session is returned unfrozen so narration durations can still be
    resolved.
    """
    m = session if session is not None else SceneSession(config)

    # Cold open
    m.title("What is Storyframe?")
    m.play(FadeIn(duration=0.8))
    m.beat()
    m.narrate("What if making explainer videos was as simple as writing a script?")
    m.breath()

    # The problem
    m.clear()
    m.section("The Problem")
    m.play(_section_slide())
    m.narrate("Complex tools. Expensive licenses. Hours of manual work.")
    m.show("Complex tools. Expensive licenses. Manual labor.")
    m.play(FadeUp())
    m.breath()

    # The solution
    m.clear()
    m.section("A Better Way")
    m.play(_section_slide())
    m.narrate("Write a scene. Run one command. Get a video.")
    m.steps(["Write a scene", "Run one command", "Get a finished video"])
    m.play(m.stagger(FadeUp().with_ease(Ease.OUT_BACK), count=3))
    m.breath()

    # Key features
    m.clear()
    m.section("Built Different")
    m.play(_section_slide())
    m.narrate("No internet. No cloud. Everything runs on your machine.")
    m.steps(["Fully offline", "Open source", "Deterministic frames"])
    m.play(m.stagger(FadeUp().with_ease(Ease.SPRING), count=3))
    m.breath()

    # The metric
    m.clear()
    m.section("Lean and Mean")
    m.play(_section_slide())
    m.narrate("Every frame is computed, never guessed.")
    m.metric("Frames per second", str(m.config.fps), Direction.UP)
    m.play(CountUp(end=float(m.config.fps)))
    m.beat()

    # Closing
    m.clear()
    m.title("Storyframe")
    m.play(Scale(duration=0.6).with_ease(Ease.OUT_BOUNCE))
    m.show("Offline. Fast. Professional.")
    m.play(FadeIn(duration=0.6))
    m.narrate("Motion graphics, one frame at a time.")
    m.beat()

    return m
