"""Configuration models for the Storyframe engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_FPS = 30
DEFAULT_WORDS_PER_MINUTE = 150.0
BEAT_DURATION = 0.3
BREATH_DURATION = 0.8
DEFAULT_STAGGER_DELAY = 0.1
DEFAULT_THEME = "storyframe-dark"


class LoggingConfig(BaseModel):
    """Logging settings applied by ``configure_logging``."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", description="Root log level")
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stdout when None)")

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level


class EngineConfig(BaseModel):
    """Authoring and timing configuration for a scene session.

    Attributes:
        fps: Frame rate of the produced timeline.
        words_per_minute: Speaking rate used to estimate narration length
            before measured durations are known.
        beat_duration: Length of a ``beat()`` pause in seconds.
        breath_duration: Length of a ``breath()`` pause in seconds.
        stagger_delay: Default per-item delay for staggered reveals.
        theme: Name of the builtin theme a session starts with.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    fps: int = Field(default=DEFAULT_FPS, gt=0, le=240, description="Frames per second")
    words_per_minute: float = Field(
        default=DEFAULT_WORDS_PER_MINUTE, gt=0.0, description="Narration estimate rate"
    )
    beat_duration: float = Field(default=BEAT_DURATION, ge=0.0)
    breath_duration: float = Field(default=BREATH_DURATION, ge=0.0)
    stagger_delay: float = Field(default=DEFAULT_STAGGER_DELAY, ge=0.0)
    theme: str = Field(default=DEFAULT_THEME, min_length=1)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
