"""Engine configuration models and loaders."""

from storyframe.core.config.loader import (
    configure_logging,
    detect_format,
    load_config,
    load_engine_config,
)
from storyframe.core.config.models import (
    BEAT_DURATION,
    BREATH_DURATION,
    DEFAULT_FPS,
    DEFAULT_STAGGER_DELAY,
    DEFAULT_THEME,
    DEFAULT_WORDS_PER_MINUTE,
    EngineConfig,
    LoggingConfig,
)

__all__ = [
    "BEAT_DURATION",
    "BREATH_DURATION",
    "DEFAULT_FPS",
    "DEFAULT_STAGGER_DELAY",
    "DEFAULT_THEME",
    "DEFAULT_WORDS_PER_MINUTE",
    "EngineConfig",
    "LoggingConfig",
    "configure_logging",
    "detect_format",
    "load_config",
    "load_engine_config",
]
