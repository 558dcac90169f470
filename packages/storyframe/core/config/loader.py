"""Engine configuration files: JSON or YAML, chosen by file extension."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from storyframe.core.config.models import EngineConfig
from storyframe.core.utils.logging import configure_logging as setup_logging

logger = logging.getLogger(__name__)

_DEFAULT_ENGINE_CONFIG_PATH = Path("storyframe.yaml")
_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def detect_format(file_path: Path | str) -> str:
    """Map a config file's extension to ``"json"`` or ``"yaml"``.

    Raises:
        ValueError: For any other extension.

    Example:
        >>> detect_format("engine.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    fmt = _FORMATS.get(suffix)
    if fmt is None:
        raise ValueError(f"Unsupported config format: {suffix}")
    return fmt


def _parse(path: Path, fmt: str) -> Any:
    with path.open("r", encoding="utf-8") as f:
        if fmt == "json":
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e
        try:
            content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # Empty YAML documents load as None
        return {} if content is None else content


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a config file into a plain mapping, without validation.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: On an unsupported extension, unparsable content, or a
            root that is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    content = _parse(path, detect_format(path))
    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}, got {type(content).__name__}")
    return content


def load_engine_config(path: str | Path | None = None) -> EngineConfig:
    """Load and validate the engine configuration.

    A missing file at the default location yields the defaults; an explicit
    path that does not exist is an error.

    Args:
        path: Path to an engine config file. Defaults to ``storyframe.yaml``.

    Returns:
        Validated EngineConfig instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config values are invalid
    """
    if path is None:
        if not _DEFAULT_ENGINE_CONFIG_PATH.exists():
            logger.debug("No engine config found, using defaults")
            return EngineConfig()
        path = _DEFAULT_ENGINE_CONFIG_PATH

    raw_config = load_config(path)
    config = EngineConfig.model_validate(raw_config)
    logger.debug(f"Loaded engine config from {path}: fps={config.fps}, theme={config.theme}")
    return config


def configure_logging(config: EngineConfig | None = None) -> None:
    """Configure Python logging from engine config.

    Args:
        config: EngineConfig instance (loads default if None)
    """
    if config is None:
        config = load_engine_config()

    settings = config.logging
    setup_logging(
        level=settings.level,
        filename=settings.filename,
        structured=settings.structured,
    )
