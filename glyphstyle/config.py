"""
Settings for the glyphstyle command line: optional YAML file plus
GLYPHSTYLE_* environment variables (a local .env file is honoured).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from .catalog import alphabet
from .errors import ConfigError

logger = logging.getLogger(__name__)

ENV_CONFIG = "GLYPHSTYLE_CONFIG"
ENV_DEFAULT_STYLE = "GLYPHSTYLE_DEFAULT_STYLE"
ENV_LOG_LEVEL = "GLYPHSTYLE_LOG_LEVEL"


class Settings(BaseModel):
    default_style: Optional[str] = None
    log_level: str = "WARNING"
    sample_text: str = alphabet()

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read config file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {config_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {config_path} must contain a mapping")
    return data


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Build Settings from (in increasing precedence) defaults, the YAML config
    file and the environment.
    """
    load_dotenv(Path.cwd() / ".env")

    if config_path is None and os.getenv(ENV_CONFIG):
        config_path = Path(os.environ[ENV_CONFIG])

    values: Dict[str, Any] = {}
    if config_path is not None:
        logger.debug("Loading settings from %s", config_path)
        values.update(load_config(config_path))

    if os.getenv(ENV_DEFAULT_STYLE):
        values["default_style"] = os.environ[ENV_DEFAULT_STYLE]
    if os.getenv(ENV_LOG_LEVEL):
        values["log_level"] = os.environ[ENV_LOG_LEVEL]

    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"invalid settings: {exc}") from exc
