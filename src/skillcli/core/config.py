"""Configuration loaded from the environment.

The CLI builds a single ``Settings`` instance at startup and hands the skills
root to ``SkillRepository``; nothing else reads the environment.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import ConfigError
from ..util.log import LogFormat, LogLevel
from .global_paths import GlobalPath

SKILLS_DIR_ENV = "SKILLS_DIR"
LOG_LEVEL_ENV = "SKILL_CLI_LOG_LEVEL"
LOG_FORMAT_ENV = "SKILL_CLI_LOG_FORMAT"
LOG_FILE_ENV = "SKILL_CLI_LOG_FILE"

_TRUTHY = {"1", "true", "yes", "on"}


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "warn"
    format: Literal["kv", "json", "pretty"] = "kv"
    file: bool = False

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        LogLevel.parse(value)
        return value.strip().lower()

    def log_level(self) -> LogLevel:
        return LogLevel.parse(self.level)

    def log_format(self) -> LogFormat:
        return LogFormat.parse(self.format)


class Settings(BaseModel):
    """Resolved settings for one invocation."""
    skills_dir: Path = Field(default_factory=lambda: Path(GlobalPath.skills()))
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Raises:
            ConfigError: If a logging variable holds an unsupported value
        """
        env = os.environ if environ is None else environ

        data: dict = {}
        if root := env.get(SKILLS_DIR_ENV):
            data["skills_dir"] = Path(root).expanduser()

        log_data: dict = {}
        if level := env.get(LOG_LEVEL_ENV):
            try:
                LogLevel.parse(level)
            except ValueError as e:
                raise ConfigError(LOG_LEVEL_ENV, str(e)) from e
            log_data["level"] = level
        if fmt := env.get(LOG_FORMAT_ENV):
            try:
                log_data["format"] = LogFormat.parse(fmt).value
            except ValueError as e:
                raise ConfigError(LOG_FORMAT_ENV, str(e)) from e
        if flag := env.get(LOG_FILE_ENV):
            log_data["file"] = flag.strip().lower() in _TRUTHY
        data["logging"] = LoggingConfig(**log_data)

        return cls(**data)
