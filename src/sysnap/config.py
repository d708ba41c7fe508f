"""Runtime configuration read from the environment."""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ValidationError, field_validator

from sysnap.errors import ConfigError

ENV_PREFIX = "SYSNAP_"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SnapshotConfig(BaseModel):
    """Which sections to collect and how loudly to log."""

    include_disks: bool = True
    include_networks: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_config(environ: Mapping[str, str] | None = None) -> SnapshotConfig:
    """Build a SnapshotConfig from ``SYSNAP_*`` environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Validated configuration.

    Raises:
        ConfigError: If a variable holds an invalid value.
    """
    if environ is None:
        environ = os.environ

    data = {}
    for name in SnapshotConfig.model_fields:
        key = ENV_PREFIX + name.upper()
        if key in environ:
            data[name] = environ[key]

    try:
        return SnapshotConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid {ENV_PREFIX}* environment configuration: {e}") from e
