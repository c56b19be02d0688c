import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .constant import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    LogFormat,
)


class EchoConfig(BaseModel):
    """Process-wide settings, read once at startup."""

    model_config = ConfigDict(frozen=True)

    log_format: LogFormat = LogFormat.DEFAULT
    log_level: str = DEFAULT_LOG_LEVEL
    port: int = DEFAULT_PORT
    terse: bool = False
    host: str = DEFAULT_HOST

    @field_validator("log_format", mode="before")
    @classmethod
    def _coerce_log_format(cls, v):
        # anything but "json" means human readable
        if v == LogFormat.JSON or v == "json":
            return LogFormat.JSON
        return LogFormat.DEFAULT

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_log_level(cls, v):
        name = str(v or "").strip().upper()
        if isinstance(logging.getLevelName(name), int):
            return name
        return DEFAULT_LOG_LEVEL

    @field_validator("port", mode="before")
    @classmethod
    def _coerce_port(cls, v):
        try:
            port = int(v)
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 0 < port < 65536:
            return DEFAULT_PORT
        return port

    @field_validator("terse", mode="before")
    @classmethod
    def _coerce_terse(cls, v):
        if isinstance(v, bool):
            return v
        return v == "true"


def load_config(environ: Optional[Mapping[str, str]] = None) -> EchoConfig:
    env = os.environ if environ is None else environ
    return EchoConfig(
        log_format=env.get('LOG_FORMAT', LogFormat.DEFAULT.value),
        log_level=env.get('LOG_LEVEL', DEFAULT_LOG_LEVEL),
        port=env.get('PORT', DEFAULT_PORT),
        terse=env.get('TERSE_RESPONSE', 'false'),
    )
