"""Runtime settings read from ``LAHMANQL_*`` environment variables."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


logger = logging.getLogger(__name__)

_DB_PATH_ENV = "LAHMANQL_DB_PATH"
_HOST_ENV = "LAHMANQL_HOST"
_PORT_ENV = "LAHMANQL_PORT"
_LOG_LEVEL_ENV = "LAHMANQL_LOG_LEVEL"

_DB_PATH_DEFAULT = "database.sqlite"
_HOST_DEFAULT = "127.0.0.1"
_PORT_DEFAULT = 4000
_LOG_LEVEL_DEFAULT = "INFO"


def _env_int(name: str, default: int, *, min_value: int | None = None, max_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


class Settings(BaseModel):
    db_path: Path = Field(default=Path(_DB_PATH_DEFAULT))
    host: str = _HOST_DEFAULT
    port: int = Field(default=_PORT_DEFAULT, ge=1, le=65535)
    log_level: str = _LOG_LEVEL_DEFAULT

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            db_path=Path(os.getenv(_DB_PATH_ENV, _DB_PATH_DEFAULT)),
            host=os.getenv(_HOST_ENV, _HOST_DEFAULT),
            port=_env_int(_PORT_ENV, _PORT_DEFAULT, min_value=1, max_value=65535),
            log_level=os.getenv(_LOG_LEVEL_ENV, _LOG_LEVEL_DEFAULT).upper(),
        )
