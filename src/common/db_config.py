"""
Resolution of MySQL connection parameters from the process environment.

Each field is the first non-empty value among the platform variable, the
generic variable and the local default (see ``src.common.constants.database``).
The result is an immutable ``DatabaseConfig`` that is handed to
``src.common.database.connect``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union
import logging
import os

from dotenv import load_dotenv

from src.common.constants.database import DB_ENV_LOOKUP, MAX_PORT, MIN_PORT
from src.common.constants.errorcodes import ERR_INVALID_PORT, ERROR_MESSAGES

logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """Base class for database bootstrap errors."""


class InvalidPortError(DatabaseError):
    """The resolved port is not an integer in the valid TCP range."""

    def __init__(self, value: Optional[str]):
        self.value = value
        super().__init__(
            ERROR_MESSAGES[ERR_INVALID_PORT].format(value=value, min_port=MIN_PORT, max_port=MAX_PORT)
        )


@dataclass(frozen=True)
class DatabaseConfig:
    host: str
    user: str
    password: str
    database: str
    port: int

    def as_connect_kwargs(self) -> dict:
        """Keyword arguments for ``mysql.connector.connect``."""
        return {
            "host": self.host,
            "user": self.user,
            "password": self.password,
            "database": self.database,
            "port": self.port,
        }

    def describe(self) -> str:
        """Human-readable summary, safe for logs (password is masked)."""
        password = "***" if self.password else "<empty>"
        return f"{self.user}:{password}@{self.host}:{self.port}/{self.database}"


def coalesce(*values: Optional[str]) -> str:
    """Return the first value that is neither None nor an empty string."""
    for value in values:
        if value:
            return value
    return ""


def parse_port(raw: Optional[str]) -> int:
    """
    Convert a port string to int.

    Whitespace around the number is ignored. Anything that is not a decimal
    integer in 1..65535 raises InvalidPortError instead of being coerced.
    """
    if raw is None:
        raise InvalidPortError(raw)
    text = raw.strip()
    if not text.isdecimal():
        raise InvalidPortError(raw)
    port = int(text)
    if port < MIN_PORT or port > MAX_PORT:
        raise InvalidPortError(raw)
    return port


def resolve_db_config(environ: Optional[Mapping[str, str]] = None) -> DatabaseConfig:
    """
    Resolve the connection configuration.

    Args:
        environ: Mapping to read variables from. Defaults to ``os.environ``.

    Returns:
        DatabaseConfig with the port already converted to int.

    Raises:
        InvalidPortError: if the resolved port is not a valid port number.
    """
    if environ is None:
        environ = os.environ

    resolved = {}
    for field, (platform_var, generic_var, default) in DB_ENV_LOOKUP.items():
        resolved[field] = coalesce(environ.get(platform_var), environ.get(generic_var), default)

    config = DatabaseConfig(
        host=resolved["host"],
        user=resolved["user"],
        password=resolved["password"],
        database=resolved["database"],
        port=parse_port(resolved["port"]),
    )
    logger.debug("Resolved database config: %s", config.describe())
    return config


def load_env_file(path: Optional[Union[str, Path]] = None) -> bool:
    """
    Load variables from a local .env file.

    Variables that are already set in the process win, so values injected
    by the hosting platform are never replaced by the file.

    Returns:
        True if a file was found and at least one variable was read.
    """
    loaded = load_dotenv(dotenv_path=path, override=False)
    if loaded:
        logger.debug("Loaded environment from %s", path or ".env")
    return loaded
