"""
Database-related constants.
Never hardcode real credentials in source code!
Use environment variables + fallback defaults for local dev.

Every connection field is looked up in order: the variable injected by the
hosting platform (Railway), then the generic variable a developer sets by
hand, then the local default below.
"""

from typing import Final

# ─────────────────────────────────────────────────────────────
# Platform-injected variables (Railway MySQL plugin)
# ─────────────────────────────────────────────────────────────

PLATFORM_HOST_VAR: Final[str] = "MYSQLHOST"
PLATFORM_USER_VAR: Final[str] = "MYSQLUSER"
PLATFORM_PASSWORD_VAR: Final[str] = "MYSQLPASSWORD"
PLATFORM_DATABASE_VAR: Final[str] = "MYSQLDATABASE"
PLATFORM_PORT_VAR: Final[str] = "MYSQLPORT"

# ─────────────────────────────────────────────────────────────
# Generic variables (local .env, docker-compose, CI)
# ─────────────────────────────────────────────────────────────

GENERIC_HOST_VAR: Final[str] = "DB_HOST"
GENERIC_USER_VAR: Final[str] = "DB_USER"
GENERIC_PASSWORD_VAR: Final[str] = "DB_PASSWORD"
GENERIC_DATABASE_VAR: Final[str] = "DB_NAME"
GENERIC_PORT_VAR: Final[str] = "DB_PORT"

# ─────────────────────────────────────────────────────────────
# Local development defaults
# ─────────────────────────────────────────────────────────────

DEFAULT_HOST: Final[str] = "localhost"
DEFAULT_USER: Final[str] = "root"
DEFAULT_PASSWORD: Final[str] = ""
DEFAULT_DATABASE: Final[str] = "exam_timetable"
DEFAULT_PORT: Final[str] = "3306"

MIN_PORT: Final[int] = 1
MAX_PORT: Final[int] = 65535

# field -> (platform var, generic var, default), in precedence order
DB_ENV_LOOKUP: Final[dict[str, tuple[str, str, str]]] = {
    "host": (PLATFORM_HOST_VAR, GENERIC_HOST_VAR, DEFAULT_HOST),
    "user": (PLATFORM_USER_VAR, GENERIC_USER_VAR, DEFAULT_USER),
    "password": (PLATFORM_PASSWORD_VAR, GENERIC_PASSWORD_VAR, DEFAULT_PASSWORD),
    "database": (PLATFORM_DATABASE_VAR, GENERIC_DATABASE_VAR, DEFAULT_DATABASE),
    "port": (PLATFORM_PORT_VAR, GENERIC_PORT_VAR, DEFAULT_PORT),
}

# ─────────────────────────────────────────────────────────────
# Session settings
# ─────────────────────────────────────────────────────────────

# 3-byte legacy utf8. Connector maps a bare "utf8" to utf8mb4 on MySQL 8,
# so the explicit name is requested; 5.7 only knows it as "utf8".
DB_CHARSET: Final[str] = "utf8mb3"
DB_CHARSET_LEGACY: Final[str] = "utf8"
DB_CHARSET_ALIASES: Final[frozenset[str]] = frozenset({DB_CHARSET, DB_CHARSET_LEGACY})

CONNECTION_FAILED_PREFIX: Final[str] = "Connection failed: "
