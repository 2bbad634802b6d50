import logging
import sys
import mysql.connector
from contextlib import contextmanager
from typing import Generator, Mapping, Optional
from src.common.constants.database import DB_CHARSET, DB_CHARSET_ALIASES, DB_CHARSET_LEGACY
from src.common.constants.errorcodes import ERR_CONNECTION_FAILED, ERR_NOT_INITIALIZED, ERROR_MESSAGES
from src.common.db_config import DatabaseConfig, DatabaseError, resolve_db_config

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────
# Process-wide connection handle
# ─────────────────────────────────────────────────────────────
# Opened once by init_connection() at startup. Only a handle with the
# utf8 charset already applied is ever stored here.

_connection: Optional[mysql.connector.MySQLConnection] = None


class DatabaseConnectionError(DatabaseError):
    """The driver could not open the connection or apply the session charset."""

    def __init__(self, driver_message: str):
        self.driver_message = driver_message
        super().__init__(ERROR_MESSAGES[ERR_CONNECTION_FAILED].format(reason=driver_message))


def _driver_message(err: mysql.connector.Error) -> str:
    return getattr(err, "msg", None) or str(err)


def _apply_charset(conn) -> None:
    """SET NAMES utf8mb3; servers before 8.0 only know it as utf8."""
    try:
        conn.set_charset_collation(DB_CHARSET)
    except mysql.connector.errors.ProgrammingError:
        logger.debug("Charset %s unsupported, falling back to %s", DB_CHARSET, DB_CHARSET_LEGACY)
        conn.set_charset_collation(DB_CHARSET_LEGACY)


def connect(config: DatabaseConfig) -> mysql.connector.MySQLConnection:
    """
    Open a single MySQL connection and switch it to the utf8 charset.

    No retries: one attempt with the driver's default timeouts.

    Args:
        config: Resolved connection parameters.

    Returns:
        Open connection whose charset is utf8.

    Raises:
        DatabaseConnectionError: connectivity, authentication or unknown
            database errors, or a handle that refuses the charset.
    """
    logger.info(
        "Connecting to MySQL: host=%s, port=%d, database=%s",
        config.host, config.port, config.database,
    )
    try:
        conn = mysql.connector.connect(**config.as_connect_kwargs())
    except mysql.connector.Error as err:
        raise DatabaseConnectionError(_driver_message(err)) from err

    try:
        _apply_charset(conn)
    except mysql.connector.Error as err:
        conn.close()
        raise DatabaseConnectionError(_driver_message(err)) from err

    if conn.charset not in DB_CHARSET_ALIASES:
        conn.close()
        raise DatabaseConnectionError(f"charset is {conn.charset!r}, expected {DB_CHARSET!r}")

    return conn


def init_connection(environ: Optional[Mapping[str, str]] = None) -> mysql.connector.MySQLConnection:
    """
    Startup bootstrap: resolve config, connect, publish the handle.

    Any failure halts the process via sys.exit with a diagnostic on stderr;
    nothing is published in that case. A second call returns the handle
    published by the first one.
    """
    global _connection
    if _connection is not None:
        return _connection

    try:
        conn = connect(resolve_db_config(environ))
    except DatabaseError as err:
        logger.error("%s", err)
        sys.exit(str(err))

    _connection = conn
    logger.info("MySQL connection ready (charset=%s)", conn.charset)
    return _connection


def get_connection() -> mysql.connector.MySQLConnection:
    """Return the process-wide connection opened by init_connection()."""
    if _connection is None:
        raise DatabaseError(ERROR_MESSAGES[ERR_NOT_INITIALIZED])
    return _connection


def close_connection() -> None:
    """
    Close and forget the process-wide connection (hosting process shutdown, tests).
    """
    global _connection
    conn, _connection = _connection, None
    if conn is not None and conn.is_connected():
        conn.close()
        logger.info("MySQL connection closed")


@contextmanager
def get_cursor(conn, dictionary=True) -> Generator[mysql.connector.cursor.MySQLCursor, None, None]:
    """Context manager that yields a MySQL cursor and always closes it."""
    cursor = conn.cursor(dictionary=dictionary)
    try:
        yield cursor
    finally:
        cursor.close()
