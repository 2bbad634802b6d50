#!/usr/bin/env python3
"""
run_app.py

Startup script for the exam timetable database connection.

Usage:
    python run_app.py                  # Connect and exit (startup smoke test)
    python run_app.py --check          # Connect, report server version, close
    python run_app.py --print-config   # Show resolved settings, do not connect

Environment variables (platform value wins over generic, then default):
    MYSQLHOST / DB_HOST            - default: localhost
    MYSQLUSER / DB_USER            - default: root
    MYSQLPASSWORD / DB_PASSWORD    - default: empty
    MYSQLDATABASE / DB_NAME        - default: exam_timetable
    MYSQLPORT / DB_PORT            - default: 3306
    DEBUG=1                        - verbose logging
"""

import argparse
import logging
import os
import sys

from src.common import database
from src.common.db_config import DatabaseError, load_env_file, resolve_db_config


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Open the exam timetable MySQL connection")
    parser.add_argument("--check", action="store_true", help="Report the server version after connecting")
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the resolved configuration (password masked) without connecting",
    )
    parser.add_argument("--env-file", default=None, help="Path to a .env file (default: ./.env)")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    return parser.parse_args(argv)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler()],  # console
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    load_env_file(args.env_file)
    configure_logging(args.debug or os.getenv("DEBUG", "0") == "1")

    if args.print_config:
        try:
            config = resolve_db_config()
        except DatabaseError as err:
            sys.exit(str(err))
        print(config.describe())
        return 0

    conn = database.init_connection()

    if args.check:
        print(f"✅ Connected to MySQL {conn.get_server_info()} (charset={conn.charset})")
        database.close_connection()
    return 0


if __name__ == "__main__":
    sys.exit(main())
