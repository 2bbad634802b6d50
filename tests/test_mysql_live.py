"""
Integration test against a real MySQL server.

Skipped unless MYSQL_LIVE_TESTS=1; connection settings come from the usual
MYSQL* / DB_* variables.
"""

import os
import unittest

import pytest

from src.common import database


@pytest.mark.mysql
@unittest.skipUnless(os.getenv("MYSQL_LIVE_TESTS") == "1", "needs a live MySQL server")
class TestLiveConnection(unittest.TestCase):

    def tearDown(self):
        database.close_connection()

    def test_session_charset_is_utf8(self):
        conn = database.init_connection()

        with database.get_cursor(conn, dictionary=False) as cursor:
            cursor.execute("SELECT @@character_set_client, @@character_set_connection")
            client, connection = cursor.fetchone()

        self.assertIn(client, ("utf8", "utf8mb3"))
        self.assertIn(connection, ("utf8", "utf8mb3"))
        self.assertIs(database.get_connection(), conn)
