"""
PyTest configuration and shared fixtures for dbdelegate tests
"""

import os
import sqlite3
import sys
from typing import Any, List
from unittest.mock import MagicMock

import pytest

# Add project root to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dbdelegate.db.delegate import AbstractDatabaseDelegate


class RecordingDelegate(AbstractDatabaseDelegate):
    """In-memory delegate recording hook calls and executed statements"""

    def __init__(self, fail_on: Any = None, connection_error: Exception = None):
        super().__init__(container=None)
        self.fail_on = fail_on
        self.connection_error = connection_error
        self.created = 0
        self.closed_count = 0
        self.executed: List[tuple] = []

    def create_new_connection(self):
        self.created += 1
        if self.connection_error is not None:
            raise self.connection_error
        return MagicMock(name="connection")

    def close_connection_quietly(self):
        self.closed_count += 1

    def execute(self, statement, script_path, line_number, continue_on_error, ignore_failed_drops):
        self.connection
        self.executed.append((line_number, statement))
        if statement == self.fail_on:
            raise RuntimeError(f"boom at line {line_number}")


class SQLiteContainer:
    """Stand-in for a database container handing out sqlite3 connections"""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self.connections: List[sqlite3.Connection] = []

    def create_connection(self, query_string: str) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        self.connections.append(conn)
        return conn


@pytest.fixture
def recording_delegate():
    return RecordingDelegate()


@pytest.fixture
def sqlite_db_path(tmp_path):
    """Path to a fresh file-based SQLite database"""
    return str(tmp_path / "dbdelegate_test.db")


@pytest.fixture
def sqlite_container(sqlite_db_path):
    return SQLiteContainer(sqlite_db_path)


@pytest.fixture
def fetch_rows(sqlite_db_path):
    """Query the test database through an independent connection"""

    def _fetch(query: str):
        conn = sqlite3.connect(sqlite_db_path)
        try:
            return conn.execute(query).fetchall()
        finally:
            conn.close()

    return _fetch


@pytest.fixture
def cassandra_container():
    container = MagicMock(name="cassandra_container")
    container.host = "127.0.0.1"
    container.get_mapped_port.return_value = 32768
    return container
