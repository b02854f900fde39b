"""Shared pytest fixtures.

Unit tests use a mocked psycopg2 pool whose single connection hands out a
single cursor, so tests can script ``fetchone``/``rowcount`` and inspect the
SQL that was executed.

Integration tests use ``pg_pool``, which connects to the PostgreSQL database
named by ``TEST_DATABASE_URL`` and is skipped when that variable is unset.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from unittest import mock

import pytest

from db import connection as db_connection
from db import init_db

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")


@pytest.fixture
def cursor() -> mock.MagicMock:
    return mock.MagicMock(name="cursor")


@pytest.fixture
def conn(cursor: mock.MagicMock) -> mock.MagicMock:
    connection = mock.MagicMock(name="connection")
    connection.cursor.return_value.__enter__.return_value = cursor
    return connection


@pytest.fixture
def db_pool(conn: mock.MagicMock) -> mock.MagicMock:
    fake_pool = mock.MagicMock(name="pool")
    fake_pool.closed = False
    fake_pool.getconn.return_value = conn
    return fake_pool


@pytest.fixture
def pg_pool() -> Iterator[object]:
    """Real pool against an empty schema; ids restart at 1 for every test."""
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL is not set")
    real_pool = db_connection.create_pool(TEST_DATABASE_URL, 1, 2)
    init_db.create_tables(real_pool)
    init_db.reset_tables(real_pool)
    try:
        yield real_pool
    finally:
        init_db.reset_tables(real_pool)
        db_connection.close_pool(real_pool)
