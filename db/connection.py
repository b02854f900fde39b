"""
db/connection.py
----------------
Creates and manages PostgreSQL connection pools.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.

The pool is an explicit handle: callers create it once and hand it to
every repository that needs database access.
"""

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from exceptions import RepositoryError
from utils.logger import get_logger

logger = get_logger(__name__)


def create_pool(
    dsn: str = DATABASE_URL,
    min_conn: int = DB_POOL_MIN,
    max_conn: int = DB_POOL_MAX,
) -> pool.SimpleConnectionPool:
    """
    Open a new database connection pool.

    Args:
        dsn: libpq connection string or URL.
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Returns:
        A ready-to-use SimpleConnectionPool.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        db_pool = pool.SimpleConnectionPool(min_conn, max_conn, dsn)
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise
    logger.info("Database connection pool initialized successfully.")
    return db_pool


def get_connection(db_pool: pool.SimpleConnectionPool):
    """
    Borrow a connection from the pool.

    Raises:
        RuntimeError: If the pool has already been closed.
        RepositoryError: If the pool cannot hand out a connection (e.g. exhausted).
    """
    if db_pool.closed:
        raise RuntimeError("Database pool is closed. Call create_pool() first.")
    try:
        return db_pool.getconn()
    except psycopg2.Error as e:
        logger.error(f"Failed to borrow a database connection: {e}")
        raise RepositoryError("Failed to borrow a database connection") from e


def release_connection(db_pool: pool.SimpleConnectionPool, conn) -> None:
    """Return a borrowed connection back to the pool."""
    if not db_pool.closed:
        db_pool.putconn(conn)


def close_pool(db_pool: pool.SimpleConnectionPool) -> None:
    """Close all connections in the pool. Safe to call twice."""
    if db_pool.closed:
        return
    db_pool.closeall()
    logger.info("Database connection pool closed.")
