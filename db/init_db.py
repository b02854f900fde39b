"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from psycopg2 import pool

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Subway lines: each line has a display color and a unique name
CREATE TABLE IF NOT EXISTS line (
    id              SERIAL PRIMARY KEY,
    color           VARCHAR(20) NOT NULL,
    name            VARCHAR(255) UNIQUE NOT NULL
);

-- Stations: name must be unique across the network
CREATE TABLE IF NOT EXISTS station (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(255) UNIQUE NOT NULL
);
"""

RESET_SQL = "TRUNCATE TABLE line, station RESTART IDENTITY;"


def _execute(db_pool: pool.SimpleConnectionPool, sql: str, verb: str) -> None:
    conn = get_connection(db_pool)
    try:
        with conn.cursor() as cur:
            cur.execute(sql)
        conn.commit()
        logger.info(f"Database schema {verb} succeeded.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Database schema {verb} failed: {e}")
        raise
    finally:
        release_connection(db_pool, conn)


def create_tables(db_pool: pool.SimpleConnectionPool) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    _execute(db_pool, SCHEMA_SQL, "initialization")


def reset_tables(db_pool: pool.SimpleConnectionPool) -> None:
    """Remove every row and restart the id sequences at 1."""
    _execute(db_pool, RESET_SQL, "reset")


if __name__ == "__main__":
    from db.connection import close_pool, create_pool

    _pool = create_pool()
    try:
        create_tables(_pool)
    finally:
        close_pool(_pool)
    print("Database schema created successfully.")
