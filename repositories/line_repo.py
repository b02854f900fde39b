"""
repositories/line_repo.py
--------------------------
Data access layer for subway lines.
All SQL queries related to the `line` table live here.
"""

import psycopg2
from psycopg2 import errors, pool

from db.connection import get_connection, release_connection
from exceptions import DuplicateNameError, NotFoundError, RepositoryError
from models.line import Line
from utils.logger import get_logger

logger = get_logger(__name__)

ENTITY = "Line"


class LineRepository:
    """Repository for CRUD operations on the line table."""

    def __init__(self, db_pool: pool.SimpleConnectionPool):
        self._pool = db_pool

    # ── CREATE ────────────────────────────────────────────

    def save(self, line: Line) -> Line:
        """
        Insert a new line.

        Args:
            line: The Line to persist; its `id` is ignored.

        Returns:
            A new Line carrying the database-generated id.

        Raises:
            DuplicateNameError: If another line already uses this name.
        """
        sql = "INSERT INTO line (color, name) VALUES (%s, %s) RETURNING id;"
        conn = get_connection(self._pool)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (line.color, line.name))
                line_id = cur.fetchone()[0]
            conn.commit()
            saved = Line(id=line_id, color=line.color, name=line.name)
            logger.info(f"Saved line {saved}")
            return saved
        except errors.UniqueViolation as e:
            conn.rollback()
            logger.warning(f"Rejected duplicate line name '{line.name}' on insert")
            raise DuplicateNameError(ENTITY, line.name) from e
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to save line '{line.name}': {e}")
            raise RepositoryError(f"Failed to save line '{line.name}'") from e
        finally:
            release_connection(self._pool, conn)

    # ── READ ──────────────────────────────────────────────

    def exists_by_name(self, name: str) -> bool:
        """Return True if a line with this name exists."""
        sql = "SELECT EXISTS(SELECT 1 FROM line WHERE name = %s);"
        conn = get_connection(self._pool)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (name,))
                return bool(cur.fetchone()[0])
        except psycopg2.Error as e:
            logger.error(f"Failed to look up line name '{name}': {e}")
            raise RepositoryError(f"Failed to look up line name '{name}'") from e
        finally:
            release_connection(self._pool, conn)

    def list_all(self) -> list[Line]:
        """Return every line ordered by id ascending."""
        sql = "SELECT id, color, name FROM line ORDER BY id;"
        conn = get_connection(self._pool)
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_line(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to list lines: {e}")
            raise RepositoryError("Failed to list lines") from e
        finally:
            release_connection(self._pool, conn)

    def get_by_id(self, line_id: int) -> Line:
        """
        Fetch a single line by primary key.

        Raises:
            NotFoundError: If no line has this id.
        """
        sql = "SELECT id, color, name FROM line WHERE id = %s;"
        conn = get_connection(self._pool)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (line_id,))
                row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch line #{line_id}: {e}")
            raise RepositoryError(f"Failed to fetch line #{line_id}") from e
        finally:
            release_connection(self._pool, conn)
        if row is None:
            raise NotFoundError(ENTITY, line_id)
        return self._row_to_line(row)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, line: Line) -> None:
        """
        Overwrite color and name of the line with `line.id`.

        Raises:
            NotFoundError: If no row was updated.
            DuplicateNameError: If the new name belongs to another line.
        """
        sql = "UPDATE line SET color = %s, name = %s WHERE id = %s;"
        conn = get_connection(self._pool)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (line.color, line.name, line.id))
                updated = cur.rowcount > 0
            conn.commit()
        except errors.UniqueViolation as e:
            conn.rollback()
            logger.warning(f"Rejected duplicate line name '{line.name}' on update of #{line.id}")
            raise DuplicateNameError(ENTITY, line.name) from e
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to update line #{line.id}: {e}")
            raise RepositoryError(f"Failed to update line #{line.id}") from e
        finally:
            release_connection(self._pool, conn)
        if not updated:
            raise NotFoundError(ENTITY, line.id)
        logger.info(f"Updated line {line}")

    # ── DELETE ────────────────────────────────────────────

    def delete_by_id(self, line_id: int) -> None:
        """
        Delete a line by primary key.

        Raises:
            NotFoundError: If no row was deleted.
        """
        sql = "DELETE FROM line WHERE id = %s;"
        conn = get_connection(self._pool)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (line_id,))
                deleted = cur.rowcount > 0
            conn.commit()
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to delete line #{line_id}: {e}")
            raise RepositoryError(f"Failed to delete line #{line_id}") from e
        finally:
            release_connection(self._pool, conn)
        if not deleted:
            raise NotFoundError(ENTITY, line_id)
        logger.info(f"Deleted line #{line_id}")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_line(row: tuple) -> Line:
        """Convert a (id, color, name) row to a Line."""
        return Line(id=row[0], color=row[1], name=row[2])
