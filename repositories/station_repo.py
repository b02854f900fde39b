"""
repositories/station_repo.py
-----------------------------
Data access layer for subway stations.
Station names are unique: `save` refuses a name that is already taken.
"""

import psycopg2
from psycopg2 import errors, pool

from db.connection import get_connection, release_connection
from exceptions import DuplicateNameError, NotFoundError, RepositoryError
from models.station import Station
from utils.logger import get_logger

logger = get_logger(__name__)

ENTITY = "Station"


class StationRepository:
    """Repository for CRUD operations on the station table."""

    def __init__(self, db_pool: pool.SimpleConnectionPool):
        self._pool = db_pool

    def exists_by_name(self, name: str) -> bool:
        """Return True if a station with this name exists."""
        sql = "SELECT EXISTS(SELECT 1 FROM station WHERE name = %s);"
        conn = get_connection(self._pool)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (name,))
                return bool(cur.fetchone()[0])
        except psycopg2.Error as e:
            logger.error(f"Failed to look up station name '{name}': {e}")
            raise RepositoryError(f"Failed to look up station name '{name}'") from e
        finally:
            release_connection(self._pool, conn)

    def save(self, station: Station) -> Station:
        """
        Insert a new station.

        The name check runs before the insert, so a duplicate leaves the
        table untouched. The UNIQUE constraint still catches a concurrent
        insert of the same name.

        Returns:
            A new Station carrying the database-generated id.

        Raises:
            DuplicateNameError: If a station with this name already exists.
        """
        if self.exists_by_name(station.name):
            logger.warning(f"Rejected duplicate station name '{station.name}'")
            raise DuplicateNameError(ENTITY, station.name)

        sql = "INSERT INTO station (name) VALUES (%s) RETURNING id;"
        conn = get_connection(self._pool)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (station.name,))
                station_id = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Saved station #{station_id} '{station.name}'")
            return Station(id=station_id, name=station.name)
        except errors.UniqueViolation as e:
            conn.rollback()
            logger.warning(f"Rejected duplicate station name '{station.name}' on insert")
            raise DuplicateNameError(ENTITY, station.name) from e
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to save station '{station.name}': {e}")
            raise RepositoryError(f"Failed to save station '{station.name}'") from e
        finally:
            release_connection(self._pool, conn)

    def list_all(self) -> list[Station]:
        """Return every station in id order."""
        sql = "SELECT id, name FROM station ORDER BY id;"
        conn = get_connection(self._pool)
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_station(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to list stations: {e}")
            raise RepositoryError("Failed to list stations") from e
        finally:
            release_connection(self._pool, conn)

    def get_by_id(self, station_id: int) -> Station:
        """Fetch a station by id, raising NotFoundError when it is missing."""
        sql = "SELECT id, name FROM station WHERE id = %s;"
        conn = get_connection(self._pool)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (station_id,))
                row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch station #{station_id}: {e}")
            raise RepositoryError(f"Failed to fetch station #{station_id}") from e
        finally:
            release_connection(self._pool, conn)
        if row is None:
            raise NotFoundError(ENTITY, station_id)
        return self._row_to_station(row)

    def delete_by_id(self, station_id: int) -> None:
        """Delete a station by id, raising NotFoundError when nothing was removed."""
        sql = "DELETE FROM station WHERE id = %s;"
        conn = get_connection(self._pool)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (station_id,))
                deleted = cur.rowcount > 0
            conn.commit()
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to delete station #{station_id}: {e}")
            raise RepositoryError(f"Failed to delete station #{station_id}") from e
        finally:
            release_connection(self._pool, conn)
        if not deleted:
            raise NotFoundError(ENTITY, station_id)
        logger.info(f"Deleted station #{station_id}")

    @staticmethod
    def _row_to_station(row: tuple) -> Station:
        return Station(id=row[0], name=row[1])
