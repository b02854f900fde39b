"""
repositories/ - Data Access Layer
==================================
One repository per table. Each takes a connection pool at construction,
issues parameterized SQL, maps rows to models, and raises the typed errors
from `exceptions` instead of raw psycopg2 errors.
"""

from repositories.line_repo import LineRepository
from repositories.station_repo import StationRepository

__all__ = ["LineRepository", "StationRepository"]
