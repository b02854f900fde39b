"""
exceptions/ - Domain Errors
===========================
Typed errors raised by repositories and services.
Low-level psycopg2 failures never leak past the repository boundary:
they are translated into one of the classes below.
"""

from typing import Optional


class SubwayError(Exception):
    """Base class for every error raised by this backend."""


class NotFoundError(SubwayError):
    """Raised when no row matches the requested id."""

    def __init__(self, entity: str, entity_id: Optional[int]):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} id {entity_id} does not exist.")


class DuplicateNameError(SubwayError):
    """Raised when an insert or update collides with an existing name."""

    def __init__(self, entity: str, name: str):
        self.entity = entity
        self.name = name
        super().__init__(f"Duplicate {entity} name: '{name}'.")


class RepositoryError(SubwayError):
    """Raised for unexpected database failures; the psycopg2 error is the __cause__."""


__all__ = ["SubwayError", "NotFoundError", "DuplicateNameError", "RepositoryError"]
