"""
models/ - Domain Models
=======================
Plain dataclasses for the entities persisted by the repositories.
"""

from models.line import Line
from models.station import Station

__all__ = ["Line", "Station"]
