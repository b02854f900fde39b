"""
models/station.py
-----------------
Domain model for subway stations.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Station:
    """A subway station, identified by a unique name."""
    name: str
    id: Optional[int] = None
