"""
models/line.py
--------------
Domain model for subway lines.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Line:
    """
    Represents a subway line.

    Attributes:
        color: Display color of the line (e.g., 'bg-green-600').
        name: Unique line name (e.g., 'Line 2').
        id: Database primary key (None for new records).
    """
    color: str
    name: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.id} {self.name} ({self.color})"
