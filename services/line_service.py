"""
services/line_service.py
------------------------
Business rules for subway lines: names must be unique and non-blank.
"""

from exceptions import DuplicateNameError
from models.line import Line
from repositories.line_repo import LineRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class LineService:
    """Validates line input before handing it to the repository."""

    def __init__(self, line_repo: LineRepository):
        self.line_repo = line_repo

    def create_line(self, color: str, name: str) -> Line:
        """
        Register a new line.

        Raises:
            ValueError: If color or name is blank.
            DuplicateNameError: If the name is already taken.
        """
        color, name = _require(color, "color"), _require(name, "name")
        if self.line_repo.exists_by_name(name):
            logger.warning(f"Rejected duplicate line name '{name}'")
            raise DuplicateNameError("Line", name)
        return self.line_repo.save(Line(color=color, name=name))

    def get_lines(self) -> list[Line]:
        return self.line_repo.list_all()

    def get_line(self, line_id: int) -> Line:
        return self.line_repo.get_by_id(line_id)

    def update_line(self, line_id: int, color: str, name: str) -> Line:
        """
        Replace color and name of an existing line.
        Keeping the line's own name is allowed; taking another line's is not.
        """
        color, name = _require(color, "color"), _require(name, "name")
        current = self.line_repo.get_by_id(line_id)
        if name != current.name and self.line_repo.exists_by_name(name):
            raise DuplicateNameError("Line", name)
        updated = Line(id=line_id, color=color, name=name)
        self.line_repo.update(updated)
        return updated

    def delete_line(self, line_id: int) -> None:
        self.line_repo.delete_by_id(line_id)


def _require(value: str, field: str) -> str:
    """Strip a text field and reject it when empty."""
    value = (value or "").strip()
    if not value:
        raise ValueError(f"Line {field} must not be blank.")
    return value
