"""
services/station_service.py
---------------------------
Business rules for subway stations.
"""

from models.station import Station
from repositories.station_repo import StationRepository


class StationService:
    """Thin layer over StationRepository; the repository enforces name uniqueness."""

    def __init__(self, station_repo: StationRepository):
        self.station_repo = station_repo

    def create_station(self, name: str) -> Station:
        """
        Register a new station.

        Raises:
            ValueError: If the name is blank.
            DuplicateNameError: If the name is already taken.
        """
        name = (name or "").strip()
        if not name:
            raise ValueError("Station name must not be blank.")
        return self.station_repo.save(Station(name=name))

    def get_stations(self) -> list[Station]:
        return self.station_repo.list_all()

    def get_station(self, station_id: int) -> Station:
        return self.station_repo.get_by_id(station_id)

    def delete_station(self, station_id: int) -> None:
        self.station_repo.delete_by_id(station_id)
