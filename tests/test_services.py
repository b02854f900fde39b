"""Tests for LineService and StationService with autospecced repositories."""

from __future__ import annotations

from unittest import mock

import pytest

from exceptions import DuplicateNameError, NotFoundError
from models.line import Line
from models.station import Station
from repositories.line_repo import LineRepository
from repositories.station_repo import StationRepository
from services.line_service import LineService
from services.station_service import StationService


@pytest.fixture
def line_repo() -> mock.MagicMock:
    return mock.create_autospec(LineRepository, instance=True)


@pytest.fixture
def station_repo() -> mock.MagicMock:
    return mock.create_autospec(StationRepository, instance=True)


def test_create_line_saves_stripped_values(line_repo: mock.MagicMock) -> None:
    line_repo.exists_by_name.return_value = False
    line_repo.save.return_value = Line(id=1, color="red", name="Line 1")

    created = LineService(line_repo).create_line(" red ", " Line 1 ")

    assert created.id == 1
    line_repo.save.assert_called_once_with(Line(color="red", name="Line 1"))


def test_create_line_rejects_duplicate_name(line_repo: mock.MagicMock) -> None:
    line_repo.exists_by_name.return_value = True

    with pytest.raises(DuplicateNameError):
        LineService(line_repo).create_line("red", "Line 1")

    line_repo.save.assert_not_called()


@pytest.mark.parametrize(("color", "name"), [("", "Line 1"), ("red", "   "), ("red", None)])
def test_create_line_rejects_blank_fields(line_repo: mock.MagicMock, color: str, name: str) -> None:
    with pytest.raises(ValueError, match="must not be blank"):
        LineService(line_repo).create_line(color, name)
    line_repo.exists_by_name.assert_not_called()


def test_update_line_keeping_own_name(line_repo: mock.MagicMock) -> None:
    line_repo.get_by_id.return_value = Line(id=1, color="red", name="Line 1")

    updated = LineService(line_repo).update_line(1, "blue", "Line 1")

    assert updated == Line(id=1, color="blue", name="Line 1")
    line_repo.exists_by_name.assert_not_called()
    line_repo.update.assert_called_once_with(updated)


def test_update_line_onto_other_lines_name(line_repo: mock.MagicMock) -> None:
    line_repo.get_by_id.return_value = Line(id=1, color="red", name="Line 1")
    line_repo.exists_by_name.return_value = True

    with pytest.raises(DuplicateNameError):
        LineService(line_repo).update_line(1, "red", "Line 2")

    line_repo.update.assert_not_called()


def test_update_missing_line_propagates_not_found(line_repo: mock.MagicMock) -> None:
    line_repo.get_by_id.side_effect = NotFoundError("Line", 5)
    with pytest.raises(NotFoundError):
        LineService(line_repo).update_line(5, "red", "Line 5")


def test_line_reads_and_delete_delegate(line_repo: mock.MagicMock) -> None:
    service = LineService(line_repo)
    line_repo.list_all.return_value = [Line(id=1, color="red", name="Line 1")]

    assert service.get_lines() == line_repo.list_all.return_value
    service.get_line(1)
    service.delete_line(1)

    line_repo.get_by_id.assert_called_once_with(1)
    line_repo.delete_by_id.assert_called_once_with(1)


def test_create_station(station_repo: mock.MagicMock) -> None:
    station_repo.save.return_value = Station(id=3, name="Seokchon")

    assert StationService(station_repo).create_station(" Seokchon ").id == 3
    station_repo.save.assert_called_once_with(Station(name="Seokchon"))


def test_create_station_rejects_blank_name(station_repo: mock.MagicMock) -> None:
    with pytest.raises(ValueError):
        StationService(station_repo).create_station("  ")
    station_repo.save.assert_not_called()


def test_station_duplicate_propagates(station_repo: mock.MagicMock) -> None:
    station_repo.save.side_effect = DuplicateNameError("Station", "Jamsil")
    with pytest.raises(DuplicateNameError):
        StationService(station_repo).create_station("Jamsil")


def test_station_reads_and_delete_delegate(station_repo: mock.MagicMock) -> None:
    service = StationService(station_repo)
    service.get_stations()
    service.get_station(2)
    service.delete_station(2)

    station_repo.list_all.assert_called_once_with()
    station_repo.get_by_id.assert_called_once_with(2)
    station_repo.delete_by_id.assert_called_once_with(2)
