"""Tests for ShipService — CRUD orchestration over a mocked session."""

from __future__ import annotations

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from cosmoport.exceptions import InvalidFieldError, NotFoundException
from cosmoport.models.enums import ShipType
from cosmoport.models.ship import Ship
from cosmoport.modules.ship.query import ShipCriteria, ShipOrder
from cosmoport.modules.ship.schemas import ShipCreate, ShipUpdate
from cosmoport.modules.ship.ship_service import ShipService


def _make_ship(ship_id: int, speed: float = 0.5, rating: float = 20.0, planet: str = "Mars") -> Ship:
    return Ship(
        id=ship_id,
        name=f"Ship {ship_id}",
        planet=planet,
        ship_type=ShipType.TRANSPORT,
        prod_date=date(3018, 1, 1),
        is_used=False,
        speed=speed,
        crew_size=10,
        rating=rating,
    )


def _result_with_all(ships: list[Ship]) -> MagicMock:
    result = MagicMock()
    result.scalars.return_value.all.return_value = ships
    return result


def _result_with_one(ship: Ship | None) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = ship
    return result


@pytest.fixture
def mock_session():
    session = AsyncMock()
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.delete = AsyncMock()
    return session


@pytest.fixture
def ship_service(mock_session):
    return ShipService(mock_session, current_year=3019)


class TestListShips:
    @pytest.mark.asyncio
    async def test_filters_sorts_and_pages(self, ship_service, mock_session) -> None:
        ships = [
            _make_ship(1, speed=0.9),
            _make_ship(2, speed=0.2, planet="Earth"),
            _make_ship(3, speed=0.4),
            _make_ship(4, speed=0.1),
        ]
        mock_session.execute.return_value = _result_with_all(ships)

        page = await ship_service.list_ships(
            criteria=ShipCriteria(planet="Mars"),
            order=ShipOrder.SPEED,
            page_number=0,
            page_size=2,
        )

        assert [ship.id for ship in page] == [4, 3]

    @pytest.mark.asyncio
    async def test_default_page_size_is_empty(self, ship_service, mock_session) -> None:
        mock_session.execute.return_value = _result_with_all([_make_ship(1)])

        assert await ship_service.list_ships() == []


class TestCountShips:
    @pytest.mark.asyncio
    async def test_counts_filtered_ships(self, ship_service, mock_session) -> None:
        ships = [_make_ship(1, rating=1.0), _make_ship(2, rating=5.0), _make_ship(3, rating=9.0)]
        mock_session.execute.return_value = _result_with_all(ships)

        assert await ship_service.count_ships(ShipCriteria(min_rating=5.0)) == 2


class TestGetShip:
    @pytest.mark.asyncio
    async def test_get_ship_success(self, ship_service, mock_session) -> None:
        mock_session.execute.return_value = _result_with_one(_make_ship(7))

        ship = await ship_service.get_ship(7)

        assert ship.id == 7

    @pytest.mark.asyncio
    async def test_get_ship_not_found_raises(self, ship_service, mock_session) -> None:
        mock_session.execute.return_value = _result_with_one(None)

        with pytest.raises(NotFoundException, match="not found"):
            await ship_service.get_ship(99)


class TestCreateShip:
    @pytest.mark.asyncio
    async def test_create_ship_success(self, ship_service, mock_session) -> None:
        payload = ShipCreate(
            name="Serenity",
            planet="Earth",
            ship_type=ShipType.MERCHANT,
            prod_date=date(3018, 2, 5),
            speed=0.5,
            crew_size=9,
        )

        ship = await ship_service.create_ship(payload)

        mock_session.add.assert_called_once_with(ship)
        mock_session.flush.assert_awaited_once()
        assert ship.rating == 20.0

    @pytest.mark.asyncio
    async def test_create_invalid_ship_is_not_persisted(self, ship_service, mock_session) -> None:
        with pytest.raises(InvalidFieldError):
            await ship_service.create_ship(ShipCreate(name="Serenity"))

        mock_session.add.assert_not_called()
        mock_session.flush.assert_not_awaited()


class TestUpdateShip:
    @pytest.mark.asyncio
    async def test_update_ship_persists_and_rerates(self, ship_service, mock_session) -> None:
        mock_session.execute.return_value = _result_with_one(_make_ship(5))

        ship = await ship_service.update_ship(5, ShipUpdate(is_used=True))

        assert ship.rating == 10.0
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_invalid_field_not_persisted(self, ship_service, mock_session) -> None:
        existing = _make_ship(5)
        mock_session.execute.return_value = _result_with_one(existing)

        with pytest.raises(InvalidFieldError):
            await ship_service.update_ship(5, ShipUpdate(name="Renamed", crew_size=0))

        assert existing.name == "Ship 5"
        mock_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_missing_ship_raises(self, ship_service, mock_session) -> None:
        mock_session.execute.return_value = _result_with_one(None)

        with pytest.raises(NotFoundException):
            await ship_service.update_ship(5, ShipUpdate(name="Renamed"))


class TestDeleteShip:
    @pytest.mark.asyncio
    async def test_delete_ship(self, ship_service, mock_session) -> None:
        existing = _make_ship(3)
        mock_session.execute.return_value = _result_with_one(existing)

        await ship_service.delete_ship(3)

        mock_session.delete.assert_awaited_once_with(existing)

    @pytest.mark.asyncio
    async def test_delete_missing_ship_raises(self, ship_service, mock_session) -> None:
        mock_session.execute.return_value = _result_with_one(None)

        with pytest.raises(NotFoundException):
            await ship_service.delete_ship(3)

        mock_session.delete.assert_not_awaited()


def test_current_year_defaults_to_settings() -> None:
    from cosmoport.config import settings

    assert ShipService(AsyncMock()).current_year == settings.ship_rating_current_year
