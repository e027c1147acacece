"""ShipService — CRUD and query operations for the ship registry."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from cosmoport.config import settings
from cosmoport.exceptions import InvalidFieldError, NotFoundException
from cosmoport.models.ship import Ship
from cosmoport.modules.ship.merge import apply_update, build_ship
from cosmoport.modules.ship.query import (
    ShipCriteria,
    ShipOrder,
    filter_ships,
    paginate,
    sort_ships,
)
from cosmoport.modules.ship.repository import ShipRepository
from cosmoport.modules.ship.schemas import ShipCreate, ShipUpdate

logger = logging.getLogger(__name__)


class ShipService:
    def __init__(self, session: AsyncSession, current_year: int | None = None) -> None:
        self.session = session
        self.repository = ShipRepository(session)
        self.current_year = (
            current_year if current_year is not None else settings.ship_rating_current_year
        )

    async def list_ships(
        self,
        criteria: ShipCriteria | None = None,
        order: ShipOrder | None = ShipOrder.ID,
        page_number: int = 0,
        page_size: int = 0,
    ) -> list[Ship]:
        ships = filter_ships(await self.repository.find_all(), criteria)
        ships = sort_ships(ships, order)
        return paginate(ships, page_number, page_size)

    async def count_ships(self, criteria: ShipCriteria | None = None) -> int:
        return len(filter_ships(await self.repository.find_all(), criteria))

    async def get_ship(self, ship_id: int) -> Ship:
        ship = await self.repository.find_by_id(ship_id)
        if ship is None:
            raise NotFoundException(f"Ship {ship_id} not found")
        return ship

    async def create_ship(self, data: ShipCreate) -> Ship:
        try:
            ship = build_ship(data, self.current_year)
        except InvalidFieldError as exc:
            logger.warning("Rejected ship creation, invalid fields: %s", exc.details)
            raise
        ship = await self.repository.save(ship)
        logger.info("Created ship %s (%s)", ship.id, ship.name)
        return ship

    async def update_ship(self, ship_id: int, data: ShipUpdate) -> Ship:
        ship = await self.get_ship(ship_id)
        try:
            apply_update(ship, data, self.current_year)
        except InvalidFieldError as exc:
            logger.warning("Rejected update of ship %s, invalid fields: %s", ship_id, exc.details)
            raise
        ship = await self.repository.save(ship)
        logger.info("Updated ship %s", ship_id)
        return ship

    async def delete_ship(self, ship_id: int) -> None:
        ship = await self.get_ship(ship_id)
        await self.repository.delete(ship)
        logger.info("Deleted ship %s", ship_id)
