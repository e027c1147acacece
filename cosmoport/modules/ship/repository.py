"""ShipRepository — storage access for ships."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cosmoport.models.ship import Ship


class ShipRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> list[Ship]:
        result = await self.session.execute(select(Ship).order_by(Ship.id))
        return list(result.scalars().all())

    async def find_by_id(self, ship_id: int) -> Ship | None:
        result = await self.session.execute(select(Ship).where(Ship.id == ship_id))
        return result.scalar_one_or_none()

    async def save(self, ship: Ship) -> Ship:
        """Persist *ship*; new ships get their id assigned on flush."""
        self.session.add(ship)
        await self.session.flush()
        return ship

    async def delete(self, ship: Ship) -> None:
        await self.session.delete(ship)
        await self.session.flush()
