"""In-memory ship querying — filtering, ordering and paging.

These functions operate on an already-loaded collection and never mutate
their inputs.  The pipeline order is always filter -> sort -> paginate.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any

from cosmoport.models.enums import ShipType
from cosmoport.models.ship import Ship


@dataclass(frozen=True)
class ShipCriteria:
    """Optional filter constraints; ``None`` means "no constraint".

    ``name`` and ``planet`` are case-sensitive substring matches, every bound
    is inclusive.
    """

    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    after: date | None = None
    before: date | None = None
    is_used: bool | None = None
    min_speed: float | None = None
    max_speed: float | None = None
    min_crew_size: int | None = None
    max_crew_size: int | None = None
    min_rating: float | None = None
    max_rating: float | None = None

    def matches(self, ship: Ship) -> bool:
        if self.name is not None and self.name not in ship.name:
            return False
        if self.planet is not None and self.planet not in ship.planet:
            return False
        if self.ship_type is not None and ship.ship_type != self.ship_type:
            return False
        if self.after is not None and ship.prod_date < self.after:
            return False
        if self.before is not None and ship.prod_date > self.before:
            return False
        if self.is_used is not None and ship.is_used != self.is_used:
            return False
        if not _within(ship.speed, self.min_speed, self.max_speed):
            return False
        if not _within(ship.crew_size, self.min_crew_size, self.max_crew_size):
            return False
        return _within(ship.rating, self.min_rating, self.max_rating)


def _within(value: Any, lower: Any, upper: Any) -> bool:
    if lower is not None and value < lower:
        return False
    if upper is not None and value > upper:
        return False
    return True


class ShipOrder(str, enum.Enum):
    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"
    NONE = "NONE"


_ORDER_KEYS: dict[ShipOrder, Callable[[Ship], Any]] = {
    ShipOrder.ID: lambda ship: ship.id,
    ShipOrder.SPEED: lambda ship: ship.speed,
    ShipOrder.DATE: lambda ship: ship.prod_date,
    ShipOrder.RATING: lambda ship: ship.rating,
}


def filter_ships(ships: Sequence[Ship], criteria: ShipCriteria | None) -> list[Ship]:
    """Return the ships satisfying every present constraint, in input order."""
    if criteria is None:
        return list(ships)
    return [ship for ship in ships if criteria.matches(ship)]


def sort_ships(ships: Sequence[Ship], order: ShipOrder | None) -> list[Ship]:
    """Return *ships* stably sorted ascending by *order*'s key.

    ``ShipOrder.NONE`` (or ``None``) keeps the input order.
    """
    key = _ORDER_KEYS.get(order) if order is not None else None
    if key is None:
        return list(ships)
    return sorted(ships, key=key)


def paginate(ships: Sequence[Ship], page_number: int = 0, page_size: int = 0) -> list[Ship]:
    """Return the ``[page_number * page_size, +page_size)`` slice, clamped to the end.

    Pages past the end and a zero ``page_size`` yield an empty list.
    """
    if page_number < 0 or page_size < 0:
        raise ValueError("page_number and page_size must be non-negative")
    start = page_number * page_size
    end = min(start + page_size, len(ships))
    if start >= end:
        return []
    return list(ships[start:end])
