"""Building and updating ships from client payloads.

Both entry points validate every supplied field before touching an entity,
so a rejected payload never leaves a ship half-updated.
"""

from __future__ import annotations

import logging

from cosmoport.exceptions import InvalidFieldError
from cosmoport.models.ship import Ship
from cosmoport.modules.ship.constants import RATING_FIELDS, VALIDATED_FIELDS
from cosmoport.modules.ship.rating import calculate_rating
from cosmoport.modules.ship.schemas import ShipCreate, ShipUpdate
from cosmoport.modules.ship.validators import find_invalid_fields

logger = logging.getLogger(__name__)


def _raise_invalid(invalid_fields: list[str]) -> None:
    details = [
        {"field": field_name, "message": f"Invalid or missing value for '{field_name}'"}
        for field_name in invalid_fields
    ]
    raise InvalidFieldError(invalid_fields[0], details)


def _refresh_rating(ship: Ship, current_year: int) -> None:
    ship.rating = calculate_rating(ship.speed, ship.is_used, ship.prod_date.year, current_year)


def build_ship(incoming: ShipCreate, current_year: int) -> Ship:
    """Create a new, not yet persisted ship from a creation payload.

    Every validated field is required.  ``is_used`` defaults to ``False``.
    """
    values = incoming.model_dump()
    invalid_fields = find_invalid_fields(values)
    if invalid_fields:
        _raise_invalid(invalid_fields)

    ship = Ship(**{field_name: values[field_name] for field_name in VALIDATED_FIELDS})
    ship.is_used = bool(values["is_used"])
    _refresh_rating(ship, current_year)
    return ship


def apply_update(existing: Ship, incoming: ShipUpdate, current_year: int) -> Ship:
    """Merge a partial update onto *existing* and return it.

    Only fields explicitly set on *incoming* are considered.  All of them are
    validated first; on any failure :class:`InvalidFieldError` is raised and
    *existing* is left untouched.  An explicit ``null`` for ``is_used`` is
    ignored.  The rating is recomputed when ``prod_date``, ``speed`` or
    ``is_used`` is applied.
    """
    supplied = incoming.model_dump(exclude_unset=True)
    if supplied.get("is_used", True) is None:
        del supplied["is_used"]

    invalid_fields = find_invalid_fields(supplied)
    if invalid_fields:
        _raise_invalid(invalid_fields)

    for field_name, field_value in supplied.items():
        setattr(existing, field_name, field_value)

    if RATING_FIELDS.intersection(supplied):
        _refresh_rating(existing, current_year)
        logger.debug("Recomputed rating for ship %s: %s", existing.id, existing.rating)

    return existing
