"""Ship field validators.

Every predicate is total: it accepts any object, returns ``False`` for values
of the wrong type, and never raises.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import date
from typing import Any

from cosmoport.models.enums import ShipType
from cosmoport.modules.ship.constants import (
    MAX_CREW_SIZE,
    MAX_PROD_YEAR_EXCLUSIVE,
    MAX_SPEED,
    MAX_STRING_LENGTH,
    MIN_CREW_SIZE,
    MIN_PROD_YEAR_EXCLUSIVE,
    MIN_SPEED,
    VALIDATED_FIELDS,
)


def _is_valid_string(value: Any) -> bool:
    return isinstance(value, str) and 0 < len(value) <= MAX_STRING_LENGTH


def is_valid_name(value: Any) -> bool:
    return _is_valid_string(value)


def is_valid_planet(value: Any) -> bool:
    return _is_valid_string(value)


def is_valid_speed(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return MIN_SPEED <= value <= MAX_SPEED


def is_valid_crew_size(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_CREW_SIZE <= value <= MAX_CREW_SIZE


def is_valid_prod_date(value: Any) -> bool:
    if not isinstance(value, date):
        return False
    return MIN_PROD_YEAR_EXCLUSIVE < value.year < MAX_PROD_YEAR_EXCLUSIVE


def is_valid_ship_type(value: Any) -> bool:
    return isinstance(value, ShipType)


FIELD_VALIDATORS: dict[str, Callable[[Any], bool]] = {
    "name": is_valid_name,
    "planet": is_valid_planet,
    "ship_type": is_valid_ship_type,
    "prod_date": is_valid_prod_date,
    "speed": is_valid_speed,
    "crew_size": is_valid_crew_size,
}


def find_invalid_fields(values: Mapping[str, Any]) -> list[str]:
    """Return the supplied fields that fail validation, in canonical order.

    Fields missing from *values* are not checked; unknown keys are ignored.
    """
    return [
        field_name
        for field_name in VALIDATED_FIELDS
        if field_name in values and not FIELD_VALIDATORS[field_name](values[field_name])
    ]


def is_ship_valid(ship: Any) -> bool:
    """Full-entity sanity check: every validated field present and valid."""
    if ship is None:
        return False
    values = {field_name: getattr(ship, field_name, None) for field_name in VALIDATED_FIELDS}
    return not find_invalid_fields(values)
