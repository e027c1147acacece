"""Ship rating formula."""

from __future__ import annotations

import math

from cosmoport.exceptions import RatingCalculationError
from cosmoport.modules.ship.constants import (
    NEW_SHIP_COEFFICIENT,
    RATING_SPEED_FACTOR,
    USED_SHIP_COEFFICIENT,
)


def round_half_up(value: float, digits: int = 2) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def calculate_rating(
    speed: float,
    is_used: bool,
    production_year: int,
    current_year: int,
) -> float:
    """Compute a ship's rating: ``80 * speed * k / (current_year - production_year + 1)``.

    ``k`` is 0.5 for used ships and 1.0 otherwise; the result is rounded
    half-up to two decimals.  ``current_year`` anchors the ship's age and is
    supplied by configuration.

    Production years after ``current_year`` still pass validation (the year
    range runs to 3099).  A year exactly one past ``current_year`` (3020 with
    the default 3019) raises :class:`RatingCalculationError`; later years
    yield a negative rating.
    """
    coefficient = USED_SHIP_COEFFICIENT if is_used else NEW_SHIP_COEFFICIENT
    age_divisor = current_year - production_year + 1
    if age_divisor == 0:
        raise RatingCalculationError(
            f"Cannot rate ship produced in {production_year} against year {current_year}"
        )
    return round_half_up(RATING_SPEED_FACTOR * speed * coefficient / age_divisor)
