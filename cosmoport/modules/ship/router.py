"""Ship registry API router."""

from datetime import date

from fastapi import APIRouter, Depends, Path, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.ext.asyncio import AsyncSession

from cosmoport.config import settings
from cosmoport.database.session import get_db
from cosmoport.models.enums import ShipType
from cosmoport.modules.ship.query import ShipCriteria, ShipOrder
from cosmoport.modules.ship.schemas import (
    ShipCountResponse,
    ShipCreate,
    ShipResponse,
    ShipUpdate,
)
from cosmoport.modules.ship.ship_service import ShipService
from cosmoport.schemas.responses import ErrorResponse

router = APIRouter(prefix="/ships", tags=["ships"])
limiter = Limiter(key_func=get_remote_address)

_NOT_FOUND = {404: {"model": ErrorResponse}}
_INVALID = {400: {"model": ErrorResponse}}


def _get_ship_service(session: AsyncSession = Depends(get_db)) -> ShipService:
    return ShipService(session)


def _get_criteria(
    name: str | None = Query(None),
    planet: str | None = Query(None),
    ship_type: ShipType | None = Query(None),
    after: date | None = Query(None),
    before: date | None = Query(None),
    is_used: bool | None = Query(None),
    min_speed: float | None = Query(None),
    max_speed: float | None = Query(None),
    min_crew_size: int | None = Query(None),
    max_crew_size: int | None = Query(None),
    min_rating: float | None = Query(None),
    max_rating: float | None = Query(None),
) -> ShipCriteria:
    return ShipCriteria(
        name=name,
        planet=planet,
        ship_type=ship_type,
        after=after,
        before=before,
        is_used=is_used,
        min_speed=min_speed,
        max_speed=max_speed,
        min_crew_size=min_crew_size,
        max_crew_size=max_crew_size,
        min_rating=min_rating,
        max_rating=max_rating,
    )


# ---------------------------------------------------------------------------
# Static routes (BEFORE /{ship_id} to avoid path conflicts)
# ---------------------------------------------------------------------------


@router.get("/count", response_model=ShipCountResponse)
async def count_ships(
    criteria: ShipCriteria = Depends(_get_criteria),
    service: ShipService = Depends(_get_ship_service),
):
    count = await service.count_ships(criteria)
    return ShipCountResponse(count=count)


# ---------------------------------------------------------------------------
# Ship CRUD
# ---------------------------------------------------------------------------


@router.get("", response_model=list[ShipResponse])
@limiter.limit(lambda: settings.ships_list_rate_limit)
async def list_ships(
    request: Request,
    criteria: ShipCriteria = Depends(_get_criteria),
    order: ShipOrder = Query(ShipOrder.ID),
    page_number: int = Query(0, ge=0),
    page_size: int = Query(settings.default_page_size, ge=0),
    service: ShipService = Depends(_get_ship_service),
):
    """Filter, order and page the registry, in that order."""
    return await service.list_ships(
        criteria=criteria,
        order=order,
        page_number=page_number,
        page_size=page_size,
    )


@router.post("", response_model=ShipResponse, status_code=201, responses=_INVALID)
async def create_ship(
    body: ShipCreate,
    service: ShipService = Depends(_get_ship_service),
):
    return await service.create_ship(body)


@router.get("/{ship_id}", response_model=ShipResponse, responses=_NOT_FOUND)
async def get_ship(
    ship_id: int = Path(..., gt=0),
    service: ShipService = Depends(_get_ship_service),
):
    return await service.get_ship(ship_id)


@router.post("/{ship_id}", response_model=ShipResponse, responses={**_INVALID, **_NOT_FOUND})
@router.patch("/{ship_id}", response_model=ShipResponse, responses={**_INVALID, **_NOT_FOUND})
async def update_ship(
    body: ShipUpdate,
    ship_id: int = Path(..., gt=0),
    service: ShipService = Depends(_get_ship_service),
):
    """Partially update a ship; omitted fields keep their current values."""
    return await service.update_ship(ship_id, body)


@router.delete("/{ship_id}", status_code=204, responses=_NOT_FOUND)
async def delete_ship(
    ship_id: int = Path(..., gt=0),
    service: ShipService = Depends(_get_ship_service),
) -> None:
    await service.delete_ship(ship_id)
