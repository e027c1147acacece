"""Pydantic schemas for ship module request/response bodies.

Request schemas only declare types; range and length rules live in
``validators`` so that violations surface as ``InvalidFieldError`` with the
offending field named.  Neither request schema accepts ``id`` or ``rating``.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict

from cosmoport.models.enums import ShipType


class ShipCreate(BaseModel):
    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    prod_date: date | None = None
    is_used: bool | None = None
    speed: float | None = None
    crew_size: int | None = None


class ShipUpdate(BaseModel):
    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    prod_date: date | None = None
    is_used: bool | None = None
    speed: float | None = None
    crew_size: int | None = None


class ShipResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    planet: str
    ship_type: ShipType
    prod_date: date
    is_used: bool
    speed: float
    crew_size: int
    rating: float


class ShipCountResponse(BaseModel):
    count: int
