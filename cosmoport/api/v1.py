"""Centralized v1 API router — all module routers are included here."""

from fastapi import APIRouter

from cosmoport.modules.ship.router import router as ship_router

v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(ship_router)
