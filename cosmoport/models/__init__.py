# Import all models so SQLAlchemy metadata is populated for Alembic autogenerate
from cosmoport.models.enums import ShipType
from cosmoport.models.ship import Ship

__all__ = ["Ship", "ShipType"]
