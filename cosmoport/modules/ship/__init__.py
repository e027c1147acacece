"""Ship module — registry CRUD plus in-memory filtering, ordering and paging."""

from cosmoport.modules.ship.merge import apply_update, build_ship
from cosmoport.modules.ship.query import ShipCriteria, ShipOrder, filter_ships, paginate, sort_ships
from cosmoport.modules.ship.rating import calculate_rating
from cosmoport.modules.ship.ship_service import ShipService
from cosmoport.modules.ship.validators import is_ship_valid

__all__ = [
    # Query pipeline
    "ShipCriteria",
    "ShipOrder",
    "filter_ships",
    "sort_ships",
    "paginate",
    # Rating
    "calculate_rating",
    # Validation / mutation
    "is_ship_valid",
    "build_ship",
    "apply_update",
    # Service
    "ShipService",
]
