"""Database seeder for Cosmoport — populates demo ships.

Run via: python -m cosmoport.seed
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from cosmoport.config import settings
from cosmoport.database.engine import sync_engine
from cosmoport.models.ship import Ship
from cosmoport.modules.ship.merge import build_ship
from cosmoport.modules.ship.schemas import ShipCreate
from cosmoport.seed_data.ships import SHIPS


def seed_ships(session: Session, current_year: int) -> int:
    """Insert demo ships whose name is not taken yet; return how many were added."""
    existing_names = set(session.execute(select(Ship.name)).scalars().all())
    count = 0
    for ship_data in SHIPS:
        if ship_data["name"] in existing_names:
            continue
        session.add(build_ship(ShipCreate(**ship_data), current_year))
        count += 1
    session.flush()
    print(f"  Seeded {count} ships ({len(SHIPS) - count} already present).")
    return count


def main() -> None:
    """Run all seed functions inside a single transaction."""
    print("Seeding Cosmoport database...")

    with Session(sync_engine) as session:
        with session.begin():
            seed_ships(session, settings.ship_rating_current_year)

    print("Seeding complete.")


if __name__ == "__main__":
    main()
