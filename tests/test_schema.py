"""Tests that the ORM schema and settings line up with the migration and seeder."""

from sqlalchemy import create_engine, inspect

from cosmoport.config import Settings
from cosmoport.database.base import Base
from cosmoport.models.ship import Ship


def test_sync_database_url_uses_psycopg2_driver() -> None:
    default = Settings.model_fields["database_url_sync"].default

    assert default.startswith("postgresql+psycopg2://")


def test_ship_type_index_declared_on_model() -> None:
    index_names = {index.name for index in Ship.__table__.indexes}

    assert "ix_ships_ship_type" in index_names


def test_create_all_builds_ship_type_index() -> None:
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)

    indexes = {index["name"]: index["column_names"] for index in inspect(engine).get_indexes("ships")}

    assert indexes["ix_ships_ship_type"] == ["ship_type"]
