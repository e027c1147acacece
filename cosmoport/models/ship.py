"""Ship model — the registry's single managed entity."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, CheckConstraint, Date, Float, Integer, String
from sqlalchemy import Enum as SQLAlchemyEnum
from sqlalchemy.orm import Mapped, mapped_column

from cosmoport.database.base import Base, TimestampMixin
from cosmoport.models.enums import ShipType


class Ship(Base, TimestampMixin):
    __tablename__ = "ships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    planet: Mapped[str] = mapped_column(String(50), nullable=False)
    ship_type: Mapped[ShipType] = mapped_column(
        SQLAlchemyEnum(ShipType, name="shiptype"),
        nullable=False,
        index=True,
    )
    prod_date: Mapped[date] = mapped_column(Date, nullable=False)
    is_used: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    speed: Mapped[float] = mapped_column(Float, nullable=False)
    crew_size: Mapped[int] = mapped_column(Integer, nullable=False)
    # Derived from speed, is_used and prod_date; never written by clients
    rating: Mapped[float] = mapped_column(Float, nullable=False)

    __table_args__ = (
        CheckConstraint("speed >= 0.01 AND speed <= 0.99", name="ck_ships_speed_range"),
        CheckConstraint("crew_size >= 1 AND crew_size <= 9999", name="ck_ships_crew_size_range"),
    )

    def __repr__(self) -> str:
        return f"<Ship id={self.id} name={self.name!r}>"
