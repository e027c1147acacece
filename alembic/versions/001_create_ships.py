"""Ship registry table

Revision ID: 001
Revises:
Create Date: 2026-10-19

Creates: ships
Enums: shiptype
"""

from collections.abc import Sequence

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # ── 1. Create enum types ──────────────────────────────────────────────
    op.execute("""
        CREATE TYPE shiptype AS ENUM (
            'TRANSPORT', 'MILITARY', 'MERCHANT'
        );
    """)

    # ── 2. Create ships table ─────────────────────────────────────────────
    op.execute("""
        CREATE TABLE ships (
            id SERIAL PRIMARY KEY,
            name VARCHAR(50) NOT NULL,
            planet VARCHAR(50) NOT NULL,
            ship_type shiptype NOT NULL,
            prod_date DATE NOT NULL,
            is_used BOOLEAN NOT NULL DEFAULT false,
            speed DOUBLE PRECISION NOT NULL,
            crew_size INTEGER NOT NULL,
            rating DOUBLE PRECISION NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            CONSTRAINT ck_ships_speed_range CHECK (speed >= 0.01 AND speed <= 0.99),
            CONSTRAINT ck_ships_crew_size_range CHECK (crew_size >= 1 AND crew_size <= 9999)
        );
    """)
    op.execute("CREATE INDEX ix_ships_ship_type ON ships (ship_type);")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS ships;")
    op.execute("DROP TYPE IF EXISTS shiptype;")
