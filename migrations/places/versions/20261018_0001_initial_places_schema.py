"""Initial places schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-18

Places Domain Migration
Schema: places.*
"""

from typing import Sequence

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create categories and locations tables."""
    op.execute("CREATE SCHEMA IF NOT EXISTS places")

    # categories 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS places.categories (
            id SERIAL PRIMARY KEY,
            name VARCHAR(100) NOT NULL,
            slug VARCHAR(100) NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_places_categories_slug UNIQUE (slug)
        )
    """)

    # locations 테이블 (카테고리 삭제는 참조가 남아 있으면 거부)
    op.execute("""
        CREATE TABLE IF NOT EXISTS places.locations (
            id SERIAL PRIMARY KEY,
            name VARCHAR(200) NOT NULL,
            description TEXT,
            address TEXT NOT NULL,
            latitude NUMERIC(10, 8) NOT NULL,
            longitude NUMERIC(11, 8) NOT NULL,
            category_id INTEGER NOT NULL,
            phone VARCHAR(20),
            website TEXT,
            rating NUMERIC(2, 1),
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT fk_places_locations_category_id
                FOREIGN KEY (category_id) REFERENCES places.categories(id) ON DELETE RESTRICT
        )
    """)

    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_places_locations_category_id
        ON places.locations(category_id)
    """)


def downgrade() -> None:
    """Drop places tables.

    주의: 모든 데이터가 삭제됩니다!
    """
    op.execute("DROP TABLE IF EXISTS places.locations")
    op.execute("DROP TABLE IF EXISTS places.categories")
