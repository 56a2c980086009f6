"""Initialize database schema for places service.

Usage:
    python -m apps.places.jobs.init_db
"""

from __future__ import annotations

import asyncio
import sys

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from apps.places.infrastructure.persistence_postgres.models import SCHEMA, Base
from apps.places.setup.config import get_settings


def _masked(database_url: str) -> str:
    return database_url.split("@")[1] if "@" in database_url else "database"


async def init_db() -> int:
    """places 스키마와 테이블을 생성합니다 (이미 있으면 유지)."""
    settings = get_settings()
    print(f"🔗 Connecting to database: {_masked(settings.database_url)}")

    engine = create_async_engine(settings.database_url, echo=False)

    try:
        async with engine.begin() as conn:
            exists = await conn.scalar(
                text("SELECT 1 FROM information_schema.schemata WHERE schema_name = :schema_name"),
                {"schema_name": SCHEMA},
            )
            if exists:
                print(f"ℹ️  Schema '{SCHEMA}' already exists; skipping creation.")
            else:
                print(f"📦 Creating '{SCHEMA}' schema...")
                await conn.execute(text(f"CREATE SCHEMA IF NOT EXISTS {SCHEMA}"))

            print("📦 Creating database tables...")
            await conn.run_sync(Base.metadata.create_all)

        print("✅ Database initialization completed!\n")
        print("📋 Tables:")
        for table in Base.metadata.sorted_tables:
            print(f"   - {table.fullname}")
        return 0
    except Exception as exc:  # pragma: no cover - diagnostic output
        print(f"❌ Error initializing database: {exc}")
        return 1
    finally:
        await engine.dispose()


def main() -> None:
    """Entry point for database initialization."""
    sys.exit(asyncio.run(init_db()))


if __name__ == "__main__":
    main()
