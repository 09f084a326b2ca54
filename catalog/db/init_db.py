"""
Create catalog tables from the model metadata.

Usage:
  python -m catalog.db.init_db
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncEngine

# Import all models so they are registered on Base.metadata
from catalog.core import models  # noqa: F401
from catalog.core.config import get_settings
from catalog.db.session import Base, build_engine


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def main() -> None:
    engine = build_engine(get_settings().database_url)
    try:
        await create_tables(engine)
        print("✅ Catalog tables are in place")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
