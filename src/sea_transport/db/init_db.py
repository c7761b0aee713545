"""
sea_transport.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create tables for local development and tests.
- Keep production migration workflow separate (Alembic).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from sea_transport.db import models  # noqa: F401  # register tables on Base.metadata
from sea_transport.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Create the entity tables if they don't exist.
    Production runs `alembic upgrade head` instead.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
