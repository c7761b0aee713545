"""
tests.conftest

Shared fixtures for the API tests.

Responsibilities:
- Build one app per test against a fresh in-memory SQLite database.
- Drive the app lifespan and expose an in-process httpx client.
- Mint bearer tokens and give direct repository-level access to the database.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable
from typing import Any, TypeVar

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy import func, select

from sea_transport.api.app import create_app
from sea_transport.auth.jwt import JwtConfig, issue_token
from sea_transport.auth.models import ROLE_USER
from sea_transport.settings import Settings

ModelT = TypeVar("ModelT")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env="test",
        database_url="sqlite+aiosqlite:///:memory:",
        log_level="WARNING",
        log_json=False,
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not manage lifespan; do it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


def bearer(
    settings: Settings, *, roles: Iterable[str] = (ROLE_USER,), subject: str = "user"
) -> dict[str, str]:
    token = issue_token(cfg=JwtConfig.from_settings(settings), subject=subject, roles=roles)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(settings: Settings) -> dict[str, str]:
    return bearer(settings)


class Store:
    """Direct database access, bypassing the HTTP layer."""

    def __init__(self, app: FastAPI) -> None:
        self._sessionmaker = app.state.sessionmaker

    async def save(self, entity: ModelT) -> ModelT:
        async with self._sessionmaker() as session:
            session.add(entity)
            await session.commit()
        return entity

    async def find_all(self, model: type[ModelT]) -> list[ModelT]:
        async with self._sessionmaker() as session:
            stmt = select(model).order_by(model.id)  # type: ignore[attr-defined]
            return list((await session.execute(stmt)).scalars().all())

    async def count(self, model: type[Any]) -> int:
        async with self._sessionmaker() as session:
            stmt = select(func.count()).select_from(model)
            return int((await session.execute(stmt)).scalar_one())


@pytest.fixture
def store(app: FastAPI) -> Store:
    return Store(app)


@pytest.fixture
def headers_for(settings: Settings):
    def _headers(*roles: str, subject: str = "user") -> dict[str, str]:
        return bearer(settings, roles=roles, subject=subject)

    return _headers
