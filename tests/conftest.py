from pathlib import Path
from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ai.grounding import GroundingEnforcer
from api.dependencies import db, grounding
from db.models import Base
from main import app
from tests.fakes import FakeGenerate


@pytest_asyncio.fixture(scope="function")
async def test_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_sessionmaker(
    test_engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def test_session(
    test_sessionmaker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with test_sessionmaker() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def fake_generate() -> FakeGenerate:
    return FakeGenerate(output="According to Clinical Document 1, rest is advised.")


@pytest_asyncio.fixture(scope="function")
async def test_client(
    test_session: AsyncSession, fake_generate: FakeGenerate
) -> AsyncGenerator[AsyncClient, None]:
    def override_get_session():
        return test_session

    def override_get_grounding_enforcer() -> GroundingEnforcer:
        return GroundingEnforcer(generate=fake_generate, timeout=5.0)

    app.dependency_overrides[db.get_session] = override_get_session
    app.dependency_overrides[grounding.get_grounding_enforcer] = (
        override_get_grounding_enforcer
    )

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
