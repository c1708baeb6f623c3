"""
Shared fixtures for all tests.

Uses an in-memory SQLite database so tests are isolated and fast.
``seed_cars`` inserts 53 cars spread over three manufacturers and two engines,
the engines carrying three parts between them.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

import pytest
import pytest_asyncio
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from simple_paginate.api.dependencies import SimplePaginationParams
from simple_paginate.core.exceptions import register_exception_handlers
from tests.support.models import Base, Car, CarResponse, Engine, Manufacturer, Part

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

CAR_COUNT = 53

# --- Fixtures ---


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    engine = create_async_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def seed_cars(test_session: AsyncSession) -> list[int]:
    manufacturers = [
        Manufacturer(id=1, name="Volvo", country="Sweden"),
        Manufacturer(id=2, name="Saab", country="Sweden"),
        Manufacturer(id=3, name="Ford", country="USA"),
    ]
    engines = [Engine(id=1, name="B5254"), Engine(id=2, name="Duratec")]
    parts = [
        Part(id=1, name="turbo", engine_id=1),
        Part(id=2, name="intercooler", engine_id=1),
        Part(id=3, name="camshaft", engine_id=2),
    ]
    test_session.add_all(manufacturers + engines + parts)
    for i in range(1, CAR_COUNT + 1):
        test_session.add(
            Car(
                id=i,
                name=f"car-{i:02d}",
                manufacturer_id=manufacturers[i % 3].id,
                engine_id=engines[i % 2].id,
            )
        )
    await test_session.commit()
    # Start every test from an empty identity map so nothing is pre-loaded
    test_session.expunge_all()
    return list(range(1, CAR_COUNT + 1))


@pytest.fixture
def cars_query(test_session: AsyncSession):
    return Car.query(test_session).order_by(Car.id)


@pytest_asyncio.fixture(scope="function")
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Return an HTTPX AsyncClient wired to a small app listing cars."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/cars")
    async def list_cars(pagination: Annotated[SimplePaginationParams, Depends()]) -> dict:
        result = await Car.query(test_session).order_by(Car.id).simple_paginate(
            pagination.options
        )
        return result.map(CarResponse.model_validate).model_dump()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
