"""Service test fixtures: async DB, fake catalog, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db and get_catalog_client overridden on the app
    - StaticPool: every session shares the single in-memory connection, so rows
      committed by a request are visible to assertions
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import favorites_api.models  # noqa: F401
from favorites_api.api.dependencies import get_catalog_client
from favorites_api.db.base import Base
from favorites_api.infrastructure.database import get_db
from favorites_api.main import app
from favorites_api.models import Character, FavoriteList, Film
from tests.services.fake_catalog import FakeCatalog


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def catalog():
    return FakeCatalog()


@pytest.fixture
async def client(test_session_factory, catalog):
    """FastAPI test client with DB and catalog dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog_client] = lambda: catalog

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def count_rows(test_session_factory):
    """Count rows of a model in a fresh session."""
    async def _count(model) -> int:
        async with test_session_factory() as session:
            result = await session.execute(
                select(func.count()).select_from(model),
            )
            return result.scalar_one()
    return _count


@pytest.fixture
def seed_lists(test_session_factory):
    """Insert lists with the given names (no films), in order."""
    async def _seed(*names: str) -> list[int]:
        async with test_session_factory() as session:
            rows = [FavoriteList(list_name=name, films=[]) for name in names]
            session.add_all(rows)
            await session.commit()
            return [row.id for row in rows]
    return _seed


@pytest.fixture
async def seed_pivot_list(test_session_factory):
    """List with Film A [Luke, Leia] and Film B [Leia, Han]."""
    async with test_session_factory() as session:
        luke = Character(name="Luke")
        leia = Character(name="Leia")
        han = Character(name="Han")
        film_a = Film(title="A", release_date="1977-05-25", characters=[luke, leia])
        film_b = Film(title="B", release_date="1980-05-17", characters=[leia, han])
        favorite_list = FavoriteList(list_name="Pivot", films=[film_a, film_b])
        session.add(favorite_list)
        await session.commit()
        return favorite_list.id
