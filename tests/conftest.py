"""Shared fixtures: in-memory SQLite per test, an app wired to it, seed helpers."""

import os

# Settings are read at import time; keep the global engine in memory and quiet
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import atla.domain  # noqa: F401
from atla.db.base import Base, configure_sqlite, get_db
from atla.domain import Character, Episode, Quote, characters_and_episodes, characters_and_quotes
from atla.main import create_app

NATIONS = ("Water Tribe", "Earth Kingdom", "Fire Nation", "Air Nomads")


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    configure_sqlite(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    app = create_app()

    async def _get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


def character_age(i: int) -> int:
    """Deterministic ages with plenty of duplicates (10..39)."""
    return (i * 7) % 30 + 10


@pytest.fixture
def seed_characters(session):
    """Insert ``count`` characters named Character-01.. with duplicated ages."""

    async def _seed(count: int = 45) -> list[Character]:
        characters = [
            Character(
                name=f"Character-{i:02d}",
                age=character_age(i),
                gender="female" if i % 2 else "male",
                status="alive",
                nation=NATIONS[i % len(NATIONS)],
            )
            for i in range(1, count + 1)
        ]
        session.add_all(characters)
        await session.commit()
        return characters

    return _seed


@pytest.fixture
async def small_world(session):
    """Three characters, two episodes, three quotes, linked through the join tables."""
    aang = Character(name="Aang", age=112, gender="male", status="alive", nation="Air Nomads")
    katara = Character(name="Katara", age=14, gender="female", status="alive", nation="Water Tribe")
    zuko = Character(name="Zuko", age=16, gender="male", status="alive", nation="Fire Nation")
    boy = Episode(title="The Boy in the Iceberg", air_date="2005-02-21")
    avatar = Episode(title="The Avatar Returns", air_date="2005-02-21")
    q1 = Quote(quote="Water. Earth. Fire. Air.")
    q2 = Quote(quote="Honor? You have no honor!")
    q3 = Quote(quote="I'm just a kid.")
    session.add_all([aang, katara, zuko, boy, avatar, q1, q2, q3])
    await session.flush()
    await session.execute(
        insert(characters_and_episodes),
        [
            {"character_id": aang.id, "episode_id": boy.id},
            {"character_id": katara.id, "episode_id": boy.id},
            {"character_id": aang.id, "episode_id": avatar.id},
            {"character_id": zuko.id, "episode_id": avatar.id},
        ],
    )
    await session.execute(
        insert(characters_and_quotes),
        [
            {"character_id": katara.id, "quote_id": q1.id},
            {"character_id": zuko.id, "quote_id": q2.id},
            {"character_id": aang.id, "quote_id": q3.id},
        ],
    )
    await session.commit()
    return {
        "aang": aang, "katara": katara, "zuko": zuko,
        "boy": boy, "avatar": avatar,
        "q1": q1, "q2": q2, "q3": q3,
    }
