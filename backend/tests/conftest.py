"""Shared test fixtures."""

from datetime import date
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from studbook.database import Base
from studbook.models import Horse, Owner, Sex

from tests.fixtures.factories import create_horse, create_owner


@pytest.fixture
async def db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session with transaction rollback."""
    async_session = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def test_owner(db_session: AsyncSession) -> Owner:
    """Create a sample owner for testing."""
    owner = create_owner(first_name="Anna", last_name="Huber")
    db_session.add(owner)
    await db_session.flush()
    return owner


@pytest.fixture
async def test_horse(db_session: AsyncSession) -> Horse:
    """Create a horse without parents."""
    horse = create_horse(name="Wendy", date_of_birth=date(2012, 6, 1), sex=Sex.FEMALE)
    db_session.add(horse)
    await db_session.flush()
    return horse


@pytest.fixture
async def pedigree(db_session: AsyncSession, test_owner: Owner) -> dict[str, Horse]:
    """Create three generations.

    grandmother + grandfather -> mother; mother + father -> foal
    """
    grandmother = create_horse(name="Grandmother", date_of_birth=date(2000, 3, 1), sex=Sex.FEMALE)
    grandfather = create_horse(name="Grandfather", date_of_birth=date(1999, 5, 10), sex=Sex.MALE)
    father = create_horse(
        name="Father", date_of_birth=date(2007, 4, 2), sex=Sex.MALE, owner_id=test_owner.id
    )
    db_session.add_all([grandmother, grandfather, father])
    await db_session.flush()

    mother = create_horse(
        name="Mother",
        date_of_birth=date(2008, 2, 14),
        sex=Sex.FEMALE,
        mother_id=grandmother.id,
        father_id=grandfather.id,
    )
    db_session.add(mother)
    await db_session.flush()

    foal = create_horse(
        name="Foal",
        date_of_birth=date(2015, 7, 20),
        sex=Sex.MALE,
        description="Bay colt",
        owner_id=test_owner.id,
        mother_id=mother.id,
        father_id=father.id,
    )
    db_session.add(foal)
    await db_session.flush()

    return {
        "grandmother": grandmother,
        "grandfather": grandfather,
        "mother": mother,
        "father": father,
        "foal": foal,
    }
