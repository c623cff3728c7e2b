"""Tests for the SQLAlchemy repository against a temporary SQLite file."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
import pytest_asyncio

from jsonstore.domain.entities import JsonRecord
from jsonstore.domain.exceptions import EntityNotFoundError
from jsonstore.infrastructure.database import Database
from jsonstore.infrastructure.database.repositories import SQLAlchemyJsonRecordRepository


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncIterator[Database]:
    db = Database(f"sqlite:///{tmp_path / 'repository.db'}")
    await db.create_tables()
    yield db
    await db.dispose()


@pytest.mark.asyncio
async def test_create_then_get_round_trips(database: Database):
    record = JsonRecord(data={"a": [1, 2.5, None]})
    async with database.session_factory() as session:
        await SQLAlchemyJsonRecordRepository(session).create(record)

    async with database.session_factory() as session:
        stored = await SQLAlchemyJsonRecordRepository(session).get_by_id(record.id)

    assert stored == record


@pytest.mark.asyncio
async def test_update_of_missing_row_raises_not_found(database: Database):
    async with database.session_factory() as session:
        repository = SQLAlchemyJsonRecordRepository(session)
        with pytest.raises(EntityNotFoundError):
            await repository.update(JsonRecord(data=1))
        assert await repository.list_summaries() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [float("nan"), float("inf"), {"x": [float("-inf")]}])
async def test_create_refuses_non_finite_numbers(database: Database, value):
    async with database.session_factory() as session:
        repository = SQLAlchemyJsonRecordRepository(session)
        with pytest.raises(ValueError):
            await repository.create(JsonRecord(data=value))
        assert await repository.list_summaries() == []
