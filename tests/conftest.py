"""Pytest fixtures for payroll report tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from payroll_report.calculators import seed_pay_groups
from payroll_report.database import create_schema, get_engine, make_session_factory

# One SQLite file per test; every session in the test sees the same data.
TEST_DATABASE_URL = "sqlite+aiosqlite:///{path}"


HEADER = "date,hours worked,employee id,job group"


def time_report_csv(*rows: str, header: str = HEADER) -> bytes:
    """Build a CSV upload body from a header and data rows."""
    return ("\n".join([header, *rows]) + "\n").encode("utf-8")


@pytest.fixture
def make_csv():
    """Expose the CSV builder to tests."""
    return time_report_csv


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine with the schema in place."""
    engine = get_engine(TEST_DATABASE_URL.format(path=tmp_path / "payroll_test.db"))
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine, with pay groups seeded."""
    factory = make_session_factory(engine)
    async with factory() as session:
        await seed_pay_groups(session)
    return factory


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()
