import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from booking_api.core.db import init_database
from booking_api.core.unit_of_work import UnitOfWork
from booking_api.services.booking import BookingOrchestrator
from booking_api.services.event_dispatcher import EventDispatcher
from tests.factories import vessels


@pytest_asyncio.fixture
async def engine(tmp_path):
    """File-backed SQLite with a fresh schema for every test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'bookings.db'}")
    await init_database(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    factory = async_sessionmaker(bind=engine, expire_on_commit=False)
    async with factory() as session:
        session.add_all(vessels())
        await session.commit()
    return factory


@pytest.fixture
def uow_factory(session_factory):
    return lambda: UnitOfWork(session_factory)


@pytest.fixture
def dispatcher():
    return EventDispatcher()


@pytest.fixture
def orchestrator(uow_factory, dispatcher):
    return BookingOrchestrator(uow_factory, dispatcher)


@pytest.fixture
def count_rows(session_factory):
    async def _count(model) -> int:
        async with session_factory() as session:
            return (await session.execute(select(func.count()).select_from(model))).scalar_one()

    return _count
