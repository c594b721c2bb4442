import asyncio
import logging
import re

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)

from booking_api.core.config import get_settings
from booking_api.models.base import Base

logger = logging.getLogger(__name__)

settings = get_settings()


def get_async_database_url(url: str) -> str:
    """Convert database URL to async-compatible format using psycopg driver."""
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    elif url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+psycopg://", 1)

    if "channel_binding=" in url:
        url = re.sub(r'[&?]channel_binding=[^&]*', '', url)
        url = url.replace('?&', '?').rstrip('?')

    return url


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    database_url = get_async_database_url(url)
    connect_args = {}
    if "postgresql" in database_url:
        connect_args = {"connect_timeout": 10}

    logger.debug("Creating database engine for %s", database_url.split("@")[-1])
    return create_async_engine(
        database_url,
        future=True,
        echo=echo,
        pool_pre_ping=settings.db_pool_pre_ping,
        connect_args=connect_args,
    )


engine: AsyncEngine = build_engine(settings.database_url, echo=settings.db_echo)

AsyncSessionFactory = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
)


async def init_database(bind: AsyncEngine | None = None) -> None:
    """Create all tables. In production use Alembic migrations instead."""
    import booking_api.models  # noqa: F401 ensure models import

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized")


async def test_database_connection() -> bool:
    """Test database connection with timeout."""

    async def _test_connection():
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            result.fetchone()

    try:
        await asyncio.wait_for(_test_connection(), timeout=10.0)
        return True
    except asyncio.TimeoutError:
        logger.error("Database connection test timed out after 10 seconds")
        return False
    except Exception as e:
        logger.error(f"Database connection test failed: {type(e).__name__}: {e}")
        return False
