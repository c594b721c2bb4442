import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from booking_api.api.router import api_router
from booking_api.core.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

db_initialized = False
db_error: str | None = None


@asynccontextmanager
async def lifespan(_: FastAPI):
    global db_initialized, db_error
    import asyncio
    from booking_api.core.db import engine, init_database, test_database_connection

    logger.info("Starting application initialization")
    try:
        if await test_database_connection():
            await asyncio.wait_for(init_database(), timeout=30.0)
            db_initialized = True
            logger.info("Database initialization complete")
        else:
            db_error = "Database connection failed"
            logger.error(db_error)
    except asyncio.TimeoutError:
        db_error = "Database initialization timed out after 30s"
        logger.error(db_error)

    yield

    logger.info("Shutting down")
    await engine.dispose()


app = FastAPI(
    title=settings.project_name,
    debug=settings.debug,
    lifespan=lifespan,
)

logger.debug(f"CORS origins: {settings.backend_cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept", "Origin", "X-Requested-With"],
)

app.include_router(api_router, prefix="/v1")


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """Health check endpoint - responds immediately, reports database status."""
    return {
        "status": "ok",
        "service": settings.project_name,
        "database_ready": db_initialized,
        "database_error": db_error,
    }
