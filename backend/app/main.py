"""FastAPI application factory and main entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.logging import get_logger, setup_logging
from app.travel_app.infrastructure.db.exceptions import CorruptDatabaseObjectException
from app.travel_app.infrastructure.db.session import create_schema
from app.travel_app.presentation.api import bundles, customers, health

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    # Startup
    setup_logging(settings)
    logger.info("Travel App starting up...")
    logger.info(f"Environment: {settings.app_env}")

    if settings.is_development:
        logger.info("Creating database schema...")
        await create_schema()

    yield

    # Shutdown
    logger.info("Travel App shutting down...")


async def corrupt_data_handler(
    request: Request, exc: CorruptDatabaseObjectException
) -> JSONResponse:
    """Fail the request when stored data no longer passes validation."""
    logger.error(f"Corrupt stored data while serving {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Stored data is corrupt", "code": "CORRUPT_DATABASE_OBJECT"},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Travel App",
        description="Excursion bundles, customer registration and bookings",
        version=health.APP_VERSION,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.is_development else None,
        redoc_url="/api/redoc" if settings.is_development else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CorruptDatabaseObjectException, corrupt_data_handler)

    # API routes
    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(customers.router, prefix="/api", tags=["Customers"])
    app.include_router(bundles.router, prefix="/api", tags=["Bundles"])

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )
