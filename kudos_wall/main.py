# kudos_wall/main.py (async version)

"""
Composition root.

Run with:
    uvicorn kudos_wall.main:create_app --factory
"""

import logging
import asyncio
from datetime import timedelta
from typing import Optional
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from kudos_wall.adapters.configuration.config import Settings
from kudos_wall.adapters.inbound.api.v1.router import api_router
from kudos_wall.adapters.outbound.analytics.mock_analytics_repository import MockAnalyticsRepository
from kudos_wall.adapters.outbound.persistence.database import Database
from kudos_wall.adapters.outbound.security.auth_user_manager import UserAuthManager
from kudos_wall.adapters.outbound.security.password_hasher import PasswordHasher
from kudos_wall.adapters.outbound.security.token_blacklist import InMemoryTokenBlacklist
from kudos_wall.application.ports.outbound import ITokenBlacklist
from kudos_wall.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
    validation_exception_handler,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


# ── TOKEN BLACKLIST CLEANUP TASK ──────────────────────────────────────────────
async def periodic_cleanup(token_blacklist: ITokenBlacklist, interval_seconds: int):
    """Background task to periodically prune expired tokens from the blacklist."""
    while True:
        try:
            await asyncio.sleep(interval_seconds)
            await token_blacklist.prune_expired()
        except asyncio.CancelledError:
            logger.info("Token cleanup task cancelled")
            break
        except Exception as e:
            logger.exception(f"Error pruning token blacklist: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup and shutdown of the long-lived resources on ``app.state``.
    """
    settings: Settings = app.state.settings
    logger.info("Application starting up...")

    if settings.DB_CREATE_TABLES:
        await app.state.database.create_all()

    app.state.cleanup_task = asyncio.create_task(
        periodic_cleanup(app.state.token_blacklist, settings.TOKEN_BLACKLIST_CLEANUP_INTERVAL_SECONDS)
    )

    yield

    logger.info("Application shutting down...")
    app.state.cleanup_task.cancel()
    try:
        await app.state.cleanup_task
    except asyncio.CancelledError:
        pass
    await app.state.database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application and every collaborator it owns.

    Args:
        settings: Configuration to use; read from the environment when omitted
    """
    settings = settings or Settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Digital Kudos Wall - peer recognition API",
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs" if settings.SCHEMA_VISIBILITY else None,
        redoc_url="/redoc" if settings.SCHEMA_VISIBILITY else None,
        openapi_url="/openapi.json" if settings.SCHEMA_VISIBILITY else None,
    )

    app.state.settings = settings
    app.state.database = Database(settings)
    app.state.password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    app.state.token_manager = UserAuthManager(
        secret_key=settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
        expires_delta=timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS),
    )
    app.state.token_blacklist = InMemoryTokenBlacklist()
    app.state.registration_lock = asyncio.Lock()
    app.state.analytics_repository = MockAnalyticsRepository()

    # Middlewares (last added runs first)
    app.add_middleware(AsyncRequestLoggingMiddleware, settings=settings)
    app.add_middleware(AsyncExceptionMiddleware, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Routers
    app.include_router(api_router, prefix=settings.API_PREFIX)

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema

        spec = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )

        # Validation errors are answered with 400, never 422
        for schema in ("HTTPValidationError", "ValidationError"):
            spec.get("components", {}).get("schemas", {}).pop(schema, None)

        for path in spec.get("paths", {}).values():
            for op in path.values():
                op.get("responses", {}).pop("422", None)

        app.openapi_schema = spec
        return spec

    app.openapi = custom_openapi

    logger.info(f"{settings.PROJECT_NAME} configured for {settings.ENVIRONMENT}")
    return app
