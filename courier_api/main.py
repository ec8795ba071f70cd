"""Courier Portal API — FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from courier_api.core.config import settings
from courier_api.core.exceptions import register_exception_handlers
from courier_api.db.base import dispose_engine
from courier_api.middleware.request_logging import RequestLoggingMiddleware
from courier_api.routers.v1 import api_router
from courier_api.schemas.diagnostics import HealthResponse

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    if settings.log_level:
        level = getattr(logging, settings.log_level.upper(), logging.INFO)
    else:
        level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s starting (env=%s)", settings.app_name, settings.app_env)
    if settings.jwt_secret_is_default:
        logger.warning("JWT_SECRET is not set; using the built-in development secret")
    yield
    await dispose_engine()
    logger.info("%s stopped", settings.app_name)


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version=API_VERSION,
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
        lifespan=lifespan,
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Request logging ---
    app.add_middleware(RequestLoggingMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- v1 API routes (/api/v1/*) ---
    app.include_router(api_router, prefix="/api/v1")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env, version=API_VERSION)

    return app


app = create_app()
