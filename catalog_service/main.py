"""
Catalog Service - account signup/login and token-protected product CRUD
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging

from .auth import TokenService
from .config import DEFAULT_JWT_SECRET, Settings, get_settings
from .db import build_engine, build_session_factory, init_db
from .errors import register_error_handlers
from .routes import accounts, health, products

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Apply the schema before serving; a failure aborts startup."""
    init_db(app.state.engine)
    yield
    app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application from an immutable Settings.

    The engine, session factory and token service are created once here
    and shared through app.state.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    if settings.JWT_SECRET == DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET is not set; using the built-in development secret")

    app = FastAPI(
        title="Catalog Service",
        description="Account signup/login and token-protected product catalog",
        version="1.0.0",
        lifespan=lifespan
    )

    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.token_service = TokenService.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(accounts.router)
    app.include_router(products.router)
    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
