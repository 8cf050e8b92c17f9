"""
User account service — application entry point.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.accounts import router as accounts_router
from api.middleware import register_exception_handlers, register_middleware
from config.settings import DEFAULT_JWT_SECRET, Settings, config
from database.session import init_models

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("aiosqlite", "sqlalchemy.engine", "httpx", "httpcore"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def warn_if_default_secret(settings: Settings = config) -> bool:
    """Log a warning when tokens are signed with the built-in secret."""
    if settings.jwt_secret != DEFAULT_JWT_SECRET:
        return False
    logger.warning(
        "JWT_SECRET not set — tokens are signed with the built-in default and can be forged. "
        "Set JWT_SECRET to a long random value."
    )
    return True


def create_app(*, sync_schema: bool = True) -> FastAPI:
    app = FastAPI(
        title="User Account Service",
        version="1.0.0",
        description="Registration, login and self-service profile API.",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    warn_if_default_secret()
    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(accounts_router, prefix="/api")

    if sync_schema:
        @app.on_event("startup")
        async def on_startup():
            await init_models()
            logger.info("Server berjalan di http://localhost:%d", config.port)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
