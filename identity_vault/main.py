"""
FastAPI application bootstrap with: \n
- Explicit `Database` storage handle built once per app and stored on `app.state` \n
- Lifespan-managed shutdown of the connection pool \n
- CORS configured for the frontend \n
- Flat `{"error": ...}` error bodies \n
- Swagger UI at `/api-docs` (OpenAPI JSON at `/api-docs.json`) \n

Environment contract (from `settings`): \n
- APP_ENV: configuration profile. \n
- FRONTEND_URL: allowed CORS origin. \n
- PORT / HOST: where uvicorn listens when run as a module. \n
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from identity_vault.api.errors import attach_exception_handlers
from identity_vault.api.fast_api import router
from identity_vault.database.config.config import Settings, get_settings
from identity_vault.database.config.connection_engine import Database

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Auth", "description": "Registration and login"},
    {"name": "Resources", "description": "Resource management"},
    {"name": "Users", "description": "User management"},
    {"name": "DIDs", "description": "DID management"},
    {"name": "Documents", "description": "Document management"},
    {"name": "DocumentTransactions", "description": "Document transaction management"},
]


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    App lifespan manager.

    Notes
    ------------
    - On startup: logs the port and profile the app serves.
    - On shutdown: disposes the connection pool of `app.state.database`.
    """
    settings = app.state.settings
    logger.info("Server is running on port %s (APP_ENV=%s)", settings.PORT, settings.APP_ENV)
    try:
        yield
    finally:
        app.state.database.dispose()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Parameters
    ----------
    settings : Settings, optional
        Defaults to `get_settings()`.
    database : Database, optional
        Storage handle; built from `settings` when omitted.
    """
    settings = settings or get_settings()
    app = FastAPI(
        title="Identity Vault API",
        description="CRUD API over users, DIDs, resources, documents and document transactions.",
        version="1.0.0",
        openapi_tags=OPENAPI_TAGS,
        docs_url="/api-docs",
        openapi_url="/api-docs.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=settings.FRONTEND_URL != "*",
        allow_methods=["*"],
        allow_headers=["*"],
    )
    attach_exception_handlers(app)
    app.include_router(router)
    return app


def run() -> None:
    """Serve the application with uvicorn on `settings.HOST:settings.PORT`."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run("identity_vault.main:create_app", factory=True, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
