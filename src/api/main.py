import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.api.deps import get_settings
from src.api.errors import register_exception_handlers
from src.app_shell.config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    configure_logging(settings)

    # Apply pending migrations on startup (fail-fast)
    migrator = SQLiteMigrator(settings.database.path, settings.database.migrations_dir)
    migrator.run_migrations()
    logger.info("Database ready at %s", settings.database.path)

    yield


app = FastAPI(
    title="Maritime Registry API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

register_exception_handlers(app)

# --- Routers ---
from src.api.routes import ports, terminals, user_account  # noqa: E402

app.include_router(ports.router, prefix="/ports", tags=["Ports"])
app.include_router(terminals.router, prefix="/terminals", tags=["Terminals"])
app.include_router(user_account.router, prefix="/useraccount", tags=["User Account"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
