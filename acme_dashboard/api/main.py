import logging
import os
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from acme_dashboard.adapters.page_cache import InMemoryPageCache
from acme_dashboard.adapters.sqlite.schema import create_schema
from acme_dashboard.adapters.sqlite_db import SQLiteDatabase
from acme_dashboard.api.deps import get_clock, get_settings
from acme_dashboard.app_shell.config import validate_ops_rules
from acme_dashboard.components.invoices import INVOICES_PATH
from acme_dashboard.rules.loader import load_rules

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules, validate and open the database on startup (fail-fast)
    db: SQLiteDatabase | None = None
    try:
        rules = load_rules(settings.rules_path)
        validate_ops_rules(rules)
        logger.info(f"Rules loaded from {settings.rules_path}")

        db = SQLiteDatabase.from_url(settings.database_url)
        db.open()
        create_schema(db)
    except Exception as e:
        logger.critical(f"Startup configuration failed: {e}")
        if db is not None:
            db.close()
        sys.exit(1)

    app.state.rules = rules
    app.state.db = db
    app.state.page_cache = InMemoryPageCache(
        get_clock(), ttl_seconds=rules.cache.listing_ttl_seconds
    )

    try:
        yield
    finally:
        db.close()


app = FastAPI(
    title="Acme Dashboard API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from acme_dashboard.api.routes import auth, invoices  # noqa: E402

app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(invoices.router, prefix=INVOICES_PATH, tags=["Invoices"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
