import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.api.deps import get_rules, get_settings
from src.api.routes import public_sharing

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules on startup (fail-fast)
    try:
        rules = get_rules(settings)
        logger.info(
            "Rules loaded from %s (%d share platforms enabled)",
            settings.rules_path,
            len(rules.sharing.platforms) if rules.sharing.enabled else 0,
        )
    except (FileNotFoundError, ValueError):
        logger.exception("Rules load failed")
        sys.exit(1)

    yield


app = FastAPI(
    title="Share Links API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(public_sharing.router, prefix="/api/public", tags=["Public"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
