import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from gtm_embed import __version__
from gtm_embed.api.deps import get_config, get_config_path

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Load config on startup (fail-fast)
    try:
        config = get_config()
    except (OSError, ValueError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.critical("Config load failed from %s: %s", get_config_path(), e)
        sys.exit(1)

    logging.basicConfig(level=config.log_level.upper())
    logger.info(
        "GTM embed started (environment=%s, db=%s)",
        config.environment_type.value,
        config.db_path,
    )
    if not config.admin_token:
        logger.warning("No admin token configured; admin settings API is disabled")

    yield


app = FastAPI(
    title="GTM Embed",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from gtm_embed.api.routes import admin_settings, public_pages  # noqa: E402

app.include_router(admin_settings.router, prefix="/api/admin/settings/gtm", tags=["Admin Settings"])
app.include_router(public_pages.router, prefix="", tags=["Pages"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "gtm-embed"}
