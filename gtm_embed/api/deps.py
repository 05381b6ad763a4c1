import logging
import os
import secrets
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from gtm_embed import bootstrap
from gtm_embed.adapters.environment import ConfiguredEnvironment
from gtm_embed.adapters.settings_errors import SettingsErrors
from gtm_embed.adapters.sqlite_options import SQLiteOptionStore
from gtm_embed.components.gtm_settings import GtmSettingsService
from gtm_embed.config.loader import load_config
from gtm_embed.config.models import AppConfig
from gtm_embed.shell.hooks.page_hooks import PageHooks

logger = logging.getLogger(__name__)


# --- Config ---
def get_config_path() -> Path:
    return Path(os.environ.get("GTM_CONFIG", "gtm.yaml"))


@lru_cache
def get_config() -> AppConfig:
    return load_config(get_config_path())


# --- Adapters ---
def get_option_store(config: AppConfig = Depends(get_config)) -> SQLiteOptionStore:
    db_dir = Path(config.db_path).parent
    db_dir.mkdir(parents=True, exist_ok=True)
    return SQLiteOptionStore(config.db_path)


def get_environment(config: AppConfig = Depends(get_config)) -> ConfiguredEnvironment:
    return ConfiguredEnvironment(config.environment_type)


def get_settings_errors() -> SettingsErrors:
    """Fresh collector per request."""
    return SettingsErrors()


# --- Component Services ---
def get_settings_service(
    store: SQLiteOptionStore = Depends(get_option_store),
    errors: SettingsErrors = Depends(get_settings_errors),
) -> GtmSettingsService:
    """Get GTM settings component service."""
    return GtmSettingsService(store=store, errors=errors)


def get_page_hooks(
    store: SQLiteOptionStore = Depends(get_option_store),
    environment: ConfiguredEnvironment = Depends(get_environment),
) -> PageHooks:
    """Page hooks with the GTM callbacks registered."""
    hooks = PageHooks()
    bootstrap.register(hooks, store=store, environment=environment)
    return hooks


# --- Auth ---
bearer_scheme = HTTPBearer(auto_error=False)


def require_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    config: AppConfig = Depends(get_config),
) -> None:
    """Allow the request only with the configured admin token."""
    if not config.admin_token:
        logger.error("Admin request refused: no admin token configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Admin access is not configured",
        )

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not secrets.compare_digest(credentials.credentials, config.admin_token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
