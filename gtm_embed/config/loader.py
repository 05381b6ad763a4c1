import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gtm_embed.config.models import AppConfig
from gtm_embed.domain.entities import EnvironmentType

# Environment variables that override values from the config file.
ENV_OVERRIDES = {
    "GTM_ENVIRONMENT_TYPE": "environment_type",
    "GTM_DB_PATH": "db_path",
    "GTM_ADMIN_TOKEN": "admin_token",
    "GTM_LOG_LEVEL": "log_level",
}


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in config file: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(data).__name__}")
    return data


def load_config(path: Path | None = None, environ: dict[str, str] | None = None) -> AppConfig:
    """
    Load and validate the config file, then apply environment overrides.
    A missing file yields the defaults.
    Raises ValueError if the YAML or the schema is invalid.
    """
    environ = dict(os.environ) if environ is None else environ

    data: dict[str, Any] = {}
    if path is not None and path.exists():
        data = _read_yaml(path)

    for env_var, key in ENV_OVERRIDES.items():
        if env_var in environ:
            data[key] = environ[env_var]

    # Unknown environment types fall back to production instead of failing.
    if "environment_type" in data:
        data["environment_type"] = EnvironmentType.parse(data["environment_type"])
    if isinstance(data.get("log_level"), str):
        data["log_level"] = data["log_level"].upper()

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Config validation failed:\n{e}") from e
