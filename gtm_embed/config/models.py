from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from gtm_embed.domain.entities import EnvironmentType


class AppConfig(BaseModel):
    """Runtime configuration for the GTM embed service."""

    environment_type: EnvironmentType = EnvironmentType.PRODUCTION
    db_path: str = "./data/gtm.db"
    admin_token: str | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    site_title: str = Field(default="My Site", min_length=1)

    model_config = ConfigDict(extra="forbid")
