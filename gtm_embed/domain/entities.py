"""
Domain entities shared across components.

The only persisted value is the container ID option; everything else here
describes the environment a page is rendered in.
"""

from __future__ import annotations

from enum import Enum

# Name of the single option owned by this package.
CONTAINER_ID_OPTION = "required_gtm_container_id"

# Placeholder shown to administrators wherever the format is described.
CONTAINER_ID_FORMAT = "GTM-XXXXXXX"


class EnvironmentType(str, Enum):
    """Environment types a site can be deployed as."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, value: str | None) -> EnvironmentType:
        """
        Resolve a raw environment type string.

        Unset or unknown values resolve to production, matching how the
        hosting platform treats a missing declaration.
        """
        if isinstance(value, cls):
            return value
        if not value:
            return cls.PRODUCTION
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.PRODUCTION


class EnvironmentKind(str, Enum):
    """Coarse classification consumed by the emission policy."""

    PRODUCTION = "production"
    OTHER = "other"

    @classmethod
    def from_type(cls, env_type: EnvironmentType) -> EnvironmentKind:
        if env_type is EnvironmentType.PRODUCTION:
            return cls.PRODUCTION
        return cls.OTHER
