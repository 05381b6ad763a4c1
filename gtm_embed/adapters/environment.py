"""Environment classifier backed by configuration."""

from __future__ import annotations

from gtm_embed.domain.entities import EnvironmentKind, EnvironmentType


class ConfiguredEnvironment:
    """Classifies the environment from a configured environment type."""

    def __init__(self, env_type: EnvironmentType | str | None = None) -> None:
        if isinstance(env_type, EnvironmentType):
            self._type = env_type
        else:
            self._type = EnvironmentType.parse(env_type)

    @property
    def environment_type(self) -> EnvironmentType:
        return self._type

    def current(self) -> EnvironmentKind:
        return EnvironmentKind.from_type(self._type)
