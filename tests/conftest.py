import pytest

from gtm_embed.adapters.environment import ConfiguredEnvironment
from gtm_embed.adapters.memory_options import InMemoryOptionStore
from gtm_embed.config.models import AppConfig
from gtm_embed.domain.entities import EnvironmentType

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture
def memory_store() -> InMemoryOptionStore:
    return InMemoryOptionStore()


@pytest.fixture
def production_env() -> ConfiguredEnvironment:
    return ConfiguredEnvironment(EnvironmentType.PRODUCTION)


@pytest.fixture
def staging_env() -> ConfiguredEnvironment:
    return ConfiguredEnvironment(EnvironmentType.STAGING)


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    """Config pointing at a temporary database, with an admin token."""
    return AppConfig(
        environment_type=EnvironmentType.PRODUCTION,
        db_path=str(tmp_path / "gtm.db"),
        admin_token=ADMIN_TOKEN,
        site_title="Test Site",
    )


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
