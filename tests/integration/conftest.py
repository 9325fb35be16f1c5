"""Integration test fixtures and configuration."""

import os

import pytest
import yaml

from film_wizard.config import ConfigManager
from film_wizard.infrastructure import Container


@pytest.fixture
def tmdb_api_key():
    """Real TMDb API key, or skip."""
    api_key = os.getenv("TMDB_API_KEY")
    if not api_key:
        pytest.skip("TMDB_API_KEY not configured - skipping real API test")
    return api_key


@pytest.fixture
def integration_config(tmp_path, tmdb_api_key):
    """Create integration test configuration."""
    config_content = {
        "tmdb": {
            "api_key": tmdb_api_key,
            "language": "en-US",
            "timeout": 20,
        },
        "logging": {"level": "DEBUG"},
    }

    config_file = tmp_path / "integration_config.yaml"
    with open(config_file, "w") as f:
        yaml.dump(config_content, f, default_flow_style=False, indent=2)

    return config_file


@pytest.fixture
def integration_container(integration_config, tmp_path):
    """Container wired to the real TMDb services."""
    container = Container(ConfigManager(integration_config, env_file=tmp_path / ".env"))
    container.configure_default_services()
    return container
