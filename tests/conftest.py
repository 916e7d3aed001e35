"""
Shared pytest fixtures for the admin settings tests.

Provides configuration fixtures and a bootstrapped settings page whose
registry and dispatcher start empty.
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from ptam.admin import ActionDispatcher, AdminSettings, TabProviderRegistry
from ptam.config.models import AdminConfig


# -----------------------------------------------------------------------------
# Configuration Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def admin_config() -> AdminConfig:
    """Default configuration with a fixed admin URL."""
    return AdminConfig(admin_url="https://example.test/wp-admin")


@pytest.fixture
def sample_config_dict() -> Dict[str, Any]:
    """Minimal valid raw configuration."""
    return {
        "admin": {
            "namespace": "ptam",
            "page_slug": "custom-query-blocks",
            "page_title": "Custom Query Blocks",
            "admin_url": "https://example.test/wp-admin/",
        }
    }


@pytest.fixture
def sample_config_file(tmp_path: Path, sample_config_dict: Dict[str, Any]) -> Path:
    """Temporary JSON config file."""
    config_path = tmp_path / "ptam.json"
    config_path.write_text(json.dumps(sample_config_dict, indent=2), encoding="utf-8")
    return config_path


# -----------------------------------------------------------------------------
# Settings Page Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def empty_settings(admin_config: AdminConfig) -> AdminSettings:
    """Settings page with no providers or handlers registered."""
    return AdminSettings(
        admin_config,
        registry=TabProviderRegistry(),
        dispatcher=ActionDispatcher(admin_config.namespace),
    )
