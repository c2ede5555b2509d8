"""Pytest fixtures for infrastructure tests."""

import sys
from pathlib import Path

import pytest

import azure_mocks

azure_mocks.install()


@pytest.fixture(scope="session", autouse=True)
def add_iac_to_path():
    """Add project root to Python path for imports."""
    project_root = Path(__file__).parent.parent.parent
    sys.path.insert(0, str(project_root))
    yield
    # Cleanup
    sys.path.remove(str(project_root))


@pytest.fixture
def iac_project_root():
    """Return the IaC package directory."""
    return Path(__file__).parent.parent.parent / "nextcloud_iac"


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in the IaC package."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]


@pytest.fixture
def env_config():
    """Return a valid dev EnvironmentConfig with defaults."""
    from nextcloud_iac.configs.base import EnvironmentConfig

    return EnvironmentConfig(
        environment="dev",
        subscription_id="00000000-0000-0000-0000-000000000000",
        admin_password="Password1234!",
    )
