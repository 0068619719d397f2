"""
Pytest configuration file.

Test settings live in pyproject.toml under [tool.pytest.ini_options].
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "property: marks hypothesis property tests")


@pytest.fixture(scope="session")
def project_path():
    """Return project root path."""
    return project_root
