"""
Pytest configuration and fixtures
"""
import random
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from numbers_api.app.core.config import Settings  # noqa: E402
from tests.helpers import InMemorySessionStore  # noqa: E402
from numbers_api.app.main import create_app  # noqa: E402


@pytest.fixture
def test_settings():
    """Settings with a fixed secret and the default value range"""
    return Settings(secret_key="test-secret", random_min=1, random_max=100, debug=False)


@pytest.fixture
def app(test_settings):
    """Create a fresh application for each test"""
    return create_app(test_settings)


@pytest.fixture
def client(app):
    """Create a test client; its cookie jar holds one session"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store():
    return InMemorySessionStore()


@pytest.fixture
def rng():
    """Seeded random generator for reproducible values"""
    return random.Random(1234)
