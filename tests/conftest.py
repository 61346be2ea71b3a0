"""
Pytest configuration and fixtures.
"""
import pytest
import sys
import os
import tempfile

# Add the parent directory to path so we can import the app
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Keep the JSON log out of the working tree; read once when calcapp.config is imported
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.mkdtemp(prefix="calcapp-"), "calculator.log"))


@pytest.fixture(autouse=True)
def reset_rate_limit():
    """Start every test with an empty rate limit window."""
    from calcapp.main import limiter

    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client():
    """Create a test client with the app's lifespan running."""
    from fastapi.testclient import TestClient
    from calcapp.main import app

    with TestClient(app) as test_client:
        yield test_client
