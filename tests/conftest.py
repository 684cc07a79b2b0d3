"""Pytest configuration and fixtures."""

import hashlib
import hmac
import json
import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import StreamConfig, get_config  # noqa: E402

TEST_API_SECRET = "test_secret"


def sign(body: bytes, secret: str = TEST_API_SECRET) -> str:
    """Produce the X-Signature Stream would send for this body."""
    return hmac.new(
        key=secret.encode(),
        msg=body,
        digestmod=hashlib.sha256
    ).hexdigest()


@pytest.fixture
def stream_config() -> StreamConfig:
    return StreamConfig(
        api_key="test_key",
        api_secret=TEST_API_SECRET,
        base_url="https://chat.stream-io-api.com",
    )


@pytest.fixture
def client(stream_config):
    """TestClient with configuration injected instead of read from the environment."""
    from fastapi.testclient import TestClient

    from main import app

    app.dependency_overrides[get_config] = lambda: stream_config
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def post_signed(client):
    """POST a JSON payload with a valid signature."""

    def _post(path: str, payload: dict):
        body = json.dumps(payload).encode()
        return client.post(
            path,
            content=body,
            headers={"Content-Type": "application/json", "X-Signature": sign(body)},
        )

    return _post
