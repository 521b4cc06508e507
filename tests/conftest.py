import os
import sys
from typing import Dict, List

import pytest
from httpx import ASGITransport, AsyncClient
from asgi_lifespan import LifespanManager

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
os.environ.setdefault("ANYIO_BACKEND", "asyncio")

from healthcare_chain.main import app  # noqa: E402


class RecordingHasher:
    """Fake hasher returning canned digests and recording every input."""

    def __init__(self, digests: Dict[bytes, bytes]):
        self.digests = digests
        self.calls: List[bytes] = []

    def keccak256(self, data: bytes) -> bytes:
        self.calls.append(data)
        return self.digests.get(data, b"\x00" * 32)


@pytest.fixture
def recording_hasher():
    """
    Hasher that maps UnauthorizedAccess() to 0xe2517d3f and
    NotPatientOwner() to 0x11111111.
    """
    return RecordingHasher(
        {
            b"UnauthorizedAccess()": bytes.fromhex("e2517d3f") + b"\xaa" * 28,
            b"NotPatientOwner()": bytes.fromhex("11111111") + b"\xbb" * 28,
        }
    )


@pytest.fixture
def anyio_backend():
    """Run async tests on the asyncio backend only."""
    return os.environ["ANYIO_BACKEND"]


@pytest.fixture
async def async_client():
    """Shared HTTPX async client with FastAPI lifespan handling."""
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
