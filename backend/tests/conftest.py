"""
PhotoStudio Backend — Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   A real in-memory SQLite store (aiosqlite) backs the Storage Access Layer
       and route tests; integrations are replaced with mocks.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── storage:         Storage over a fresh in-memory database (tables created)
    ├── broken_storage:  Storage whose tables were never created (every call faults)
    ├── settings_factory: Builds Settings with explicit overrides
    ├── image_host:      Mock ImageHostService
    ├── email_notifier:  Mock EmailNotifier
    ├── client:          HTTPX AsyncClient over the app wired to `storage`
    └── broken_client:   Same, wired to `broken_storage`
"""

import os

# Override settings for testing BEFORE any photostudio imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
for _key in (
    "CLOUDINARY_CLOUD_NAME",
    "CLOUDINARY_API_KEY",
    "CLOUDINARY_API_SECRET",
    "SMTP_HOST",
    "EMAIL_USER",
    "EMAIL_PASS",
):
    os.environ[_key] = ""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from photostudio.config import Settings
from photostudio.main import create_app
from photostudio.services.email_service import EmailNotifier
from photostudio.services.image_host import ImageHostService
from photostudio.storage import Storage


def _memory_engine():
    # One shared connection, otherwise each checkout sees an empty database
    return create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest_asyncio.fixture
async def storage():
    store = Storage(_memory_engine())
    await store.create_all()
    yield store
    await store.dispose()


@pytest_asyncio.fixture
async def broken_storage():
    store = Storage(_memory_engine())
    yield store
    await store.dispose()


@pytest.fixture
def settings_factory():
    """
    Settings with explicit overrides; keyword arguments win over the
    environment and `.env`.

    Usage:
        settings = settings_factory(smtp_host="smtp.example.com")
    """
    def make(**overrides) -> Settings:
        values = {"database_url": "sqlite+aiosqlite://"}
        values.update(overrides)
        return Settings(**values)
    return make


@pytest.fixture
def image_host():
    host = MagicMock(spec=ImageHostService)
    host.configured = False
    host.upload = AsyncMock(return_value="https://res.cloudinary.com/demo/image/upload/v1/photo.jpg")
    return host


@pytest.fixture
def email_notifier():
    notifier = MagicMock(spec=EmailNotifier)
    notifier.configured = False
    notifier.send = AsyncMock()
    notifier.notify_quietly = AsyncMock()
    return notifier


async def _client_for(store, image_host, email_notifier):
    app = create_app(storage=store, image_host=image_host, email_notifier=email_notifier)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def client(storage, image_host, email_notifier):
    """
    HTTPX AsyncClient talking to an app wired to the in-memory store.

    Usage:
        async def test_list(client):
            response = await client.get("/api/messages")
            assert response.status_code == 200
    """
    async with await _client_for(storage, image_host, email_notifier) as http:
        yield http


@pytest_asyncio.fixture
async def broken_client(broken_storage, image_host, email_notifier):
    async with await _client_for(broken_storage, image_host, email_notifier) as http:
        yield http
