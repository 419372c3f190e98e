"""Shared fixtures: an app wired to a throwaway SQLite file."""
from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from showcase.core.config import Settings
from showcase.db.session import build_engine, build_session_factory, init_storage
from showcase.main import create_app
from showcase.repositories.storage import KeyValueStore


@pytest.fixture
def storage_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'showcase.db'}"


@pytest.fixture
def settings(storage_url: str) -> Settings:
    return Settings(storage_url=storage_url, cors_allow_origins=[], log_level="WARNING")


@pytest.fixture
def kv_store(storage_url: str):
    engine = build_engine(storage_url)
    init_storage(engine)
    yield KeyValueStore(build_session_factory(engine))
    engine.dispose()


@pytest_asyncio.fixture
async def app(settings: Settings):
    application = create_app(settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield http
