# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from dopameter.core.settings import Settings
from dopameter.db.session import build_engine, create_tables, drop_tables
from dopameter.main import create_app
from dopameter.schemas import ContentType, Emoji, EnrichedContent
from dopameter.services import ContentService
from dopameter.storage import MemoryStorage, SqlStorage, Storage

TEST_DB_URL = "sqlite://"


@pytest.fixture()
def engine() -> Iterator[Engine]:
    engine = build_engine(TEST_DB_URL)
    create_tables(engine)
    try:
        yield engine
    finally:
        drop_tables(engine)
        engine.dispose()


@pytest.fixture()
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def sql_storage(engine: Engine) -> SqlStorage:
    return SqlStorage(engine)


@pytest.fixture(params=["memory", "sql"])
def storage(request: pytest.FixtureRequest) -> Storage:
    """Run the requesting test once per storage backend."""
    return request.getfixturevalue(f"{request.param}_storage")


@pytest.fixture()
def service(storage: Storage) -> ContentService:
    return ContentService(storage)


@pytest.fixture()
def make_content(
    service: ContentService,
) -> Callable[..., EnrichedContent]:
    """Create content and optionally cast votes on it."""

    def _make(
        *emojis: Emoji,
        url: str = "https://example.com/cat.png",
        content_type: ContentType = ContentType.IMAGE,
        created_at: datetime | None = None,
        voter: str = "voter-1",
    ) -> EnrichedContent:
        content = service.create_content("owner-1", content_type, url, created_at=created_at)
        for emoji in emojis:
            service.record_vote(content.id, voter, emoji)
        return service.get_content(content.id)

    return _make


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    """Provide settings isolated from the developer's environment."""
    return Settings(
        upload_dir=str(tmp_path / "uploads"),
        auth_mode="anonymous",
        seed_demo_data=False,
        log_level="WARNING",
        max_upload_bytes=1024,
    )


@pytest.fixture()
def app(test_settings: Settings, memory_storage: MemoryStorage) -> FastAPI:
    return create_app(settings=test_settings, storage=memory_storage)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def jwt_settings(test_settings: Settings) -> Settings:
    return test_settings.model_copy(update={"auth_mode": "jwt", "secret_key": "test-secret"})


@pytest.fixture()
def jwt_client(jwt_settings: Settings, memory_storage: MemoryStorage) -> Iterator[TestClient]:
    app = create_app(settings=jwt_settings, storage=memory_storage)
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def sql_client(test_settings: Settings, sql_storage: SqlStorage) -> Iterator[TestClient]:
    app = create_app(settings=test_settings, storage=sql_storage)
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client
