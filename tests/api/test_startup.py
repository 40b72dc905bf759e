"""Tests for application startup with demo seeding enabled."""

from fastapi.testclient import TestClient

from dopameter.core.settings import Settings
from dopameter.main import create_app
from dopameter.services.seed import SAMPLE_URLS
from dopameter.storage import SqlStorage


def _content_count(settings: Settings, url: str) -> int:
    app = create_app(settings=settings, storage=SqlStorage.from_url(url))
    with TestClient(app, base_url="http://test") as client:
        return len(client.get("/api/content").json())


def test_seeding_fills_empty_sql_store_once(test_settings: Settings, tmp_path) -> None:
    settings = test_settings.model_copy(update={"seed_demo_data": True})
    url = f"sqlite:///{tmp_path / 'seeded.db'}"

    assert _content_count(settings, url) == len(SAMPLE_URLS)
    assert _content_count(settings, url) == len(SAMPLE_URLS)


def test_seeding_disabled_leaves_store_empty(test_settings: Settings, tmp_path) -> None:
    assert _content_count(test_settings, f"sqlite:///{tmp_path / 'empty.db'}") == 0
