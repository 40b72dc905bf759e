"""Tests for saving, unsaving and listing favorites."""

from fastapi import status
from fastapi.testclient import TestClient

from dopameter.schemas import ContentType
from dopameter.storage import MemoryStorage


def _content_id(storage: MemoryStorage) -> int:
    return storage.create_content(
        user_id="owner",
        content_type=ContentType.IMAGE,
        url="https://example.com/dog.png",
    ).id


def test_save_and_list(client: TestClient, memory_storage: MemoryStorage) -> None:
    content_id = _content_id(memory_storage)

    response = client.post(f"/api/content/{content_id}/save")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Content saved to favorites", "saved": True}

    [favorite] = client.get("/api/favorites").json()
    assert favorite["contentId"] == content_id
    assert favorite["userId"] == "anonymous-user"
    assert favorite["content"]["url"] == "https://example.com/dog.png"


def test_save_twice_keeps_one_favorite(client: TestClient, memory_storage: MemoryStorage) -> None:
    content_id = _content_id(memory_storage)

    client.post(f"/api/content/{content_id}/save")
    client.post(f"/api/content/{content_id}/save")

    assert len(client.get("/api/favorites").json()) == 1


def test_unsave(client: TestClient, memory_storage: MemoryStorage) -> None:
    content_id = _content_id(memory_storage)
    client.post(f"/api/content/{content_id}/save")

    response = client.post(f"/api/content/{content_id}/unsave")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Content removed from favorites", "saved": False}
    assert client.get("/api/favorites").json() == []


def test_unsave_without_favorite_is_harmless(client: TestClient) -> None:
    response = client.post("/api/content/7/unsave")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["saved"] is False


def test_save_missing_content(client: TestClient) -> None:
    response = client.post("/api/content/404/save")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/api/favorites").json() == []
