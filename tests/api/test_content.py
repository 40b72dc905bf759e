"""Tests for content listing, import and upload endpoints."""

from datetime import timedelta

from fastapi import status
from fastapi.testclient import TestClient

from dopameter.db.time import utcnow
from dopameter.schemas import ContentType, Emoji
from dopameter.storage import MemoryStorage


def _seed(storage: MemoryStorage, *emoji_lists: list[Emoji]) -> list[int]:
    ids = []
    for index, emojis in enumerate(emoji_lists):
        content = storage.create_content(
            user_id="owner",
            content_type=ContentType.IMAGE,
            url=f"https://example.com/{index}.png",
            created_at=utcnow() - timedelta(minutes=len(emoji_lists) - index),
        )
        for emoji in emojis:
            storage.create_vote(content_id=content.id, user_id="voter", emoji=emoji)
        ids.append(content.id)
    return ids


def test_list_content_is_enriched_camel_case(client: TestClient, memory_storage) -> None:
    _seed(memory_storage, [Emoji.LIQUIDATION, Emoji.LIQUIDATION, Emoji.MID])

    response = client.get("/api/content")

    assert response.status_code == status.HTTP_200_OK
    [item] = response.json()
    assert item["totalVotes"] == 3
    assert round(item["averageRating"], 2) == 3.67
    assert item["topEmoji"] == "🔥"
    assert item["userId"] == "owner"
    assert "createdAt" in item


def test_get_content_by_id(client: TestClient, memory_storage) -> None:
    [content_id] = _seed(memory_storage, [])

    response = client.get(f"/api/content/{content_id}")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["id"] == content_id
    assert body["averageRating"] == 0
    assert body["topEmoji"] == "😐"


def test_get_missing_content(client: TestClient) -> None:
    response = client.get("/api/content/999")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Content not found"}


def test_trending_default_limit_and_order(client: TestClient, memory_storage) -> None:
    ids = _seed(memory_storage, *[[Emoji.MILD] * count for count in range(8)])

    response = client.get("/api/content/trending")

    assert response.status_code == status.HTTP_200_OK
    assert [item["id"] for item in response.json()] == list(reversed(ids))[:6]


def test_latest_with_limit(client: TestClient, memory_storage) -> None:
    ids = _seed(memory_storage, [], [], [])

    response = client.get("/api/content/latest", params={"limit": 2})

    assert [item["id"] for item in response.json()] == [ids[2], ids[1]]


def test_invalid_limit_is_bad_request(client: TestClient) -> None:
    assert client.get("/api/content/trending?limit=0").status_code == status.HTTP_400_BAD_REQUEST
    assert client.get("/api/content/latest?limit=abc").status_code == status.HTTP_400_BAD_REQUEST


def test_import_content(client: TestClient) -> None:
    response = client.post(
        "/api/content/import",
        json={"url": "https://example.com/clip.mp4", "type": "video"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["type"] == "video"
    assert body["userId"] == "anonymous-user"
    assert body["totalVotes"] == 0


def test_import_requires_url(client: TestClient) -> None:
    response = client.post("/api/content/import", json={"type": "image"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "URL is required"


def test_import_rejects_other_types(client: TestClient) -> None:
    response = client.post(
        "/api/content/import",
        json={"url": "https://example.com/t", "type": "tweet"},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Content type must be image or video"


def test_upload_image(client: TestClient, test_settings) -> None:
    response = client.post(
        "/api/content/upload",
        files={"file": ("cat.png", b"\x89PNG-bytes", "image/png")},
    )

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["type"] == "image"
    assert body["url"].startswith("/uploads/")

    served = client.get(body["url"])
    assert served.status_code == status.HTTP_200_OK
    assert served.content == b"\x89PNG-bytes"


def test_upload_with_explicit_type(client: TestClient) -> None:
    response = client.post(
        "/api/content/upload",
        files={"file": ("funny.jpg", b"jpeg", "image/jpeg")},
        data={"type": "meme"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["type"] == "meme"


def test_upload_video_type_from_mimetype(client: TestClient) -> None:
    response = client.post(
        "/api/content/upload",
        files={"file": ("clip.mp4", b"mp4", "video/mp4")},
    )

    assert response.json()["type"] == "video"


def test_upload_without_file(client: TestClient) -> None:
    response = client.post("/api/content/upload", data={"type": "image"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "No file uploaded"


def test_upload_rejects_non_media(client: TestClient, memory_storage) -> None:
    response = client.post(
        "/api/content/upload",
        files={"file": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert memory_storage.is_empty()


def test_upload_rejects_oversized_file(client: TestClient, memory_storage) -> None:
    response = client.post(
        "/api/content/upload",
        files={"file": ("huge.png", b"x" * 4096, "image/png")},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert memory_storage.is_empty()


def test_share_is_acknowledged(client: TestClient) -> None:
    response = client.post("/api/content/1/share")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Content shared"}
