"""Tests for the reset_content maintenance script."""

import pytest

from dopameter.schemas import ContentType, Emoji
from dopameter.scripts.reset_content import main
from dopameter.storage import SqlStorage


@pytest.fixture()
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'reset.db'}"


def _populate(url: str) -> None:
    storage = SqlStorage.from_url(url)
    try:
        content = storage.create_content(user_id="o", content_type=ContentType.IMAGE, url="u")
        storage.create_vote(content_id=content.id, user_id="v", emoji=Emoji.SOLID)
    finally:
        storage.close()


def test_reset_with_confirmation_flag(database_url: str, capsys) -> None:
    _populate(database_url)

    main(["--url", database_url, "--yes"])

    storage = SqlStorage.from_url(database_url)
    try:
        assert storage.is_empty()
    finally:
        storage.close()
    assert "cleared" in capsys.readouterr().out


def test_reset_aborts_without_confirmation(database_url: str, monkeypatch, capsys) -> None:
    _populate(database_url)
    monkeypatch.setattr("builtins.input", lambda _prompt: "n")

    main(["--url", database_url])

    storage = SqlStorage.from_url(database_url)
    try:
        assert not storage.is_empty()
    finally:
        storage.close()
    assert "aborted" in capsys.readouterr().out
