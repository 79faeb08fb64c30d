"""Per-user settings persistence and validation."""

import json

import pytest
from pydantic import ValidationError

from memory.settings_store import UserSettingsStore
from models.suggestions import UserPreferences


def test_missing_user_reads_as_defaults(tmp_path) -> None:
    store = UserSettingsStore(tmp_path)

    assert store.load("alice") == UserPreferences()


def test_update_merges_and_persists(tmp_path) -> None:
    store = UserSettingsStore(tmp_path)

    store.update("alice", {"news_enabled": False})
    updated = store.update("alice", {"temperature_threshold": 0})

    assert updated == UserPreferences(temperature_threshold=0, news_enabled=False)
    assert UserSettingsStore(tmp_path).load("alice") == updated
    stored = json.loads((tmp_path / "alice.json").read_text())
    assert stored["preferences"]["temperature_threshold"] == 0


def test_out_of_range_threshold_is_rejected(tmp_path) -> None:
    store = UserSettingsStore(tmp_path)

    with pytest.raises(ValidationError):
        store.update("alice", {"temperature_threshold": 45})
    assert not (tmp_path / "alice.json").exists()


@pytest.mark.parametrize("user_id", ["", "../etc", ".hidden", "a/b"])
def test_invalid_user_ids_are_rejected(tmp_path, user_id: str) -> None:
    with pytest.raises(ValueError):
        UserSettingsStore(tmp_path).load(user_id)
