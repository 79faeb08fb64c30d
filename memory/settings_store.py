"""JSON-backed store for per-user suggestion settings."""

import json
from pathlib import Path
from typing import Any, Dict

from logic.validation import PreferencesUpdate, UserPreferencesInput
from models.suggestions import UserPreferences


class UserSettingsStore:
    """One JSON file per user; missing files read as defaults."""

    def __init__(self, base_dir: str | Path = "data/settings") -> None:
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _settings_path(self, user_id: str) -> Path:
        if not user_id or "/" in user_id or "\\" in user_id or user_id.startswith("."):
            raise ValueError(f"Invalid user id {user_id!r}")
        return self.base_dir / f"{user_id}.json"

    def _read(self, user_id: str) -> Dict[str, Any]:
        path = self._settings_path(user_id)
        if not path.exists():
            return {}
        data = json.loads(path.read_text())
        return data.get("preferences", {})

    def load(self, user_id: str) -> UserPreferences:
        return UserPreferencesInput.model_validate(self._read(user_id)).to_domain()

    def update(self, user_id: str, changes: Dict[str, Any]) -> UserPreferences:
        """Validate ``changes`` and persist them over the stored settings.

        Raises ``pydantic.ValidationError`` when a value is out of range, e.g.
        a threshold outside 0-30°C.
        """

        update = PreferencesUpdate.model_validate(changes)
        merged = UserPreferencesInput.model_validate({**self._read(user_id), **update.changes()})
        path = self._settings_path(user_id)
        path.write_text(json.dumps({"user_id": user_id, "preferences": merged.model_dump()}, indent=2))
        return merged.to_domain()


__all__ = ["UserSettingsStore"]
