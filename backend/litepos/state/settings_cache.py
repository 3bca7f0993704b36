# Overview: Read-mostly snapshot of the settings table.

"""
Settings cache

Loaded once from settings_service.list_settings(). Values are stored as text;
the typed getters parse on read:

- get: text as stored, "" when the key is missing
- get_number: leading integer ("12abc" -> 12, "8.25" -> 8), 0 when there is none
- get_boolean: True only for the exact text "true"
- get_json: parsed JSON, None when missing, empty or malformed

update() changes the cached copy only. Persisting is the caller's job
(settings_service.update_setting).
"""

from __future__ import annotations

import json
import re
from typing import Any


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SettingsCache:
    def __init__(self) -> None:
        self._settings: dict[str, dict] = {}
        self.loaded = False

    def load(self, rows: list[dict]) -> None:
        self._settings = {row["key"]: row for row in rows}
        self.loaded = True

    def __contains__(self, key: str) -> bool:
        return key in self._settings

    def get(self, key: str) -> str:
        row = self._settings.get(key)
        if row is None or row.get("value") is None:
            return ""
        return row["value"]

    def get_number(self, key: str) -> int:
        match = _LEADING_INT.match(self.get(key))
        return int(match.group(1)) if match else 0

    def get_boolean(self, key: str) -> bool:
        return self.get(key) == "true"

    def get_json(self, key: str) -> Any:
        raw = self.get(key)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            return None

    def update(self, key: str, value: str) -> None:
        """Replace the cached value of an already-loaded key; unknown keys are ignored."""
        existing = self._settings.get(key)
        if existing is not None:
            self._settings[key] = {**existing, "value": value}
