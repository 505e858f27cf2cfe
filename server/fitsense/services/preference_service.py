# fitsense/services/preference_service.py
import json
from typing import Any, MutableMapping

DARK_MODE_KEY = "darkMode"


class PreferenceStore:
    """Reads and writes UI preferences in a per-browser key-value store (the session cookie)"""

    def __init__(self, storage: MutableMapping[str, Any]):
        self.storage = storage

    def read_dark_mode(self) -> bool:
        saved = self.storage.get(DARK_MODE_KEY)
        if saved is None:
            return False
        # Older clients stored the JSON text ("true"/"false")
        if isinstance(saved, str):
            try:
                saved = json.loads(saved)
            except json.JSONDecodeError:
                return False
        return saved is True

    def write_dark_mode(self, dark_mode: bool) -> bool:
        self.storage[DARK_MODE_KEY] = bool(dark_mode)
        return bool(dark_mode)

    def toggle_dark_mode(self) -> bool:
        return self.write_dark_mode(not self.read_dark_mode())
