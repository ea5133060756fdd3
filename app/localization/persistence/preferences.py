"""Preference stores used to remember the active locale across sessions."""

import json
from pathlib import Path
from typing import Dict, Optional, Protocol, runtime_checkable

from localization.logging import get_module_logger

logger = get_module_logger()


@runtime_checkable
class PreferenceStore(Protocol):
    """Get/set access to persisted string preferences."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryPreferenceStore:
    """Process-local preference store (development, testing)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFilePreferenceStore:
    """Preference store backed by a JSON object on disk.

    The whole file is rewritten on every set. A missing or unreadable file
    behaves like an empty store.

    Attributes:
        path: Location of the JSON file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
        logger.debug("preference_saved", path=str(self.path), key=key)

    def _read(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(
                "preference_file_unreadable", path=str(self.path), error=str(e)
            )
            return {}
        return data if isinstance(data, dict) else {}
