"""
Key-value settings store

Remembers the last applied page settings as a flat JSON record, the way the
original add-on kept them in document properties.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Protocol

from kdp_page_setup.config.sizes import SETTINGS_KEY
from pydantic import ValidationError

from kdp_page_setup.core.models import PageSpec, SettingsRecord
from kdp_page_setup.errors import SettingsStoreError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get_property(self, key: str) -> Optional[str]: ...

    def set_property(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-process store; handy for tests and one-shot runs."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get_property(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_property(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """String-keyed properties kept in a single JSON file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise SettingsStoreError(f"Settings file {self.path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise SettingsStoreError(f"Settings file {self.path} must hold a JSON object, got {type(data).__name__}.")
        return data

    def get_property(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_property(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


def build_record(spec: PageSpec, now: Optional[datetime] = None) -> SettingsRecord:
    return SettingsRecord(
        sizeName=spec.size_name,
        width=spec.width_in,
        height=spec.height_in,
        bookType=spec.book_type,
        paperType=spec.paper_type,
        inkType=spec.ink_type,
        lastUpdated=now or datetime.now(timezone.utc),
    )


def save_document_settings(store: KeyValueStore, spec: PageSpec, now: Optional[datetime] = None, key: str = SETTINGS_KEY) -> SettingsRecord:
    record = build_record(spec, now)
    store.set_property(key, record.model_dump_json())
    logger.debug("Saved settings under %s: %s", key, record)
    return record


def load_document_settings(store: KeyValueStore, key: str = SETTINGS_KEY) -> Optional[SettingsRecord]:
    raw = store.get_property(key)
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise SettingsStoreError(f"Stored settings under {key} must be a JSON string, got {type(raw).__name__}.")
    try:
        return SettingsRecord.model_validate_json(raw)
    except ValidationError as e:
        raise SettingsStoreError(f"Stored settings under {key} are not a valid record: {e}") from e
