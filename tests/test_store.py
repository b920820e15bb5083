import json
from datetime import datetime, timezone

import pytest

from kdp_page_setup.config.sizes import SETTINGS_KEY
from kdp_page_setup.core.models import BookType, InkType, PaperType
from kdp_page_setup.core.resolver import resolve_page_spec
from kdp_page_setup.errors import SettingsStoreError
from kdp_page_setup.store.settings_store import JsonFileStore, MemoryStore, load_document_settings, save_document_settings

NOW = datetime(2026, 10, 18, 12, 30, tzinfo=timezone.utc)


def test_record_is_flat_json_under_settings_key() -> None:
    store = MemoryStore()
    spec = resolve_page_spec("Hardcover - 6 x 9", paper_type="cream", ink_type="premium")
    save_document_settings(store, spec, now=NOW)

    raw = json.loads(store.get_property(SETTINGS_KEY))
    assert raw == {
        "sizeName": "Hardcover - 6 x 9",
        "width": 6.0,
        "height": 9.0,
        "bookType": "hardcover",
        "paperType": "cream",
        "inkType": "premium",
        "lastUpdated": "2026-10-18T12:30:00Z",
    }


def test_load_returns_none_when_nothing_saved() -> None:
    assert load_document_settings(MemoryStore()) is None


def test_json_file_store_persists_between_instances(tmp_path) -> None:
    path = tmp_path / "nested" / "settings.json"
    spec = resolve_page_spec("Custom", width_in=5.25, height_in=8)
    save_document_settings(JsonFileStore(path), spec, now=NOW)

    record = load_document_settings(JsonFileStore(path))
    assert record.sizeName == "Custom"
    assert record.width == 5.25
    assert record.bookType is BookType.PAPERBACK
    assert record.paperType is PaperType.WHITE
    assert record.inkType is InkType.BLACK
    assert record.lastUpdated == NOW


def test_json_file_store_keeps_other_keys(tmp_path) -> None:
    store = JsonFileStore(tmp_path / "props.json")
    store.set_property("author", "A. Writer")
    save_document_settings(store, resolve_page_spec("Letter"), key="pageSetup")
    assert store.get_property("author") == "A. Writer"
    assert load_document_settings(store, key="pageSetup").sizeName == "Letter"
    assert store.get_property(SETTINGS_KEY) is None


@pytest.mark.parametrize("content", ["[]", '"text"', "{broken"])
def test_json_file_store_rejects_non_object_files(tmp_path, content) -> None:
    path = tmp_path / "props.json"
    path.write_text(content)
    with pytest.raises(SettingsStoreError):
        JsonFileStore(path).get_property(SETTINGS_KEY)


def test_invalid_stored_record_raises_store_error() -> None:
    store = MemoryStore()
    store.set_property(SETTINGS_KEY, '{"sizeName": "Letter"}')
    with pytest.raises(SettingsStoreError):
        load_document_settings(store)
    store.set_property(SETTINGS_KEY, "not json")
    with pytest.raises(SettingsStoreError):
        load_document_settings(store)
