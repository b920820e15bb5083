from kdp_page_setup.store.settings_store import (
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    build_record,
    load_document_settings,
    save_document_settings,
)

__all__ = [
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "build_record",
    "load_document_settings",
    "save_document_settings",
]
