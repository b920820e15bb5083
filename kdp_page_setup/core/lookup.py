import re
from typing import Dict, List, Mapping, Optional, Sequence

from kdp_page_setup.config.sizes import COMMON_SIZES, KDP_SIZES
from kdp_page_setup.core.models import BookType, SizePreset
from kdp_page_setup.errors import PresetLookupError

_BOOK_PREFIX_RE = re.compile(r"^(Paperback|Hardcover) - ")


def _build_presets(table: Mapping[str, Mapping]) -> Dict[str, SizePreset]:
    presets: Dict[str, SizePreset] = {}
    for name, conf in table.items():
        book_type = conf.get("type")
        presets[name] = SizePreset(
            name=name,
            width_in=conf["width"],
            height_in=conf["height"],
            book_type=BookType(book_type) if book_type else None,
        )
    return presets


# Built once at import; KDP sizes are searched before common sizes
DEFAULT_TABLES: Sequence[Dict[str, SizePreset]] = (
    _build_presets(KDP_SIZES),
    _build_presets(COMMON_SIZES),
)


def lookup_preset(name: str, tables: Optional[Sequence[Mapping[str, SizePreset]]] = None) -> SizePreset:
    """Return the preset stored under ``name``; values are returned untouched."""
    tables = DEFAULT_TABLES if tables is None else tables
    for table in tables:
        if name in table:
            return table[name]
    raise PresetLookupError(name, available=[n for t in tables for n in t])


def list_presets(book_type: Optional[BookType] = None) -> List[SizePreset]:
    presets = [p for table in DEFAULT_TABLES for p in table.values()]
    if book_type is not None:
        presets = [p for p in presets if p.book_type == BookType(book_type)]
    return presets


def display_name(name: str) -> str:
    """'Paperback - 6 x 9' -> '6 x 9'"""
    return _BOOK_PREFIX_RE.sub("", name)
