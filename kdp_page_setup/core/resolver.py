"""
Resolve a user selection into a PageSpec.

Preset sizes are trusted; custom sizes go through the dimension validator.
Hardcover books cannot use standard colour ink, so that combination is
remapped to premium colour.
"""

import logging
from enum import Enum
from typing import Optional, Type, TypeVar

from kdp_page_setup.config.sizes import CUSTOM_SIZE_NAME
from kdp_page_setup.core.lookup import lookup_preset
from kdp_page_setup.core.margins import MarginSelection, resolve_margin_policy
from kdp_page_setup.core.models import BookType, InkType, PageSpec, PaperType
from kdp_page_setup.core.validator import validate_dimensions
from kdp_page_setup.errors import PageValidationError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def _parse_choice(enum_cls: Type[E], value, field: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise PageValidationError(f"Unknown {field} '{value}'. Use one of: {choices}", field=field, bound="choice") from None


def compatible_ink(book_type: BookType, ink_type: InkType) -> InkType:
    if book_type is BookType.HARDCOVER and ink_type is InkType.STANDARD:
        logger.warning("Standard colour ink is paperback only; using premium colour for hardcover")
        return InkType.PREMIUM
    return ink_type


def resolve_page_spec(
    size_name: str,
    *,
    margins: MarginSelection = "default",
    book_type: Optional[str] = None,
    paper_type: str = "white",
    ink_type: str = "black",
    width_in: Optional[float] = None,
    height_in: Optional[float] = None,
) -> PageSpec:
    """Turn a preset name (or 'Custom' plus dimensions) and cosmetic options into a PageSpec."""
    requested_book = _parse_choice(BookType, book_type, "book type") if book_type is not None else None
    paper = _parse_choice(PaperType, paper_type, "paper type")
    ink = _parse_choice(InkType, ink_type, "ink type")

    if size_name == CUSTOM_SIZE_NAME:
        if width_in is None or height_in is None:
            raise PageValidationError("Custom size requires both width and height.", field="width" if width_in is None else "height", bound="type")
        width, height = validate_dimensions(width_in, height_in)
        resolved_book = requested_book or BookType.PAPERBACK
    else:
        preset = lookup_preset(size_name)
        width, height = preset.width_in, preset.height_in
        # A hardcover preset is always a hardcover book
        resolved_book = preset.book_type or requested_book or BookType.PAPERBACK

    policy, edge_margins = resolve_margin_policy(margins)

    spec = PageSpec(
        size_name=size_name,
        width_in=width,
        height_in=height,
        book_type=resolved_book,
        paper_type=paper,
        ink_type=compatible_ink(resolved_book, ink),
        margin_policy=policy,
        margins=edge_margins,
    )
    logger.debug("Resolved page spec: %s", spec)
    return spec
