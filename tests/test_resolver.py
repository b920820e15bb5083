import logging

import pytest

from kdp_page_setup.core.models import BookType, InkType, MarginPreset, Margins, PaperType
from kdp_page_setup.core.resolver import resolve_page_spec
from kdp_page_setup.core.units import POINTS_PER_INCH, to_inches, to_points
from kdp_page_setup.errors import PageValidationError, PresetLookupError


def test_unit_conversion() -> None:
    assert POINTS_PER_INCH == 72
    assert to_points(1) == 72
    assert to_points(8.5) == 612
    assert to_inches(648) == 9


def test_paperback_6x9_default_margins() -> None:
    spec = resolve_page_spec("Paperback - 6 x 9", margins="default")
    assert spec.width_in == 6
    assert spec.height_in == 9
    assert spec.book_type is BookType.PAPERBACK
    assert spec.paper_type is PaperType.WHITE
    assert spec.ink_type is InkType.BLACK
    assert spec.margin_policy is MarginPreset.DEFAULT
    assert spec.margins == Margins(1, 1, 1, 1)
    assert not spec.is_custom


def test_presets_are_not_bounds_checked() -> None:
    spec = resolve_page_spec("Tabloid")
    assert (spec.width_in, spec.height_in) == (11, 17)


def test_hardcover_preset_overrides_requested_book_type() -> None:
    spec = resolve_page_spec("Hardcover - 6 x 9", book_type="paperback")
    assert spec.book_type is BookType.HARDCOVER


def test_common_preset_uses_requested_book_type() -> None:
    assert resolve_page_spec("A5", book_type="hardcover").book_type is BookType.HARDCOVER
    assert resolve_page_spec("A5").book_type is BookType.PAPERBACK


def test_standard_ink_remapped_to_premium_for_hardcover(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="kdp_page_setup.core.resolver"):
        spec = resolve_page_spec("Hardcover - 7 x 10", ink_type="standard")
    assert spec.ink_type is InkType.PREMIUM
    assert "premium" in caplog.text


def test_standard_ink_kept_for_paperback() -> None:
    assert resolve_page_spec("Paperback - 7 x 10", ink_type="standard").ink_type is InkType.STANDARD


def test_custom_size_is_validated() -> None:
    spec = resolve_page_spec("Custom", width_in=5.5, height_in=8.25, paper_type="cream", margins={"type": "mirrored"})
    assert spec.is_custom
    assert (spec.width_in, spec.height_in) == (5.5, 8.25)
    assert spec.paper_type is PaperType.CREAM
    assert spec.margin_policy is MarginPreset.MIRRORED

    with pytest.raises(PageValidationError) as exc_info:
        resolve_page_spec("Custom", width_in=8.6, height_in=9)
    assert exc_info.value.bound == "max"


def test_custom_hardcover_with_standard_ink() -> None:
    spec = resolve_page_spec("Custom", width_in=6, height_in=9, book_type="hardcover", ink_type="standard")
    assert spec.ink_type is InkType.PREMIUM


def test_custom_size_requires_both_dimensions() -> None:
    with pytest.raises(PageValidationError) as exc_info:
        resolve_page_spec("Custom", width_in=6)
    assert exc_info.value.field == "height"


def test_unknown_preset() -> None:
    with pytest.raises(PresetLookupError):
        resolve_page_spec("Paperback - 9 x 12")


@pytest.mark.parametrize("kwargs", [{"paper_type": "grey"}, {"ink_type": "cyan"}, {"book_type": "spiral"}])
def test_unknown_choices_rejected(kwargs) -> None:
    with pytest.raises(PageValidationError) as exc_info:
        resolve_page_spec("Letter", **kwargs)
    assert exc_info.value.bound == "choice"
