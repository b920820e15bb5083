import math

import pytest

from kdp_page_setup.core.models import BookType, InkType, MarginPreset, Margins, PageSpec, PaperType
from kdp_page_setup.core.validator import margin_warnings, validate_dimensions
from kdp_page_setup.errors import PageValidationError


@pytest.mark.parametrize("width", [4.0, 4, 6.14, 8.5])
def test_width_bounds_are_inclusive(width) -> None:
    assert validate_dimensions(width, 9) == (float(width), 9.0)


@pytest.mark.parametrize("height", [6.0, 9.21, 11.69])
def test_height_bounds_are_inclusive(height) -> None:
    assert validate_dimensions(6, height) == (6.0, height)


@pytest.mark.parametrize("width, bound", [(3.9, "min"), (8.6, "max"), (0, "min")])
def test_width_out_of_range(width, bound) -> None:
    with pytest.raises(PageValidationError) as exc_info:
        validate_dimensions(width, 9)
    assert exc_info.value.field == "width"
    assert exc_info.value.bound == bound


@pytest.mark.parametrize("height, bound", [(5.99, "min"), (11.7, "max")])
def test_height_out_of_range(height, bound) -> None:
    with pytest.raises(PageValidationError) as exc_info:
        validate_dimensions(6, height)
    assert exc_info.value.field == "height"
    assert exc_info.value.bound == bound


@pytest.mark.parametrize("bad", [None, "6", math.nan, math.inf, True])
def test_non_numeric_width_rejected(bad) -> None:
    with pytest.raises(PageValidationError) as exc_info:
        validate_dimensions(bad, 9)
    assert exc_info.value.field == "width"
    assert exc_info.value.bound == "type"


@pytest.mark.parametrize("bad", [None, "9", math.nan, -math.inf, False])
def test_non_numeric_height_rejected(bad) -> None:
    with pytest.raises(PageValidationError) as exc_info:
        validate_dimensions(6, bad)
    assert exc_info.value.field == "height"
    assert exc_info.value.bound == "type"


def test_width_checked_before_height() -> None:
    with pytest.raises(PageValidationError) as exc_info:
        validate_dimensions(3, 20)
    assert exc_info.value.field == "width"


def _spec(width: float, height: float, margins: Margins) -> PageSpec:
    return PageSpec(
        size_name="Custom",
        width_in=width,
        height_in=height,
        book_type=BookType.PAPERBACK,
        paper_type=PaperType.WHITE,
        ink_type=InkType.BLACK,
        margin_policy=MarginPreset.CUSTOM,
        margins=margins,
    )


def test_margin_warnings_empty_for_sane_margins() -> None:
    assert margin_warnings(_spec(6, 9, Margins(1, 1, 1.25, 0.75))) == []


def test_margin_warnings_flag_thin_and_oversized_margins() -> None:
    issues = margin_warnings(_spec(5, 8, Margins(0.1, 0, 3, 2.5)))
    messages = [i.message for i in issues]
    assert all(i.level == "warning" for i in issues)
    assert any(m.startswith("Top margin") for m in messages)
    assert any(m.startswith("Bottom margin") and "not positive" in m for m in messages)
    assert any(m.startswith("Inside + outside") for m in messages)
    assert not any(m.startswith("Top + bottom") for m in messages)
