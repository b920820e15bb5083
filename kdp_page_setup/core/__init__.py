from kdp_page_setup.core.lookup import display_name, list_presets, lookup_preset
from kdp_page_setup.core.margins import resolve_margin_policy, resolve_margins
from kdp_page_setup.core.models import (
    BookType,
    InkType,
    MarginPreset,
    Margins,
    PageGeometry,
    PageSpec,
    PaperType,
    SettingsRecord,
    SizePreset,
)
from kdp_page_setup.core.resolver import resolve_page_spec
from kdp_page_setup.core.units import POINTS_PER_INCH, to_inches, to_points
from kdp_page_setup.core.validator import ValidationIssue, margin_warnings, validate_dimensions

__all__ = [
    "BookType",
    "InkType",
    "MarginPreset",
    "Margins",
    "PageGeometry",
    "PageSpec",
    "PaperType",
    "SettingsRecord",
    "SizePreset",
    "POINTS_PER_INCH",
    "ValidationIssue",
    "display_name",
    "list_presets",
    "lookup_preset",
    "margin_warnings",
    "resolve_margin_policy",
    "resolve_margins",
    "resolve_page_spec",
    "to_inches",
    "to_points",
    "validate_dimensions",
]
