"""
Apply a resolved PageSpec to a document target.

A target is anything exposing the setters below in points (72 per inch).
Failures raised by a target are wrapped in ApplyError.
"""

import logging
from typing import Optional, Protocol

from kdp_page_setup.config.sizes import PAPER_COLORS, SETTINGS_KEY
from kdp_page_setup.core.lookup import display_name
from kdp_page_setup.core.models import MarginPreset, PageGeometry, PageSpec
from kdp_page_setup.core.units import to_inches, to_points
from kdp_page_setup.errors import ApplyError
from kdp_page_setup.store.settings_store import KeyValueStore, save_document_settings

logger = logging.getLogger(__name__)


class PageTarget(Protocol):
    def set_page_width(self, points: float) -> None: ...

    def set_page_height(self, points: float) -> None: ...

    def set_background_color(self, hex_color: str) -> None: ...

    def set_margin_top(self, points: float) -> None: ...

    def set_margin_bottom(self, points: float) -> None: ...

    def set_margin_left(self, points: float) -> None: ...

    def set_margin_right(self, points: float) -> None: ...

    def set_mirror_margins(self, enabled: bool) -> None: ...

    def read_geometry(self) -> PageGeometry: ...

    def save(self) -> None: ...


def _num(value: float) -> str:
    # 6.0 -> "6", 5.06 -> "5.06"
    return f"{value:g}"


def status_message(spec: PageSpec) -> str:
    tail = (
        f" as {spec.book_type.value} with {spec.paper_type.value} paper"
        f" and {spec.ink_type.value} ink."
    )
    if spec.is_custom:
        return f'Custom page size set to {spec.width_in:.2f}" × {spec.height_in:.2f}"' + tail
    return f'Page size set to {display_name(spec.size_name)} ({_num(spec.width_in)}" × {_num(spec.height_in)}")' + tail


def apply_margins(target: PageTarget, spec: PageSpec) -> None:
    m = spec.margins
    target.set_margin_top(to_points(m.top))
    target.set_margin_bottom(to_points(m.bottom))
    target.set_margin_left(to_points(m.inside))
    target.set_margin_right(to_points(m.outside))
    target.set_mirror_margins(spec.margin_policy is MarginPreset.MIRRORED)


def apply_page_spec(target: PageTarget, spec: PageSpec, store: Optional[KeyValueStore] = None, key: str = SETTINGS_KEY) -> str:
    """Push ``spec`` into ``target``, remember it in ``store`` and return a status line."""
    try:
        target.set_page_width(to_points(spec.width_in))
        target.set_page_height(to_points(spec.height_in))
        target.set_background_color(PAPER_COLORS[spec.paper_type.value])
        apply_margins(target, spec)
        target.save()
        if store is not None:
            save_document_settings(store, spec, key=key)
    except Exception as exc:
        logger.error("Error applying page settings for %s: %s", spec.size_name, exc)
        raise ApplyError(exc) from exc
    return status_message(spec)


def describe_geometry(geometry: PageGeometry) -> str:
    """Human-readable page settings, inches first then points."""
    g = geometry
    return (
        f'Page Size: {to_inches(g.width_pt):.2f}" × {to_inches(g.height_pt):.2f}" '
        f"({_num(g.width_pt)} × {_num(g.height_pt)} pts)\n\n"
        "Margins:\n"
        f'Top: {to_inches(g.top_pt):.2f}" ({_num(g.top_pt)} pts)\n'
        f'Bottom: {to_inches(g.bottom_pt):.2f}" ({_num(g.bottom_pt)} pts)\n'
        f'Left: {to_inches(g.left_pt):.2f}" ({_num(g.left_pt)} pts)\n'
        f'Right: {to_inches(g.right_pt):.2f}" ({_num(g.right_pt)} pts)'
    )
