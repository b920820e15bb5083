from typing import Mapping, Tuple, Union

from kdp_page_setup.config.sizes import MARGIN_PRESETS
from kdp_page_setup.core.models import MarginPreset, Margins
from kdp_page_setup.core.validator import require_number
from kdp_page_setup.errors import PageValidationError

MarginSelection = Union[MarginPreset, str, Margins, Mapping]

NAMED_MARGINS = {
    MarginPreset(name): Margins(**values) for name, values in MARGIN_PRESETS.items()
}

_EDGES = ("top", "bottom", "inside", "outside")


def parse_margin_preset(value) -> MarginPreset:
    try:
        return MarginPreset(value)
    except ValueError:
        raise PageValidationError(
            f"Unknown margin setting '{value}'. Use one of: {', '.join(m.value for m in MarginPreset)}",
            field="margins",
            bound="choice",
        ) from None


def custom_margins(top, bottom, inside, outside) -> Margins:
    # Values only need to be numbers; range is not checked
    return Margins(
        top=require_number(top, "top margin"),
        bottom=require_number(bottom, "bottom margin"),
        inside=require_number(inside, "inside margin"),
        outside=require_number(outside, "outside margin"),
    )


def resolve_margin_policy(selection: MarginSelection) -> Tuple[MarginPreset, Margins]:
    """Resolve a selection to (policy, margins).

    Accepts a ``MarginPreset`` or its name, a ``Margins`` instance, or a
    mapping shaped like ``{"type": "narrow"}`` or
    ``{"top": .., "bottom": .., "inside": .., "outside": ..}``.
    """
    if isinstance(selection, Margins):
        return MarginPreset.CUSTOM, custom_margins(*(getattr(selection, e) for e in _EDGES))

    if isinstance(selection, Mapping):
        if selection.get("type"):
            return resolve_margin_policy(selection["type"])
        missing = [e for e in _EDGES if e not in selection]
        if missing:
            raise PageValidationError(f"Custom margins missing: {', '.join(missing)}", field="margins", bound="type")
        return MarginPreset.CUSTOM, custom_margins(*(selection[e] for e in _EDGES))

    policy = parse_margin_preset(selection)
    if policy is MarginPreset.CUSTOM:
        raise PageValidationError("Custom margins require top, bottom, inside and outside values.", field="margins", bound="type")
    return policy, NAMED_MARGINS[policy]


def resolve_margins(selection: MarginSelection) -> Margins:
    return resolve_margin_policy(selection)[1]
