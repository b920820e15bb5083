import math
import numbers
from dataclasses import dataclass
from typing import List, Tuple

from kdp_page_setup.config.sizes import MAX_HEIGHT, MAX_WIDTH, MIN_HEIGHT, MIN_SAFE_MARGIN, MIN_WIDTH
from kdp_page_setup.core.models import PageSpec
from kdp_page_setup.errors import PageValidationError


@dataclass
class ValidationIssue:
    level: str  # "error" | "warning" | "info"
    message: str


def require_number(value, field: str) -> float:
    """Accept finite real numbers only (bools, strings, None, NaN and inf are rejected)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise PageValidationError(f"{field} must be a number, got {value!r}.", field=field, bound="type")
    value = float(value)
    if not math.isfinite(value):
        raise PageValidationError(f"{field} must be a finite number, got {value!r}.", field=field, bound="type")
    return value


def _check_range(value, field: str, lo: float, hi: float) -> float:
    value = require_number(value, field)
    if value < lo:
        raise PageValidationError(f'{field.capitalize()} {value}" is below the KDP minimum of {lo}".', field=field, bound="min")
    if value > hi:
        raise PageValidationError(f'{field.capitalize()} {value}" exceeds the KDP maximum of {hi}".', field=field, bound="max")
    return value


def validate_dimensions(width_in, height_in) -> Tuple[float, float]:
    """Check custom trim dimensions against the inclusive KDP bounds."""
    width = _check_range(width_in, "width", MIN_WIDTH, MAX_WIDTH)
    height = _check_range(height_in, "height", MIN_HEIGHT, MAX_HEIGHT)
    return width, height


def margin_warnings(spec: PageSpec) -> List[ValidationIssue]:
    """Advisory margin checks. Never raises; custom margins are applied as given."""
    issues: List[ValidationIssue] = []
    m = spec.margins
    for edge, value in m.as_dict().items():
        if value <= 0:
            issues.append(ValidationIssue("warning", f"{edge.capitalize()} margin {value}\" is not positive."))
        elif value < MIN_SAFE_MARGIN:
            issues.append(ValidationIssue("warning", f"{edge.capitalize()} margin {value}\" is below {MIN_SAFE_MARGIN}\"; text may be trimmed."))

    if m.inside + m.outside >= spec.width_in:
        issues.append(ValidationIssue(
            "warning",
            f"Inside + outside margins ({m.inside + m.outside:.2f}\") leave no text area on a {spec.width_in}\" wide page.",
        ))
    if m.top + m.bottom >= spec.height_in:
        issues.append(ValidationIssue(
            "warning",
            f"Top + bottom margins ({m.top + m.bottom:.2f}\") leave no text area on a {spec.height_in}\" tall page.",
        ))
    return issues
