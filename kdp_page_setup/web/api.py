"""
Page setup API endpoints

Preset listing and page spec resolution. Documents are never touched here.
"""

from fastapi import APIRouter, HTTPException
from typing import Optional

from kdp_page_setup.config.sizes import PAPER_COLORS
from kdp_page_setup.core.lookup import list_presets
from kdp_page_setup.core.margins import NAMED_MARGINS, parse_margin_preset
from kdp_page_setup.core.models import BookType, MarginPreset, PageSpec
from kdp_page_setup.core.resolver import resolve_page_spec
from kdp_page_setup.core.units import to_points
from kdp_page_setup.core.validator import margin_warnings
from kdp_page_setup.document.base import status_message
from kdp_page_setup.errors import PageValidationError, PresetLookupError
from kdp_page_setup.web.schemas import (
    MarginValues,
    PageSpecBody,
    PageSpecRequest,
    PageSpecResponse,
    PresetInfo,
    PresetListResponse,
)

router = APIRouter()


def _spec_body(spec: PageSpec) -> PageSpecBody:
    return PageSpecBody(
        size_name=spec.size_name,
        width=spec.width_in,
        height=spec.height_in,
        width_pt=to_points(spec.width_in),
        height_pt=to_points(spec.height_in),
        book_type=spec.book_type,
        paper_type=spec.paper_type,
        ink_type=spec.ink_type,
        background_color=PAPER_COLORS[spec.paper_type.value],
        margin_policy=spec.margin_policy,
        margins=MarginValues(**spec.margins.as_dict()),
    )


@router.get("/presets", response_model=PresetListResponse)
async def get_presets(book_type: Optional[BookType] = None):
    """
    List size presets.

    Args:
        book_type: Only return presets for this book type
    """
    presets = [
        PresetInfo(name=p.name, width=p.width_in, height=p.height_in, book_type=p.book_type)
        for p in list_presets(book_type)
    ]
    return PresetListResponse(success=True, presets=presets, total=len(presets))


@router.get("/margins/{name}", response_model=MarginValues)
async def get_margins(name: str):
    """Edge values of a named margin preset."""
    try:
        policy = parse_margin_preset(name)
    except PageValidationError as e:
        raise HTTPException(status_code=404, detail=str(e))
    if policy is MarginPreset.CUSTOM:
        raise HTTPException(status_code=404, detail="Custom margins have no fixed values")
    return MarginValues(**NAMED_MARGINS[policy].as_dict())


@router.post("/page-spec", response_model=PageSpecResponse)
async def create_page_spec(request: PageSpecRequest):
    """
    Resolve a page spec.

    Returns the concrete geometry plus advisory margin warnings.
    """
    if request.margins is MarginPreset.CUSTOM:
        if request.custom_margins is None:
            raise HTTPException(status_code=422, detail="custom_margins is required when margins is 'custom'")
        margins = request.custom_margins.model_dump()
    else:
        margins = request.margins

    try:
        spec = resolve_page_spec(
            request.size_name,
            margins=margins,
            book_type=request.book_type,
            paper_type=request.paper_type,
            ink_type=request.ink_type,
            width_in=request.width,
            height_in=request.height,
        )
    except PresetLookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PageValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return PageSpecResponse(
        success=True,
        message=status_message(spec).replace(" set to ", " resolved to ", 1),
        spec=_spec_body(spec),
        warnings=[issue.message for issue in margin_warnings(spec)],
    )
