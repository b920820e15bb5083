"""
Request/response models for the page setup API
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from kdp_page_setup.core.models import BookType, InkType, MarginPreset, PaperType


class MarginValues(BaseModel):
    """Edge margins in inches"""
    top: float
    bottom: float
    inside: float
    outside: float


class PresetInfo(BaseModel):
    name: str
    width: float = Field(..., description="Width in inches")
    height: float = Field(..., description="Height in inches")
    book_type: Optional[BookType] = Field(None, description="None for common paper sizes")


class PresetListResponse(BaseModel):
    success: bool
    presets: List[PresetInfo]
    total: int


class PageSpecRequest(BaseModel):
    """Resolve a page spec from a preset or custom size"""
    size_name: str = Field(..., description="Preset name or 'Custom'")
    width: Optional[float] = Field(None, description="Custom width in inches")
    height: Optional[float] = Field(None, description="Custom height in inches")
    book_type: Optional[BookType] = None
    paper_type: PaperType = PaperType.WHITE
    ink_type: InkType = InkType.BLACK
    margins: MarginPreset = MarginPreset.DEFAULT
    custom_margins: Optional[MarginValues] = Field(
        None,
        description="Required when margins is 'custom'"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "size_name": "Paperback - 6 x 9",
                "book_type": "paperback",
                "paper_type": "cream",
                "ink_type": "black",
                "margins": "mirrored",
            }
        }


class PageSpecBody(BaseModel):
    size_name: str
    width: float
    height: float
    width_pt: float
    height_pt: float
    book_type: BookType
    paper_type: PaperType
    ink_type: InkType
    background_color: str
    margin_policy: MarginPreset
    margins: MarginValues


class PageSpecResponse(BaseModel):
    success: bool
    message: str
    spec: PageSpecBody
    warnings: List[str] = Field(default_factory=list)
