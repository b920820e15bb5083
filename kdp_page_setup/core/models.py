"""
Page setup data models

Immutable value types shared by the resolver, the document targets and the
settings store.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from kdp_page_setup.config.sizes import CUSTOM_SIZE_NAME


class BookType(str, Enum):
    PAPERBACK = "paperback"
    HARDCOVER = "hardcover"


class PaperType(str, Enum):
    WHITE = "white"
    CREAM = "cream"


class InkType(str, Enum):
    BLACK = "black"
    PREMIUM = "premium"
    STANDARD = "standard"  # paperback only


class MarginPreset(str, Enum):
    """Margin selection; CUSTOM carries explicit values in ``Margins``."""
    DEFAULT = "default"
    NARROW = "narrow"
    WIDE = "wide"
    MIRRORED = "mirrored"
    CUSTOM = "custom"


@dataclass(frozen=True)
class SizePreset:
    name: str
    width_in: float
    height_in: float
    book_type: Optional[BookType] = None


@dataclass(frozen=True)
class Margins:
    """Edge margins in inches. Inside is the binding edge (left on recto)."""
    top: float
    bottom: float
    inside: float
    outside: float

    def as_dict(self) -> dict:
        return {"top": self.top, "bottom": self.bottom, "inside": self.inside, "outside": self.outside}


@dataclass(frozen=True)
class PageSpec:
    size_name: str
    width_in: float
    height_in: float
    book_type: BookType
    paper_type: PaperType
    ink_type: InkType
    margin_policy: MarginPreset
    margins: Margins

    @property
    def is_custom(self) -> bool:
        return self.size_name == CUSTOM_SIZE_NAME


@dataclass(frozen=True)
class PageGeometry:
    """Current page size and margins read back from a document, in points."""
    width_pt: float
    height_pt: float
    top_pt: float
    bottom_pt: float
    left_pt: float
    right_pt: float


class SettingsRecord(BaseModel):
    """Flat record persisted after a successful apply."""
    sizeName: str = Field(..., description="Preset name or 'Custom'")
    width: float = Field(..., description="Page width in inches")
    height: float = Field(..., description="Page height in inches")
    bookType: BookType
    paperType: PaperType
    inkType: InkType
    lastUpdated: datetime
