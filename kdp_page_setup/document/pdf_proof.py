from pathlib import Path
from typing import Optional

from pypdf import PdfReader, PdfWriter
from pypdf.generic import RectangleObject
from reportlab.lib.colors import HexColor, black
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas

from kdp_page_setup.core.models import PageGeometry


def _clamp(val, lo, hi):
    return max(lo, min(hi, val))


class PdfProofTarget:
    """Renders a blank proof PDF at the applied page size.

    The page is filled with the paper colour and the margin box is written
    as the TrimBox, so the margins can be read back with ``read_pdf_geometry``.
    With mirror margins on, a second (verso) page is added with inside and
    outside swapped.
    """

    def __init__(self, out_path: str | Path, guides: bool = True, label: str = ""):
        self.out_path = Path(out_path)
        self.guides = guides
        self.label = label
        self.width = 0.0
        self.height = 0.0
        self.background = "#FFFFFF"
        self.top = 0.0
        self.bottom = 0.0
        self.left = 0.0
        self.right = 0.0
        self.mirrored = False

    def set_page_width(self, points: float) -> None:
        self.width = points

    def set_page_height(self, points: float) -> None:
        self.height = points

    def set_background_color(self, hex_color: str) -> None:
        self.background = hex_color

    def set_margin_top(self, points: float) -> None:
        self.top = points

    def set_margin_bottom(self, points: float) -> None:
        self.bottom = points

    def set_margin_left(self, points: float) -> None:
        self.left = points

    def set_margin_right(self, points: float) -> None:
        self.right = points

    def set_mirror_margins(self, enabled: bool) -> None:
        self.mirrored = enabled

    def _safe_area(self, page_index: int):
        # Page 1 is recto: binding (inside = left margin) on the left
        is_odd = ((page_index + 1) % 2) == 1
        if is_odd or not self.mirrored:
            left = self.left
            right = self.width - self.right
        else:
            left = self.right
            right = self.width - self.left
        return left, self.bottom, right, self.height - self.top

    def save(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Page size {self.width}x{self.height} pt is not drawable.")
        self.out_path.parent.mkdir(parents=True, exist_ok=True)
        pages = 2 if self.mirrored else 1

        c = canvas.Canvas(str(self.out_path), pagesize=(self.width, self.height))
        for page_index in range(pages):
            c.setFillColor(HexColor(self.background))
            c.rect(0, 0, self.width, self.height, fill=1, stroke=0)

            left, bottom, right, top = self._safe_area(page_index)
            if self.guides:
                c.saveState()
                c.setStrokeColor(black)
                c.setLineWidth(0.25)
                c.setDash(2, 3)
                c.rect(left, bottom, right - left, top - bottom)
                c.restoreState()
            if self.label:
                c.saveState()
                c.setFillColor(black)
                c.setFont("Helvetica", 10)
                c.drawCentredString((left + right) / 2.0, top - 0.25 * inch, self.label)
                c.restoreState()
            c.showPage()
        c.save()

        # TrimBox marks the margin box for QA
        reader = PdfReader(str(self.out_path))
        writer = PdfWriter()
        for page_index, page in enumerate(reader.pages):
            media = page.mediabox
            left, bottom, right, top = self._safe_area(page_index)
            page.trimbox = RectangleObject([
                _clamp(left, media.left, media.right),
                _clamp(bottom, media.bottom, media.top),
                _clamp(right, media.left, media.right),
                _clamp(top, media.bottom, media.top),
            ])
            writer.add_page(page)
        with open(self.out_path, "wb") as f:
            writer.write(f)

    def read_geometry(self) -> PageGeometry:
        return read_pdf_geometry(self.out_path)


def read_pdf_geometry(pdf_path: str | Path, page_number: Optional[int] = 1) -> PageGeometry:
    """Page size from the MediaBox, margins from the TrimBox inset."""
    reader = PdfReader(str(pdf_path))
    page = reader.pages[(page_number or 1) - 1]
    media = page.mediabox
    trim = page.trimbox
    return PageGeometry(
        width_pt=float(media.width),
        height_pt=float(media.height),
        top_pt=float(media.top) - float(trim.top),
        bottom_pt=float(trim.bottom) - float(media.bottom),
        left_pt=float(trim.left) - float(media.left),
        right_pt=float(media.right) - float(trim.right),
    )
