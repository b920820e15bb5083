from kdp_page_setup.document.base import PageTarget, apply_page_spec, describe_geometry, status_message
from kdp_page_setup.document.docx_target import DocxPageTarget, read_docx_geometry
from kdp_page_setup.document.pdf_proof import PdfProofTarget, read_pdf_geometry

__all__ = [
    "DocxPageTarget",
    "PageTarget",
    "PdfProofTarget",
    "apply_page_spec",
    "describe_geometry",
    "read_docx_geometry",
    "read_pdf_geometry",
    "status_message",
]
