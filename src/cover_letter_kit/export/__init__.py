"""PDF and DOCX export module for cover-letter-kit."""
from cover_letter_kit.export.docx_renderer import render_docx
from cover_letter_kit.export.filenames import (
    build_docx_filename,
    build_pdf_filename,
    build_resume_filename,
)
from cover_letter_kit.export.pdf_renderer import (
    render_cover_letter_pdf,
    render_resume_pdf,
)

__all__ = [
    "build_docx_filename",
    "build_pdf_filename",
    "build_resume_filename",
    "render_cover_letter_pdf",
    "render_docx",
    "render_resume_pdf",
]
