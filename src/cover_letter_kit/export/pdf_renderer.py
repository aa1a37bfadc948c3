"""PDF export for cover letters and curated resumes, drawn with fpdf2."""

from __future__ import annotations

import logging
import re
from datetime import date

from cover_letter_kit.export.pdf_layout import (
    PageLayout,
    RenderCursor,
    flow_segments,
    new_document,
    wrap_text,
)
from cover_letter_kit.models.artifact import PDF_MEDIA_TYPE, ExportArtifact
from cover_letter_kit.models.markup import Blank, Bullet, Heading
from cover_letter_kit.models.metadata import DocumentMetadata
from cover_letter_kit.parsers.markup import classify, split_bold

logger = logging.getLogger(__name__)

DEFAULT_COVER_LETTER_FILENAME = "cover-letter.pdf"
DEFAULT_RESUME_FILENAME = "curated-resume.pdf"

COVER_LETTER_LAYOUT = PageLayout(
    margin=25,
    body_font_size=11,
    line_height=6,
    heading_font_size=18,
    heading_line_height=8,
    paragraph_gap=4,
)

# Narrow margins and compact type keep a typical resume within two pages
RESUME_LAYOUT = PageLayout(
    margin=12,
    body_font_size=8.5,
    line_height=4.5,
    heading_font_size=10,
    heading_line_height=5,
    bullet_indent=4,
    blank_line_spacing=2,
)

BLACK = (0, 0, 0)
GRAY = (110, 110, 110)
LIGHT_GRAY = (200, 200, 200)
DIVIDER_GRAY = (180, 180, 180)
BULLET = "•"


def _long_date(today: date) -> str:
    return f"{today:%B} {today.day}, {today.year}"


# ---------------------------------------------------------------------------
# Cover letter
# ---------------------------------------------------------------------------

def render_cover_letter_pdf(
    text: str,
    metadata: DocumentMetadata | None = None,
    *,
    filename: str | None = None,
    today: date | None = None,
) -> ExportArtifact:
    """Render a cover letter with an optional name/role header block."""
    layout = COVER_LETTER_LAYOUT
    pdf = new_document(layout)
    cursor = RenderCursor(pdf, layout)

    if metadata is not None and not metadata.is_empty:
        _draw_letter_header(cursor, metadata, today or date.today())

    _draw_letter_body(cursor, text)

    logger.debug("Cover letter PDF rendered: %d page(s)", pdf.page)
    return ExportArtifact(
        filename=filename or DEFAULT_COVER_LETTER_FILENAME,
        content=bytes(pdf.output()),
        media_type=PDF_MEDIA_TYPE,
    )


def _draw_letter_header(cursor: RenderCursor, metadata: DocumentMetadata, today: date) -> None:
    layout = cursor.layout
    if metadata.candidate_name:
        cursor.set_font(bold=True, size=layout.heading_font_size)
        cursor.draw_text(layout.margin, metadata.candidate_name)
        cursor.advance(layout.heading_line_height)

    sub_header = " | ".join(
        part for part in (metadata.job_title, metadata.company_name, _long_date(today)) if part
    )
    cursor.set_font(size=10)
    cursor.pdf.set_text_color(*GRAY)
    cursor.draw_text(layout.margin, sub_header)
    cursor.advance(4)

    cursor.draw_rule(cursor.y, LIGHT_GRAY, 0.5)
    cursor.advance(layout.line_height + 2)
    cursor.pdf.set_text_color(*BLACK)


def _draw_letter_body(cursor: RenderCursor, text: str) -> None:
    """Paragraphs split on blank lines, with the gap only between them."""
    paragraphs = re.split(r"\n\s*\n", text.strip())
    for index, paragraph in enumerate(paragraphs):
        for line in paragraph.split("\n"):
            _draw_flowed_line(cursor, line.strip())
        if index < len(paragraphs) - 1:
            cursor.advance(cursor.layout.paragraph_gap)


def _draw_flowed_line(cursor: RenderCursor, line: str) -> None:
    layout = cursor.layout
    segments = split_bold(line)
    wrapped = flow_segments(
        segments,
        layout.usable_width,
        lambda s, bold: cursor.measure(s, bold),
    )
    for row in wrapped:
        cursor.ensure_room(layout.line_height)
        cursor.draw_segments(layout.margin, row)
        cursor.advance(layout.line_height)


# ---------------------------------------------------------------------------
# Curated resume
# ---------------------------------------------------------------------------

def render_resume_pdf(text: str, *, filename: str | None = None) -> ExportArtifact:
    """Render a resume line by line in the compact two-page layout."""
    layout = RESUME_LAYOUT
    pdf = new_document(layout)
    cursor = RenderCursor(pdf, layout)

    for raw_line in text.split("\n"):
        line = classify(raw_line)
        if isinstance(line, Blank):
            cursor.advance(layout.blank_line_spacing)
        elif isinstance(line, Heading):
            _draw_resume_heading(cursor, line.text)
        elif isinstance(line, Bullet):
            _draw_resume_runs(cursor, line.segments, bullet=True)
        else:
            _draw_resume_runs(cursor, line.segments, bullet=False)

    logger.debug("Resume PDF rendered: %d page(s)", pdf.page)
    return ExportArtifact(
        filename=filename or DEFAULT_RESUME_FILENAME,
        content=bytes(pdf.output()),
        media_type=PDF_MEDIA_TYPE,
    )


def _draw_resume_heading(cursor: RenderCursor, text: str) -> None:
    layout = cursor.layout
    cursor.ensure_room(layout.heading_line_height)
    cursor.set_font(bold=True, size=layout.heading_font_size)
    cursor.draw_text(layout.margin, text)
    cursor.advance(layout.heading_line_height)
    cursor.draw_rule(cursor.y - 1, DIVIDER_GRAY, 0.3)
    cursor.advance(1.5)


def _draw_resume_runs(cursor: RenderCursor, segments, *, bullet: bool) -> None:
    layout = cursor.layout
    indent = layout.bullet_indent if bullet else 0
    x = layout.margin + indent

    if any(seg.bold for seg in segments):
        # Inline bold is drawn as-is on one line
        cursor.ensure_room(layout.line_height)
        if bullet:
            cursor.set_font()
            cursor.draw_text(layout.margin, BULLET)
        cursor.draw_segments(x, list(segments))
        cursor.advance(layout.line_height)
        return

    plain = "".join(seg.text for seg in segments)
    wrapped = wrap_text(plain, layout.usable_width - indent, lambda s: cursor.measure(s))
    cursor.set_font()
    for index, row in enumerate(wrapped):
        cursor.ensure_room(layout.line_height)
        if bullet and index == 0:
            cursor.draw_text(layout.margin, BULLET)
        cursor.draw_text(x, row)
        cursor.advance(layout.line_height)
