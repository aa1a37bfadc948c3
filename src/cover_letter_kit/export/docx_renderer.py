"""DOCX export built with python-docx."""

from __future__ import annotations

import logging
from io import BytesIO

from docx import Document
from docx.shared import Pt

from cover_letter_kit.models.artifact import DOCX_MEDIA_TYPE, ExportArtifact
from cover_letter_kit.models.markup import Blank, Bullet, Heading, TextSegment
from cover_letter_kit.parsers.markup import classify

logger = logging.getLogger(__name__)

DEFAULT_DOCX_FILENAME = "curated-resume.docx"


def render_docx(text: str, *, filename: str | None = None) -> ExportArtifact:
    """Render markdown-lite text into a single-section .docx in memory.

    Every physical line becomes one paragraph: ALL CAPS lines as level-2
    headings, bullets as "List Bullet" items, blank lines as empty paragraphs.
    """
    doc = Document()

    style = doc.styles["Normal"]
    style.font.name = "Calibri"
    style.font.size = Pt(10.5)

    for raw_line in text.split("\n"):
        line = classify(raw_line)
        if isinstance(line, Blank):
            doc.add_paragraph()
        elif isinstance(line, Heading):
            doc.add_heading(line.text, level=2)
        elif isinstance(line, Bullet):
            _add_runs(doc.add_paragraph(style="List Bullet"), line.segments)
        else:
            _add_runs(doc.add_paragraph(), line.segments)

    buf = BytesIO()
    doc.save(buf)
    logger.debug("DOCX rendered: %d paragraphs", len(doc.paragraphs))
    return ExportArtifact(
        filename=filename or DEFAULT_DOCX_FILENAME,
        content=buf.getvalue(),
        media_type=DOCX_MEDIA_TYPE,
    )


def _add_runs(paragraph, segments: tuple[TextSegment, ...]) -> None:
    for seg in segments:
        run = paragraph.add_run(seg.text)
        if seg.bold:
            run.bold = True
