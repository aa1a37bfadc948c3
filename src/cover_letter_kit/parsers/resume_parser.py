import logging
from io import BytesIO
from pathlib import Path

from cover_letter_kit.models.extraction import ExtractedText, ExtractionError

logger = logging.getLogger(__name__)


def parse_resume(file_path: str | Path) -> ExtractedText:
    """Read a resume file from disk and extract its plain text."""
    path = Path(file_path)
    return parse_resume_bytes(path.read_bytes(), path.name)


def parse_resume_bytes(data: bytes, filename: str) -> ExtractedText:
    """Extract plain text from an uploaded PDF or DOCX resume.

    Never raises for bad input: unsupported extensions, empty documents and
    decoder errors all come back as a failed ExtractedText.
    """
    # Text after the last dot; a name without one is its own "extension"
    ext = filename.rsplit(".", 1)[-1].lower()
    logger.debug("Parsing resume %s (%d bytes)", filename, len(data))

    decoders = {"pdf": _parse_pdf, "docx": _parse_docx}
    decoder = decoders.get(ext)
    if decoder is None:
        logger.warning("Rejected resume upload with extension %r", ext)
        return ExtractedText.fail(
            ExtractionError.UNSUPPORTED_FORMAT, f"Unsupported file type: .{ext}"
        )

    try:
        text = decoder(data).strip()
    except Exception as exc:
        logger.warning("Failed to parse %s: %s", filename, exc)
        return ExtractedText.fail(
            ExtractionError.PARSE_FAILURE, f"Failed to parse file: {exc}"
        )

    if not text:
        return ExtractedText.fail(
            ExtractionError.NO_TEXT_FOUND, f"No text found in {ext.upper()}"
        )
    return ExtractedText.ok(text)


def _parse_pdf(data: bytes) -> str:
    import fitz  # pymupdf

    doc = fitz.open(stream=data, filetype="pdf")
    try:
        return "\n".join(page.get_text() for page in doc)
    finally:
        doc.close()


def _parse_docx(data: bytes) -> str:
    from docx import Document

    doc = Document(BytesIO(data))
    lines = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                lines.extend(p.text for p in cell.paragraphs)
    return "\n".join(lines)
