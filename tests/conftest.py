"""Shared test fixtures."""

from __future__ import annotations

from io import BytesIO
from unittest.mock import MagicMock

import pytest
from docx import Document
from fpdf import FPDF

from cover_letter_kit.clients.llm_client import LLMClient


@pytest.fixture
def sample_cover_letter() -> str:
    return """Dear Hiring Manager,

I am excited to apply for the Senior Software Engineer position at Acme Corp. With over 8 years of experience building scalable web applications, I believe I can make a strong contribution to your team.

**I led a team of 5 engineers that rebuilt our payment system, reducing transaction failures by 40% and saving $2M annually.**

I would love the opportunity to bring this same drive to Acme Corp as your next Senior Software Engineer.

Sincerely,
John Doe"""


@pytest.fixture
def sample_jd_text() -> str:
    return """Senior Software Engineer
Company: Acme Corp
Location: San Francisco, CA

We are looking for a Senior Software Engineer to join our platform team..."""


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Smith
jane@example.com | (555) 123-4567 | Portland, OR

SUMMARY
Product-minded backend engineer with **7 years** of Python experience.

EXPERIENCE
Senior Engineer, Globex (2020 - Present)
• Built the billing pipeline processing 2M invoices per month
• Cut p95 API latency by **45%** with query tuning and caching
- Mentored four junior engineers

EDUCATION
B.S. Computer Science, Oregon State University"""


@pytest.fixture
def make_pdf_bytes():
    """Build a small PDF with one line of text per page."""

    def _make(*pages: str) -> bytes:
        pdf = FPDF()
        if not pages:
            pdf.add_page()
        for text in pages:
            pdf.add_page()
            if text:
                pdf.set_font("Helvetica", size=12)
                pdf.text(20, 20, text)
        return bytes(pdf.output())

    return _make


@pytest.fixture
def make_docx_bytes():
    """Build a DOCX with the given paragraph texts."""

    def _make(*paragraphs: str) -> bytes:
        doc = Document()
        for text in paragraphs:
            doc.add_paragraph(text)
        buf = BytesIO()
        doc.save(buf)
        return buf.getvalue()

    return _make


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """LLM client double whose stream yields fixed chunks."""
    client = MagicMock(spec=LLMClient)

    async def _stream(**kwargs):
        for chunk in ("Dear Hiring Manager,\n\n", "I am thrilled ", "to apply.\n\nSincerely,\nJohn Doe"):
            yield chunk

    client.stream_text = MagicMock(side_effect=_stream)
    return client
