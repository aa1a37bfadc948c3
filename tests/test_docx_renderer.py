"""Tests for DOCX export."""

from io import BytesIO

from docx import Document

from cover_letter_kit.export.docx_renderer import render_docx
from cover_letter_kit.models.artifact import DOCX_MEDIA_TYPE


def _read(content: bytes):
    return Document(BytesIO(content))


class TestRenderDocx:
    def test_artifact(self, sample_resume_text):
        artifact = render_docx(sample_resume_text)
        assert artifact.content[:2] == b"PK"
        assert artifact.media_type == DOCX_MEDIA_TYPE
        assert artifact.filename == "curated-resume.docx"

    def test_custom_filename(self):
        assert render_docx("Jane Smith", filename="jane-smith-resume.docx").filename == "jane-smith-resume.docx"

    def test_one_paragraph_per_line(self, sample_resume_text):
        doc = _read(render_docx(sample_resume_text).content)
        assert len(doc.paragraphs) == len(sample_resume_text.split("\n"))

    def test_headings_are_level_two(self, sample_resume_text):
        doc = _read(render_docx(sample_resume_text).content)
        headings = [p.text for p in doc.paragraphs if p.style.name == "Heading 2"]
        assert headings == ["SUMMARY", "EXPERIENCE", "EDUCATION"]

    def test_bullets_use_list_style(self, sample_resume_text):
        doc = _read(render_docx(sample_resume_text).content)
        bullets = [p.text for p in doc.paragraphs if p.style.name == "List Bullet"]
        assert bullets == [
            "Built the billing pipeline processing 2M invoices per month",
            "Cut p95 API latency by 45% with query tuning and caching",
            "Mentored four junior engineers",
        ]

    def test_bold_runs(self):
        doc = _read(render_docx("Python experience of **7 years** total").content)
        runs = doc.paragraphs[0].runs
        assert [r.text for r in runs] == ["Python experience of ", "7 years", " total"]
        assert [bool(r.bold) for r in runs] == [False, True, False]

    def test_blank_lines_become_empty_paragraphs(self):
        doc = _read(render_docx("First\n\nSecond").content)
        assert [p.text for p in doc.paragraphs] == ["First", "", "Second"]

    def test_normal_style_font(self):
        doc = _read(render_docx("Jane Smith").content)
        font = doc.styles["Normal"].font
        assert font.name == "Calibri"
        assert font.size.pt == 10.5

    def test_text_without_markers_round_trips(self, sample_resume_text):
        doc = _read(render_docx(sample_resume_text).content)
        bold_text = " ".join(r.text for p in doc.paragraphs for r in p.runs if r.bold)
        assert "7 years" in bold_text
        assert "45%" in bold_text
        assert all("**" not in p.text for p in doc.paragraphs)
