"""Human-readable, filesystem-safe export filenames."""

from __future__ import annotations

import re
from datetime import date

from cover_letter_kit.models.metadata import DocumentMetadata
from cover_letter_kit.parsers.metadata import extract_company_name, extract_job_title


def slugify(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", value.lower().strip()).strip("-")


def _resume_candidate_name(resume_text: str) -> str:
    """First line that starts with a letter and is not an ALL CAPS heading."""
    for line in resume_text.split("\n"):
        line = line.strip()
        if line and re.match(r"[A-Za-z]", line) and line != line.upper():
            return re.sub(r"[^a-zA-Z0-9 '-]+", "", line).strip()
    return ""


def build_resume_filename(resume_text: str, job_description: str) -> str:
    """Build ``{candidate}-{job-title}-{company}-resume`` without an extension.

    Missing components are left out. Company and title come from the job
    description only.
    """
    candidate = _resume_candidate_name(resume_text)
    job_title = extract_job_title("", job_description)
    company = extract_company_name("", job_description)

    parts = [slugify(p) for p in (candidate, job_title, company) if p]
    parts = [p for p in parts if p]
    parts.append("resume")
    return "-".join(parts)


def build_docx_filename(resume_text: str, job_description: str) -> str:
    return build_resume_filename(resume_text, job_description) + ".docx"


def build_pdf_filename(metadata: DocumentMetadata, *, year: int | None = None) -> str:
    """Build ``Cover-Letter_{Company}_{Title}_{year}.pdf``."""
    parts = ["Cover-Letter"]
    if metadata.company_name:
        parts.append(re.sub(r"[^a-zA-Z0-9]+", "-", metadata.company_name))
    if metadata.job_title:
        parts.append(re.sub(r"[^a-zA-Z0-9]+", "-", metadata.job_title))
    parts.append(str(year or date.today().year))
    return "_".join(parts) + ".pdf"
