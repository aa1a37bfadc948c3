"""Pydantic model for metadata inferred from generated and source text."""

from __future__ import annotations

from pydantic import BaseModel


class DocumentMetadata(BaseModel):
    candidate_name: str | None = None
    company_name: str | None = None
    job_title: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.candidate_name or self.company_name or self.job_title)
