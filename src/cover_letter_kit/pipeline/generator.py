"""Streamed generation of cover letters, curated resumes and recommendations."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from enum import Enum

from cover_letter_kit.clients.llm_client import DEFAULT_MODEL, LLMClient
from cover_letter_kit.models.tone import Tone
from cover_letter_kit.pipeline.prompts import (
    MAX_INPUT_LENGTH,
    PromptParts,
    build_cover_letter_prompt,
    build_curate_resume_prompt,
    build_recommendations_prompt,
)

logger = logging.getLogger(__name__)


class DocumentKind(str, Enum):
    COVER_LETTER = "cover-letter"
    CURATED_RESUME = "resume"
    RECOMMENDATIONS = "recommendations"


_PROMPT_BUILDERS = {
    DocumentKind.COVER_LETTER: build_cover_letter_prompt,
    DocumentKind.CURATED_RESUME: build_curate_resume_prompt,
    DocumentKind.RECOMMENDATIONS: build_recommendations_prompt,
}


class DocumentGenerator:
    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 4096,
        max_input_chars: int = MAX_INPUT_LENGTH,
    ):
        self.llm = llm
        self.model = model
        self.max_tokens = max_tokens
        self.max_input_chars = max_input_chars

    def build_prompt(
        self,
        kind: DocumentKind,
        resume_text: str,
        job_description: str,
        tone: Tone | str | None = None,
    ) -> PromptParts:
        if not resume_text or not resume_text.strip() or not job_description or not job_description.strip():
            raise ValueError("Both resume text and job description are required")
        builder = _PROMPT_BUILDERS[DocumentKind(kind)]
        if kind == DocumentKind.COVER_LETTER:
            tone = Tone.normalize(tone)
        return builder(resume_text, job_description, tone, max_length=self.max_input_chars)

    async def stream(
        self,
        kind: DocumentKind,
        resume_text: str,
        job_description: str,
        tone: Tone | str | None = None,
    ) -> AsyncIterator[str]:
        """Yield generated text chunks for the requested document."""
        prompt = self.build_prompt(kind, resume_text, job_description, tone)
        logger.info(
            "Generating %s (resume %d chars, job description %d chars)",
            DocumentKind(kind).value,
            len(resume_text),
            len(job_description),
        )
        total = 0
        async for chunk in self.llm.stream_text(
            prompt=prompt.user,
            system=prompt.system,
            model=self.model,
            max_tokens=self.max_tokens,
        ):
            total += len(chunk)
            yield chunk
        logger.info("Stream finished, output length: %d", total)

    async def generate(
        self,
        kind: DocumentKind,
        resume_text: str,
        job_description: str,
        tone: Tone | str | None = None,
    ) -> str:
        """Collect the whole stream into one string."""
        parts = [
            chunk
            async for chunk in self.stream(kind, resume_text, job_description, tone)
        ]
        return "".join(parts)

    async def complete(
        self,
        kind: DocumentKind,
        resume_text: str,
        job_description: str,
        tone: Tone | str | None = None,
    ) -> str:
        """Request the whole document in one non-streamed, retried call."""
        prompt = self.build_prompt(kind, resume_text, job_description, tone)
        logger.info("Requesting %s without streaming", DocumentKind(kind).value)
        response = await self.llm.generate(
            prompt=prompt.user,
            system=prompt.system,
            model=self.model,
            max_tokens=self.max_tokens,
        )
        logger.info("Completion finished, output length: %d", len(response.text))
        return response.text
