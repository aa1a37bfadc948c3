"""Prompt construction for cover letters, curated resumes and recommendations."""

from __future__ import annotations

from dataclasses import dataclass

from cover_letter_kit.models.tone import Tone

MAX_INPUT_LENGTH = 8_000
TRUNCATION_MARKER = "... [truncated]"

TONE_GUIDANCE = {
    Tone.PROFESSIONAL: "Write in a professional but personable tone.",
    Tone.FRIENDLY: "Write in a warm, friendly and conversational tone while staying professional.",
    Tone.CONCISE: "Be brief and direct. Keep every paragraph short and cut filler.",
    Tone.ENTHUSIASTIC: "Write with genuine energy and excitement about the role and company.",
    Tone.CONFIDENT: "Write assertively, leading with achievements and clear impact.",
}

_MARKUP_RULES = """\
Formatting rules (plain text, no markdown headings or tables):
- Section headings on their own line in ALL CAPS (e.g. EXPERIENCE)
- Bullet points start with "• "
- Use **double asterisks** only for short bold phrases
- Separate sections with one blank line"""


@dataclass(frozen=True)
class PromptParts:
    system: str
    user: str


def truncate(text: str, max_length: int = MAX_INPUT_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + TRUNCATION_MARKER


def _inputs(resume_text: str, job_description: str, max_length: int) -> str:
    return f"""## Resume
{truncate(resume_text, max_length)}

## Job Description
{truncate(job_description, max_length)}"""


def build_cover_letter_prompt(
    resume_text: str,
    job_description: str,
    tone: Tone | str | None = Tone.PROFESSIONAL,
    *,
    max_length: int = MAX_INPUT_LENGTH,
) -> PromptParts:
    tone = Tone.normalize(tone)
    system = f"""You are an expert career coach and professional writer. Your task is to write a compelling, tailored cover letter.

Guidelines:
- {TONE_GUIDANCE[tone]}
- Highlight relevant experience from the resume that matches the job requirements
- Be specific about why the candidate is a great fit
- Keep the letter concise (3-4 paragraphs)
- Do not fabricate experience or skills not found in the resume
- Format as a proper cover letter with greeting and sign-off
- End with a sign-off line (e.g. "Sincerely,") followed by the candidate's full name on its own line
- Use **double asterisks** to bold at most one standout achievement"""

    user = f"""Write a tailored cover letter based on the following:

{_inputs(resume_text, job_description, max_length)}

Please write a cover letter that connects the candidate's experience to this specific role."""
    return PromptParts(system=system, user=user)


def build_curate_resume_prompt(
    resume_text: str,
    job_description: str,
    tone: Tone | str | None = None,
    *,
    max_length: int = MAX_INPUT_LENGTH,
) -> PromptParts:
    system = f"""You are an expert resume writer. Rewrite the candidate's resume so it is tailored to the job description.

Guidelines:
- Keep only true information from the original resume; never invent roles, dates or skills
- Reorder and rephrase bullets so the most relevant experience comes first
- Mirror important keywords from the job description where they honestly apply
- Start with the candidate's name on the first line, then contact details
- Keep it to at most two pages

{_MARKUP_RULES}"""
    if tone is not None:
        system += f"\n\nStyle: {TONE_GUIDANCE[Tone.normalize(tone)]}"

    user = f"""Curate this resume for the role below:

{_inputs(resume_text, job_description, max_length)}

Return only the curated resume text."""
    return PromptParts(system=system, user=user)


def build_recommendations_prompt(
    resume_text: str,
    job_description: str,
    tone: Tone | str | None = None,
    *,
    max_length: int = MAX_INPUT_LENGTH,
) -> PromptParts:
    system = f"""You are a senior recruiter reviewing a resume against a specific job posting.

Give concrete, actionable suggestions to improve the resume for this role:
- Missing keywords or skills the posting asks for that the candidate may have
- Bullets that should quantify impact
- Sections to reorder, shorten or remove
- Gaps the candidate should address in the cover letter

{_MARKUP_RULES}"""
    if tone is not None:
        system += f"\n\nStyle: {TONE_GUIDANCE[Tone.normalize(tone)]}"

    user = f"""Review this resume for the role below:

{_inputs(resume_text, job_description, max_length)}

List your recommendations grouped under ALL CAPS headings."""
    return PromptParts(system=system, user=user)
