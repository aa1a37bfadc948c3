"""Heuristic metadata extraction from cover letters and job descriptions.

Each field is resolved by an ordered list of rules. A rule is a regular
expression plus an acceptance check on its first capture group; the first
accepted match wins. Job description rules always run before cover letter
rules because the posting is the more reliable source.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, NamedTuple

from cover_letter_kit.models.metadata import DocumentMetadata

logger = logging.getLogger(__name__)

GENERIC_WORDS = frozenset({"the", "a", "an", "our", "this", "we", "you"})


class MatchRule(NamedTuple):
    pattern: re.Pattern[str]
    accept: Callable[[str], bool]


def _company_ok(name: str) -> bool:
    return len(name) > 1 and name.lower() not in GENERIC_WORDS


def _title_ok(title: str) -> bool:
    return 3 <= len(title) <= 60


def _first_match(rules: list[MatchRule], text: str) -> str | None:
    if not text:
        return None
    for rule in rules:
        match = rule.pattern.search(text)
        if not match:
            continue
        value = match.group(1).strip()
        if rule.accept(value):
            return value
    return None


_NAME = r"[A-Z][A-Za-z0-9&'.]+(?:\s+[A-Z][A-Za-z0-9&'.]+){0,3}"
_LOOSE_NAME = r"[A-Z][A-Za-z0-9&'. -]+?"

SIGN_OFF_PATTERN = re.compile(
    r"(?i:\b(?:sincerely|regards|respectfully|best|warmly|cheers|thanks|thank you))"
    r"[,.]?[ \t]*\n+\s*"
    r"\**([A-Z][a-zA-Z'-]+(?:[ \t]+[A-Z][a-zA-Z'-]+)+)\**[ \t]*$",
    re.MULTILINE,
)

JD_COMPANY_RULES = [
    # Company: Acme Corp / Company Name: Acme Corp
    MatchRule(re.compile(r"company(?:\s+name)?\s*:\s*([^\n,]+)", re.IGNORECASE), _company_ok),
    # About Acme Corp
    MatchRule(
        re.compile(rf"^(?i:about)[ \t]+({_LOOSE_NAME})[ \t]*$", re.MULTILINE),
        _company_ok,
    ),
    # Acme Corp is hiring
    MatchRule(
        re.compile(
            rf"^({_LOOSE_NAME})\s+is\s+(?i:hiring|looking|seeking|searching)",
            re.MULTILINE,
        ),
        _company_ok,
    ),
    MatchRule(re.compile(rf"\bat\s+({_NAME})\b"), _company_ok),
]

LETTER_COMPANY_RULES = [
    # Dear Acme Corp Team / Dear Hiring Manager at Acme Corp Recruitment
    MatchRule(
        re.compile(
            rf"(?i:dear)\s+(?:[^\n]*?\s+at\s+)?({_LOOSE_NAME})\s+(?i:team|hiring|recruitment)"
        ),
        _company_ok,
    ),
    MatchRule(
        re.compile(
            rf"\b(?:at|join|joining)\s+(?:the\s+)?({_NAME})"
            r"(?:\s*[,.]|\s+(?:team|as|in|for|is|has|and|where|to|I|that|this|with)\b)"
        ),
        _company_ok,
    ),
    MatchRule(re.compile(rf"(?:contribute|contributing)\s+to\s+({_NAME})"), _company_ok),
    MatchRule(re.compile(rf"work(?:ing)?\s+(?:at|for|with)\s+({_NAME})"), _company_ok),
]

JD_TITLE_RULES = [
    MatchRule(
        re.compile(r"(?:job\s+title|position|role)\s*:\s*([^\n]+)", re.IGNORECASE),
        _title_ok,
    ),
    # First line of the posting is usually the title
    MatchRule(re.compile(r"\A([A-Z][A-Za-z /,()-]+)(?:\n|\Z)"), _title_ok),
]

_TITLE = r"[A-Z][A-Za-z /()-]+?"

LETTER_TITLE_RULES = [
    MatchRule(
        re.compile(
            rf"for\s+the\s+({_TITLE})\s+(?:position|role|opening|opportunity)",
            re.IGNORECASE,
        ),
        _title_ok,
    ),
    MatchRule(
        re.compile(
            rf"(?:role|position)\s+(?:of|as)\s+(?:a\s+|an\s+)?({_TITLE})"
            r"(?:\s+(?:at|with|for|,|\.))",
            re.IGNORECASE,
        ),
        _title_ok,
    ),
    MatchRule(
        re.compile(
            rf"as\s+(?:a\s+|an\s+|your\s+(?:next\s+)?)?({_TITLE})"
            r"(?:\s+(?:at|with|for|,|\.|\band\b))",
            re.IGNORECASE,
        ),
        _title_ok,
    ),
    MatchRule(
        re.compile(
            rf"(?:applying\s+for|interest\s+in)\s+(?:the\s+)?({_TITLE})"
            r"(?:\s+(?:position|role|opening|opportunity|at|with))",
            re.IGNORECASE,
        ),
        _title_ok,
    ),
]


def extract_candidate_name(cover_letter: str) -> str | None:
    """Find the signer's name under the letter's sign-off line."""
    match = SIGN_OFF_PATTERN.search(cover_letter or "")
    if not match:
        return None
    return match.group(1).replace("**", "").strip()


def extract_company_name(cover_letter: str, job_description: str) -> str | None:
    return _first_match(JD_COMPANY_RULES, job_description) or _first_match(
        LETTER_COMPANY_RULES, cover_letter
    )


def extract_job_title(cover_letter: str, job_description: str) -> str | None:
    return _first_match(JD_TITLE_RULES, job_description) or _first_match(
        LETTER_TITLE_RULES, cover_letter
    )


def extract_metadata(generated_text: str, source_text: str) -> DocumentMetadata:
    """Infer candidate, company and job title from a letter and its posting."""
    metadata = DocumentMetadata(
        candidate_name=extract_candidate_name(generated_text),
        company_name=extract_company_name(generated_text, source_text),
        job_title=extract_job_title(generated_text, source_text),
    )
    logger.debug("Extracted metadata: %s", metadata.model_dump(exclude_none=True))
    return metadata
