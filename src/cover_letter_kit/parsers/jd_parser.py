import logging
import re

import requests
from bs4 import BeautifulSoup

from cover_letter_kit.models.extraction import ExtractedText, ExtractionError
from cover_letter_kit.utils.url_validator import validate_url

logger = logging.getLogger(__name__)

MAX_LENGTH = 10_000
FETCH_TIMEOUT = 8.0
USER_AGENT = "Mozilla/5.0 (compatible; CoverLetterBot/1.0)"
STRIP_TAGS = ["script", "style", "nav", "footer", "header", "noscript", "svg", "img"]


def parse_jd(text: str) -> str:
    """Clean and normalize pasted job description text."""
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = re.sub(r"[ \t]+", " ", text)
    lines = [line.strip() for line in text.splitlines()]
    return "\n".join(lines).strip()


def extract_job_description(html: str, max_chars: int = MAX_LENGTH) -> ExtractedText:
    """Reduce a job posting page to one line of plain text.

    Content comes from the first non-empty <main>, then <article>, then the
    whole <body>. The result is cut at ``max_chars`` without a marker.
    """
    if not html or not html.strip():
        return ExtractedText.fail(ExtractionError.EMPTY_INPUT, "Empty or invalid HTML")

    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(STRIP_TAGS):
        tag.decompose()

    text = _first_text(soup, "main") or _first_text(soup, "article")
    if not text:
        root = soup.body or soup
        text = root.get_text().strip()

    text = re.sub(r"\s+", " ", text).strip()
    if not text:
        return ExtractedText.fail(ExtractionError.NO_TEXT_FOUND, "No text content found")

    if len(text) > max_chars:
        logger.debug("Truncating job description from %d to %d chars", len(text), max_chars)
        text = text[:max_chars]
    return ExtractedText.ok(text)


def _first_text(soup: BeautifulSoup, name: str) -> str:
    for element in soup.find_all(name):
        text = element.get_text().strip()
        if text:
            return text
    return ""


def fetch_job_posting(
    url: str,
    *,
    timeout: float = FETCH_TIMEOUT,
    user_agent: str = USER_AGENT,
    max_chars: int = MAX_LENGTH,
) -> ExtractedText:
    """Download a job posting and extract its text.

    ``url`` must be absolute. It is screened with ``validate_url`` first, so
    internal or unresolvable targets come back as a fetch failure without
    any request being sent.
    """
    try:
        validate_url(url)
    except ValueError as exc:
        logger.warning("Refusing to fetch %s: %s", url, exc)
        return ExtractedText.fail(ExtractionError.FETCH_FAILURE, str(exc))

    logger.info("Fetching job posting: %s", url)
    try:
        response = requests.get(url, timeout=timeout, headers={"User-Agent": user_agent})
    except requests.RequestException as exc:
        logger.warning("Job posting fetch failed: %s", exc)
        return ExtractedText.fail(ExtractionError.FETCH_FAILURE, f"Failed to fetch URL: {exc}")

    if not 200 <= response.status_code < 300:
        logger.warning("Job posting fetch returned HTTP %s", response.status_code)
        return ExtractedText.fail(
            ExtractionError.FETCH_FAILURE, f"Failed to fetch URL: {response.status_code}"
        )

    return extract_job_description(response.text, max_chars=max_chars)
