"""Markdown-lite line classification shared by the PDF and DOCX renderers.

Generated documents use a tiny subset of markdown: ALL CAPS lines are
section headings, lines starting with ``•``, ``-`` or ``* `` are bullets and
``**text**`` marks bold runs. Everything else is plain text.
"""

from __future__ import annotations

import re

from cover_letter_kit.models.markup import (
    Blank,
    Bullet,
    ClassifiedLine,
    Heading,
    Plain,
    TextSegment,
)

BOLD_PATTERN = re.compile(r"(\*\*[^*]+\*\*)")
_LETTER = re.compile(r"[A-Za-z]")
_STAR_BULLET = re.compile(r"^\*\s")


def split_bold(text: str) -> list[TextSegment]:
    """Split text into bold and non-bold runs.

    Balanced ``**...**`` spans become bold segments. Any ``**`` left over
    outside a pair is dropped, so markers never reach the output.
    """
    segments: list[TextSegment] = []
    # re.split with one capture group puts matched spans at odd indexes
    for index, part in enumerate(BOLD_PATTERN.split(text)):
        if index % 2:
            segments.append(TextSegment(part[2:-2], bold=True))
            continue
        part = part.replace("**", "")
        if part:
            segments.append(TextSegment(part, bold=False))
    return segments


def strip_bold_markers(text: str) -> str:
    return "".join(s.text for s in split_bold(text))


def is_heading(trimmed: str) -> bool:
    return (
        len(trimmed) > 2
        and _LETTER.search(trimmed) is not None
        and trimmed == trimmed.upper()
    )


def is_bullet(trimmed: str) -> bool:
    # "* " only, so a line opening with **bold** stays plain
    return (
        trimmed.startswith("•")
        or trimmed.startswith("-")
        or _STAR_BULLET.match(trimmed) is not None
    )


def classify(line: str) -> ClassifiedLine:
    trimmed = line.strip()
    if not trimmed:
        return Blank()
    if is_heading(trimmed):
        return Heading(trimmed)
    if is_bullet(trimmed):
        return Bullet(tuple(split_bold(trimmed[1:].strip())))
    return Plain(tuple(split_bold(trimmed)))


def classify_lines(text: str) -> list[ClassifiedLine]:
    return [classify(line) for line in text.split("\n")]
