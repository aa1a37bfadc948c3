"""Page layout constants, pagination cursor and word wrapping for fpdf2."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from fpdf import FPDF

from cover_letter_kit.models.markup import TextSegment

# fpdf2 core fonts cannot take arbitrary unicode; cp1252 still covers
# bullets, dashes and curly quotes
CORE_FONT_ENCODING = "windows-1252"

Measure = Callable[[str, bool], float]


@dataclass(frozen=True)
class PageLayout:
    """Geometry and type sizes for one document kind, in millimetres/points."""

    margin: float
    body_font_size: float
    line_height: float
    heading_font_size: float = 12
    heading_line_height: float = 7
    bullet_indent: float = 0
    blank_line_spacing: float = 0
    paragraph_gap: float = 0
    page_width: float = 210.0  # A4
    page_height: float = 297.0
    font_family: str = "Helvetica"

    @property
    def usable_width(self) -> float:
        return self.page_width - self.margin * 2

    @property
    def max_y(self) -> float:
        return self.page_height - self.margin


def new_document(layout: PageLayout) -> FPDF:
    pdf = FPDF(orientation="P", unit="mm", format=(layout.page_width, layout.page_height))
    pdf.core_fonts_encoding = CORE_FONT_ENCODING
    pdf.set_auto_page_break(False)
    pdf.set_margins(layout.margin, layout.margin, layout.margin)
    pdf.add_page()
    pdf.set_font(layout.font_family, size=layout.body_font_size)
    return pdf


class RenderCursor:
    """Vertical position on the current page of one render call.

    Every line is placed through ``ensure_room`` first, so nothing is drawn
    below the bottom margin.
    """

    def __init__(self, pdf: FPDF, layout: PageLayout):
        self.pdf = pdf
        self.layout = layout
        self.y = layout.margin

    @property
    def page(self) -> int:
        return self.pdf.page

    def would_overflow(self, height: float) -> bool:
        return self.y + height > self.layout.max_y

    def ensure_room(self, height: float) -> bool:
        """Start a new page if ``height`` does not fit. Returns True on a break."""
        if not self.would_overflow(height):
            return False
        self.pdf.add_page()
        self.y = self.layout.margin
        return True

    def advance(self, height: float) -> None:
        self.y += height

    def set_font(self, *, bold: bool = False, size: float | None = None) -> None:
        self.pdf.set_font(
            self.layout.font_family,
            style="B" if bold else "",
            size=size or self.layout.body_font_size,
        )

    def measure(self, text: str, bold: bool = False, size: float | None = None) -> float:
        self.set_font(bold=bold, size=size)
        return self.pdf.get_string_width(safe_text(text))

    def draw_text(self, x: float, text: str) -> None:
        self.pdf.text(x, self.y, safe_text(text))

    def draw_segments(self, x: float, segments: list[TextSegment], size: float | None = None) -> None:
        """Draw runs left to right, each in its own weight."""
        for seg in segments:
            self.set_font(bold=seg.bold, size=size)
            self.draw_text(x, seg.text)
            x += self.pdf.get_string_width(safe_text(seg.text))

    def draw_rule(
        self,
        y: float,
        color: tuple[int, int, int],
        width: float,
    ) -> None:
        self.pdf.set_draw_color(*color)
        self.pdf.set_line_width(width)
        self.pdf.line(self.layout.margin, y, self.layout.page_width - self.layout.margin, y)


def safe_text(text: str) -> str:
    """Replace characters the core fonts cannot encode."""
    return text.encode(CORE_FONT_ENCODING, errors="replace").decode(CORE_FONT_ENCODING)


def _break_word(word: str, max_width: float, measure: Callable[[str], float]) -> list[str]:
    if measure(word) <= max_width:
        return [word]
    pieces: list[str] = []
    current = ""
    for char in word:
        if current and measure(current + char) > max_width:
            pieces.append(current)
            current = char
        else:
            current += char
    if current:
        pieces.append(current)
    return pieces


def _merge(segments: list[TextSegment]) -> list[TextSegment]:
    merged: list[TextSegment] = []
    for seg in segments:
        if merged and merged[-1].bold == seg.bold:
            merged[-1] = TextSegment(merged[-1].text + seg.text, seg.bold)
        else:
            merged.append(seg)
    return merged


def flow_segments(
    segments: list[TextSegment],
    max_width: float,
    measure: Measure,
) -> list[list[TextSegment]]:
    """Greedy word wrap across mixed bold/regular runs.

    Each word is measured in its own weight. Whitespace collapses to a single
    space and is dropped at line starts; words wider than the line are
    broken by characters.
    """
    lines: list[list[TextSegment]] = []
    current: list[TextSegment] = []
    width = 0.0
    pending: TextSegment | None = None

    for seg in segments:
        for token in re.findall(r"\S+|\s+", seg.text):
            if token.isspace():
                if current:
                    pending = TextSegment(" ", seg.bold)
                continue
            pieces = _break_word(token, max_width, lambda s, b=seg.bold: measure(s, b))
            for piece in pieces:
                piece_width = measure(piece, seg.bold)
                gap = measure(" ", pending.bold) if pending and current else 0.0
                if current and width + gap + piece_width > max_width:
                    lines.append(_merge(current))
                    current, width, pending, gap = [], 0.0, None, 0.0
                if pending and current:
                    current.append(pending)
                    width += gap
                current.append(TextSegment(piece, seg.bold))
                width += piece_width
                pending = None

    if current:
        lines.append(_merge(current))
    return lines


def wrap_text(text: str, max_width: float, measure: Callable[[str], float]) -> list[str]:
    """Split plain text into lines no wider than ``max_width``."""
    wrapped = flow_segments([TextSegment(text)], max_width, lambda s, _bold: measure(s))
    return ["".join(seg.text for seg in line) for line in wrapped]
