"""Line and inline-run types produced by the markdown-lite parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TextSegment:
    """A run of text that is either bold or not."""

    text: str
    bold: bool = False


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class Heading:
    text: str


@dataclass(frozen=True)
class _RunLine:
    segments: tuple[TextSegment, ...]

    @property
    def text(self) -> str:
        """Visible text with bold markers removed."""
        return "".join(s.text for s in self.segments)

    @property
    def has_bold(self) -> bool:
        return any(s.bold for s in self.segments)


@dataclass(frozen=True)
class Bullet(_RunLine):
    pass


@dataclass(frozen=True)
class Plain(_RunLine):
    pass


ClassifiedLine = Union[Blank, Heading, Bullet, Plain]
