"""Data models for the cover letter kit."""

from cover_letter_kit.models.artifact import ExportArtifact
from cover_letter_kit.models.extraction import ExtractedText, ExtractionError
from cover_letter_kit.models.markup import (
    Blank,
    Bullet,
    ClassifiedLine,
    Heading,
    Plain,
    TextSegment,
)
from cover_letter_kit.models.metadata import DocumentMetadata
from cover_letter_kit.models.tone import Tone

__all__ = [
    "Blank",
    "Bullet",
    "ClassifiedLine",
    "DocumentMetadata",
    "ExportArtifact",
    "ExtractedText",
    "ExtractionError",
    "Heading",
    "Plain",
    "TextSegment",
    "Tone",
]
