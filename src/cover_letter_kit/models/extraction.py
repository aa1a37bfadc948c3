"""Pydantic models for text extraction results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, model_validator


class ExtractionError(str, Enum):
    UNSUPPORTED_FORMAT = "unsupported_format"
    NO_TEXT_FOUND = "no_text_found"
    PARSE_FAILURE = "parse_failure"
    EMPTY_INPUT = "empty_input"
    FETCH_FAILURE = "fetch_failure"


class ExtractedText(BaseModel):
    """Outcome of turning an upload or a web page into plain text.

    Exactly one of ``text`` / ``error`` is set. Failures are values, not
    exceptions, so callers can hand them straight to the user.
    """

    success: bool
    text: str | None = None
    error: str | None = None
    error_kind: ExtractionError | None = None

    @model_validator(mode="after")
    def _check_outcome(self) -> ExtractedText:
        if self.success:
            if self.text is None or not self.text.strip():
                raise ValueError("successful extraction requires non-empty text")
            if self.error is not None:
                raise ValueError("successful extraction cannot carry an error")
        else:
            if not self.error:
                raise ValueError("failed extraction requires an error message")
            if self.text is not None:
                raise ValueError("failed extraction cannot carry text")
        return self

    @classmethod
    def ok(cls, text: str) -> ExtractedText:
        return cls(success=True, text=text)

    @classmethod
    def fail(cls, kind: ExtractionError, message: str) -> ExtractedText:
        return cls(success=False, error=message, error_kind=kind)
