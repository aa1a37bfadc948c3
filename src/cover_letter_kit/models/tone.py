"""Writing tone requested for generated documents."""

from __future__ import annotations

from enum import Enum


class Tone(str, Enum):
    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    CONCISE = "concise"
    ENTHUSIASTIC = "enthusiastic"
    CONFIDENT = "confident"

    @classmethod
    def normalize(cls, value: str | Tone | None) -> Tone:
        """Map any value to a Tone, falling back to PROFESSIONAL."""
        if isinstance(value, Tone):
            return value
        if value is None:
            return cls.PROFESSIONAL
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.PROFESSIONAL
