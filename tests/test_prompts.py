"""Tests for prompt construction."""

import pytest

from cover_letter_kit.models.tone import Tone
from cover_letter_kit.pipeline.prompts import (
    MAX_INPUT_LENGTH,
    TONE_GUIDANCE,
    TRUNCATION_MARKER,
    build_cover_letter_prompt,
    build_curate_resume_prompt,
    build_recommendations_prompt,
    truncate,
)


class TestTruncate:
    def test_short_text_untouched(self):
        assert truncate("hello", 10) == "hello"

    def test_exact_length_untouched(self):
        assert truncate("a" * MAX_INPUT_LENGTH) == "a" * MAX_INPUT_LENGTH

    def test_long_text_gets_marker(self):
        result = truncate("a" * (MAX_INPUT_LENGTH + 1))
        assert result == "a" * MAX_INPUT_LENGTH + TRUNCATION_MARKER


class TestCoverLetterPrompt:
    def test_contains_inputs(self):
        parts = build_cover_letter_prompt("RESUME BODY", "JD BODY")
        assert "RESUME BODY" in parts.user
        assert "JD BODY" in parts.user
        assert TONE_GUIDANCE[Tone.PROFESSIONAL] in parts.system

    @pytest.mark.parametrize("tone", list(Tone))
    def test_each_tone(self, tone):
        parts = build_cover_letter_prompt("r", "j", tone)
        assert TONE_GUIDANCE[tone] in parts.system

    def test_unknown_tone_falls_back(self):
        parts = build_cover_letter_prompt("r", "j", "pirate")
        assert TONE_GUIDANCE[Tone.PROFESSIONAL] in parts.system

    def test_long_resume_is_truncated(self):
        parts = build_cover_letter_prompt("x" * 9_000, "job", max_length=8_000)
        assert "x" * 8_000 + TRUNCATION_MARKER in parts.user
        assert "x" * 8_001 not in parts.user


class TestOtherPrompts:
    def test_curate_resume_describes_markup(self):
        parts = build_curate_resume_prompt("resume", "job")
        assert "ALL CAPS" in parts.system
        assert "Style:" not in parts.system

    def test_curate_resume_with_tone(self):
        parts = build_curate_resume_prompt("resume", "job", Tone.CONCISE)
        assert TONE_GUIDANCE[Tone.CONCISE] in parts.system

    def test_recommendations(self):
        parts = build_recommendations_prompt("resume", "job", "friendly")
        assert "recruiter" in parts.system
        assert TONE_GUIDANCE[Tone.FRIENDLY] in parts.system
        assert "resume" in parts.user
