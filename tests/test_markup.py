"""Tests for markdown-lite line classification and bold splitting."""

import pytest

from cover_letter_kit.models.markup import Blank, Bullet, Heading, Plain, TextSegment
from cover_letter_kit.parsers.markup import classify, classify_lines, split_bold, strip_bold_markers


class TestSplitBold:
    def test_plain_text(self):
        assert split_bold("no markers here") == [TextSegment("no markers here", False)]

    def test_bold_span(self):
        assert split_bold("Cut latency by **45%** overall") == [
            TextSegment("Cut latency by ", False),
            TextSegment("45%", True),
            TextSegment(" overall", False),
        ]

    def test_multiple_spans_keep_order(self):
        segments = split_bold("**Python** and **Go**")
        assert [s.text for s in segments] == ["Python", " and ", "Go"]
        assert [s.bold for s in segments] == [True, False, True]

    def test_unmatched_markers_are_stripped(self):
        assert split_bold("broken ** marker") == [TextSegment("broken  marker", False)]

    def test_empty_string(self):
        assert split_bold("") == []

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain",
            "**bold**",
            "a **b** c **d",
            "***x***",
            "** **",
            "****",
            "*** a**",
            "start ** middle ** end **",
            "**one****two**",
            "*single* emphasis",
        ],
    )
    def test_concatenation_equals_text_without_markers(self, text):
        joined = "".join(s.text for s in split_bold(text))
        assert joined == text.replace("**", "")
        assert "**" not in joined
        assert strip_bold_markers(joined) == joined


class TestClassify:
    @pytest.mark.parametrize("line", ["", "   ", "\t"])
    def test_blank(self, line):
        assert classify(line) == Blank()

    def test_heading(self):
        assert classify("  PROFESSIONAL EXPERIENCE  ") == Heading("PROFESSIONAL EXPERIENCE")

    def test_heading_keeps_markers(self):
        assert classify("**SKILLS**") == Heading("**SKILLS**")

    def test_short_all_caps_is_heading(self):
        assert classify("NYC") == Heading("NYC")

    @pytest.mark.parametrize("line", ["AI", "2020 - 2024", "Senior Engineer"])
    def test_not_heading(self, line):
        assert not isinstance(classify(line), Heading)

    @pytest.mark.parametrize(
        "line, text",
        [
            ("• Built the billing pipeline", "Built the billing pipeline"),
            ("- Mentored engineers", "Mentored engineers"),
            ("* Shipped features", "Shipped features"),
            ("   -   Indented dash", "Indented dash"),
        ],
    )
    def test_bullets(self, line, text):
        result = classify(line)
        assert isinstance(result, Bullet)
        assert result.text == text

    def test_bullet_with_bold(self):
        result = classify("• Cut latency by **45%**")
        assert isinstance(result, Bullet)
        assert result.has_bold
        assert result.segments[-1] == TextSegment("45%", True)

    def test_bold_line_is_plain_not_bullet(self):
        result = classify("**Senior Engineer**, Globex")
        assert isinstance(result, Plain)
        assert result.segments[0] == TextSegment("Senior Engineer", True)

    def test_single_asterisk_emphasis_is_plain(self):
        result = classify("*italic note*")
        assert isinstance(result, Plain)
        assert result.text == "*italic note*"

    def test_plain(self):
        result = classify("jane@example.com | Portland, OR")
        assert isinstance(result, Plain)
        assert not result.has_bold

    @pytest.mark.parametrize(
        "line",
        ["", "HEADING", "- bullet", "* star", "plain text", "-", "---", "**", "• ", "123"],
    )
    def test_every_line_gets_exactly_one_kind(self, line):
        result = classify(line)
        kinds = [isinstance(result, k) for k in (Blank, Heading, Bullet, Plain)]
        assert kinds.count(True) == 1

    def test_classify_lines(self):
        lines = classify_lines("SUMMARY\nBuilds things\n\n• One")
        assert [type(line) for line in lines] == [Heading, Plain, Blank, Bullet]
