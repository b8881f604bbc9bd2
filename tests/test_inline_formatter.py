"""
Inline formatter tests: markup, contact links, highlighting, ATS mode.

Run: pytest tests/test_inline_formatter.py -v
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from resume_layout.services.inline_formatter import (
    MODE_ATS,
    MODE_SCREEN,
    FormattedSpan,
    format_text,
    plain_text,
)

ACHIEVEMENT = "Developed Python APIs, increasing revenue by 40% for 3 years"

SAMPLES = [
    ACHIEVEMENT,
    "**Led** a team of 10+ engineers on *Kubernetes* migration",
    "Contact: jane@example.com or https://jane.dev, call (555) 123-4567",
    "See [Portfolio](https://x.dev) and `make build`",
    "Saved $1.5M with Spring Boot and Docker",
    "Plain words without anything special",
]


def highlighted(spans):
    return {(s.text, s.highlight) for s in spans if s.highlight}


class TestMarkup:
    """Step 1: emphasis and markdown links."""

    def test_bold_wins_over_keyword(self):
        spans = format_text("**Led** the team")
        assert spans == [FormattedSpan("Led", emphasis="bold"), FormattedSpan(" the team")]

    def test_italic_and_code(self):
        spans = format_text("*fast* and `grep`")
        assert FormattedSpan("fast", emphasis="italic") in spans
        assert FormattedSpan("grep", emphasis="code") in spans

    def test_markdown_link(self):
        spans = format_text("[Portfolio](https://x.dev)")
        assert spans == [FormattedSpan("Portfolio", link="https://x.dev")]


class TestContacts:
    """Step 2: emails, URLs and phones become links on screen."""

    def test_email(self):
        spans = format_text("Mail jane@example.com today")
        assert FormattedSpan("jane@example.com", link="mailto:jane@example.com") in spans

    def test_url(self):
        spans = format_text("Site: https://jane.dev.")
        assert FormattedSpan("https://jane.dev", link="https://jane.dev") in spans

    def test_phone(self):
        spans = format_text("Call (555) 123-4567")
        assert FormattedSpan("(555) 123-4567", link="tel:5551234567") in spans


class TestHighlighting:
    """Steps 3-5: tech, keyword and metric highlights."""

    def test_achievement_line(self):
        found = highlighted(format_text(ACHIEVEMENT))
        assert ("Python", "tech") in found
        assert ("Developed", "keyword") in found
        assert ("40%", "metric") in found
        assert ("3 years", "metric") in found

    def test_longest_term_first(self):
        found = highlighted(format_text("Built with Spring Boot"))
        assert ("Spring Boot", "tech") in found

    def test_whole_words_only(self):
        assert highlighted(format_text("Going to the goodwill store")) == set()

    def test_symbol_terms(self):
        found = highlighted(format_text("Wrote C++ and C# code"))
        assert ("C++", "tech") in found
        assert ("C#", "tech") in found

    @pytest.mark.parametrize("metric", ["$1.5M", "10+", "25%", "6 months", "50k"])
    def test_metrics(self, metric):
        assert (metric, "metric") in highlighted(format_text(f"Hit {metric} overall"))


class TestAtsMode:
    """ATS mode carries no highlight and no link."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_no_highlight_or_link(self, text):
        for span in format_text(text, MODE_ATS):
            assert span.highlight is None
            assert span.link is None

    def test_plain_line_is_one_span(self):
        assert format_text(ACHIEVEMENT, MODE_ATS) == [FormattedSpan(ACHIEVEMENT)]

    def test_markdown_link_keeps_text(self):
        assert plain_text(format_text("[Portfolio](https://x.dev)", MODE_ATS)) == "Portfolio"


class TestSpans:
    """Span list invariants."""

    @pytest.mark.parametrize("mode", [MODE_SCREEN, MODE_ATS])
    @pytest.mark.parametrize("text", SAMPLES)
    def test_adjacent_spans_differ(self, text, mode):
        spans = format_text(text, mode)
        for left, right in zip(spans, spans[1:]):
            assert not left.same_attributes(right)

    @pytest.mark.parametrize("text", [ACHIEVEMENT, SAMPLES[2], SAMPLES[4], SAMPLES[5]])
    def test_text_preserved_without_markup(self, text):
        assert plain_text(format_text(text)) == text

    def test_empty(self):
        assert format_text("") == []
        assert plain_text([]) == ""

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            format_text("x", "print")
