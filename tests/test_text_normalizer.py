"""
Text normalizer tests: markup, bullets, dashes and the ASCII-only guarantee.

Run: pytest tests/test_text_normalizer.py -v
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from resume_layout.services.text_normalizer import CANONICAL_BULLET, normalize


SAMPLES = [
    "",
    "plain ascii line",
    "**Bold** and *italic* and `code` and [site](https://example.com)",
    "● First\n◦ Second\n- Third\n* Fourth",
    "2019 \u2013 2023 \u2014 present",
    "“Quoted” café résumé ﬁle…",
    "__bold__ snake_case_name _italic_",
    "Line one\r\nLine two\rLine three",
    "***nested*** **__mixed__**",
]


class TestMarkup:
    """Markup collapses to its inner text."""

    def test_bold_italic_code(self):
        assert normalize("**Bold** and *italic* and `code`") == "Bold and italic and code"

    def test_underscore_markup(self):
        assert normalize("__Bold__ and _italic_") == "Bold and italic"

    def test_snake_case_survives(self):
        assert normalize("uses snake_case_name here") == "uses snake_case_name here"

    def test_link_keeps_text(self):
        assert normalize("See [my site](https://example.com).") == "See my site."


class TestBullets:
    """Bullet variants map to the canonical bullet."""

    @pytest.mark.parametrize("glyph", ["•", "●", "◦", "○", "⚬", "·", "-", "*"])
    def test_variants(self, glyph):
        assert normalize(f"{glyph} Built APIs") == f"{CANONICAL_BULLET} Built APIs"

    def test_star_bullet_is_not_italic(self):
        assert normalize("* Led *migration* work") == f"{CANONICAL_BULLET} Led migration work"

    def test_indent_preserved(self):
        assert normalize("  - nested") == f"  {CANONICAL_BULLET} nested"

    def test_round_bullets_mid_line(self):
        assert normalize("Python ● Java ◦ Go") == "Python • Java • Go"
        assert normalize("A ○ B ⚬ C") == normalize("A • B • C")

    def test_hyphen_inside_line_untouched(self):
        assert normalize("full-stack developer") == "full-stack developer"


class TestAscii:
    """Output is ASCII except for the canonical bullet."""

    def test_dashes(self):
        assert normalize("2019 \u2013 2023 \u2014 now \u2212 1") == "2019 - 2023 - now - 1"

    def test_quotes_and_accents(self):
        assert normalize("“Hi” it’s café") == "\"Hi\" it's cafe"

    def test_ligature_and_ellipsis(self):
        assert normalize("ﬁle…") == "file..."

    def test_other_symbols_removed(self):
        assert normalize("Stars ★ and arrows →") == "Stars  and arrows "

    @pytest.mark.parametrize("text", SAMPLES)
    def test_only_ascii_or_bullet(self, text):
        out = normalize(text)
        assert all(ord(ch) < 128 or ch == CANONICAL_BULLET for ch in out)


class TestIdempotence:
    """normalize(normalize(x)) == normalize(x)."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_fixed_point(self, text):
        once = normalize(text)
        assert normalize(once) == once

    def test_line_endings(self):
        assert normalize("a\r\nb\rc") == "a\nb\nc"

    def test_empty(self):
        assert normalize("") == ""
        assert normalize(None) == ""
