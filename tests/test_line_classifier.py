"""
Line classifier tests: one closed kind per non-blank line, rule order,
position-sensitive rules.

Run: pytest tests/test_line_classifier.py -v
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from resume_layout.services.line_classifier import (
    CLASSIFICATION_RULES,
    Section,
    SectionKind,
    classify,
    classify_text,
)

JOHN_SMITH = (
    "JOHN SMITH\n"
    "Senior Software Engineer\n"
    "EMAIL: john@x.com\n"
    "EXPERIENCE\n"
    "Software Engineer | Acme | 2020-Present\n"
    "• Built scalable APIs\n"
)


def kinds(sections):
    return [s.kind for s in sections]


class TestScenario:
    """End-to-end classification of a short resume."""

    def test_john_smith(self):
        sections = classify_text(JOHN_SMITH)
        assert kinds(sections) == [
            SectionKind.NAME,
            SectionKind.PLAIN_TEXT,
            SectionKind.CONTACT,
            SectionKind.SECTION_HEADER,
            SectionKind.SUBSECTION_HEADER,
            SectionKind.BULLET,
        ]
        assert sections[5].raw_text == "Built scalable APIs"
        assert [s.ordinal for s in sections] == list(range(6))

    def test_one_section_per_non_blank_line(self):
        text = "\n\nJane Doe\n   \nSUMMARY\n\nLoves Python\n\n"
        sections = classify_text(text)
        assert len(sections) == 3
        assert all(isinstance(s.kind, SectionKind) for s in sections)


class TestEdgeCases:
    """Empty and blank input."""

    def test_empty_list(self):
        assert classify([]) == []

    def test_only_blank_lines(self):
        assert classify(["", "   ", "\t"]) == []

    def test_empty_text(self):
        assert classify_text("") == []

    def test_lines_are_trimmed(self):
        sections = classify(["   Jane Doe   "])
        assert sections == [Section(SectionKind.NAME, "Jane Doe", 0)]


class TestRules:
    """Each rule in isolation, and the order between overlapping ones."""

    def test_rule_order(self):
        order = [kind for kind, _ in CLASSIFICATION_RULES]
        assert order == [
            SectionKind.NAME,
            SectionKind.CONTACT,
            SectionKind.SECTION_HEADER,
            SectionKind.SUBSECTION_HEADER,
            SectionKind.SKILLS_LINE,
            SectionKind.BULLET,
        ]

    def test_name_only_first(self):
        sections = classify(["Summary Of Things", "Jane Doe"])
        assert sections[1].kind != SectionKind.NAME

    def test_name_rejects_digits(self):
        assert classify(["Jane Doe 2"])[0].kind == SectionKind.PLAIN_TEXT

    @pytest.mark.parametrize("line", [
        "jane@example.com",
        "Phone: 555-123-4567",
        "LinkedIn: linkedin.com/in/jane",
        "github : jane",
        "Mobile:+44 7700 900000",
    ])
    def test_contact(self, line):
        assert classify(["Jane Doe", line])[1].kind == SectionKind.CONTACT

    def test_contact_as_first_line(self):
        assert classify(["jane@example.com"])[0].kind == SectionKind.CONTACT

    @pytest.mark.parametrize("line,expected", [
        ("EXPERIENCE", "EXPERIENCE"),
        ("Work Experience", "WORK EXPERIENCE"),
        ("technical skills:", "TECHNICAL SKILLS:"),
        ("Education", "EDUCATION"),
        ("PROJECTS & Awards", "PROJECTS & AWARDS"),
    ])
    def test_section_header(self, line, expected):
        section = classify(["Jane Doe", line])[1]
        assert section.kind == SectionKind.SECTION_HEADER
        assert section.raw_text == expected

    def test_section_header_needs_canonical_name(self):
        assert classify(["Jane Doe", "Hobbies"])[1].kind == SectionKind.PLAIN_TEXT

    def test_section_header_rejects_sentence(self):
        assert classify(["Jane Doe", "Experience with large systems"])[1].kind == SectionKind.PLAIN_TEXT

    @pytest.mark.parametrize("line", [
        "Senior Engineer | Acme Corp",
        "Data Analyst - Globex",
    ])
    def test_subsection(self, line):
        assert classify(["Jane Doe", line])[1].kind == SectionKind.SUBSECTION_HEADER

    @pytest.mark.parametrize("line", [
        "Programming Languages: Python, Go",
        "Tools: Docker, Git",
        "databases: Postgres",
    ])
    def test_skills_label(self, line):
        assert classify(["Jane Doe", line])[1].kind == SectionKind.SKILLS_LINE

    def test_skills_list_after_skills_header(self):
        sections = classify(["Jane Doe", "SKILLS", "Python, Java; SQL"])
        assert sections[2].kind == SectionKind.SKILLS_LINE

    def test_comma_line_before_skills_is_text(self):
        sections = classify(["Jane Doe", "Python, Java; SQL"])
        assert sections[1].kind == SectionKind.PLAIN_TEXT

    def test_skills_memory_persists(self):
        # Once a SKILLS section has been seen, any later delimited line counts
        sections = classify(["Jane Doe", "SKILLS", "EDUCATION", "BSc, MIT, 2015"])
        assert sections[3].kind == SectionKind.SKILLS_LINE

    def test_skills_in_plain_text_does_not_start_memory(self):
        sections = classify_text(
            "JOHN SMITH\nRan SKILLS workshops for new hires\nLed design, code reviews"
        )
        assert sections[1].kind == SectionKind.PLAIN_TEXT
        assert sections[2].kind == SectionKind.PLAIN_TEXT

    def test_skills_label_line_starts_memory(self):
        sections = classify(["Jane Doe", "Tools: Docker, SKILLS matrix", "Git, Make"])
        assert sections[1].kind == SectionKind.SKILLS_LINE
        assert sections[2].kind == SectionKind.SKILLS_LINE

    @pytest.mark.parametrize("glyph", ["•", "·", "-", "*", "●", "◦", "○", "⚬"])
    def test_bullet_glyphs(self, glyph):
        section = classify(["Jane Doe", f"{glyph}  Shipped the thing"])[1]
        assert section.kind == SectionKind.BULLET
        assert section.raw_text == "Shipped the thing"

    def test_bullet_needs_whitespace(self):
        assert classify(["Jane Doe", "-5 degrees"])[1].kind == SectionKind.PLAIN_TEXT

    def test_lone_glyph_is_text(self):
        assert classify(["Jane Doe", "•"])[1].kind == SectionKind.PLAIN_TEXT
