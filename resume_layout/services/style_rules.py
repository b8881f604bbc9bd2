"""
Static style tables for the two renderers.

Sizes and spacing are in points. Colors are 0-255 RGB triples. The screen
table is keyed by render role (it has "heading" and "subtitle" on top of one
role per SectionKind); the ATS table is keyed by SectionKind.

The ATS table keeps to black, dark gray and one dark blue, bold as the only
weight change, and a plain rule under section headers. Nothing in it depends
on color alone to carry meaning.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from resume_layout.services.line_classifier import SectionKind
from resume_layout.services.text_normalizer import CANONICAL_BULLET

RGB = Tuple[int, int, int]

BLACK: RGB = (0, 0, 0)
DARK_GRAY: RGB = (51, 51, 51)
MEDIUM_GRAY: RGB = (102, 102, 102)
HEADER_BLUE: RGB = (0, 51, 102)

# Screen palette
GRAY_900: RGB = (17, 24, 39)
GRAY_800: RGB = (31, 41, 55)
GRAY_700: RGB = (55, 65, 81)
GRAY_600: RGB = (75, 85, 99)
BLUE_700: RGB = (29, 78, 216)


@dataclass(frozen=True)
class StyleRule:
    font_size: float
    weight: str = "normal"       # "normal" | "bold"
    color: RGB = BLACK
    space_before: float = 0.0
    space_after: float = 0.0
    align: str = "left"          # "left" | "center"
    indent: float = 0.0
    rule_below: bool = False

    @property
    def is_bold(self) -> bool:
        return self.weight == "bold"


# ─── Roles ──────────────────────────────────────────────────────────────────

ROLE_HEADING = "heading"
ROLE_SUBTITLE = "subtitle"
ROLE_SECTION_TITLE = "section-title"
ROLE_SUBSECTION_TITLE = "subsection-title"
ROLE_CONTACT = "contact"
ROLE_SKILLS = "skills"
ROLE_BULLET = "bullet"
ROLE_PARAGRAPH = "paragraph"

ROLE_FOR_KIND: Dict[SectionKind, str] = {
    SectionKind.NAME: ROLE_HEADING,
    SectionKind.CONTACT: ROLE_CONTACT,
    SectionKind.SECTION_HEADER: ROLE_SECTION_TITLE,
    SectionKind.SUBSECTION_HEADER: ROLE_SUBSECTION_TITLE,
    SectionKind.SKILLS_LINE: ROLE_SKILLS,
    SectionKind.BULLET: ROLE_BULLET,
    SectionKind.PLAIN_TEXT: ROLE_PARAGRAPH,
}


# ─── Tables ─────────────────────────────────────────────────────────────────

SCREEN_STYLES: Dict[str, StyleRule] = {
    ROLE_HEADING: StyleRule(30, "bold", GRAY_900, space_after=8, align="center"),
    ROLE_SUBTITLE: StyleRule(18, "normal", BLUE_700, space_after=16, align="center"),
    ROLE_SECTION_TITLE: StyleRule(20, "bold", GRAY_900, space_before=24, space_after=12, rule_below=True),
    ROLE_SUBSECTION_TITLE: StyleRule(18, "bold", GRAY_800, space_before=16, space_after=8),
    ROLE_CONTACT: StyleRule(14, "normal", GRAY_600, space_after=4),
    ROLE_SKILLS: StyleRule(14, "normal", GRAY_700, space_after=8),
    ROLE_BULLET: StyleRule(14, "normal", GRAY_700, space_after=4, indent=16),
    ROLE_PARAGRAPH: StyleRule(14, "normal", GRAY_700, space_after=8),
}

ATS_STYLES: Dict[SectionKind, StyleRule] = {
    SectionKind.NAME: StyleRule(18, "bold", BLACK, space_after=10, align="center"),
    SectionKind.CONTACT: StyleRule(10, "normal", DARK_GRAY, space_after=5, align="center"),
    SectionKind.SECTION_HEADER: StyleRule(12, "bold", HEADER_BLUE, space_before=8, space_after=10, rule_below=True),
    SectionKind.SUBSECTION_HEADER: StyleRule(11, "bold", DARK_GRAY, space_before=5, space_after=8),
    SectionKind.SKILLS_LINE: StyleRule(10, "normal", BLACK, space_after=6),
    SectionKind.BULLET: StyleRule(10, "normal", BLACK, space_after=5, indent=10),
    SectionKind.PLAIN_TEXT: StyleRule(10, "normal", BLACK, space_after=6),
}

BULLET_PREFIX = CANONICAL_BULLET + " "
RULE_WIDTH = 0.5
RULE_GAP = 2.0
