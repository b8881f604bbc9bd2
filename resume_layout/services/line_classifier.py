"""
Line classifier: turns free-form resume text into typed sections.

Each non-blank line is tested against an ordered chain of rules and takes the
kind of the first rule that matches. The rules overlap (a lone "EXPERIENCE"
on the first line reads as a name, a bullet under SKILLS with commas reads as
a skills line), so the order in CLASSIFICATION_RULES is part of the contract.

No rule raises; anything unmatched falls through to PLAIN_TEXT.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from resume_layout.core.vocabulary import CONTACT_LABELS, SECTION_NAMES, SKILL_LABELS

logger = logging.getLogger(__name__)


# ─── Data classes ───────────────────────────────────────────────────────────

class SectionKind(Enum):
    NAME = "name"
    CONTACT = "contact"
    SECTION_HEADER = "section-header"
    SUBSECTION_HEADER = "subsection-header"
    BULLET = "bullet"
    SKILLS_LINE = "skills"
    PLAIN_TEXT = "text"


@dataclass(frozen=True)
class Section:
    """One classified line of the document model."""
    kind: SectionKind
    raw_text: str
    ordinal: int


# ─── Patterns ───────────────────────────────────────────────────────────────

_RE_NAME = re.compile(r"^[A-Z][A-Za-z]*(?:[ \t]+[A-Z][A-Za-z]*)*$")

_RE_CONTACT_LABEL = re.compile(
    r"\b(?:" + "|".join(CONTACT_LABELS) + r")\s*:", re.IGNORECASE
)

# Longest names first so "WORK EXPERIENCE" wins over "EXPERIENCE"
_SECTION_ALTERNATION = "|".join(
    re.escape(name).replace(r"\ ", r"\s+")
    for name in sorted(SECTION_NAMES, key=len, reverse=True)
)
_RE_SECTION_HEADER = re.compile(
    r"^(?i:" + _SECTION_ALTERNATION + r")(?:\s+(?:&|[A-Z][A-Za-z&/]*))*\s*:?$"
)

_RE_SUBSECTION = re.compile(r"^[A-Z][a-zA-Z\s]+\s*[|\-]\s*[A-Z][a-zA-Z\s]+")

_SKILL_ALTERNATION = "|".join(SKILL_LABELS)
_RE_SKILL_LABEL = re.compile(
    rf"^(?:{_SKILL_ALTERNATION})(?:\s+(?:{_SKILL_ALTERNATION}))?\s*:", re.IGNORECASE
)
_RE_LIST_DELIMITER = re.compile(r"[,;]")

_RE_BULLET = re.compile(r"^[•·\-*●◦○⚬]\s+")


# ─── Rules ──────────────────────────────────────────────────────────────────

_SKILLS_MEMORY_KINDS = (SectionKind.SECTION_HEADER, SectionKind.SKILLS_LINE)


@dataclass
class _ClassifierState:
    """What the rules may look at besides the line itself."""
    sections: List[Section]
    # Set once a section header or skills line mentions SKILLS
    skills_seen: bool = False

    @property
    def ordinal(self) -> int:
        return len(self.sections)

    def append(self, section: Section) -> None:
        self.sections.append(section)
        if section.kind in _SKILLS_MEMORY_KINDS and "SKILLS" in section.raw_text:
            self.skills_seen = True


# A rule returns the section text to store, or None when it does not apply.
Rule = Callable[[str, _ClassifierState], Optional[str]]


def _name_rule(line: str, state: _ClassifierState) -> Optional[str]:
    if state.ordinal == 0 and _RE_NAME.match(line):
        return line
    return None


def _contact_rule(line: str, state: _ClassifierState) -> Optional[str]:
    if "@" in line or _RE_CONTACT_LABEL.search(line):
        return line
    return None


def _section_header_rule(line: str, state: _ClassifierState) -> Optional[str]:
    if _RE_SECTION_HEADER.match(line):
        return line.upper()
    return None


def _subsection_header_rule(line: str, state: _ClassifierState) -> Optional[str]:
    if _RE_SUBSECTION.match(line):
        return line
    return None


def _skills_rule(line: str, state: _ClassifierState) -> Optional[str]:
    if _RE_SKILL_LABEL.match(line):
        return line
    if state.skills_seen and _RE_LIST_DELIMITER.search(line):
        return line
    return None


def _bullet_rule(line: str, state: _ClassifierState) -> Optional[str]:
    if _RE_BULLET.match(line):
        stripped = _RE_BULLET.sub("", line, count=1).strip()
        # A lone glyph has nothing left to show; let it fall through
        return stripped or None
    return None


CLASSIFICATION_RULES: Tuple[Tuple[SectionKind, Rule], ...] = (
    (SectionKind.NAME, _name_rule),
    (SectionKind.CONTACT, _contact_rule),
    (SectionKind.SECTION_HEADER, _section_header_rule),
    (SectionKind.SUBSECTION_HEADER, _subsection_header_rule),
    (SectionKind.SKILLS_LINE, _skills_rule),
    (SectionKind.BULLET, _bullet_rule),
)


# ─── Public API ─────────────────────────────────────────────────────────────

def classify_line(line: str, state: _ClassifierState) -> Section:
    """Classify one trimmed, non-blank line given the sections seen so far."""
    for kind, rule in CLASSIFICATION_RULES:
        text = rule(line, state)
        if text is not None:
            return Section(kind=kind, raw_text=text, ordinal=state.ordinal)
    return Section(kind=SectionKind.PLAIN_TEXT, raw_text=line, ordinal=state.ordinal)


def classify(lines: Sequence[str]) -> List[Section]:
    """Classify lines in order, dropping blank ones.

    Returns exactly one Section per non-blank line, with ordinals 0..n-1.
    """
    state = _ClassifierState(sections=[])
    for raw_line in lines:
        line = (raw_line or "").strip()
        if not line:
            continue
        state.append(classify_line(line, state))

    if state.sections:
        counts = {}
        for s in state.sections:
            counts[s.kind.value] = counts.get(s.kind.value, 0) + 1
        logger.debug(f"Classified {len(state.sections)} lines: {counts}")
    return state.sections


def classify_text(text: str) -> List[Section]:
    """Split ``text`` on newlines and classify the result."""
    if not text:
        return []
    return classify(text.replace("\r\n", "\n").replace("\r", "\n").split("\n"))
