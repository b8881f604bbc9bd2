"""
Inline markup & keyword formatter.

Splits one line of text into FormattedSpans. Steps run in a fixed order and
each later step only looks inside spans that no earlier step has tagged, so a
keyword inside a link or a bold run is never re-tagged.

    1. markup      **b** __b__ -> bold, *i* _i_ -> italic, `c` -> code, [t](u) -> link
    2. contacts    emails, phone numbers, bare URLs -> link
    3. tech        TECH_TERMS -> highlight "tech"
    4. keywords    ACTION_VERBS -> highlight "keyword"
    5. metrics     42%, 10+, $5M, 3 years, 50k -> highlight "metric"

In "ats" mode steps 2-5 add nothing: contacts stay plain text without a link
and no highlight is ever produced. Markdown links keep their text only.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Pattern, Sequence, Tuple

from resume_layout.core.vocabulary import ACTION_VERBS, TECH_TERMS

MODE_SCREEN = "screen"
MODE_ATS = "ats"
MODES = (MODE_SCREEN, MODE_ATS)


@dataclass(frozen=True)
class FormattedSpan:
    text: str
    emphasis: Optional[str] = None   # "bold" | "italic" | "code"
    highlight: Optional[str] = None  # "tech" | "keyword" | "metric"
    link: Optional[str] = None

    @property
    def is_plain(self) -> bool:
        return self.emphasis is None and self.highlight is None and self.link is None

    def same_attributes(self, other: "FormattedSpan") -> bool:
        return (
            self.emphasis == other.emphasis
            and self.highlight == other.highlight
            and self.link == other.link
        )


# ─── Patterns ───────────────────────────────────────────────────────────────

# Same delimiters the normalizer collapses; bold before italic.
_MARKUP_RULES = (
    (re.compile(r"\*\*(.+?)\*\*"), "bold"),
    (re.compile(r"(?<!\w)__(.+?)__(?!\w)"), "bold"),
    (re.compile(r"\*(.+?)\*"), "italic"),
    (re.compile(r"(?<!\w)_(.+?)_(?!\w)"), "italic"),
    (re.compile(r"`(.+?)`"), "code"),
)
_RE_MD_LINK = re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)")

_RE_EMAIL = re.compile(r"[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}")
_RE_PHONE = re.compile(r"(?<!\d)(?:\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)")
_RE_URL = re.compile(r"https?://[^\s<>()\[\]]+[^\s<>()\[\].,;:!?'\"]")


def _term_pattern(terms: Sequence[str]) -> Pattern:
    # Longest first so "spring boot" wins over "spring"; the lookarounds keep
    # "go" out of "good" and still let "c++" and ".net" match.
    alternation = "|".join(re.escape(t) for t in sorted(terms, key=len, reverse=True))
    return re.compile(rf"(?<![A-Za-z0-9_])(?:{alternation})(?![A-Za-z0-9_])", re.IGNORECASE)


_RE_TECH = _term_pattern(TECH_TERMS)
_RE_KEYWORD = _term_pattern(ACTION_VERBS)

_RE_METRIC = re.compile(
    r"(?:[$€£]\s?\d[\d,]*(?:\.\d+)?\s?[kKmMbB]?"
    r"|\b\d[\d,]*(?:\.\d+)?\s?%"
    r"|\b\d[\d,]*\+"
    r"|\b\d+(?:\.\d+)?\s?(?:years?|months?|yrs?)\b"
    r"|\b\d+(?:\.\d+)?[kKM]\b)",
    re.IGNORECASE,
)


# ─── Span splitting ─────────────────────────────────────────────────────────

SpanFactory = Callable[[re.Match], FormattedSpan]


def _split_untagged(
    spans: List[FormattedSpan], pattern: Pattern, make: SpanFactory
) -> List[FormattedSpan]:
    """Apply ``pattern`` to every plain span, replacing each match by ``make(match)``."""
    result: List[FormattedSpan] = []
    for span in spans:
        if not span.is_plain:
            result.append(span)
            continue
        pos = 0
        for m in pattern.finditer(span.text):
            if m.start() == m.end():
                continue
            if m.start() > pos:
                result.append(FormattedSpan(span.text[pos:m.start()]))
            result.append(make(m))
            pos = m.end()
        if pos < len(span.text):
            result.append(FormattedSpan(span.text[pos:]))
    return result


def _merge(spans: List[FormattedSpan]) -> List[FormattedSpan]:
    merged: List[FormattedSpan] = []
    for span in spans:
        if not span.text:
            continue
        if merged and merged[-1].same_attributes(span):
            prev = merged.pop()
            span = FormattedSpan(prev.text + span.text, span.emphasis, span.highlight, span.link)
        merged.append(span)
    return merged


def _markup_step(spans: List[FormattedSpan], mode: str) -> List[FormattedSpan]:
    link = (lambda m: None) if mode == MODE_ATS else (lambda m: m.group(2))
    spans = _split_untagged(spans, _RE_MD_LINK, lambda m: FormattedSpan(m.group(1), link=link(m)))
    for pattern, emphasis in _MARKUP_RULES:
        spans = _split_untagged(
            spans, pattern, lambda m, e=emphasis: FormattedSpan(m.group(1), emphasis=e)
        )
    return spans


# URLs first so an address inside a URL stays part of that link
_CONTACT_STEPS: Tuple[Tuple[Pattern, SpanFactory], ...] = (
    (_RE_URL, lambda m: FormattedSpan(m.group(0), link=m.group(0))),
    (_RE_EMAIL, lambda m: FormattedSpan(m.group(0), link=f"mailto:{m.group(0)}")),
    (_RE_PHONE, lambda m: FormattedSpan(
        m.group(0), link="tel:" + re.sub(r"[^\d+]", "", m.group(0))
    )),
)


_HIGHLIGHT_STEPS = (
    (_RE_TECH, "tech"),
    (_RE_KEYWORD, "keyword"),
    (_RE_METRIC, "metric"),
)


# ─── Public API ─────────────────────────────────────────────────────────────

def format_text(text: str, mode: str = MODE_SCREEN) -> List[FormattedSpan]:
    """Split ``text`` into formatted spans. Never raises on any string input.

    Concatenating the span texts gives back ``text`` with markup delimiters
    removed.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown format mode: {mode!r}")
    if not text:
        return []

    spans = [FormattedSpan(text)]
    spans = _markup_step(spans, mode)

    if mode == MODE_ATS:
        return _merge(spans)

    for pattern, make in _CONTACT_STEPS:
        spans = _split_untagged(spans, pattern, make)

    for pattern, highlight in _HIGHLIGHT_STEPS:
        spans = _split_untagged(
            spans, pattern, lambda m, h=highlight: FormattedSpan(m.group(0), highlight=h)
        )
    return _merge(spans)


def plain_text(spans: Sequence[FormattedSpan]) -> str:
    return "".join(s.text for s in spans)
