"""
Paginated renderer: lays a Document out on fixed-size pages and writes it as
an ATS-safe PDF with PyMuPDF.

Two phases:
1. layout_document(): pure. Walks the sections with a RenderCursor, wraps
   text with measured glyph widths and decides page breaks. Produces a
   PageLayout of placed lines and rules.
2. emit_pdf(): writes a PageLayout with fitz (Base14 Helvetica only, so
   every extractor sees plain selectable text).

Page-break rules:
- Before a section, if its estimated height does not fit in what is left of
  the page, start a new page (unless already at the top of one). Headers
  reserve room for the first line of the section that follows them.
- Every wrapped line is bounds-checked on its own; a line whose bottom would
  pass page_height - margin goes to the next page.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

import fitz  # PyMuPDF

from resume_layout.core.config import settings
from resume_layout.core.errors import RenderFailure
from resume_layout.services.document_model import Document
from resume_layout.services.file_naming import suggest_filename
from resume_layout.services.inline_formatter import MODE_ATS, format_text, plain_text
from resume_layout.services.line_classifier import Section, SectionKind
from resume_layout.services.style_rules import (
    ATS_STYLES,
    BULLET_PREFIX,
    RULE_GAP,
    RULE_WIDTH,
    StyleRule,
)

logger = logging.getLogger(__name__)

# Float slack for "does this line still fit"
_EPS = 1e-6

DOCUMENT_TITLES = {
    "resume": "Resume",
    "cover-letter": "Cover Letter",
    "email": "Email",
}
DOCUMENT_SUBJECT = "Professional Document"

_HEADER_KINDS = (SectionKind.SECTION_HEADER, SectionKind.SUBSECTION_HEADER)


# ─── Data classes ───────────────────────────────────────────────────────────

@dataclass
class RenderCursor:
    """Mutable layout position. Lives for exactly one layout call."""
    page_width: float
    page_height: float
    margin: float
    page_index: int = 0
    y: float = 0.0

    def __post_init__(self):
        self.y = self.margin

    @property
    def bottom(self) -> float:
        return self.page_height - self.margin

    @property
    def usable_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def usable_height(self) -> float:
        return self.page_height - 2 * self.margin

    @property
    def at_page_top(self) -> bool:
        return self.y <= self.margin + _EPS

    def fits(self, height: float) -> bool:
        return self.y + height <= self.bottom + _EPS

    def new_page(self):
        self.page_index += 1
        self.y = self.margin


@dataclass(frozen=True)
class PlacedLine:
    page_index: int
    x: float
    top: float
    baseline: float
    text: str
    font_size: float
    bold: bool
    color: Tuple[int, int, int]
    ordinal: int


@dataclass(frozen=True)
class PlacedRule:
    page_index: int
    x0: float
    x1: float
    y: float
    color: Tuple[int, int, int]
    width: float = RULE_WIDTH


@dataclass
class PageLayout:
    page_width: float
    page_height: float
    page_count: int = 1
    lines: List[PlacedLine] = field(default_factory=list)
    rules: List[PlacedRule] = field(default_factory=list)

    def lines_on(self, page_index: int) -> List[PlacedLine]:
        return [ln for ln in self.lines if ln.page_index == page_index]


@dataclass(frozen=True)
class PaginatedDocument:
    content: bytes
    filename: str
    page_count: int


# ─── Measurement & wrapping ─────────────────────────────────────────────────

class Base14Measurer:
    """Glyph widths of the Base14 Helvetica faces used for emission."""

    REGULAR = "helv"
    BOLD = "hebo"

    def fontname(self, bold: bool) -> str:
        return self.BOLD if bold else self.REGULAR

    def measure(self, text: str, font_size: float, bold: bool = False) -> float:
        return fitz.get_text_length(text, fontname=self.fontname(bold), fontsize=font_size)


def _split_long_word(word: str, max_width: float, font_size: float, bold: bool, measurer) -> List[str]:
    """Break a word wider than max_width into chunks that fit. Each chunk has
    at least one character so this always terminates."""
    chunks: List[str] = []
    current = ""
    for ch in word:
        if current and measurer.measure(current + ch, font_size, bold) > max_width:
            chunks.append(current)
            current = ch
        else:
            current += ch
    if current:
        chunks.append(current)
    return chunks


def wrap_text(text: str, max_width: float, font_size: float, bold: bool, measurer) -> List[str]:
    """Greedy word-wrap: split text into lines that fit within max_width."""
    words = text.split()
    if not words:
        return []

    lines: List[str] = []
    current_line: List[str] = []
    current_width = 0.0
    space_w = measurer.measure(" ", font_size, bold)
    # Some fonts report 0 for space
    if space_w < 0.1:
        space_w = font_size * 0.25

    for word in words:
        word_w = measurer.measure(word, font_size, bold)
        if word_w > max_width:
            if current_line:
                lines.append(" ".join(current_line))
            pieces = _split_long_word(word, max_width, font_size, bold, measurer)
            lines.extend(pieces[:-1])
            current_line = [pieces[-1]]
            current_width = measurer.measure(pieces[-1], font_size, bold)
        elif current_line:
            test_width = current_width + space_w + word_w
            if test_width > max_width:
                lines.append(" ".join(current_line))
                current_line = [word]
                current_width = word_w
            else:
                current_line.append(word)
                current_width = test_width
        else:
            current_line = [word]
            current_width = word_w

    if current_line:
        lines.append(" ".join(current_line))
    return lines


# ─── Layout ─────────────────────────────────────────────────────────────────

@dataclass
class _PreparedSection:
    section: Section
    style: StyleRule
    lines: List[str]
    line_height: float


def _section_text(section: Section) -> str:
    text = plain_text(format_text(section.raw_text, MODE_ATS))
    if section.kind == SectionKind.BULLET:
        return BULLET_PREFIX + text
    return text


def _prepare(
    section: Section, styles: Dict[SectionKind, StyleRule], cursor: RenderCursor,
    line_height: float, measurer,
) -> _PreparedSection:
    style = styles[section.kind]
    width = max(cursor.usable_width - style.indent, 1.0)
    lines = wrap_text(_section_text(section), width, style.font_size, style.is_bold, measurer)
    return _PreparedSection(section, style, lines, style.font_size * line_height)


def estimated_height(prepared: _PreparedSection, cursor: RenderCursor,
                     following: Optional[_PreparedSection] = None) -> float:
    """Room a section needs before its first line is placed.

    Capped at one usable page: a section taller than that starts on a fresh
    page and then flows line by line, it never leaves a page empty.
    """
    height = len(prepared.lines) * prepared.line_height
    if not cursor.at_page_top:
        height += prepared.style.space_before
    if prepared.style.rule_below:
        height += RULE_GAP
    if following is not None and following.lines and prepared.section.kind in _HEADER_KINDS:
        height += prepared.style.space_after + following.style.space_before + following.line_height
    return min(height, cursor.usable_height)


def check_margin(page_width: float, page_height: float, margin: float):
    if margin < 0 or page_width <= 2 * margin or page_height <= 2 * margin:
        raise ValueError(f"Margin {margin} leaves no room on a {page_width}x{page_height} page")


def _x_for(line: str, prepared: _PreparedSection, cursor: RenderCursor, measurer) -> float:
    style = prepared.style
    if style.align == "center":
        width = measurer.measure(line, style.font_size, style.is_bold)
        return cursor.margin + max((cursor.usable_width - width) / 2, 0.0)
    return cursor.margin + style.indent


def layout_document(
    doc: Document,
    page_width: float,
    page_height: float,
    margin: float,
    line_height: float = 1.3,
    measurer=None,
    styles: Dict[SectionKind, StyleRule] = ATS_STYLES,
) -> PageLayout:
    """Place every section of ``doc`` on pages. Pure: no I/O, no fitz document."""
    check_margin(page_width, page_height, margin)
    measurer = measurer or Base14Measurer()
    cursor = RenderCursor(page_width=page_width, page_height=page_height, margin=margin)
    layout = PageLayout(page_width=page_width, page_height=page_height)

    prepared = [_prepare(s, styles, cursor, line_height, measurer) for s in doc]

    for i, item in enumerate(prepared):
        if not item.lines:
            continue
        following = prepared[i + 1] if i + 1 < len(prepared) else None

        if not cursor.at_page_top and not cursor.fits(estimated_height(item, cursor, following)):
            cursor.new_page()

        if not cursor.at_page_top:
            cursor.y += item.style.space_before

        for text in item.lines:
            if not cursor.fits(item.line_height) and not cursor.at_page_top:
                cursor.new_page()
            layout.lines.append(PlacedLine(
                page_index=cursor.page_index,
                x=_x_for(text, item, cursor, measurer),
                top=cursor.y,
                baseline=cursor.y + item.style.font_size,
                text=text,
                font_size=item.style.font_size,
                bold=item.style.is_bold,
                color=item.style.color,
                ordinal=item.section.ordinal,
            ))
            cursor.y += item.line_height

        if item.style.rule_below:
            rule_y = cursor.y + RULE_GAP
            # A rule that would cross the bottom margin is dropped
            if rule_y <= cursor.bottom + _EPS:
                layout.rules.append(PlacedRule(
                    page_index=cursor.page_index,
                    x0=cursor.margin,
                    x1=cursor.page_width - cursor.margin,
                    y=rule_y,
                    color=item.style.color,
                ))
            cursor.y = rule_y

        cursor.y += item.style.space_after

    layout.page_count = cursor.page_index + 1
    return layout


# ─── Emission ───────────────────────────────────────────────────────────────

def resolve_page_size(page_size: Union[str, Sequence[float], None]) -> Tuple[float, float]:
    """Accept a paper name ("a4", "letter", "a4-l") or a (width, height) pair."""
    if page_size is None:
        page_size = settings.PDF_PAGE_SIZE
    if isinstance(page_size, str):
        width, height = fitz.paper_size(page_size)
        if width <= 0 or height <= 0:
            raise ValueError(f"Unknown page size: {page_size!r}")
        return float(width), float(height)
    width, height = page_size
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid page size: {page_size!r}")
    return float(width), float(height)


def _rgb(color: Tuple[int, int, int]) -> Tuple[float, float, float]:
    return tuple(c / 255 for c in color)


def emit_pdf(layout: PageLayout, document_type: str) -> bytes:
    pdf = fitz.open()
    try:
        for _ in range(layout.page_count):
            pdf.new_page(width=layout.page_width, height=layout.page_height)

        for line in layout.lines:
            page = pdf[line.page_index]
            page.insert_text(
                fitz.Point(line.x, line.baseline),
                line.text,
                fontname=Base14Measurer.BOLD if line.bold else Base14Measurer.REGULAR,
                fontsize=line.font_size,
                color=_rgb(line.color),
            )

        for rule in layout.rules:
            page = pdf[rule.page_index]
            page.draw_line(
                fitz.Point(rule.x0, rule.y),
                fitz.Point(rule.x1, rule.y),
                color=_rgb(rule.color),
                width=rule.width,
            )

        pdf.set_metadata({
            "title": DOCUMENT_TITLES.get(document_type, "Document"),
            "subject": DOCUMENT_SUBJECT,
            "author": settings.PDF_AUTHOR,
            "creator": settings.PDF_CREATOR,
            "producer": settings.PDF_CREATOR,
        })
        return pdf.tobytes(garbage=3, deflate=True)
    finally:
        pdf.close()


def render_paginated(
    doc: Document,
    page_size: Union[str, Sequence[float], None] = None,
    margin: Optional[float] = None,
    document_type: str = "resume",
    filename: Optional[str] = None,
    line_height: Optional[float] = None,
    measurer=None,
) -> PaginatedDocument:
    """Lay out and write ``doc`` as a PDF.

    An empty document gives a single blank page.

    Raises:
        ValueError: unknown page size or a margin that leaves no room.
        RenderFailure: the layout or the PDF engine failed; no bytes are
            returned in that case.
    """
    page_width, page_height = resolve_page_size(page_size)
    margin = settings.PDF_MARGIN if margin is None else margin
    line_height = line_height or settings.PDF_LINE_HEIGHT
    check_margin(page_width, page_height, margin)

    try:
        layout = layout_document(doc, page_width, page_height, margin, line_height, measurer)
        content = emit_pdf(layout, document_type)
    except Exception as e:
        logger.error(f"PDF render failed for {document_type}: {e}")
        raise RenderFailure(document_type, e) from e

    filename = filename or suggest_filename(doc, document_type)
    logger.info(
        f"Rendered {document_type} PDF: {layout.page_count} page(s), "
        f"{len(layout.lines)} lines, {len(content)} bytes -> {filename}"
    )
    return PaginatedDocument(content=content, filename=filename, page_count=layout.page_count)
