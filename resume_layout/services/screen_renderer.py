"""
Screen renderer: Document -> RenderTree, plus an HTML serialisation of the
tree for the preview endpoint.

render_screen() is a pure function of the document. Two positional special
cases come from the usual resume layout: the NAME line becomes a centered
heading, and a plain line right after it that mentions a job title becomes a
subtitle.
"""

import html
import re
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from resume_layout.core.vocabulary import JOB_TITLE_TERMS
from resume_layout.services.document_model import Document
from resume_layout.services.inline_formatter import MODE_SCREEN, FormattedSpan, format_text
from resume_layout.services.line_classifier import Section, SectionKind
from resume_layout.services.style_rules import (
    BULLET_PREFIX,
    ROLE_FOR_KIND,
    ROLE_SUBTITLE,
    SCREEN_STYLES,
    StyleRule,
)

_RE_JOB_TITLE = re.compile("|".join(JOB_TITLE_TERMS), re.IGNORECASE)


@dataclass(frozen=True)
class RenderBlock:
    ordinal: int
    kind: SectionKind
    role: str
    style: StyleRule
    spans: Tuple[FormattedSpan, ...]

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.spans)


@dataclass(frozen=True)
class RenderTree:
    blocks: Tuple[RenderBlock, ...] = ()

    def __iter__(self) -> Iterator[RenderBlock]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)


def role_for(section: Section) -> str:
    """Screen role for ``section``, including the subtitle special case."""
    if (
        section.kind == SectionKind.PLAIN_TEXT
        and section.ordinal == 1
        and _RE_JOB_TITLE.search(section.raw_text)
    ):
        return ROLE_SUBTITLE
    return ROLE_FOR_KIND[section.kind]


def render_screen(doc: Document) -> RenderTree:
    blocks = []
    for section in doc:
        role = role_for(section)
        blocks.append(RenderBlock(
            ordinal=section.ordinal,
            kind=section.kind,
            role=role,
            style=SCREEN_STYLES[role],
            spans=tuple(format_text(section.raw_text, MODE_SCREEN)),
        ))
    return RenderTree(blocks=tuple(blocks))


# ─── HTML ───────────────────────────────────────────────────────────────────

_TAG_FOR_ROLE = {
    "heading": "h1",
    "section-title": "h2",
    "subsection-title": "h3",
}

_EMPHASIS_TAGS = {"bold": "strong", "italic": "em", "code": "code"}


def _css(style: StyleRule) -> str:
    parts = [
        f"font-size:{style.font_size:g}px",
        f"font-weight:{'700' if style.is_bold else '400'}",
        "color:rgb({},{},{})".format(*style.color),
        f"margin:{style.space_before:g}px 0 {style.space_after:g}px {style.indent:g}px",
        f"text-align:{style.align}",
    ]
    if style.rule_below:
        parts.append("border-bottom:2px solid rgb(37,99,235)")
    return ";".join(parts)


def _span_html(span: FormattedSpan) -> str:
    out = html.escape(span.text)
    if span.emphasis:
        tag = _EMPHASIS_TAGS[span.emphasis]
        out = f"<{tag}>{out}</{tag}>"
    if span.highlight:
        out = f'<span class="hl-{span.highlight}">{out}</span>'
    if span.link:
        href = html.escape(span.link, quote=True)
        if span.link.startswith(("http://", "https://")):
            out = f'<a href="{href}" target="_blank" rel="noopener noreferrer">{out}</a>'
        else:
            out = f'<a href="{href}">{out}</a>'
    return out


def _block_html(block: RenderBlock) -> str:
    tag = _TAG_FOR_ROLE.get(block.role, "p")
    body = "".join(_span_html(s) for s in block.spans)
    if block.role == "bullet":
        body = f'<span class="bullet-glyph">{html.escape(BULLET_PREFIX.strip())}</span> {body}'
    return (
        f'<{tag} class="block {block.role}" data-ordinal="{block.ordinal}" '
        f'style="{_css(block.style)}">{body}</{tag}>'
    )


def render_html(tree: RenderTree) -> str:
    """Serialise ``tree`` to an HTML fragment. All text is escaped."""
    lines: List[str] = ['<div class="resume-content">']
    lines.extend(_block_html(b) for b in tree)
    lines.append("</div>")
    return "\n".join(lines)
