"""
Download file names: <name>_<role>[_<country>]_<YYYY-MM-DD>_<type>.pdf

Every token except the date is reduced to [a-z0-9_].
"""

import datetime
import re
from typing import Optional

from resume_layout.core.vocabulary import ROLE_KEYWORDS
from resume_layout.services.document_model import Document
from resume_layout.services.line_classifier import SectionKind

DEFAULT_NAME = "resume"
DEFAULT_ROLE = "professional"

TYPE_TOKENS = {
    "resume": "resume",
    "cover-letter": "cover_letter",
    "email": "email",
}

_RE_NOT_LETTER = re.compile(r"[^a-zA-Z\s]")
_RE_UNSAFE = re.compile(r"[^a-z0-9_]+")
_ROLE_PATTERNS = [
    (kw, re.compile(r"\b" + re.escape(kw).replace(r"\ ", r"\s+"), re.IGNORECASE))
    for kw in ROLE_KEYWORDS
]


def _token(value: str) -> str:
    return _RE_UNSAFE.sub("_", value.lower()).strip("_")


def _name_token(doc: Document) -> str:
    section = doc.first_of(SectionKind.NAME) or (doc[0] if len(doc) else None)
    if section is None:
        return DEFAULT_NAME
    words = _RE_NOT_LETTER.sub("", section.raw_text).split()
    return _token("_".join(words[:2])) or DEFAULT_NAME


def _role_token(doc: Document) -> str:
    # Keyword order decides, not position in the text
    text = doc.text()
    for keyword, pattern in _ROLE_PATTERNS:
        if pattern.search(text):
            return _token(keyword)
    return DEFAULT_ROLE


def suggest_filename(
    doc: Document,
    document_type: str = "resume",
    on_date: Optional[datetime.date] = None,
    country: Optional[str] = None,
) -> str:
    on_date = on_date or datetime.date.today()
    parts = [_name_token(doc), _role_token(doc)]
    if country:
        country_token = _token(re.sub(r"[^a-zA-Z]", "", country))
        if country_token:
            parts.append(country_token)
    parts.append(on_date.isoformat())
    parts.append(TYPE_TOKENS.get(document_type, _token(document_type) or "document"))
    return "_".join(parts) + ".pdf"
