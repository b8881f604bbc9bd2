"""
Text normalizer for the ATS-safe export path.

Collapses lightweight markup to its inner text, maps bullet and dash variants
to one canonical form and strips every non-ASCII code point except the
canonical bullet. Pure and total: any input yields a string, and the result
is a fixed point (normalize(normalize(x)) == normalize(x)).
"""

import re
import unicodedata

CANONICAL_BULLET = "\u2022"

# bullet, black circle, white bullet, white circle, medium circle, middle dot, hyphen, asterisk
_BULLET_VARIANTS = "\u2022\u25cf\u25e6\u25cb\u26ac\u00b7\\-*"
_RE_LEADING_BULLET = re.compile(rf"(?m)^([ \t]*)[{_BULLET_VARIANTS}][ \t]+")
# Round bullet glyphs map to the canonical bullet wherever they appear
_RE_ROUND_BULLET = re.compile("[\u25cf\u25e6\u25cb\u26ac]")

# Bold before italic so "**x**" is not read as "*" + "*x*" + "*"
_MARKUP_PATTERNS = (
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    (re.compile(r"(?<!\w)__(.*?)__(?!\w)"), r"\1"),
    (re.compile(r"\*(.+?)\*"), r"\1"),
    (re.compile(r"(?<!\w)_(.+?)_(?!\w)"), r"\1"),
    (re.compile(r"`(.*?)`"), r"\1"),
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),
)

# hyphen, non-breaking hyphen, figure dash, en dash, em dash, bar, minus
_RE_DASHES = re.compile("[\u2010\u2011\u2012\u2013\u2014\u2015\u2212]")

# Quotes survive NFKD unchanged, so map them explicitly
_QUOTES = {
    "\u2018": "'",
    "\u2019": "'",
    "\u201a": "'",
    "\u2032": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u201e": '"',
    "\u2033": '"',
}

_RE_NON_ASCII = re.compile(rf"[^\x00-\x7F{CANONICAL_BULLET}]")


def _normalize_bullets(text: str) -> str:
    text = _RE_LEADING_BULLET.sub(lambda m: f"{m.group(1)}{CANONICAL_BULLET} ", text)
    return _RE_ROUND_BULLET.sub(CANONICAL_BULLET, text)


def _strip_markup(text: str) -> str:
    for pattern, repl in _MARKUP_PATTERNS:
        text = pattern.sub(repl, text)
    return text


def _to_ascii(text: str) -> str:
    for src, dst in _QUOTES.items():
        text = text.replace(src, dst)
    # NFKD splits accents off their letters and expands ligatures and ellipses
    text = unicodedata.normalize("NFKD", text)
    return _RE_NON_ASCII.sub("", text)


def _normalize_once(text: str) -> str:
    text = _normalize_bullets(text)
    text = _strip_markup(text)
    text = _RE_DASHES.sub("-", text)
    return _to_ascii(text)


def normalize(text: str) -> str:
    """Return an ATS-safe rendition of ``text``.

    Bullets are normalized before markup is stripped so that a leading
    "* item" is read as a bullet rather than the start of an italic run.
    Passes repeat until nothing changes; every pass either shortens the
    text or moves characters toward their canonical form, so this ends.
    """
    if not text:
        return ""
    current = str(text).replace("\r\n", "\n").replace("\r", "\n")
    while True:
        nxt = _normalize_once(current)
        if nxt == current:
            return current
        current = nxt
