"""
Document model builder.

Takes classified sections and produces an immutable, validated Document
whose ordinals run 0..n-1 in reading order.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from resume_layout.core.errors import MalformedDocument
from resume_layout.services.line_classifier import Section, SectionKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """Ordered, immutable sequence of sections. Never reordered after build."""
    sections: Tuple[Section, ...] = ()

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def __getitem__(self, index: int) -> Section:
        return self.sections[index]

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def first_of(self, kind: SectionKind):
        """Return the first section of ``kind``, or None."""
        for section in self.sections:
            if section.kind == kind:
                return section
        return None

    def text(self) -> str:
        return "\n".join(s.raw_text for s in self.sections)


def build(sections: Iterable[Section]) -> Document:
    """Validate ``sections`` and freeze them into a Document.

    Ordinals are reassigned sequentially so a caller may pass sections
    collected from several classify() calls.

    Raises:
        MalformedDocument: a section has empty or whitespace-only text, or a
            kind outside SectionKind.
    """
    built = []
    for index, section in enumerate(sections):
        if not isinstance(section.kind, SectionKind):
            raise MalformedDocument(f"Section {index} has unknown kind {section.kind!r}")
        if not section.raw_text or not section.raw_text.strip():
            raise MalformedDocument(f"Section {index} ({section.kind.value}) has empty text")
        if section.ordinal != index:
            section = dataclasses.replace(section, ordinal=index)
        built.append(section)

    return Document(sections=tuple(built))
