"""
Pipeline facade: raw text in, Document / preview / PDF out.

    raw text -> normalize (export only) -> classify -> build -> render
"""

import logging
from typing import Optional, Sequence, Tuple, Union

from resume_layout.core.errors import EmptyInput
from resume_layout.services.document_model import Document, build
from resume_layout.services.document_sink import DocumentSink
from resume_layout.services.file_naming import suggest_filename
from resume_layout.services.line_classifier import classify_text
from resume_layout.services.pdf_renderer import PaginatedDocument, render_paginated
from resume_layout.services.screen_renderer import RenderTree, render_screen
from resume_layout.services.text_normalizer import normalize

logger = logging.getLogger(__name__)

PageSize = Union[str, Sequence[float], None]


def build_document(text: str, ats_safe: bool = False) -> Document:
    """Classify ``text`` into a Document, normalizing it first when ``ats_safe``."""
    if ats_safe:
        text = normalize(text)
    return build(classify_text(text or ""))


def preview(text: str) -> Tuple[Document, RenderTree]:
    doc = build_document(text, ats_safe=False)
    return doc, render_screen(doc)


def export(
    text: str,
    document_type: str = "resume",
    page_size: PageSize = None,
    margin: Optional[float] = None,
    country: Optional[str] = None,
) -> PaginatedDocument:
    doc = build_document(text, ats_safe=True)
    filename = suggest_filename(doc, document_type, country=country)
    return render_paginated(
        doc, page_size=page_size, margin=margin,
        document_type=document_type, filename=filename,
    )


def export_to_sink(
    text: str,
    sink: DocumentSink,
    document_type: str = "resume",
    page_size: PageSize = None,
    margin: Optional[float] = None,
    country: Optional[str] = None,
) -> PaginatedDocument:
    """Render ``text`` and hand the PDF to ``sink``.

    Raises:
        EmptyInput: nothing to render; the sink is not called.
        RenderFailure: rendering failed; the sink is not called.
    """
    doc = build_document(text, ats_safe=True)
    if doc.is_empty:
        raise EmptyInput()

    filename = suggest_filename(doc, document_type, country=country)
    rendered = render_paginated(
        doc, page_size=page_size, margin=margin,
        document_type=document_type, filename=filename,
    )
    location = sink.accept(rendered.content, rendered.filename)
    logger.info(f"Delivered {rendered.filename} ({rendered.page_count} page(s)) to {location}")
    return rendered
