"""
Error taxonomy for the document pipeline.

EmptyInput is a signal, not a failure: callers treat it as "nothing to render".
Classification and inline formatting never raise; only the model builder and
the PDF export can fail.
"""

from typing import Optional


class DocumentError(Exception):
    """Base class for every error raised by the document pipeline."""


class EmptyInput(DocumentError):
    """The input contained no renderable lines."""

    def __init__(self, message: str = "Nothing to render: input has no content"):
        super().__init__(message)


class MalformedDocument(DocumentError):
    """A section violates the document invariants (empty text, bad ordinals)."""


class RenderFailure(DocumentError):
    """Paginated export failed. No partial output is produced."""

    def __init__(self, document_type: str, cause: Optional[BaseException] = None):
        self.document_type = document_type
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to render {document_type} PDF{detail}")


class ExtractionFailed(DocumentError):
    """Text could not be pulled out of an uploaded file."""
