# File: resume_layout/utils/pdf_extractor.py
import io
import logging

import pdfplumber

from resume_layout.core.errors import ExtractionFailed

logger = logging.getLogger(__name__)

PASTE_TEXT_HINT = "Could not read text from this file. Please paste the text content directly."


def extract_text_from_pdf(pdf_content: bytes) -> str:
    """Extract text content from a PDF file.

    There is no secondary extraction path: when pdfplumber cannot read the
    file, or the file has no text layer, the caller gets ExtractionFailed and
    has to ask the user for the text.
    """
    if not pdf_content:
        raise ExtractionFailed("Uploaded file is empty")

    try:
        with pdfplumber.open(io.BytesIO(pdf_content)) as pdf:
            pages = []
            for page in pdf.pages:
                text = page.extract_text()
                if text:
                    pages.append(text)
    except Exception as e:
        logger.error(f"Error extracting text from PDF: {str(e)}")
        raise ExtractionFailed(PASTE_TEXT_HINT) from e

    full_text = "\n\n".join(pages).strip()
    if not full_text:
        logger.warning("PDF has no extractable text layer")
        raise ExtractionFailed(PASTE_TEXT_HINT)

    logger.info(f"Successfully extracted {len(full_text)} characters from PDF using pdfplumber")
    return full_text
