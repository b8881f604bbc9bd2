# File: resume_layout/api/endpoints/documents.py
from fastapi import APIRouter, HTTPException, UploadFile, File, Response
import logging

from resume_layout.core.config import settings
from resume_layout.core.errors import EmptyInput, ExtractionFailed, RenderFailure
from resume_layout.core.vocabulary import VOCABULARY_VERSION
from resume_layout.schemas.document import (
    BlockResponse,
    ClassifyRequest,
    ClassifyResponse,
    ExportRequest,
    ExtractResponse,
    PreviewRequest,
    PreviewResponse,
    SectionResponse,
    SpanResponse,
)
from resume_layout.services import pipeline
from resume_layout.services.document_sink import MemorySink
from resume_layout.services.screen_renderer import render_html
from resume_layout.utils.pdf_extractor import extract_text_from_pdf

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/classify", response_model=ClassifyResponse)
def classify_document(request: ClassifyRequest):
    """Classify every non-blank line of the content."""
    try:
        doc = pipeline.build_document(request.content, ats_safe=request.normalize)
        return ClassifyResponse(
            sections=[
                SectionResponse(kind=s.kind.value, raw_text=s.raw_text, ordinal=s.ordinal)
                for s in doc
            ],
            vocabulary_version=VOCABULARY_VERSION,
        )
    except Exception as e:
        logger.error(f"Error classifying document: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/preview", response_model=PreviewResponse)
def preview_document(request: PreviewRequest):
    """Render the content for on-screen preview: styled blocks plus an HTML fragment."""
    try:
        _, tree = pipeline.preview(request.content)
        blocks = [
            BlockResponse(
                ordinal=b.ordinal,
                kind=b.kind.value,
                role=b.role,
                spans=[
                    SpanResponse(text=s.text, emphasis=s.emphasis, highlight=s.highlight, link=s.link)
                    for s in b.spans
                ],
            )
            for b in tree
        ]
        return PreviewResponse(blocks=blocks, html=render_html(tree))
    except Exception as e:
        logger.error(f"Error rendering preview: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/export")
def export_document(request: ExportRequest):
    """Render the content as an ATS-safe PDF download.

    Empty content is not an error: the response is 204 with no body.
    """
    sink = MemorySink()
    try:
        rendered = pipeline.export_to_sink(
            request.content,
            sink,
            document_type=request.document_type,
            page_size=request.page_size,
            margin=request.margin,
            country=request.country,
        )
    except EmptyInput:
        logger.info("Export requested for empty content")
        return Response(status_code=204)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RenderFailure as e:
        logger.error(f"Error exporting document: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    delivery = sink.deliveries[-1]
    return Response(
        content=delivery.content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{delivery.filename}"',
            "X-Page-Count": str(rendered.page_count),
        },
    )


@router.post("/extract", response_model=ExtractResponse)
async def extract_document_text(file: UploadFile = File(...)):
    """Pull the text out of an uploaded PDF so it can be classified and rendered."""
    try:
        if file.filename and not file.filename.lower().endswith(".pdf"):
            raise HTTPException(status_code=400, detail="Only PDF files are supported")

        pdf_content = await file.read()
        if len(pdf_content) > settings.MAX_UPLOAD_MB * 1024 * 1024:
            raise HTTPException(
                status_code=413,
                detail=f"File is larger than {settings.MAX_UPLOAD_MB} MB",
            )

        text = extract_text_from_pdf(pdf_content)
        return ExtractResponse(filename=file.filename, content=text, characters=len(text))
    except HTTPException:
        raise
    except ExtractionFailed as e:
        logger.warning(f"Extraction failed for {file.filename}: {str(e)}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Error extracting text: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
